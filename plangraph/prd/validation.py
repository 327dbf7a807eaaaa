"""
Validation for PRD documents.

validate() never stops at the first problem: it walks the whole document
and returns every error and warning in one ValidationResult, so a single
run can drive an editor's full problem list.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from plangraph.lib.constants import SEVERITY_ERROR, SEVERITY_WARNING
from plangraph.lib.types import Finding
from plangraph.prd.models import Document
from plangraph.prd.okrs import OKRCheckOptions, check_okrs
from plangraph.prd.registry import collect_ids
from plangraph.prd.tags import check_tag_format, iter_tagged
from plangraph.prd.traceability import check_references

logger = logging.getLogger(__name__)

DEFAULT_MIN_TITLE_LENGTH = 5


@dataclass
class ValidationResult:
    """Errors and warnings found in a document.

    `valid` is False as soon as any error is recorded; warnings never
    affect it.
    """
    valid: bool = True
    errors: list[Finding] = field(default_factory=list)
    warnings: list[Finding] = field(default_factory=list)

    def add_error(self, field_path: str, message: str) -> None:
        self.add(Finding(field=field_path, message=message, severity=SEVERITY_ERROR))

    def add_warning(self, field_path: str, message: str) -> None:
        self.add(Finding(field=field_path, message=message, severity=SEVERITY_WARNING))

    def add(self, finding: Finding) -> None:
        if finding.is_error:
            self.valid = False
            self.errors.append(finding)
        else:
            self.warnings.append(finding)

    def extend(self, findings: list[Finding]) -> None:
        for finding in findings:
            self.add(finding)

    def to_dict(self) -> dict:
        """JSON form. Empty error and warning lists are left out."""
        data: dict = {"valid": self.valid}
        if self.errors:
            data["errors"] = [e.to_dict() for e in self.errors]
        if self.warnings:
            data["warnings"] = [w.to_dict() for w in self.warnings]
        return data


def validate(
    doc: Document,
    content_checks: bool = False,
    min_title_length: int = DEFAULT_MIN_TITLE_LENGTH,
    okr_options: Optional[OKRCheckOptions] = None,
) -> ValidationResult:
    """Check doc for duplicate IDs and dangling references.

    Args:
        doc: Document to validate (not modified)
        content_checks: Also check metadata, summary, OKRs and tag format
        min_title_length: Shortest accepted metadata.title (content checks only)
        okr_options: Also hold the objectives to these OKR limits

    Returns:
        ValidationResult with every finding
    """
    result = ValidationResult()

    if content_checks:
        _check_content(doc, result, min_title_length)

    registry = collect_ids(doc)
    result.extend(registry.errors)
    result.extend(check_references(doc, registry.defined_ids()))

    if content_checks:
        result.extend(check_tag_format(iter_tagged(doc)))

    if okr_options is not None:
        result.extend(check_okrs(doc.objectives, okr_options))

    logger.debug(
        f"Validated '{doc.metadata.id or '(no id)'}': "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result


def _check_content(doc: Document, result: ValidationResult, min_title_length: int) -> None:
    """Required metadata and section presence."""
    meta = doc.metadata
    if not meta.id:
        result.add_error("metadata.id", "Document ID is required")

    if not meta.title:
        result.add_error("metadata.title", "Title is required")
    elif len(meta.title) < min_title_length:
        result.add_error("metadata.title", f"Title must be at least {min_title_length} characters")

    if not meta.authors:
        result.add_warning("metadata.authors", "No authors specified")

    if not meta.status:
        result.add_error("metadata.status", "Status is required")

    summary = doc.executive_summary
    if not summary.problem_statement:
        result.add_warning("executive_summary.problem_statement", "Problem statement is empty")
    if not summary.proposed_solution:
        result.add_warning("executive_summary.proposed_solution", "Proposed solution is empty")

    if not doc.objectives.okrs:
        result.add_warning("objectives", "No OKRs defined")
    for i, okr in enumerate(doc.objectives.okrs):
        if not okr.key_results:
            result.add_warning(f"objectives.okrs[{i}]", "OKR has no key results defined")

    if not doc.personas:
        result.add_warning("personas", "No personas defined")

    if not doc.user_stories:
        result.add_warning("user_stories", "No user stories defined")
