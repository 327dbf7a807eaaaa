"""
Validation for MRD documents.

An MRD is only useful to a PRD author once it names the market (TAM),
at least one segment, competitor and requirement, and a positioning
statement. Missing any of these is an error. Tag format is checked the
same way as for PRDs.
"""

import logging
from typing import Any, Optional

from plangraph.mrd.filter import iter_tagged
from plangraph.mrd.models import MarketDocument
from plangraph.prd.tags import check_tag_format
from plangraph.prd.validation import ValidationResult

logger = logging.getLogger(__name__)


def _lookup(section: Optional[dict[str, Any]], *keys: str) -> Any:
    """Walk nested plain-JSON keys, returning None where the path stops."""
    value: Any = section
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def validate(doc: MarketDocument) -> ValidationResult:
    """Check doc for the sections every MRD must fill in.

    Returns:
        ValidationResult with every finding
    """
    result = ValidationResult()

    meta = doc.metadata
    if not meta.id:
        result.add_error("metadata.id", "Document ID is required")
    if not meta.title:
        result.add_error("metadata.title", "Title is required")
    if not meta.version:
        result.add_error("metadata.version", "Version is required")
    if not meta.authors:
        result.add_error("metadata.authors", "At least one author is required")

    summary = doc.executive_summary
    if not summary.market_opportunity:
        result.add_error("executive_summary.market_opportunity", "Market opportunity is required")
    if not summary.proposed_offering:
        result.add_error("executive_summary.proposed_offering", "Proposed offering is required")

    if not _lookup(doc.market_overview, "tam", "value"):
        result.add_error("market_overview.tam.value", "Total addressable market is required")

    if not doc.target_market.primary_segments:
        result.add_error("target_market.primary_segments", "At least one primary segment is required")
    if not doc.competitive_landscape.competitors:
        result.add_error("competitive_landscape.competitors", "At least one competitor is required")
    if not doc.market_requirements:
        result.add_error("market_requirements", "At least one market requirement is required")

    if not _lookup(doc.positioning, "statement"):
        result.add_error("positioning.statement", "Positioning statement is required")

    result.extend(check_tag_format(iter_tagged(doc)))

    logger.debug(
        f"Validated MRD '{meta.id or '(no id)'}': "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result
