"""
Cross-reference checks for PRD documents.

Display references (persona, phase, user story and problem links) only
degrade grouping when they dangle, so they are warnings. The selected
solution drives the "exactly one option is selected" invariant, so an
unresolved selection is an error.
"""

import logging
from collections.abc import Collection

from plangraph.lib.constants import SEVERITY_ERROR, SEVERITY_WARNING
from plangraph.lib.types import Finding
from plangraph.prd.models import Document

logger = logging.getLogger(__name__)


def _warning(field: str, message: str) -> Finding:
    return Finding(field=field, message=message, severity=SEVERITY_WARNING)


def check_references(doc: Document, defined_ids: Collection[str]) -> list[Finding]:
    """Check every reference field in doc against defined_ids.

    Args:
        doc: Document to check (not modified)
        defined_ids: IDs declared anywhere in the document

    Returns:
        Findings in document order; empty if every reference resolves
    """
    findings: list[Finding] = []

    for i, story in enumerate(doc.user_stories):
        if story.persona_id and story.persona_id not in defined_ids:
            findings.append(_warning(
                f"user_stories[{i}].persona_id",
                f"Reference to undefined persona: {story.persona_id}",
            ))
        if story.phase_id and story.phase_id not in defined_ids:
            findings.append(_warning(
                f"user_stories[{i}].phase_id",
                f"Reference to undefined phase: {story.phase_id}",
            ))

    for i, req in enumerate(doc.requirements.functional):
        for story_id in req.user_story_ids:
            if story_id and story_id not in defined_ids:
                findings.append(_warning(
                    f"requirements.functional[{i}].user_story_ids",
                    f"Reference to undefined user story: {story_id}",
                ))
        if req.phase_id and req.phase_id not in defined_ids:
            findings.append(_warning(
                f"requirements.functional[{i}].phase_id",
                f"Reference to undefined phase: {req.phase_id}",
            ))

    if doc.solution is not None:
        for i, option in enumerate(doc.solution.solution_options):
            for problem_id in option.problems_addressed:
                if problem_id and problem_id not in defined_ids:
                    findings.append(_warning(
                        f"solution.solution_options[{i}].problems_addressed",
                        f"Reference to undefined problem: {problem_id}",
                    ))

        # The selection must name one of the options, not just any declared ID
        selected = doc.solution.selected_solution_id
        if selected and doc.solution.selected_solution() is None:
            findings.append(Finding(
                field="solution.selected_solution_id",
                message=f"Selected solution '{selected}' not found in solution options",
                severity=SEVERITY_ERROR,
            ))

    logger.debug(f"Reference check found {len(findings)} issues")
    return findings
