"""
OKR goal-framework checks.

Common OKR practice is three to five objectives, each with one to five
measurable key results scored from 0.0 to 1.0. check_okrs() holds a
document's objectives to those limits. The limits come from an
OKRCheckOptions profile: "default" flags structural problems only,
"strict" also expects scores, targets and timeframes.
"""

from dataclasses import dataclass
from typing import Optional

from plangraph.lib.constants import SEVERITY_WARNING
from plangraph.lib.types import Finding
from plangraph.prd.models import KeyResult, Objective, Objectives

CONFIDENCE_LEVELS = ("Low", "Medium", "High")


@dataclass(frozen=True)
class OKRCheckOptions:
    """Limits applied by check_okrs. A limit of 0 means no limit."""
    require_key_results: bool = True
    require_scores: bool = False
    min_key_results: int = 1
    max_key_results: int = 5
    max_objectives: int = 5
    require_targets: bool = False
    check_score_range: bool = True
    require_timeframe: bool = False


DEFAULT_OKR_OPTIONS = OKRCheckOptions()
STRICT_OKR_OPTIONS = OKRCheckOptions(
    require_scores=True,
    min_key_results=2,
    require_targets=True,
    require_timeframe=True,
)

# Profile names accepted by the validation.okr_checks setting
OKR_PROFILES: dict[str, Optional[OKRCheckOptions]] = {
    "none": None,
    "default": DEFAULT_OKR_OPTIONS,
    "strict": STRICT_OKR_OPTIONS,
}


def _warning(field: str, message: str) -> Finding:
    return Finding(field=field, message=message, severity=SEVERITY_WARNING)


def check_okrs(objectives: Objectives, options: Optional[OKRCheckOptions] = None) -> list[Finding]:
    """Check OKR counts, titles, scores and confidence levels.

    Args:
        objectives: The document's objectives section (not modified)
        options: Limits to apply, DEFAULT_OKR_OPTIONS if None

    Returns:
        Findings in document order
    """
    if options is None:
        options = DEFAULT_OKR_OPTIONS

    findings: list[Finding] = []
    okrs = objectives.okrs

    if not okrs:
        findings.append(Finding(field="objectives.okrs", message="At least one objective is required"))

    if options.max_objectives and len(okrs) > options.max_objectives:
        findings.append(_warning(
            "objectives.okrs",
            f"Too many objectives: {len(okrs)} (max: {options.max_objectives})",
        ))

    for i, okr in enumerate(okrs):
        path = f"objectives.okrs[{i}]"
        findings.extend(_check_objective(okr.objective, f"{path}.objective", options))
        findings.extend(_check_key_result_count(len(okr.key_results), f"{path}.key_results", options))
        for j, kr in enumerate(okr.key_results):
            findings.extend(_check_key_result(kr, f"{path}.key_results[{j}]", options))

    return findings


def _check_objective(objective: Objective, path: str, options: OKRCheckOptions) -> list[Finding]:
    findings = []
    if not objective.title.strip():
        findings.append(Finding(field=f"{path}.title", message="Objective title is required"))

    # Completed or cancelled objectives no longer need a timeframe
    if options.require_timeframe and not objective.timeframe.strip():
        if objective.status.lower() in ("", "active"):
            findings.append(_warning(
                f"{path}.timeframe",
                "Timeframe is required for active objectives (e.g., Q2 2026, H1 2026)",
            ))
    return findings


def _check_key_result_count(count: int, path: str, options: OKRCheckOptions) -> list[Finding]:
    findings = []
    if options.require_key_results and count == 0:
        findings.append(Finding(field=path, message="At least one key result is required"))
    if options.min_key_results and count < options.min_key_results:
        findings.append(_warning(path, f"Too few key results: {count} (min: {options.min_key_results})"))
    if options.max_key_results and count > options.max_key_results:
        findings.append(_warning(path, f"Too many key results: {count} (max: {options.max_key_results})"))
    return findings


def _check_key_result(kr: KeyResult, path: str, options: OKRCheckOptions) -> list[Finding]:
    findings = []
    if not kr.title.strip():
        findings.append(Finding(field=f"{path}.title", message="Key result title is required"))

    # A score of exactly 0.0 is indistinguishable from "not scored yet"
    if options.require_scores and kr.score == 0:
        findings.append(_warning(f"{path}.score", "Score is required"))

    if options.check_score_range and not 0.0 <= kr.score <= 1.0:
        findings.append(Finding(
            field=f"{path}.score",
            message=f"Score must be between 0.0 and 1.0, got {kr.score:.2f}",
        ))

    if options.require_targets and not kr.target.strip():
        findings.append(_warning(f"{path}.target", "Target is required for measurable key results"))

    if kr.confidence and kr.confidence not in CONFIDENCE_LEVELS:
        findings.append(Finding(
            field=f"{path}.confidence",
            message=f"Invalid confidence value: {kr.confidence} (expected: Low, Medium, High)",
        ))

    return findings
