"""
Data models for product requirements documents.

A Document is a typed entity graph: sections hold entities, entities carry
IDs in one flat namespace, and some entities point at others by ID
(persona_id, phase_id, user_story_ids, ...). JSON keys are snake_case and
match the path segments used in validation findings.

Unknown keys are kept on every model so a load/filter/save cycle never
drops author content.
"""

from typing import Any, Optional, Protocol, get_origin

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Taggable(Protocol):
    """Any entity that can be narrowed by a tag filter."""
    tags: list[str]


class PlanModel(BaseModel):
    """Base for all document models.

    Documents written by other tools may carry `null` where a list or a
    nested section is expected (an empty slice serialized without
    omitempty). Those nulls decode to the field's default.
    """
    model_config = ConfigDict(extra="allow")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        annotation = field.annotation
        if get_origin(annotation) is list or (
            isinstance(annotation, type) and issubclass(annotation, BaseModel)
        ):
            return field.get_default(call_default_factory=True)
        return value


# ─────────────────────────────────────────────────────────────────────────────
# Metadata and summary
# ─────────────────────────────────────────────────────────────────────────────

class Person(PlanModel):
    name: str = ""
    email: str = ""
    role: str = ""


class Metadata(PlanModel):
    id: str = ""
    title: str = ""
    version: str = ""
    status: str = ""                           # draft, in_review, approved, deprecated
    created_at: str = ""                       # ISO timestamp
    updated_at: str = ""
    authors: list[Person] = []
    reviewers: list[Person] = []
    tags: list[str] = []


class ExecutiveSummary(PlanModel):
    problem_statement: str = ""
    proposed_solution: str = ""
    expected_outcomes: list[str] = []
    target_audience: str = ""
    value_proposition: str = ""


# ─────────────────────────────────────────────────────────────────────────────
# Objectives (OKRs)
# ─────────────────────────────────────────────────────────────────────────────

class PhaseTarget(PlanModel):
    """Key Result target for one roadmap phase. Travels with its KeyResult."""
    phase_id: str = ""
    target: str = ""
    status: str = ""
    actual: str = ""
    notes: str = ""


class KeyResult(PlanModel):
    id: str = ""
    title: str = ""
    description: str = ""
    owner: str = ""
    metric: str = ""
    baseline: str = ""
    target: str = ""
    current: str = ""
    unit: str = ""
    measurement_method: str = ""
    score: float = 0.0                         # 0.0-1.0 achievement
    confidence: str = ""                       # Low, Medium, High
    status: str = ""
    due_date: str = ""
    phase_targets: list[PhaseTarget] = []
    tags: list[str] = []


class Objective(PlanModel):
    id: str = ""
    title: str = ""
    description: str = ""
    rationale: str = ""
    category: str = ""
    owner: str = ""
    timeframe: str = ""
    status: str = ""
    parent_id: str = ""
    aligned_with: list[str] = []
    tags: list[str] = []


class OKR(PlanModel):
    """An Objective with its Key Results in nested form."""
    objective: Objective = Objective()
    key_results: list[KeyResult] = []


class Objectives(PlanModel):
    okrs: list[OKR] = []


# ─────────────────────────────────────────────────────────────────────────────
# Personas, stories, requirements
# ─────────────────────────────────────────────────────────────────────────────

class Persona(PlanModel):
    id: str = ""
    name: str = ""
    role: str = ""
    description: str = ""
    goals: list[str] = []
    pain_points: list[str] = []
    behaviors: list[str] = []
    technical_proficiency: str = ""            # low, medium, high, expert
    motivations: list[str] = []
    frustrations: list[str] = []
    quote: str = ""
    is_primary: bool = False
    library_ref: str = ""
    tags: list[str] = []


class AcceptanceCriterion(PlanModel):
    id: str = ""
    description: str = ""
    given: str = ""
    when: str = ""
    then: str = ""


class UserStory(PlanModel):
    id: str = ""
    persona_id: str = ""                       # -> Persona.id
    title: str = ""
    story: str = ""                            # "As a ..., I want ... so that ..."
    acceptance_criteria: list[AcceptanceCriterion] = []
    priority: str = ""
    phase_id: str = ""                         # -> Phase.id
    story_points: Optional[int] = None
    dependencies: list[str] = []
    epic: str = ""
    labels: list[str] = []
    notes: str = ""
    tags: list[str] = []


class FunctionalRequirement(PlanModel):
    id: str = ""
    title: str = ""
    description: str = ""
    category: str = ""
    priority: str = ""                         # MoSCoW: must, should, could, wont
    user_story_ids: list[str] = []             # -> UserStory.id
    acceptance_criteria: list[AcceptanceCriterion] = []
    phase_id: str = ""                         # -> Phase.id
    dependencies: list[str] = []
    assumptions: list[str] = []
    notes: str = ""
    appendix_refs: list[str] = []
    tags: list[str] = []


class NonFunctionalRequirement(PlanModel):
    id: str = ""
    category: str = ""                         # performance, security, ...
    title: str = ""
    description: str = ""
    metric: str = ""
    target: str = ""
    measurement_method: str = ""
    priority: str = ""
    phase_id: str = ""
    current_baseline: str = ""
    notes: str = ""
    appendix_refs: list[str] = []
    tags: list[str] = []


class Requirements(PlanModel):
    functional: list[FunctionalRequirement] = []
    non_functional: list[NonFunctionalRequirement] = []


# ─────────────────────────────────────────────────────────────────────────────
# Roadmap and risks
# ─────────────────────────────────────────────────────────────────────────────

class Risk(PlanModel):
    id: str = ""
    description: str = ""
    probability: str = ""                      # low, medium, high
    impact: str = ""                           # low, medium, high, critical
    mitigation: str = ""
    owner: str = ""
    status: str = ""
    category: str = ""
    due_date: str = ""
    notes: str = ""
    appendix_refs: list[str] = []
    tags: list[str] = []


class Deliverable(PlanModel):
    id: str = ""
    title: str = ""
    description: str = ""
    type: str = ""                             # feature, documentation, ...
    status: str = ""
    tags: list[str] = []


class Phase(PlanModel):
    id: str = ""
    name: str = ""
    type: str = ""                             # generic, quarter, month, sprint, milestone
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    goals: list[str] = []
    deliverables: list[Deliverable] = []
    success_criteria: list[str] = []
    dependencies: list[str] = []
    risks: list[Risk] = []
    status: str = ""
    progress: Optional[int] = None             # 0-100
    notes: str = ""
    tags: list[str] = []


class Roadmap(PlanModel):
    phases: list[Phase] = []


# ─────────────────────────────────────────────────────────────────────────────
# Untagged context sections
# ─────────────────────────────────────────────────────────────────────────────

class Assumption(PlanModel):
    id: str = ""
    description: str = ""
    rationale: str = ""
    risk: str = ""
    validated: bool = False


class Constraint(PlanModel):
    id: str = ""
    type: str = ""                             # technical, budget, timeline, ...
    description: str = ""
    impact: str = ""
    mitigation: str = ""


class AssumptionsConstraints(PlanModel):
    assumptions: list[Assumption] = []
    constraints: list[Constraint] = []
    dependencies: list[dict[str, Any]] = []


class GlossaryTerm(PlanModel):
    term: str = ""
    definition: str = ""
    acronym: str = ""
    context: str = ""
    related: list[str] = []


class CustomSection(PlanModel):
    """Project-specific section. `content` is opaque and never traversed."""
    id: str = ""
    title: str = ""
    description: str = ""
    content: Any = None


# ─────────────────────────────────────────────────────────────────────────────
# Problem, market, solution, decisions
# ─────────────────────────────────────────────────────────────────────────────

class ProblemDefinition(PlanModel):
    id: str = ""
    statement: str = ""
    user_impact: str = ""
    evidence: list[dict[str, Any]] = []
    confidence: float = 0.0
    root_causes: list[str] = []
    affected_segments: list[str] = []
    secondary_problems: list["ProblemDefinition"] = []


class Alternative(PlanModel):
    id: str = ""
    name: str = ""
    type: str = ""                             # competitor, workaround, do_nothing, internal_tool
    description: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []
    why_not_chosen: str = ""


class MarketDefinition(PlanModel):
    alternatives: list[Alternative] = []
    differentiation: list[str] = []
    market_risks: list[str] = []


class SolutionOption(PlanModel):
    id: str = ""
    name: str = ""
    description: str = ""
    problems_addressed: list[str] = []         # -> ProblemDefinition.id
    benefits: list[str] = []
    tradeoffs: list[str] = []
    risks: list[str] = []
    estimated_effort: str = ""


class SolutionDefinition(PlanModel):
    solution_options: list[SolutionOption] = []
    selected_solution_id: str = ""             # -> SolutionOption.id
    solution_rationale: str = ""
    confidence: float = 0.0

    def selected_solution(self) -> Optional[SolutionOption]:
        """Return the selected option, or None if unset or unresolved."""
        if not self.selected_solution_id:
            return None
        for option in self.solution_options:
            if option.id == self.selected_solution_id:
                return option
        return None


class DecisionRecord(PlanModel):
    id: str = ""
    title: str = ""
    decision: str = ""
    rationale: str = ""
    status: str = ""                           # proposed, accepted, superseded, deprecated
    date: str = ""
    decided_by: str = ""


class DecisionsDefinition(PlanModel):
    records: list[DecisionRecord] = []


# ─────────────────────────────────────────────────────────────────────────────
# Document
# ─────────────────────────────────────────────────────────────────────────────

class Document(PlanModel):
    """A complete product requirements document."""
    metadata: Metadata = Metadata()
    executive_summary: ExecutiveSummary = ExecutiveSummary()
    objectives: Objectives = Objectives()
    personas: list[Persona] = []
    user_stories: list[UserStory] = []
    requirements: Requirements = Requirements()
    roadmap: Roadmap = Roadmap()

    # Optional sections
    assumptions: Optional[AssumptionsConstraints] = None
    out_of_scope: list[str] = []
    technical_architecture: Optional[dict[str, Any]] = None
    ux_requirements: Optional[dict[str, Any]] = None
    risks: list[Risk] = []
    glossary: list[GlossaryTerm] = []
    custom_sections: list[CustomSection] = []

    # Extended sections
    problem: Optional[ProblemDefinition] = None
    market: Optional[MarketDefinition] = None
    solution: Optional[SolutionDefinition] = None
    decisions: Optional[DecisionsDefinition] = None

    # Carried through as plain JSON
    open_items: list[dict[str, Any]] = []
    reviews: Optional[dict[str, Any]] = None
    revision_history: list[dict[str, Any]] = []
    goals: Optional[dict[str, Any]] = None
    current_state: Optional[dict[str, Any]] = None
    security_model: Optional[dict[str, Any]] = None
    appendices: list[dict[str, Any]] = []
