"""Shared fixtures for plangraph tests."""

import pytest

from plangraph.prd.models import (
    OKR,
    CustomSection,
    Deliverable,
    Document,
    ExecutiveSummary,
    FunctionalRequirement,
    GlossaryTerm,
    KeyResult,
    Metadata,
    NonFunctionalRequirement,
    Objective,
    Objectives,
    Person,
    Persona,
    Phase,
    PhaseTarget,
    ProblemDefinition,
    Requirements,
    Risk,
    Roadmap,
    SolutionDefinition,
    SolutionOption,
    UserStory,
)


@pytest.fixture
def sample_document():
    """A small, fully consistent PRD."""
    return Document(
        metadata=Metadata(
            id="PRD-001",
            title="Data Platform",
            version="1.0.0",
            status="draft",
            authors=[Person(name="Alex Doe", email="alex@example.com")],
            tags=["platform"],
        ),
        executive_summary=ExecutiveSummary(
            problem_statement="Data is scattered",
            proposed_solution="One catalog",
        ),
        objectives=Objectives(okrs=[
            OKR(
                objective=Objective(id="O-1", title="Trusted data", tags=["data-management"]),
                key_results=[
                    KeyResult(id="KR-1", title="Catalog coverage", tags=["data-management"],
                              phase_targets=[PhaseTarget(phase_id="ph1", target="50%")]),
                    KeyResult(id="KR-2", title="Access reviews", tags=["security"]),
                ],
            ),
            OKR(
                objective=Objective(id="O-2", title="Fast onboarding"),
                key_results=[
                    KeyResult(id="KR-3", title="Time to first query", tags=["ux"]),
                    KeyResult(id="KR-4", title="Audit trail", tags=["security", "privacy"]),
                ],
            ),
        ]),
        personas=[
            Persona(id="p1", name="Data Engineer", tags=["data-management"]),
            Persona(id="p2", name="Security Officer", tags=["security"]),
            Persona(id="p3", name="Privacy Lead", tags=["data-management", "privacy"]),
        ],
        user_stories=[
            UserStory(id="US-1", persona_id="p1", phase_id="ph1", title="Register dataset",
                      tags=["data-management"]),
            UserStory(id="US-2", persona_id="p2", phase_id="ph2", title="Review access",
                      tags=["security"]),
        ],
        requirements=Requirements(
            functional=[
                FunctionalRequirement(id="FR-1", title="Dataset registry", user_story_ids=["US-1"],
                                      phase_id="ph1", tags=["data-management"]),
                FunctionalRequirement(id="FR-2", title="Access log", user_story_ids=["US-2"],
                                      phase_id="ph2", tags=["security", "privacy"]),
            ],
            non_functional=[
                NonFunctionalRequirement(id="NFR-1", title="P95 latency", tags=["performance"]),
            ],
        ),
        roadmap=Roadmap(phases=[
            Phase(id="ph1", name="MVP", deliverables=[
                Deliverable(id="d1", title="Registry", tags=["data-management"]),
                Deliverable(id="d2", title="Audit log", tags=["security"]),
            ]),
            Phase(id="ph2", name="GA", tags=["security"], deliverables=[
                Deliverable(id="d3", title="SSO", tags=["security"]),
                Deliverable(id="d4", title="Docs", tags=["docs"]),
            ]),
        ]),
        risks=[
            Risk(id="R-1", description="Low adoption", tags=["adoption"]),
            Risk(id="R-2", description="Data leak", tags=["security", "privacy"]),
        ],
        glossary=[GlossaryTerm(term="PRD", definition="Product requirements document")],
        custom_sections=[CustomSection(id="CS-1", title="Notes", content={"any": ["shape", 1]})],
        problem=ProblemDefinition(id="PROB-1", statement="Data is scattered"),
        solution=SolutionDefinition(
            solution_options=[
                SolutionOption(id="SOL-1", name="Central catalog", problems_addressed=["PROB-1"]),
                SolutionOption(id="SOL-2", name="Federated search", problems_addressed=["PROB-1"]),
            ],
            selected_solution_id="SOL-1",
        ),
    )
