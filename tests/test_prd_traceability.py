"""Tests for plangraph.prd.traceability module."""

from plangraph.lib.constants import SEVERITY_ERROR, SEVERITY_WARNING
from plangraph.prd.models import (
    Document,
    FunctionalRequirement,
    Requirements,
    SolutionDefinition,
    SolutionOption,
    UserStory,
)
from plangraph.prd.registry import collect_ids
from plangraph.prd.traceability import check_references


def check(doc):
    return check_references(doc, collect_ids(doc).defined_ids())


class TestUserStoryReferences:
    """Persona and phase links on user stories."""

    def test_missing_persona_is_warning(self):
        doc = Document(user_stories=[UserStory(id="US-1", persona_id="missing")])
        findings = check(doc)
        assert len(findings) == 1
        assert findings[0].field == "user_stories[0].persona_id"
        assert findings[0].severity == SEVERITY_WARNING
        assert "missing" in findings[0].message

    def test_missing_phase_is_warning(self):
        doc = Document(user_stories=[UserStory(id="US-1", phase_id="ph9")])
        findings = check(doc)
        assert [f.field for f in findings] == ["user_stories[0].phase_id"]

    def test_empty_references_are_not_checked(self):
        doc = Document(user_stories=[UserStory(id="US-1")])
        assert check(doc) == []

    def test_reference_resolves_against_any_section(self):
        # A persona_id pointing at a non-persona ID still resolves: one namespace
        doc = Document(user_stories=[UserStory(id="US-1", persona_id="US-1")])
        assert check(doc) == []


class TestFunctionalRequirementReferences:
    """User story and phase links on functional requirements."""

    def test_one_warning_per_missing_story(self):
        doc = Document(
            user_stories=[UserStory(id="US-1")],
            requirements=Requirements(functional=[
                FunctionalRequirement(id="FR-1", user_story_ids=["US-1", "US-8", "US-9", ""]),
            ]),
        )
        findings = check(doc)
        assert [f.field for f in findings] == [
            "requirements.functional[0].user_story_ids",
            "requirements.functional[0].user_story_ids",
        ]
        assert "US-8" in findings[0].message
        assert "US-9" in findings[1].message

    def test_missing_phase(self):
        doc = Document(requirements=Requirements(functional=[
            FunctionalRequirement(id="FR-1", phase_id="ph1"),
        ]))
        findings = check(doc)
        assert findings[0].field == "requirements.functional[0].phase_id"
        assert findings[0].severity == SEVERITY_WARNING


class TestSolutionReferences:
    """Problem links and the selected solution."""

    def test_missing_problem_is_warning(self):
        doc = Document(solution=SolutionDefinition(solution_options=[
            SolutionOption(id="SOL-1", problems_addressed=["PROB-404"]),
        ]))
        findings = check(doc)
        assert [f.field for f in findings] == ["solution.solution_options[0].problems_addressed"]
        assert findings[0].severity == SEVERITY_WARNING

    def test_unresolved_selection_is_error(self):
        doc = Document(solution=SolutionDefinition(
            solution_options=[SolutionOption(id="SOL-1")],
            selected_solution_id="SOL-2",
        ))
        findings = check(doc)
        assert len(findings) == 1
        assert findings[0].field == "solution.selected_solution_id"
        assert findings[0].severity == SEVERITY_ERROR
        assert "SOL-2" in findings[0].message

    def test_selection_must_be_an_option(self):
        # SOL-X is declared, but as a user story, not a solution option
        doc = Document(
            user_stories=[UserStory(id="SOL-X")],
            solution=SolutionDefinition(selected_solution_id="SOL-X"),
        )
        assert [f.field for f in check(doc)] == ["solution.selected_solution_id"]

    def test_no_selection_is_fine(self):
        doc = Document(solution=SolutionDefinition(solution_options=[SolutionOption(id="SOL-1")]))
        assert check(doc) == []


class TestConsistentDocument:
    def test_sample_has_no_findings(self, sample_document):
        assert check(sample_document) == []

    def test_does_not_modify_document(self, sample_document):
        snapshot = sample_document.model_copy(deep=True)
        check_references(sample_document, set())
        assert sample_document == snapshot

    def test_empty_id_set_flags_every_reference(self, sample_document):
        findings = check_references(sample_document, set())
        # 2 stories x 2 refs, 2 FRs x (1 story + 1 phase), 2 options x 1 problem
        assert len(findings) == 10
        assert all(f.severity == SEVERITY_WARNING for f in findings)
