"""Tests for plangraph.prd.validation module."""

from plangraph.lib.types import Finding
from plangraph.prd.models import (
    OKR,
    Document,
    Metadata,
    Objective,
    Objectives,
    Persona,
    SolutionDefinition,
    SolutionOption,
    UserStory,
)
from plangraph.prd.okrs import DEFAULT_OKR_OPTIONS
from plangraph.prd.validation import ValidationResult, validate


class TestValidationResult:
    """Test ValidationResult bookkeeping."""

    def test_starts_valid(self):
        result = ValidationResult()
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_warning_keeps_valid(self):
        result = ValidationResult()
        result.add_warning("personas", "No personas defined")
        assert result.valid
        assert len(result.warnings) == 1

    def test_error_clears_valid(self):
        result = ValidationResult()
        result.add_error("metadata.id", "Document ID is required")
        assert not result.valid
        assert result.errors[0].field == "metadata.id"

    def test_extend_routes_by_severity(self):
        result = ValidationResult()
        result.extend([
            Finding(field="a", message="x"),
            Finding(field="b", message="y", severity="warning"),
        ])
        assert [e.field for e in result.errors] == ["a"]
        assert [w.field for w in result.warnings] == ["b"]

    def test_to_dict(self):
        result = ValidationResult()
        result.add_error("metadata.id", "Document ID is required")
        result.add_warning("personas", "No personas defined")
        assert result.to_dict() == {
            "valid": False,
            "errors": [{"field": "metadata.id", "message": "Document ID is required"}],
            "warnings": [{"field": "personas", "message": "No personas defined"}],
        }

    def test_to_dict_omits_empty_lists(self):
        assert ValidationResult().to_dict() == {"valid": True}


class TestValidate:
    """Test validate() without content checks."""

    def test_sample_is_clean(self, sample_document):
        result = validate(sample_document)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_empty_document_is_valid(self):
        result = validate(Document())
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_missing_persona_is_warning_only(self):
        doc = Document(
            personas=[Persona(id="p1")],
            user_stories=[UserStory(id="US-1", persona_id="p2")],
        )
        result = validate(doc)
        assert result.valid
        assert result.errors == []
        assert len(result.warnings) == 1
        assert result.warnings[0].field == "user_stories[0].persona_id"

    def test_duplicate_id_is_error(self):
        doc = Document(personas=[Persona(id="X-1")], user_stories=[UserStory(id="X-1")])
        result = validate(doc)
        assert not result.valid
        assert len(result.errors) == 1
        assert "personas[0].id" in result.errors[0].message
        assert "user_stories[0].id" in result.errors[0].message

    def test_unresolved_selected_solution(self):
        doc = Document(solution=SolutionDefinition(
            solution_options=[SolutionOption(id="SOL-1")],
            selected_solution_id="SOL-9",
        ))
        result = validate(doc)
        assert not result.valid
        assert [e.field for e in result.errors] == ["solution.selected_solution_id"]

    def test_duplicates_listed_before_references(self):
        doc = Document(
            personas=[Persona(id="A"), Persona(id="A")],
            user_stories=[UserStory(id="US-1", persona_id="ghost")],
            solution=SolutionDefinition(selected_solution_id="SOL-9"),
        )
        result = validate(doc)
        assert [e.field for e in result.errors] == ["personas[1].id", "solution.selected_solution_id"]
        assert [w.field for w in result.warnings] == ["user_stories[0].persona_id"]

    def test_malformed_tags_ignored_without_content_checks(self):
        doc = Document(personas=[Persona(id="p1", tags=["Not Kebab"])])
        assert validate(doc).valid

    def test_does_not_modify_document(self, sample_document):
        snapshot = sample_document.model_copy(deep=True)
        validate(sample_document, content_checks=True)
        assert sample_document == snapshot

    def test_registry_is_per_call(self):
        first = Document(personas=[Persona(id="p1")])
        second = Document(user_stories=[UserStory(id="US-1", persona_id="p1")])
        validate(first)
        result = validate(second)
        assert len(result.warnings) == 1


class TestContentChecks:
    """Test validate(content_checks=True)."""

    def test_sample_passes(self, sample_document):
        result = validate(sample_document, content_checks=True)
        assert result.valid
        assert result.warnings == []

    def test_empty_document(self):
        result = validate(Document(), content_checks=True)
        assert not result.valid
        assert [e.field for e in result.errors] == ["metadata.id", "metadata.title", "metadata.status"]
        warned = [w.field for w in result.warnings]
        assert "metadata.authors" in warned
        assert "objectives" in warned
        assert "personas" in warned
        assert "user_stories" in warned

    def test_short_title(self, sample_document):
        doc = sample_document.model_copy(update={
            "metadata": sample_document.metadata.model_copy(update={"title": "PRD"}),
        })
        result = validate(doc, content_checks=True)
        assert [e.message for e in result.errors] == ["Title must be at least 5 characters"]

    def test_min_title_length_configurable(self, sample_document):
        doc = sample_document.model_copy(update={
            "metadata": sample_document.metadata.model_copy(update={"title": "PRD"}),
        })
        assert validate(doc, content_checks=True, min_title_length=3).valid

    def test_okr_without_key_results(self):
        doc = Document(
            metadata=Metadata(id="PRD-1", title="Long enough", status="draft"),
            objectives=Objectives(okrs=[OKR(objective=Objective(id="O-1"))]),
        )
        result = validate(doc, content_checks=True)
        assert "objectives.okrs[0]" in [w.field for w in result.warnings]

    def test_bad_tag_format_is_error(self, sample_document):
        doc = sample_document.model_copy(update={
            "personas": [Persona(id="p1", tags=["Data_Management"])],
        })
        result = validate(doc, content_checks=True)
        assert not result.valid
        assert result.errors[-1].field == "personas[0].tags"
        assert "Data_Management" in result.errors[-1].message

    def test_okr_options_add_okr_findings(self, sample_document):
        doc = sample_document.model_copy(deep=True)
        doc.objectives.okrs[0].key_results[0].score = 1.5
        assert validate(doc).valid
        result = validate(doc, okr_options=DEFAULT_OKR_OPTIONS)
        assert [e.field for e in result.errors] == ["objectives.okrs[0].key_results[0].score"]

    def test_sample_meets_default_okr_limits(self, sample_document):
        result = validate(sample_document, content_checks=True, okr_options=DEFAULT_OKR_OPTIONS)
        assert result.valid
        assert result.warnings == []
