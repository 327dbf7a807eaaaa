"""
Tag matching and tag traversal for PRD documents.

Tags are exact, case-sensitive labels. There is no normalization, no
wildcards and no hierarchy: "Security" and "security" are different tags.
"""

from collections import Counter
from typing import Iterable, Iterator, Sequence

from plangraph.lib.constants import TAG_PATTERN
from plangraph.lib.types import Finding
from plangraph.prd.models import Document


def matches_any(entity_tags: Sequence[str], filter_tags: Sequence[str]) -> bool:
    """True if entity_tags and filter_tags share at least one tag (OR)."""
    wanted = set(filter_tags)
    return any(tag in wanted for tag in entity_tags)


def matches_all(entity_tags: Sequence[str], filter_tags: Sequence[str]) -> bool:
    """True if every filter tag is present in entity_tags (AND).

    The entity may carry additional tags. Untagged entities never match a
    non-empty filter; an empty filter is the caller's "no filtering" case.
    """
    if not entity_tags:
        return False
    present = set(entity_tags)
    return all(tag in present for tag in filter_tags)


def validate_tag(tag: str) -> None:
    """Check a tag is kebab-case.

    Raises:
        ValueError: If the tag is empty or not lowercase alphanumeric with
            single hyphens between segments
    """
    if not tag:
        raise ValueError("tag cannot be empty")
    if not TAG_PATTERN.match(tag):
        raise ValueError(
            f"invalid tag {tag!r}: must be lowercase alphanumeric with hyphens "
            f"(e.g., 'my-tag', 'phase-1')"
        )


def validate_tags(tags: Sequence[str]) -> list[str]:
    """Return one error message per malformed tag."""
    errors = []
    for tag in tags:
        try:
            validate_tag(tag)
        except ValueError as e:
            errors.append(str(e))
    return errors


def check_tag_format(tagged: Iterable[tuple[str, list[str]]]) -> list[Finding]:
    """One error per malformed tag, reported at the path of its tags field."""
    findings = []
    for path, tags in tagged:
        for message in validate_tags(tags):
            findings.append(Finding(field=path, message=message))
    return findings


def iter_tagged(doc: Document, include_metadata: bool = True) -> Iterator[tuple[str, list[str]]]:
    """Yield (path, tags) for every tag-bearing entity, in document order.

    Paths point at the tags field, e.g. "roadmap.phases[0].deliverables[1].tags".
    Entities with no tags are still yielded. metadata.tags labels the
    document rather than an entity; pass include_metadata=False to skip it.
    """
    if include_metadata:
        yield "metadata.tags", doc.metadata.tags

    for i, persona in enumerate(doc.personas):
        yield f"personas[{i}].tags", persona.tags

    for i, story in enumerate(doc.user_stories):
        yield f"user_stories[{i}].tags", story.tags

    for i, req in enumerate(doc.requirements.functional):
        yield f"requirements.functional[{i}].tags", req.tags

    for i, nfr in enumerate(doc.requirements.non_functional):
        yield f"requirements.non_functional[{i}].tags", nfr.tags

    for i, phase in enumerate(doc.roadmap.phases):
        yield f"roadmap.phases[{i}].tags", phase.tags
        for j, deliverable in enumerate(phase.deliverables):
            yield f"roadmap.phases[{i}].deliverables[{j}].tags", deliverable.tags

    for i, okr in enumerate(doc.objectives.okrs):
        yield f"objectives.okrs[{i}].objective.tags", okr.objective.tags
        for j, kr in enumerate(okr.key_results):
            yield f"objectives.okrs[{i}].key_results[{j}].tags", kr.tags

    for i, risk in enumerate(doc.risks):
        yield f"risks[{i}].tags", risk.tags


def count_tags(tagged: Iterable[tuple[str, list[str]]]) -> Counter:
    """Count how many entities carry each tag."""
    counts: Counter = Counter()
    for _, tags in tagged:
        counts.update(tags)
    return counts


def collect_tags(doc: Document) -> Counter:
    return count_tags(iter_tagged(doc, include_metadata=False))
