"""
Tag-scoped views of PRD documents.

filter_by_tags() keeps entities carrying at least one of the tags (OR);
filter_by_tags_all() keeps entities carrying every tag (AND). Both walk the
same collections and differ only in the matcher:

- Flat collections (personas, user stories, requirements, risks) keep the
  entities whose own tags match.
- Roadmap phases and OKRs are filtered two levels deep. A parent whose own
  tags match is kept with all of its children. Otherwise the parent is kept
  with only its matching children, or dropped if none match. Phase targets
  travel with their key result and are never filtered on their own.
- Untagged sections (assumptions, glossary, custom sections, architecture,
  UX, problem, market, solution, decisions, ...) pass through unchanged.

Neither function modifies its input: every call returns a new Document.
Calling with no tags returns an unfiltered copy.
"""

import logging
from typing import Callable, Sequence, TypeVar

from plangraph.prd.models import OKR, Document, Phase, Taggable
from plangraph.prd.tags import matches_all, matches_any

logger = logging.getLogger(__name__)

TagMatcher = Callable[[Sequence[str], Sequence[str]], bool]
TaggableT = TypeVar("TaggableT", bound=Taggable)


def filter_by_tags(doc: Document, *tags: str) -> Document:
    """Return a view of doc with entities matching any of tags."""
    return _filter_document(doc, tags, matches_any)


def filter_by_tags_all(doc: Document, *tags: str) -> Document:
    """Return a view of doc with entities matching all of tags."""
    return _filter_document(doc, tags, matches_all)


def filter_items(
    items: Sequence[TaggableT],
    tags: Sequence[str],
    match: TagMatcher,
) -> list[TaggableT]:
    """Keep the items whose own tags satisfy match."""
    return [item for item in items if match(item.tags, tags)]


def _filter_phases(phases: Sequence[Phase], tags: Sequence[str], match: TagMatcher) -> list[Phase]:
    result = []
    for phase in phases:
        if match(phase.tags, tags):
            result.append(phase)
            continue
        deliverables = filter_items(phase.deliverables, tags, match)
        if deliverables:
            result.append(phase.model_copy(update={"deliverables": deliverables}))
    return result


def _filter_okrs(okrs: Sequence[OKR], tags: Sequence[str], match: TagMatcher) -> list[OKR]:
    result = []
    for okr in okrs:
        if match(okr.objective.tags, tags):
            result.append(okr)
            continue
        key_results = filter_items(okr.key_results, tags, match)
        if key_results:
            result.append(okr.model_copy(update={"key_results": key_results}))
    return result


def _filter_document(doc: Document, tags: Sequence[str], match: TagMatcher) -> Document:
    source = doc.model_copy(deep=True)
    if not tags:
        return source

    filtered = source.model_copy(update={
        "personas": filter_items(source.personas, tags, match),
        "user_stories": filter_items(source.user_stories, tags, match),
        "requirements": source.requirements.model_copy(update={
            "functional": filter_items(source.requirements.functional, tags, match),
            "non_functional": filter_items(source.requirements.non_functional, tags, match),
        }),
        "roadmap": source.roadmap.model_copy(update={
            "phases": _filter_phases(source.roadmap.phases, tags, match),
        }),
        "objectives": source.objectives.model_copy(update={
            "okrs": _filter_okrs(source.objectives.okrs, tags, match),
        }),
        "risks": filter_items(source.risks, tags, match),
    })

    logger.debug(
        f"Filtered by {list(tags)} ({match.__name__}): "
        f"{len(filtered.personas)}/{len(doc.personas)} personas, "
        f"{len(filtered.user_stories)}/{len(doc.user_stories)} stories, "
        f"{len(filtered.roadmap.phases)}/{len(doc.roadmap.phases)} phases, "
        f"{len(filtered.objectives.okrs)}/{len(doc.objectives.okrs)} OKRs"
    )
    return filtered
