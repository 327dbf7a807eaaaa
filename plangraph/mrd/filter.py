"""
Tag-scoped views of MRD documents.

Every tagged MRD collection is flat, so each one keeps exactly the
entities whose own tags match. Untagged fields of the owning section
(overview, verticals, differentiators, launch strategy, ...) and the
untagged sections (assumptions, glossary, custom sections) are kept as-is.
"""

import logging
from typing import Iterator, Sequence

from plangraph.mrd.models import MarketDocument
from plangraph.prd.filter import TagMatcher, filter_items
from plangraph.prd.tags import matches_all, matches_any

logger = logging.getLogger(__name__)


def filter_by_tags(doc: MarketDocument, *tags: str) -> MarketDocument:
    """Return a view of doc with entities matching any of tags."""
    return _filter_document(doc, tags, matches_any)


def filter_by_tags_all(doc: MarketDocument, *tags: str) -> MarketDocument:
    """Return a view of doc with entities matching all of tags."""
    return _filter_document(doc, tags, matches_all)


def _filter_document(doc: MarketDocument, tags: Sequence[str], match: TagMatcher) -> MarketDocument:
    source = doc.model_copy(deep=True)
    if not tags:
        return source

    target = source.target_market
    landscape = source.competitive_landscape
    update = {
        "target_market": target.model_copy(update={
            "primary_segments": filter_items(target.primary_segments, tags, match),
            "secondary_segments": filter_items(target.secondary_segments, tags, match),
            "buyer_personas": filter_items(target.buyer_personas, tags, match),
        }),
        "competitive_landscape": landscape.model_copy(update={
            "competitors": filter_items(landscape.competitors, tags, match),
        }),
        "market_requirements": filter_items(source.market_requirements, tags, match),
        "success_metrics": filter_items(source.success_metrics, tags, match),
        "risks": filter_items(source.risks, tags, match),
    }
    if source.go_to_market is not None:
        update["go_to_market"] = source.go_to_market.model_copy(update={
            "milestones": filter_items(source.go_to_market.milestones, tags, match),
        })

    filtered = source.model_copy(update=update)
    logger.debug(
        f"Filtered MRD by {list(tags)} ({match.__name__}): "
        f"{len(filtered.competitive_landscape.competitors)}/"
        f"{len(doc.competitive_landscape.competitors)} competitors, "
        f"{len(filtered.market_requirements)}/{len(doc.market_requirements)} requirements"
    )
    return filtered


def iter_tagged(doc: MarketDocument, include_metadata: bool = True) -> Iterator[tuple[str, list[str]]]:
    """Yield (path, tags) for every tag-bearing entity, in document order.

    Pass include_metadata=False to skip the document-level metadata.tags.
    """
    if include_metadata:
        yield "metadata.tags", doc.metadata.tags

    target = doc.target_market
    for i, segment in enumerate(target.primary_segments):
        yield f"target_market.primary_segments[{i}].tags", segment.tags
    for i, segment in enumerate(target.secondary_segments):
        yield f"target_market.secondary_segments[{i}].tags", segment.tags
    for i, persona in enumerate(target.buyer_personas):
        yield f"target_market.buyer_personas[{i}].tags", persona.tags

    for i, competitor in enumerate(doc.competitive_landscape.competitors):
        yield f"competitive_landscape.competitors[{i}].tags", competitor.tags

    for i, req in enumerate(doc.market_requirements):
        yield f"market_requirements[{i}].tags", req.tags

    if doc.go_to_market is not None:
        for i, milestone in enumerate(doc.go_to_market.milestones):
            yield f"go_to_market.milestones[{i}].tags", milestone.tags

    for i, metric in enumerate(doc.success_metrics):
        yield f"success_metrics[{i}].tags", metric.tags

    for i, risk in enumerate(doc.risks):
        yield f"risks[{i}].tags", risk.tags
