"""
MRD (market requirements document) module for plangraph.

Required-section validation and tag-scoped views over market segments,
buyer personas, competitors, market requirements, milestones, success
metrics and risks.
"""

from plangraph.mrd.models import MarketDocument
from plangraph.mrd.io import load_market_document, save_market_document
from plangraph.mrd.filter import filter_by_tags, filter_by_tags_all, iter_tagged
from plangraph.mrd.validation import validate

__all__ = [
    "MarketDocument",
    "load_market_document",
    "save_market_document",
    "filter_by_tags",
    "filter_by_tags_all",
    "iter_tagged",
    "validate",
]
