"""
PRD (product requirements document) module for plangraph.

Models PRDs as typed entity graphs and provides the two operations on
them: validation (duplicate IDs, dangling references) and tag-scoped
filtering.
"""

from plangraph.prd.models import Document, Taggable
from plangraph.prd.io import load_document, save_document
from plangraph.prd.registry import IDRegistry, collect_ids
from plangraph.prd.traceability import check_references
from plangraph.prd.okrs import (
    OKRCheckOptions,
    DEFAULT_OKR_OPTIONS,
    STRICT_OKR_OPTIONS,
    OKR_PROFILES,
    check_okrs,
)
from plangraph.prd.validation import ValidationResult, validate
from plangraph.prd.tags import (
    matches_any,
    matches_all,
    validate_tag,
    validate_tags,
    check_tag_format,
    collect_tags,
    count_tags,
)
from plangraph.prd.filter import filter_by_tags, filter_by_tags_all

__all__ = [
    "Document",
    "Taggable",
    "load_document",
    "save_document",
    "IDRegistry",
    "collect_ids",
    "check_references",
    "OKRCheckOptions",
    "DEFAULT_OKR_OPTIONS",
    "STRICT_OKR_OPTIONS",
    "OKR_PROFILES",
    "check_okrs",
    "ValidationResult",
    "validate",
    "matches_any",
    "matches_all",
    "validate_tag",
    "validate_tags",
    "check_tag_format",
    "collect_tags",
    "count_tags",
    "filter_by_tags",
    "filter_by_tags_all",
]
