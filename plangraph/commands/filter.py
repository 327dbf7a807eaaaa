"""
plangraph filter - Write a tag-scoped view of a PRD or MRD.
"""

import logging
import sys
from pathlib import Path

from plangraph.lib.config import PlangraphConfig
from plangraph.lib.constants import EXIT_ERROR, EXIT_OK
from plangraph.lib.documents import DocumentError, model_to_json, save_model
from plangraph import mrd, prd

logger = logging.getLogger(__name__)


def cmd_filter(args, config: PlangraphConfig) -> int:
    """Filter a document by tags.

    OR mode by default; AND mode with --all. A view that matches nothing
    is still a valid document and exits 0.
    """
    path = Path(args.file)
    tags = args.include or []

    try:
        if args.kind == "mrd":
            doc = mrd.load_market_document(path)
            view = mrd.filter_by_tags_all(doc, *tags) if args.all else mrd.filter_by_tags(doc, *tags)
        else:
            doc = prd.load_document(path)
            view = prd.filter_by_tags_all(doc, *tags) if args.all else prd.filter_by_tags(doc, *tags)
    except DocumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    mode = "all" if args.all else "any"
    if not tags:
        logger.info("No tags given, writing the document unfiltered")
    else:
        logger.info(f"Filtered {path} by {mode} of: {', '.join(tags)}")

    if args.output:
        out_path = Path(args.output)
        save_model(view, out_path, indent=config.indent)
        print(f"Wrote filtered document to {out_path}", file=sys.stderr)
    else:
        sys.stdout.write(model_to_json(view, indent=config.indent))

    return EXIT_OK
