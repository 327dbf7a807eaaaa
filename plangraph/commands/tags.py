"""
plangraph tags - List the tags used in a document.
"""

import sys
from pathlib import Path

from plangraph.lib.config import PlangraphConfig
from plangraph.lib.constants import EXIT_ERROR, EXIT_OK
from plangraph.lib.documents import DocumentError
from plangraph import mrd, prd


def cmd_tags(args, config: PlangraphConfig) -> int:
    """Print every tag in use with the number of entities carrying it."""
    path = Path(args.file)
    try:
        if args.kind == "mrd":
            counts = prd.count_tags(mrd.iter_tagged(mrd.load_market_document(path), include_metadata=False))
        else:
            counts = prd.collect_tags(prd.load_document(path))
    except DocumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not counts:
        print("No tags found.")
        return EXIT_OK

    width = max(len(tag) for tag in counts)
    for tag, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        print(f"  {tag:<{width}}  {count}")

    return EXIT_OK
