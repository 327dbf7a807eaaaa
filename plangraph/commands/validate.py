"""
plangraph validate - Check a PRD or MRD before it is shared.
"""

import json
import logging
import sys
from pathlib import Path

from plangraph.lib.config import PlangraphConfig
from plangraph.lib.constants import EXIT_ERROR, EXIT_INVALID, EXIT_OK
from plangraph.lib.documents import DocumentError
from plangraph import mrd, prd
from plangraph.prd.okrs import OKR_PROFILES
from plangraph.prd.validation import ValidationResult

logger = logging.getLogger(__name__)


def print_result(path: Path, result: ValidationResult) -> None:
    """Print findings as human-readable text."""
    status = "VALID" if result.valid else "INVALID"
    print(f"{path}: {status}")

    if result.errors:
        print()
        print(f"Errors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  ✗ {error.field}: {error.message}")

    if result.warnings:
        print()
        print(f"Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  ! {warning.field}: {warning.message}")


def _validate_prd(path: Path, args, config: PlangraphConfig) -> ValidationResult:
    doc = prd.load_document(path)
    content_checks = config.content_checks and not args.no_content_checks
    profile = args.okr_checks or config.okr_checks
    okr_options = OKR_PROFILES[profile] if content_checks else None
    return prd.validate(
        doc,
        content_checks=content_checks,
        min_title_length=config.min_title_length,
        okr_options=okr_options,
    )


def cmd_validate(args, config: PlangraphConfig) -> int:
    """Validate a PRD or MRD file.

    Exit code is 1 if the document has errors (or warnings, in strict
    mode), 2 if the file cannot be loaded, 0 otherwise.
    """
    path = Path(args.file)
    try:
        if args.kind == "mrd":
            result = mrd.validate(mrd.load_market_document(path))
        else:
            result = _validate_prd(path, args, config)
    except DocumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(result.to_dict(), indent=config.indent))
    else:
        print_result(path, result)

    if not result.valid:
        return EXIT_INVALID

    strict = args.strict or config.strict
    if strict and result.warnings:
        logger.info(f"Strict mode: {len(result.warnings)} warnings treated as failures")
        return EXIT_INVALID

    return EXIT_OK
