#!/usr/bin/env python3
"""plangraph CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from plangraph.lib.config import ConfigError, load_config
from plangraph.lib.constants import EXIT_ERROR
from plangraph.commands import filter as cmd_filter_module
from plangraph.commands import tags as cmd_tags_module
from plangraph.commands import validate as cmd_validate_module


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_validate(args, config):
    return cmd_validate_module.cmd_validate(args, config)


def cmd_filter(args, config):
    return cmd_filter_module.cmd_filter(args, config)


def cmd_tags(args, config):
    return cmd_tags_module.cmd_tags(args, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='plangraph', description='Validate and filter planning documents')
    parser.add_argument('--config', '-c', help='Path to plangraph.yaml (default: ./plangraph.yaml if present)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # plangraph validate
    p_validate = subparsers.add_parser('validate', help='Check IDs, cross-references and required content')
    p_validate.add_argument('file', help='PRD or MRD JSON file')
    p_validate.add_argument('--kind', choices=['prd', 'mrd'], default='prd', help='Document kind')
    p_validate.add_argument('--json', action='store_true', help='Print the result as JSON')
    p_validate.add_argument('--strict', action='store_true', help='Fail on warnings too')
    p_validate.add_argument('--no-content-checks', action='store_true',
                            help='Only check IDs and references (skip metadata, OKR and tag checks)')
    p_validate.add_argument('--okr-checks', choices=['none', 'default', 'strict'],
                            help='OKR limits to apply to a PRD (default: from config, else "default")')
    p_validate.set_defaults(func=cmd_validate)

    # plangraph filter
    p_filter = subparsers.add_parser('filter', help='Write a tag-scoped view of a document')
    p_filter.add_argument('file', help='PRD or MRD JSON file')
    p_filter.add_argument('--include', '-i', nargs='+', metavar='TAG', help='Tags to keep')
    p_filter.add_argument('--all', action='store_true', help='Require all tags (default: any)')
    p_filter.add_argument('--output', '-o', help='Output file (default: stdout)')
    p_filter.add_argument('--kind', choices=['prd', 'mrd'], default='prd', help='Document kind')
    p_filter.set_defaults(func=cmd_filter)

    # plangraph tags
    p_tags = subparsers.add_parser('tags', help='List tags in use')
    p_tags.add_argument('file', help='PRD or MRD JSON file')
    p_tags.add_argument('--kind', choices=['prd', 'mrd'], default='prd', help='Document kind')
    p_tags.set_defaults(func=cmd_tags)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    return args.func(args, config)


if __name__ == '__main__':
    sys.exit(main())
