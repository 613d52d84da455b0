"""
MIT License

Command-line interface for pfname.
"""

from __future__ import annotations

import argparse
import sys

from .core.batch import BatchConfig, run_batch, summary_lines
from .core.errors import ValidationError
from .core.family_name import PackageFamilyName
from .core.publisher_id import PublisherId
from .io.tsv import FORMATS, write_lines, write_table
from .util.logging import get_logger, set_verbosity

LOGGER = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pfname", description="Compute MSIX Package Family Names offline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command", required=True)

    id_parser = subparsers.add_parser("id", help="Print the Publisher Id of a publisher string")
    id_parser.set_defaults(handler=run_id_command)
    id_parser.add_argument("publisher", help="Publisher string, e.g. 'CN=Contoso, O=Contoso'")

    family_parser = subparsers.add_parser("family", help="Print the Package Family Name of a package")
    family_parser.set_defaults(handler=run_family_command)
    family_parser.add_argument("name", help="Package identity name")
    family_parser.add_argument("publisher", help="Package identity publisher")

    parse_parser = subparsers.add_parser("parse", help="Validate a Package Family Name")
    parse_parser.set_defaults(handler=run_parse_command)
    parse_parser.add_argument("text", help="Package Family Name, e.g. AppName_zj75k085cmj1a")

    batch_parser = subparsers.add_parser("batch", help="Resolve every package of a manifest TSV")
    batch_parser.set_defaults(handler=run_batch_command)
    batch_parser.add_argument("--manifest", required=True, help="TSV with name, publisher and optional expected columns")
    batch_parser.add_argument("--out", required=True, help="Output table path")
    batch_parser.add_argument("--emit", choices=list(FORMATS), default="tsv")
    batch_parser.add_argument("--summary", help="Optional path for a status count summary")
    batch_parser.add_argument("--strict", action="store_true", help="Exit non-zero on mismatched or invalid rows")
    return parser


def dispatch(args: argparse.Namespace) -> None:
    set_verbosity(verbose=args.verbose, quiet=args.quiet)
    try:
        args.handler(args)
    except ValidationError as exc:
        sys.stderr.write(f"error: {exc}\n")
        raise SystemExit(2) from exc


def run_id_command(args: argparse.Namespace) -> None:
    sys.stdout.write(f"{PublisherId.derive(args.publisher)}\n")


def run_family_command(args: argparse.Namespace) -> None:
    sys.stdout.write(f"{PackageFamilyName.from_publisher(args.name, args.publisher)}\n")


def run_parse_command(args: argparse.Namespace) -> None:
    family_name = PackageFamilyName.parse(args.text)
    LOGGER.debug("Parsed %r", family_name)
    sys.stdout.write(f"name\t{family_name.name}\n")
    sys.stdout.write(f"publisher_id\t{family_name.publisher_id}\n")


def run_batch_command(args: argparse.Namespace) -> None:
    config = BatchConfig(
        manifest=args.manifest,
        out=args.out,
        emit=args.emit,
        strict=args.strict,
        summary=args.summary,
    )
    result = run_batch(config)
    write_table(result.table, config.out, fmt=config.emit)
    LOGGER.info("Table written to %s", config.out)
    if config.summary:
        write_lines(summary_lines(result), config.summary)
    if config.strict and result.failed:
        raise SystemExit(f"{result.failed} package(s) failed verification")


__all__ = ["build_parser", "dispatch"]
