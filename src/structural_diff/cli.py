"""Command-line shell around compare_documents.

Loads two files, compares them, and prints the findings.  Exit status:
0 when the documents are equivalent, 1 when differences were found, 2 when a
document could not be compared at all (parse error, root mismatch, bad usage).
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from structural_diff.algorithm.config import CompareOptions, IgnoreMatchMode
from structural_diff.api import compare_documents
from structural_diff.comparator import DEFAULT_LABEL_A, DEFAULT_LABEL_B
from structural_diff.errors import StructuralDiffError
from structural_diff.render import render_json, render_text
from structural_diff.tree.nodes import DocumentKind

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_EQUIVALENT = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="structural-diff",
        description="Compare two XML or JSON documents, ignoring sibling order.",
    )
    ap.add_argument("file_a", type=Path, help="first (baseline) document")
    ap.add_argument("file_b", type=Path, help="second (modified) document")
    kinds = [kind.value for kind in DocumentKind]
    ap.add_argument("--kind-a", choices=kinds, help="format of FILE_A")
    ap.add_argument("--kind-b", choices=kinds, help="format of FILE_B")
    ap.add_argument("--label-a", default=DEFAULT_LABEL_A)
    ap.add_argument("--label-b", default=DEFAULT_LABEL_B)
    ap.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATH",
        help="skip subtrees whose path contains PATH (repeatable)",
    )
    ap.add_argument(
        "--exact-ignore",
        action="store_true",
        help="match --ignore paths exactly instead of as substrings",
    )
    ap.add_argument("--primary-sort-field", default=None, metavar="FIELD")
    ap.add_argument("--secondary-sort-field", default=None, metavar="FIELD")
    ap.add_argument(
        "--options",
        type=Path,
        metavar="FILE",
        help="JSON file with CompareOptions fields; command-line flags extend it",
    )
    ap.add_argument("--format", choices=["text", "json"], default="text")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return ap


def _options_from_args(args: argparse.Namespace) -> CompareOptions:
    options = CompareOptions()
    if args.options is not None:
        try:
            mapping = json.loads(args.options.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ValueError(f"Cannot read options file {args.options}: {exc}") from exc
        if not isinstance(mapping, dict):
            raise ValueError(f"Options file {args.options} must hold a JSON object")
        options = CompareOptions.from_mapping(mapping)

    changes: dict[str, object] = {}
    if args.ignore:
        changes["ignored_paths"] = options.ignored_paths | frozenset(args.ignore)
    if args.exact_ignore:
        changes["ignore_match_mode"] = IgnoreMatchMode.EXACT
    if args.primary_sort_field is not None:
        changes["primary_sort_field"] = args.primary_sort_field
    if args.secondary_sort_field is not None:
        changes["secondary_sort_field"] = args.secondary_sort_field
    return dataclasses.replace(options, **changes)  # type: ignore[arg-type]


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = _options_from_args(args)
        kind_a = args.kind_a or DocumentKind.from_path(args.file_a)
        kind_b = args.kind_b or DocumentKind.from_path(args.file_b)
        report = compare_documents(
            kind_a,
            args.file_a,
            args.label_a,
            kind_b,
            args.file_b,
            args.label_b,
            options,
        )
    except (StructuralDiffError, ValueError) as exc:
        logger.debug("Comparison aborted", exc_info=True)
        print(f"structural-diff: error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.format == "json":
        print(render_json(report))
    else:
        print(render_text(report))
    return EXIT_DIFFERENCES if report.has_differences() else EXIT_EQUIVALENT


if __name__ == "__main__":
    raise SystemExit(main())
