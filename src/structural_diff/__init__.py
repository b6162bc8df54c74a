"""Structural diff - order-insensitive comparison of XML and JSON documents."""

from __future__ import annotations

from structural_diff.algorithm.config import CompareOptions, IgnoreMatchMode
from structural_diff.api import (
    compare_documents,
    compare_trees,
    is_equivalent,
    load_document,
)
from structural_diff.comparator import DocumentComparator
from structural_diff.errors import ParseError, RootMismatchError, StructuralDiffError
from structural_diff.report import (
    AttributeMismatch,
    DiffReport,
    FindingKind,
    Mismatch,
    MissingAttribute,
    MissingElement,
)
from structural_diff.tree.nodes import DocumentKind, DocumentNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "AttributeMismatch",
    "CompareOptions",
    "DiffReport",
    "DocumentComparator",
    "DocumentKind",
    "DocumentNode",
    "FindingKind",
    "IgnoreMatchMode",
    "Mismatch",
    "MissingAttribute",
    "MissingElement",
    "ParseError",
    "RootMismatchError",
    "StructuralDiffError",
    "compare_documents",
    "compare_trees",
    "is_equivalent",
    "load_document",
]
