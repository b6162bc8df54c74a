"""Public API functions for structural-diff.

This module provides the user-facing functions: compare_documents,
compare_trees, is_equivalent and load_document.  Each call creates a fresh
DocumentComparator to guarantee zero global state between calls.
"""

from __future__ import annotations

from structural_diff.algorithm.config import CompareOptions
from structural_diff.comparator import (
    DEFAULT_LABEL_A,
    DEFAULT_LABEL_B,
    DocumentComparator,
)
from structural_diff.report import DiffReport
from structural_diff.tree.loader import DocumentLoader, DocumentSource
from structural_diff.tree.nodes import DocumentKind, DocumentNode

__all__ = ["compare_documents", "compare_trees", "is_equivalent", "load_document"]


def load_document(source: DocumentSource, kind: DocumentKind | str) -> DocumentNode:
    """Parse one document source (path or bytes) into a ``DocumentNode`` tree.

    Raises:
        ParseError: If the source cannot be read or parsed.
    """
    return DocumentLoader().load(source, kind)


def compare_documents(
    kind_a: DocumentKind | str,
    source_a: DocumentSource,
    label_a: str,
    kind_b: DocumentKind | str,
    source_b: DocumentSource,
    label_b: str,
    options: CompareOptions | None = None,
) -> DiffReport:
    """Compare two documents and return every difference found.

    Args:
        kind_a:   Format of the first document ("xml" or "json").
        source_a: File path or raw bytes of the first document.
        label_a:  Name used for the first document in findings (e.g. "Baseline").
        kind_b:   Format of the second document.
        source_b: File path or raw bytes of the second document.
        label_b:  Name used for the second document in findings (e.g. "Modified").
        options:  Ignore list and alignment fields.  Defaults to
                  ``CompareOptions()`` when None.

    Returns:
        A ``DiffReport``; empty when the documents are equivalent.

    Raises:
        ParseError: If either document cannot be loaded.  No partial report
            is produced.
        RootMismatchError: If the documents' root names differ.
    """
    comparator = DocumentComparator(options=options)
    return comparator.compare(kind_a, source_a, label_a, kind_b, source_b, label_b)


def compare_trees(
    tree_a: DocumentNode,
    tree_b: DocumentNode,
    label_a: str = DEFAULT_LABEL_A,
    label_b: str = DEFAULT_LABEL_B,
    options: CompareOptions | None = None,
) -> DiffReport:
    """Compare two already-parsed document trees.

    Raises:
        RootMismatchError: If the trees' root names differ.
    """
    return DocumentComparator(options=options).compare_trees(
        tree_a, tree_b, label_a, label_b
    )


def is_equivalent(
    kind_a: DocumentKind | str,
    source_a: DocumentSource,
    kind_b: DocumentKind | str,
    source_b: DocumentSource,
    options: CompareOptions | None = None,
) -> bool:
    """Return True if the two documents have no differences under ``options``."""
    report = compare_documents(
        kind_a, source_a, DEFAULT_LABEL_A, kind_b, source_b, DEFAULT_LABEL_B, options
    )
    return not report.has_differences()
