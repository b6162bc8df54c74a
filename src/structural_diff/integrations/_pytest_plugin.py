"""pytest plugin for structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from structural_diff.algorithm.config import CompareOptions
from structural_diff.comparator import DocumentComparator
from structural_diff.errors import RootMismatchError
from structural_diff.render import format_finding
from structural_diff.tree.builder import TreeBuilder
from structural_diff.tree.loader import DocumentLoader
from structural_diff.tree.nodes import DocumentKind, DocumentNode


def _as_tree(document: Any, kind: DocumentKind | str) -> DocumentNode:
    """Accept a DocumentNode, a decoded JSON object, a path, or raw bytes."""
    if isinstance(document, DocumentNode):
        return document
    if isinstance(document, dict):
        return TreeBuilder().build_json(document)
    if isinstance(document, (str, os.PathLike, bytes, bytearray, memoryview)):
        return DocumentLoader().load(document, kind)
    msg = (
        f"Cannot compare a {type(document).__name__}: pass a path, raw bytes, "
        "a decoded JSON object (dict) or a DocumentNode"
    )
    raise TypeError(msg)


@pytest.fixture(scope="session")
def assert_documents_equivalent() -> Any:
    """Fixture that returns a callable document equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (a fresh DocumentComparator is built per call).

    Usage in tests::

        def test_export(assert_documents_equivalent, tmp_path):
            assert_documents_equivalent(tmp_path / "out.xml", golden_xml, kind="xml")

        def test_payload(assert_documents_equivalent):
            assert_documents_equivalent({"a": "1"}, {"a": "1"})

    Returns:
        A callable ``_assert(actual, expected, kind="json", options=None) -> None``
        that raises ``AssertionError`` listing every finding when the documents
        differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        kind: DocumentKind | str = DocumentKind.JSON,
        options: CompareOptions | None = None,
    ) -> None:
        """Assert that two documents have no structural differences.

        Args:
            actual:   Document produced by the code under test: a path, raw
                      bytes, a ``DocumentNode``, or a decoded JSON object.
            expected: The reference document, in any of the same forms.
            kind:     Format used when a path or bytes must be parsed.
            options:  Optional CompareOptions (ignore list, sort fields).

        Raises:
            AssertionError: When the documents differ; the message lists every
                finding labelled "actual" / "expected".
            TypeError: When a document is none of the accepted forms, e.g. a
                decoded JSON array.
        """
        comparator = DocumentComparator(options=options)
        try:
            report = comparator.compare_trees(
                _as_tree(actual, kind), _as_tree(expected, kind), "actual", "expected"
            )
        except RootMismatchError as exc:
            raise AssertionError(f"Documents not comparable: {exc}") from exc
        if report.has_differences():
            details = "\n".join(f"  {format_finding(f)}" for f in report.findings())
            raise AssertionError(
                f"Documents not equivalent: {len(report)} difference(s)\n{details}"
            )

    return _assert
