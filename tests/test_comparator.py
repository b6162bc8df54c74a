"""Tests for DocumentComparator, the orchestrator behind the public API.

Covers:
- Core comparison of XML and JSON sources
- Root mismatch raised before any finding is produced
- ParseError on either side aborts the run
- Labels flow into every finding
- Statelessness (two identical calls give identical reports)
- computation_time_ms is always a non-negative float
- Deeply nested JSON compares without hitting the recursion limit
"""

from __future__ import annotations

import pytest

from structural_diff.algorithm.config import CompareOptions
from structural_diff.comparator import DocumentComparator
from structural_diff.errors import ParseError, RootMismatchError
from structural_diff.report import Mismatch, MissingElement
from structural_diff.tree.builder import TreeBuilder
from structural_diff.tree.nodes import DocumentNode

# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------


class TestCoreComparison:
    def test_identical_xml(self, catalog_xml: bytes) -> None:
        cmp = DocumentComparator()
        report = cmp.compare("xml", catalog_xml, "A", "xml", catalog_xml, "B")
        assert not report.has_differences()

    def test_identical_json(self, catalog_json: bytes) -> None:
        cmp = DocumentComparator()
        report = cmp.compare("json", catalog_json, "A", "json", catalog_json, "B")
        assert not report.has_differences()

    def test_labels_used_in_findings(self) -> None:
        cmp = DocumentComparator()
        report = cmp.compare(
            "xml", b"<r><a>1</a></r>", "old", "xml", b"<r><a>2</a></r>", "new"
        )
        assert report.label_a == "old"
        assert report.label_b == "new"
        assert report.findings() == (Mismatch("r/a", "old", "1", "new", "2"),)

    def test_json_number_spelling(self) -> None:
        cmp = DocumentComparator()
        report = cmp.compare("json", b'{"a": 10}', "A", "json", b'{"a": "10"}', "B")
        assert not report.has_differences()

    def test_json_array_versus_single_member(self) -> None:
        cmp = DocumentComparator()
        report = cmp.compare(
            "json", b'{"a": [1, 2]}', "A", "json", b'{"a": 1}', "B"
        )
        assert report.findings() == (MissingElement("B", "a[index=1]"),)

    def test_options_property(self) -> None:
        options = CompareOptions(primary_sort_field="id")
        assert DocumentComparator(options).options is options

    def test_default_options(self) -> None:
        assert DocumentComparator().options == CompareOptions()


# ---------------------------------------------------------------------------
# Failure modes
# ---------------------------------------------------------------------------


class TestFailures:
    def test_root_mismatch(self) -> None:
        cmp = DocumentComparator()
        with pytest.raises(RootMismatchError) as exc_info:
            cmp.compare("xml", b"<catalog/>", "A", "xml", b"<library/>", "B")
        assert exc_info.value.root_a == "catalog"
        assert exc_info.value.root_b == "library"

    def test_xml_versus_json_roots_differ(
        self, catalog_xml: bytes, catalog_json: bytes
    ) -> None:
        cmp = DocumentComparator()
        with pytest.raises(RootMismatchError):
            cmp.compare("xml", catalog_xml, "A", "json", catalog_json, "B")

    def test_parse_error_on_second_document(self, catalog_xml: bytes) -> None:
        cmp = DocumentComparator()
        with pytest.raises(ParseError):
            cmp.compare("xml", catalog_xml, "A", "xml", b"<catalog>", "B")

    def test_ignored_root_is_not_a_mismatch(self) -> None:
        cmp = DocumentComparator(CompareOptions(ignored_paths={"catalog"}))
        report = cmp.compare(
            "xml", b"<catalog><a>1</a></catalog>", "A", "xml", b"<catalog/>", "B"
        )
        assert not report.has_differences()


# ---------------------------------------------------------------------------
# Trees and statelessness
# ---------------------------------------------------------------------------


class TestTrees:
    def test_compare_trees_default_labels(self) -> None:
        tree_a = TreeBuilder().build_json({"a": "1"})
        tree_b = TreeBuilder().build_json({"a": "2"})
        report = DocumentComparator().compare_trees(tree_a, tree_b)
        assert report.label_a == "Baseline"
        assert report.label_b == "Modified"
        assert len(report.mismatches()) == 1

    def test_trees_are_not_mutated(self) -> None:
        tree = DocumentNode(name="r", children=[DocumentNode(name="a", value="1")])
        DocumentComparator().compare_trees(tree, tree)
        assert tree == DocumentNode(name="r", children=[DocumentNode(name="a", value="1")])

    def test_repeated_calls_identical(self, catalog_xml: bytes, catalog_factory) -> None:
        cmp = DocumentComparator(CompareOptions(primary_sort_field="id"))
        other = catalog_factory([("2", "Gadget", "25"), ("1", "Widget", "10")])
        first = cmp.compare("xml", catalog_xml, "A", "xml", other, "B")
        second = cmp.compare("xml", catalog_xml, "A", "xml", other, "B")
        assert first.findings() == second.findings()

    def test_computation_time_is_set(self, catalog_xml: bytes) -> None:
        report = DocumentComparator().compare(
            "xml", catalog_xml, "A", "xml", catalog_xml, "B"
        )
        assert isinstance(report.computation_time_ms, float)
        assert report.computation_time_ms >= 0.0


# ---------------------------------------------------------------------------
# Deep documents
# ---------------------------------------------------------------------------


def _nested_json(depth: int, leaf: str) -> bytes:
    return b'{"k": ' * depth + f'"{leaf}"'.encode() + b"}" * depth


class TestDeepDocuments:
    def test_deep_json_compared_with_itself(self) -> None:
        document = _nested_json(600, "x")
        report = DocumentComparator().compare("json", document, "A", "json", document, "B")
        assert not report.has_differences()

    def test_deep_json_leaf_change(self) -> None:
        report = DocumentComparator().compare(
            "json", _nested_json(600, "x"), "A", "json", _nested_json(600, "y"), "B"
        )
        path = "/".join(["k"] * 600)
        assert report.findings() == (Mismatch(path, "A", "x", "B", "y"),)
