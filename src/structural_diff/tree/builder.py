"""TreeBuilder: converts parsed XML elements and JSON values into DocumentNode trees.

Both document kinds end up in the same node shape.  The walks run on explicit
stacks, so nesting depth is not bounded by the interpreter's recursion limit.
Repetition is preserved rather than collapsed:

- XML sibling elements sharing a tag stay separate children.
- A JSON member whose value is an array becomes one child per array element,
  all named by the member key.
- Duplicate JSON keys (kept by ``JsonMembers``) become repeated children too.

Text is trimmed at build time; empty-after-trim text is stored as ``None``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from lxml import etree

from structural_diff.tree.nodes import DocumentKind, DocumentNode

__all__ = ["JsonMembers", "TreeBuilder"]

_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class JsonMembers(list[tuple[str, Any]]):
    """Members of one JSON object in document order, duplicate keys included.

    Used as ``object_pairs_hook`` by the loader so that ``{"a": 1, "a": 2}``
    keeps both members instead of silently keeping the last one.
    """


def _trimmed(text: str | None) -> str | None:
    if text is None:
        return None
    text = text.strip()
    return text or None


def _qualified_name(element: Any, tag: str) -> str:
    """Return ``prefix:local`` for namespaced names, the bare local name otherwise."""
    qname = etree.QName(tag)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == _XML_NAMESPACE:
        prefix: str | None = "xml"
    else:
        prefix = next(
            (p for p, uri in element.nsmap.items() if uri == qname.namespace and p),
            None,
        )
    return f"{prefix}:{qname.localname}" if prefix else qname.localname


@dataclass
class TreeBuilder:
    """Converts parsed documents into ``DocumentNode`` trees.

    Example::
        builder = TreeBuilder()
        tree = builder.build_json({"item": [{"id": "1"}, {"id": "2"}]})
        # tree: "" -> [item -> [id="1"], item -> [id="2"]]
    """

    # ------------------------------------------------------------------
    # XML
    # ------------------------------------------------------------------

    def build_xml(self, element: Any) -> DocumentNode:
        """Convert an lxml element (usually the document root) into a tree.

        Comments, processing instructions and entity references are skipped;
        only element children become child nodes.
        """
        root = self._xml_node(element)
        # Stack entries: (lxml element, node built for it)
        stack: list[tuple[Any, DocumentNode]] = [(element, root)]
        while stack:
            current, node = stack.pop()
            for child in current:
                if isinstance(child.tag, str):
                    child_node = self._xml_node(child)
                    node.children.append(child_node)
                    stack.append((child, child_node))
            if not node.children:
                node.value = _trimmed("".join(current.itertext()))
        return root

    @staticmethod
    def _xml_node(element: Any) -> DocumentNode:
        return DocumentNode(
            name=_qualified_name(element, element.tag),
            kind=DocumentKind.XML,
            attributes={
                _qualified_name(element, key): value
                for key, value in element.attrib.items()
            },
        )

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def build_json(self, value: Any, name: str = "") -> DocumentNode:
        """Convert a JSON value into a tree rooted at a node called ``name``.

        Args:
            value: A JSON object (``dict`` or ``JsonMembers``) or scalar.
            name:  Node name.  Defaults to "" (the unnamed JSON root).

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        root = DocumentNode(name=name, kind=DocumentKind.JSON)
        # Stack entries: (node, JSON value it is built from)
        stack: list[tuple[DocumentNode, Any]] = [(root, value)]
        while stack:
            node, current = stack.pop()
            if isinstance(current, (dict, JsonMembers)):
                members = current.items() if isinstance(current, dict) else current
            elif isinstance(current, list):
                # Only reachable for arrays nested directly inside arrays.
                members = [(node.name, item) for item in current]
            else:
                node.value = self._scalar_text(current)
                continue

            for key, member in members:
                for item in self._member_values(member):
                    child = DocumentNode(name=key, kind=DocumentKind.JSON)
                    node.children.append(child)
                    stack.append((child, item))
        return root

    @staticmethod
    def _member_values(value: Any) -> list[Any]:
        """An array-valued member stands for one child per array element."""
        if isinstance(value, list) and not isinstance(value, JsonMembers):
            return value
        return [value]

    @staticmethod
    def _scalar_text(value: Any) -> str | None:
        # bool MUST be checked before int: bool subclasses int in Python
        if isinstance(value, bool) or value is None:
            return json.dumps(value)
        if isinstance(value, str):
            return _trimmed(value)
        if isinstance(value, (int, float)):
            return json.dumps(value)
        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
