"""PathLinearizer: flattens a DocumentNode tree into path-keyed records.

The walk is depth-first, pre-order, children in document order, and runs on an
explicit stack so document depth is not bounded by the interpreter's recursion
limit.  Every visited node is appended to an arena (``Linearization.records``)
that remembers its parent's arena index; this is what lets the grouper rebuild
per-parent repetition without a path-to-single-value map ever overwriting an
earlier occurrence.

Ignored subtrees are pruned during the walk, so nothing below an ignored path
ever reaches the arena.  The one exception is ``NodeRecord.fields``: the
immediate-child sort keys are read before pruning, so ignoring a sort field
never changes how repeated elements are aligned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from structural_diff.algorithm.config import CompareOptions
from structural_diff.tree.nodes import DocumentNode

__all__ = [
    "AttributeRecord",
    "LeafRecord",
    "Linearization",
    "NodeRecord",
    "PathLinearizer",
    "join_path",
]


def join_path(parent: str, name: str) -> str:
    """Append ``name`` to ``parent`` with a "/" separator (no leading slash)."""
    return f"{parent}/{name}" if parent else name


@dataclass(frozen=True, slots=True)
class LeafRecord:
    """A (path, value) pair for a node with no element children and non-empty text."""

    path: str
    value: str


@dataclass(frozen=True, slots=True)
class AttributeRecord:
    """A (path, attribute name, attribute value) triple."""

    path: str
    name: str
    value: str


@dataclass(slots=True)
class NodeRecord:
    """One visited, non-ignored node stored in the linearization arena.

    Attributes:
        index:      Position of this record in ``Linearization.records``.
        parent:     Arena index of the parent record; ``None`` for the root.
        path:       Slash-joined path from the root.
        name:       Node name (last path segment).
        value:      Trimmed leaf text, ``None`` for non-leaves.
        attributes: Attribute name -> value.
        fields:     Immediate child name -> trimmed child text, taken from the
                    full tree before ignore pruning.  The first child of a
                    given name wins; children without text map to "".
    """

    index: int
    parent: int | None
    path: str
    name: str
    value: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Linearization:
    """Output of ``PathLinearizer.linearize``: the arena in visitation order."""

    records: list[NodeRecord] = field(default_factory=list)

    @property
    def root(self) -> NodeRecord | None:
        """The root record, or ``None`` when the root itself was ignored."""
        return self.records[0] if self.records else None

    def leaves(self) -> list[LeafRecord]:
        return [
            LeafRecord(record.path, record.value)
            for record in self.records
            if record.value is not None
        ]

    def attribute_records(self) -> list[AttributeRecord]:
        return [
            AttributeRecord(record.path, name, value)
            for record in self.records
            for name, value in record.attributes.items()
        ]


def _child_fields(node: DocumentNode) -> dict[str, str]:
    # Sort keys must not depend on the ignore list, so read the unpruned children.
    fields: dict[str, str] = {}
    for child in node.children:
        text = child.value if not child.children else None
        fields.setdefault(child.name, text or "")
    return fields


class PathLinearizer:
    """Walks a document tree and records every non-ignored node.

    Example::

        linearizer = PathLinearizer(CompareOptions(ignored_paths={"catalog/note"}))
        flat = linearizer.linearize(tree)
        flat.leaves()   # [LeafRecord("catalog/item/price", "10"), ...]
    """

    def __init__(self, options: CompareOptions | None = None) -> None:
        self._options = options if options is not None else CompareOptions()

    def linearize(self, root: DocumentNode) -> Linearization:
        result = Linearization()
        # Stack entries: (node, parent arena index, parent path)
        stack: list[tuple[DocumentNode, int | None, str]] = [(root, None, "")]

        while stack:
            node, parent, parent_path = stack.pop()
            path = join_path(parent_path, node.name)
            if self._options.is_ignored(path):
                continue

            record = NodeRecord(
                index=len(result.records),
                parent=parent,
                path=path,
                name=node.name,
                # Only true leaves carry a value; containers never do.
                value=node.value if not node.children else None,
                attributes=dict(node.attributes),
                fields=_child_fields(node),
            )
            result.records.append(record)

            # Reversed push keeps document order on pop.
            for child in reversed(node.children):
                stack.append((child, record.index, path))

        return result
