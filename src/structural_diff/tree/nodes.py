"""DocumentNode dataclass and DocumentKind StrEnum.

Provides the in-memory tree both document kinds are converted into before
comparison.  XML elements and JSON members share one node shape so that every
later stage (linearization, grouping, alignment, diffing) is kind-agnostic.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import StrEnum, auto
from pathlib import Path


class DocumentKind(StrEnum):
    """The two supported document formats.

    StrEnum values are the lowercased member names:
    - XML  -> "xml"
    - JSON -> "json"
    """

    XML = auto()
    JSON = auto()

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> DocumentKind:
        """Infer the document kind from a file suffix (case-insensitive).

        Raises:
            ValueError: If the suffix is neither ``.xml`` nor ``.json``.
        """
        suffix = Path(path).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            msg = f"Cannot infer document kind from suffix of {os.fspath(path)!r}"
            raise ValueError(msg) from None


@dataclass(slots=True)
class DocumentNode:
    """A node of a parsed document.

    Attributes:
        name:       Element tag (XML) or member key (JSON).  The JSON root is
                    unnamed and carries the empty string.
        kind:       Which document format produced this node.
        value:      Trimmed text content for nodes without element children;
                    ``None`` when there is no text or it is whitespace only.
        attributes: Attribute name -> value.  Always empty for JSON nodes.
        children:   Child nodes in document order.
    """

    name: str
    kind: DocumentKind = DocumentKind.XML
    value: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[DocumentNode] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children and a non-empty value."""
        return not self.children and self.value is not None
