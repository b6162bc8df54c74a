"""Tree subpackage for document-to-tree conversion primitives.

Re-exports the public API for the tree module:
- DocumentNode: dataclass representing a node of a parsed document
- DocumentKind: StrEnum of the supported formats (XML, JSON)
- TreeBuilder: converts lxml elements and JSON values into DocumentNode trees
- DocumentLoader: reads a path or byte buffer and parses it with hardening
"""

from structural_diff.tree.builder import JsonMembers, TreeBuilder
from structural_diff.tree.loader import DocumentLoader, DocumentSource
from structural_diff.tree.nodes import DocumentKind, DocumentNode

__all__ = [
    "DocumentKind",
    "DocumentLoader",
    "DocumentNode",
    "DocumentSource",
    "JsonMembers",
    "TreeBuilder",
]
