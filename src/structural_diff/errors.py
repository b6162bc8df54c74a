"""Exception hierarchy for structural-diff.

Per-path discrepancies are never exceptions: they are collected into a
``DiffReport``.  Exceptions are reserved for conditions that make a comparison
impossible:

- ``ParseError``:        a document could not be read or parsed.
- ``RootMismatchError``: both documents parsed, but their roots differ so the
                         comparison is meaningless.
"""

from __future__ import annotations

__all__ = ["ParseError", "RootMismatchError", "StructuralDiffError"]


class StructuralDiffError(Exception):
    """Base class for every error raised by structural-diff."""


class ParseError(StructuralDiffError):
    """A document source could not be turned into a ``DocumentNode`` tree.

    Raised for missing files, unreadable bytes, malformed XML/JSON syntax, a
    forbidden DOCTYPE declaration, or a JSON root that is not an object.  The
    underlying exception (if any) is chained as ``__cause__``.

    Attributes:
        source: File path of the offending document, or ``"<buffer>"`` for
            in-memory sources.
    """

    def __init__(self, message: str, source: str = "<buffer>") -> None:
        super().__init__(f"{message} ({source})")
        self.source = source


class RootMismatchError(StructuralDiffError):
    """The two documents have different root identifiers.

    Attributes:
        root_a: Root node name of the first document.
        root_b: Root node name of the second document.
    """

    def __init__(self, root_a: str, root_b: str) -> None:
        super().__init__(f"Root nodes do not match: {root_a!r} vs {root_b!r}")
        self.root_a = root_a
        self.root_b = root_b
