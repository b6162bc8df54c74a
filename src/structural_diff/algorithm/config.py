"""CompareOptions and IgnoreMatchMode for comparison configuration.

CompareOptions is a frozen (immutable) dataclass holding everything a
comparison run needs besides the two documents: which subtrees to skip and
which fields order repeated elements before they are paired.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from enum import StrEnum, auto
from typing import Any


class IgnoreMatchMode(StrEnum):
    """How an ignored path is matched against a visited node's path.

    - SUBSTRING: skip the node when its path contains any ignored string.
    - EXACT:     skip the node when its path equals an ignored string.

    Either way a skipped node takes its entire subtree with it.
    """

    SUBSTRING = auto()
    EXACT = auto()


@dataclass(frozen=True, slots=True)
class CompareOptions:
    """Immutable configuration for one comparison run.

    Attributes:
        ignored_paths: Paths whose subtrees are excluded from both documents.
            Any iterable of strings is accepted and stored as a frozenset.
        primary_sort_field: Child field (or XML attribute) used to order the
            occurrences of a repeated element before pairing.  Occurrences
            lacking the field sort first with key "".
        secondary_sort_field: Tie-break field applied after the primary one.
        ignore_match_mode: How ``ignored_paths`` are matched.  Default
            ``SUBSTRING``.
    """

    ignored_paths: frozenset[str] = frozenset()
    primary_sort_field: str = ""
    secondary_sort_field: str = ""
    ignore_match_mode: IgnoreMatchMode = IgnoreMatchMode.SUBSTRING

    def __post_init__(self) -> None:
        if isinstance(self.ignored_paths, str):
            msg = "ignored_paths must be a collection of paths, not a single string"
            raise ValueError(msg)
        paths = frozenset(self.ignored_paths)
        for path in paths:
            if not isinstance(path, str):
                msg = f"ignored paths must be strings, got {type(path).__name__}"
                raise ValueError(msg)
            if not path.strip():
                msg = "ignored paths must not be empty"
                raise ValueError(msg)
        object.__setattr__(self, "ignored_paths", paths)
        object.__setattr__(
            self, "ignore_match_mode", IgnoreMatchMode(self.ignore_match_mode)
        )
        for name in ("primary_sort_field", "secondary_sort_field"):
            if not isinstance(getattr(self, name), str):
                msg = f"{name} must be a string"
                raise ValueError(msg)
        if self.secondary_sort_field and not self.primary_sort_field:
            msg = "secondary_sort_field requires a primary_sort_field"
            raise ValueError(msg)

    def is_ignored(self, path: str) -> bool:
        """Return True if the subtree at ``path`` must be skipped."""
        if self.ignore_match_mode is IgnoreMatchMode.EXACT:
            return path in self.ignored_paths
        return any(ignored in path for ignored in self.ignored_paths)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CompareOptions:
        """Build options from a plain mapping, e.g. a decoded JSON options file.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            msg = f"Unknown option(s): {', '.join(unknown)}"
            raise ValueError(msg)
        values = dict(mapping)
        if "ignored_paths" in values:
            ignored = values["ignored_paths"]
            if isinstance(ignored, str) or not isinstance(ignored, Iterable):
                msg = "ignored_paths must be a list of strings"
                raise ValueError(msg)
            values["ignored_paths"] = frozenset(ignored)
        return cls(**values)
