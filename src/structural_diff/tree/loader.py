"""DocumentLoader: reads an XML or JSON source into a DocumentNode tree.

Sources are either a file path (``str`` or ``os.PathLike``) or an in-memory
byte buffer.  Every failure to produce a tree surfaces as ``ParseError``; the
loader never returns a partial or empty tree in place of an error.

XML hardening is unconditional: external entities are not resolved, no DTD is
loaded, network access is disabled, and any document declaring a DOCTYPE is
rejected outright.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from lxml import etree

from structural_diff.errors import ParseError
from structural_diff.tree.builder import JsonMembers, TreeBuilder
from structural_diff.tree.nodes import DocumentKind, DocumentNode

__all__ = ["DocumentLoader", "DocumentSource"]

logger = logging.getLogger(__name__)

DocumentSource = str | os.PathLike[str] | bytes | bytearray | memoryview

_BUFFER = "<buffer>"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r} is not allowed")


class DocumentLoader:
    """Parses document sources into ``DocumentNode`` trees.

    A loader holds no per-document state; one instance may load any number of
    documents, including from several threads at once.
    """

    def __init__(self, builder: TreeBuilder | None = None) -> None:
        self._builder = builder if builder is not None else TreeBuilder()

    def load(self, source: DocumentSource, kind: DocumentKind | str) -> DocumentNode:
        """Load and parse one document.

        Args:
            source: File path, or the raw document bytes.
            kind:   ``DocumentKind.XML`` or ``DocumentKind.JSON`` (or their
                    string values).

        Returns:
            The root ``DocumentNode`` of the parsed document.

        Raises:
            ParseError: Missing/unreadable file, malformed syntax, encoding
                failure, DOCTYPE in XML, or non-object JSON root.
            ValueError: If ``kind`` is not a known document kind.
        """
        kind = DocumentKind(kind)
        data, origin = self._read(source)
        logger.debug("Loaded %d bytes of %s from %s", len(data), kind, origin)
        if kind is DocumentKind.XML:
            return self._parse_xml(data, origin)
        return self._parse_json(data, origin)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @staticmethod
    def _read(source: DocumentSource) -> tuple[bytes, str]:
        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source), _BUFFER

        path = Path(source)
        origin = os.fspath(path)
        if not path.is_file():
            raise ParseError("File not found", origin)
        try:
            return path.read_bytes(), origin
        except OSError as exc:
            raise ParseError(f"Cannot read file: {exc.strerror}", origin) from exc

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _parse_xml(self, data: bytes, origin: str) -> DocumentNode:
        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
            dtd_validation=False,
            remove_comments=True,
            remove_pis=True,
            huge_tree=False,
        )
        try:
            root = etree.fromstring(data, parser)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise ParseError(f"Error parsing XML: {exc}", origin) from exc

        if root.getroottree().docinfo.doctype:
            raise ParseError("DOCTYPE declarations are not allowed", origin)

        return self._builder.build_xml(root)

    def _parse_json(self, data: bytes, origin: str) -> DocumentNode:
        try:
            value = json.loads(
                data,
                object_pairs_hook=JsonMembers,
                parse_constant=_reject_constant,
            )
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
            # trailing data after the root value is a JSONDecodeError too.
            # The json decoder itself recurses, so extreme nesting can exhaust
            # the interpreter stack before the tree is built.
            raise ParseError(f"Error parsing JSON: {exc}", origin) from exc

        if not isinstance(value, JsonMembers):
            raise ParseError(
                f"JSON root must be an object, got {type(value).__name__}", origin
            )

        return self._builder.build_json(value)
