"""Shared document fixtures.

All documents are fixed, reproducible byte strings built around one small
product catalog.  Each fixture returns bytes so tests can feed them to the
loader directly or write them to ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

CATALOG_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<catalog>
  <!-- two products -->
  <item currency="USD">
    <id>1</id>
    <name>Widget</name>
    <price>10</price>
  </item>
  <item currency="USD">
    <id>2</id>
    <name>Gadget</name>
    <price>20</price>
  </item>
  <internalNote>draft</internalNote>
</catalog>
"""

CATALOG_JSON = b"""{
  "catalog": {
    "item": [
      {"id": "1", "name": "Widget", "price": 10},
      {"id": "2", "name": "Gadget", "price": 20}
    ],
    "internalNote": "draft"
  }
}
"""


def make_catalog_xml(
    items: list[tuple[str, str, str]],
    note: str = "draft",
    currency: str | None = "USD",
) -> bytes:
    """Build a catalog document from ``(id, name, price)`` tuples, in order."""
    attr = f' currency="{currency}"' if currency is not None else ""
    body = "".join(
        f"<item{attr}><id>{i}</id><name>{n}</name><price>{p}</price></item>"
        for i, n, p in items
    )
    return f"<catalog>{body}<internalNote>{note}</internalNote></catalog>".encode()


@pytest.fixture
def catalog_xml() -> bytes:
    return CATALOG_XML


@pytest.fixture
def catalog_json() -> bytes:
    return CATALOG_JSON


@pytest.fixture
def catalog_factory() -> Callable[..., bytes]:
    """Factory fixture: ``catalog_factory([("1", "Widget", "10"), ...], note=...)``."""
    return make_catalog_xml
