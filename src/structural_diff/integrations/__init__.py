"""Integrations subpackage for structural-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), exposing the
  ``assert_documents_equivalent`` fixture.

The plugin module is loaded by pytest itself and is not re-exported here, so
importing structural_diff never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
