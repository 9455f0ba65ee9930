"""Integrations subpackage for content-tree.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_overlay_round_trip`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
