"""OverlayPatcher: write a flat path -> value overlay onto a cloned page.

The base page is deep-cloned first and never touched.  Each overlay path is
parsed with ``parse_path`` and resolved against every component whose
identity matches.  Resolution only walks existing containers: a patch never
adds or removes list entries, and never replaces a list or dict with a
scalar.  A path that does not resolve to a leaf (stale overlay, array
shapes that drifted between snapshots) is skipped with a DEBUG log line.

Accepted overlay values:

- plain values (usually strings)
- ``FieldChange`` objects, so ``diff`` output can be applied directly
- mappings carrying a ``"value"`` key, the shape translation stores return

``None`` values are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from content_tree.errors import PathSyntaxError
from content_tree.paths.addressor import ParsedPath, component_identity, parse_path
from content_tree.result import FieldChange
from content_tree.tree.nodes import Segment, as_list, clone_page

__all__ = ["OverlayPatcher", "overlay_value"]

logger = logging.getLogger(__name__)


def _is_container(value: Any) -> bool:
    """Lists and dicts are structure, never leaves an overlay may replace."""
    return isinstance(value, list | dict)


def overlay_value(entry: Any) -> Any:
    """Unwrap an overlay entry to the value that should be written."""
    if isinstance(entry, FieldChange):
        return entry.value
    if isinstance(entry, Mapping):
        return entry.get("value")
    return entry


class OverlayPatcher:
    """Applies overlays to deep clones of a page.

    Stateless; one instance may be shared between threads.

    Example::

        patcher = OverlayPatcher()
        patched = patcher.apply(base, {"component_Hero.items[0].content": "Hola"})
        assert patched is not base
    """

    def apply(self, base: Any, overlay: Mapping[str, Any] | None) -> list[Any]:
        """Return a patched deep clone of ``base``.

        Args:
            base:    The page to patch; never mutated.  A non-list degrades
                     to an empty page.
            overlay: Path -> value map.  None or empty returns a plain clone.

        Returns:
            A new page list.
        """
        page = clone_page(base)
        if not overlay:
            return page

        applied = 0
        for path, entry in overlay.items():
            value = overlay_value(entry)
            if value is None:
                continue
            try:
                parsed = parse_path(path)
            except PathSyntaxError as exc:
                logger.debug("skipping overlay entry: %s", exc)
                continue
            if self._apply_one(page, parsed, value):
                applied += 1
            else:
                logger.debug("skipping overlay path %r: no matching leaf", path)

        logger.debug("applied %d of %d overlay entries", applied, len(overlay))
        return page

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _apply_one(self, page: list[Any], parsed: ParsedPath, value: Any) -> bool:
        hit = False
        for index, component in enumerate(page):
            if not isinstance(component, dict):
                continue
            if component_identity(component, index) != parsed.identity:
                continue
            hit = self._write(component, parsed, value) or hit
        return hit

    @staticmethod
    def _write(component: dict[str, Any], parsed: ParsedPath, value: Any) -> bool:
        node: dict[str, Any] = component
        for step in parsed.steps:
            if step.segment == Segment.PROPS:
                props = node.get("props")
                if not isinstance(props, dict):
                    return False
                if _is_container(props.get(step.key)):
                    return False
                props[step.key] = value
                return True

            entries = as_list(node.get(step.segment))
            if step.index is None or step.index >= len(entries):
                return False
            child = entries[step.index]
            if not isinstance(child, dict):
                return False
            node = child

        if parsed.field is None or _is_container(node.get(parsed.field)):
            return False
        node[parsed.field] = value
        return True
