"""TextExtractor: flatten a page into an ordered map of path -> text.

Walk order (deterministic, used for stable fixtures):

- components in page order; per component its ``items`` then its ``props``
- per node: allow-listed attributes in config order, then nested ``items``,
  then ``tabs`` (each tab's ``label``, then its ``content`` nodes), then
  ``hours`` (``day``/``time``), then the node's ``props`` bag

Only non-empty strings are emitted.  Whitespace-only strings are treated as
absent, so they never reach the differ either.  Malformed containers are
walked as empty, and non-dict entries are skipped without shifting the
indices of their siblings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from content_tree.algorithm.config import OverlayConfig
from content_tree.paths.addressor import component_identity, leaf_path
from content_tree.result import ExtractedField
from content_tree.tree.nodes import PathStep, Segment, as_dict, as_list

__all__ = ["TextExtractor", "is_text"]


def is_text(value: Any) -> bool:
    """Return True for strings that hold something besides whitespace."""
    return isinstance(value, str) and bool(value.strip())


@dataclass
class TextExtractor:
    """Extracts translatable text from a page tree.

    Example::

        extractor = TextExtractor()
        fields = extractor.extract(
            [{"key": "Hero", "items": [{"key": "h1", "content": "Welcome"}]}]
        )
        # {"component_Hero.items[0].content": ExtractedField(value="Welcome")}
    """

    config: OverlayConfig = field(default_factory=OverlayConfig)

    def extract(self, page: Any) -> dict[str, ExtractedField]:
        """Return every translatable leaf of ``page`` in tree order.

        Args:
            page: A list of component dicts.  Anything else yields {}.

        Returns:
            Insertion-ordered dict of path -> ``ExtractedField``.  When two
            components share an identity, the later one's values win.
        """
        out: dict[str, ExtractedField] = {}
        for index, component in enumerate(as_list(page)):
            if not isinstance(component, dict):
                continue
            identity = component_identity(component, index)
            for i, item in enumerate(as_list(component.get("items"))):
                self._walk_node(item, identity, (PathStep(Segment.ITEMS, index=i),), out)
            self._walk_props(component.get("props"), identity, (), out)
        return out

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def _walk_node(
        self,
        node: Any,
        identity: str,
        chain: tuple[PathStep, ...],
        out: dict[str, ExtractedField],
    ) -> None:
        if not isinstance(node, dict):
            return

        for name in self.config.text_fields:
            self._emit(node, name, identity, chain, out)

        for i, child in enumerate(as_list(node.get("items"))):
            self._walk_node(child, identity, (*chain, PathStep(Segment.ITEMS, index=i)), out)

        for t, tab in enumerate(as_list(node.get("tabs"))):
            if not isinstance(tab, dict):
                continue
            tab_chain = (*chain, PathStep(Segment.TABS, index=t))
            self._emit(tab, "label", identity, tab_chain, out)
            for j, child in enumerate(as_list(tab.get("content"))):
                self._walk_node(
                    child, identity, (*tab_chain, PathStep(Segment.CONTENT, index=j)), out
                )

        for h, entry in enumerate(as_list(node.get("hours"))):
            if not isinstance(entry, dict):
                continue
            hours_chain = (*chain, PathStep(Segment.HOURS, index=h))
            for name in self.config.hours_fields:
                self._emit(entry, name, identity, hours_chain, out)

        self._walk_props(node.get("props"), identity, chain, out)

    def _walk_props(
        self,
        props: Any,
        identity: str,
        chain: tuple[PathStep, ...],
        out: dict[str, ExtractedField],
    ) -> None:
        if not self.config.include_props:
            return
        for key, value in as_dict(props).items():
            if is_text(value) and key:
                path = leaf_path(identity, (*chain, PathStep(Segment.PROPS, key=str(key))))
                out[path] = ExtractedField(value)

    @staticmethod
    def _emit(
        node: Mapping[str, Any],
        name: str,
        identity: str,
        chain: tuple[PathStep, ...],
        out: dict[str, ExtractedField],
    ) -> None:
        value = node.get(name)
        if is_text(value):
            out[leaf_path(identity, chain, name)] = ExtractedField(value)
