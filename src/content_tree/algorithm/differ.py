"""TreeDiffer: report the translatable leaves that differ between two trees.

Both trees are flattened with the same ``TextExtractor``; a path is reported
when it is present on both sides and the values differ.  Paths present on
only one side are structural changes (array items added or removed by the
editor) and are ignored, as are empty and whitespace-only values, which
the extractor never emits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from content_tree.algorithm.config import OverlayConfig
from content_tree.algorithm.extractor import TextExtractor
from content_tree.result import ExtractedField, FieldChange

__all__ = ["TreeDiffer"]


@dataclass
class TreeDiffer:
    """Computes the path-level text diff of a current tree against a base.

    Example::

        differ = TreeDiffer()
        base = [{"key": "Hero", "items": [{"content": "Welcome"}]}]
        current = [{"key": "Hero", "items": [{"content": "Bienvenue"}]}]
        differ.diff(current, base)
        # {"component_Hero.items[0].content":
        #      FieldChange(value="Bienvenue", source_text="Welcome")}
    """

    config: OverlayConfig = field(default_factory=OverlayConfig)

    def diff(self, current: Any, base: Any) -> dict[str, FieldChange]:
        """Return changed paths in ``current``'s tree order.

        Args:
            current: The edited page.
            base:    The snapshot taken at load time.

        Returns:
            Dict of path -> ``FieldChange(value, source_text)``.  Empty when
            nothing changed or when the trees share no paths.
        """
        extractor = TextExtractor(self.config)
        current_fields = extractor.extract(current)
        base_fields = extractor.extract(base)

        changes: dict[str, FieldChange] = {}
        for path, extracted in current_fields.items():
            original = base_fields.get(path)
            if original is not None and extracted.value != original.value:
                changes[path] = FieldChange(extracted.value, original.value)
        return changes

    def pair(self, current: Any, base: Any) -> dict[str, ExtractedField]:
        """Return every current leaf annotated with its base value.

        ``source_value`` is None for paths missing from ``base``.
        """
        extractor = TextExtractor(self.config)
        base_fields = extractor.extract(base)
        return {
            path: ExtractedField(
                extracted.value,
                base_fields[path].value if path in base_fields else None,
            )
            for path, extracted in extractor.extract(current).items()
        }
