"""Public API functions for content-tree.

Each call builds a fresh extractor/differ/patcher so there is no global state
between calls (the path-parse cache only memoises immutable parse results).
Inputs are never mutated; every returned page is a deep clone.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from content_tree.algorithm.config import OverlayConfig
from content_tree.algorithm.differ import TreeDiffer
from content_tree.algorithm.extractor import TextExtractor
from content_tree.algorithm.patcher import OverlayPatcher
from content_tree.result import ExtractedField, FieldChange

__all__ = [
    "apply_overlay",
    "diff",
    "extract_text",
    "restore_original",
    "translatable_fields",
]


def _resolve_config(
    allow_list: Iterable[str] | None, config: OverlayConfig | None
) -> OverlayConfig:
    if config is not None:
        return config
    if allow_list is None:
        return OverlayConfig()
    return OverlayConfig.with_fields(allow_list)


def extract_text(
    page: Any,
    allow_list: Iterable[str] | None = None,
    config: OverlayConfig | None = None,
) -> dict[str, ExtractedField]:
    """Return every translatable leaf of ``page`` as path -> ExtractedField.

    Args:
        page:       List of component dicts.
        allow_list: Node attributes to emit.  Defaults to the standard
                    allow-list (content, title, description, label, ...).
        config:     Full extraction settings; takes precedence over
                    ``allow_list``.

    Returns:
        Insertion-ordered dict following tree order.  Empty and
        whitespace-only values are never included.
    """
    return TextExtractor(_resolve_config(allow_list, config)).extract(page)


def translatable_fields(
    page: Any, config: OverlayConfig | None = None
) -> dict[str, str]:
    """Return ``extract_text`` flattened to path -> text."""
    return {
        path: extracted.value
        for path, extracted in extract_text(page, config=config).items()
    }


def diff(
    current: Any,
    base: Any,
    allow_list: Iterable[str] | None = None,
    config: OverlayConfig | None = None,
) -> dict[str, FieldChange]:
    """Return the leaves whose text differs between ``current`` and ``base``.

    Only paths present in both trees are compared; structural differences
    are silently ignored.

    Args:
        current:    The edited page.
        base:       The snapshot taken at load time.
        allow_list: Node attributes to compare (see ``extract_text``).
        config:     Full extraction settings.

    Returns:
        Dict of path -> ``FieldChange(value, source_text)``.
    """
    return TreeDiffer(_resolve_config(allow_list, config)).diff(current, base)


def apply_overlay(base: Any, overlay: Mapping[str, Any] | None) -> list[Any]:
    """Return a deep clone of ``base`` with the overlay's leaves overwritten.

    ``apply_overlay(base, {})`` equals ``base`` but is a distinct object.
    Paths that do not resolve are skipped.

    Args:
        base:    The page to patch; never mutated.
        overlay: Path -> value (plain value, ``FieldChange`` or a mapping
                 with a ``"value"`` key).

    Returns:
        The patched page.
    """
    return OverlayPatcher().apply(base, overlay)


def restore_original(
    current: Any,
    base: Any,
    config: OverlayConfig | None = None,
) -> list[Any]:
    """Return a clone of ``current`` with every base text value written back.

    Used to revert a translated view to the base language without discarding
    structural edits made since the snapshot.
    """
    overlay = {
        path: extracted.value
        for path, extracted in extract_text(base, config=config).items()
    }
    return apply_overlay(current, overlay)
