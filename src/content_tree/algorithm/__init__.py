"""algorithm subpackage: public API for extraction, diffing and patching.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from content_tree.algorithm import OverlayPatcher, TreeDiffer

    changes = TreeDiffer().diff(current, base)
    patched = OverlayPatcher().apply(other_base, changes)
"""

from __future__ import annotations

from content_tree.algorithm.config import (
    DEFAULT_HOURS_FIELDS,
    DEFAULT_TEXT_FIELDS,
    OverlayConfig,
)
from content_tree.algorithm.differ import TreeDiffer
from content_tree.algorithm.extractor import TextExtractor
from content_tree.algorithm.outdated import check_outdated, compute_source_hash
from content_tree.algorithm.patcher import OverlayPatcher

__all__ = [
    "DEFAULT_HOURS_FIELDS",
    "DEFAULT_TEXT_FIELDS",
    "OverlayConfig",
    "OverlayPatcher",
    "TextExtractor",
    "TreeDiffer",
    "check_outdated",
    "compute_source_hash",
]
