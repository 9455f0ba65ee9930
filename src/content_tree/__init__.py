"""Content tree - path-addressed diff, patch and translation overlays for page content."""

from __future__ import annotations

from content_tree.algorithm.config import OverlayConfig
from content_tree.algorithm.outdated import check_outdated, compute_source_hash
from content_tree.api import (
    apply_overlay,
    diff,
    extract_text,
    restore_original,
    translatable_fields,
)
from content_tree.errors import PathSyntaxError, TranslationServiceError
from content_tree.paths import ParsedPath, component_identity, leaf_path, parse_path
from content_tree.result import ExtractedField, FieldChange, OutdatedStatus
from content_tree.session import TranslationSession
from content_tree.tree import (
    ArrayKind,
    ArrayKindMatch,
    PathStep,
    Segment,
    detect_array_kind,
    from_uniform,
    get_array_items,
    has_array_content,
    set_array_items,
    to_uniform,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayKind",
    "ArrayKindMatch",
    "ExtractedField",
    "FieldChange",
    "OutdatedStatus",
    "OverlayConfig",
    "ParsedPath",
    "PathStep",
    "PathSyntaxError",
    "Segment",
    "TranslationServiceError",
    "TranslationSession",
    "apply_overlay",
    "check_outdated",
    "component_identity",
    "compute_source_hash",
    "detect_array_kind",
    "diff",
    "extract_text",
    "from_uniform",
    "get_array_items",
    "has_array_content",
    "leaf_path",
    "parse_path",
    "restore_original",
    "set_array_items",
    "to_uniform",
    "translatable_fields",
]
