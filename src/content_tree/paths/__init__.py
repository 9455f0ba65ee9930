"""Paths subpackage: canonical leaf addressing.

Re-exports:
- leaf_path: build a path string from an identity, step chain and field
- parse_path: inverse of leaf_path
- component_identity: key -> type -> index fallback
- is_field_name: whether a name can end a path
- ParsedPath: structured parse result
"""

from content_tree.paths.addressor import (
    ParsedPath,
    component_identity,
    is_field_name,
    leaf_path,
    parse_path,
)

__all__ = ["ParsedPath", "component_identity", "is_field_name", "leaf_path", "parse_path"]
