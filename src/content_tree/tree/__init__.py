"""Tree subpackage: the content-tree node model and array-kind normalizer.

Re-exports the public API for the tree module:
- Node model: FieldType, ArrayKind, Segment, PathStep and the TypedDict shapes
- Normalizer: detect_array_kind, get_array_items, set_array_items,
  has_array_content and the add/remove/move helpers
- Adapters: to_uniform, from_uniform, item_preview, blank_item
"""

from content_tree.tree.adapters import (
    ItemPreview,
    blank_item,
    from_uniform,
    item_preview,
    to_uniform,
)
from content_tree.tree.nodes import (
    ArrayKind,
    Component,
    ContainerNode,
    FieldType,
    HoursEntry,
    LeafField,
    Page,
    PathStep,
    Segment,
    TabGroup,
    as_dict,
    as_list,
    clone_page,
)
from content_tree.tree.normalizer import (
    ArrayKindMatch,
    ArrayKindRule,
    add_array_item,
    detect_array_kind,
    get_array_items,
    has_array_content,
    move_array_item,
    remove_array_item,
    set_array_items,
)

__all__ = [
    "ArrayKind",
    "ArrayKindMatch",
    "ArrayKindRule",
    "Component",
    "ContainerNode",
    "FieldType",
    "HoursEntry",
    "ItemPreview",
    "LeafField",
    "Page",
    "PathStep",
    "Segment",
    "TabGroup",
    "add_array_item",
    "as_dict",
    "as_list",
    "blank_item",
    "clone_page",
    "detect_array_kind",
    "from_uniform",
    "get_array_items",
    "has_array_content",
    "item_preview",
    "move_array_item",
    "remove_array_item",
    "set_array_items",
    "to_uniform",
]
