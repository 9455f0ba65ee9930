"""Native item <-> uniform node adapters for every array kind.

Each array kind stores its items in a different native shape (a carousel
image is ``{"src", "alt", "caption"}``, a team member is ``{"name",
"position", "photo", ...}``).  The editor works on one uniform shape, a
``ContainerNode``, so every kind gets a pure ``to_uniform`` / ``from_uniform``
pair registered in ``_ADAPTERS``.

Two rules hold for every ``from_uniform``:

1. The result is ``{**original, **changed}``.  Keys the editor does not know
   about are carried over untouched.
2. Fields that have two spellings in the wild (``role``/``position``,
   ``bio``/``description``, ``image``/``photo``, ``image``/``avatar``,
   ``src``/``url``) are written under both names, preferring the edited value.

An edited value that is empty falls back to the original item's value.
Kinds without a dedicated pair (``clientLogos``, ``ctaButtons``) use the
generic adapter.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from content_tree.tree.nodes import ArrayKind, ContainerNode, FieldType, as_dict, as_list

__all__ = ["ItemPreview", "blank_item", "from_uniform", "item_preview", "to_uniform"]

# Strings longer than this are edited in a textarea by the generic adapter.
_TEXTAREA_THRESHOLD = 100


@dataclass(frozen=True, slots=True)
class ItemPreview:
    """Short summary of an array item for list views.

    Attributes:
        title:     Primary line; never empty (falls back to "<Kind> N").
        subtitle:  Secondary line, or None.
        thumbnail: Image URL, or None.
    """

    title: str
    subtitle: str | None = None
    thumbnail: str | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _first(*values: Any) -> Any:
    """Return the first truthy value, or None."""
    for value in values:
        if value:
            return value
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _sub_field(key: str, field_type: FieldType, content: Any) -> ContainerNode:
    return {"key": key, "type": field_type, "content": _text(content)}


def _sub_image(key: str, src: Any) -> ContainerNode:
    return {"key": key, "type": FieldType.IMAGE, "src": _text(src)}


def _edited_values(uniform: Mapping[str, Any]) -> dict[str, Any]:
    """Map sub-field key -> edited value (``content``, or ``src`` for images)."""
    values: dict[str, Any] = {}
    for sub in as_list(uniform.get("items")):
        if not isinstance(sub, dict) or not isinstance(sub.get("key"), str):
            continue
        values[sub["key"]] = _first(sub.get("content"), sub.get("src"))
    return values


def _write(target: dict[str, Any], names: tuple[str, ...], value: Any) -> None:
    """Write ``value`` under every alias in ``names``; skip empty values."""
    if not value:
        return
    for name in names:
        target[name] = value


# ---------------------------------------------------------------------------
# carousel / gallery
# ---------------------------------------------------------------------------


def _image_to_uniform(item: Mapping[str, Any], index: int) -> ContainerNode:
    return {
        "key": f"item-{index}",
        "type": FieldType.IMAGE,
        "src": _text(_first(item.get("src"), item.get("url"))),
        "alt": _text(item.get("alt")),
        "content": _text(_first(item.get("caption"), item.get("description"))),
    }


def _image_from_uniform(
    original: Mapping[str, Any], uniform: Mapping[str, Any]
) -> dict[str, Any]:
    merged = dict(original)
    _write(
        merged,
        ("src", "url"),
        _first(uniform.get("src"), original.get("src"), original.get("url")),
    )
    _write(merged, ("alt",), _first(uniform.get("alt"), original.get("alt")))
    _write(merged, ("caption",), _first(uniform.get("content"), original.get("caption")))
    _write(
        merged,
        ("description",),
        _first(uniform.get("content"), original.get("description")),
    )
    return merged


# ---------------------------------------------------------------------------
# testimonials
# ---------------------------------------------------------------------------


def _testimonial_to_uniform(item: Mapping[str, Any], index: int) -> ContainerNode:
    return {
        "key": f"testimonial-{index}",
        "type": FieldType.ARRAY,
        "items": [
            _sub_field("name", FieldType.TEXT, item.get("name")),
            _sub_field("text", FieldType.TEXTAREA, item.get("text")),
            _sub_field("role", FieldType.TEXT, item.get("role")),
            _sub_field("company", FieldType.TEXT, item.get("company")),
            _sub_image("image", _first(item.get("image"), item.get("avatar"))),
        ],
    }


def _testimonial_from_uniform(
    original: Mapping[str, Any], uniform: Mapping[str, Any]
) -> dict[str, Any]:
    edited = _edited_values(uniform)
    merged = dict(original)
    for name in ("name", "text", "role", "company"):
        _write(merged, (name,), _first(edited.get(name), original.get(name)))
    _write(
        merged,
        ("image", "avatar"),
        _first(edited.get("image"), original.get("image"), original.get("avatar")),
    )
    return merged


# ---------------------------------------------------------------------------
# teamMembers
# ---------------------------------------------------------------------------


def _member_to_uniform(item: Mapping[str, Any], index: int) -> ContainerNode:
    return {
        "key": f"member-{index}",
        "type": FieldType.ARRAY,
        "items": [
            _sub_field("name", FieldType.TEXT, item.get("name")),
            _sub_field(
                "role", FieldType.TEXT, _first(item.get("role"), item.get("position"))
            ),
            _sub_field(
                "bio",
                FieldType.TEXTAREA,
                _first(item.get("bio"), item.get("description")),
            ),
            _sub_image("image", _first(item.get("image"), item.get("photo"))),
        ],
    }


def _member_from_uniform(
    original: Mapping[str, Any], uniform: Mapping[str, Any]
) -> dict[str, Any]:
    edited = _edited_values(uniform)
    merged = dict(original)
    _write(merged, ("name",), _first(edited.get("name"), original.get("name")))
    _write(
        merged,
        ("role", "position"),
        _first(edited.get("role"), original.get("role"), original.get("position")),
    )
    _write(
        merged,
        ("bio", "description"),
        _first(edited.get("bio"), original.get("bio"), original.get("description")),
    )
    _write(
        merged,
        ("image", "photo"),
        _first(edited.get("image"), original.get("image"), original.get("photo")),
    )
    return merged


# ---------------------------------------------------------------------------
# faqs
# ---------------------------------------------------------------------------


def _faq_to_uniform(item: Mapping[str, Any], index: int) -> ContainerNode:
    return {
        "key": f"faq-{index}",
        "type": FieldType.ARRAY,
        "items": [
            _sub_field("question", FieldType.TEXT, item.get("question")),
            _sub_field("answer", FieldType.TEXTAREA, item.get("answer")),
        ],
    }


def _faq_from_uniform(
    original: Mapping[str, Any], uniform: Mapping[str, Any]
) -> dict[str, Any]:
    edited = _edited_values(uniform)
    merged = dict(original)
    for name in ("question", "answer"):
        _write(merged, (name,), _first(edited.get(name), original.get(name)))
    return merged


# ---------------------------------------------------------------------------
# generic
# ---------------------------------------------------------------------------


def _generic_to_uniform(item: Mapping[str, Any], index: int) -> ContainerNode:
    items: list[ContainerNode] = []
    for key, value in item.items():
        long_text = isinstance(value, str) and len(value) > _TEXTAREA_THRESHOLD
        field_type = FieldType.TEXTAREA if long_text else FieldType.TEXT
        items.append(_sub_field(str(key), field_type, value))
    return {"key": f"item-{index}", "type": FieldType.ARRAY, "items": items}


def _generic_from_uniform(
    original: Mapping[str, Any], uniform: Mapping[str, Any]
) -> dict[str, Any]:
    merged = dict(original)
    for key, value in _edited_values(uniform).items():
        # Non-string originals (numbers, nested objects) are shown as text only.
        if key in original and not isinstance(original[key], str):
            continue
        _write(merged, (key,), value)
    return merged


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ToUniform = Callable[[Mapping[str, Any], int], ContainerNode]
FromUniform = Callable[[Mapping[str, Any], Mapping[str, Any]], dict[str, Any]]

_ADAPTERS: dict[ArrayKind, tuple[ToUniform, FromUniform]] = {
    ArrayKind.CAROUSEL: (_image_to_uniform, _image_from_uniform),
    ArrayKind.GALLERY: (_image_to_uniform, _image_from_uniform),
    ArrayKind.TESTIMONIALS: (_testimonial_to_uniform, _testimonial_from_uniform),
    ArrayKind.TEAM_MEMBERS: (_member_to_uniform, _member_from_uniform),
    ArrayKind.FAQS: (_faq_to_uniform, _faq_from_uniform),
    ArrayKind.GENERIC: (_generic_to_uniform, _generic_from_uniform),
}


def _adapter(kind: str) -> tuple[ToUniform, FromUniform]:
    try:
        return _ADAPTERS[ArrayKind(kind)]
    except (KeyError, ValueError):
        return _ADAPTERS[ArrayKind.GENERIC]


def to_uniform(kind: str, item: Any, index: int) -> ContainerNode:
    """Convert a native array item of ``kind`` to a uniform editable node.

    Args:
        kind:  An ``ArrayKind`` value; unknown kinds use the generic adapter.
        item:  The native item.  Anything that is not a dict is treated as {}.
        index: Position of the item in its list (used for the node key).

    Returns:
        A new ``ContainerNode``.
    """
    to_fn, _ = _adapter(kind)
    return to_fn(as_dict(item), index)


def from_uniform(kind: str, original: Any, uniform: Any) -> dict[str, Any]:
    """Merge an edited uniform node back into its original native item.

    Args:
        kind:     The ``ArrayKind`` the item was converted with.
        original: The native item before editing.
        uniform:  The edited node produced from ``to_uniform``.

    Returns:
        A new dict ``{**original, **changed_fields}``; ``original`` is not
        mutated.
    """
    _, from_fn = _adapter(kind)
    return from_fn(as_dict(original), as_dict(uniform))


def item_preview(kind: str, item: Any, index: int) -> ItemPreview:
    """Summarise a native item as a title, subtitle and thumbnail."""
    data = as_dict(item)
    number = index + 1
    try:
        array_kind = ArrayKind(kind)
    except ValueError:
        array_kind = ArrayKind.GENERIC

    if array_kind in (ArrayKind.CAROUSEL, ArrayKind.GALLERY, ArrayKind.CLIENT_LOGOS):
        return ItemPreview(
            title=_first(data.get("alt"), data.get("caption"), data.get("name"))
            or f"Image {number}",
            subtitle=_first(data.get("caption"), data.get("description")),
            thumbnail=_first(data.get("src"), data.get("url")),
        )
    if array_kind == ArrayKind.TESTIMONIALS:
        role_line = ", ".join(
            value for value in (data.get("role"), data.get("company")) if value
        )
        return ItemPreview(
            title=data.get("name") or f"Testimonial {number}",
            subtitle=role_line or None,
            thumbnail=_first(data.get("image"), data.get("avatar")),
        )
    if array_kind == ArrayKind.TEAM_MEMBERS:
        return ItemPreview(
            title=data.get("name") or f"Member {number}",
            subtitle=_first(data.get("role"), data.get("position")),
            thumbnail=_first(data.get("image"), data.get("photo")),
        )
    if array_kind == ArrayKind.FAQS:
        return ItemPreview(
            title=data.get("question") or f"FAQ {number}",
            subtitle=data.get("answer") or None,
        )
    title = _first(
        *(data.get(name) for name in ("title", "name", "label", "text", "content"))
    )
    return ItemPreview(
        title=title if isinstance(title, str) else f"Item {number}",
        thumbnail=_first(data.get("src"), data.get("image"), data.get("url")),
    )


_BLANK_ITEMS: dict[ArrayKind, dict[str, str]] = {
    ArrayKind.CAROUSEL: {"src": "", "alt": "", "caption": ""},
    ArrayKind.GALLERY: {"src": "", "alt": "", "caption": ""},
    ArrayKind.TESTIMONIALS: {
        "name": "",
        "text": "",
        "role": "",
        "company": "",
        "image": "",
    },
    ArrayKind.TEAM_MEMBERS: {"name": "", "role": "", "bio": "", "image": ""},
    ArrayKind.FAQS: {"question": "", "answer": ""},
    ArrayKind.CLIENT_LOGOS: {"src": "", "alt": ""},
    ArrayKind.CTA_BUTTONS: {"text": "", "link": ""},
    ArrayKind.GENERIC: {"key": "", "type": "text", "content": ""},
}


def blank_item(kind: str) -> dict[str, Any]:
    """Return a fresh empty native item for ``kind``."""
    try:
        return dict(_BLANK_ITEMS[ArrayKind(kind)])
    except (KeyError, ValueError):
        return dict(_BLANK_ITEMS[ArrayKind.GENERIC])
