"""Array-kind normalizer: find a component's repeatable list and edit it.

The same logical list can live under several property names depending on the
component type and on which migration last touched the data.  Detection is a
single ordered table of ``ArrayKindRule`` entries evaluated top to bottom;
for each rule every item of the component is tried in order, and the first
hit wins.  Property priority therefore dominates item order: a component
holding both ``testimonials`` and ``faqs`` is always ``testimonials``, no
matter which item carries which list.

Every function here returns new values and degrades malformed input
(``items`` that is not a list, items that are not dicts) to "no list".
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from content_tree.tree.adapters import blank_item
from content_tree.tree.nodes import ArrayKind, as_dict, as_list

__all__ = [
    "ArrayKindMatch",
    "ArrayKindRule",
    "add_array_item",
    "detect_array_kind",
    "get_array_items",
    "has_array_content",
    "move_array_item",
    "remove_array_item",
    "set_array_items",
]


@dataclass(frozen=True, slots=True)
class ArrayKindRule:
    """One row of the detection table.

    Attributes:
        predicate:     Called with each component item (a dict); True on match.
        kind:          Kind reported on match.
        property_name: Item property holding the list.
    """

    predicate: Callable[[Mapping[str, Any]], bool]
    kind: ArrayKind
    property_name: str


@dataclass(frozen=True, slots=True)
class ArrayKindMatch:
    """Result of ``detect_array_kind``.

    Attributes:
        kind:          Detected kind.
        property_name: Property holding the list.
        item_index:    Index of the component item holding the list, or None
                       when nothing matched (``generic``/``items`` fallback).
    """

    kind: ArrayKind
    property_name: str
    item_index: int | None = None


def _non_empty(prop: str) -> Callable[[Mapping[str, Any]], bool]:
    def predicate(item: Mapping[str, Any]) -> bool:
        return bool(as_list(item.get(prop)))

    return predicate


def _typed_non_empty(type_: str, prop: str) -> Callable[[Mapping[str, Any]], bool]:
    def predicate(item: Mapping[str, Any]) -> bool:
        return item.get("type") == type_ and bool(as_list(item.get(prop)))

    return predicate


_RULES: tuple[ArrayKindRule, ...] = (
    ArrayKindRule(_typed_non_empty("carousel", "images"), ArrayKind.CAROUSEL, "images"),
    ArrayKindRule(_typed_non_empty("gallery", "value"), ArrayKind.GALLERY, "value"),
    ArrayKindRule(_non_empty("testimonials"), ArrayKind.TESTIMONIALS, "testimonials"),
    ArrayKindRule(_non_empty("teamMembers"), ArrayKind.TEAM_MEMBERS, "teamMembers"),
    ArrayKindRule(_non_empty("faqs"), ArrayKind.FAQS, "faqs"),
    ArrayKindRule(_non_empty("slides"), ArrayKind.CAROUSEL, "slides"),
    ArrayKindRule(_non_empty("clientLogos"), ArrayKind.CLIENT_LOGOS, "clientLogos"),
    ArrayKindRule(_non_empty("ctaButtons"), ArrayKind.CTA_BUTTONS, "ctaButtons"),
    ArrayKindRule(_non_empty("items"), ArrayKind.GENERIC, "items"),
)

_FALLBACK = ArrayKindMatch(kind=ArrayKind.GENERIC, property_name="items")


def detect_array_kind(component: Any) -> ArrayKindMatch:
    """Detect which item property of ``component`` holds its repeatable list.

    Args:
        component: A component dict.  Malformed values detect as generic.

    Returns:
        The first ``ArrayKindMatch`` produced by the rule table, or
        ``generic``/``items`` with ``item_index=None`` when nothing matches.
    """
    items = as_list(as_dict(component).get("items"))
    for rule in _RULES:
        for index, item in enumerate(items):
            if isinstance(item, dict) and rule.predicate(item):
                return ArrayKindMatch(rule.kind, rule.property_name, index)
    return _FALLBACK


def get_array_items(component: Any) -> list[Any]:
    """Return the detected list (the live list, not a copy), or []."""
    match = detect_array_kind(component)
    if match.item_index is None:
        return []
    item = as_dict(component)["items"][match.item_index]
    return as_list(item.get(match.property_name))


def set_array_items(component: Any, new_items: list[Any]) -> dict[str, Any]:
    """Return a copy of ``component`` with its detected list replaced.

    The list is written on the item that holds it, or on the first item when
    detection fell back to ``generic``.  All other fields of that item and
    all other items are kept.  A component without items gains one item
    holding the list.

    Args:
        component: The component to update; never mutated.
        new_items: Replacement list; deep-copied into the result.

    Returns:
        A new component dict.
    """
    match = detect_array_kind(component)
    updated = copy.deepcopy(as_dict(component))
    items = as_list(updated.get("items"))
    updated["items"] = items
    replacement = copy.deepcopy(list(new_items))

    target = match.item_index if match.item_index is not None else 0
    if target >= len(items):
        items.append({match.property_name: replacement})
    elif isinstance(items[target], dict):
        items[target][match.property_name] = replacement
    else:
        items[target] = {match.property_name: replacement}
    return updated


def has_array_content(component: Any) -> bool:
    """Return True when the component should be edited as a list.

    True when detection yields a kind other than generic, or when any item
    has a non-empty ``items``, ``images`` or ``value`` list.
    """
    if detect_array_kind(component).kind != ArrayKind.GENERIC:
        return True
    for item in as_list(as_dict(component).get("items")):
        if not isinstance(item, dict):
            continue
        if any(as_list(item.get(prop)) for prop in ("items", "images", "value")):
            return True
    return False


def add_array_item(component: Any, item: Any = None) -> dict[str, Any]:
    """Append ``item`` (or a blank item of the detected kind) to the list."""
    kind = detect_array_kind(component).kind
    new_item = blank_item(kind) if item is None else item
    return set_array_items(component, [*get_array_items(component), new_item])


def remove_array_item(component: Any, index: int) -> dict[str, Any]:
    """Remove the list entry at ``index``; out-of-range is a plain copy."""
    items = list(get_array_items(component))
    if not 0 <= index < len(items):
        return copy.deepcopy(as_dict(component))
    del items[index]
    return set_array_items(component, items)


def move_array_item(component: Any, index: int, offset: int) -> dict[str, Any]:
    """Move the entry at ``index`` by ``offset`` positions (e.g. -1 = up).

    A move whose source or destination falls outside the list returns a
    plain copy.
    """
    items = list(get_array_items(component))
    destination = index + offset
    if not (0 <= index < len(items) and 0 <= destination < len(items)):
        return copy.deepcopy(as_dict(component))
    items.insert(destination, items.pop(index))
    return set_array_items(component, items)
