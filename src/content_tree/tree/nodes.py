"""Node model for page content trees.

A page tree is kept as plain JSON-compatible Python values (dicts, lists and
strings) so that it can be saved verbatim and so that keys this library does
not know about survive every transform.  The ``TypedDict`` classes below
document the expected shapes for type checkers only; nothing is wrapped at
runtime.

Shapes (leaves first):

- ``LeafField``      one editable unit (text, heading, image, button ...)
- ``HoursEntry``     ``{"day", "time"}`` pair inside an ``hours`` list
- ``TabGroup``       ``{"label", "content": [ContainerNode, ...]}``
- ``ContainerNode``  a LeafField that may also own ``items``, ``tabs``,
                     ``hours`` and/or a ``props`` bag
- ``Component``      root editable unit of a page
- ``Page``           ordered list of components
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, NotRequired, TypedDict

__all__ = [
    "ArrayKind",
    "Component",
    "ContainerNode",
    "FieldType",
    "HoursEntry",
    "LeafField",
    "Page",
    "PathStep",
    "Segment",
    "TabGroup",
    "as_dict",
    "as_list",
    "clone_page",
]


class FieldType(StrEnum):
    """Known values of a node's ``type`` attribute.

    Informational only: the type controls which sibling attributes are
    meaningful to an editor, never how a node is diffed or patched.  Trees
    may carry types outside this enumeration.
    """

    TEXT = auto()
    TEXTAREA = auto()
    HEADING = auto()
    IMAGE = auto()
    BUTTON = auto()
    LINK = auto()
    ARRAY = auto()
    TABS = auto()
    HOURS = auto()
    CAROUSEL = auto()
    GALLERY = auto()


class ArrayKind(StrEnum):
    """Semantic category of a component's repeatable list.

    Values match the native property names where one exists, so
    ``ArrayKind.TEAM_MEMBERS == "teamMembers"``.
    """

    CAROUSEL = "carousel"
    GALLERY = "gallery"
    TESTIMONIALS = "testimonials"
    TEAM_MEMBERS = "teamMembers"
    FAQS = "faqs"
    CLIENT_LOGOS = "clientLogos"
    CTA_BUTTONS = "ctaButtons"
    GENERIC = "generic"


class Segment(StrEnum):
    """Container segments that may appear in a leaf path."""

    ITEMS = auto()
    TABS = auto()
    CONTENT = auto()
    HOURS = auto()
    PROPS = auto()


class LeafField(TypedDict):
    key: str
    type: str
    content: NotRequired[str]
    src: NotRequired[str]
    alt: NotRequired[str]
    link: NotRequired[str]


class HoursEntry(TypedDict):
    day: str
    time: str


class TabGroup(TypedDict):
    label: str
    content: list[ContainerNode]


class ContainerNode(LeafField):
    items: NotRequired[list[ContainerNode]]
    tabs: NotRequired[list[TabGroup]]
    hours: NotRequired[list[HoursEntry]]
    props: NotRequired[dict[str, str]]


class Component(TypedDict):
    key: str
    type: str
    items: list[ContainerNode]
    props: NotRequired[dict[str, str]]


Page = list[Component]


@dataclass(frozen=True, slots=True)
class PathStep:
    """One hop of a leaf address below a component.

    Attributes:
        segment: Which container is entered (see ``Segment``).
        index:   Position inside the container list.  Required for every
                 segment except ``PROPS``.
        key:     Property name for ``PROPS`` steps; ``None`` otherwise.
    """

    segment: Segment
    index: int | None = None
    key: str | None = None

    def __post_init__(self) -> None:
        if self.segment == Segment.PROPS:
            if not self.key:
                msg = "props step requires a non-empty key"
                raise ValueError(msg)
            if self.index is not None:
                msg = f"props step takes no index, got {self.index}"
                raise ValueError(msg)
            return
        if self.index is None or self.index < 0:
            msg = f"{self.segment} step requires an index >= 0, got {self.index}"
            raise ValueError(msg)
        if self.key is not None:
            msg = f"{self.segment} step takes no key, got {self.key!r}"
            raise ValueError(msg)


def as_list(value: Any) -> list[Any]:
    """Return ``value`` when it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def as_dict(value: Any) -> dict[str, Any]:
    """Return ``value`` when it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}


def clone_page(page: Any) -> list[Any]:
    """Deep-copy a page so the result shares no nested list or dict with it.

    A value that is not a list degrades to a fresh empty page.
    """
    return copy.deepcopy(as_list(page))
