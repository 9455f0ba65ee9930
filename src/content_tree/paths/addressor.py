"""Leaf-path addressing: build and parse the canonical address of a leaf.

Grammar::

    path      = "component_" identity step* terminal
    step      = "." segment "[" index "]"        segment in items|tabs|content|hours
    terminal  = "." field | "." "props." prop_key

Examples::

    component_Hero.items[0].content
    component_Hero.items[2].items[0].title
    component_Info.items[0].tabs[1].label
    component_Info.items[0].tabs[1].content[0].content
    component_Info.items[0].hours[3].day
    component_Hero.props.subtitle
    component_Hero.items[0].props.ctaText

A path is a pure function of structural position, never of content, so it
is stable across edits to unrelated fields.  Two leaves in two trees are the
same field exactly when their paths are equal.

The identity ends at the first "." that is followed by a step or by
``props.``; identities containing such a sequence cannot be round-tripped.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from cachetools import LRUCache, cached

from content_tree.errors import PathSyntaxError
from content_tree.tree.nodes import PathStep, Segment

__all__ = [
    "ParsedPath",
    "component_identity",
    "is_field_name",
    "leaf_path",
    "parse_path",
]

_PREFIX = "component_"

_IDENTITY = re.compile(
    r"component_(?P<identity>.+?)\.(?=(?:items|tabs|content|hours)\[\d+\]|props\.)"
)
_STEP = re.compile(r"(?P<segment>items|tabs|content|hours)\[(?P<index>\d+)\]")
_PROPS = re.compile(r"props\.(?P<key>.+)")
_FIELD = re.compile(r"[A-Za-z_$][\w$-]*")


def is_field_name(name: Any) -> bool:
    """Return True when ``name`` can end a path and parse back unchanged."""
    return isinstance(name, str) and _FIELD.fullmatch(name) is not None


# Parsed paths are immutable, so one process-wide cache is shared by all callers.
_PARSE_CACHE: LRUCache[Any, ParsedPath] = LRUCache(maxsize=4096)


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """Structured form of a leaf path.

    Attributes:
        identity: Component identity (key, type or positional index).
        steps:    Container hops below the component.  A trailing ``PROPS``
                  step addresses a props-bag entry.
        field:    Leaf attribute name; None for props-bag entries.
    """

    identity: str
    steps: tuple[PathStep, ...]
    field: str | None

    def __str__(self) -> str:
        return leaf_path(self.identity, self.steps, self.field)


def component_identity(component: Mapping[str, Any], index: int) -> str:
    """Return the identity used in a component's paths.

    ``key`` when present and non-empty, else ``type``, else the component's
    position on the page.  Two key-less components of the same type share
    an identity; that collision is left unresolved.
    """
    for attr in ("key", "type"):
        value = component.get(attr)
        if value is not None and value != "":
            return str(value)
    return str(index)


def leaf_path(
    identity: str | int,
    chain: Iterable[PathStep],
    field: str | None = None,
) -> str:
    """Build the canonical path string of a leaf.

    Args:
        identity: Component identity (see ``component_identity``).
        chain:    Container hops from the component down to the leaf's node.
                  A ``PROPS`` step may only appear last.
        field:    Leaf attribute name.  Must be None when the chain ends with
                  a ``PROPS`` step and set otherwise.

    Returns:
        The path string, e.g. ``"component_Hero.items[0].content"``.

    Raises:
        ValueError: If the chain is empty or the props/field rules are broken.
    """
    steps = tuple(chain)
    if not steps:
        msg = "a leaf path needs at least one step below the component"
        raise ValueError(msg)

    parts = [f"{_PREFIX}{identity}"]
    for position, step in enumerate(steps):
        if step.segment == Segment.PROPS:
            if position != len(steps) - 1 or field is not None:
                msg = "a props step must be the last part of a path"
                raise ValueError(msg)
            parts.append(f"props.{step.key}")
        else:
            parts.append(f"{step.segment}[{step.index}]")

    if steps[-1].segment != Segment.PROPS:
        if not field:
            msg = "a leaf path must end with a field or a props key"
            raise ValueError(msg)
        parts.append(field)
    return ".".join(parts)


def parse_path(path: str) -> ParsedPath:
    """Parse a path string back into its identity, steps and field.

    Results are memoised in a bounded LRU cache.

    Raises:
        PathSyntaxError: If ``path`` does not follow the grammar.
    """
    if not isinstance(path, str):
        raise PathSyntaxError(repr(path), "path must be a string")
    return _parse(path)


@cached(_PARSE_CACHE, lock=threading.Lock())
def _parse(path: str) -> ParsedPath:
    head = _IDENTITY.match(path)
    if head is None:
        raise PathSyntaxError(path, "expected 'component_<identity>.' prefix")

    identity = head.group("identity")
    steps: list[PathStep] = []
    pos = head.end()
    while True:
        step = _STEP.match(path, pos)
        if step is not None:
            steps.append(
                PathStep(Segment(step.group("segment")), index=int(step.group("index")))
            )
            pos = step.end()
            if pos == len(path) or path[pos] != ".":
                raise PathSyntaxError(path, f"expected '.' at offset {pos}")
            pos += 1
            continue

        props = _PROPS.fullmatch(path, pos)
        if props is not None:
            steps.append(PathStep(Segment.PROPS, key=props.group("key")))
            return ParsedPath(identity, tuple(steps), None)

        field = _FIELD.fullmatch(path, pos)
        if field is not None and steps:
            return ParsedPath(identity, tuple(steps), field.group(0))

        raise PathSyntaxError(path, f"unexpected text at offset {pos}")
