"""OverlayConfig: which leaf attributes count as translatable text.

OverlayConfig is a frozen (immutable) dataclass shared by the extractor,
the differ and the outdated check.  The defaults are the fixed allow-list
used for page translation; tests and callers may narrow or reorder it.
"""

from __future__ import annotations

from dataclasses import dataclass

from content_tree.paths.addressor import is_field_name

__all__ = ["DEFAULT_HOURS_FIELDS", "DEFAULT_TEXT_FIELDS", "OverlayConfig"]

DEFAULT_TEXT_FIELDS: tuple[str, ...] = (
    "content",
    "title",
    "description",
    "label",
    "buttonText",
    "highlight",
    "alt",
    "address",
    "phone",
    "email",
)

DEFAULT_HOURS_FIELDS: tuple[str, ...] = ("day", "time")


@dataclass(frozen=True, slots=True)
class OverlayConfig:
    """Immutable configuration for text extraction.

    Attributes:
        text_fields:   Node attributes emitted, in emission order.
        hours_fields:  Attributes emitted for each ``hours`` entry.
        include_props: When True, every non-empty string in a ``props`` bag
            is emitted.  Default True.
    """

    text_fields: tuple[str, ...] = DEFAULT_TEXT_FIELDS
    hours_fields: tuple[str, ...] = DEFAULT_HOURS_FIELDS
    include_props: bool = True

    def __post_init__(self) -> None:
        for name, fields in (
            ("text_fields", self.text_fields),
            ("hours_fields", self.hours_fields),
        ):
            if isinstance(fields, str):
                msg = f"{name} must be a sequence of names, not a string"
                raise ValueError(msg)
            # Frozen dataclass: normalise through object.__setattr__.
            object.__setattr__(self, name, tuple(fields))
            values = getattr(self, name)
            if not all(isinstance(value, str) and value for value in values):
                msg = f"{name} must contain non-empty strings, got {values!r}"
                raise ValueError(msg)
            invalid = [value for value in values if not is_field_name(value)]
            if invalid:
                msg = f"{name} must be valid path field names, got {invalid!r}"
                raise ValueError(msg)
            if len(set(values)) != len(values):
                msg = f"{name} must not contain duplicates, got {values!r}"
                raise ValueError(msg)
        if not self.text_fields:
            msg = "text_fields must not be empty"
            raise ValueError(msg)

    @classmethod
    def with_fields(cls, fields: object) -> OverlayConfig:
        """Build a config from a caller-supplied allow-list.

        Sets are ordered by the default allow-list first, then
        alphabetically, so emission order stays deterministic.
        """
        if isinstance(fields, set | frozenset):
            known = [name for name in DEFAULT_TEXT_FIELDS if name in fields]
            extra = sorted(name for name in fields if name not in DEFAULT_TEXT_FIELDS)
            return cls(text_fields=(*known, *extra))
        return cls(text_fields=tuple(fields))  # type: ignore[call-overload]
