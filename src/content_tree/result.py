"""Result dataclasses returned by extraction, diffing and outdated checks."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExtractedField", "FieldChange", "OutdatedStatus"]


@dataclass(frozen=True, slots=True)
class ExtractedField:
    """A translatable value found at a leaf path.

    Attributes:
        value:        Current text at the path.
        source_value: Text of the same path in a reference tree, when the
            caller paired the extraction with one; otherwise None.
    """

    value: str
    source_value: str | None = None


@dataclass(frozen=True, slots=True)
class FieldChange:
    """One changed leaf reported by ``diff``.

    Attributes:
        value:       Text in the current tree.
        source_text: Text in the base snapshot.
    """

    value: str
    source_text: str

    def to_payload(self) -> dict[str, str]:
        """Return the ``{"value", "sourceText"}`` shape sent to a translation store."""
        return {"value": self.value, "sourceText": self.source_text}


@dataclass(frozen=True, slots=True)
class OutdatedStatus:
    """Freshness of a stored translation against the current source text.

    Attributes:
        outdated:     True when the stored source hash differs from the hash
            of the current text.
        missing:      True when no translation is stored for the path.
        current_hash: Hash of the current source text.
        stored_hash:  Hash recorded with the stored translation, or None.
    """

    outdated: bool
    missing: bool
    current_hash: str
    stored_hash: str | None = None
