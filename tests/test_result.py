"""Unit tests for the result dataclasses."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from content_tree import ExtractedField, FieldChange, OutdatedStatus


class TestExtractedField:
    """Tests for ExtractedField."""

    def test_source_value_defaults_to_none(self) -> None:
        assert ExtractedField("Welcome").source_value is None

    def test_frozen(self) -> None:
        field = ExtractedField("Welcome")
        with pytest.raises(FrozenInstanceError):
            field.value = "other"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({ExtractedField("a"), ExtractedField("a")}) == 1


class TestFieldChange:
    """Tests for FieldChange."""

    def test_payload_uses_wire_keys(self) -> None:
        assert FieldChange("Bienvenue", "Welcome").to_payload() == {
            "value": "Bienvenue",
            "sourceText": "Welcome",
        }

    def test_payload_is_fresh_dict(self) -> None:
        change = FieldChange("a", "b")
        change.to_payload()["value"] = "mutated"
        assert change.to_payload()["value"] == "a"

    def test_equality(self) -> None:
        assert FieldChange("a", "b") == FieldChange(value="a", source_text="b")


class TestOutdatedStatus:
    """Tests for OutdatedStatus."""

    def test_stored_hash_default(self) -> None:
        status = OutdatedStatus(outdated=False, missing=True, current_hash="abc")
        assert status.stored_hash is None

    def test_frozen(self) -> None:
        status = OutdatedStatus(outdated=False, missing=True, current_hash="abc")
        with pytest.raises(FrozenInstanceError):
            status.outdated = True  # type: ignore[misc]
