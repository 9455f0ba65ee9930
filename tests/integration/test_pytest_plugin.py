"""Integration tests for the content-tree pytest plugin.

These tests verify that the assert_overlay_round_trip fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require content-tree to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import copy
import subprocess
import sys
from pathlib import Path
from typing import Any

from content_tree import FieldChange, OverlayConfig

BASE = [
    {
        "key": "Hero",
        "items": [{"key": "h1", "type": "heading", "content": "Welcome", "title": "Main"}],
        "props": {"cta": "Buy"},
    }
]


def translated(**edits: str) -> list[dict[str, Any]]:
    page = copy.deepcopy(BASE)
    item = page[0]["items"][0]
    for name, value in edits.items():
        if name == "cta":
            page[0]["props"]["cta"] = value
        else:
            item[name] = value
    return page


def test_fixture_returns_callable(assert_overlay_round_trip: Any) -> None:
    """The fixture should return a callable, not a direct assertion result."""
    assert callable(assert_overlay_round_trip)


def test_fixture_passes_and_returns_changes(assert_overlay_round_trip: Any) -> None:
    changes = assert_overlay_round_trip(translated(content="Bienvenue", cta="Acheter"), BASE)
    assert changes == {
        "component_Hero.items[0].content": FieldChange("Bienvenue", "Welcome"),
        "component_Hero.props.cta": FieldChange("Acheter", "Buy"),
    }


def test_fixture_identical_pages(assert_overlay_round_trip: Any) -> None:
    assert assert_overlay_round_trip(copy.deepcopy(BASE), BASE) == {}


def test_fixture_custom_config(assert_overlay_round_trip: Any) -> None:
    """A custom OverlayConfig is forwarded to diff() and extract_text()."""
    changes = assert_overlay_round_trip(
        translated(content="Bienvenue", title="Principal"),
        BASE,
        config=OverlayConfig(text_fields=("title",)),
    )
    assert list(changes) == ["component_Hero.items[0].title"]


def test_fixture_leaves_base_untouched(assert_overlay_round_trip: Any) -> None:
    snapshot = copy.deepcopy(BASE)
    assert_overlay_round_trip(translated(content="Hola"), BASE)
    assert snapshot == BASE


def test_plugin_discovery() -> None:
    """Verify assert_overlay_round_trip appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_overlay_round_trip" in result.stdout, (
        f"assert_overlay_round_trip not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
