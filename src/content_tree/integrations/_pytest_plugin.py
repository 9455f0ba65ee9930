"""pytest plugin for content-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from content_tree import OverlayConfig, apply_overlay, diff, extract_text


@pytest.fixture(scope="session")
def assert_overlay_round_trip() -> Any:
    """Fixture that returns a callable overlay round-trip asserter.

    The callable diffs ``current`` against ``base``, applies the diff back
    onto ``base`` and checks that every diffed path now carries the current
    value while ``base`` itself is untouched.

    Usage in tests::

        def test_translation(assert_overlay_round_trip):
            assert_overlay_round_trip(translated_page, source_page)

    Returns:
        A callable ``_assert(current, base, config=None) -> dict`` that
        returns the applied diff, or raises ``AssertionError``.
    """

    def _assert(
        current: Any,
        base: Any,
        config: OverlayConfig | None = None,
    ) -> Any:
        """Assert that ``apply_overlay(base, diff(current, base))`` reproduces current.

        Raises:
            AssertionError: When a diffed path does not carry the current
                value after patching, listing every mismatching path.
        """
        before = extract_text(base, config=config)
        changes = diff(current, base, config=config)
        patched = apply_overlay(base, changes)
        patched_fields = extract_text(patched, config=config)

        mismatches = {
            path: (change.value, getattr(patched_fields.get(path), "value", None))
            for path, change in changes.items()
            if getattr(patched_fields.get(path), "value", None) != change.value
        }
        if mismatches:
            raise AssertionError(
                "overlay round-trip failed:\n"
                + "\n".join(
                    f"  {path}: expected={want!r} actual={got!r}"
                    for path, (want, got) in mismatches.items()
                )
            )
        if extract_text(base, config=config) != before:
            raise AssertionError("overlay round-trip mutated the base page")
        return changes

    return _assert
