"""Structural protocols for the services content-tree talks to.

The core never performs I/O itself.  ``TranslationSession`` calls out
through these protocols; any object with conformant methods satisfies them
at runtime, no inheritance required.

Example::

    from content_tree.protocols import TranslationService

    class MyService:
        def fetch_overlay(self, content_type, content_id, language):
            return {"component_Hero.items[0].content": "Bonjour"}

        def save_translations(self, content_type, content_id, language, fields):
            return True

    assert isinstance(MyService(), TranslationService)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TranslationService(Protocol):
    """Fetches and stores per-language overlays for a content item.

    ``fetch_overlay`` returns path -> value, where a value may be a plain
    string or a mapping with a ``"value"`` key.  ``save_translations``
    receives path -> ``{"value": ..., "sourceText": ...}`` and returns True
    on success.
    """

    def fetch_overlay(
        self, content_type: str, content_id: int, language: str
    ) -> Mapping[str, Any]: ...

    def save_translations(
        self,
        content_type: str,
        content_id: int,
        language: str,
        fields: Mapping[str, Mapping[str, str]],
    ) -> bool: ...


@runtime_checkable
class PageStore(Protocol):
    """Loads and saves a page tree verbatim."""

    def load(self, content_id: int) -> list[Any]: ...

    def save(self, content_id: int, page: list[Any]) -> None: ...
