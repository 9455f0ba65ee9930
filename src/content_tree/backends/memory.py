"""In-memory TranslationService and PageStore implementations.

Zero-dependency backends for tests, previews and single-process tools.  Both
satisfy their protocols structurally and copy values on the way in and out,
so callers can never alias the stored data.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from content_tree.algorithm.outdated import compute_source_hash

__all__ = ["InMemoryPageStore", "InMemoryTranslationService"]

_Key = tuple[str, int, str]


class InMemoryTranslationService:
    """Dict-backed translation store.

    Saved entries are kept in the same shape a remote store returns:
    path -> ``{"value", "sourceHash", "status"}``, so the output of
    ``fetch_overlay`` can be fed to both ``apply_overlay`` and
    ``check_outdated``.

    Example::

        service = InMemoryTranslationService()
        service.save_translations(
            "page", 1, "fr",
            {"component_Hero.items[0].content": {"value": "Bonjour", "sourceText": "Hello"}},
        )
        service.fetch_overlay("page", 1, "fr")
    """

    def __init__(self, status: str = "draft") -> None:
        self._status = status
        self._store: dict[_Key, dict[str, dict[str, Any]]] = {}

    def fetch_overlay(
        self, content_type: str, content_id: int, language: str
    ) -> dict[str, dict[str, Any]]:
        """Return a copy of the stored entries (empty when none)."""
        return copy.deepcopy(self._store.get((content_type, content_id, language), {}))

    def save_translations(
        self,
        content_type: str,
        content_id: int,
        language: str,
        fields: Mapping[str, Mapping[str, str]],
    ) -> bool:
        """Upsert every field; the source hash is taken from ``sourceText``."""
        entries = self._store.setdefault((content_type, content_id, language), {})
        for path, field in fields.items():
            entries[path] = {
                "value": field.get("value"),
                "sourceHash": compute_source_hash(field.get("sourceText")),
                "status": self._status,
            }
        return True

    def delete_translations(
        self, content_type: str, content_id: int, language: str
    ) -> int:
        """Drop every entry for one language; return how many were removed."""
        removed = self._store.pop((content_type, content_id, language), {})
        return len(removed)

    def languages(self, content_type: str, content_id: int) -> list[str]:
        """Return the languages holding at least one entry, sorted."""
        return sorted(
            language
            for (ctype, cid, language), entries in self._store.items()
            if ctype == content_type and cid == content_id and entries
        )


class InMemoryPageStore:
    """Dict-backed page store."""

    def __init__(self, pages: Mapping[int, list[Any]] | None = None) -> None:
        self._pages: dict[int, list[Any]] = copy.deepcopy(dict(pages or {}))

    def load(self, content_id: int) -> list[Any]:
        """Return a copy of the saved page.

        Raises:
            KeyError: If no page is stored under ``content_id``.
        """
        return copy.deepcopy(self._pages[content_id])

    def save(self, content_id: int, page: list[Any]) -> None:
        self._pages[content_id] = copy.deepcopy(page)
