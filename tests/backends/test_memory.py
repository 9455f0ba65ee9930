"""Tests for the in-memory translation service and page store."""

from __future__ import annotations

from content_tree import apply_overlay, compute_source_hash
from content_tree.backends import InMemoryPageStore, InMemoryTranslationService
from content_tree.protocols import PageStore, TranslationService

PATH = "component_Hero.items[0].content"


class TestInMemoryTranslationService:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryTranslationService(), TranslationService)

    def test_unknown_language_is_empty(self) -> None:
        assert InMemoryTranslationService().fetch_overlay("page", 1, "fr") == {}

    def test_save_and_fetch(self) -> None:
        service = InMemoryTranslationService()
        assert service.save_translations(
            "page", 1, "fr", {PATH: {"value": "Bonjour", "sourceText": "Hello"}}
        )
        assert service.fetch_overlay("page", 1, "fr") == {
            PATH: {
                "value": "Bonjour",
                "sourceHash": compute_source_hash("Hello"),
                "status": "draft",
            }
        }

    def test_custom_status(self) -> None:
        service = InMemoryTranslationService(status="published")
        service.save_translations("page", 1, "fr", {PATH: {"value": "x", "sourceText": "y"}})
        assert service.fetch_overlay("page", 1, "fr")[PATH]["status"] == "published"

    def test_save_upserts(self) -> None:
        service = InMemoryTranslationService()
        service.save_translations("page", 1, "fr", {PATH: {"value": "a", "sourceText": "s"}})
        service.save_translations(
            "page", 1, "fr", {"component_Hero.props.cta": {"value": "b", "sourceText": "t"}}
        )
        service.save_translations("page", 1, "fr", {PATH: {"value": "c", "sourceText": "s"}})
        overlay = service.fetch_overlay("page", 1, "fr")
        assert overlay[PATH]["value"] == "c"
        assert overlay["component_Hero.props.cta"]["value"] == "b"

    def test_keys_isolated(self) -> None:
        service = InMemoryTranslationService()
        service.save_translations("page", 1, "fr", {PATH: {"value": "a", "sourceText": "s"}})
        assert service.fetch_overlay("page", 2, "fr") == {}
        assert service.fetch_overlay("post", 1, "fr") == {}
        assert service.fetch_overlay("page", 1, "de") == {}

    def test_fetch_returns_copy(self) -> None:
        service = InMemoryTranslationService()
        service.save_translations("page", 1, "fr", {PATH: {"value": "a", "sourceText": "s"}})
        service.fetch_overlay("page", 1, "fr")[PATH]["value"] = "mutated"
        assert service.fetch_overlay("page", 1, "fr")[PATH]["value"] == "a"

    def test_overlay_feeds_apply_overlay(self) -> None:
        service = InMemoryTranslationService()
        service.save_translations("page", 1, "fr", {PATH: {"value": "Bonjour", "sourceText": "Hello"}})
        base = [{"key": "Hero", "items": [{"content": "Hello"}]}]
        patched = apply_overlay(base, service.fetch_overlay("page", 1, "fr"))
        assert patched[0]["items"][0]["content"] == "Bonjour"

    def test_languages_and_delete(self) -> None:
        service = InMemoryTranslationService()
        for language in ("fr", "de"):
            service.save_translations(
                "page", 1, language, {PATH: {"value": "x", "sourceText": "y"}}
            )
        assert service.languages("page", 1) == ["de", "fr"]
        assert service.delete_translations("page", 1, "fr") == 1
        assert service.languages("page", 1) == ["de"]
        assert service.delete_translations("page", 1, "fr") == 0


class TestInMemoryPageStore:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryPageStore(), PageStore)

    def test_round_trip_copies(self) -> None:
        page = [{"key": "Hero", "items": []}]
        store = InMemoryPageStore()
        store.save(3, page)
        page[0]["key"] = "changed"
        loaded = store.load(3)
        assert loaded == [{"key": "Hero", "items": []}]
        loaded[0]["items"].append({})
        assert store.load(3) == [{"key": "Hero", "items": []}]

    def test_initial_pages_copied(self) -> None:
        pages = {1: [{"key": "A"}]}
        store = InMemoryPageStore(pages)
        pages[1][0]["key"] = "B"
        assert store.load(1) == [{"key": "A"}]
