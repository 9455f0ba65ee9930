"""Tests for TextExtractor: walk order, allow-list, containers and malformed input."""

from __future__ import annotations

from typing import Any

import pytest

from content_tree.algorithm.config import OverlayConfig
from content_tree.algorithm.extractor import TextExtractor, is_text
from content_tree.result import ExtractedField


@pytest.fixture
def extractor() -> TextExtractor:
    return TextExtractor()


def values(fields: dict[str, ExtractedField]) -> dict[str, str]:
    return {path: field.value for path, field in fields.items()}


RICH_PAGE: list[dict[str, Any]] = [
    {
        "key": "Hero",
        "type": "hero",
        "items": [
            {
                "key": "h1",
                "type": "heading",
                "content": "Welcome",
                "title": "Main",
                "src": "hero.png",
                "link": "/start",
            },
            {
                "key": "list",
                "type": "array",
                "items": [
                    {"key": "a", "type": "text", "content": "First"},
                    {"key": "b", "type": "button", "buttonText": "Go"},
                ],
            },
        ],
        "props": {"subtitle": "Sub", "empty": "  ", "count": 3},
    },
    {
        "key": "Info",
        "type": "info",
        "items": [
            {
                "key": "tabs",
                "type": "tabs",
                "tabs": [
                    {
                        "label": "Tab A",
                        "content": [{"key": "t", "type": "text", "content": "In tab"}],
                    }
                ],
                "hours": [{"day": "Monday", "time": "9-5"}, {"day": "Sunday", "time": ""}],
                "props": {"note": "Closed on holidays"},
            }
        ],
    },
]


class TestWalkOrder:
    def test_full_page_in_tree_order(self, extractor: TextExtractor) -> None:
        assert list(values(extractor.extract(RICH_PAGE)).items()) == [
            ("component_Hero.items[0].content", "Welcome"),
            ("component_Hero.items[0].title", "Main"),
            ("component_Hero.items[1].items[0].content", "First"),
            ("component_Hero.items[1].items[1].buttonText", "Go"),
            ("component_Hero.props.subtitle", "Sub"),
            ("component_Info.items[0].tabs[0].label", "Tab A"),
            ("component_Info.items[0].tabs[0].content[0].content", "In tab"),
            ("component_Info.items[0].hours[0].day", "Monday"),
            ("component_Info.items[0].hours[0].time", "9-5"),
            ("component_Info.items[0].hours[1].day", "Sunday"),
            ("component_Info.items[0].props.note", "Closed on holidays"),
        ]

    def test_deterministic(self, extractor: TextExtractor) -> None:
        assert list(extractor.extract(RICH_PAGE)) == list(extractor.extract(RICH_PAGE))

    def test_source_value_is_none(self, extractor: TextExtractor) -> None:
        fields = extractor.extract(RICH_PAGE)
        assert all(field.source_value is None for field in fields.values())

    def test_fields_follow_config_order(self) -> None:
        page = [{"key": "C", "items": [{"title": "T", "content": "C"}]}]
        fields = TextExtractor(OverlayConfig(text_fields=("title", "content"))).extract(page)
        assert list(fields) == ["component_C.items[0].title", "component_C.items[0].content"]


class TestAllowList:
    def test_non_text_attributes_skipped(self, extractor: TextExtractor) -> None:
        page = [{"key": "C", "items": [{"src": "a.png", "link": "/x", "key": "k", "type": "t"}]}]
        assert extractor.extract(page) == {}

    def test_every_default_field(self, extractor: TextExtractor) -> None:
        node = {name: f"v-{name}" for name in OverlayConfig().text_fields}
        fields = extractor.extract([{"key": "C", "items": [node]}])
        assert len(fields) == 10

    def test_narrow_allow_list(self) -> None:
        page = [{"key": "C", "items": [{"content": "x", "title": "y"}]}]
        fields = TextExtractor(OverlayConfig(text_fields=("title",))).extract(page)
        assert values(fields) == {"component_C.items[0].title": "y"}

    def test_props_can_be_disabled(self) -> None:
        page = [{"key": "C", "items": [], "props": {"a": "b"}}]
        assert TextExtractor(OverlayConfig(include_props=False)).extract(page) == {}


class TestEmptyStrings:
    @pytest.mark.parametrize("value", ["", " ", "\n\t", None, 0, ["x"]])
    def test_non_text_values_skipped(self, extractor: TextExtractor, value: Any) -> None:
        page = [{"key": "C", "items": [{"content": value}]}]
        assert extractor.extract(page) == {}

    def test_is_text(self) -> None:
        assert is_text("a")
        assert is_text(" a ")
        assert not is_text("   ")
        assert not is_text(5)

    def test_value_kept_verbatim(self, extractor: TextExtractor) -> None:
        page = [{"key": "C", "items": [{"content": "  padded  "}]}]
        assert values(extractor.extract(page)) == {"component_C.items[0].content": "  padded  "}


class TestIdentity:
    def test_type_fallback(self, extractor: TextExtractor) -> None:
        page = [{"type": "hero", "items": [{"content": "x"}]}]
        assert list(extractor.extract(page)) == ["component_hero.items[0].content"]

    def test_index_fallback(self, extractor: TextExtractor) -> None:
        page = [{"items": [{"content": "a"}]}, {"items": [{"content": "b"}]}]
        assert list(extractor.extract(page)) == [
            "component_0.items[0].content",
            "component_1.items[0].content",
        ]

    def test_colliding_identities_later_value_wins(self, extractor: TextExtractor) -> None:
        page = [
            {"type": "text", "items": [{"content": "first"}]},
            {"type": "text", "items": [{"content": "second"}]},
        ]
        assert values(extractor.extract(page)) == {"component_text.items[0].content": "second"}


class TestMalformed:
    @pytest.mark.parametrize("page", [None, "page", {"key": "C"}, 42])
    def test_non_list_page(self, extractor: TextExtractor, page: Any) -> None:
        assert extractor.extract(page) == {}

    def test_non_dict_entries_keep_sibling_indices(self, extractor: TextExtractor) -> None:
        page = ["junk", {"items": ["junk", {"content": "kept"}]}]
        assert list(extractor.extract(page)) == ["component_1.items[1].content"]

    def test_malformed_containers_walk_as_empty(self, extractor: TextExtractor) -> None:
        page = [
            {
                "key": "C",
                "items": [
                    {
                        "content": "ok",
                        "items": "nope",
                        "tabs": [None, {"label": "L", "content": {"x": 1}}],
                        "hours": "24/7",
                        "props": ["a"],
                    }
                ],
                "props": "nope",
            }
        ]
        assert values(extractor.extract(page)) == {
            "component_C.items[0].content": "ok",
            "component_C.items[0].tabs[1].label": "L",
        }
