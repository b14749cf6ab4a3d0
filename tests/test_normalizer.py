"""Tests for dashboard/normalizers/content.py (snapshot normalizer)."""
import copy

import pytest

from dashboard.config import HISTORY_LIMIT
from dashboard.defaults import default_content
from dashboard.normalizers.content import (
    normalize_content,
    normalize_document,
    normalize_history,
)
from dashboard.utils.ids import generate_id
from dashboard.utils.versioning import VERSION_META_KEY


def legacy_content():
    return {
        "logoText": "Legacy",
        "pages": [
            {
                "id": "home",
                "title": "Home",
                "path": "/",
                "blocks": [
                    {"id": "b1", "type": "heading", "text": "Hi"},
                    {"type": "text", "text": "<p>no id</p>"},
                    {"id": 12345678901, "type": "quote", "text": "numeric id"},
                    {"id": "a-long-machine-id", "type": "divider", "text": ""},
                ],
            }
        ],
    }


class TestNonObjectInput:
    @pytest.mark.parametrize("raw", [None, "content", 42, ["a"], True])
    def test_falls_back_to_defaults(self, raw):
        assert normalize_content(raw) == default_content()


class TestMissingFields:
    def test_fills_missing_collections(self):
        content = normalize_content({"logoText": "X"})

        assert content["logoText"] == "X"
        for field in ("backgroundImages", "navLinks", "opening", "rates", "pages", "menu"):
            assert isinstance(content[field], list)
        assert content["pages"] == default_content()["pages"]

    def test_replaces_wrongly_typed_collections(self):
        content = normalize_content({"pages": "oops", "navLinks": None, "backgroundImages": {}})

        assert content["pages"] == default_content()["pages"]
        assert content["backgroundImages"] == default_content()["backgroundImages"]

    def test_replaces_non_string_contact_fields(self):
        content = normalize_content({"email": None, "tel": 5})

        assert content["email"] == default_content()["email"]
        assert content["tel"] == default_content()["tel"]

    def test_page_without_blocks_gets_an_empty_list(self):
        content = normalize_content({"pages": [{"id": "p", "title": "P", "path": "/p"}]})
        assert content["pages"][0]["blocks"] == []

    def test_drops_malformed_version_metadata(self):
        content = normalize_content({VERSION_META_KEY: "v3"})
        assert VERSION_META_KEY not in content

    def test_keeps_version_metadata(self):
        meta = {"version": "3", "timestamp": 1}
        assert normalize_content({VERSION_META_KEY: meta})[VERSION_META_KEY] == meta


class TestBlockIds:
    def test_short_missing_and_non_string_ids_are_replaced(self):
        blocks = normalize_content(legacy_content())["pages"][0]["blocks"]
        ids = [b["id"] for b in blocks]

        assert all(isinstance(i, str) and len(i) > 8 for i in ids)
        assert ids[3] == "a-long-machine-id"
        assert len(set(ids)) == 4

    def test_repeated_ids_within_a_page_are_replaced(self):
        shared = generate_id()
        raw = {"pages": [{"id": "p", "blocks": [
            {"id": shared, "type": "text", "text": "a"},
            {"id": shared, "type": "text", "text": "b"},
        ]}]}
        blocks = normalize_content(raw)["pages"][0]["blocks"]

        assert blocks[0]["id"] == shared
        assert blocks[1]["id"] != shared

    def test_block_order_and_text_are_preserved(self):
        blocks = normalize_content(legacy_content())["pages"][0]["blocks"]
        assert [b["text"] for b in blocks] == ["Hi", "<p>no id</p>", "numeric id", ""]

    def test_menu_items_without_id_get_one(self):
        content = normalize_content({"menu": [{"name": "Cola", "price": "2.50", "category": "Drinks"}]})
        assert len(content["menu"][0]["id"]) > 8


class TestNavigation:
    def test_news_and_rules_links_are_guaranteed(self):
        content = normalize_content({"navLinks": [{"label": "Home", "path": "/"}]})
        paths = [link["path"] for link in content["navLinks"]]

        assert paths == ["/", "/nieuws", "/spelregels"]

    def test_existing_links_matched_by_label_are_not_duplicated(self):
        links = [{"label": "NIEUWS", "path": "/news"}, {"label": "Rules", "path": "/spelregels"}]
        content = normalize_content({"navLinks": links})

        assert content["navLinks"] == links


def test_input_is_not_modified():
    raw = legacy_content()
    before = copy.deepcopy(raw)
    normalize_content(raw)
    assert raw == before


def test_is_idempotent():
    once = normalize_content(legacy_content())
    assert normalize_content(once) == once


def test_default_content_is_already_normal():
    assert normalize_content(default_content()) == default_content()


def test_history_is_bounded_and_skips_non_objects():
    raw = [{"logoText": str(i)} for i in range(HISTORY_LIMIT + 5)] + ["junk"]
    history = normalize_history(raw)

    assert len(history) == HISTORY_LIMIT
    assert history[0]["logoText"] == "0"
    assert normalize_history("nope") == []


def test_document_pair():
    document = normalize_document({"content": {"logoText": "Y"}, "history": None})

    assert document["content"]["logoText"] == "Y"
    assert document["history"] == []
    assert normalize_document(None)["content"] == default_content()
