"""Tests for dashboard/domain/edits.py."""
import copy

import pytest

from dashboard.defaults import default_content
from dashboard.domain import edits
from dashboard.domain.invariants.exceptions import InvariantViolation


@pytest.fixture
def content():
    c = default_content()
    for block_type in ("heading", "text", "quote"):
        c = edits.add_block(c, 0, block_type, text=f"{block_type} copy")
    return c


def block_ids(content, page_index=0):
    return [b["id"] for b in content["pages"][page_index]["blocks"]]


class TestBlocks:
    def test_add_block_assigns_a_fresh_id(self, content):
        ids = block_ids(content)
        assert len(ids) == 3
        assert len(set(ids)) == 3
        assert all(len(i) > 8 for i in ids)

    def test_editing_text_keeps_the_id(self, content):
        before = block_ids(content)
        edited = edits.update_block(content, 0, 1, text="<p>new</p>")

        assert block_ids(edited) == before
        assert edited["pages"][0]["blocks"][1]["text"] == "<p>new</p>"

    def test_moving_blocks_keeps_every_id(self, content):
        before = block_ids(content)
        moved = edits.move_block(content, 0, 0, 2)

        assert block_ids(moved) == [before[1], before[2], before[0]]
        assert sorted(block_ids(moved)) == sorted(before)

    def test_remove_block(self, content):
        before = block_ids(content)
        assert block_ids(edits.remove_block(content, 0, 1)) == [before[0], before[2]]

    def test_unknown_block_type_is_rejected(self, content):
        with pytest.raises(InvariantViolation):
            edits.add_block(content, 0, "video")
        with pytest.raises(InvariantViolation):
            edits.update_block(content, 0, 0, block_type="video")


def test_edits_never_modify_their_input(content):
    snapshot = copy.deepcopy(content)

    edits.update_block(content, 0, 0, text="x")
    edits.move_page(content, 0, 2)
    edits.set_field(content, "logoText", "New")
    edits.remove_background_image(content, 0)
    edits.add_menu_item(content, name="Cola", price="2.50", category="Drinks")

    assert content == snapshot


class TestPages:
    def test_add_page_looks_like_a_home_page(self):
        content = edits.add_page(default_content())
        page = content["pages"][-1]

        assert page["title"] == "New Page"
        assert page["path"] == "/new"
        assert page["heroTitle"] == "New Page"
        assert page["blocks"] == []

    def test_update_page_fields(self):
        content = edits.update_page(default_content(), 1, title="Kaart", heroSubtitle="Eten")
        assert content["pages"][1]["title"] == "Kaart"
        assert content["pages"][1]["heroSubtitle"] == "Eten"

    def test_update_page_rejects_block_replacement(self):
        with pytest.raises(InvariantViolation):
            edits.update_page(default_content(), 0, blocks=[])

    def test_move_and_remove_page(self):
        moved = edits.move_page(default_content(), 0, 2)
        assert [p["id"] for p in moved["pages"]] == ["menu", "contact", "home"]
        assert [p["id"] for p in edits.remove_page(moved, 0)["pages"]] == ["contact", "home"]


class TestMenu:
    def test_add_update_remove(self):
        content = edits.add_menu_item(default_content(), name="Bitterballen", price="6.50", category="Snacks")
        item_id = content["menu"][0]["id"]

        content = edits.update_menu_item(content, item_id, price="7.00")
        assert content["menu"][0]["price"] == "7.00"
        assert content["menu"][0]["id"] == item_id

        assert edits.remove_menu_items(content, [item_id])["menu"] == []

    def test_category_must_be_known(self):
        with pytest.raises(InvariantViolation):
            edits.add_menu_item(default_content(), name="X", price="1", category="Pizza")

    def test_name_and_price_are_required(self):
        with pytest.raises(InvariantViolation):
            edits.add_menu_item(default_content(), name="", price="1", category="Food")


def test_version_metadata_is_not_editable():
    with pytest.raises(InvariantViolation):
        edits.set_field(default_content(), "__versionMeta", {"version": "9"})


def test_background_images_and_navigation():
    content = edits.add_background_image(default_content(), "https://img/x.png")
    assert content["backgroundImages"][-1] == "https://img/x.png"

    content = edits.set_background_image(content, 0, "https://img/y.png")
    assert content["backgroundImages"][0] == "https://img/y.png"

    content = edits.set_nav_links(content, [{"label": "Home", "path": "/", "extra": 1}])
    assert content["navLinks"] == [{"label": "Home", "path": "/"}]
