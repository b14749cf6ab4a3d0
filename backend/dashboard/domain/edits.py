"""
Pure editing transformations on a content aggregate.

Each function returns a new aggregate and leaves its argument untouched,
so any of them can be handed to ContentStore.mutate. Block ids are never
changed by an edit.
"""
from typing import Any, Dict, Iterable, List, Optional

from dashboard.defaults import BLOCK_TYPES, MENU_CATEGORIES
from dashboard.domain.invariants.exceptions import InvariantViolation
from dashboard.utils.ids import generate_id

Content = Dict[str, Any]

PAGE_FIELDS = {"title", "path", "heroTitle", "heroSubtitle"}
MENU_ITEM_FIELDS = {"name", "price", "category", "description"}


def _move(items: List[Any], source: int, destination: int) -> List[Any]:
    items = list(items)
    item = items.pop(source)
    items.insert(destination, item)
    return items


def _replace_page(content: Content, page_index: int, page: Dict[str, Any]) -> Content:
    pages = list(content["pages"])
    pages[page_index] = page
    return {**content, "pages": pages}


# ------------------------
# Fields
# ------------------------

def set_field(content: Content, field: str, value: Any) -> Content:
    if field == "__versionMeta":
        raise InvariantViolation("Version metadata is not editable content")
    return {**content, field: value}


def set_nav_links(content: Content, links: Iterable[Dict[str, str]]) -> Content:
    return {
        **content,
        "navLinks": [{"label": link["label"], "path": link["path"]} for link in links],
    }


# ------------------------
# Background images
# ------------------------

def add_background_image(content: Content, url: str = "") -> Content:
    return {**content, "backgroundImages": [*content["backgroundImages"], url]}


def set_background_image(content: Content, index: int, url: str) -> Content:
    images = list(content["backgroundImages"])
    images[index] = url
    return {**content, "backgroundImages": images}


def remove_background_image(content: Content, index: int) -> Content:
    images = [u for i, u in enumerate(content["backgroundImages"]) if i != index]
    return {**content, "backgroundImages": images}


# ------------------------
# Pages
# ------------------------

def add_page(
    content: Content,
    *,
    title: str = "New Page",
    path: str = "/new",
    hero_title: Optional[str] = None,
    hero_subtitle: str = "",
) -> Content:
    page = {
        "id": generate_id(),
        "title": title,
        "path": path,
        "heroTitle": title if hero_title is None else hero_title,
        "heroSubtitle": hero_subtitle,
        "blocks": [],
    }
    return {**content, "pages": [*content["pages"], page]}


def update_page(content: Content, page_index: int, **fields: Any) -> Content:
    unknown = set(fields) - PAGE_FIELDS
    if unknown:
        raise InvariantViolation(f"Page fields not editable: {sorted(unknown)}")
    page = content["pages"][page_index]
    return _replace_page(content, page_index, {**page, **fields})


def remove_page(content: Content, page_index: int) -> Content:
    pages = [p for i, p in enumerate(content["pages"]) if i != page_index]
    return {**content, "pages": pages}


def move_page(content: Content, source: int, destination: int) -> Content:
    return {**content, "pages": _move(content["pages"], source, destination)}


# ------------------------
# Blocks
# ------------------------

def add_block(content: Content, page_index: int, block_type: str, text: str = "") -> Content:
    if block_type not in BLOCK_TYPES:
        raise InvariantViolation(f"Unknown block type: {block_type}")
    page = content["pages"][page_index]
    block = {"id": generate_id(), "type": block_type, "text": text}
    return _replace_page(content, page_index, {**page, "blocks": [*page["blocks"], block]})


def update_block(content: Content, page_index: int, block_index: int, *, text: Optional[str] = None,
                 block_type: Optional[str] = None) -> Content:
    if block_type is not None and block_type not in BLOCK_TYPES:
        raise InvariantViolation(f"Unknown block type: {block_type}")

    page = content["pages"][page_index]
    blocks = list(page["blocks"])
    block = dict(blocks[block_index])
    if text is not None:
        block["text"] = text
    if block_type is not None:
        block["type"] = block_type
    blocks[block_index] = block
    return _replace_page(content, page_index, {**page, "blocks": blocks})


def remove_block(content: Content, page_index: int, block_index: int) -> Content:
    page = content["pages"][page_index]
    blocks = [b for i, b in enumerate(page["blocks"]) if i != block_index]
    return _replace_page(content, page_index, {**page, "blocks": blocks})


def move_block(content: Content, page_index: int, source: int, destination: int) -> Content:
    page = content["pages"][page_index]
    blocks = _move(page["blocks"], source, destination)
    return _replace_page(content, page_index, {**page, "blocks": blocks})


# ------------------------
# Menu
# ------------------------

def _check_category(category: str) -> None:
    if category not in MENU_CATEGORIES:
        raise InvariantViolation(f"Unknown menu category: {category}")


def add_menu_item(content: Content, *, name: str, price: str, category: str,
                  description: str = "") -> Content:
    if not name or not price:
        raise InvariantViolation("Menu items need a name and a price")
    _check_category(category)
    item = {
        "id": generate_id(),
        "name": name,
        "price": price,
        "category": category,
        "description": description,
    }
    return {**content, "menu": [*content.get("menu", []), item]}


def update_menu_item(content: Content, item_id: str, **fields: Any) -> Content:
    unknown = set(fields) - MENU_ITEM_FIELDS
    if unknown:
        raise InvariantViolation(f"Menu item fields not editable: {sorted(unknown)}")
    if "category" in fields:
        _check_category(fields["category"])

    menu = [
        {**item, **fields} if item["id"] == item_id else item
        for item in content.get("menu", [])
    ]
    return {**content, "menu": menu}


def remove_menu_items(content: Content, item_ids: Iterable[str]) -> Content:
    doomed = set(item_ids)
    menu = [item for item in content.get("menu", []) if item["id"] not in doomed]
    return {**content, "menu": menu}
