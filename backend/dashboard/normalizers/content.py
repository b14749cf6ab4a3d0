# dashboard/normalizers/content.py
from __future__ import annotations

import copy
from typing import Any, Dict, List

from dashboard.config import HISTORY_LIMIT
from dashboard.defaults import (
    LIST_FIELDS,
    NEWS_NAV_LINK,
    RULES_NAV_LINK,
    STRING_FIELDS,
    default_content,
    default_value,
)
from dashboard.utils.ids import generate_id, looks_generated
from dashboard.utils.versioning import VERSION_META_KEY


def normalize_content(raw: Any) -> Dict[str, Any]:
    """
    Turn an externally loaded object into a structurally valid content aggregate.

    Guarantees:
    - every top-level collection is a list, every copy field a string
    - every block carries a machine-generated id, unique within its page
      (short or repeated ids are replaced)
    - the news and rules navigation links are present
    - the input is never modified; anything that is not a dict yields the defaults

    Idempotent: normalizing an already normalized aggregate changes nothing.
    """
    if not isinstance(raw, dict):
        return default_content()

    content = {**default_content(), **copy.deepcopy(raw)}

    for field in LIST_FIELDS:
        if not isinstance(content.get(field), list):
            content[field] = default_value(field)

    for field in STRING_FIELDS:
        if not isinstance(content.get(field), str):
            content[field] = default_value(field)

    if VERSION_META_KEY in content and not isinstance(content[VERSION_META_KEY], dict):
        del content[VERSION_META_KEY]

    content["pages"] = [_normalize_page(p) for p in content["pages"] if isinstance(p, dict)]
    content["menu"] = [_normalize_menu_item(m) for m in content["menu"] if isinstance(m, dict)]
    content["navLinks"] = _ensure_nav_links(content["navLinks"])

    return content


def normalize_history(raw: Any) -> List[Dict[str, Any]]:
    """Normalized ledger, newest first, bounded to HISTORY_LIMIT entries."""
    if not isinstance(raw, list):
        return []
    return [normalize_content(entry) for entry in raw if isinstance(entry, dict)][:HISTORY_LIMIT]


def normalize_document(raw: Any) -> Dict[str, Any]:
    """`{content, history}` pair from a fetched document."""
    if not isinstance(raw, dict):
        raw = {}
    return {
        "content": normalize_content(raw.get("content")),
        "history": normalize_history(raw.get("history")),
    }


def _normalize_page(page: Dict[str, Any]) -> Dict[str, Any]:
    blocks = page.get("blocks")
    if not isinstance(blocks, list):
        blocks = []

    normalized = []
    seen = set()
    for block in blocks:
        if not isinstance(block, dict):
            continue
        if not looks_generated(block.get("id")) or block["id"] in seen:
            block = {**block, "id": generate_id()}
        seen.add(block["id"])
        normalized.append(block)

    return {**page, "blocks": normalized}


def _normalize_menu_item(item: Dict[str, Any]) -> Dict[str, Any]:
    if isinstance(item.get("id"), str) and item["id"]:
        return item
    return {**item, "id": generate_id()}


def _has_link(links, path: str, label: str) -> bool:
    for link in links:
        if not isinstance(link, dict):
            continue
        link_label = link.get("label")
        if link.get("path") == path:
            return True
        if isinstance(link_label, str) and link_label.lower() == label.lower():
            return True
    return False


def _ensure_nav_links(links: List[Any]) -> List[Any]:
    links = list(links)
    for required in (NEWS_NAV_LINK, RULES_NAV_LINK):
        if not _has_link(links, required["path"], required["label"]):
            links.append(dict(required))
    return links
