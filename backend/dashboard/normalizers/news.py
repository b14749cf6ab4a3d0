# dashboard/normalizers/news.py
from datetime import datetime, timezone
from typing import Any, Dict, List

from dashboard.domain.invariants.exceptions import InvariantViolation
from dashboard.utils.ids import generate_id

# Display format used by the editor, e.g. "05-03-2025 21:30"
NEWS_DATETIME_FORMAT = "%d-%m-%Y %H:%M"


def normalize_news_post(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validates an incoming news post and fills in id and datetime.

    Title and description (HTML) are required; images must be a list of URLs.
    """
    if not isinstance(data, dict):
        raise InvariantViolation("News posts must be objects.")

    title = (data.get("title") or "").strip() if isinstance(data.get("title"), str) else ""
    description = data.get("description") if isinstance(data.get("description"), str) else ""

    if not title or not description.strip():
        raise InvariantViolation("News posts need a title and a description.")

    images = data.get("images")
    if images is not None and not (
        isinstance(images, list) and all(isinstance(url, str) for url in images)
    ):
        raise InvariantViolation("News images must be a list of URLs.")

    post = {
        "id": data.get("id") if isinstance(data.get("id"), str) and data.get("id") else generate_id(),
        "title": title,
        "description": description,
        "bigImage": bool(data.get("bigImage", False)),
        "datetime": data.get("datetime") if isinstance(data.get("datetime"), str) and data.get("datetime")
        else datetime.now(timezone.utc).astimezone().strftime(NEWS_DATETIME_FORMAT),
    }
    if images:
        post["images"] = images

    return post


def remove_news_post(posts: List[Dict[str, Any]], post_id: str):
    """Returns (remaining posts, removed post or None)."""
    remaining = [p for p in posts if p.get("id") != post_id]
    removed = next((p for p in posts if p.get("id") == post_id), None)
    return remaining, removed
