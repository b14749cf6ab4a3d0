# dashboard/application/cms/news.py
from typing import Any, Dict, List
from dashboard.models.site_document import SiteDocument
from dashboard.normalizers.news import normalize_news_post, remove_news_post
from dashboard.utils.transaction import transactional
from dashboard.utils.audit import log_action


def list_news() -> List[Dict[str, Any]]:
    document = SiteDocument.current()
    return list(document.news or []) if document else []


def create_news_post(*, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Append a news post to the document's news collection.
    """
    post = normalize_news_post(data)

    with transactional():
        document = SiteDocument.current_or_new()
        document.news = [*(document.news or []), post]

        log_action(
            action="news.create",
            entity_type="news",
            entity_id=post["id"],
            payload={"title": post["title"]},
        )

    return post


def delete_news_post(*, post_id: str) -> bool:
    """
    Remove a news post. Returns False when no post has that id.
    """
    document = SiteDocument.current()
    if document is None:
        return False

    remaining, removed = remove_news_post(document.news or [], post_id)
    if removed is None:
        return False

    with transactional():
        document.news = remaining

        log_action(
            action="news.delete",
            entity_type="news",
            entity_id=post_id,
            payload={"title": removed.get("title")},
        )

    return True
