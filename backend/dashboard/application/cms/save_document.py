# dashboard/application/cms/save_document.py
from typing import Any, Dict, List
from flask import current_app
from dashboard.extensions import db
from dashboard.models.site_document import SiteDocument
from dashboard.utils.transaction import transactional
from dashboard.utils.versioning import version_of
from dashboard.utils.audit import current_actor, log_action
from dashboard.domain.invariants.document import assert_document


class DocumentWriteError(RuntimeError):
    pass


def save_document(
    *,
    content: Dict[str, Any],
    history: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Persist the site content together with its version history.

    Responsibilities:
    - bound the history to HISTORY_LIMIT entries (oldest dropped)
    - invariant enforcement
    - audit logging
    - read the stored document back so the caller sees what was persisted
    """
    limit = current_app.config["HISTORY_LIMIT"]
    history = list(history)[:limit]

    assert_document(content, history, history_limit=limit)

    with transactional():
        document = SiteDocument.current_or_new()
        document.content = content
        document.history = history
        document.updated_by = current_actor()
        db.session.flush()

        log_action(
            action="document.save",
            entity_type="site_document",
            entity_id=document.id,
            payload={
                "version": version_of(content, default=""),
                "history_length": len(history),
            },
        )

    db.session.expire_all()
    saved = SiteDocument.current()
    if saved is None or not saved.has_content:
        current_app.logger.error("Failed to read back saved content after write")
        raise DocumentWriteError("Failed to save content")

    return saved.to_dict()
