from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from dashboard.extensions import db
from dashboard.models.audit_log import AuditLog
from typing import Optional


def current_actor() -> Optional[str]:
    verify_jwt_in_request(optional=True)
    return get_jwt_identity()


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    actor_id = current_actor()
    if not actor_id:
        return  # Skip logging for anonymous calls
    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or ""
    log.payload = payload or {}

    db.session.add(log)
