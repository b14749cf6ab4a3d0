# dashboard/application/cms/rules.py
from typing import Any, Dict, List
from dashboard.models.site_document import SiteDocument
from dashboard.normalizers.rules import normalize_rule_sets
from dashboard.extensions import db
from dashboard.utils.transaction import transactional
from dashboard.utils.audit import log_action


def list_rules() -> List[Dict[str, Any]]:
    document = SiteDocument.current()
    rules = list(document.game_rules or []) if document else []
    return sorted(rules, key=lambda r: r.get("order", 0))


def save_rules(*, rules: Any) -> List[Dict[str, Any]]:
    """
    Replace the game rule sets; list position becomes each set's order.
    """
    cleaned = normalize_rule_sets(rules)

    with transactional():
        document = SiteDocument.current_or_new()
        document.game_rules = cleaned
        db.session.flush()

        log_action(
            action="rules.save",
            entity_type="game_rules",
            entity_id=document.id,
            payload={"count": len(cleaned)},
        )

    return cleaned
