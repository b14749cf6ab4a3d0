# dashboard/normalizers/rules.py
from typing import Any, Dict, List

from dashboard.domain.invariants.exceptions import InvariantViolation
from dashboard.utils.ids import generate_id

RULE_TYPES = ("Pool", "Snooker", "Carambole", "Gezelschap")

LINE_FIELDS = ("details", "rules", "tips")


def _lines(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [line for line in value if isinstance(line, str) and line.strip()]


def normalize_rule_set(rule: Dict[str, Any], order: int) -> Dict[str, Any]:
    """
    Cleans one game rule set: blank lines dropped, order set to its position.
    """
    if not isinstance(rule, dict):
        raise InvariantViolation("Rule sets must be objects.")

    title = rule.get("title") if isinstance(rule.get("title"), str) else ""

    rule_type = rule.get("type") or RULE_TYPES[0]
    if rule_type not in RULE_TYPES:
        raise InvariantViolation(f"Unknown rule type: {rule_type}")

    cleaned = {
        **rule,
        "id": rule.get("id") if isinstance(rule.get("id"), str) and rule.get("id") else generate_id(),
        "title": title.strip(),
        "type": rule_type,
        "shortDescription": rule.get("shortDescription") or "",
        "enabled": bool(rule.get("enabled", True)),
        "order": order,
    }
    for field in LINE_FIELDS:
        cleaned[field] = _lines(rule.get(field))

    return cleaned


def normalize_rule_sets(rules: Any) -> List[Dict[str, Any]]:
    if not isinstance(rules, list):
        raise InvariantViolation("Rules must be a list.")
    return [normalize_rule_set(rule, index) for index, rule in enumerate(rules)]
