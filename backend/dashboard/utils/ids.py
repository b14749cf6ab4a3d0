import uuid

# Ids at or below this length are treated as hand-typed or legacy placeholders.
MIN_GENERATED_ID_LENGTH = 9


def generate_id() -> str:
    """Random 32-character hex id for blocks, pages and menu items."""
    return uuid.uuid4().hex


def looks_generated(value) -> bool:
    return isinstance(value, str) and len(value) >= MIN_GENERATED_ID_LENGTH
