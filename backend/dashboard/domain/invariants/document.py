from .exceptions import InvariantViolation
from .page import assert_page


def assert_content(content):
    if not isinstance(content, dict):
        raise InvariantViolation("Content must be an object.")

    pages = content.get("pages", [])
    if not isinstance(pages, list):
        raise InvariantViolation("Content pages must be a list.")

    for page in pages:
        assert_page(page)


def assert_document(content, history, *, history_limit):
    """
    Checks a `{content, history}` pair before it is persisted.
    History length is bounded by truncation upstream, never reported here.
    """
    assert_content(content)

    if not isinstance(history, list):
        raise InvariantViolation("History must be a list.")

    if len(history) > history_limit:
        raise InvariantViolation(
            f"History holds {len(history)} entries; at most {history_limit} are kept."
        )

    for entry in history:
        assert_content(entry)
