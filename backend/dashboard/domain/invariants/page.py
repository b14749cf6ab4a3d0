from .block import assert_block_ids
from .exceptions import InvariantViolation


def assert_page(page):
    if not isinstance(page, dict):
        raise InvariantViolation("Pages must be objects.")

    blocks = page.get("blocks")
    if not isinstance(blocks, list) or not all(isinstance(b, dict) for b in blocks):
        raise InvariantViolation(f"Page {page.get('id')!r} blocks must be a list of objects.")

    assert_block_ids(blocks)
