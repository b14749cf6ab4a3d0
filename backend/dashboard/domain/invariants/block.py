from .exceptions import InvariantViolation


def assert_block_ids(blocks):
    ids = [block.get("id") for block in blocks]
    if not all(isinstance(block_id, str) and block_id for block_id in ids):
        raise InvariantViolation(f"Every block needs a string id: {ids}")

    if len(set(ids)) != len(ids):
        raise InvariantViolation(f"Block ids are not unique within the page: {ids}")
