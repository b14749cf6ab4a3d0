# dashboard/application/cms/upload_media.py
from typing import List
from dashboard.utils.media import save_files
from dashboard.utils.transaction import transactional
from dashboard.utils.audit import log_action


def upload_media(*, files, purpose: str) -> List[str]:
    """
    Store uploaded images and return their server-relative URLs.
    """
    if not files:
        raise ValueError("No files uploaded")

    urls = save_files(files)

    with transactional():
        log_action(
            action="media.upload",
            entity_type=purpose,
            entity_id=None,
            payload={"urls": urls},
        )

    return urls
