from typing import Optional

from dashboard.domain.lifecycle.save_status import SaveStatus
from dashboard.utils.versioning import strip_version_meta


def is_dirty(current: dict, baseline: Optional[dict]) -> bool:
    """
    True when `current` differs from `baseline` in anything but version metadata.

    Comparison is structural: key order never matters, list order does.
    """
    if baseline is None:
        return False
    return strip_version_meta(current) != strip_version_meta(baseline)


def evaluate(current: dict, baseline: Optional[dict], status: SaveStatus) -> SaveStatus:
    """Status after a mutation or a baseline change; a save in flight is left alone."""
    if status == SaveStatus.SAVING:
        return status
    return SaveStatus.UNSAVED if is_dirty(current, baseline) else SaveStatus.SAVED
