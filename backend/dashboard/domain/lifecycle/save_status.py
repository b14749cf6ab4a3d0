from enum import Enum
from typing import Set


class SaveStatus(str, Enum):
    SAVED = "saved"
    UNSAVED = "unsaved"
    SAVING = "saving"


class IllegalTransition(ValueError):
    pass


# Explicit allowed state transitions
ALLOWED_SAVE_TRANSITIONS: dict[SaveStatus, Set[SaveStatus]] = {
    SaveStatus.SAVED: {SaveStatus.SAVED, SaveStatus.UNSAVED, SaveStatus.SAVING},
    SaveStatus.UNSAVED: {SaveStatus.UNSAVED, SaveStatus.SAVED, SaveStatus.SAVING},
    # saving → unsaved only on failed persistence; saves never overlap
    SaveStatus.SAVING: {SaveStatus.SAVED, SaveStatus.UNSAVED},
}


def assert_save_transition(*, from_status: SaveStatus, to_status: SaveStatus) -> None:
    """
    Guards save-status transitions.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_SAVE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise IllegalTransition(
            f"Illegal save status transition: {from_status.value} → {to_status.value}"
        )
