"""
Versioned content store.

Holds the live content aggregate, the baseline it is compared against, and
the version history ledger. Every change to those three goes through this
class; the persistence gateway is the only thing it talks to.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from dashboard.client.errors import GatewayError, SaveFailed, SaveInProgress
from dashboard.client.gateway import AssetFile, PersistenceGateway
from dashboard.config import HISTORY_LIMIT
from dashboard.defaults import default_content
from dashboard.domain.dirty_state import evaluate, is_dirty
from dashboard.domain.history import HistoryLedger
from dashboard.domain.invariants.document import assert_content
from dashboard.domain.lifecycle.save_status import (
    IllegalTransition,
    SaveStatus,
    assert_save_transition,
)
from dashboard.normalizers.content import normalize_content, normalize_history
from dashboard.utils.ids import generate_id
from dashboard.utils.versioning import (
    now_millis,
    parse_version,
    stamp,
    version_meta,
    version_of,
)

logger = logging.getLogger(__name__)

LOCAL_ASSET_PREFIX = "blob:"

TEMPORARY_IMAGES_DROPPED = (
    "Temporary background images could not be uploaded and were not saved."
)
TEMPORARY_PREVIEW_USED = "Upload failed. Temporary (unsaved) preview used."

Mutation = Callable[[dict], dict]
StatusListener = Callable[[SaveStatus], None]


@dataclass
class SaveResult:
    version: str
    warnings: List[str] = field(default_factory=list)


def is_local_asset(ref) -> bool:
    return isinstance(ref, str) and ref.startswith(LOCAL_ASSET_PREFIX)


class ContentStore:
    """
    Editing session over one site document.

    Call `load()` once before anything else. Edits go through `mutate()`
    with a pure function; `save()`, `revert()`, `delete_version()` and
    `clear_history()` write to the backend.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        *,
        history_limit: int = HISTORY_LIMIT,
        clock: Callable[[], int] = now_millis,
    ):
        self._gateway = gateway
        self._history_limit = history_limit
        self._clock = clock

        self._content: dict = default_content()
        self._baseline: Optional[dict] = None
        self._history = HistoryLedger(limit=history_limit)
        self._status = SaveStatus.SAVED
        self._active_version = "1"
        # Highest version ever allocated in this session.
        self._version_floor = 0
        self._pending_assets: Dict[str, AssetFile] = {}
        self._listeners: List[StatusListener] = []
        self._loaded = False

    # ------------------------
    # Read access
    # ------------------------

    @property
    def content(self) -> dict:
        """Live aggregate. Treat as read-only; edit through mutate()."""
        return self._content

    @property
    def baseline(self) -> Optional[dict]:
        return self._baseline

    @property
    def history(self) -> HistoryLedger:
        return self._history

    @property
    def status(self) -> SaveStatus:
        return self._status

    @property
    def active_version(self) -> str:
        return self._active_version

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def is_dirty(self) -> bool:
        return is_dirty(self._content, self._baseline)

    @property
    def pending_assets(self) -> List[str]:
        return list(self._pending_assets)

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Call `listener` on every status change; returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    # ------------------------
    # Status bookkeeping
    # ------------------------

    def _set_status(self, status: SaveStatus) -> None:
        if status == self._status:
            return
        assert_save_transition(from_status=self._status, to_status=status)
        self._status = status
        for listener in list(self._listeners):
            listener(status)

    def _refresh_status(self) -> None:
        self._set_status(evaluate(self._content, self._baseline, self._status))

    def _commit_baseline(self, content: dict) -> None:
        self._baseline = copy.deepcopy(content)

    def _begin_write(self) -> None:
        """Enter SAVING; every backend write goes through here so writes never overlap."""
        if not self._loaded:
            raise RuntimeError("load() must complete before content can be written")
        try:
            assert_save_transition(from_status=self._status, to_status=SaveStatus.SAVING)
        except IllegalTransition as exc:
            raise SaveInProgress("A save is already in progress") from exc
        self._set_status(SaveStatus.SAVING)

    def _end_write(self) -> None:
        self._set_status(SaveStatus.UNSAVED if self.is_dirty else SaveStatus.SAVED)

    def _document(self, content: dict, history: HistoryLedger) -> dict:
        return {"content": copy.deepcopy(content), "history": history.to_list()}

    # ------------------------
    # Load
    # ------------------------

    async def load(self) -> None:
        """
        Fetch the persisted document and make it both live content and baseline.
        Any failure falls back to the default content with an empty history.
        """
        try:
            document = await self._gateway.fetch_document()
            raw_content = document.get("content") if isinstance(document, dict) else None
            if not isinstance(raw_content, dict):
                raise ValueError("Document carries no content")
        except (GatewayError, ValueError) as exc:
            logger.warning("Loading dashboard content failed, using defaults: %s", exc)
            content = default_content()
            history = HistoryLedger(limit=self._history_limit)
            active_version = "1"
            floor = 0
        else:
            content = normalize_content(raw_content)
            history = HistoryLedger(normalize_history(document.get("history")), self._history_limit)
            active_version = version_of(content)
            meta = version_meta(content)
            floor = max(history.max_version(), parse_version(meta.get("version")) if meta else 0)

        self._content = content
        self._commit_baseline(content)
        self._history = history
        self._active_version = active_version
        self._version_floor = floor
        self._pending_assets.clear()
        self._loaded = True
        # Load resets the session; no transition check applies.
        self._status = SaveStatus.SAVED
        for listener in list(self._listeners):
            listener(self._status)

        logger.info(
            "Loaded dashboard content at version %s with %d history entries",
            active_version,
            len(history),
        )

    # ------------------------
    # Edit
    # ------------------------

    def mutate(self, fn: Mutation) -> dict:
        """Replace the live aggregate with `fn(copy_of_live)` and re-evaluate dirtiness."""
        if not self._loaded:
            raise RuntimeError("load() must complete before content can be edited")

        updated = fn(copy.deepcopy(self._content))
        if not isinstance(updated, dict):
            raise TypeError("A content mutation must return the new aggregate")

        self._content = updated
        self._refresh_status()
        return updated

    def annotate_version(self, index: int, *, name: str = "", note: str = "") -> None:
        """Rename a saved version or change its note; written with the next save."""
        self._history = self._history.annotated(index, name=name, note=note)

    # ------------------------
    # Local assets
    # ------------------------

    def _stage_asset(self, file: AssetFile) -> str:
        ref = f"{LOCAL_ASSET_PREFIX}{generate_id()}"
        self._pending_assets[ref] = file
        return ref

    async def add_background_images(self, files: Sequence[AssetFile]) -> List[str]:
        """
        Upload images and append their URLs to the background list.

        When the upload fails the images are kept as temporary local
        references that `save()` will try to upload again. Returns warnings.
        """
        if not files:
            return []

        warnings: List[str] = []
        try:
            refs = await self._gateway.upload_assets(files)
        except GatewayError as exc:
            logger.warning("Background upload failed, keeping local previews: %s", exc)
            refs = [self._stage_asset(f) for f in files]
            warnings.append(TEMPORARY_PREVIEW_USED)

        self.mutate(lambda c: {**c, "backgroundImages": [*c["backgroundImages"], *refs]})
        return warnings

    async def _resolve_local_assets(self, content: dict, warnings: List[str]) -> dict:
        images = content.get("backgroundImages", [])
        local = [(i, ref) for i, ref in enumerate(images) if is_local_asset(ref)]
        if not local:
            return content

        files = [self._pending_assets.get(ref) for _, ref in local]
        urls: Optional[List[str]] = None
        if all(files):
            try:
                urls = await self._gateway.upload_assets(files)
            except GatewayError as exc:
                logger.warning("Uploading temporary background images failed: %s", exc)

        if urls is not None and len(urls) == len(local):
            resolved = list(images)
            for (index, _), url in zip(local, urls):
                resolved[index] = url
        else:
            resolved = [ref for ref in images if not is_local_asset(ref)]
            warnings.append(TEMPORARY_IMAGES_DROPPED)
            logger.warning("Removed %d temporary background images during save", len(local))

        for _, ref in local:
            self._pending_assets.pop(ref, None)

        return {**content, "backgroundImages": resolved}

    # ------------------------
    # Persist
    # ------------------------

    async def save(self, *, name: str = "", note: str = "") -> SaveResult:
        """
        Save the live content as a new version.

        Raises SaveInProgress while another write runs and SaveFailed when
        the backend rejects the write; the baseline is untouched on failure.
        """
        self._begin_write()
        warnings: List[str] = []

        try:
            started = self._content
            content = await self._resolve_local_assets(started, warnings)
            if self._content is started:
                self._content = content
            assert_content(content)
        except Exception:
            self._set_status(SaveStatus.UNSAVED)
            raise

        version = self._history.next_version(self._version_floor)
        stamped = stamp(content, version=version, name=name, note=note, timestamp=self._clock())
        history = self._history.prepend(stamped)
        logger.debug("Allocated version %s", version)

        try:
            await self._gateway.save_document(self._document(stamped, history))
        except GatewayError as exc:
            logger.warning("Saving version %s failed: %s", version, exc)
            self._set_status(SaveStatus.UNSAVED)
            raise SaveFailed("Failed to save. Please try again.", exc) from exc

        self._history = history
        self._active_version = version
        self._version_floor = max(self._version_floor, parse_version(version))
        self._commit_baseline(stamped)
        if self._content is content:
            self._content = stamped
        # Edits made while the write was in flight stay unsaved.
        self._end_write()

        logger.info("Saved version %s (%d in history)", version, len(history))
        return SaveResult(version=version, warnings=warnings)

    async def revert(self, entry: dict) -> None:
        """
        Make a history entry the current content and write it straight away.

        The live content changes before the write is confirmed; when the
        write fails it stays reverted locally and SaveFailed is raised.
        """
        self._begin_write()
        try:
            self._content = copy.deepcopy(entry)
            self._active_version = version_of(entry)

            try:
                await self._gateway.save_document(self._document(self._content, self._history))
            except GatewayError as exc:
                logger.warning("Reverting to version %s failed: %s", self._active_version, exc)
                raise SaveFailed("Failed to revert. Please try again.", exc) from exc

            self._commit_baseline(self._content)
        finally:
            self._end_write()

        logger.info("Reverted to version %s", self._active_version)

    async def delete_version(self, index: int) -> None:
        """
        Remove one history entry and write the shorter history with the live content.

        Deleting the active version makes the new newest entry current, or
        the default content when the history is now empty.
        """
        self._begin_write()
        try:
            history, removed = self._history.without(index)

            try:
                await self._gateway.save_document(self._document(self._content, history))
            except GatewayError as exc:
                logger.warning("Deleting history entry %d failed: %s", index, exc)
                raise SaveFailed("Failed to delete version. Please try again.", exc) from exc

            self._history = history

            if version_of(removed) == self._active_version:
                if history.head is not None:
                    self._content = copy.deepcopy(history.head)
                    self._active_version = version_of(history.head)
                else:
                    self._content = default_content()
                    self._active_version = "1"
        finally:
            self._end_write()

        logger.info("Deleted version %s; active version is %s", version_of(removed), self._active_version)

    async def clear_history(self) -> None:
        """Collapse the history to the live content, re-tagged as version 1."""
        self._begin_write()
        try:
            current = self._content
            stamped = stamp(current, version="1", timestamp=self._clock())
            history = HistoryLedger([stamped], self._history_limit)

            try:
                await self._gateway.save_document(self._document(stamped, history))
            except GatewayError as exc:
                logger.warning("Clearing history failed: %s", exc)
                raise SaveFailed("Failed to clear history. Please try again.", exc) from exc

            self._history = history
            self._active_version = "1"
            self._version_floor = 1
            self._commit_baseline(stamped)
            if self._content is current:
                self._content = stamped
        finally:
            self._end_write()

        logger.info("Cleared history; current content is version 1")
