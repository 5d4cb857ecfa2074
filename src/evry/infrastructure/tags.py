"""Tag files — one persisted timestamp per tag.

Layout under the data root::

    <root>/data/<tag>       epoch milliseconds of the last successful run
    <root>/rollback/<tag>   the value <root>/data/<tag> held before it was
                            last overwritten (see TagStore.save_rollback)

Each file holds a single decimal integer and nothing else.

INVARIANT: Storage failures are never papered over. A missing or corrupt
tag file raises StorageError; no default last-run value is guessed.

Concurrent invocations on one tag are last-writer-wins. Writes go through
a temp file and ``os.replace`` so readers never see a partial integer.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_DIRNAME = "data"
ROLLBACK_DIRNAME = "rollback"


class StorageError(Exception):
    """A tag file could not be located, read, or written."""


class TagStore:
    """Filesystem-backed tag state rooted at an explicit directory.

    Directories are created lazily on the first write, so read-only
    commands (``location``, ``duration``) never touch the disk.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    @property
    def data_dir(self) -> Path:
        return self.root / DATA_DIRNAME

    @property
    def rollback_dir(self) -> Path:
        return self.root / ROLLBACK_DIRNAME

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def path_for(self, tag: str) -> Path:
        """Return the tag file path for *tag*.

        The empty tag resolves to the data directory itself.

        Raises:
            StorageError: *tag* would resolve outside the data directory.
        """
        return _resolve_inside(self.data_dir, tag)

    def rollback_path_for(self, tag: str) -> Path:
        return _resolve_inside(self.rollback_dir, tag)

    # ------------------------------------------------------------------
    # Tag state
    # ------------------------------------------------------------------

    def exists(self, tag: str) -> bool:
        path = self.path_for(tag)
        return path.is_file()

    def read(self, tag: str) -> int:
        """Read when *tag* last ran, in epoch milliseconds."""
        return _read_millis(self.path_for(tag), tag)

    def write(self, tag: str, value: int) -> None:
        """Persist *value* as the last run of *tag*."""
        path = self.path_for(tag)
        _write_millis(path, value)
        logger.debug("Wrote tag %s = %d (%s)", tag, value, path)

    # ------------------------------------------------------------------
    # Rollback snapshots
    # ------------------------------------------------------------------

    def has_rollback(self, tag: str) -> bool:
        return self.rollback_path_for(tag).is_file()

    def save_rollback(self, tag: str, value: int) -> None:
        """Snapshot *value* so a later :meth:`restore_rollback` can reinstate it."""
        path = self.rollback_path_for(tag)
        _write_millis(path, value)
        logger.debug("Saved rollback for tag %s = %d", tag, value)

    def restore_rollback(self, tag: str) -> int:
        """Write the snapshot back into the tag file and discard the snapshot.

        Returns:
            The restored epoch-millisecond value.

        Raises:
            StorageError: No snapshot exists, or it cannot be read or applied.
        """
        path = self.rollback_path_for(tag)
        if not path.is_file():
            msg = f"No rollback saved for tag {tag!r}"
            raise StorageError(msg)
        value = _read_millis(path, tag)
        self.write(tag, value)
        try:
            path.unlink()
        except OSError as exc:
            msg = f"Could not remove rollback file {path}"
            raise StorageError(msg) from exc
        logger.debug("Restored rollback for tag %s = %d", tag, value)
        return value

    def discard_rollback(self, tag: str) -> None:
        """Drop any snapshot for *tag*; a missing snapshot is not an error."""
        path = self.rollback_path_for(tag)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            msg = f"Could not remove rollback file {path}"
            raise StorageError(msg) from exc


def _resolve_inside(base: Path, tag: str) -> Path:
    if not tag:
        return base
    path = base / tag
    resolved, base_resolved = path.resolve(), base.resolve()
    # Guard against traversal via "..", absolute names, or "."
    if resolved == base_resolved or not resolved.is_relative_to(base_resolved):
        msg = f"Tag name escapes the data directory: {tag!r}"
        raise StorageError(msg)
    return path


def _read_millis(path: Path, tag: str) -> int:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Could not read tag information from {path}"
        raise StorageError(msg) from exc
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        msg = f"Could not convert tag file contents {raw!r} to integer for tag {tag!r}"
        raise StorageError(msg)
    return int(text)


def _write_millis(path: Path, value: int) -> None:
    if value < 0:
        msg = f"Refusing to store negative timestamp {value} in {path}"
        raise StorageError(msg)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fp:
                fp.write(str(value))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        msg = f"Could not write tag file {path}"
        raise StorageError(msg) from exc
