"""
The collection manager: sole owner of every track record added to it.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from djset_cli.core.container import MIN_CAPACITY, GrowableContainer
from djset_cli.exceptions import InvalidTrackError
from djset_cli.models.tracks import (
    ENERGY_WIDTH,
    NOTES_WIDTH,
    TEMPO_WIDTH,
    TITLE_WIDTH,
    TYPE_WIDTH,
    TrackRecord,
)
from djset_cli.utils.formatting import separator

log = logging.getLogger(__name__)

LINE_WIDTH = 88
INDEX_WIDTH = 4
REPORT_TITLE = (
    "==================== DJ SET ARCHITECT REPORT (Collection) ===================="
)
EMPTY_NOTICE = "No tracks stored yet.\n"


def write_collection_header(out: TextIO) -> None:
    """Writes the column header and separator for the collection table."""
    out.write(
        f"{'Idx':<{INDEX_WIDTH + 1}}"
        f"{'Title':<{TITLE_WIDTH}}"
        f"{'Type':<{TYPE_WIDTH}}"
        f"{'BPM':>{TEMPO_WIDTH}}  "
        f"{'Energy':<{ENERGY_WIDTH}}"
        f"{'Notes':<{NOTES_WIDTH}}"
        "  Source\n"
    )
    out.write(separator(LINE_WIDTH))


class TrackCollectionManager:
    """
    Owns a growable collection of track records.

    Ownership moves into the manager on `add()`. A record leaves it only through
    `remove_at()` or `close()`, and each record is released exactly once on the
    way out. Records returned by indexing are borrowed: callers must not release
    them.

    The manager is also a context manager; leaving the `with` block releases
    every record still held.
    """

    def __init__(self, initial_capacity: int = MIN_CAPACITY):
        self._items: GrowableContainer[TrackRecord | None] = GrowableContainer(
            initial_capacity, default=None
        )

    @property
    def size(self) -> int:
        return self._items.size

    @property
    def capacity(self) -> int:
        return self._items.capacity

    def add(self, record: TrackRecord) -> "TrackCollectionManager":
        """
        Takes ownership of `record`.

        Raises:
            InvalidTrackError: If `record` is not a track, has already been
                released, or is already held by this manager.
        """
        if not isinstance(record, TrackRecord):
            raise InvalidTrackError(
                f"Only track records can be added, got {type(record).__name__}."
            )
        if record.released:
            raise InvalidTrackError(f"Track '{record.title}' has been released.")
        if any(held is record for held in self._items):
            raise InvalidTrackError(
                f"Track '{record.title}' is already in this collection."
            )

        self._items.push_back(record)
        log.debug(
            f"Added {record.kind_name()} '{record.title}' "
            f"(size={self.size}, capacity={self.capacity})."
        )
        return self

    def remove_at(self, index: int) -> bool:
        """
        Releases the record at `index` and closes the gap it leaves.

        Returns:
            False, with no effect, if `index` is out of range; True otherwise.
        """
        record = self._items.at(index)
        if record is None:
            return False

        record.release()
        self._items.remove_at(index)
        log.debug(f"Removed track at index {index} (size={self.size}).")
        return True

    def __getitem__(self, index: int) -> TrackRecord | None:
        """Borrows the record at `index`; None if out of range. Never raises."""
        return self._items.at(index)

    def __iadd__(self, record: TrackRecord) -> "TrackCollectionManager":
        return self.add(record)

    def __isub__(self, index: int) -> "TrackCollectionManager":
        self.remove_at(index)
        return self

    def __len__(self) -> int:
        return self._items.size

    def __iter__(self) -> Iterator[TrackRecord]:
        # Defined explicitly: the forgiving __getitem__ would otherwise make
        # the legacy iteration protocol loop forever.
        return iter(list(self._items))

    def print_all(self, out: TextIO) -> None:
        """Writes the collection as a fixed-width table, or a notice if empty."""
        if self.size == 0:
            out.write(EMPTY_NOTICE)
            return

        write_collection_header(out)
        for i, record in enumerate(self._items):
            out.write(f"{i:>{INDEX_WIDTH}} ")
            record.render_row(out)
            out.write("\n")
        out.write(separator(LINE_WIDTH))

    def save_report(self, path: str | Path) -> bool:
        """
        Writes the collection report to `path`, overwriting any previous one.

        Returns:
            True if the report was written, False if the file could not be opened.
        """
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(REPORT_TITLE + "\n")
                f.write(f"Tracks stored: {self.size}\n\n")
                self.print_all(f)
        except OSError as e:
            log.error(f"[red]Could not open file: {path} ({e})[/red]")
            return False

        log.info(f"Report saved to {path}")
        return True

    def close(self) -> None:
        """
        Releases every held record, then drops the storage. Safe to call twice.

        A record that fails to release does not stop the others: every record is
        still visited and the storage is still dropped, then the first failure is
        re-raised.
        """
        released = 0
        first_error: InvalidTrackError | None = None
        try:
            for record in self._items:
                try:
                    record.release()
                    released += 1
                except InvalidTrackError as e:
                    log.warning(f"Could not release {record!r}: {e}")
                    if first_error is None:
                        first_error = e
        finally:
            self._items.clear()

        if released:
            log.debug(f"Collection closed, released {released} tracks.")
        if first_error is not None:
            raise first_error

    def __enter__(self) -> "TrackCollectionManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __copy__(self):
        raise TypeError(
            "TrackCollectionManager cannot be copied: records have a single owner."
        )

    def __deepcopy__(self, memo):
        raise TypeError(
            "TrackCollectionManager cannot be copied: records have a single owner."
        )

    def __repr__(self) -> str:
        return f"TrackCollectionManager(size={self.size}, capacity={self.capacity})"
