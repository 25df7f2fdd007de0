"""
The bounded set library: a fixed number of plain track entries with artist,
genre and key, plus the aggregate statistics and report built over them.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from djset_cli.exceptions import LibraryFullError
from djset_cli.models.energy import EnergyLevel
from djset_cli.utils.formatting import format_tempo, left_column, separator

log = logging.getLogger(__name__)

DEFAULT_MAX_TRACKS = 7

TITLE_WIDTH = 22
ARTIST_WIDTH = 18
GENRE_WIDTH = 12
KEY_WIDTH = 6
TEMPO_WIDTH = 6
ENERGY_WIDTH = 8
NOTES_WIDTH = 20
LINE_WIDTH = 78

REPORT_TITLE = (
    "==================== DJ SET ARCHITECT REPORT (Library) ===================="
)


@dataclass
class SetTrack:
    """A plain library entry."""

    title: str
    artist: str
    genre: str
    key: str
    tempo: int = 0
    energy: EnergyLevel = EnergyLevel.MEDIUM
    notes: str = ""


def average_tempo(tracks: Iterable[SetTrack]) -> float:
    """Mean tempo of the given tracks, 0.0 when there are none."""
    tempos = [t.tempo for t in tracks]
    if not tempos:
        return 0.0
    return sum(tempos) / len(tempos)


def count_genre_matches(tracks: Iterable[SetTrack], genre: str) -> int:
    """Counts tracks whose genre equals `genre` exactly (case-sensitive)."""
    return sum(1 for t in tracks if t.genre == genre)


def write_library_header(out: TextIO) -> None:
    out.write(
        f"{'Title':<{TITLE_WIDTH}}"
        f"{'Artist':<{ARTIST_WIDTH}}"
        f"{'Genre':<{GENRE_WIDTH}}"
        f"{'Key':<{KEY_WIDTH}}"
        f"{'BPM':>{TEMPO_WIDTH}}  "
        f"{'Energy':<{ENERGY_WIDTH}}"
        f"{'Notes':<{NOTES_WIDTH}}\n"
    )
    out.write(separator(LINE_WIDTH))


def write_library_row(out: TextIO, track: SetTrack) -> None:
    out.write(
        f"{left_column(track.title, TITLE_WIDTH)}"
        f"{left_column(track.artist, ARTIST_WIDTH)}"
        f"{left_column(track.genre, GENRE_WIDTH)}"
        f"{left_column(track.key, KEY_WIDTH)}"
        f"{track.tempo:>{TEMPO_WIDTH}}  "
        f"{track.energy.label:<{ENERGY_WIDTH}}"
        f"{left_column(track.notes, NOTES_WIDTH)}\n"
    )


class SetLibrary:
    """A library that holds at most `max_tracks` entries, in insertion order."""

    def __init__(self, max_tracks: int = DEFAULT_MAX_TRACKS):
        self.max_tracks = max_tracks
        self._tracks: list[SetTrack] = []

    @property
    def tracks(self) -> list[SetTrack]:
        """A copy of the stored tracks."""
        return list(self._tracks)

    @property
    def is_full(self) -> bool:
        return len(self._tracks) >= self.max_tracks

    def add(self, track: SetTrack) -> None:
        """
        Stores a track.

        Raises:
            LibraryFullError: If the library already holds `max_tracks` entries.
        """
        if self.is_full:
            raise LibraryFullError(
                f"Library is full ({self.max_tracks} tracks). Cannot add more."
            )
        self._tracks.append(track)
        log.debug(f"Library track added ({len(self._tracks)}/{self.max_tracks}).")

    def average_tempo(self) -> float:
        return average_tempo(self._tracks)

    def count_genre_matches(self, genre: str) -> int:
        return count_genre_matches(self._tracks, genre)

    def print_library(self, out: TextIO) -> None:
        """Writes the library table, or a notice if it is empty."""
        if not self._tracks:
            out.write("No tracks saved yet.\n")
            return
        write_library_header(out)
        for track in self._tracks:
            write_library_row(out, track)

    def save_report(self, path: str | Path) -> bool:
        """
        Writes the library report to `path`, overwriting any previous one.

        Returns:
            True if the report was written, False if the file could not be opened.
        """
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(REPORT_TITLE + "\n")
                f.write(f"Tracks stored: {len(self._tracks)}\n\n")
                if not self._tracks:
                    f.write("No tracks saved.\n")
                else:
                    write_library_header(f)
                    for track in self._tracks:
                        write_library_row(f, track)
                    f.write(f"\nAverage BPM: {format_tempo(self.average_tempo())}\n")
        except OSError as e:
            log.error(f"[red]Could not open file: {path} ({e})[/red]")
            return False

        log.info(f"Report saved to {path}")
        return True

    def __len__(self) -> int:
        return len(self._tracks)
