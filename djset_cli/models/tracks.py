"""
Track records stored by the collection manager.

`TrackRecord` is the abstract base. Every concrete kind supplies its discriminator
through `kind_name()` and extends the row rendering with its own source column.
"""

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TextIO

from djset_cli.exceptions import InvalidTrackError
from djset_cli.models.energy import EnergyLevel
from djset_cli.utils.formatting import left_column

log = logging.getLogger(__name__)

# --- Column widths shared by the row renderers and the table header ---
TITLE_WIDTH = 22
TYPE_WIDTH = 19
TEMPO_WIDTH = 6
ENERGY_WIDTH = 8
NOTES_WIDTH = 20

NO_NOTES = "(none)"


@dataclass(frozen=True)
class MixNotes:
    """Free-text mixing annotation composed into each concrete track."""

    text: str = ""

    def has_notes(self) -> bool:
        return bool(self.text)

    def __str__(self) -> str:
        return self.text


class TrackRecord(ABC):
    """
    Abstract track with the fields every kind shares.

    Subclasses must implement `kind_name()`. They override `render_row()` and
    `render_summary()` by calling the base version first and appending their own
    fragment. `release()` is the teardown hook run by the owning collection.
    """

    def __init__(self, title: str, tempo: int, energy: EnergyLevel | int):
        self.title = title
        self.tempo = tempo
        self.energy = energy
        self._released = False

    # --- Accessors ---

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = str(value)

    @property
    def tempo(self) -> int:
        return self._tempo

    @tempo.setter
    def tempo(self, value: int) -> None:
        # bool is an int subclass, but True is not a tempo
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTrackError(f"Tempo must be a whole number, got {value!r}.")
        self._tempo = value

    @property
    def energy(self) -> EnergyLevel:
        return self._energy

    @energy.setter
    def energy(self, value: EnergyLevel | int) -> None:
        try:
            self._energy = EnergyLevel(value)
        except ValueError as e:
            raise InvalidTrackError(f"Unknown energy level: {value!r}.") from e

    @property
    def released(self) -> bool:
        """True once the owning collection has torn this record down."""
        return self._released

    # --- Polymorphic interface ---

    @abstractmethod
    def kind_name(self) -> str:
        """Returns the fixed discriminator for the concrete kind."""

    def render_row(self, out: TextIO) -> None:
        """Writes the shared fixed-width columns: title, kind, tempo, energy."""
        out.write(
            f"{left_column(self.title, TITLE_WIDTH)}"
            f"{self.kind_name():<{TYPE_WIDTH}}"
            f"{self.tempo:>{TEMPO_WIDTH}}  "
            f"{self.energy.label:<{ENERGY_WIDTH}}"
        )

    def render_summary(self, out: TextIO) -> None:
        """Writes '<kind> | <title> | <tempo> BPM | <energy>'."""
        out.write(
            f"{self.kind_name()} | {self.title} | {self.tempo} BPM | "
            f"{self.energy.label}"
        )

    def release(self) -> None:
        """
        Tears the record down. Called exactly once by the owning collection;
        subclasses extend it to drop their own state.
        """
        if self._released:
            raise InvalidTrackError(f"Track '{self.title}' was already released.")
        self._released = True
        log.debug(f"Released {self.kind_name()} '{self.title}'.")

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.render_summary(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(title={self.title!r}, tempo={self.tempo}, "
            f"energy={self.energy.label})"
        )


def _notes_column(notes: MixNotes) -> str:
    text = notes.text if notes.has_notes() else NO_NOTES
    return left_column(text, NOTES_WIDTH)


class FileBackedTrack(TrackRecord):
    """A track that lives in a local audio file."""

    def __init__(
        self,
        title: str,
        tempo: int,
        energy: EnergyLevel | int,
        file_path: str,
        notes: MixNotes | None = None,
    ):
        super().__init__(title, tempo, energy)
        self.file_path = file_path
        self.notes = notes if notes is not None else MixNotes()

    def kind_name(self) -> str:
        return "FileBackedTrack"

    def render_row(self, out: TextIO) -> None:
        super().render_row(out)
        out.write(f"{_notes_column(self.notes)}  Path: {self.file_path}")

    def render_summary(self, out: TextIO) -> None:
        super().render_summary(out)
        out.write(f" | Path={self.file_path}")

    def release(self) -> None:
        super().release()
        self.notes = MixNotes()

    def __eq__(self, other: object) -> bool:
        # Same track means same title in the same file; tempo, energy and notes
        # are ignored.
        if not isinstance(other, FileBackedTrack):
            return NotImplemented
        return (self.title, self.file_path) == (other.title, other.file_path)


class StreamBackedTrack(TrackRecord):
    """A track played from a streaming platform."""

    def __init__(
        self,
        title: str,
        tempo: int,
        energy: EnergyLevel | int,
        platform: str,
        notes: MixNotes | None = None,
    ):
        super().__init__(title, tempo, energy)
        self.platform = platform
        self.notes = notes if notes is not None else MixNotes()

    def kind_name(self) -> str:
        return "StreamBackedTrack"

    def render_row(self, out: TextIO) -> None:
        super().render_row(out)
        out.write(f"{_notes_column(self.notes)}  Platform: {self.platform}")

    def render_summary(self, out: TextIO) -> None:
        super().render_summary(out)
        out.write(f" | Platform={self.platform}")

    def release(self) -> None:
        super().release()
        self.notes = MixNotes()
