"""
Reads title and tempo tags from local audio files, used to prefill prompts when
a file-backed track is added.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from mutagen import File as MutagenFile
from mutagen import MutagenError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackTags:
    """The subset of tags the library cares about. Missing tags are None."""

    title: str | None = None
    tempo: int | None = None


def _parse_tempo(raw: str) -> int | None:
    try:
        return round(float(raw))
    except (ValueError, OverflowError):
        return None


def read_track_tags(path: str | Path) -> TrackTags | None:
    """
    Reads tags through mutagen's easy interface.

    Returns:
        The tags found, or None if the file is missing or not a readable audio file.
    """
    file_path = Path(path)
    if not file_path.is_file():
        return None

    try:
        audio = MutagenFile(file_path, easy=True)
    except (MutagenError, OSError) as e:
        log.debug(f"Could not read tags from '{file_path}': {e}")
        return None

    if audio is None:
        log.debug(f"'{file_path}' is not a recognised audio file.")
        return None

    title = (audio.get("title") or [None])[0]
    bpm_values = audio.get("bpm") or []
    tempo = _parse_tempo(bpm_values[0]) if bpm_values else None
    return TrackTags(title=title, tempo=tempo)
