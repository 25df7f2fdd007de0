import io

import pytest

from djset_cli.exceptions import InvalidTrackError
from djset_cli.models.energy import EnergyLevel
from djset_cli.models.tracks import (
    FileBackedTrack,
    MixNotes,
    StreamBackedTrack,
    TrackRecord,
)


def _row(track: TrackRecord) -> str:
    out = io.StringIO()
    track.render_row(out)
    return out.getvalue()


def _summary(track: TrackRecord) -> str:
    out = io.StringIO()
    track.render_summary(out)
    return out.getvalue()


def test_energy_labels_and_order():
    assert EnergyLevel.LOW.label == "Low"
    assert EnergyLevel.MEDIUM.label == "Medium"
    assert EnergyLevel.HIGH.label == "High"
    assert EnergyLevel.LOW < EnergyLevel.MEDIUM < EnergyLevel.HIGH
    assert EnergyLevel.LOW.next_step() is EnergyLevel.MEDIUM
    assert EnergyLevel.HIGH.next_step() is None


def test_energy_from_label_accepts_names_and_numbers():
    assert EnergyLevel.from_label("high") is EnergyLevel.HIGH
    assert EnergyLevel.from_label(" Medium ") is EnergyLevel.MEDIUM
    assert EnergyLevel.from_label("1") is EnergyLevel.LOW
    with pytest.raises(ValueError):
        EnergyLevel.from_label("extreme")
    with pytest.raises(ValueError):
        EnergyLevel.from_label("4")


def test_mix_notes_has_notes():
    assert MixNotes("long blend").has_notes() is True
    assert MixNotes().has_notes() is False
    assert str(MixNotes("x")) == "x"


def test_base_record_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TrackRecord("Test", 128, EnergyLevel.HIGH)


def test_base_behaviour_through_concrete_track():
    t = FileBackedTrack("Test", 128, EnergyLevel.HIGH, "x.wav", MixNotes("n"))
    assert t.title == "Test"
    assert t.tempo == 128
    assert t.energy is EnergyLevel.HIGH
    assert t.kind_name() == "FileBackedTrack"

    t.title = "Renamed"
    t.tempo = 126
    t.energy = 1
    assert t.title == "Renamed"
    assert t.tempo == 126
    assert t.energy is EnergyLevel.LOW


def test_bad_field_values_are_rejected():
    with pytest.raises(InvalidTrackError):
        StreamBackedTrack("S", "fast", EnergyLevel.LOW, "Tidal")
    with pytest.raises(InvalidTrackError):
        StreamBackedTrack("S", 120, 7, "Tidal")

    t = StreamBackedTrack("S", 120, EnergyLevel.LOW, "Tidal")
    with pytest.raises(InvalidTrackError):
        t.tempo = 120.5
    with pytest.raises(InvalidTrackError):
        t.tempo = True
    assert t.tempo == 120


def test_file_backed_equality_uses_title_and_path_only():
    a = FileBackedTrack("A", 120, EnergyLevel.MEDIUM, "a.wav", MixNotes("one"))
    same = FileBackedTrack("A", 140, EnergyLevel.HIGH, "a.wav", MixNotes("two"))
    other_path = FileBackedTrack("A", 120, EnergyLevel.MEDIUM, "b.wav")
    other_title = FileBackedTrack("B", 120, EnergyLevel.MEDIUM, "a.wav")

    assert a == same
    assert a != other_path
    assert a != other_title


def test_stream_backed_tracks_only_equal_themselves():
    s1 = StreamBackedTrack("S", 128, EnergyLevel.HIGH, "Spotify")
    s2 = StreamBackedTrack("S", 128, EnergyLevel.HIGH, "Spotify")
    assert s1 == s1
    assert s1 != s2

    f = FileBackedTrack("S", 128, EnergyLevel.HIGH, "Spotify")
    assert f != s1


def test_summary_through_base_reference_file_backed():
    track: TrackRecord = FileBackedTrack(
        "Night Drive", 124, EnergyLevel.MEDIUM, "/music/night.flac"
    )
    text = _summary(track)
    assert text == "FileBackedTrack | Night Drive | 124 BPM | Medium | Path=/music/night.flac"
    assert str(track) == text


def test_summary_through_base_reference_stream_backed():
    track: TrackRecord = StreamBackedTrack(
        "S", 140, EnergyLevel.HIGH, "Apple Music", MixNotes("hi")
    )
    text = str(track)
    assert "StreamBackedTrack" in text
    assert "S" in text
    assert "140 BPM" in text
    assert "High" in text
    assert "Platform=Apple Music" in text
    assert "Path=" not in text


def test_row_rendering_uses_fixed_columns():
    row = _row(FileBackedTrack("A", 120, EnergyLevel.MEDIUM, "a.wav", MixNotes("note")))
    assert row.startswith("A" + " " * 21 + "FileBackedTrack")
    assert "   120  Medium  " in row
    assert "note" in row
    assert row.endswith("  Path: a.wav")

    stream_row = _row(StreamBackedTrack("B", 125, EnergyLevel.HIGH, "Spotify"))
    assert "StreamBackedTrack" in stream_row
    assert "(none)" in stream_row
    assert stream_row.endswith("  Platform: Spotify")


def test_row_rendering_truncates_long_text():
    long_title = "An Extremely Long Extended Club Mix Title"
    row = _row(FileBackedTrack(long_title, 128, EnergyLevel.HIGH, "x.wav"))
    assert row.startswith(long_title[:21] + " FileBackedTrack")


def test_release_runs_once():
    t = StreamBackedTrack("S", 128, EnergyLevel.HIGH, "Spotify", MixNotes("x"))
    assert t.released is False
    t.release()
    assert t.released is True
    assert t.notes.has_notes() is False
    with pytest.raises(InvalidTrackError):
        t.release()
