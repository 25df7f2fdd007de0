from mutagen import MutagenError

from djset_cli.media import tags as tags_module
from djset_cli.media.tags import TrackTags, _parse_tempo, read_track_tags


def _audio_file(tmp_path, name="track.mp3"):
    path = tmp_path / name
    path.write_bytes(b"\x00" * 16)
    return path


def _fake_mutagen(easy_tags):
    def _open(path, easy=False):
        assert easy is True
        return easy_tags

    return _open


def test_missing_file_has_no_tags(tmp_path):
    assert read_track_tags(tmp_path / "ghost.flac") is None


def test_non_audio_file_has_no_tags(tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("definitely not audio\n", encoding="utf-8")
    assert read_track_tags(notes) is None


def test_title_and_bpm_are_read_from_easy_tags(tmp_path, monkeypatch):
    monkeypatch.setattr(
        tags_module,
        "MutagenFile",
        _fake_mutagen({"title": ["Sunrise"], "bpm": ["123.6"]}),
    )
    assert read_track_tags(_audio_file(tmp_path)) == TrackTags(title="Sunrise", tempo=124)


def test_missing_tags_come_back_as_none(tmp_path, monkeypatch):
    monkeypatch.setattr(tags_module, "MutagenFile", _fake_mutagen({}))
    assert read_track_tags(_audio_file(tmp_path)) == TrackTags()

    monkeypatch.setattr(
        tags_module, "MutagenFile", _fake_mutagen({"title": ["Dusk"], "bpm": ["fast"]})
    )
    assert read_track_tags(_audio_file(tmp_path)) == TrackTags(title="Dusk")


def test_unreadable_audio_has_no_tags(tmp_path, monkeypatch):
    def _broken(path, easy=False):
        raise MutagenError("corrupt header")

    monkeypatch.setattr(tags_module, "MutagenFile", _broken)
    assert read_track_tags(_audio_file(tmp_path)) is None


def test_tempo_tag_parsing():
    assert _parse_tempo("128") == 128
    assert _parse_tempo("127.6") == 128
    assert _parse_tempo("fast") is None
    assert _parse_tempo("inf") is None


def test_track_tags_defaults():
    tags = TrackTags()
    assert tags.title is None
    assert tags.tempo is None
