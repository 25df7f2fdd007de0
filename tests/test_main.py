import pytest

from djset_cli import __main__ as entry
from djset_cli.exceptions import LibraryFullError


def _app_raising(error):
    def _run():
        raise error

    return _run


@pytest.mark.parametrize("error", [KeyboardInterrupt(), EOFError()])
def test_cancellation_exits_cleanly(monkeypatch, capsys, error):
    monkeypatch.setattr(entry, "app", _app_raising(error))
    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 0
    assert "Set planning cancelled" in capsys.readouterr().out


def test_planner_errors_show_suggestions(monkeypatch, capsys):
    monkeypatch.setattr(
        entry, "app", _app_raising(LibraryFullError("Library is full (7 tracks)."))
    )
    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "LibraryFullError" in out
    assert "max_tracks" in out


def test_unexpected_errors_exit_with_failure(monkeypatch, capsys):
    monkeypatch.setattr(entry, "app", _app_raising(RuntimeError("boom")))
    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1
    assert "boom" in capsys.readouterr().out


def test_normal_exit_returns_quietly(monkeypatch):
    monkeypatch.setattr(entry, "app", lambda: None)
    assert entry.main() is None
