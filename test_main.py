import curses
import json

import pytest

import main
from _version import __version__


class DummyWin:
    def __init__(self, h, w, y=0, x=0):
        self._h = h
        self._w = w

    def getmaxyx(self):
        return self._h, self._w

    def leaveok(self, flag):
        pass

    def erase(self):
        pass

    def box(self):
        pass

    def addnstr(self, y, x, text, n, attr=0):
        pass

    def refresh(self):
        pass


class DummyStdscr:
    def __init__(self, keys):
        self.keys = list(keys)

    def getmaxyx(self):
        return 24, 80

    def getch(self):
        return self.keys.pop(0)

    def nodelay(self, flag):
        pass

    def timeout(self, ms):
        pass

    def clear(self):
        pass

    def erase(self):
        pass

    def refresh(self):
        pass


@pytest.fixture
def fake_terminal(monkeypatch):
    calls = []

    def wrapper(func):
        stdscr = DummyStdscr([curses.KEY_DOWN, ord("q")])
        calls.append(stdscr)
        return func(stdscr)

    monkeypatch.setattr(curses, "wrapper", wrapper)
    monkeypatch.setattr(curses, "newwin", DummyWin)
    return calls


@pytest.fixture
def no_config(monkeypatch, tmp_path):
    monkeypatch.setattr(main, "load_config", lambda: {
        "DICTIONARY_PATH": str(tmp_path / "word.json"),
        "POLL_TIMEOUT_MS": 1000,
        "LIST_WIDTH": 6,
    })
    return tmp_path


def _write_dictionary(path):
    path.write_text(
        json.dumps([{"word": "爱", "oldword": "愛", "pinyin": "ài"}], ensure_ascii=False),
        encoding="utf-8",
    )


def test_version_flag(capsys, fake_terminal):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == __version__
    assert fake_terminal == []


def test_help_flag(capsys, fake_terminal):
    assert main.main(["-h"]) == 0
    assert "Usage" in capsys.readouterr().out
    assert fake_terminal == []


@pytest.mark.parametrize("args", [["a.json", "b.json"], ["--bogus"]])
def test_bad_arguments(capsys, fake_terminal, args):
    assert main.main(args) == 1
    assert "Usage" in capsys.readouterr().err
    assert fake_terminal == []


def test_missing_dictionary_fails_before_terminal_setup(capsys, fake_terminal, no_config):
    assert main.main([]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Load failed:")
    assert "word.json" in err
    assert fake_terminal == []


def test_malformed_dictionary_fails(capsys, fake_terminal, no_config):
    (no_config / "word.json").write_text("{not json", encoding="utf-8")
    assert main.main([]) == 1
    assert "Load failed:" in capsys.readouterr().err
    assert fake_terminal == []


def test_quit_returns_zero(fake_terminal, no_config):
    _write_dictionary(no_config / "word.json")
    assert main.main([]) == 0
    assert len(fake_terminal) == 1
    assert fake_terminal[0].keys == []


def test_path_argument_overrides_config(fake_terminal, no_config):
    other = no_config / "other.json"
    _write_dictionary(other)
    assert main.main([str(other)]) == 0
    assert len(fake_terminal) == 1


def test_terminal_error_is_reported(capsys, monkeypatch, no_config):
    _write_dictionary(no_config / "word.json")

    def broken_wrapper(func):
        raise curses.error("setupterm: could not find terminal")

    monkeypatch.setattr(curses, "wrapper", broken_wrapper)
    assert main.main([]) == 1
    assert "Terminal error:" in capsys.readouterr().err
