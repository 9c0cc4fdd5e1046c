import os
import sys

from textmap import terminal


class _Tty:
    def isatty(self):
        return True


def test_fallback_when_not_a_tty(capsys):
    assert terminal.get_terminal_rows() == 24
    assert terminal.get_terminal_rows(fallback=10) == 10


def test_reads_terminal_lines(monkeypatch):
    monkeypatch.setattr(sys, "stdout", _Tty())
    monkeypatch.setattr(os, "get_terminal_size", lambda: os.terminal_size((100, 40)))
    assert terminal.get_terminal_rows() == 40


def test_fallback_when_size_unknown(monkeypatch):
    def no_size():
        raise OSError("not a terminal")

    monkeypatch.setattr(sys, "stdout", _Tty())
    monkeypatch.setattr(os, "get_terminal_size", no_size)
    assert terminal.get_terminal_rows(fallback=12) == 12
