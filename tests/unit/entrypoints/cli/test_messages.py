"""Unit tests for :mod:`casekit.entrypoints.cli.helpers.messages`.

This suite verifies three behaviors:

1) Glyph selection respects the *current* stderr encoding reported by
   ``click.get_text_stream("stderr")``.
2) ``_supports_character`` **re-queries** Click's text stream on every call.
3) ``warn`` emits a **styled** (ANSI yellow + bold + reset) line to **stderr**
   and leaves stdout untouched.
"""

import io
import sys

import click
import pytest

from casekit.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that mimics a TTY and exposes a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding (e.g., ``'ascii'`` or ``'utf-8'``)."""
        return self._encoding

    def isatty(self) -> bool:
        """Report that this stream is a TTY (prevents Click from stripping ANSI)."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [("ascii", "[!]"), ("utf-8", "⚠️")],
)
def test_caution_glyph_respects_stream_encoding(monkeypatch, encoding, expected):
    """caution_glyph chooses emoji vs ASCII according to stderr encoding."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert caution_glyph() == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """_supports_character must consult Click's stream on every call (no caching)."""
    calls: list[str] = []

    def stream_factory(name: str):  # pylint: disable=unused-argument
        enc = "ascii" if not calls else "utf-8"
        calls.append(enc)
        return FakeTTY(enc)

    monkeypatch.setattr(click, "get_text_stream", stream_factory)

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True
    assert calls == ["ascii", "utf-8"]


@pytest.mark.parametrize(("encoding", "glyph"), [("ascii", "[!]"), ("utf-8", "⚠️")])
def test_warn_emits_styled_stderr(monkeypatch, encoding, glyph):
    """warn writes a bold, yellow line to stderr with the right glyph."""
    stream = FakeTTY(encoding)

    # Same object for probe and writer
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    warn("empty result")

    out = stream.getvalue()
    assert glyph in out
    assert "empty result" in out
    assert SET_BOLD in out
    assert SET_YELLOW in out
    assert RESET in out


def test_warn_writes_to_stderr_only(monkeypatch, capsys):
    """warn should write to stderr and leave stdout untouched (for piped output)."""
    stream = FakeTTY("utf-8")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    warn("danger!")
    captured = capsys.readouterr()
    assert "danger!" in captured.err
    assert captured.out == ""
