from __future__ import annotations

import io

import pytest

from gedcom_display_raw.streams import (
    get_indentation,
    get_max_indentation,
    iter_lines,
    strip_terminator,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("0 HEAD\n", "0 HEAD"),
        ("0 HEAD\r\n", "0 HEAD"),
        ("0 HEAD\r", "0 HEAD"),
        ("0 HEAD", "0 HEAD"),
        ("1 NOTE x  \n", "1 NOTE x  "),
        ("\n", ""),
    ],
)
def test_strip_terminator(line: str, expected: str):
    assert strip_terminator(line) == expected


def test_iter_lines_preserves_content():
    stream = io.StringIO("  0 HEAD \r\n1 SOUR x\n\n\t2 VERS")

    assert list(iter_lines(stream)) == ["  0 HEAD ", "1 SOUR x", "", "\t2 VERS"]


def test_iter_lines_accepts_plain_iterables():
    assert list(iter_lines(["0 HEAD\n", "0 TRLR"])) == ["0 HEAD", "0 TRLR"]


def test_iter_lines_passes_replacement_characters_through():
    stream = io.TextIOWrapper(
        io.BytesIO(b"0 HEAD\n1 NOTE \xff\xfe\n0 TRLR\n"), encoding="utf-8", errors="replace"
    )

    assert list(iter_lines(stream)) == ["0 HEAD", "1 NOTE \ufffd\ufffd", "0 TRLR"]


def test_get_indentation_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("GEDCOM_DISPLAY_RAW_INDENTATION", raising=False)

    assert get_indentation() is None
    assert get_indentation(default=4) == 4


def test_get_indentation_reads_environment(monkeypatch):
    monkeypatch.setenv("GEDCOM_DISPLAY_RAW_INDENTATION", "2")

    assert get_indentation(default=4) == 2


@pytest.mark.parametrize("value", ["invalid", "0", "-3"])
def test_get_indentation_rejects_bad_values(monkeypatch, value: str):
    monkeypatch.setenv("GEDCOM_DISPLAY_RAW_INDENTATION", value)

    with pytest.raises(ValueError):
        get_indentation()


def test_get_max_indentation_allows_zero(monkeypatch):
    monkeypatch.setenv("GEDCOM_DISPLAY_RAW_MAX_INDENTATION", "0")

    assert get_max_indentation(default=20) == 0


def test_get_max_indentation_rejects_negative(monkeypatch):
    monkeypatch.setenv("GEDCOM_DISPLAY_RAW_MAX_INDENTATION", "-1")

    with pytest.raises(ValueError):
        get_max_indentation()
