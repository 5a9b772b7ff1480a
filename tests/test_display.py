import click
import pytest

from gedcom_display_raw.config import ConfigError, DisplayConfig
from gedcom_display_raw.display import display_lines
from gedcom_display_raw.models import DepthTracker, DisplaySummary
from gedcom_display_raw.parser import parse_line
from gedcom_display_raw.renderer import render_line

SAMPLE = [
    "0 HEAD",
    "1 SOUR example",
    "2 VERS 1.0",
    "1 CHAR UTF-8",
    "0 @I1@ INDI",
    "1 NAME John /Doe/",
    "0 TRLR",
]


def test_display_lines_preserves_count_and_order():
    outputs = list(display_lines(SAMPLE))

    assert len(outputs) == len(SAMPLE)
    assert [click.unstyle(text).strip() for text in outputs] == SAMPLE


def test_display_lines_indents_by_level():
    outputs = [click.unstyle(text) for text in display_lines(SAMPLE)]

    assert outputs[0] == "0 HEAD"
    assert outputs[1] == "    1 SOUR example"
    assert outputs[2] == "        2 VERS 1.0"
    assert outputs[3] == "    1 CHAR UTF-8"


def test_display_lines_matches_line_by_line_rendering():
    tracker = DepthTracker()
    expected = []
    for line in SAMPLE:
        rendered = render_line(parse_line(line, tracker.depth))
        tracker.advance(rendered.depth)
        expected.append(rendered.text)

    assert list(display_lines(SAMPLE)) == expected


def test_display_lines_updates_supplied_tracker():
    tracker = DepthTracker()

    list(display_lines(SAMPLE[:3], tracker=tracker))

    assert tracker.depth == 2


def test_non_conforming_line_keeps_tracked_depth():
    tracker = DepthTracker()
    outputs = list(display_lines(["0 HEAD", "1 NOTE a", "garbage", "2 CONT b"], tracker=tracker))

    assert outputs[2] == " " * 4 + click.style("garbage", bg="red")
    assert outputs[3] == render_line(parse_line("2 CONT b", 1)).text
    assert tracker.depth == 2


def test_out_of_range_line_still_moves_tracked_depth():
    """An out-of-range depth is flagged but becomes the new baseline anyway."""
    outputs = list(display_lines(["0 HEAD", "5 NOTE jump", "6 NOTE follows"]))

    assert outputs[1] == " " * 20 + click.style("5 NOTE jump", bg="red")
    # Legal only because the tracker moved to 5 on the previous line.
    assert outputs[2] == render_line(parse_line("6 NOTE follows", 5)).text
    assert parse_line("6 NOTE follows", 5).is_valid


def test_unknown_depth_keeps_tracked_depth():
    tracker = DepthTracker()

    list(display_lines(["0 HEAD", "1 NOTE a", "99999999999 NOTE b"], tracker=tracker))

    assert tracker.depth == 1


def test_display_lines_reports_alarm_lines():
    messages: list[str] = []

    list(
        display_lines(
            ["0 HEAD", "garbage", "3 NOTE x", "99999999999 NOTE y", "1 SOUR z"],
            warn=messages.append,
        )
    )

    assert messages == [
        "Line 2: does not look like a GEDCOM line",
        "Line 3: level 3 is out of range (expected 0 to 1)",
        "Line 4: unreadable level '99999999999'",
    ]


def test_display_lines_fills_summary():
    summary = DisplaySummary()

    list(display_lines(["0 HEAD", "", "garbage", "1 SOUR x"], summary=summary))

    assert summary.total == 4
    assert summary.blank == 1
    assert summary.non_conforming == 2


def test_display_lines_uses_config():
    config = DisplayConfig(indentation=1, max_indentation=3, indent_char="-")
    outputs = [click.unstyle(text) for text in display_lines(SAMPLE[:3], config)]

    assert outputs == ["0 HEAD", "-1 SOUR example", "--2 VERS 1.0"]


def test_display_lines_validates_config():
    with pytest.raises(ConfigError):
        list(display_lines(SAMPLE, DisplayConfig(indent_char="")))


def test_display_lines_empty_input():
    assert list(display_lines([])) == []


def test_display_lines_validates_config_once(monkeypatch):
    import gedcom_display_raw.display as display_module
    import gedcom_display_raw.renderer as renderer_module

    calls = {"display": 0, "renderer": 0}
    original = display_module.validate_config

    def _counting(name):
        def _validate(config):
            calls[name] += 1
            original(config)

        return _validate

    monkeypatch.setattr(display_module, "validate_config", _counting("display"))
    monkeypatch.setattr(renderer_module, "validate_config", _counting("renderer"))

    list(display_lines(SAMPLE))

    assert calls == {"display": 1, "renderer": 0}
