"""Terminal rendering of parsed GEDCOM lines."""

from __future__ import annotations

import click

from .config import DisplayConfig, validate_config
from .constants import ALARM_STYLE, CUSTOM_TAG_STYLE, DEPTH_STYLE, TAG_STYLE
from .models import FieldRole, ParsedLine, RenderedLine, StyledRun


def indentation_width(parsed: ParsedLine, config: DisplayConfig) -> int:
    """Compute how many indent characters precede a line.

    Uses the line's own depth, or the context depth when the line's depth is
    unknown, scaled by `config.indentation` and clamped to
    ``[0, config.max_indentation]``.

    Args:
        parsed: Line to indent.
        config: Rendering configuration.

    Returns:
        int: Number of indent characters.

    Examples:
        indentation_width(parse_line("2 NOTE x", 1), DisplayConfig())  # 8
    """
    width = parsed.indentation_level * config.indentation
    return max(0, min(width, config.max_indentation))


def _field(role: FieldRole, text: str, alarm: bool = False, **style: object) -> StyledRun:
    if alarm:
        style = {**style, **ALARM_STYLE}
    return StyledRun(role=role, text=text, style=style, alarm=alarm)


def field_runs(parsed: ParsedLine) -> list[StyledRun]:
    """Build the styled runs for the content of a line, without indentation.

    Args:
        parsed: Line to style.

    Returns:
        list[StyledRun]: A single alarmed `RAW` run when the line is not valid,
            otherwise one run per field in line order.
    """
    if not parsed.is_valid:
        return [_field(FieldRole.RAW, parsed.raw_text, alarm=True)]

    tag_style = CUSTOM_TAG_STYLE if parsed.is_custom_tag else TAG_STYLE

    return [
        _field(
            FieldRole.LEADING_WHITESPACE,
            parsed.leading_whitespace,
            alarm=bool(parsed.leading_whitespace),
        ),
        _field(FieldRole.DEPTH, parsed.depth_digits, **DEPTH_STYLE),
        _field(
            FieldRole.INTER_FIELD_WHITESPACE,
            parsed.inter_field_whitespace,
            alarm=len(parsed.inter_field_whitespace) != 1,
        ),
        _field(FieldRole.TAG, parsed.tag, **tag_style),
        _field(FieldRole.SEPARATOR, parsed.separator, alarm=len(parsed.separator) != 1),
        _field(
            FieldRole.EXTRA_SEPARATOR_WHITESPACE,
            parsed.extra_separator_whitespace,
            alarm=bool(parsed.extra_separator_whitespace),
        ),
        _field(FieldRole.PAYLOAD, parsed.payload),
        _field(
            FieldRole.TRAILING_WHITESPACE,
            parsed.trailing_whitespace,
            alarm=bool(parsed.trailing_whitespace),
        ),
    ]


def style_run(run: StyledRun) -> str:
    """Convert a run to text with ANSI escapes; every run ends with a reset."""
    if run.role is FieldRole.INDENT:
        return run.text
    return click.style(run.text, **run.style)


def render_line(
    parsed: ParsedLine, config: DisplayConfig | None = None, validate: bool = True
) -> RenderedLine:
    """Render a parsed line for the terminal.

    Valid lines are coloured field by field, with any badly spaced field put
    on the alarm background. Lines that do not parse, or whose depth is not a
    legal step from the context depth, are shown verbatim on the alarm
    background. Never raises for any parsed line.

    Args:
        parsed: Line produced by `parse_line`.
        config: Rendering configuration. Defaults to a new `DisplayConfig`.
        validate: Check `config` first; callers rendering many lines with one
            already validated configuration pass False.

    Returns:
        RenderedLine: Styled text, the runs it was built from, and the depth
            the tracker should move to (None to leave it unchanged).

    Raises:
        ConfigError: If `validate` is set and the configuration fails validation.

    Examples:
        render_line(parse_line("0 HEAD")).depth  # 0
    """
    config = config or DisplayConfig()
    if validate:
        validate_config(config)

    indent = StyledRun(
        role=FieldRole.INDENT,
        text=config.indent_char * indentation_width(parsed, config),
    )
    runs = (indent, *field_runs(parsed))
    text = "".join(style_run(run) for run in runs)

    return RenderedLine(text=text, runs=runs, depth=parsed.depth)
