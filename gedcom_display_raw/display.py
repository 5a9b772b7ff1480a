"""Sequential display of a stream of GEDCOM lines."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .config import DisplayConfig, validate_config
from .models import DepthTracker, DisplaySummary
from .parser import parse_line
from .renderer import render_line


def display_lines(
    lines: Iterable[str],
    config: DisplayConfig | None = None,
    tracker: DepthTracker | None = None,
    summary: DisplaySummary | None = None,
    warn: Callable[[str], None] | None = None,
) -> Iterator[str]:
    """Render lines one at a time, threading the depth between them.

    Each line is parsed against the depth tracked so far, rendered, and the
    tracker is then advanced with the line's own depth whenever that depth is
    known, whether or not the line was a legal step. Output order matches
    input order, one output line per input line.

    Args:
        lines: Input lines without terminators.
        config: Rendering configuration. Defaults to a new `DisplayConfig`.
        tracker: Depth tracker to use; a fresh one starting at `NO_DEPTH`
            when omitted. Passing one in lets callers inspect it afterwards.
        summary: Optional counters updated for every line.
        warn: Optional callback receiving a message for each line shown on
            the alarm path.

    Yields:
        str: Styled output lines.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        for text in display_lines(["0 HEAD", "1 SOUR x"]):
            print(text)
    """
    config = config or DisplayConfig()
    validate_config(config)
    tracker = tracker if tracker is not None else DepthTracker()

    for line_number, line in enumerate(lines, start=1):
        parsed = parse_line(line, tracker.depth)
        rendered = render_line(parsed, config, validate=False)
        tracker.advance(rendered.depth)

        if summary is not None:
            summary.record(parsed, rendered)
        if warn is not None and not parsed.is_valid:
            if not parsed.matched:
                warn(f"Line {line_number}: does not look like a GEDCOM line")
            elif parsed.depth is None:
                warn(f"Line {line_number}: unreadable level {parsed.depth_digits!r}")
            else:
                warn(
                    f"Line {line_number}: level {parsed.depth} is out of range "
                    f"(expected 0 to {parsed.context_depth + 1})"
                )

        yield rendered.text
