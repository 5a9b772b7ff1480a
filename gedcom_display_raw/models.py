"""Data models for gedcom-display-raw."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

NO_DEPTH = -1


class FieldRole(Enum):
    """Roles of the segments emitted for one rendered line.

    Attributes:
        INDENT: Indentation prefix derived from the depth.
        RAW: Whole original line, used when the line is not rendered field by field.
        LEADING_WHITESPACE: Whitespace before the depth digits.
        DEPTH: Depth digits.
        INTER_FIELD_WHITESPACE: Whitespace between depth and tag.
        TAG: Tag token.
        SEPARATOR: The single space after the tag.
        EXTRA_SEPARATOR_WHITESPACE: Whitespace beyond the single separator.
        PAYLOAD: Value following the tag.
        TRAILING_WHITESPACE: Whitespace at the end of the line.
    """

    INDENT = auto()
    RAW = auto()
    LEADING_WHITESPACE = auto()
    DEPTH = auto()
    INTER_FIELD_WHITESPACE = auto()
    TAG = auto()
    SEPARATOR = auto()
    EXTRA_SEPARATOR_WHITESPACE = auto()
    PAYLOAD = auto()
    TRAILING_WHITESPACE = auto()


@dataclass(frozen=True)
class ParsedLine:
    """One input line broken down into its GEDCOM fields.

    When `matched` is False every segment is empty and `depth` is None;
    only `raw_text` carries information.

    Attributes:
        raw_text: The line exactly as read, without its terminator.
        context_depth: Depth tracked from the previous lines.
        matched: Whether the line has the ``level tag value`` shape.
        leading_whitespace: Whitespace before the depth digits.
        depth_digits: Digits giving the nesting depth.
        inter_field_whitespace: Whitespace between depth and tag.
        tag: Tag token, possibly empty.
        separator: The single space after the tag, or an empty string.
        extra_separator_whitespace: Whitespace following the separator.
        payload: Value with trailing whitespace removed.
        trailing_whitespace: Whitespace removed from the end of the value.
        depth: Parsed depth, or None when it cannot be determined.
    """

    raw_text: str
    context_depth: int = NO_DEPTH
    matched: bool = False
    leading_whitespace: str = ""
    depth_digits: str = ""
    inter_field_whitespace: str = ""
    tag: str = ""
    separator: str = ""
    extra_separator_whitespace: str = ""
    payload: str = ""
    trailing_whitespace: str = ""
    depth: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.raw_text

    @property
    def is_all_whitespace(self) -> bool:
        return not self.raw_text.strip()

    @property
    def is_valid(self) -> bool:
        """Whether the depth is a legal step from `context_depth`.

        A depth may go down to any shallower level or up by exactly one.
        """
        if not self.matched or self.depth is None:
            return False
        return 0 <= self.depth <= self.context_depth + 1

    @property
    def is_custom_tag(self) -> bool:
        return self.tag.startswith("_")

    @property
    def indentation_level(self) -> int:
        """Depth used for indentation; falls back to the context depth."""
        return self.context_depth if self.depth is None else self.depth


@dataclass(frozen=True)
class StyledRun:
    """A piece of output text together with its terminal style.

    Attributes:
        role: What part of the line the text represents.
        text: Text to emit.
        style: Keyword arguments for `click.style` (``fg``, ``bg``, ``bold``).
        alarm: Whether the text is highlighted as suspicious.
    """

    role: FieldRole
    text: str
    style: dict[str, object] = field(default_factory=dict)
    alarm: bool = False


@dataclass(frozen=True)
class RenderedLine:
    """Result of rendering one parsed line.

    Attributes:
        text: Styled output line, escape sequences included.
        runs: Structured runs that `text` was built from.
        depth: Value the depth tracker should advance to, or None to keep it.
    """

    text: str
    runs: tuple[StyledRun, ...]
    depth: int | None

    @property
    def flagged_roles(self) -> list[FieldRole]:
        return [run.role for run in self.runs if run.alarm]


@dataclass
class DepthTracker:
    """Running depth carried from line to line.

    Starts at `NO_DEPTH` and is never reset. Any known depth replaces the
    tracked value, even one that was out of range for the previous context.

    Attributes:
        depth: Depth of the most recent line whose depth could be parsed.
    """

    depth: int = NO_DEPTH

    def advance(self, depth: int | None) -> int:
        if depth is not None:
            self.depth = depth
        return self.depth


@dataclass
class DisplaySummary:
    """Counters collected while displaying a stream of lines.

    Attributes:
        total: Number of lines displayed.
        blank: Empty lines.
        all_whitespace: Lines containing only whitespace (blank lines included).
        non_conforming: Lines that do not have the ``level tag value`` shape.
        out_of_range: Conforming lines whose depth is unknown or not a legal step.
        flagged: Valid lines with at least one field on the alarm background.
    """

    total: int = 0
    blank: int = 0
    all_whitespace: int = 0
    non_conforming: int = 0
    out_of_range: int = 0
    flagged: int = 0

    def record(self, parsed: ParsedLine, rendered: RenderedLine) -> None:
        self.total += 1
        if parsed.is_empty:
            self.blank += 1
        if parsed.is_all_whitespace:
            self.all_whitespace += 1
        if not parsed.matched:
            self.non_conforming += 1
        elif not parsed.is_valid:
            self.out_of_range += 1
        elif rendered.flagged_roles:
            self.flagged += 1

    def format(self) -> str:
        return (
            f"{self.total} lines: {self.non_conforming} non-conforming, "
            f"{self.out_of_range} out of range, {self.flagged} with flagged fields, "
            f"{self.blank} blank, {self.all_whitespace} whitespace-only"
        )
