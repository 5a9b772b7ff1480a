"""GEDCOM line parsing utilities."""

from __future__ import annotations

from .constants import LINE_PATTERN, MAX_DEPTH, WHITESPACE
from .models import NO_DEPTH, ParsedLine


def parse_depth(digits: str) -> int | None:
    """Convert a run of depth digits to an integer.

    Args:
        digits: Digit characters captured from the line.

    Returns:
        int | None: The depth, or None when the digits are empty or the value
            exceeds `MAX_DEPTH`.

    Examples:
        parse_depth("2")  # 2
        parse_depth("99999999999")  # None
    """
    try:
        depth = int(digits, 10)
    except ValueError:
        return None
    if depth < 0 or depth > MAX_DEPTH:
        return None
    return depth


def split_trailing_whitespace(remainder: str) -> tuple[str, str]:
    """Split a value into its content and the ASCII whitespace that ends it.

    Args:
        remainder: Text following the tag and separators.

    Returns:
        tuple[str, str]: The value without trailing whitespace, and the
            removed whitespace.

    Examples:
        split_trailing_whitespace("John /Doe/  ")  # ("John /Doe/", "  ")
    """
    payload = remainder.rstrip(WHITESPACE)
    return payload, remainder[len(payload) :]


def parse_line(line: str | None, context_depth: int = NO_DEPTH) -> ParsedLine:
    """Break a GEDCOM line into its fields.

    The parser is deliberately liberal: anything with a run of digits at the
    start (after optional whitespace) is accepted, and every deviation from
    the canonical ``level SP tag SP value`` layout is kept in its own field
    so it can be highlighted. Lines without such digits come back with
    ``matched=False``. Nothing is ever raised for bad input.

    Args:
        line: Line without its terminator. None is treated as an empty line.
        context_depth: Depth tracked from the previous lines.

    Returns:
        ParsedLine: The decomposed line.

    Examples:
        parse_line("1 NAME John /Doe/", 0).tag  # "NAME"
        parse_line("hello world").matched  # False
    """
    text = line or ""
    match = LINE_PATTERN.fullmatch(text)
    if match is None:
        return ParsedLine(raw_text=text, context_depth=context_depth)

    payload, trailing = split_trailing_whitespace(match.group("remainder"))

    return ParsedLine(
        raw_text=text,
        context_depth=context_depth,
        matched=True,
        leading_whitespace=match.group("leading"),
        depth_digits=match.group("depth"),
        inter_field_whitespace=match.group("inter_field"),
        tag=match.group("tag"),
        separator=match.group("separator"),
        extra_separator_whitespace=match.group("extra_separator"),
        payload=payload,
        trailing_whitespace=trailing,
        depth=parse_depth(match.group("depth")),
    )
