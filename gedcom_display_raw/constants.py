"""Constants used across the gedcom-display-raw package."""

from __future__ import annotations

import re

from .config import DisplayConfig

DEFAULT_CONFIG = DisplayConfig()

# Line grammar. Only the depth digits are required; \s and \d are ASCII only.
WHITESPACE = " \t\n\r\f\v"
LINE_PATTERN = re.compile(
    r"(?P<leading>\s*)"
    r"(?P<depth>\d+)"
    r"(?P<inter_field>\s*)"
    r"(?P<tag>\S*)"
    r"(?P<separator> ?)"
    r"(?P<extra_separator>\s*)"
    r"(?P<remainder>.*)",
    re.DOTALL | re.ASCII,
)

# Largest depth a 32-bit level field can hold
MAX_DEPTH = 2**31 - 1

# Indentation defaults
DEFAULT_INDENTATION = DEFAULT_CONFIG.indentation
MAX_INDENTATION = DEFAULT_CONFIG.max_indentation

# Styles passed to click.style
DEPTH_STYLE = {"fg": "cyan"}
TAG_STYLE = {"fg": "magenta", "bold": True}
CUSTOM_TAG_STYLE = {"fg": "green", "bold": True}
ALARM_STYLE = {"bg": "red"}
