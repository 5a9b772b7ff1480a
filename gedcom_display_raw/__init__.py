"""
gedcom-display-raw: highlight and indent GEDCOM files for the terminal.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    gedcom-display-raw < tree.ged

Library Usage:
    from gedcom_display_raw import NO_DEPTH, parse_line, render_line

    parsed = parse_line("0 HEAD", NO_DEPTH)
    rendered = render_line(parsed)
    print(rendered.text)
"""

from .config import ConfigError, DisplayConfig
from .display import display_lines
from .models import (
    NO_DEPTH,
    DepthTracker,
    DisplaySummary,
    FieldRole,
    ParsedLine,
    RenderedLine,
    StyledRun,
)
from .parser import parse_line
from .renderer import render_line

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse_line",
    "render_line",
    "display_lines",
    # Data models
    "ParsedLine",
    "RenderedLine",
    "StyledRun",
    "FieldRole",
    "DepthTracker",
    "DisplaySummary",
    "NO_DEPTH",
    # Configuration
    "DisplayConfig",
    # Exceptions
    "ConfigError",
    # Version
    "__version__",
]
