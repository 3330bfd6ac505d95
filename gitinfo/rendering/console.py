"""Render validation results for the terminal."""

import os
from typing import Iterable, List, TextIO

from gitinfo.config.constants import GREEN, NC, NO_COLOR_ENV, RED
from gitinfo.models import ValidationIssue


def use_color(mode: str, stream: TextIO) -> bool:
    """Decide whether ANSI colors should be written to ``stream``.

    Args:
        mode: ``always``, ``never`` or ``auto``
        stream: Output stream checked for a TTY in ``auto`` mode

    Returns:
        True when escapes should be emitted
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.getenv(NO_COLOR_ENV):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{NC}" if enabled else text


def render_success(file_path: str, color: bool = False) -> str:
    return _paint(f"✓ {file_path} is valid", GREEN, color)


def render_failure(file_path: str, issues: Iterable[ValidationIssue], color: bool = False) -> str:
    lines: List[str] = [_paint(f"Validation failed for {file_path}:", RED, color)]
    for issue in issues:
        lines.append(f"  - {issue}")
    return "\n".join(lines)


def render_error(message: str, color: bool = False) -> str:
    return _paint(f"Error: {message}", RED, color)
