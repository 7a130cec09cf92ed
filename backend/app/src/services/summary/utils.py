"""String helpers shared by the summary pipeline."""

from __future__ import annotations

import re

_CONTROL_CHARS = re.compile(r"[\r\n\t]")


def strip_control_chars(value: str) -> str:
    """Remove carriage returns, newlines and tabs."""
    return _CONTROL_CHARS.sub("", value)


def sanitize_log_input(value: object, max_length: int = 100) -> str:
    """Make an identifier safe for a single log line."""
    return _CONTROL_CHARS.sub(" ", str(value))[:max_length]
