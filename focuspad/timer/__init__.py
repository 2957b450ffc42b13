"""Timer package."""

from .engine import (
    SessionTimer,
    SessionKind,
    CompletionMode,
    DEFAULT_WORK_MINUTES,
    DEFAULT_BREAK_MINUTES,
    WORK_MINUTES_RANGE,
    BREAK_MINUTES_RANGE,
    format_remaining,
    session_label_for,
)

__all__ = [
    "SessionTimer",
    "SessionKind",
    "CompletionMode",
    "DEFAULT_WORK_MINUTES",
    "DEFAULT_BREAK_MINUTES",
    "WORK_MINUTES_RANGE",
    "BREAK_MINUTES_RANGE",
    "format_remaining",
    "session_label_for",
]
