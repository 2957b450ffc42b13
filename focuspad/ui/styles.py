"""QSS stylesheet and session colours for FocusPad."""

from __future__ import annotations

from ..timer.engine import SessionKind

# Slider / label accent per session.
SESSION_COLORS: dict[SessionKind, str] = {
    SessionKind.WORK:  "#3B82F6",   # blue
    SessionKind.BREAK: "#22C55E",   # green
}

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "accent":       "#3B82F6",
    "muted":        "#6B7280",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "border":       "#313154",
}


_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Pro", ".AppleSystemUIFont"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    font = resolve_font_family()
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QLabel#sessionLabel {{
        font-size: 24px;
        font-weight: 600;
    }}

    QLabel#timeLabel {{
        font-family: "Menlo", "Courier New", monospace;
        font-size: 60px;
        font-weight: 700;
    }}

    QLabel#sectionLabel {{
        font-size: 15px;
        font-weight: 700;
    }}

    QPushButton {{
        border: none;
        border-radius: 8px;
        padding: 12px 24px;
        font-weight: 600;
        color: white;
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
    }}

    QPushButton#secondaryButton {{
        background-color: {p['muted']};
    }}

    QSlider#workSlider::handle:horizontal {{
        background-color: {SESSION_COLORS[SessionKind.WORK]};
    }}

    QSlider#breakSlider::handle:horizontal {{
        background-color: {SESSION_COLORS[SessionKind.BREAK]};
    }}

    QComboBox {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 6px 10px;
    }}
    """
