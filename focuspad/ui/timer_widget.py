"""The single FocusPad screen.

Layout (top → bottom):
    - Session label ("Work Session" / "Break Session")
    - ``m : ss`` countdown readout
    - Start/Pause and Reset buttons
    - Duration sliders (work 1–60 min, break 1–30 min)
    - Alert sound picker
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QSlider, QComboBox,
)

from ..audio.sounds import AlertSound, PRIMARY_SOUNDS
from ..timer.engine import (
    SessionTimer, SessionKind,
    WORK_MINUTES_RANGE, BREAK_MINUTES_RANGE,
    format_remaining, session_label_for,
)


class TimerWidget(QWidget):
    """Display and controls bound to one ``SessionTimer``."""

    def __init__(self, timer: SessionTimer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._timer = timer
        self._build_ui()
        self._populate()
        self._connect_signals()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(24)

        self._session_label = QLabel(self)
        self._session_label.setObjectName("sessionLabel")
        self._session_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._session_label)

        self._time_label = QLabel(self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._time_label)

        # ── start/pause + reset ──────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)

        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("secondaryButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        root.addLayout(btn_row)

        # ── durations ────────────────────────────────────────────────
        root.addWidget(self._section_label("Customize Durations (minutes)"))

        self._work_slider, self._work_value = self._slider_row(
            root, "Work", "workSlider", WORK_MINUTES_RANGE,
        )
        self._break_row = QWidget(self)
        break_layout = QVBoxLayout(self._break_row)
        break_layout.setContentsMargins(0, 0, 0, 0)
        self._break_slider, self._break_value = self._slider_row(
            break_layout, "Break", "breakSlider", BREAK_MINUTES_RANGE,
        )
        root.addWidget(self._break_row)
        self._break_row.setVisible(self._timer.dual_session)

        # ── alert sound ──────────────────────────────────────────────
        root.addWidget(self._section_label("Alert Sound"))
        self._sound_combo = QComboBox(self)
        for sound in PRIMARY_SOUNDS:
            self._sound_combo.addItem(sound.value)
        root.addWidget(self._sound_combo)

        root.addStretch()

    def _slider_row(
        self,
        layout: QVBoxLayout,
        title: str,
        object_name: str,
        bounds: tuple[int, int],
    ) -> tuple[QSlider, QLabel]:
        row = QHBoxLayout()
        name = QLabel(title, self)
        name.setFixedWidth(50)
        slider = QSlider(Qt.Orientation.Horizontal, self)
        slider.setObjectName(object_name)
        slider.setRange(*bounds)
        slider.setSingleStep(1)
        value = QLabel(self)
        value.setFixedWidth(40)
        value.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        row.addWidget(name)
        row.addWidget(slider)
        row.addWidget(value)
        layout.addLayout(row)
        return slider, value

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setObjectName("sectionLabel")
        return lbl

    def _populate(self) -> None:
        t = self._timer
        self._work_slider.setValue(t.work_duration // 60)
        self._work_value.setText(f"{t.work_duration // 60}m")
        self._break_slider.setValue(t.break_duration // 60)
        self._break_value.setText(f"{t.break_duration // 60}m")
        if t.alert_sound in PRIMARY_SOUNDS:
            self._sound_combo.setCurrentIndex(PRIMARY_SOUNDS.index(t.alert_sound))
        self._refresh_display(t.remaining)
        self._on_session_changed(t.session_kind)
        self._on_running_changed(t.is_running)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self.toggle_running)
        self._reset_btn.clicked.connect(self._timer.reset)
        self._work_slider.valueChanged.connect(self._on_work_slider)
        self._break_slider.valueChanged.connect(self._on_break_slider)
        self._sound_combo.currentIndexChanged.connect(self._on_sound_picked)

        self._timer.tick.connect(self._refresh_display)
        self._timer.running_changed.connect(self._on_running_changed)
        self._timer.session_changed.connect(self._on_session_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def toggle_running(self) -> None:
        if self._timer.is_running:
            self._timer.pause()
        else:
            self._timer.start()

    def _on_work_slider(self, minutes: int) -> None:
        self._work_value.setText(f"{minutes}m")
        self._timer.set_work_duration(minutes)

    def _on_break_slider(self, minutes: int) -> None:
        self._break_value.setText(f"{minutes}m")
        self._timer.set_break_duration(minutes)

    def _on_sound_picked(self, index: int) -> None:
        if 0 <= index < len(PRIMARY_SOUNDS):
            self._timer.set_alert_sound(PRIMARY_SOUNDS[index])

    def _on_running_changed(self, running: bool) -> None:
        self._start_pause_btn.setText("Pause" if running else "Start")

    def _on_session_changed(self, kind: SessionKind) -> None:
        self._session_label.setText(session_label_for(kind))

    def _refresh_display(self, remaining: int) -> None:
        self._time_label.setText(format_remaining(remaining))

    # ── premium presets ───────────────────────────────────────────────────

    def set_sounds_unlocked(self, unlocked: bool) -> None:
        """Enable the system presets in the picker (paid users only).

        Falls back to ``BEEP`` if a locked preset is currently selected.
        """
        model = self._sound_combo.model()
        for row, sound in enumerate(PRIMARY_SOUNDS):
            model.item(row).setEnabled(unlocked or sound == AlertSound.BEEP)
        if not unlocked and self._timer.alert_sound != AlertSound.BEEP:
            self._sound_combo.setCurrentIndex(PRIMARY_SOUNDS.index(AlertSound.BEEP))
            self._timer.set_alert_sound(AlertSound.BEEP)

    # ── readouts ─────────────────────────────────────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def session_text(self) -> str:
        return self._session_label.text()

    @property
    def start_pause_text(self) -> str:
        return self._start_pause_btn.text()
