"""Session timer state machine for FocusPad.

States
------
IDLE       Not running. The clock shows the remaining time and waits.
RUNNING    A one-second ``QTimer`` handle is alive and ticking.

Transitions
-----------
IDLE → RUNNING     (start)
RUNNING → IDLE     (pause, reset)
RUNNING → IDLE     (countdown completes, ``CompletionMode.STOP``)
RUNNING → RUNNING  (tick, or countdown completes with ``CompletionMode.CONTINUE``)

A session completes on the tick *after* the clock reaches ``0 : 00``, so
the zero reading stays on screen for a full second before the alert.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..audio.sounds import AlertSound, PRIMARY_SOUNDS, THRESHOLD_SOUNDS

log = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class SessionKind(Enum):
    WORK = "work"
    BREAK = "break"


class CompletionMode(Enum):
    """What happens when a countdown reaches zero."""

    CONTINUE = "continue"  # flip Work ⇄ Break and keep running
    STOP = "stop"          # pause at 0 : 00 until reset


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5

# Bounds enforced by the sliders, not by the engine.
WORK_MINUTES_RANGE = (1, 60)
BREAK_MINUTES_RANGE = (1, 30)

TICK_INTERVAL_MS = 1000

SESSION_LABELS: dict[SessionKind, str] = {
    SessionKind.WORK: "Work Session",
    SessionKind.BREAK: "Break Session",
}


def format_remaining(seconds: int) -> str:
    """Render seconds as ``m : ss`` (e.g. ``24 : 59``)."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes} : {secs:02d}"


def session_label_for(kind: SessionKind) -> str:
    return SESSION_LABELS[kind]


# ── engine ────────────────────────────────────────────────────────────────


class SessionTimer(QObject):
    """Qt-driven work/break countdown with threshold and completion alerts.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted whenever the remaining time changes (ticks, resets,
        duration edits, session switches).
    running_changed(is_running: bool)
        Emitted when the timer starts or stops.
    session_changed(kind: SessionKind)
        Emitted when Work and Break swap.
    session_completed(kind: SessionKind)
        Emitted once per finished countdown with the kind that finished.
    alert_requested(sound: AlertSound)
        Emitted for every threshold or completion alert, before the
        ``play_sound`` collaborator is called.
    """

    tick = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    session_changed = pyqtSignal(object)
    session_completed = pyqtSignal(object)
    alert_requested = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        completion_mode: CompletionMode = CompletionMode.CONTINUE,
        dual_session: bool = True,
        play_sound: Callable[[AlertSound], None] | None = None,
        alert_sound: AlertSound = AlertSound.BEEP,
        threshold_sounds: dict[int, AlertSound] | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._completion_mode = completion_mode
        self._dual_session = dual_session
        self._play_sound = play_sound
        self._alert_sound = alert_sound
        self._threshold_sounds: dict[int, AlertSound] = dict(
            THRESHOLD_SOUNDS if threshold_sounds is None else threshold_sounds
        )
        self._tick_interval_ms = tick_interval_ms
        self._durations: dict[SessionKind, int] = {
            SessionKind.WORK: DEFAULT_WORK_MINUTES * 60,
            SessionKind.BREAK: DEFAULT_BREAK_MINUTES * 60,
        }

        # ── countdown state ───────────────────────────────────────────
        self._running: bool = False
        self._session_kind: SessionKind = SessionKind.WORK
        self._remaining: int = self._durations[SessionKind.WORK]

        # Exists only while running.
        self._qt_timer: QTimer | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def session_kind(self) -> SessionKind:
        return self._session_kind

    @property
    def work_duration(self) -> int:
        return self._durations[SessionKind.WORK]

    @property
    def break_duration(self) -> int:
        return self._durations[SessionKind.BREAK]

    @property
    def alert_sound(self) -> AlertSound:
        return self._alert_sound

    @property
    def completion_mode(self) -> CompletionMode:
        return self._completion_mode

    @property
    def dual_session(self) -> bool:
        return self._dual_session

    @property
    def display_text(self) -> str:
        return format_remaining(self._remaining)

    @property
    def session_label(self) -> str:
        return session_label_for(self._session_kind)

    def duration_for(self, kind: SessionKind) -> int:
        return self._durations[kind]

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin counting down.  No-op while already running."""
        if self._running:
            return
        self._running = True
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(self._tick_interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)
        self._qt_timer.start()
        self.running_changed.emit(True)

    def pause(self) -> None:
        """Stop counting down.  Safe to call repeatedly."""
        was_running = self._running
        self._running = False
        if self._qt_timer is not None:
            self._qt_timer.stop()
            self._qt_timer.deleteLater()
            self._qt_timer = None
        if was_running:
            self.running_changed.emit(False)

    def reset(self) -> None:
        """Pause and refill the clock for the current session."""
        self.pause()
        self._remaining = self._durations[self._session_kind]
        self.tick.emit(self._remaining)

    def set_work_duration(self, minutes: int) -> None:
        self._set_duration(SessionKind.WORK, minutes)

    def set_break_duration(self, minutes: int) -> None:
        self._set_duration(SessionKind.BREAK, minutes)

    def set_alert_sound(self, sound: AlertSound | str) -> None:
        """Select the completion alert, by preset or by its label.

        Only ``PRIMARY_SOUNDS`` qualify; threshold cues raise ``ValueError``.
        """
        sound = AlertSound(sound)
        if sound not in PRIMARY_SOUNDS:
            raise ValueError(f"{sound.value!r} is not a completion alert")
        self._alert_sound = sound

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _set_duration(self, kind: SessionKind, minutes: int) -> None:
        self._durations[kind] = minutes * 60
        if self._session_kind != kind:
            return
        # Paused: snap to the new duration. Running: clamp only.
        if not self._running or self._remaining > self._durations[kind]:
            self._remaining = self._durations[kind]
            self.tick.emit(self._remaining)

    def _on_tick(self) -> None:
        if not self._running:
            return

        if self._remaining > 0:
            self._remaining -= 1
            self.tick.emit(self._remaining)
            threshold_sound = self._threshold_sounds.get(self._remaining)
            if threshold_sound is not None:
                self._request_alert(threshold_sound)
            return

        self._finish_session()

    def _finish_session(self) -> None:
        completed = self._session_kind
        log.info(
            "%s session finished (%s)", completed.value, self._completion_mode.value,
        )

        if self._completion_mode == CompletionMode.STOP:
            self.pause()
        else:
            if self._dual_session:
                self._session_kind = (
                    SessionKind.BREAK
                    if completed == SessionKind.WORK
                    else SessionKind.WORK
                )
                self.session_changed.emit(self._session_kind)
            self._remaining = self._durations[self._session_kind]
            self.tick.emit(self._remaining)

        self.session_completed.emit(completed)
        self._request_alert(self._alert_sound)

    def _request_alert(self, sound: AlertSound) -> None:
        """Fire-and-forget: audio trouble never touches the countdown."""
        self.alert_requested.emit(sound)
        if self._play_sound is None:
            return
        try:
            self._play_sound(sound)
        except Exception:
            log.warning("Could not play alert sound %s", sound.name, exc_info=True)
