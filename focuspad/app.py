"""Main application window for FocusPad."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMessageBox

from .audio.sounds import SoundPlayer
from .settings import Settings, load_settings, save_settings
from .timer.engine import SessionTimer, CompletionMode
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

log = logging.getLogger(__name__)

APP_TITLE = "FocusPad"
PRO_TITLE = "FocusPad Pro"


class FocusPadApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        *,
        completion_mode: CompletionMode = CompletionMode.CONTINUE,
        dual_session: bool = True,
    ) -> None:
        super().__init__()
        self.setMinimumSize(380, 640)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = load_settings()

        # ── audio (optional: the timer runs fine without it) ──────────
        self._sound_player: SoundPlayer | None
        try:
            self._sound_player = SoundPlayer(parent=self)
        except OSError:
            log.warning("Sound cache unavailable; alerts are muted", exc_info=True)
            self._sound_player = None

        # ── timer ─────────────────────────────────────────────────────
        self._timer = SessionTimer(
            self,
            completion_mode=completion_mode,
            dual_session=dual_session,
            play_sound=self._sound_player.play if self._sound_player else None,
        )

        # ── central widget ────────────────────────────────────────────
        self._timer_widget = TimerWidget(self._timer, self)
        self.setCentralWidget(self._timer_widget)
        self.setStyleSheet(build_stylesheet())

        # ── menu bar ──────────────────────────────────────────────────
        self._build_menu_bar()

        self._apply_paid_state()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def timer(self) -> SessionTimer:
        return self._timer

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def upgrade_action(self) -> QAction:
        return self._upgrade_action

    def upgrade(self) -> None:
        """Record the in-app purchase and unlock the premium presets."""
        if self._settings.is_paid_user:
            return
        self._settings.is_paid_user = True
        save_settings(self._settings)
        log.info("Upgraded to %s", PRO_TITLE)
        self._apply_paid_state()

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        about_action = QAction(f"About {APP_TITLE}", self)
        about_action.setMenuRole(QAction.MenuRole.AboutRole)
        about_action.triggered.connect(self._show_about)

        quit_action = QAction(f"Quit {APP_TITLE}", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)

        app_menu = menu_bar.addMenu(APP_TITLE)
        app_menu.addAction(about_action)
        app_menu.addAction(quit_action)

        store_menu = menu_bar.addMenu("Store")
        self._upgrade_action = QAction("Upgrade to Pro", self)
        self._upgrade_action.triggered.connect(self.upgrade)
        store_menu.addAction(self._upgrade_action)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            f"About {APP_TITLE}",
            f"<h3>{APP_TITLE}</h3>"
            "<p>A work/break countdown timer with audible alerts.</p>",
        )

    def _apply_paid_state(self) -> None:
        paid = self._settings.is_paid_user
        self.setWindowTitle(PRO_TITLE if paid else APP_TITLE)
        self._upgrade_action.setVisible(not paid)
        self._timer_widget.set_sounds_unlocked(paid)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and R (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._timer_widget.toggle_running()
            event.accept()
            return
        if key == Qt.Key.Key_R and not event.modifiers():
            self._timer.reset()
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer.pause()
        event.accept()
