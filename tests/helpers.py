"""Shared test helpers for FocusPad."""

from focuspad.timer.engine import SessionTimer


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class SoundSpy:
    """Stand-in for the ``play_sound`` collaborator."""

    def __init__(self):
        self.played: list = []

    def __call__(self, sound):
        self.played.append(sound)


def run_ticks(timer: SessionTimer, count: int) -> None:
    """Deliver *count* one-second ticks without waiting for the QTimer."""
    for _ in range(count):
        timer._on_tick()
