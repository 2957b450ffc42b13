"""Alert presets, sound codes, and playback using numpy + QSoundEffect.

Every preset maps to an opaque integer sound code in the ``1000..1036``
registry range.  The desktop player synthesises one WAV per code with
sine waves and ADSR envelopes, caches it to disk, and plays it through
``QSoundEffect``.

Presets
-------
- ``BEEP``            (1005) — two-tone "new mail" blip, the default alert
- ``SYSTEM_1``        (1000) — ascending three-note chime
- ``SYSTEM_2``        (1013) — soft bell
- ``ONE_MINUTE``      (1020) — single tap at 60 s remaining
- ``THIRTY_SECONDS``  (1021) — double tap at 30 s remaining
- ``FIFTEEN_SECONDS`` (1022) — triple tap at 15 s remaining
"""

from __future__ import annotations

import io
import logging
import wave
from enum import Enum
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

log = logging.getLogger(__name__)


# ── presets ──────────────────────────────────────────────────────────────


class AlertSound(Enum):
    BEEP = "Beep"
    SYSTEM_1 = "System Sound 1000"
    SYSTEM_2 = "System Sound 1013"
    ONE_MINUTE = "One Minute"
    THIRTY_SECONDS = "Thirty Seconds"
    FIFTEEN_SECONDS = "Fifteen Seconds"


SOUND_CODE_RANGE = range(1000, 1037)


def validate_sound_codes(codes: dict[AlertSound, int]) -> dict[AlertSound, int]:
    """Check that every preset has an in-range integer code.

    Returns a copy of *codes*; raises ``ValueError`` otherwise.
    """
    missing = [s.name for s in AlertSound if s not in codes]
    if missing:
        raise ValueError(f"no sound code for: {', '.join(missing)}")
    for sound, code in codes.items():
        if not isinstance(code, int) or code not in SOUND_CODE_RANGE:
            raise ValueError(f"sound code for {sound.name} out of range: {code!r}")
    return dict(codes)


SOUND_CODES: dict[AlertSound, int] = validate_sound_codes({
    AlertSound.BEEP: 1005,
    AlertSound.SYSTEM_1: 1000,
    AlertSound.SYSTEM_2: 1013,
    AlertSound.ONE_MINUTE: 1020,
    AlertSound.THIRTY_SECONDS: 1021,
    AlertSound.FIFTEEN_SECONDS: 1022,
})

# Selectable as the completion alert.
PRIMARY_SOUNDS = (AlertSound.BEEP, AlertSound.SYSTEM_1, AlertSound.SYSTEM_2)

# Remaining-seconds → warning cue.
THRESHOLD_SOUNDS: dict[int, AlertSound] = {
    60: AlertSound.ONE_MINUTE,
    30: AlertSound.THIRTY_SECONDS,
    15: AlertSound.FIFTEEN_SECONDS,
}


def sound_code(sound: AlertSound) -> int:
    return SOUND_CODES[sound]


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "FocusPad"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit mono PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_mail_beep() -> bytes:
    """Two quick notes, high then low (E6→B5)."""
    parts: list[np.ndarray] = []
    for freq in (1318.51, 987.77):
        tone = _sine(freq, 0.09) * 0.5
        parts.append(tone * _make_envelope(len(tone), attack=60, decay=150,
                                           sustain_level=0.5, release=400))
        parts.append(_silence(0.02))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_chime() -> bytes:
    """Three ascending notes (C5→E5→G5)."""
    parts: list[np.ndarray] = []
    for freq in (523.25, 659.25, 783.99):
        tone = _sine(freq, 0.12) * 0.6
        parts.append(tone * _make_envelope(len(tone), attack=100, decay=200,
                                           sustain_level=0.4, release=300))
        parts.append(_silence(0.03))
    parts.append(_silence(0.05))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_bell() -> bytes:
    """Soft A4 bell with an octave overtone and a long decay."""
    duration = 1.0
    combined = _sine(440.0, duration) * 0.35 + _sine(880.0, duration) * 0.08
    env = _make_envelope(
        len(combined),
        attack=int(SAMPLE_RATE * 0.08),
        decay=int(SAMPLE_RATE * 0.3),
        sustain_level=0.25,
        release=int(SAMPLE_RATE * 0.55),
    )
    return _to_wav_bytes(combined * env)


def _tap_generator(count: int) -> Callable[[], bytes]:
    """Build a generator for *count* gentle 800 Hz taps, 80 ms apart."""

    def generate() -> bytes:
        tap = _sine(800.0, 0.04) * 0.35
        tap = tap * _make_envelope(len(tap), attack=40, decay=100,
                                   sustain_level=0.2, release=200)
        parts: list[np.ndarray] = []
        for _ in range(count):
            parts.append(tap)
            parts.append(_silence(0.08))
        return _to_wav_bytes(np.concatenate(parts))

    return generate


_GENERATORS: dict[AlertSound, Callable[[], bytes]] = {
    AlertSound.BEEP: _generate_mail_beep,
    AlertSound.SYSTEM_1: _generate_chime,
    AlertSound.SYSTEM_2: _generate_bell,
    AlertSound.ONE_MINUTE: _tap_generator(1),
    AlertSound.THIRTY_SECONDS: _tap_generator(2),
    AlertSound.FIFTEEN_SECONDS: _tap_generator(3),
}


def wav_path_for(sound: AlertSound, sounds_dir: Path) -> Path:
    """Cached WAV files are named after the sound code, e.g. ``1005.wav``."""
    return sounds_dir / f"{sound_code(sound)}.wav"


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND PLAYER
# ═══════════════════════════════════════════════════════════════════════════


class SoundPlayer(QObject):
    """Synthesises, caches and plays the alert presets.

    Usage::

        player = SoundPlayer(parent=self)
        timer = SessionTimer(play_sound=player.play)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[AlertSound, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, sound: AlertSound) -> None:
        """Play a preset.  No-op if disabled or the effect is missing."""
        if not self._enabled:
            return
        effect = self._effects.get(sound)
        if effect is None:
            log.debug("No effect loaded for %s", sound.name)
            return
        effect.play()

    @property
    def volume(self) -> int:
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def sounds_dir(self) -> Path:
        return self._sounds_dir

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for sound, gen_fn in _GENERATORS.items():
            path = wav_path_for(sound, self._sounds_dir)
            if not path.exists():
                path.write_bytes(gen_fn())

    def _load_effects(self) -> None:
        for sound in AlertSound:
            path = wav_path_for(sound, self._sounds_dir)
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[sound] = effect
