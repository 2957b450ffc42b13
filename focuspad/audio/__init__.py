"""Audio package."""

from .sounds import (
    AlertSound,
    SoundPlayer,
    SOUND_CODES,
    PRIMARY_SOUNDS,
    THRESHOLD_SOUNDS,
    sound_code,
    validate_sound_codes,
)

__all__ = [
    "AlertSound",
    "SoundPlayer",
    "SOUND_CODES",
    "PRIMARY_SOUNDS",
    "THRESHOLD_SOUNDS",
    "sound_code",
    "validate_sound_codes",
]
