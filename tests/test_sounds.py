"""Tests for alert presets, sound codes, WAV synthesis and SoundPlayer."""

from __future__ import annotations

import io
import wave

import numpy as np
import pytest

from focuspad.audio.sounds import (
    AlertSound,
    SoundPlayer,
    SOUND_CODES,
    SOUND_CODE_RANGE,
    PRIMARY_SOUNDS,
    THRESHOLD_SOUNDS,
    SAMPLE_RATE,
    sound_code,
    validate_sound_codes,
    wav_path_for,
    _GENERATORS,
    _make_envelope,
    _tap_generator,
)


def _read_wav(data: bytes) -> wave.Wave_read:
    return wave.open(io.BytesIO(data), "rb")


# ═══════════════════════════════════════════════════════════════════════
#  PRESETS + CODES
# ═══════════════════════════════════════════════════════════════════════


class TestSoundCodes:

    def test_every_preset_has_a_code(self):
        assert set(SOUND_CODES) == set(AlertSound)

    def test_codes_in_registry_range(self):
        for code in SOUND_CODES.values():
            assert 1000 <= code <= 1036

    def test_known_codes(self):
        assert sound_code(AlertSound.BEEP) == 1005
        assert sound_code(AlertSound.SYSTEM_1) == 1000
        assert sound_code(AlertSound.SYSTEM_2) == 1013

    def test_codes_unique(self):
        assert len(set(SOUND_CODES.values())) == len(SOUND_CODES)

    def test_labels(self):
        assert AlertSound("Beep") is AlertSound.BEEP
        assert AlertSound.SYSTEM_1.value == "System Sound 1000"

    def test_primary_presets(self):
        assert PRIMARY_SOUNDS == (
            AlertSound.BEEP, AlertSound.SYSTEM_1, AlertSound.SYSTEM_2,
        )

    def test_threshold_table(self):
        assert set(THRESHOLD_SOUNDS) == {60, 30, 15}
        assert not set(THRESHOLD_SOUNDS.values()) & set(PRIMARY_SOUNDS)


class TestValidateSoundCodes:

    def test_returns_copy(self):
        result = validate_sound_codes(SOUND_CODES)
        assert result == SOUND_CODES
        assert result is not SOUND_CODES

    def test_missing_preset(self):
        codes = dict(SOUND_CODES)
        del codes[AlertSound.SYSTEM_2]
        with pytest.raises(ValueError, match="SYSTEM_2"):
            validate_sound_codes(codes)

    @pytest.mark.parametrize("bad", [999, 1037, 4095])
    def test_out_of_range(self, bad):
        codes = dict(SOUND_CODES)
        codes[AlertSound.BEEP] = bad
        with pytest.raises(ValueError, match="BEEP"):
            validate_sound_codes(codes)

    def test_non_integer(self):
        codes = dict(SOUND_CODES)
        codes[AlertSound.BEEP] = "1005"
        with pytest.raises(ValueError):
            validate_sound_codes(codes)

    def test_range_bounds(self):
        assert SOUND_CODE_RANGE.start == 1000
        assert SOUND_CODE_RANGE.stop == 1037


# ═══════════════════════════════════════════════════════════════════════
#  SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


class TestSynthesis:

    @pytest.mark.parametrize("sound", list(AlertSound))
    def test_generates_mono_16bit_wav(self, sound):
        with _read_wav(_GENERATORS[sound]()) as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == SAMPLE_RATE
            assert wf.getnframes() > 0

    def test_more_taps_last_longer(self):
        lengths = []
        for count in (1, 2, 3):
            with _read_wav(_tap_generator(count)()) as wf:
                lengths.append(wf.getnframes())
        assert lengths[0] < lengths[1] < lengths[2]

    def test_envelope_shape(self):
        env = _make_envelope(2000, attack=100, decay=100, sustain_level=0.5, release=100)
        assert len(env) == 2000
        assert env[0] == pytest.approx(0.0)
        assert env[1000] == pytest.approx(0.5)
        assert env[-1] == pytest.approx(0.0)
        assert np.all(env <= 1.0)

    def test_envelope_shorter_than_attack(self):
        env = _make_envelope(50, attack=200)
        assert len(env) == 50


# ═══════════════════════════════════════════════════════════════════════
#  PLAYER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSoundPlayer:

    def test_writes_one_wav_per_code(self, tmp_path):
        player = SoundPlayer(sounds_dir=tmp_path / "cache")
        names = sorted(p.name for p in (tmp_path / "cache").iterdir())
        assert names == sorted(f"{code}.wav" for code in SOUND_CODES.values())
        assert player.sounds_dir == tmp_path / "cache"

    def test_default_dir_is_patched_cache(self, tmp_path):
        player = SoundPlayer()
        assert player.sounds_dir == tmp_path / "sounds"
        assert wav_path_for(AlertSound.BEEP, player.sounds_dir).exists()

    def test_existing_files_are_kept(self, tmp_path):
        cache = tmp_path / "cache"
        cache.mkdir()
        marker = wav_path_for(AlertSound.BEEP, cache)
        marker.write_bytes(b"cached")
        SoundPlayer(sounds_dir=cache)
        assert marker.read_bytes() == b"cached"

    def test_volume_clamped(self, tmp_path):
        player = SoundPlayer(sounds_dir=tmp_path)
        player.set_volume(150)
        assert player.volume == 100
        player.set_volume(-5)
        assert player.volume == 0
        player.set_volume(42)
        assert player.volume == 42

    def test_enable_toggle(self, tmp_path):
        player = SoundPlayer(sounds_dir=tmp_path)
        assert player.enabled is True
        player.set_enabled(False)
        assert player.enabled is False

    def test_play_does_not_raise(self, tmp_path):
        player = SoundPlayer(sounds_dir=tmp_path)
        for sound in AlertSound:
            player.play(sound)

    def test_play_disabled_is_noop(self, tmp_path):
        player = SoundPlayer(sounds_dir=tmp_path)
        player.set_enabled(False)
        player.play(AlertSound.BEEP)

    def test_play_missing_effect_is_noop(self, tmp_path):
        player = SoundPlayer(sounds_dir=tmp_path)
        player._effects.clear()
        player.play(AlertSound.BEEP)
