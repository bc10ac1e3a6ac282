import numpy as np
from speechbubble.audio.tick import TickSound, DEFAULT_TICK

def test_default_tick_is_one_beat_of_c5_at_150_bpm():
    assert DEFAULT_TICK.frequency == 523.25
    assert DEFAULT_TICK.duration_ms == 400

def test_envelope_peaks_after_attack_and_falls_silent_without_sustain():
    tone = TickSound()
    env = tone.envelope(sample_rate=1000)  # one sample per ms

    assert len(env) == 400
    assert env[0] == 0.0
    assert env[20] == 1.0
    assert env[30] == 0.0
    assert np.all(env[30:] == 0.0)

def test_samples_are_int16_stereo():
    data = TickSound().samples(sample_rate=22050, channels=2)

    assert data.dtype == np.int16
    assert data.shape == (int(22050 * 0.4), 2)
    assert np.array_equal(data[:, 0], data[:, 1])
    assert np.abs(data).max() <= int(0.3 * (2**15 - 1))

def test_mono_samples():
    data = TickSound().samples(sample_rate=8000, channels=1)
    assert data.ndim == 1

def test_tones_are_hashable_cache_keys():
    cache = {TickSound(): "a"}
    assert cache[TickSound()] == "a"
    assert TickSound(frequency=440.0) not in cache
