import pytest
from unittest.mock import MagicMock, patch
from speechbubble.audio.manager import AudioManager
from speechbubble.audio.tick import TickSound
from speechbubble.core.events import AudioEvent

# All tests here need the mock_pygame fixture from conftest
pytestmark = pytest.mark.usefixtures("mock_pygame")

@pytest.fixture
def channel():
    import pygame
    mock_channel = MagicMock()
    pygame.mixer.find_channel.return_value = mock_channel
    return mock_channel

def test_audio_manager_init():
    import pygame
    # Simulate mixer not initialized yet
    pygame.mixer.get_init.return_value = None

    mgr = AudioManager()
    mgr.init()

    pygame.mixer.init.assert_called_once()
    assert mgr.initialized

def test_init_failure_is_logged(caplog):
    import pygame
    pygame.mixer.get_init.return_value = None
    pygame.mixer.init.side_effect = pygame.error("no audio device")

    mgr = AudioManager()
    mgr.init()

    assert not mgr.initialized
    assert "Failed to initialize audio system" in caplog.text

def test_play_sfx_logic(channel):
    mgr = AudioManager()
    mgr._initialized = True  # Force initialized state for test
    mgr._sound_cache["test.wav"] = MagicMock()

    result = mgr.play_sfx("test.wav", volume=0.5)

    assert result is channel
    channel.set_volume.assert_called_once_with(0.5)
    channel.play.assert_called_once()

def test_play_sfx_missing_file_is_skipped(channel, caplog):
    import logging
    caplog.set_level(logging.WARNING)

    mgr = AudioManager()
    mgr._initialized = True

    assert mgr.play_sfx("does/not/exist.wav") is None
    channel.play.assert_not_called()
    assert "Audio file not found" in caplog.text

def test_play_tone_before_init_is_skipped(channel):
    mgr = AudioManager()
    assert mgr.play_tone(TickSound()) is None
    channel.play.assert_not_called()

def test_play_tone_builds_and_caches_sound(channel):
    import pygame
    pygame.mixer.get_init.return_value = (22050, -16, 2)

    mgr = AudioManager()
    mgr._initialized = True
    tone = TickSound()

    with patch("pygame.sndarray.make_sound") as make_sound:
        mgr.play_tone(tone, volume=0.25)
        mgr.play_tone(tone, volume=0.25)

    make_sound.assert_called_once()
    samples = make_sound.call_args.args[0]
    assert samples.shape[1] == 2
    assert channel.play.call_count == 2
    channel.set_volume.assert_called_with(0.25)

def test_volume_is_master_times_level(channel):
    mgr = AudioManager(master_volume=0.5)
    mgr._initialized = True
    mgr._sound_cache["tick.wav"] = MagicMock()

    mgr.play_sfx("tick.wav", volume=0.8)

    channel.set_volume.assert_called_once_with(pytest.approx(0.4))

def test_master_volume_is_clamped():
    assert AudioManager(master_volume=2.0).master_volume == 1.0

    mgr = AudioManager()
    mgr.set_master_volume(-1)
    assert mgr.master_volume == 0.0

def test_play_publishes_event(channel, event_bus):
    played = []
    event_bus.subscribe(AudioEvent.SFX_PLAYED, lambda e: played.append(e))

    mgr = AudioManager(event_bus)
    mgr._initialized = True
    mgr._sound_cache["test.wav"] = MagicMock()
    mgr.play_sfx("test.wav")

    assert played[0]["file"] == "test.wav"
