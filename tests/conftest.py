import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Headless SDL before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the package can be imported from a source checkout
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for the pygame display and mixer.
    Autoused for all tests to prevent window creation and audio devices.
    Surfaces and fonts stay real.
    """
    with patch('pygame.init'), \
         patch('pygame.quit'), \
         patch('pygame.display'), \
         patch('pygame.mixer'):
        yield


@pytest.fixture(autouse=True)
def reset_dialog_stack():
    """The dialog stack is process-wide; every test starts without one."""
    from speechbubble.dialog.stack import shutdown_dialog_stack

    shutdown_dialog_stack()
    yield
    shutdown_dialog_stack()


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from speechbubble.core.events import EventBus
    return EventBus()


@pytest.fixture
def scheduler():
    """Fresh TimerScheduler for each test."""
    from speechbubble.core.timers import TimerScheduler
    return TimerScheduler()


@pytest.fixture
def canvas():
    """Canvas double recording every drawing call."""
    from speechbubble.graphics.canvas import Canvas
    return MagicMock(spec=Canvas)


@pytest.fixture
def sprite():
    from speechbubble.graphics.sprite import BubbleSprite
    return MagicMock(spec=BubbleSprite)


@pytest.fixture
def audio():
    from speechbubble.audio.manager import AudioManager
    return MagicMock(spec=AudioManager)


@pytest.fixture
def controller(scheduler, audio, event_bus, canvas, sprite):
    """Controller wired to doubles for drawing and sound."""
    from speechbubble.dialog.controller import DialogController
    return DialogController(
        scheduler,
        audio=audio,
        event_bus=event_bus,
        canvas=canvas,
        sprite=sprite,
    )


@pytest.fixture
def printed(canvas):
    """Lines passed to canvas.print since the last reset_mock(), in order."""
    def _printed():
        return [c.args[0] for c in canvas.print.call_args_list]
    return _printed
