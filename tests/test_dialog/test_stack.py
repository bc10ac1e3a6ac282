import pytest
from unittest.mock import MagicMock
from speechbubble.core.events import EngineEvent
from speechbubble.core.scene import Scene, SceneManager
from speechbubble.dialog.controller import DialogState
from speechbubble.dialog.stack import (
    DialogStack,
    get_dialog_stack,
    init_dialog_stack,
    shutdown_dialog_stack,
)

class EmptyScene(Scene):
    def update(self, dt):
        pass

    def render(self, surface):
        pass

@pytest.fixture
def stack(scheduler, event_bus, audio):
    return init_dialog_stack(scheduler, event_bus, audio=audio)

def test_current_creates_controller_when_empty(stack):
    assert len(stack) == 0
    controller = stack.current()

    assert len(stack) == 1
    assert stack.current() is controller
    assert controller.state == DialogState.IDLE

def test_init_is_idempotent_and_hooks_registered_once(stack, scheduler, event_bus):
    assert init_dialog_stack(scheduler, event_bus) is stack
    assert get_dialog_stack() is stack

    event_bus.publish(EngineEvent.SCENE_PUSHED)

    assert len(stack) == 1

def test_get_before_init_raises():
    with pytest.raises(RuntimeError):
        get_dialog_stack()

def test_scene_push_adds_fresh_controller_and_pauses_previous(stack, scheduler, event_bus):
    first = stack.current()
    first.start("Hello")
    scheduler.advance(200)

    event_bus.publish(EngineEvent.SCENE_PUSHED)
    second = stack.current()

    assert second is not first
    assert second.state == DialogState.IDLE
    assert first.is_paused

    scheduler.advance(1000)
    assert first.cursor == 2

def test_scene_pop_cancels_top_and_resumes_previous(stack, scheduler, event_bus):
    first = stack.current()
    first.start("Hello")
    scheduler.advance(100)

    event_bus.publish(EngineEvent.SCENE_PUSHED)
    second = stack.current()
    second.start("Bye")
    scheduler.advance(100)

    event_bus.publish(EngineEvent.SCENE_POPPED)

    assert second.state == DialogState.CANCELLED
    assert stack.current() is first
    assert not first.is_paused

    scheduler.advance(400)
    assert first.cursor == 5
    assert scheduler.active_count == 1

def test_pop_on_empty_stack_is_noop(stack, event_bus):
    event_bus.publish(EngineEvent.SCENE_POPPED)
    assert len(stack) == 0

def test_scene_switch_replaces_top(stack, scheduler, event_bus):
    first = stack.current()
    first.start("Hello")

    event_bus.publish(EngineEvent.SCENE_SWITCHED)

    assert len(stack) == 1
    assert first.state == DialogState.CANCELLED
    assert stack.current() is not first
    assert scheduler.active_count == 0

def test_driven_by_scene_manager(stack, scheduler, event_bus):
    game = MagicMock()
    game.event_bus = event_bus
    scenes = SceneManager(game)

    scenes.push(EmptyScene(game))
    scenes.process_pending()
    talking = stack.current()
    talking.start("Hello")

    scenes.push(EmptyScene(game))
    scenes.pop()
    scenes.process_pending()

    assert stack.current() is talking
    assert talking.is_running

    scenes.pop()
    scenes.process_pending()

    assert talking.state == DialogState.CANCELLED
    assert scheduler.active_count == 0

def test_shutdown_destroys_controllers_and_unsubscribes(stack, scheduler, event_bus):
    stack.current().start("Hello")

    shutdown_dialog_stack()

    assert scheduler.active_count == 0
    assert len(stack) == 0
    with pytest.raises(RuntimeError):
        get_dialog_stack()

    event_bus.publish(EngineEvent.SCENE_PUSHED)
    event_bus.publish(EngineEvent.SCENE_SWITCHED)
    assert len(stack) == 0

    shutdown_dialog_stack()

def test_init_with_different_scheduler_or_bus_raises(stack, scheduler, event_bus):
    from speechbubble.core.events import EventBus
    from speechbubble.core.timers import TimerScheduler

    with pytest.raises(RuntimeError):
        init_dialog_stack(TimerScheduler(), event_bus)
    with pytest.raises(RuntimeError):
        init_dialog_stack(scheduler, EventBus())

    assert get_dialog_stack() is stack

    shutdown_dialog_stack()
    assert init_dialog_stack(TimerScheduler(), EventBus()) is not stack

def test_controllers_share_stack_config(scheduler, event_bus):
    from speechbubble.dialog.config import DialogConfig, Speed

    stack = DialogStack(scheduler, event_bus, config=DialogConfig(speed=Speed.FAST))

    assert stack.current().interval_ms == 50
    stack.close()
