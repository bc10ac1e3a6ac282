"""
Typewriter Demo: a speech bubble over a scene

Demonstrates:
- Game loop with fixed timestep driving the timer scheduler
- Scene push/pop hooks feeding the dialog stack
- Character-by-character reveal with word wrap and scrolling
- Per-character tick sound

Press SPACE to push an overlay scene with its own speaker (the first
dialog pauses), ESC to pop it again (the first dialog resumes).

Run: python -m demos.typewriter_demo
"""

import logging

import pygame

from speechbubble import Game, GameConfig, Scene, Volume


MESSAGE = (
    "Hello world! This prints like a typewriter and wraps words properly. "
    "It scrolls if the text exceeds the bubble height, and plays a nice "
    "tick sound per letter."
)


class TalkScene(Scene):
    """Shows the active speaker's bubble at a fixed position."""

    def __init__(self, game: Game, message: str, position: tuple[int, int], volume: Volume):
        super().__init__(game)
        self.message = message
        self.position = position
        self.volume = volume
        self.controller = None

    def on_enter(self) -> None:
        super().on_enter()
        if self.controller is None:
            self.controller = self.game.dialogs.current()
            self.controller.sprite.set_position(*self.position)
            self.controller.start(self.message, self.volume)

    def update(self, dt: float) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        if self.controller is not None:
            self.controller.sprite.draw(surface)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False

        if event.key == pygame.K_SPACE:
            overlay = TalkScene(self.game, "Wait, someone else is talking now!", (240, 300), Volume.QUIET)
            overlay._is_transparent = True
            self.game.scene_manager.push(overlay)
            return True
        if event.key == pygame.K_ESCAPE:
            if len(self.game.scene_manager) > 1:
                self.game.scene_manager.pop()
            else:
                self.game.quit()
            return True
        return False


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    game = Game(GameConfig(title="Typewriter Demo"))
    game.scene_manager.push(TalkScene(game, MESSAGE, (80, 80), Volume.LOUD))
    game.run()


if __name__ == "__main__":
    main()
