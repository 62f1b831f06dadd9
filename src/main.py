"""Entry point for the Color Burst bubble shooter.

Sets up the headless game session and an Arcade window that drives it.
"""
import logging

from arcade import Window, run

from colorburst.constants import FIELD_HEIGHT, FIELD_WIDTH
from colorburst.rendering.bubble_renderer import BubbleRenderer
from colorburst.session import GameSession


class ColorBurstWindow(Window):
    def __init__(self):
        super().__init__(FIELD_WIDTH, FIELD_HEIGHT, "Color Burst")
        self.set_update_rate(1/60)
        self.session = GameSession(width=FIELD_WIDTH, height=FIELD_HEIGHT)
        self.renderer = BubbleRenderer()

    def on_draw(self):
        self.clear()
        self.renderer.render(self.session.snapshot())

    def on_update(self, delta_time: float):
        # One simulation step per frame; the core counts ticks, not seconds.
        self.session.tick()

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        # Arcade's y axis points up; the simulation's points down.
        self.session.aim_at(x, self.height - y)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.session.aim_at(x, self.height - y)
        self.session.press()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    ColorBurstWindow()
    run()

if __name__ == "__main__":
    main()
