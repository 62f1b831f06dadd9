from __future__ import annotations

import math

import arcade

from colorburst.components.bubble_color import BubbleColor
from colorburst.components.run_state import GameMode
from colorburst.constants import BACKGROUND_COLOR, BUBBLE_PALETTE, LAUNCH_OFFSET
from colorburst.rendering.context import FrameSnapshot

AIM_LINE_LENGTH = 300
SHOOTER_BASE_RADIUS = 35
SHOOTER_BASE_COLOR = (52, 73, 94)
COMBO_COLOR = (255, 215, 0)
SPECIAL_GLYPHS = {BubbleColor.BOMB: "B", BubbleColor.FREEZE: "*", BubbleColor.RAINBOW: "?"}


class BubbleRenderer:
    """Draws a FrameSnapshot with arcade primitives.

    Snapshots use a top-left origin; arcade draws from the bottom-left, so
    every y is flipped against the field height.
    """

    def render(self, snapshot: FrameSnapshot) -> None:
        width, height = snapshot.field_size
        arcade.draw_lrbt_rectangle_filled(0, width, 0, height, BACKGROUND_COLOR)
        if snapshot.mode == GameMode.MENU:
            self._render_menu(width, height)
            return
        if snapshot.mode in (GameMode.WON, GameMode.LOST):
            self._render_result(snapshot, width, height)
            return

        for bubble in snapshot.bubbles:
            scale = 1.0 - bubble.pop_progress if bubble.pop_progress is not None else 1.0
            self._draw_bubble(bubble.x, height - bubble.y, bubble.radius * scale, bubble.color)
        if snapshot.projectile is not None:
            p = snapshot.projectile
            self._draw_bubble(p.x, height - p.y, p.radius, p.color)
        else:
            self._draw_aim_line(snapshot, height)
        self._draw_shooter(snapshot, width, height)
        self._draw_hud(snapshot, height)

    def _draw_bubble(self, x: float, y: float, radius: float, color: BubbleColor) -> None:
        if radius <= 0:
            return
        arcade.draw_circle_filled(x, y, radius, BUBBLE_PALETTE[color.value])
        arcade.draw_circle_filled(x - radius * 0.35, y + radius * 0.35, radius * 0.3, (255, 255, 255, 100))
        glyph = SPECIAL_GLYPHS.get(color)
        if glyph:
            arcade.draw_text(glyph, x, y, arcade.color.WHITE, 16, anchor_x="center", anchor_y="center", bold=True)

    def _draw_aim_line(self, snapshot: FrameSnapshot, height: float) -> None:
        sx, sy = snapshot.shooter_position
        start_y = sy - LAUNCH_OFFSET
        end_x = sx + math.cos(snapshot.aim_angle) * AIM_LINE_LENGTH
        end_y = start_y + math.sin(snapshot.aim_angle) * AIM_LINE_LENGTH
        arcade.draw_line(sx, height - start_y, end_x, height - end_y, (255, 255, 255, 128), 2)

    def _draw_shooter(self, snapshot: FrameSnapshot, width: float, height: float) -> None:
        sx, sy = snapshot.shooter_position
        arcade.draw_circle_filled(sx, height - sy, SHOOTER_BASE_RADIUS, SHOOTER_BASE_COLOR)
        if snapshot.current_color is not None:
            self._draw_bubble(sx, height - (sy - LAUNCH_OFFSET), 20, snapshot.current_color)
        if snapshot.next_color is not None:
            arcade.draw_lbwh_rectangle_filled(width - 80, 10, 70, 70, (0, 0, 0, 76))
            arcade.draw_text("Next:", width - 75, 85, arcade.color.WHITE, 12)
            self._draw_bubble(width - 45, 45, 16, snapshot.next_color)

    def _draw_hud(self, snapshot: FrameSnapshot, height: float) -> None:
        lines = (
            f"Level: {snapshot.level}",
            f"Score: {snapshot.score}",
            f"Lives: {snapshot.lives}",
        )
        for index, text in enumerate(lines):
            arcade.draw_text(text, 20, height - 30 - index * 30, arcade.color.WHITE, 18, bold=True)
        if snapshot.combo > 1:
            arcade.draw_text(f"Combo x{snapshot.combo}!", 20, height - 120, COMBO_COLOR, 18, bold=True)

    def _render_menu(self, width: float, height: float) -> None:
        cx, cy = width / 2, height / 2
        arcade.draw_text("Color Burst", cx, cy + 100, arcade.color.WHITE, 60, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Bubble Shooter", cx, cy + 40, arcade.color.WHITE, 30, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Click to Start", cx, cy - 40, arcade.color.WHITE, 20, anchor_x="center", anchor_y="center")

    def _render_result(self, snapshot: FrameSnapshot, width: float, height: float) -> None:
        cx, cy = width / 2, height / 2
        if snapshot.mode == GameMode.WON:
            arcade.draw_text("YOU WON!", cx, cy + 80, BUBBLE_PALETTE["green"], 50, anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text("All 20 Levels Complete!", cx, cy + 20, arcade.color.WHITE, 30, anchor_x="center", anchor_y="center")
        else:
            arcade.draw_text("Game Over", cx, cy + 60, BUBBLE_PALETTE["red"], 50, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(f"Final Score: {snapshot.score}", cx, cy - 40, arcade.color.WHITE, 25, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(f"Max Combo: x{snapshot.max_combo}", cx, cy - 80, arcade.color.WHITE, 25, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Click to Play Again", cx, cy - 140, arcade.color.WHITE, 20, anchor_x="center", anchor_y="center")
