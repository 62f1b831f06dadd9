"""Static per-level difficulty table and the color spawn policy."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from colorburst.components.bubble_color import ORDINARY_COLORS, SPECIAL_COLORS, BubbleColor
from colorburst.components.run_state import clamp_level
from colorburst.constants import POWER_UP_CHANCE


@dataclass(frozen=True, slots=True)
class LevelConfig:
    """Parameters fixed for one level.

    ``speed`` is informational only. ``has_obstacles`` and ``time_limit`` are
    accepted but not wired to behaviour yet. ``row_speed`` is the downward
    shift in pixels per tick; rows stay put when it is ``None``.
    """
    colors: int
    speed: float
    has_power_ups: bool = False
    has_obstacles: bool = False
    time_limit: Optional[float] = None
    row_speed: Optional[float] = None

    def __post_init__(self) -> None:
        if not 3 <= self.colors <= len(ORDINARY_COLORS):
            raise ValueError(f"colors must be within 3..{len(ORDINARY_COLORS)}, got {self.colors}")

    @property
    def palette(self) -> Tuple[BubbleColor, ...]:
        return ORDINARY_COLORS[: self.colors]


LEVELS: Tuple[LevelConfig, ...] = (
    LevelConfig(colors=3, speed=1.0),
    LevelConfig(colors=4, speed=1.1),
    LevelConfig(colors=4, speed=1.2),
    LevelConfig(colors=5, speed=1.3),
    LevelConfig(colors=5, speed=1.4, row_speed=0.05),
    LevelConfig(colors=5, speed=1.5, has_power_ups=True, row_speed=0.08),
    LevelConfig(colors=6, speed=1.6, has_power_ups=True, row_speed=0.1),
    LevelConfig(colors=6, speed=1.7, has_power_ups=True, row_speed=0.12),
    LevelConfig(colors=6, speed=1.8, has_power_ups=True, has_obstacles=True, row_speed=0.15),
    LevelConfig(colors=6, speed=1.9, has_power_ups=True, has_obstacles=True, row_speed=0.18),
    LevelConfig(colors=7, speed=2.0, has_power_ups=True, has_obstacles=True, row_speed=0.2),
    LevelConfig(colors=7, speed=2.1, has_power_ups=True, has_obstacles=True, row_speed=0.22),
    LevelConfig(colors=7, speed=2.2, has_power_ups=True, has_obstacles=True, row_speed=0.25),
    LevelConfig(colors=7, speed=2.3, has_power_ups=True, has_obstacles=True, time_limit=180, row_speed=0.28),
    LevelConfig(colors=8, speed=2.4, has_power_ups=True, has_obstacles=True, row_speed=0.3),
    LevelConfig(colors=8, speed=2.5, has_power_ups=True, has_obstacles=True, row_speed=0.32),
    LevelConfig(colors=8, speed=2.6, has_power_ups=True, has_obstacles=True, row_speed=0.35),
    LevelConfig(colors=8, speed=2.7, has_power_ups=True, has_obstacles=True, row_speed=0.38),
    LevelConfig(colors=8, speed=2.8, has_power_ups=True, has_obstacles=True, row_speed=0.4),
    LevelConfig(colors=8, speed=3.0, has_power_ups=True, has_obstacles=True, row_speed=0.5),
)


def level_config(level: int) -> LevelConfig:
    """Return the parameters for a 1-based level index, clamped to the table."""
    return LEVELS[clamp_level(level) - 1]


def draw_color(config: LevelConfig, rng: random.Random) -> BubbleColor:
    if config.has_power_ups and rng.random() < POWER_UP_CHANCE:
        return rng.choice(SPECIAL_COLORS)
    return rng.choice(config.palette)
