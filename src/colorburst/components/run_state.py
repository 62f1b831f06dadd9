"""Run-wide state resource: mode, level, score, lives and combo."""
from dataclasses import dataclass
from enum import Enum, auto

from colorburst.constants import MAX_LEVEL, STARTING_LIVES


class GameMode(Enum):
    """High-level modes; only PLAYING advances the simulation."""
    MENU = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class RunState:
    """Singleton component holding everything that outlives a single level.

    ``max_combo`` is a session-wide high-water mark; no transition resets it.
    """
    mode: GameMode = GameMode.MENU
    level: int = 1
    score: int = 0
    lives: int = STARTING_LIVES
    combo: int = 0
    max_combo: int = 0

    def begin_run(self) -> None:
        self.level = 1
        self.score = 0
        self.lives = STARTING_LIVES
        self.combo = 0

    def begin_level(self, level: int) -> None:
        self.level = clamp_level(level)
        self.combo = 0

    def return_to_menu(self) -> None:
        self.mode = GameMode.MENU
        self.level = 1
        self.score = 0
        self.lives = STARTING_LIVES
        self.combo = 0

    def add_score(self, points: int) -> int:
        if points <= 0:
            return 0
        self.score += points
        return points

    def register_match(self) -> None:
        self.combo += 1
        if self.combo > self.max_combo:
            self.max_combo = self.combo

    def reset_combo(self) -> None:
        self.combo = 0

    @property
    def is_final_level(self) -> bool:
        return self.level >= MAX_LEVEL


def clamp_level(level: int) -> int:
    return max(1, min(MAX_LEVEL, int(level)))
