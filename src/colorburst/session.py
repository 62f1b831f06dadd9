"""Headless game session: wires the world, the bus and every simulation system.

A host (window, test, bot) drives the simulation by calling ``tick()`` at a
steady cadence and feeds input through ``fire``/``set_aim_direction``/
``start_game``/``restart_from_result``. It reads state back through
``snapshot()`` or by subscribing to the session's ``event_bus``.
"""
from __future__ import annotations

import random

from colorburst.components.run_state import GameMode
from colorburst.constants import FIELD_HEIGHT, FIELD_WIDTH
from colorburst.events.bus import EventBus
from colorburst.rendering.context import FrameSnapshot, build_snapshot
from colorburst.systems.descent_system import DescentSystem
from colorburst.systems.level_system import LevelSystem
from colorburst.systems.match_system import MatchSystem
from colorburst.systems.placement_system import PlacementSystem
from colorburst.systems.pop_animation_system import PopAnimationSystem
from colorburst.systems.projectile_system import ProjectileSystem
from colorburst.systems.scoring_system import ScoringSystem
from colorburst.systems.shooter_system import ShooterSystem
from colorburst.systems.stability_system import StabilitySystem
from colorburst.utils.game_state import get_run_state
from colorburst.world import create_world


class GameSession:
    def __init__(
        self,
        *,
        width: float = FIELD_WIDTH,
        height: float = FIELD_HEIGHT,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(GameMode.MENU, width=width, height=height, rng=rng)

        # Event-driven impact chain
        self.shooter_system = ShooterSystem(self.world, self.event_bus)
        self.placement_system = PlacementSystem(self.world, self.event_bus)
        self.match_system = MatchSystem(self.world, self.event_bus)
        self.stability_system = StabilitySystem(self.world, self.event_bus)
        self.scoring_system = ScoringSystem(self.world, self.event_bus)

        # Per-tick systems
        self.projectile_system = ProjectileSystem(self.world, self.event_bus)
        self.pop_animation_system = PopAnimationSystem(self.world, self.event_bus)
        self.descent_system = DescentSystem(self.world, self.event_bus)
        self.level_system = LevelSystem(self.world, self.event_bus)

        # Explicit order; bus receivers are not ordered.
        self._tick_order = (
            self.projectile_system,
            self.pop_animation_system,
            self.descent_system,
            self.level_system,
        )

    # ------------------------------------------------------------------
    # Inbound
    # ------------------------------------------------------------------

    def start_game(self) -> None:
        self.level_system.start_run()

    def restart_from_result(self) -> bool:
        return self.level_system.return_to_menu()

    def fire(self) -> bool:
        return self.shooter_system.fire()

    def set_aim_direction(self, dx: float, dy: float) -> bool:
        return self.shooter_system.set_aim_direction(dx, dy)

    def aim_at(self, x: float, y: float) -> bool:
        return self.shooter_system.aim_at(x, y)

    def press(self) -> None:
        """Single-button input: start from the menu, dismiss results, fire otherwise."""
        mode = self.mode
        if mode == GameMode.MENU:
            self.start_game()
        elif mode in (GameMode.WON, GameMode.LOST):
            self.restart_from_result()
        else:
            self.fire()

    def tick(self) -> None:
        for system in self._tick_order:
            if self.mode != GameMode.PLAYING:
                return
            system.process()

    # ------------------------------------------------------------------
    # Outbound
    # ------------------------------------------------------------------

    def snapshot(self) -> FrameSnapshot:
        return build_snapshot(self.world)

    @property
    def mode(self) -> GameMode:
        return get_run_state(self.world).mode

    @property
    def level(self) -> int:
        return get_run_state(self.world).level

    @property
    def score(self) -> int:
        return get_run_state(self.world).score

    @property
    def lives(self) -> int:
        return get_run_state(self.world).lives

    @property
    def combo(self) -> int:
        return get_run_state(self.world).combo

    @property
    def max_combo(self) -> int:
        return get_run_state(self.world).max_combo
