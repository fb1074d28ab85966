"""
Hammer - Target spawner.

A countdown timer releases one spawn attempt each time it runs out and is
then pushed back by the current spawn delay. Several attempts can happen
in one frame when the delay is shorter than the frame, which lets the
spawner catch up instead of falling behind.
"""
import math
from typing import List, Optional

from games.Hammer.config import HammerConfig
from games.Hammer.difficulty import HammerDifficulty
from games.Hammer.target import MovingTarget
from rectsim.games.entity_store import EntityStore
from rectsim.games.rng import RandomSource
from rectsim.logging import get_logger

log = get_logger('spawner')


class TargetSpawner:
    """Spawns targets from the top or bottom edge at random angles."""

    def __init__(self, config: HammerConfig, rng: RandomSource):
        """Initialize the spawner.

        Args:
            config: Game configuration (sizes, angle range)
            rng: Random source for positions, angles and entry edge
        """
        self._config = config
        self._rng = rng
        self.timer = 0.0

    def reset(self) -> None:
        """Reset spawner for a new round (next frame spawns immediately)."""
        self.timer = 0.0

    def update(
        self,
        elapsed: float,
        difficulty: HammerDifficulty,
        store: EntityStore[MovingTarget],
    ) -> List[MovingTarget]:
        """Run the spawn timer for one frame.

        Args:
            elapsed: Clamped frame time
            difficulty: Current spawn delay and target speed
            store: Live targets; attempts while it is full are dropped

        Returns:
            Targets added to the store this frame
        """
        spawned: List[MovingTarget] = []
        self.timer -= elapsed
        while self.timer <= 0.0:
            target = self._attempt(difficulty.target_speed, store)
            if target is not None:
                spawned.append(target)
            self.timer += difficulty.spawn_delay
        return spawned

    def _attempt(self, speed: float, store: EntityStore[MovingTarget]) -> Optional[MovingTarget]:
        """Draw one target; add it unless the store is full."""
        config = self._config
        half_w = 0.5 * config.target_width
        half_h = 0.5 * config.target_height

        angle = math.radians(self._rng.uniform(config.spawn_angle_min, config.spawn_angle_max))
        x = self._rng.uniform(-1.0 + half_w, 1.0 - half_w)
        vx = math.cos(angle) * speed
        vy = math.sin(angle) * speed

        if store.is_full:
            log.trace("spawn dropped, %d targets live", len(store))
            return None

        if self._rng.coin_flip():
            target = MovingTarget(x=x, y=1.0 - half_h, vx=vx, vy=-vy,
                                  half_width=half_w, half_height=half_h)
        else:
            target = MovingTarget(x=x, y=-1.0 + half_h, vx=vx, vy=vy,
                                  half_width=half_w, half_height=half_h)

        store.append(target)
        log.trace("spawned target x=%.3f y=%.3f v=(%.3f, %.3f)",
                  target.x, target.y, target.vx, target.vy)
        return target
