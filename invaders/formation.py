"""Enemy formation movement and return fire."""

from __future__ import annotations

import itertools
import random
from typing import Iterator, List, Optional

from loguru import logger

from .config import GameConfig
from .entities import DOWN, Bullet, BulletOwner, Enemy


class FormationController:
    """Drives the whole enemy swarm with one shared direction.

    The formation marches sideways until the leading enemy would leave the
    playfield.  On that tick the direction flips and every enemy drops by
    ``descent_amount`` while also taking its first step the new way.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: Optional[random.Random] = None,
        bullet_ids: Optional[Iterator[int]] = None,
    ) -> None:
        self._config = config
        self._rng = rng or random.Random()
        self._bullet_ids = bullet_ids if bullet_ids is not None else itertools.count(1)
        self._enemy_ids = itertools.count(1)
        self.enemies: List[Enemy] = []
        self.direction: int = 1

    def spawn_wave(self) -> List[Enemy]:
        config = self._config
        origin_x, origin_y = config.enemy_origin
        self.enemies = [
            Enemy(
                x=origin_x + column * config.enemy_spacing_x,
                y=origin_y + row * config.enemy_spacing_y,
                width=config.enemy_width,
                height=config.enemy_height,
                id=next(self._enemy_ids),
                row=row,
                column=column,
                speed=config.enemy_base_speed + row * config.enemy_row_speed_step,
                points=config.enemy_points,
            )
            for row in range(config.enemy_rows)
            for column in range(config.enemy_columns)
        ]
        self.direction = 1
        logger.debug("Spawned wave of {} enemies", len(self.enemies))
        return self.enemies

    def __len__(self) -> int:
        return len(self.enemies)

    def would_cross_edge(self) -> bool:
        width = self._config.canvas_width
        if self.direction > 0:
            return any(enemy.right + enemy.speed > width for enemy in self.enemies)
        return any(enemy.x - enemy.speed < 0 for enemy in self.enemies)

    def advance(self) -> bool:
        """Move every enemy one tick.  Returns ``True`` when the formation turned."""
        turned = self.would_cross_edge()
        if turned:
            self.direction = -self.direction
        for enemy in self.enemies:
            if turned:
                enemy.y += self._config.descent_amount
            enemy.x += enemy.speed * self.direction
        return turned

    def fire(self, bullets: List[Bullet]) -> List[Bullet]:
        """Let each enemy roll independently for a downward shot."""
        config = self._config
        fired = []
        for enemy in self.enemies:
            if self._rng.random() >= config.enemy_fire_chance:
                continue
            bullet = Bullet(
                x=enemy.center_x - config.bullet_width / 2,
                y=enemy.bottom,
                width=config.bullet_width,
                height=config.bullet_height,
                id=next(self._bullet_ids),
                speed=config.enemy_bullet_speed,
                direction=DOWN,
                owner=BulletOwner.ENEMY,
            )
            bullets.append(bullet)
            fired.append(bullet)
        return fired

    def remove(self, doomed: set[int]) -> None:
        if doomed:
            self.enemies = [enemy for enemy in self.enemies if enemy.id not in doomed]

    def lowest_edge(self) -> float:
        return max((enemy.bottom for enemy in self.enemies), default=0.0)
