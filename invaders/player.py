"""Player steering and firing rules."""
from __future__ import annotations

import itertools
from typing import Iterator, List, Optional

from .clock import Clock
from .config import PLAYER_BOTTOM_MARGIN, GameConfig
from .entities import UP, Bullet, BulletOwner, Player


class PlayerController:
    """Moves the player towards its target and enforces the firing rules."""

    def __init__(self, player: Player, config: GameConfig, clock: Clock, bullet_ids: Optional[Iterator[int]] = None):
        self.player = player
        self._config = config
        self._clock = clock
        self._bullet_ids = bullet_ids if bullet_ids is not None else itertools.count(1)

    @classmethod
    def spawn(cls, config: GameConfig, clock: Clock, bullet_ids: Optional[Iterator[int]] = None) -> "PlayerController":
        """Create a player centred at the bottom of the playfield."""
        player = Player(
            x=(config.canvas_width - config.player_width) / 2,
            y=config.canvas_height - config.player_height - PLAYER_BOTTOM_MARGIN,
            width=config.player_width,
            height=config.player_height,
            speed=config.player_speed,
        )
        player.target_x = player.center_x
        return cls(player, config, clock, bullet_ids)

    def set_target_x(self, target_x: float) -> None:
        self.player.target_x = target_x

    def advance(self) -> None:
        player = self.player
        center = player.center_x
        center += (player.target_x - center) * self._config.player_smoothing
        half_width = player.width / 2
        player.center_x = max(half_width, min(self._config.canvas_width - half_width, center))

    def can_fire(self, now: float, bullets: List[Bullet]) -> bool:
        live = sum(1 for bullet in bullets if bullet.owner is BulletOwner.PLAYER)
        if live >= self._config.max_player_bullets:
            return False
        return now - self.player.last_shot_at > self._config.shot_cooldown

    def try_fire(self, bullets: List[Bullet], now: Optional[float] = None) -> Optional[Bullet]:
        """Spawn an upward bullet into ``bullets`` when the rules allow it."""
        if now is None:
            now = self._clock.now()
        if not self.can_fire(now, bullets):
            return None
        player = self.player
        width = self._config.bullet_width
        bullet = Bullet(
            x=player.center_x - width / 2,
            y=player.y - self._config.bullet_height,
            width=width,
            height=self._config.bullet_height,
            id=next(self._bullet_ids),
            speed=self._config.player_bullet_speed,
            direction=UP,
            owner=BulletOwner.PLAYER,
        )
        bullets.append(bullet)
        player.last_shot_at = now
        return bullet
