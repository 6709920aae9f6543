"""Collision resolution between bullets, enemies and the player."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

from loguru import logger

from .config import GameConfig
from .entities import Bullet, BulletOwner, Player
from .formation import FormationController
from .geometry import overlaps


@dataclass(frozen=True)
class Hit:
    """A player bullet destroyed an enemy."""

    enemy_id: int
    bullet_id: int
    points: int


@dataclass(frozen=True)
class PlayerHit:
    """The player took damage, either from a bullet or from touching an enemy."""

    cause: str
    source_id: int


@dataclass
class CombatReport:
    hits: List[Hit] = field(default_factory=list)
    player_hits: List[PlayerHit] = field(default_factory=list)
    culled_bullets: int = 0


class CombatResolver:
    """Finds collisions after movement and removes what was destroyed.

    Nothing is deleted while scanning.  Destroyed bullets and enemies are
    collected first and removed in a single compaction pass at the end, so a
    bullet or enemy can never take part in two collisions in the same tick.
    """

    def __init__(self, config: GameConfig) -> None:
        self._config = config

    def resolve(self, player: Player, formation: FormationController, bullets: List[Bullet], level: int) -> CombatReport:
        report = CombatReport()
        dead_bullets: Set[int] = set()
        dead_enemies: Set[int] = set()

        for bullet in bullets:
            if bullet.is_outside(self._config.canvas_height):
                dead_bullets.add(id(bullet))
                report.culled_bullets += 1

        for bullet in bullets:
            if bullet.owner is not BulletOwner.PLAYER or id(bullet) in dead_bullets:
                continue
            for enemy in formation.enemies:
                if enemy.id in dead_enemies:
                    continue
                if overlaps(bullet, enemy):
                    dead_bullets.add(id(bullet))
                    dead_enemies.add(enemy.id)
                    report.hits.append(Hit(enemy_id=enemy.id, bullet_id=bullet.id, points=enemy.points * level))
                    break

        for bullet in bullets:
            if bullet.owner is not BulletOwner.ENEMY or id(bullet) in dead_bullets:
                continue
            if overlaps(bullet, player):
                dead_bullets.add(id(bullet))
                report.player_hits.append(PlayerHit(cause="bullet", source_id=bullet.id))

        # Touching the formation hurts the player but leaves the enemy alive.
        for enemy in formation.enemies:
            if enemy.id in dead_enemies:
                continue
            if overlaps(enemy, player):
                report.player_hits.append(PlayerHit(cause="collision", source_id=enemy.id))

        if dead_bullets:
            bullets[:] = [bullet for bullet in bullets if id(bullet) not in dead_bullets]
        formation.remove(dead_enemies)
        if report.hits or report.player_hits:
            logger.debug(
                "Combat resolved: {} enemies destroyed, {} player hits",
                len(report.hits),
                len(report.player_hits),
            )
        return report
