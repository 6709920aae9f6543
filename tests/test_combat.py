"""Regression tests for collision resolution."""

from __future__ import annotations

import random

import pytest

from invaders.combat import CombatResolver
from invaders.config import GameConfig
from invaders.entities import DOWN, UP, Bullet, BulletOwner, Enemy, Player
from invaders.formation import FormationController


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def player() -> Player:
    return Player(x=375, y=550, width=50, height=30)


def _formation(config: GameConfig, *enemies: Enemy) -> FormationController:
    formation = FormationController(config, random.Random(0))
    formation.enemies = list(enemies)
    return formation


def _player_bullet(x: float, y: float, bullet_id: int = 1) -> Bullet:
    return Bullet(x=x, y=y, width=4, height=10, id=bullet_id, speed=7, direction=UP, owner=BulletOwner.PLAYER)


def _enemy_bullet(x: float, y: float, bullet_id: int = 100) -> Bullet:
    return Bullet(x=x, y=y, width=4, height=10, id=bullet_id, speed=4, direction=DOWN, owner=BulletOwner.ENEMY)


def test_bullet_destroys_enemy_and_scales_points_by_level(config: GameConfig, player: Player) -> None:
    enemy = Enemy(x=100, y=100, width=40, height=30, id=7, points=10)
    formation = _formation(config, enemy)
    bullets = [_player_bullet(110, 110)]
    report = CombatResolver(config).resolve(player, formation, bullets, level=3)
    assert len(report.hits) == 1
    assert report.hits[0].enemy_id == 7
    assert report.hits[0].points == 30
    assert formation.enemies == []
    assert bullets == []


def test_bullet_destroys_at_most_one_enemy(config: GameConfig, player: Player) -> None:
    first = Enemy(x=100, y=100, width=40, height=30, id=1, points=10)
    second = Enemy(x=100, y=105, width=40, height=30, id=2, points=10)
    formation = _formation(config, first, second)
    bullets = [_player_bullet(110, 110)]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert [hit.enemy_id for hit in report.hits] == [1]
    assert formation.enemies == [second]
    assert bullets == []


def test_enemy_is_destroyed_by_only_one_bullet(config: GameConfig, player: Player) -> None:
    enemy = Enemy(x=100, y=100, width=40, height=30, id=1, points=10)
    formation = _formation(config, enemy)
    first = _player_bullet(105, 110, bullet_id=1)
    second = _player_bullet(120, 110, bullet_id=2)
    bullets = [first, second]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert len(report.hits) == 1
    assert report.hits[0].bullet_id == 1
    assert bullets == [second]


def test_enemy_bullet_damages_player(config: GameConfig, player: Player) -> None:
    formation = _formation(config)
    bullets = [_enemy_bullet(398, 545)]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert len(report.player_hits) == 1
    assert report.player_hits[0].cause == "bullet"
    assert bullets == []


def test_player_bullets_never_hurt_the_player(config: GameConfig, player: Player) -> None:
    formation = _formation(config)
    bullets = [_player_bullet(398, 545)]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert report.player_hits == []
    assert len(bullets) == 1


def test_enemy_bullets_pass_through_enemies(config: GameConfig, player: Player) -> None:
    enemy = Enemy(x=100, y=100, width=40, height=30, id=1, points=10)
    formation = _formation(config, enemy)
    bullets = [_enemy_bullet(110, 110)]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert report.hits == []
    assert formation.enemies == [enemy]
    assert len(bullets) == 1


def test_enemy_body_contact_hurts_player_but_keeps_enemy(config: GameConfig, player: Player) -> None:
    enemy = Enemy(x=380, y=540, width=40, height=30, id=4, points=10)
    formation = _formation(config, enemy)
    report = CombatResolver(config).resolve(player, formation, [], level=1)
    assert len(report.player_hits) == 1
    assert report.player_hits[0].cause == "collision"
    assert report.player_hits[0].source_id == 4
    assert formation.enemies == [enemy]


def test_touching_edges_do_not_collide(config: GameConfig, player: Player) -> None:
    enemy = Enemy(x=100, y=100, width=40, height=30, id=1, points=10)
    formation = _formation(config, enemy)
    bullets = [_player_bullet(140, 110), _enemy_bullet(400, 540)]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert report.hits == []
    assert report.player_hits == []
    assert len(bullets) == 2


def test_out_of_bounds_bullets_are_culled(config: GameConfig, player: Player) -> None:
    formation = _formation(config)
    above = _player_bullet(100, -10)
    below = _enemy_bullet(100, 600)
    inside = _player_bullet(100, 300)
    bullets = [above, below, inside]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert report.culled_bullets == 2
    assert bullets == [inside]


def test_many_collisions_in_one_pass(config: GameConfig, player: Player) -> None:
    enemies = [Enemy(x=50 + i * 60, y=100, width=40, height=30, id=i + 1, points=10) for i in range(5)]
    formation = _formation(config, *enemies)
    bullets = [_player_bullet(enemy.x + 10, 110, bullet_id=i + 1) for i, enemy in enumerate(enemies[:3])]
    report = CombatResolver(config).resolve(player, formation, bullets, level=1)
    assert sorted(hit.enemy_id for hit in report.hits) == [1, 2, 3]
    assert [enemy.id for enemy in formation.enemies] == [4, 5]
    assert bullets == []
