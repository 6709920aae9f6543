"""Regression tests for the pygame frontend helpers."""

from __future__ import annotations

import pygame

from invaders.frontend import banner_for, hud_lines, rect_for
from invaders.phases import SessionPhase
from invaders.session import GameSession


def test_rect_for_truncates_to_pixels() -> None:
    rect = rect_for({"x": 10.7, "y": 20.2, "width": 40, "height": 30})
    assert rect == pygame.Rect(10, 20, 40, 30)


def test_hud_lines_show_whole_numbers() -> None:
    lines = hud_lines({"score": 12.5, "lives": 2, "level": 3, "high_score": 99.9})
    assert lines == ["Score 12", "Lives 2", "Level 3", "Best 99"]


def test_only_playing_has_no_banner() -> None:
    assert banner_for(SessionPhase.PLAYING) is None
    for phase in SessionPhase:
        if phase is not SessionPhase.PLAYING:
            assert banner_for(phase)


def test_snapshot_entities_convert_to_rects() -> None:
    session = GameSession(seed=1)
    session.start()
    snapshot = session.snapshot()
    rects = [rect_for(enemy) for enemy in snapshot.enemies]
    assert len(rects) == 50
    assert rect_for(snapshot.player).width == 50
