"""Headless driver that plays a few waves with a simple autopilot."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Tuple

from invaders import GameSession, InputSample, LoopMode, MemoryHighScoreStore, SessionPhase, UpdateLoop

FRAME_SECONDS = 1 / 60


def _autopilot(session: GameSession, rng: random.Random, frames: int) -> Iterator[Tuple[float, Optional[InputSample]]]:
    """Chase the nearest enemy column and keep the trigger held down."""
    for _ in range(frames):
        if session.phase is SessionPhase.LEVEL_COMPLETE:
            session.start()
        if session.phase is not SessionPhase.PLAYING:
            return
        enemies = session.formation.enemies
        target = None
        if enemies:
            player_x = session.player.center_x
            target = min(enemies, key=lambda enemy: abs(enemy.center_x - player_x)).center_x
            target += rng.uniform(-10, 10)
        yield FRAME_SECONDS, InputSample(pointer_x=target, fire=True)


def run_demo(seed: int = 7, frames: int = 60 * 120) -> None:
    session = GameSession(store=MemoryHighScoreStore(), seed=seed)
    loop = UpdateLoop(session, LoopMode.FIXED)
    print("[Menu] Starting a new game...")
    session.start()
    reports = loop.run(_autopilot(session, random.Random(seed), frames))
    kills = sum(len(report.hits) for report in reports)
    waves = sum(1 for report in reports if report.wave_cleared)
    hud = session.hud()
    print(f"[Result] {len(reports)} ticks simulated, {kills} invaders destroyed, {waves} waves cleared.")
    print(f"[Result] Score={hud['score']:g} Lives={hud['lives']} Level={hud['level']} Best={hud['high_score']:g}")
    for message in session.events:
        print(f"- {message}")


if __name__ == "__main__":
    run_demo()
