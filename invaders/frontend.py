"""pygame window that samples input and draws session snapshots."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pygame
from loguru import logger

from .loop import LoopMode, UpdateLoop
from .phases import SessionPhase
from .session import GameSession, GameSnapshot, InputSample

FPS = 60

COLOR_BACKGROUND = (13, 16, 33)
COLOR_TEXT = (230, 235, 255)
COLOR_PLAYER = (240, 240, 255)
COLOR_ENEMY = (120, 200, 255)
COLOR_PLAYER_BULLET = (255, 255, 180)
COLOR_ENEMY_BULLET = (255, 120, 120)

BANNERS = {
    SessionPhase.MENU: "Click or press Enter to start",
    SessionPhase.PAUSED: "Paused - press P to resume",
    SessionPhase.GAME_OVER: "Game over - press Enter for the menu",
    SessionPhase.LEVEL_COMPLETE: "Wave cleared - click or press Enter",
}


def rect_for(entity: Dict[str, object]) -> pygame.Rect:
    return pygame.Rect(int(entity["x"]), int(entity["y"]), int(entity["width"]), int(entity["height"]))


def hud_lines(hud: Dict[str, float]) -> List[str]:
    return [
        f"Score {int(hud['score'])}",
        f"Lives {hud['lives']}",
        f"Level {hud['level']}",
        f"Best {int(hud['high_score'])}",
    ]


def banner_for(phase: SessionPhase) -> Optional[str]:
    return BANNERS.get(phase)


class PygameFrontend:
    """Plays a :class:`GameSession` in a desktop window."""

    def __init__(self, session: GameSession):
        pygame.init()
        width, height = session.config.canvas_width, session.config.canvas_height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Invaders")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 28)
        self.session = session
        self.loop = UpdateLoop(session, LoopMode.FIXED)

    def run(self) -> None:
        running = True
        while running:
            elapsed = self.clock.tick(FPS) / 1000.0
            sample, running = self.sample_input()
            self.loop.advance(elapsed, sample)
            self.render(self.session.snapshot())
            pygame.display.flip()
        logger.info("Window closed with score {}", self.session.state.score)

    def sample_input(self) -> Tuple[InputSample, bool]:
        fire = pygame.mouse.get_pressed()[0] or pygame.key.get_pressed()[pygame.K_SPACE]
        pause = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return InputSample(), False
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_p, pygame.K_ESCAPE):
                pause = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                self._confirm()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.session.phase in (SessionPhase.MENU, SessionPhase.LEVEL_COMPLETE):
                    self._confirm()
        pointer_x = float(pygame.mouse.get_pos()[0]) if pygame.mouse.get_focused() else None
        return InputSample(pointer_x=pointer_x, fire=bool(fire), pause=pause), True

    def _confirm(self) -> None:
        if self.session.phase is SessionPhase.GAME_OVER:
            self.session.return_to_menu()
        else:
            self.session.start()

    def render(self, snapshot: GameSnapshot) -> None:
        self.screen.fill(COLOR_BACKGROUND)
        if snapshot.player is not None:
            pygame.draw.rect(self.screen, COLOR_PLAYER, rect_for(snapshot.player))
        for enemy in snapshot.enemies:
            pygame.draw.rect(self.screen, COLOR_ENEMY, rect_for(enemy))
        for bullet in snapshot.bullets:
            color = COLOR_PLAYER_BULLET if bullet["owner"] == "player" else COLOR_ENEMY_BULLET
            pygame.draw.rect(self.screen, color, rect_for(bullet))

        for index, line in enumerate(hud_lines(self.session.hud())):
            surface = self.font.render(line, True, COLOR_TEXT)
            self.screen.blit(surface, (10 + index * 150, 10))

        banner = banner_for(snapshot.phase)
        if banner:
            surface = self.font.render(banner, True, COLOR_TEXT)
            width, height = snapshot.canvas_size
            self.screen.blit(surface, surface.get_rect(center=(width // 2, height // 2)))
