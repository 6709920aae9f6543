"""Desktop entry point: play the game in a pygame window."""
from pathlib import Path

import pygame

from invaders import GameSession, JsonHighScoreStore
from invaders.frontend import PygameFrontend

HIGHSCORE_PATH = Path(__file__).resolve().parent / "highscore.json"


def main():
    session = GameSession(store=JsonHighScoreStore(HIGHSCORE_PATH))
    frontend = PygameFrontend(session)
    frontend.run()
    pygame.quit()


if __name__ == "__main__":
    main()
