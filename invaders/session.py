"""The explicit session object that owns every piece of simulation state."""
from __future__ import annotations

import itertools
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from loguru import logger

from .clock import Clock, ManualClock
from .combat import CombatResolver, Hit, PlayerHit
from .config import EVENT_FEED_LENGTH, GameConfig
from .entities import Bullet, Player
from .formation import FormationController
from .persistence import HighScoreStore, MemoryHighScoreStore
from .phases import PhaseMachine, PhaseTransition, SessionPhase
from .player import PlayerController
from .scoring import GameState, ScoreTracker


class SessionNotStartedError(RuntimeError):
    """Raised when the simulation is advanced before a player exists."""


@dataclass(frozen=True)
class InputSample:
    """Input collected once per tick by whatever polls the devices.

    ``pointer_x`` is ``None`` when the pointer did not report a position,
    in which case the player keeps steering towards the previous target.
    """

    pointer_x: Optional[float] = None
    fire: bool = False
    pause: bool = False


@dataclass
class TickReport:
    """Everything that happened during one call to :meth:`GameSession.tick`."""

    tick: int
    phase: SessionPhase
    advanced: bool = False
    shot_fired: bool = False
    hits: List[Hit] = field(default_factory=list)
    player_hits: List[PlayerHit] = field(default_factory=list)
    points_awarded: float = 0.0
    wave_cleared: bool = False
    game_over: bool = False
    transitions: List[PhaseTransition] = field(default_factory=list)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of the world handed to renderers."""

    tick: int
    phase: SessionPhase
    canvas_size: tuple
    player: Optional[Dict[str, object]]
    enemies: List[Dict[str, object]]
    bullets: List[Dict[str, object]]
    state: Dict[str, object]
    events: List[str]


class GameSession:
    """Owns the player, formation, bullets, progress and phase of one game."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[HighScoreStore] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        self.clock = clock or ManualClock()
        self.random = rng or random.Random(seed)
        self.store = store or MemoryHighScoreStore()
        self.phases = PhaseMachine(self.clock)
        self._bullet_ids = itertools.count(1)
        self.formation = FormationController(self.config, self.random, self._bullet_ids)
        self.combat = CombatResolver(self.config)
        self.state = GameState(lives=self.config.starting_lives, high_score=self.store.load())
        self.scores = ScoreTracker(self.state, self.store)
        self.player_controller: Optional[PlayerController] = None
        self.bullets: List[Bullet] = []
        self.ticks_elapsed = 0
        self.events: Deque[str] = deque(maxlen=EVENT_FEED_LENGTH)
        self._recent_transitions: List[PhaseTransition] = []
        self.phases.subscribe(self._recent_transitions.append)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def phase(self) -> SessionPhase:
        return self.phases.current

    @property
    def player(self) -> Player:
        return self._require_controller().player

    def reset(self) -> None:
        """Throw away the current game and set up a fresh one."""
        self.player_controller = PlayerController.spawn(self.config, self.clock, self._bullet_ids)
        self.bullets.clear()
        self.state.score = 0.0
        self.state.lives = self.config.starting_lives
        self.state.level = 1
        self.state.consecutive_hits = 0
        self.state.is_over = False
        self.formation.spawn_wave()
        self.ticks_elapsed = 0
        self.add_event("A new wave approaches.")

    def start(self) -> bool:
        """Begin a new game from the menu, or continue from an intermission."""
        if self.phase is SessionPhase.MENU:
            self.reset()
        elif self.phase not in (SessionPhase.PAUSED, SessionPhase.LEVEL_COMPLETE):
            return False
        return self.phases.transition_to(SessionPhase.PLAYING)

    def pause(self) -> bool:
        return self.phases.transition_to(SessionPhase.PAUSED)

    def resume(self) -> bool:
        if self.phase is SessionPhase.MENU:
            return False
        return self.phases.transition_to(SessionPhase.PLAYING)

    def toggle_pause(self) -> bool:
        if self.phase is SessionPhase.PLAYING:
            return self.pause()
        if self.phase is SessionPhase.PAUSED:
            return self.resume()
        return False

    def return_to_menu(self) -> bool:
        return self.phases.transition_to(SessionPhase.MENU)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------
    def tick(self, sample: Optional[InputSample] = None) -> TickReport:
        """Run one simulation step using the latest input sample."""
        sample = sample or InputSample()
        self._recent_transitions.clear()
        if sample.pause:
            self.toggle_pause()
        report = TickReport(tick=self.ticks_elapsed, phase=self.phase)
        if self.phase is not SessionPhase.PLAYING:
            report.transitions = list(self._recent_transitions)
            return report

        controller = self._require_controller()
        self.ticks_elapsed += 1
        report.tick = self.ticks_elapsed
        report.advanced = True

        if sample.pointer_x is not None:
            controller.set_target_x(sample.pointer_x)
        controller.advance()
        if sample.fire:
            report.shot_fired = controller.try_fire(self.bullets, self.clock.now()) is not None

        for bullet in self.bullets:
            bullet.advance()

        self.formation.advance()
        self.formation.fire(self.bullets)

        combat = self.combat.resolve(controller.player, self.formation, self.bullets, self.state.level)
        report.hits = combat.hits
        report.player_hits = combat.player_hits
        for hit in combat.hits:
            report.points_awarded += self.scores.register_hit(hit.points)
        for player_hit in combat.player_hits:
            self.scores.lose_life()
            if player_hit.cause == "collision":
                self.add_event("The ship collided with an invader!")
            else:
                self.add_event("The ship was hit!")

        self._check_end_conditions(report)
        report.phase = self.phase
        report.transitions = list(self._recent_transitions)
        return report

    def _check_end_conditions(self, report: TickReport) -> None:
        if not self.state.is_over and self.formation.enemies and self.formation.lowest_edge() >= self.config.canvas_height:
            self.add_event("The invaders have landed.")
            self.scores.end_game()

        if self.state.is_over:
            report.game_over = True
            self.add_event(f"Game over. Final score {self.state.score:g}.")
            self.phases.transition_to(SessionPhase.GAME_OVER)
            return

        if not self.formation.enemies:
            report.wave_cleared = True
            level = self.scores.next_level()
            self.formation.spawn_wave()
            self.add_event(f"Wave cleared! Level {level} begins.")
            if self.config.pause_on_level_complete:
                self.phases.transition_to(SessionPhase.LEVEL_COMPLETE)

    def _require_controller(self) -> PlayerController:
        if self.player_controller is None:
            raise SessionNotStartedError("Session has not been started")
        return self.player_controller

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def snapshot(self) -> GameSnapshot:
        controller = self.player_controller
        return GameSnapshot(
            tick=self.ticks_elapsed,
            phase=self.phase,
            canvas_size=(self.config.canvas_width, self.config.canvas_height),
            player=controller.player.serialise() if controller else None,
            enemies=[enemy.serialise() for enemy in self.formation.enemies],
            bullets=[bullet.serialise() for bullet in self.bullets],
            state=self.state.to_dict(),
            events=list(self.events),
        )

    def hud(self) -> Dict[str, float]:
        return {
            "score": self.state.score,
            "lives": self.state.lives,
            "level": self.state.level,
            "high_score": self.state.high_score,
        }

    def add_event(self, message: str) -> None:
        logger.debug(message)
        self.events.append(message)


__all__ = ["GameSession", "GameSnapshot", "InputSample", "SessionNotStartedError", "TickReport"]
