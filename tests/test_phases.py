"""Regression tests for session phase transitions."""

from __future__ import annotations

import pytest

from invaders.clock import ManualClock
from invaders.phases import TRANSITIONS, PhaseMachine, SessionPhase


@pytest.fixture()
def machine() -> PhaseMachine:
    return PhaseMachine(ManualClock())


def _move(machine: PhaseMachine, *phases: SessionPhase) -> None:
    for phase in phases:
        assert machine.transition_to(phase)


def test_session_starts_in_menu(machine: PhaseMachine) -> None:
    assert machine.current is SessionPhase.MENU
    assert machine.previous is None
    assert machine.history == []


def test_paused_cannot_jump_to_game_over(machine: PhaseMachine) -> None:
    _move(machine, SessionPhase.PLAYING, SessionPhase.PAUSED)
    assert machine.can_transition_to(SessionPhase.GAME_OVER) is False
    assert machine.transition_to(SessionPhase.GAME_OVER) is False
    assert machine.current is SessionPhase.PAUSED
    assert len(machine.history) == 2


def test_transition_table_is_enforced() -> None:
    for source in SessionPhase:
        for target in SessionPhase:
            machine = PhaseMachine(ManualClock())
            machine.current = source
            assert machine.transition_to(target) is (target in TRANSITIONS[source])


def test_game_over_always_leads_back_to_menu(machine: PhaseMachine) -> None:
    _move(machine, SessionPhase.PLAYING, SessionPhase.GAME_OVER)
    assert machine.transition_to(SessionPhase.PLAYING) is False
    assert machine.transition_to(SessionPhase.MENU) is True


def test_history_records_timestamps() -> None:
    clock = ManualClock(10.0)
    machine = PhaseMachine(clock)
    machine.transition_to(SessionPhase.PLAYING)
    clock.advance(2.5)
    machine.transition_to(SessionPhase.LEVEL_COMPLETE)
    assert [(entry.source, entry.target, entry.timestamp) for entry in machine.history] == [
        (SessionPhase.MENU, SessionPhase.PLAYING, 10.0),
        (SessionPhase.PLAYING, SessionPhase.LEVEL_COMPLETE, 12.5),
    ]
    assert machine.previous is SessionPhase.PLAYING


def test_listeners_receive_accepted_transitions_only(machine: PhaseMachine) -> None:
    received = []
    machine.subscribe(received.append)
    machine.transition_to(SessionPhase.PAUSED)
    machine.transition_to(SessionPhase.PLAYING)
    assert [entry.target for entry in received] == [SessionPhase.PLAYING]
    machine.unsubscribe(received.append)
    machine.transition_to(SessionPhase.PAUSED)
    assert len(received) == 1


def test_go_back_returns_to_previous_phase(machine: PhaseMachine) -> None:
    assert machine.go_back() is False
    _move(machine, SessionPhase.PLAYING, SessionPhase.PAUSED)
    assert machine.go_back() is True
    assert machine.current is SessionPhase.PLAYING
    assert machine.previous is SessionPhase.PAUSED


def test_repeated_request_is_rejected_deterministically(machine: PhaseMachine) -> None:
    assert machine.transition_to(SessionPhase.PLAYING) is True
    assert machine.transition_to(SessionPhase.PLAYING) is False
    assert machine.current is SessionPhase.PLAYING
    assert len(machine.history) == 1
