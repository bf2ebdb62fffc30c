"""Tests for src/session/controller.py — command dispatch and rejection handling."""

import logging

import pytest

from src.engine.base import Category, GameRules, MoveError
from src.engine.commands import SelectCategory
from src.engine.game import GameStatus
from src.session.controller import GameController
from src.session.events import GameEvent


@pytest.fixture
def controller() -> GameController:
    ctrl = GameController()
    ctrl.add_player("Alice")
    ctrl.add_player("Bob")
    ctrl.start_game()
    return ctrl


def enter(ctrl: GameController, hand: list[int]) -> None:
    for die_index, value in enumerate(hand):
        result = ctrl.set_die(die_index, value)
        assert result.ok


# ── Dispatch ────────────────────────────────────────────────────────────

class TestDispatch:
    def test_starts_in_setup(self):
        assert GameController().session.status is GameStatus.SETUP

    def test_uses_given_rules(self):
        rules = GameRules(max_players=2)
        assert GameController(rules=rules).session.rules == rules

    def test_accepted_command_replaces_session(self, controller):
        before = controller.session
        result = controller.set_die(0, 4)
        assert result.ok
        assert result.error is None
        assert controller.session is result.session
        assert controller.session is not before

    def test_full_house_turn(self, controller):
        enter(controller, [5, 5, 5, 2, 2])
        result = controller.select_category(Category.FULL_HOUSE)
        assert result.ok
        assert result.event.event is GameEvent.CATEGORY_SCORED
        assert result.event.data == {"category": "full_house", "score": 25}
        assert controller.session.current_player.display_name == "Bob"
        assert controller.session.dice.is_empty

    def test_dispatch_accepts_command_objects(self, controller):
        enter(controller, [1, 1, 1, 1, 1])
        result = controller.dispatch(SelectCategory(category=Category.YAHTZEE))
        assert result.ok
        assert controller.session.scorecards[0].get(Category.YAHTZEE) == 50


# ── Rejections ──────────────────────────────────────────────────────────

class TestRejection:
    def test_incomplete_hand_keeps_session(self, controller):
        controller.set_die(0, 3)
        before = controller.session
        result = controller.select_category(Category.CHANCE)
        assert not result.ok
        assert result.error.reason is MoveError.INCOMPLETE_HAND
        assert result.session is before
        assert controller.session is before
        assert result.event is None

    def test_category_taken_keeps_session(self, controller):
        enter(controller, [1, 1, 1, 1, 1])
        controller.select_category(Category.YAHTZEE)
        enter(controller, [2, 3, 4, 5, 6])
        controller.select_category(Category.CHANCE)
        enter(controller, [3, 3, 3, 3, 3])
        before = controller.session
        result = controller.select_category(Category.YAHTZEE)
        assert result.error.reason is MoveError.CATEGORY_TAKEN
        assert controller.session is before

    def test_wrong_phase(self):
        ctrl = GameController()
        result = ctrl.start_game()
        assert result.error.reason is MoveError.ROSTER_TOO_SMALL
        result = ctrl.set_die(0, 1)
        assert result.error.reason is MoveError.WRONG_PHASE

    def test_rejection_logged_as_warning(self, controller, caplog):
        with caplog.at_level(logging.WARNING, logger="src.session.controller"):
            controller.select_category(Category.CHANCE)
        assert "Rejected SELECT_CATEGORY" in caplog.text
        assert "INCOMPLETE_HAND" in caplog.text


# ── Lifecycle ───────────────────────────────────────────────────────────

class TestLifecycle:
    def test_end_and_reset(self, controller):
        result = controller.end_game()
        assert result.event.event is GameEvent.GAME_FINISHED
        assert controller.session.status is GameStatus.FINISHED

        result = controller.reset_game()
        assert result.event.event is GameEvent.GAME_RESET
        assert [p.display_name for p in controller.session.players] == ["Alice", "Bob"]

    def test_reset_without_roster(self, controller):
        controller.end_game()
        controller.reset_game(retain_roster=False)
        assert controller.session.players == ()

    def test_new_game_mid_play(self, controller):
        result = controller.new_game()
        assert result.ok
        assert controller.session.status is GameStatus.SETUP
        assert controller.session.players == ()

    def test_remove_player(self):
        ctrl = GameController()
        ctrl.add_player("Alice")
        ctrl.add_player("Bob")
        result = ctrl.remove_player(0)
        assert result.event.event is GameEvent.PLAYER_LEFT
        assert ctrl.session.players[0].display_name == "Bob"

    def test_game_start_logged(self, caplog):
        ctrl = GameController()
        ctrl.add_player("Alice")
        ctrl.add_player("Bob")
        with caplog.at_level(logging.INFO, logger="src.session.controller"):
            ctrl.start_game()
        assert "Game started with 2 players" in caplog.text

    def test_snapshot_tracks_session(self, controller):
        controller.cycle_die(0)
        snapshot = controller.snapshot()
        assert snapshot.dice == [1, None, None, None, None]
        assert snapshot.status == "playing"
