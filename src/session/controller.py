"""
Yahtzee Scorekeeper - Game Controller

The single command dispatcher for a pass-and-play session. Owns the current
GameSession, runs each command through the pure reducer, and keeps the
previous session whenever a command is rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.engine.base import DEFAULT_RULES, Category, GameRules, InvalidMove
from src.engine.commands import (
    AddPlayer,
    ClearDice,
    Command,
    CycleDie,
    EndGame,
    NewGame,
    RemovePlayer,
    ResetGame,
    SelectCategory,
    SetDie,
    StartGame,
)
from src.engine.game import GameSession, reduce
from src.session.events import EventPayload, GameEvent, build_payload
from src.session.models import SessionSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """
    Outcome of one dispatched command.

    Attributes:
        session: Session after the command (the old one if rejected)
        error: The rejection, None if the command was applied
        event: What the command changed, None if nothing changed
    """
    session: GameSession
    error: InvalidMove | None = None
    event: EventPayload | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GameController:
    """Holds the authoritative session and applies commands one at a time.

    Commands are processed to completion before the next is accepted; there
    is no background work and no shared state beyond ``self._session``.
    """

    def __init__(self, rules: GameRules = DEFAULT_RULES, session: GameSession | None = None) -> None:
        self._session = session if session is not None else GameSession.new(rules)

    @property
    def session(self) -> GameSession:
        return self._session

    def snapshot(self) -> SessionSnapshot:
        """Render-ready view of the current session."""
        return SessionSnapshot.from_session(self._session)

    def dispatch(self, command: Command) -> DispatchResult:
        """Apply a command. Rejected commands leave the session unchanged."""
        before = self._session
        try:
            after = reduce(before, command)
        except InvalidMove as exc:
            logger.warning("Rejected %s: %s (%s)", command.kind, exc, exc.reason.name)
            return DispatchResult(session=before, error=exc)

        self._session = after
        payload = build_payload(before, after)
        self._log_event(command, payload)
        return DispatchResult(session=after, event=payload)

    def _log_event(self, command: Command, payload: EventPayload | None) -> None:
        if payload is None:
            logger.debug("%s changed nothing", command.kind)
            return
        if payload.event is GameEvent.CATEGORY_SCORED:
            logger.info(
                "Player %s scored %s in %s",
                payload.player_index, payload.data.get("score"), payload.data.get("category"),
            )
        elif payload.event is GameEvent.GAME_FINISHED:
            logger.info("Game finished, winners %s", payload.data.get("winners"))
        elif payload.event is GameEvent.GAME_STARTED:
            logger.info("Game started with %d players", len(self._session.players))
        elif payload.event in (GameEvent.DICE_ENTERED, GameEvent.DICE_CLEARED):
            logger.debug("Dice now %s", self._session.dice.values)
        else:
            logger.info("%s -> %s", command.kind, payload.event.name)

    # Convenience wrappers for the UI

    def add_player(self, name: str) -> DispatchResult:
        return self.dispatch(AddPlayer(name=name))

    def remove_player(self, index: int) -> DispatchResult:
        return self.dispatch(RemovePlayer(index=index))

    def start_game(self) -> DispatchResult:
        return self.dispatch(StartGame())

    def set_die(self, die_index: int, value: int) -> DispatchResult:
        return self.dispatch(SetDie(die_index=die_index, value=value))

    def cycle_die(self, die_index: int) -> DispatchResult:
        return self.dispatch(CycleDie(die_index=die_index))

    def clear_dice(self) -> DispatchResult:
        return self.dispatch(ClearDice())

    def select_category(self, category: Category) -> DispatchResult:
        return self.dispatch(SelectCategory(category=category))

    def end_game(self) -> DispatchResult:
        return self.dispatch(EndGame())

    def reset_game(self, retain_roster: bool | None = None) -> DispatchResult:
        return self.dispatch(ResetGame(retain_roster=retain_roster))

    def new_game(self) -> DispatchResult:
        return self.dispatch(NewGame())
