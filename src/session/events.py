"""
Yahtzee Scorekeeper - Game Event Definitions

Event types describing what a single accepted command changed, used for
logging and UI notifications.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from src.engine.game import GameSession, GameStatus


class GameEvent(Enum):
    """Events that can occur during a game."""

    PLAYER_JOINED = auto()
    PLAYER_LEFT = auto()
    GAME_STARTED = auto()
    DICE_ENTERED = auto()
    DICE_CLEARED = auto()
    CATEGORY_SCORED = auto()
    GAME_FINISHED = auto()
    GAME_RESET = auto()
    STATE_UPDATED = auto()


@dataclass
class EventPayload:
    """An event together with the data the UI needs to announce it."""

    event: GameEvent
    player_index: int | None = None
    data: dict[str, Any] = field(default_factory=dict)


# Phase changes that map directly to an event
_STATUS_EVENT_MAP: dict[tuple[GameStatus, GameStatus], GameEvent] = {
    (GameStatus.SETUP, GameStatus.PLAYING): GameEvent.GAME_STARTED,
    (GameStatus.PLAYING, GameStatus.FINISHED): GameEvent.GAME_FINISHED,
    (GameStatus.FINISHED, GameStatus.SETUP): GameEvent.GAME_RESET,
    (GameStatus.PLAYING, GameStatus.SETUP): GameEvent.GAME_RESET,
}


def classify_transition(before: GameSession, after: GameSession) -> GameEvent | None:
    """Determine the game event from a session transition. None if nothing changed."""
    if before == after:
        return None

    if before.status != after.status:
        return _STATUS_EVENT_MAP.get((before.status, after.status), GameEvent.STATE_UPDATED)

    if after.status is GameStatus.SETUP:
        if len(after.players) > len(before.players):
            return GameEvent.PLAYER_JOINED
        if len(after.players) < len(before.players):
            return GameEvent.PLAYER_LEFT
        return GameEvent.STATE_UPDATED

    if after.scorecards != before.scorecards:
        return GameEvent.CATEGORY_SCORED
    if after.dice != before.dice:
        return GameEvent.DICE_CLEARED if after.dice.is_empty else GameEvent.DICE_ENTERED

    return GameEvent.STATE_UPDATED


def build_payload(before: GameSession, after: GameSession) -> EventPayload | None:
    """Classify a transition and attach the details worth announcing."""
    event = classify_transition(before, after)
    if event is None:
        return None

    if event is GameEvent.CATEGORY_SCORED:
        player_index = before.current_player_index
        move = after.last_moves[player_index]
        return EventPayload(
            event=event,
            player_index=player_index,
            data={"category": move.category.value, "score": move.score} if move else {},
        )

    if event is GameEvent.GAME_FINISHED:
        data: dict[str, Any] = {"winners": list(after.winners)}
        # The last scoring move that finished the game
        if after.scorecards != before.scorecards:
            move = after.last_moves[before.current_player_index]
            if move is not None:
                data["category"] = move.category.value
                data["score"] = move.score
        return EventPayload(event=event, player_index=after.winner, data=data)

    if event is GameEvent.PLAYER_JOINED:
        player = after.players[-1]
        return EventPayload(
            event=event,
            player_index=player.player_index,
            data={"name": player.display_name},
        )

    player_index = None
    if before.status is GameStatus.PLAYING:
        player_index = before.current_player_index
    return EventPayload(event=event, player_index=player_index)
