"""
Yahtzee Scorekeeper - Game Commands

One immutable command per user action. The UI builds a command and hands it
to the game controller; commands carry data only, never behaviour.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.engine.base import Category


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""
    kind: ClassVar[str] = "COMMAND"


@dataclass(frozen=True)
class AddPlayer(Command):
    """Register a player during setup."""
    kind: ClassVar[str] = "ADD_PLAYER"
    name: str


@dataclass(frozen=True)
class RemovePlayer(Command):
    """Remove a player during setup. Remaining players are re-indexed."""
    kind: ClassVar[str] = "REMOVE_PLAYER"
    index: int


@dataclass(frozen=True)
class StartGame(Command):
    kind: ClassVar[str] = "START_GAME"


@dataclass(frozen=True)
class SetDie(Command):
    """Enter the face shown by one physical die."""
    kind: ClassVar[str] = "SET_DIE"
    die_index: int
    value: int


@dataclass(frozen=True)
class CycleDie(Command):
    """Advance one die: unset -> 1 -> ... -> 6 -> 1 (tap-to-cycle entry)."""
    kind: ClassVar[str] = "CYCLE_DIE"
    die_index: int


@dataclass(frozen=True)
class ClearDice(Command):
    kind: ClassVar[str] = "CLEAR_DICE"


@dataclass(frozen=True)
class SelectCategory(Command):
    """Score the current hand in a category for the active player."""
    kind: ClassVar[str] = "SELECT_CATEGORY"
    category: Category


@dataclass(frozen=True)
class EndGame(Command):
    """Force-finish the game with whatever has been scored so far."""
    kind: ClassVar[str] = "END_GAME"


@dataclass(frozen=True)
class ResetGame(Command):
    """
    Return a finished game to setup.

    Attributes:
        retain_roster: Keep the players for a rematch; None defers to the rules
    """
    kind: ClassVar[str] = "RESET_GAME"
    retain_roster: bool | None = None


@dataclass(frozen=True)
class NewGame(Command):
    """Discard the session, roster included. Allowed in any phase."""
    kind: ClassVar[str] = "NEW_GAME"
