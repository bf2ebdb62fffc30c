"""
Yahtzee Scorekeeper - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise a descriptive InvalidMove carrying
the reason code the UI can react to.
"""

from typing import Sequence

from src.engine.base import DICE_COUNT, DIE_FACES, InvalidMove, MoveError, Player


def validate_die_index(die_index: int) -> int:
    """
    Validate the position of a die in the hand.

    Args:
        die_index: 0-based die position

    Returns:
        Validated index

    Raises:
        InvalidMove: If the index is not an integer in [0, 4]
    """
    if not isinstance(die_index, int) or isinstance(die_index, bool):
        raise InvalidMove(
            MoveError.INVALID_DIE,
            f"Die index must be an integer, got {type(die_index).__name__}.",
        )
    if not (0 <= die_index < DICE_COUNT):
        raise InvalidMove(
            MoveError.INVALID_DIE,
            f"Die index {die_index} is out of range. Must be between 0 and {DICE_COUNT - 1}.",
        )
    return die_index


def validate_die_value(value: int) -> int:
    """
    Validate a manually entered die face.

    Raises:
        InvalidMove: If the value is not an integer in [1, 6]
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidMove(
            MoveError.INVALID_DIE,
            f"Die value must be an integer, got {type(value).__name__}.",
        )
    if not (1 <= value <= DIE_FACES):
        raise InvalidMove(
            MoveError.INVALID_DIE,
            f"Die value is {value}, must be between 1 and {DIE_FACES}.",
        )
    return value


def validate_player_name(name: str, roster: Sequence[Player]) -> str:
    """
    Validate and normalize a new player's name.

    Names are stripped of surrounding whitespace and compared
    case-insensitively against the existing roster.

    Args:
        name: Name as typed by the user
        roster: Players already registered

    Returns:
        The stripped name

    Raises:
        InvalidMove: If the name is empty or already taken
    """
    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise InvalidMove(MoveError.DUPLICATE_OR_EMPTY_NAME, "Player name cannot be empty.")

    taken = {player.display_name.casefold() for player in roster}
    if cleaned.casefold() in taken:
        raise InvalidMove(
            MoveError.DUPLICATE_OR_EMPTY_NAME,
            f"A player named {cleaned!r} has already joined.",
        )
    return cleaned


def validate_roster_index(index: int, roster_size: int) -> int:
    """
    Validate the index of a player to remove.

    Raises:
        InvalidMove: ROSTER_TOO_SMALL on an empty roster,
            UNKNOWN_PLAYER if the index is out of range
    """
    if roster_size == 0:
        raise InvalidMove(MoveError.ROSTER_TOO_SMALL, "There are no players to remove.")
    if not isinstance(index, int) or not (0 <= index < roster_size):
        raise InvalidMove(
            MoveError.UNKNOWN_PLAYER,
            f"Player index {index} is out of range. Must be between 0 and {roster_size - 1}.",
        )
    return index
