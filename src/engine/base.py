"""
Yahtzee Scorekeeper - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so that every
command produces a new session instead of mutating the old one.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence


DICE_COUNT = 5
DIE_FACES = 6
TOTAL_ROUNDS = 13

UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS_VALUE = 35
FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
YAHTZEE_SCORE = 50
YAHTZEE_BONUS_VALUE = 100


class Category(Enum):
    """The 13 scoring slots on a scorecard, in scorecard order."""
    ONES = "ones"
    TWOS = "twos"
    THREES = "threes"
    FOURS = "fours"
    FIVES = "fives"
    SIXES = "sixes"
    THREE_OF_A_KIND = "three_of_a_kind"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    YAHTZEE = "yahtzee"
    CHANCE = "chance"

    @property
    def is_upper(self) -> bool:
        """True for Ones through Sixes."""
        return self in UPPER_CATEGORIES

    @property
    def face(self) -> int | None:
        """Die face counted by an upper category, None for the lower section."""
        return _UPPER_FACE.get(self)


UPPER_CATEGORIES: tuple[Category, ...] = (
    Category.ONES,
    Category.TWOS,
    Category.THREES,
    Category.FOURS,
    Category.FIVES,
    Category.SIXES,
)

LOWER_CATEGORIES: tuple[Category, ...] = (
    Category.THREE_OF_A_KIND,
    Category.FOUR_OF_A_KIND,
    Category.FULL_HOUSE,
    Category.SMALL_STRAIGHT,
    Category.LARGE_STRAIGHT,
    Category.YAHTZEE,
    Category.CHANCE,
)

ALL_CATEGORIES: tuple[Category, ...] = UPPER_CATEGORIES + LOWER_CATEGORIES

_UPPER_FACE: dict[Category, int] = {
    category: face for face, category in enumerate(UPPER_CATEGORIES, start=1)
}


class MoveError(Enum):
    """Reason codes attached to a rejected command."""
    WRONG_PHASE = auto()
    CATEGORY_TAKEN = auto()
    INCOMPLETE_HAND = auto()
    ROSTER_TOO_SMALL = auto()
    ROSTER_FULL = auto()
    DUPLICATE_OR_EMPTY_NAME = auto()
    INVALID_DIE = auto()
    UNKNOWN_PLAYER = auto()


class InvalidMove(ValueError):
    """
    A command that is not legal for the current session.

    Attributes:
        reason: Machine-readable reason code
    """

    def __init__(self, reason: MoveError, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or reason.name)


@dataclass(frozen=True)
class DiceHand:
    """
    The five manually entered die values for the current turn.

    Attributes:
        values: Exactly five entries, each None (unset) or 1-6
    """
    values: tuple[int | None, ...] = (None,) * DICE_COUNT

    def __post_init__(self) -> None:
        """Validate hand shape and die values."""
        if len(self.values) != DICE_COUNT:
            raise ValueError(
                f"A hand must have exactly {DICE_COUNT} dice, got {len(self.values)}."
            )
        for value in self.values:
            if value is not None and not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int | None:
        return self.values[index]

    @classmethod
    def empty(cls) -> "DiceHand":
        """Create a hand with all five dice unset."""
        return cls()

    @classmethod
    def from_sequence(cls, values: Sequence[int | None]) -> "DiceHand":
        """Create a DiceHand from any sequence type."""
        return cls(values=tuple(values))

    @property
    def is_complete(self) -> bool:
        """Returns True when every die has a value."""
        return all(value is not None for value in self.values)

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.values)

    def with_die(self, die_index: int, value: int | None) -> "DiceHand":
        """Return a copy with one die replaced."""
        values = list(self.values)
        values[die_index] = value
        return DiceHand(values=tuple(values))

    def cycled(self, die_index: int) -> "DiceHand":
        """Return a copy with one die advanced: unset -> 1 -> ... -> 6 -> 1."""
        current = self.values[die_index]
        next_value = 1 if current is None or current >= DIE_FACES else current + 1
        return self.with_die(die_index, next_value)


@dataclass(frozen=True)
class ScoreCard:
    """
    One player's scorecard.

    Attributes:
        scores: One entry per category in ALL_CATEGORIES order, None if unassigned
        yahtzee_bonus_count: Extra Yahtzees scored after the Yahtzee box held 50
    """
    scores: tuple[int | None, ...] = (None,) * len(ALL_CATEGORIES)
    yahtzee_bonus_count: int = 0

    def __post_init__(self) -> None:
        if len(self.scores) != len(ALL_CATEGORIES):
            raise ValueError(
                f"A scorecard must have {len(ALL_CATEGORIES)} entries, got {len(self.scores)}."
            )
        for score in self.scores:
            if score is not None and score < 0:
                raise ValueError(f"Score cannot be negative, got {score}.")
        if self.yahtzee_bonus_count < 0:
            raise ValueError("Yahtzee bonus count cannot be negative.")

    @classmethod
    def empty(cls) -> "ScoreCard":
        """Create a scorecard with every category unassigned."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[Category, int | None], yahtzee_bonus_count: int = 0) -> "ScoreCard":
        """Create a ScoreCard from a partial category -> score mapping."""
        return cls(
            scores=tuple(data.get(category) for category in ALL_CATEGORIES),
            yahtzee_bonus_count=yahtzee_bonus_count,
        )

    def to_dict(self) -> dict[Category, int | None]:
        return dict(zip(ALL_CATEGORIES, self.scores))

    def get(self, category: Category) -> int | None:
        """Assigned score for a category, None if unassigned."""
        return self.scores[ALL_CATEGORIES.index(category)]

    def is_assigned(self, category: Category) -> bool:
        return self.get(category) is not None

    @property
    def is_complete(self) -> bool:
        """Check if every category has been assigned."""
        return all(score is not None for score in self.scores)

    @property
    def unassigned(self) -> tuple[Category, ...]:
        return tuple(
            category for category, score in zip(ALL_CATEGORIES, self.scores)
            if score is None
        )

    def with_score(self, category: Category, score: int) -> "ScoreCard":
        """
        Return a copy with a category assigned.

        Raises:
            InvalidMove: If the category already holds a score
        """
        if self.is_assigned(category):
            raise InvalidMove(
                MoveError.CATEGORY_TAKEN,
                f"Category {category.value} has already been scored.",
            )
        scores = list(self.scores)
        scores[ALL_CATEGORIES.index(category)] = score
        return ScoreCard(scores=tuple(scores), yahtzee_bonus_count=self.yahtzee_bonus_count)

    def with_yahtzee_bonus(self) -> "ScoreCard":
        """Return a copy with one more extra Yahtzee recorded."""
        return ScoreCard(scores=self.scores, yahtzee_bonus_count=self.yahtzee_bonus_count + 1)


@dataclass(frozen=True)
class ScorecardTotals:
    """
    Derived totals for a scorecard.

    Attributes:
        upper_total: Sum of assigned Ones..Sixes
        upper_bonus: 35 when upper_total reaches 63, else 0
        lower_total: Sum of assigned lower-section categories
        yahtzee_bonus: Accrued extra-Yahtzee bonus points
    """
    upper_total: int
    upper_bonus: int
    lower_total: int
    yahtzee_bonus: int = 0

    @property
    def grand_total(self) -> int:
        return self.upper_total + self.upper_bonus + self.lower_total + self.yahtzee_bonus


@dataclass(frozen=True)
class Bonuses:
    """End-of-game bonuses for a scorecard."""
    upper_bonus: int
    yahtzee_bonus: int


@dataclass(frozen=True)
class Player:
    """
    A registered player.

    Attributes:
        player_index: 0-based position in the roster, equal to turn order
        display_name: Non-empty name shown on the scorecard
    """
    player_index: int
    display_name: str


@dataclass(frozen=True)
class LastMove:
    """The most recent category a player scored."""
    category: Category
    score: int


@dataclass(frozen=True)
class FinalScore:
    """One row of the final standings."""
    player_index: int
    grand_total: int


@dataclass(frozen=True)
class GameRules:
    """
    House rules for a session.

    Attributes:
        min_players: Players required before the game can start
        max_players: Roster capacity
        retain_roster_on_reset: Keep player names when a finished game is reset
        full_house_allows_five_of_a_kind: Score five-of-a-kind as a full house
        yahtzee_bonus_enabled: Award a bonus for each extra Yahtzee
        yahtzee_bonus_value: Points per extra Yahtzee
    """
    min_players: int = 2
    max_players: int = 6
    retain_roster_on_reset: bool = True
    full_house_allows_five_of_a_kind: bool = False
    yahtzee_bonus_enabled: bool = False
    yahtzee_bonus_value: int = YAHTZEE_BONUS_VALUE

    def __post_init__(self) -> None:
        """Validate rule values."""
        if self.min_players < 1:
            raise ValueError("At least one player is required.")
        if self.max_players < self.min_players:
            raise ValueError(
                f"max_players ({self.max_players}) must be at least min_players ({self.min_players})."
            )
        if self.yahtzee_bonus_value < 0:
            raise ValueError("Yahtzee bonus value cannot be negative.")


DEFAULT_RULES = GameRules()
