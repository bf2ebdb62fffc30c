"""
Yahtzee Scorekeeper - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Sequence

import pytest

from src.engine.base import ALL_CATEGORIES, Category, GameRules
from src.engine.commands import AddPlayer, SelectCategory, SetDie, StartGame
from src.engine.game import GameSession, reduce


# =============================================================================
# HAND TEST DATA
# =============================================================================

# A strong hand for each category; scoring all 13 gives 326 with the upper bonus
GOOD_HANDS: dict[Category, tuple[int, ...]] = {
    Category.ONES: (1, 1, 1, 2, 3),             # 3
    Category.TWOS: (2, 2, 2, 1, 3),             # 6
    Category.THREES: (3, 3, 3, 1, 2),           # 9
    Category.FOURS: (4, 4, 4, 1, 2),            # 12
    Category.FIVES: (5, 5, 5, 1, 2),            # 15
    Category.SIXES: (6, 6, 6, 1, 2),            # 18
    Category.THREE_OF_A_KIND: (6, 6, 6, 5, 5),  # 28
    Category.FOUR_OF_A_KIND: (6, 6, 6, 6, 5),   # 29
    Category.FULL_HOUSE: (2, 2, 3, 3, 3),       # 25
    Category.SMALL_STRAIGHT: (1, 2, 3, 4, 6),   # 30
    Category.LARGE_STRAIGHT: (1, 2, 3, 4, 5),   # 40
    Category.YAHTZEE: (4, 4, 4, 4, 4),          # 50
    Category.CHANCE: (6, 6, 5, 5, 4),           # 26
}
GOOD_TOTAL = 326

# Scoring this hand in every category gives 62
WEAK_HAND: tuple[int, ...] = (1, 2, 3, 4, 6)
WEAK_TOTAL = 62


@pytest.fixture
def good_hands() -> dict[Category, tuple[int, ...]]:
    return dict(GOOD_HANDS)


@pytest.fixture
def scoring_hands() -> dict[str, tuple[tuple[int, ...], Category, int]]:
    """
    Common hands with expected scores.

    Returns:
        Dict mapping name to (dice_values, category, expected_points)
    """
    return {
        "two_ones": ((1, 1, 3, 4, 5), Category.ONES, 2),
        "no_ones": ((2, 3, 4, 5, 6), Category.ONES, 0),
        "five_ones": ((1, 1, 1, 1, 1), Category.ONES, 5),
        "three_twos": ((2, 2, 2, 4, 5), Category.TWOS, 6),
        "four_threes": ((3, 3, 3, 3, 5), Category.THREES, 12),
        "five_fours": ((4, 4, 4, 4, 4), Category.FOURS, 20),
        "two_fives": ((5, 5, 1, 2, 3), Category.FIVES, 10),
        "three_sixes": ((6, 6, 6, 1, 2), Category.SIXES, 18),
        "three_kind": ((3, 3, 3, 4, 5), Category.THREE_OF_A_KIND, 18),
        "three_kind_from_four": ((6, 6, 6, 6, 1), Category.THREE_OF_A_KIND, 25),
        "no_three_kind": ((1, 2, 3, 4, 5), Category.THREE_OF_A_KIND, 0),
        "four_kind": ((5, 5, 5, 5, 3), Category.FOUR_OF_A_KIND, 23),
        "four_kind_only_three": ((5, 5, 5, 3, 2), Category.FOUR_OF_A_KIND, 0),
        "full_house": ((2, 2, 3, 3, 3), Category.FULL_HOUSE, 25),
        "full_house_shuffled": ((3, 2, 3, 2, 3), Category.FULL_HOUSE, 25),
        "two_pair_not_full_house": ((2, 2, 3, 3, 4), Category.FULL_HOUSE, 0),
        "small_low": ((1, 2, 3, 4, 6), Category.SMALL_STRAIGHT, 30),
        "small_mid": ((2, 3, 4, 5, 5), Category.SMALL_STRAIGHT, 30),
        "small_high": ((6, 1, 5, 4, 3), Category.SMALL_STRAIGHT, 30),
        "small_from_large": ((1, 2, 3, 4, 5), Category.SMALL_STRAIGHT, 30),
        "no_small": ((1, 2, 3, 5, 6), Category.SMALL_STRAIGHT, 0),
        "large_low": ((1, 2, 3, 4, 5), Category.LARGE_STRAIGHT, 40),
        "large_high": ((6, 5, 4, 3, 2), Category.LARGE_STRAIGHT, 40),
        "no_large": ((1, 2, 3, 4, 6), Category.LARGE_STRAIGHT, 0),
        "yahtzee": ((1, 1, 1, 1, 1), Category.YAHTZEE, 50),
        "no_yahtzee": ((6, 6, 6, 6, 5), Category.YAHTZEE, 0),
        "chance": ((1, 3, 4, 5, 6), Category.CHANCE, 19),
        "chance_ones": ((1, 1, 1, 1, 1), Category.CHANCE, 5),
    }


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

def enter_hand(session: GameSession, hand: Sequence[int]) -> GameSession:
    """Set all five dice through SET_DIE commands."""
    for die_index, value in enumerate(hand):
        session = reduce(session, SetDie(die_index=die_index, value=value))
    return session


def score_hand(session: GameSession, hand: Sequence[int], category: Category) -> GameSession:
    """Enter a hand and score it for the current player."""
    return reduce(enter_hand(session, hand), SelectCategory(category=category))


def new_game(names: Sequence[str], rules: GameRules = GameRules()) -> GameSession:
    """Build a session with the given roster and start it."""
    session = GameSession.new(rules)
    for name in names:
        session = reduce(session, AddPlayer(name=name))
    return reduce(session, StartGame())


@pytest.fixture
def two_player_game() -> GameSession:
    """Alice and Bob, game started, Alice to play."""
    return new_game(["Alice", "Bob"])


@pytest.fixture
def enter() -> Callable[[GameSession, Sequence[int]], GameSession]:
    return enter_hand


@pytest.fixture
def score() -> Callable[[GameSession, Sequence[int], Category], GameSession]:
    return score_hand


@pytest.fixture
def start_game() -> Callable[..., GameSession]:
    return new_game


@pytest.fixture
def play_full_game() -> Callable[[GameSession, set[int]], GameSession]:
    """
    Play every round to the end.

    Round N scores category N for every player. Players in ``strong`` use
    the hand from GOOD_HANDS (326 total), everyone else uses WEAK_HAND (62).
    """
    def _play(session: GameSession, strong: set[int]) -> GameSession:
        for category in ALL_CATEGORIES:
            for player_index in range(len(session.players)):
                assert session.current_player_index == player_index
                hand = GOOD_HANDS[category] if player_index in strong else WEAK_HAND
                session = score_hand(session, hand, category)
        return session

    return _play
