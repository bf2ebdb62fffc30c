"""
Yahtzee Scorekeeper - Score Engine

Pure scoring rules for a five-dice hand.

Scoring rules:
- Ones..Sixes: count of matching dice × face value
- Three/Four of a Kind: sum of all dice when 3/4 dice share a face
- Full House: 25 for three of one face plus two of another
- Small Straight: 30 for any four consecutive faces
- Large Straight: 40 for five consecutive faces
- Yahtzee: 50 for five of a kind
- Chance: sum of all dice
- Upper bonus: 35 when Ones..Sixes total at least 63
"""

from collections import Counter
from typing import ClassVar, Sequence

from src.engine.base import (
    ALL_CATEGORIES,
    DEFAULT_RULES,
    FULL_HOUSE_SCORE,
    LARGE_STRAIGHT_SCORE,
    LOWER_CATEGORIES,
    SMALL_STRAIGHT_SCORE,
    UPPER_BONUS_THRESHOLD,
    UPPER_BONUS_VALUE,
    UPPER_CATEGORIES,
    YAHTZEE_SCORE,
    Bonuses,
    Category,
    DiceHand,
    GameRules,
    InvalidMove,
    MoveError,
    ScoreCard,
    ScorecardTotals,
)


class ScoreEngine:
    """
    Stateless engine for Yahtzee scoring.

    All methods are class methods operating on immutable data.
    """

    SMALL_STRAIGHTS: ClassVar[tuple[frozenset[int], ...]] = (
        frozenset({1, 2, 3, 4}),
        frozenset({2, 3, 4, 5}),
        frozenset({3, 4, 5, 6}),
    )
    LARGE_STRAIGHTS: ClassVar[tuple[frozenset[int], ...]] = (
        frozenset({1, 2, 3, 4, 5}),
        frozenset({2, 3, 4, 5, 6}),
    )

    # Best score each category can award, used to rank suggestions
    MAX_CATEGORY_SCORE: ClassVar[dict[Category, int]] = {
        Category.ONES: 5,
        Category.TWOS: 10,
        Category.THREES: 15,
        Category.FOURS: 20,
        Category.FIVES: 25,
        Category.SIXES: 30,
        Category.THREE_OF_A_KIND: 30,
        Category.FOUR_OF_A_KIND: 30,
        Category.FULL_HOUSE: FULL_HOUSE_SCORE,
        Category.SMALL_STRAIGHT: SMALL_STRAIGHT_SCORE,
        Category.LARGE_STRAIGHT: LARGE_STRAIGHT_SCORE,
        Category.YAHTZEE: YAHTZEE_SCORE,
        Category.CHANCE: 30,
    }

    @classmethod
    def _complete_values(cls, hand: DiceHand | Sequence[int | None]) -> tuple[int, ...]:
        """Return the hand's values, refusing hands with unset dice."""
        if not isinstance(hand, DiceHand):
            hand = DiceHand.from_sequence(hand)
        if not hand.is_complete:
            raise InvalidMove(
                MoveError.INCOMPLETE_HAND,
                "All five dice must be set before a category can be scored.",
            )
        return tuple(hand.values)  # type: ignore[arg-type]

    @classmethod
    def is_yahtzee(cls, hand: DiceHand | Sequence[int | None]) -> bool:
        """Check if all five dice show the same face."""
        values = cls._complete_values(hand)
        return len(set(values)) == 1

    @classmethod
    def score_for(
        cls,
        hand: DiceHand | Sequence[int | None],
        category: Category,
        rules: GameRules = DEFAULT_RULES,
    ) -> int:
        """
        Calculate the score a category would award for a hand.

        Args:
            hand: Five die values, a DiceHand or any sequence
            category: Category to score
            rules: House rules (full house on five of a kind)

        Returns:
            Points for the category, 0 if the hand does not qualify

        Raises:
            InvalidMove: INCOMPLETE_HAND if any die is unset
        """
        values = cls._complete_values(hand)
        counts = Counter(values)
        total = sum(values)

        face = category.face
        if face is not None:
            return counts[face] * face

        if category is Category.THREE_OF_A_KIND:
            return total if max(counts.values()) >= 3 else 0

        if category is Category.FOUR_OF_A_KIND:
            return total if max(counts.values()) >= 4 else 0

        if category is Category.FULL_HOUSE:
            shape = sorted(counts.values())
            if shape == [2, 3]:
                return FULL_HOUSE_SCORE
            # Five of a kind only counts under the house rule
            if shape == [5] and rules.full_house_allows_five_of_a_kind:
                return FULL_HOUSE_SCORE
            return 0

        if category is Category.SMALL_STRAIGHT:
            faces = set(values)
            return SMALL_STRAIGHT_SCORE if any(s <= faces for s in cls.SMALL_STRAIGHTS) else 0

        if category is Category.LARGE_STRAIGHT:
            return LARGE_STRAIGHT_SCORE if frozenset(values) in cls.LARGE_STRAIGHTS else 0

        if category is Category.YAHTZEE:
            return YAHTZEE_SCORE if len(counts) == 1 else 0

        if category is Category.CHANCE:
            return total

        raise ValueError(f"Unknown category {category!r}")

    @classmethod
    def available_scores(
        cls,
        hand: DiceHand | Sequence[int | None],
        scorecard: ScoreCard,
        rules: GameRules = DEFAULT_RULES,
    ) -> dict[Category, int]:
        """
        Preview scores for every unassigned category.

        Returns:
            Mapping of open category to the score it would award,
            empty when the hand is incomplete
        """
        if not isinstance(hand, DiceHand):
            hand = DiceHand.from_sequence(hand)
        if not hand.is_complete:
            return {}
        return {
            category: cls.score_for(hand, category, rules)
            for category in scorecard.unassigned
        }

    @classmethod
    def compute_bonuses(cls, scorecard: ScoreCard, rules: GameRules = DEFAULT_RULES) -> Bonuses:
        """
        Calculate end-of-game bonuses for a scorecard.

        The upper bonus is 35 once the assigned Ones..Sixes reach 63. The
        Yahtzee bonus is only accrued when the rules enable it.
        """
        upper_total = sum(scorecard.get(c) or 0 for c in UPPER_CATEGORIES)
        upper_bonus = UPPER_BONUS_VALUE if upper_total >= UPPER_BONUS_THRESHOLD else 0
        yahtzee_bonus = 0
        if rules.yahtzee_bonus_enabled:
            yahtzee_bonus = scorecard.yahtzee_bonus_count * rules.yahtzee_bonus_value
        return Bonuses(upper_bonus=upper_bonus, yahtzee_bonus=yahtzee_bonus)

    @classmethod
    def calculate_totals(cls, scorecard: ScoreCard, rules: GameRules = DEFAULT_RULES) -> ScorecardTotals:
        """Calculate section totals and the grand total. Unassigned categories count as 0."""
        bonuses = cls.compute_bonuses(scorecard, rules)
        return ScorecardTotals(
            upper_total=sum(scorecard.get(c) or 0 for c in UPPER_CATEGORIES),
            upper_bonus=bonuses.upper_bonus,
            lower_total=sum(scorecard.get(c) or 0 for c in LOWER_CATEGORIES),
            yahtzee_bonus=bonuses.yahtzee_bonus,
        )

    @classmethod
    def is_scorecard_complete(cls, scorecard: ScoreCard) -> bool:
        return scorecard.is_complete

    @classmethod
    def suggest_category(
        cls,
        hand: DiceHand | Sequence[int | None],
        scorecard: ScoreCard,
        rules: GameRules = DEFAULT_RULES,
    ) -> Category:
        """
        Suggest a category for the hand. Greedy: highest share of the
        category's maximum wins, ties go to the higher absolute score.

        When nothing scores, the open category with the lowest maximum is
        sacrificed.

        Raises:
            InvalidMove: INCOMPLETE_HAND if any die is unset
            ValueError: If the scorecard has no open categories
        """
        cls._complete_values(hand)
        available = cls.available_scores(hand, scorecard, rules)
        if not available:
            raise ValueError("No available categories.")

        # Scorecard order breaks the remaining ties
        order = {category: i for i, category in enumerate(ALL_CATEGORIES)}
        entries = sorted(
            available.items(),
            key=lambda item: (
                -item[1] / cls.MAX_CATEGORY_SCORE[item[0]],
                -item[1],
                order[item[0]],
            ),
        )

        if entries[0][1] == 0:
            return min(
                available,
                key=lambda c: (cls.MAX_CATEGORY_SCORE[c], order[c]),
            )
        return entries[0][0]
