"""
Yahtzee Scorekeeper - Game State Machine

A pass-and-play session moves through three phases:

    setup --START_GAME--> playing --(all scorecards full | END_GAME)--> finished
    finished --RESET_GAME--> setup
    any --NEW_GAME--> setup (empty roster)

``reduce`` is a pure function: it takes a session and a command and returns a
new session, or raises InvalidMove and leaves the caller's session untouched.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable

from src.engine.base import (
    DEFAULT_RULES,
    Category,
    DiceHand,
    FinalScore,
    GameRules,
    InvalidMove,
    LastMove,
    MoveError,
    Player,
    ScoreCard,
    ScorecardTotals,
    YAHTZEE_SCORE,
)
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
from src.engine.scoring import ScoreEngine
from src.engine.validators import (
    validate_die_index,
    validate_die_value,
    validate_player_name,
    validate_roster_index,
)


class GameStatus(Enum):
    """Session phase."""
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass(frozen=True)
class GameSession:
    """
    Complete, immutable state of one pass-and-play game.

    Attributes:
        status: Current phase
        players: Roster in turn order; player_index equals position
        scorecards: One scorecard per player, same order as players
        current_player_index: Whose turn it is
        round: 1-based round number, one round per category
        dice: Hand being entered for the current turn
        last_moves: Per player, the most recent category scored (None before the first)
        final_scores: One entry per player, populated once finished
        winners: Every player index sharing the top grand total, populated once finished
        rules: House rules for this session
    """
    status: GameStatus = GameStatus.SETUP
    players: tuple[Player, ...] = ()
    scorecards: tuple[ScoreCard, ...] = ()
    current_player_index: int = 0
    round: int = 1
    dice: DiceHand = field(default_factory=DiceHand.empty)
    last_moves: tuple[LastMove | None, ...] = ()
    final_scores: tuple[FinalScore, ...] = ()
    winners: tuple[int, ...] = ()
    rules: GameRules = DEFAULT_RULES

    @classmethod
    def new(cls, rules: GameRules = DEFAULT_RULES) -> "GameSession":
        """Create an empty session in setup."""
        return cls(rules=rules)

    @property
    def winner(self) -> int | None:
        """Lowest player index among the winners, None until finished."""
        return self.winners[0] if self.winners else None

    @property
    def current_player(self) -> Player | None:
        if self.status is not GameStatus.PLAYING:
            return None
        return self.players[self.current_player_index]

    @property
    def current_scorecard(self) -> ScoreCard | None:
        if self.status is not GameStatus.PLAYING:
            return None
        return self.scorecards[self.current_player_index]

    @property
    def available_scores(self) -> dict[Category, int]:
        """Preview scores for the current player's open categories."""
        scorecard = self.current_scorecard
        if scorecard is None:
            return {}
        return ScoreEngine.available_scores(self.dice, scorecard, self.rules)

    @property
    def all_scorecards_complete(self) -> bool:
        return bool(self.scorecards) and all(card.is_complete for card in self.scorecards)

    @property
    def standings(self) -> tuple[FinalScore, ...]:
        """Final scores sorted by grand total, highest first, ties by player index."""
        return tuple(
            sorted(self.final_scores, key=lambda s: (-s.grand_total, s.player_index))
        )

    def totals_for(self, player_index: int) -> ScorecardTotals:
        return ScoreEngine.calculate_totals(self.scorecards[player_index], self.rules)


# =============================================================================
# Command handlers
# =============================================================================

def _require_phase(session: GameSession, status: GameStatus, command: Command) -> None:
    if session.status is not status:
        raise InvalidMove(
            MoveError.WRONG_PHASE,
            f"{command.kind} is only allowed during {status.value}, "
            f"game is {session.status.value}.",
        )


def _reindex(players: tuple[Player, ...]) -> tuple[Player, ...]:
    return tuple(
        Player(player_index=i, display_name=p.display_name) for i, p in enumerate(players)
    )


def _finish(session: GameSession) -> GameSession:
    """Freeze final scores and winners. Unassigned categories count as 0."""
    final_scores = tuple(
        FinalScore(player_index=i, grand_total=session.totals_for(i).grand_total)
        for i in range(len(session.players))
    )
    top = max(score.grand_total for score in final_scores)
    winners = tuple(s.player_index for s in final_scores if s.grand_total == top)
    return replace(
        session,
        status=GameStatus.FINISHED,
        dice=DiceHand.empty(),
        final_scores=final_scores,
        winners=winners,
    )


def _add_player(session: GameSession, command: AddPlayer) -> GameSession:
    _require_phase(session, GameStatus.SETUP, command)
    if len(session.players) >= session.rules.max_players:
        raise InvalidMove(
            MoveError.ROSTER_FULL,
            f"The roster is full ({session.rules.max_players} players).",
        )
    name = validate_player_name(command.name, session.players)
    player = Player(player_index=len(session.players), display_name=name)
    return replace(
        session,
        players=session.players + (player,),
        scorecards=session.scorecards + (ScoreCard.empty(),),
        last_moves=session.last_moves + (None,),
    )


def _remove_player(session: GameSession, command: RemovePlayer) -> GameSession:
    _require_phase(session, GameStatus.SETUP, command)
    index = validate_roster_index(command.index, len(session.players))

    def without(items: tuple) -> tuple:
        return items[:index] + items[index + 1:]

    return replace(
        session,
        players=_reindex(without(session.players)),
        scorecards=without(session.scorecards),
        last_moves=without(session.last_moves),
    )


def _start_game(session: GameSession, command: StartGame) -> GameSession:
    _require_phase(session, GameStatus.SETUP, command)
    if len(session.players) < session.rules.min_players:
        raise InvalidMove(
            MoveError.ROSTER_TOO_SMALL,
            f"At least {session.rules.min_players} players are needed to start, "
            f"got {len(session.players)}.",
        )
    count = len(session.players)
    return replace(
        session,
        status=GameStatus.PLAYING,
        scorecards=(ScoreCard.empty(),) * count,
        last_moves=(None,) * count,
        current_player_index=0,
        round=1,
        dice=DiceHand.empty(),
        final_scores=(),
        winners=(),
    )


def _set_die(session: GameSession, command: SetDie) -> GameSession:
    _require_phase(session, GameStatus.PLAYING, command)
    die_index = validate_die_index(command.die_index)
    value = validate_die_value(command.value)
    return replace(session, dice=session.dice.with_die(die_index, value))


def _cycle_die(session: GameSession, command: CycleDie) -> GameSession:
    _require_phase(session, GameStatus.PLAYING, command)
    die_index = validate_die_index(command.die_index)
    return replace(session, dice=session.dice.cycled(die_index))


def _clear_dice(session: GameSession, command: ClearDice) -> GameSession:
    _require_phase(session, GameStatus.PLAYING, command)
    return replace(session, dice=DiceHand.empty())


def _select_category(session: GameSession, command: SelectCategory) -> GameSession:
    _require_phase(session, GameStatus.PLAYING, command)
    if not isinstance(command.category, Category):
        raise ValueError(f"Unknown category {command.category!r}")

    player_index = session.current_player_index
    scorecard = session.scorecards[player_index]
    if scorecard.is_assigned(command.category):
        raise InvalidMove(
            MoveError.CATEGORY_TAKEN,
            f"{session.players[player_index].display_name} has already scored "
            f"{command.category.value}.",
        )

    score = ScoreEngine.score_for(session.dice, command.category, session.rules)

    # Extra Yahtzee: the hand is five of a kind and the Yahtzee box already holds 50
    if (
        session.rules.yahtzee_bonus_enabled
        and scorecard.get(Category.YAHTZEE) == YAHTZEE_SCORE
        and ScoreEngine.is_yahtzee(session.dice)
    ):
        scorecard = scorecard.with_yahtzee_bonus()

    scorecards = list(session.scorecards)
    scorecards[player_index] = scorecard.with_score(command.category, score)
    last_moves = list(session.last_moves)
    last_moves[player_index] = LastMove(category=command.category, score=score)

    updated = replace(
        session,
        scorecards=tuple(scorecards),
        last_moves=tuple(last_moves),
        dice=DiceHand.empty(),
    )
    if updated.all_scorecards_complete:
        return _finish(updated)

    next_player = (player_index + 1) % len(session.players)
    next_round = session.round + 1 if next_player == 0 else session.round
    return replace(
        updated,
        current_player_index=next_player,
        round=next_round,
    )


def _end_game(session: GameSession, command: EndGame) -> GameSession:
    _require_phase(session, GameStatus.PLAYING, command)
    return _finish(session)


def _reset_game(session: GameSession, command: ResetGame) -> GameSession:
    _require_phase(session, GameStatus.FINISHED, command)
    retain = command.retain_roster
    if retain is None:
        retain = session.rules.retain_roster_on_reset
    fresh = GameSession.new(session.rules)
    if not retain:
        return fresh
    count = len(session.players)
    return replace(
        fresh,
        players=session.players,
        scorecards=(ScoreCard.empty(),) * count,
        last_moves=(None,) * count,
    )


def _new_game(session: GameSession, command: NewGame) -> GameSession:
    return GameSession.new(session.rules)


_HANDLERS: dict[type, Callable[[GameSession, Command], GameSession]] = {
    AddPlayer: _add_player,
    RemovePlayer: _remove_player,
    StartGame: _start_game,
    SetDie: _set_die,
    CycleDie: _cycle_die,
    ClearDice: _clear_dice,
    SelectCategory: _select_category,
    EndGame: _end_game,
    ResetGame: _reset_game,
    NewGame: _new_game,
}


def reduce(session: GameSession, command: Command) -> GameSession:
    """
    Apply one command to a session.

    Args:
        session: Current session (never modified)
        command: Command issued by the UI

    Returns:
        The next session

    Raises:
        InvalidMove: If the command is illegal for the current phase or guard
        TypeError: If the command type is not recognised
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unsupported command {type(command).__name__}")
    return handler(session, command)
