"""
Yahtzee Scorekeeper - Session Snapshot Models

Pydantic models that mirror a GameSession in plain, render-ready form.
The UI reads these instead of poking at engine internals, and they
serialize straight to JSON.
"""

from pydantic import BaseModel, Field

from src.engine.base import ALL_CATEGORIES
from src.engine.game import GameSession, GameStatus


class ScoreLine(BaseModel):
    """One category row on a player's scorecard."""

    category: str
    score: int | None = None
    preview: int | None = None


class PlayerView(BaseModel):
    """A player with their scorecard and derived totals."""

    player_index: int
    display_name: str = Field(min_length=1)
    is_current: bool = False
    scores: list[ScoreLine] = Field(default_factory=list)
    upper_total: int = 0
    upper_bonus: int = 0
    lower_total: int = 0
    yahtzee_bonus: int = 0
    grand_total: int = 0
    last_category: str | None = None
    last_score: int | None = None

    model_config = {"frozen": True}


class StandingView(BaseModel):
    """A row of the final standings."""

    rank: int
    player_index: int
    display_name: str
    grand_total: int
    is_winner: bool = False

    model_config = {"frozen": True}


class SessionSnapshot(BaseModel):
    """Mirrors a GameSession after a command has been applied."""

    status: str = GameStatus.SETUP.value
    round: int = 1
    current_player_index: int | None = None
    dice: list[int | None] = Field(default_factory=lambda: [None] * 5)
    hand_complete: bool = False
    players: list[PlayerView] = Field(default_factory=list)
    standings: list[StandingView] = Field(default_factory=list)
    winner: int | None = None
    winners: list[int] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_session(cls, session: GameSession) -> "SessionSnapshot":
        """Build a snapshot from an engine session."""
        playing = session.status is GameStatus.PLAYING
        previews = session.available_scores

        players = []
        for player, scorecard, last_move in zip(
            session.players, session.scorecards, session.last_moves
        ):
            is_current = playing and player.player_index == session.current_player_index
            totals = session.totals_for(player.player_index)
            players.append(
                PlayerView(
                    player_index=player.player_index,
                    display_name=player.display_name,
                    is_current=is_current,
                    scores=[
                        ScoreLine(
                            category=category.value,
                            score=scorecard.get(category),
                            preview=previews.get(category) if is_current else None,
                        )
                        for category in ALL_CATEGORIES
                    ],
                    upper_total=totals.upper_total,
                    upper_bonus=totals.upper_bonus,
                    lower_total=totals.lower_total,
                    yahtzee_bonus=totals.yahtzee_bonus,
                    grand_total=totals.grand_total,
                    last_category=last_move.category.value if last_move else None,
                    last_score=last_move.score if last_move else None,
                )
            )

        standings = [
            StandingView(
                rank=rank,
                player_index=score.player_index,
                display_name=session.players[score.player_index].display_name,
                grand_total=score.grand_total,
                is_winner=score.player_index in session.winners,
            )
            for rank, score in enumerate(session.standings, 1)
        ]

        return cls(
            status=session.status.value,
            round=session.round,
            current_player_index=session.current_player_index if playing else None,
            dice=list(session.dice.values),
            hand_complete=session.dice.is_complete,
            players=players,
            standings=standings,
            winner=session.winner,
            winners=list(session.winners),
        )
