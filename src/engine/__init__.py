"""
Yahtzee Scorekeeper Game Engine.

Pure Python game logic with zero UI/config dependencies.
Handles category scoring, bonuses, turn rotation and the game state machine.
"""

from src.engine.base import (
    ALL_CATEGORIES,
    Category,
    DiceHand,
    FinalScore,
    GameRules,
    InvalidMove,
    MoveError,
    Player,
    ScoreCard,
    ScorecardTotals,
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
from src.engine.game import GameSession, GameStatus, reduce
from src.engine.scoring import ScoreEngine

__all__ = [
    # Data Classes
    "DiceHand",
    "FinalScore",
    "GameRules",
    "GameSession",
    "Player",
    "ScoreCard",
    "ScorecardTotals",
    # Enums
    "ALL_CATEGORIES",
    "Category",
    "GameStatus",
    "MoveError",
    # Errors
    "InvalidMove",
    # Commands
    "Command",
    "AddPlayer",
    "RemovePlayer",
    "StartGame",
    "SetDie",
    "CycleDie",
    "ClearDice",
    "SelectCategory",
    "EndGame",
    "ResetGame",
    "NewGame",
    # Engines
    "ScoreEngine",
    "reduce",
]
