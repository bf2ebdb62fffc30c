"""
Yahtzee Scorekeeper Session Layer.

Command dispatch, transition events and render-ready snapshots.
"""

from src.session.controller import DispatchResult, GameController
from src.session.events import EventPayload, GameEvent, classify_transition
from src.session.models import PlayerView, SessionSnapshot, StandingView

__all__ = [
    "DispatchResult",
    "EventPayload",
    "GameController",
    "GameEvent",
    "PlayerView",
    "SessionSnapshot",
    "StandingView",
    "classify_transition",
]
