"""UI components for Yahtzee Scorekeeper."""

from src.ui.components.dice_input import render_dice_input
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.scorecard import render_scorecard

__all__ = [
    "render_dice_input",
    "render_scoreboard",
    "render_scorecard",
]
