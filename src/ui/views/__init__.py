"""Page renderers for Yahtzee Scorekeeper."""

from src.ui.views.setup import render_setup_page
from src.ui.views.game import render_game_page
from src.ui.views.results import render_results_page

__all__ = ["render_setup_page", "render_game_page", "render_results_page"]
