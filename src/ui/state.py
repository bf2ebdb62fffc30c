"""Session-state helpers shared by the Streamlit views."""

from __future__ import annotations

import streamlit as st

from src.config import get_settings
from src.engine.base import Category
from src.session.controller import DispatchResult, GameController

CATEGORY_LABELS: dict[str, str] = {
    Category.ONES.value: "Ones",
    Category.TWOS.value: "Twos",
    Category.THREES.value: "Threes",
    Category.FOURS.value: "Fours",
    Category.FIVES.value: "Fives",
    Category.SIXES.value: "Sixes",
    Category.THREE_OF_A_KIND.value: "Three of a Kind",
    Category.FOUR_OF_A_KIND.value: "Four of a Kind",
    Category.FULL_HOUSE.value: "Full House",
    Category.SMALL_STRAIGHT.value: "Small Straight",
    Category.LARGE_STRAIGHT.value: "Large Straight",
    Category.YAHTZEE.value: "Yahtzee",
    Category.CHANCE.value: "Chance",
}


def get_controller() -> GameController:
    """Return the controller for this browser session, creating it on first use."""
    if "controller" not in st.session_state:
        st.session_state["controller"] = GameController(rules=get_settings().game_rules())
    return st.session_state["controller"]


def report(result: DispatchResult) -> None:
    """Show a rejected command to the user, or rerun to render the new state."""
    if result.error is not None:
        st.session_state["_last_error"] = str(result.error)
    else:
        st.session_state.pop("_last_error", None)
    st.rerun()


def render_last_error() -> None:
    message = st.session_state.get("_last_error")
    if message:
        st.warning(message)
