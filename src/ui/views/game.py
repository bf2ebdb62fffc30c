"""Game page — dice entry, scorecard and scoreboard for the active player."""

from __future__ import annotations

import streamlit as st

from src.engine.base import Category
from src.engine.scoring import ScoreEngine
from src.ui.components import render_dice_input, render_scoreboard, render_scorecard
from src.ui.state import CATEGORY_LABELS, get_controller, render_last_error, report


def render_game_page() -> None:
    """Render the in-game view for whoever holds the device."""
    controller = get_controller()
    session = controller.session
    snapshot = controller.snapshot()

    current = next(p for p in snapshot.players if p.is_current)
    turn_key = f"{snapshot.round}_{current.player_index}"

    st.title(f"{current.display_name}'s turn")
    render_last_error()

    left, right = st.columns([3, 2])

    with left:
        action = render_dice_input(snapshot.dice, turn_key)
        if action is not None:
            kind, die_index = action
            if kind == "cycle":
                report(controller.cycle_die(die_index))
            else:
                report(controller.clear_dice())

        if snapshot.hand_complete:
            suggestion = ScoreEngine.suggest_category(
                session.dice, session.current_scorecard, session.rules
            )
            st.info(f"Suggestion: {CATEGORY_LABELS[suggestion.value]}")

        chosen = render_scorecard(current, snapshot.hand_complete, turn_key)
        if chosen is not None:
            report(controller.select_category(Category(chosen)))

    with right:
        render_scoreboard(snapshot.players, snapshot.round)
        st.divider()
        if st.button("End Game Now", key="btn_end_game", use_container_width=True):
            report(controller.end_game())
