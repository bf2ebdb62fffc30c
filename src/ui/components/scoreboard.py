"""Scoreboard component — running totals and turn indicator."""

from __future__ import annotations

import streamlit as st

from src.session.models import PlayerView
from src.ui.state import CATEGORY_LABELS


def render_scoreboard(players: list[PlayerView], round_number: int) -> None:
    """Render every player's grand total, highlighting whose turn it is.

    Args:
        players: All players in turn order.
        round_number: Current 1-based round.
    """
    st.markdown(f"#### Round {round_number} of 13")
    for player in players:
        indicator = "▶ " if player.is_current else ""
        last = ""
        if player.last_category is not None:
            last = f" — last: {CATEGORY_LABELS[player.last_category]} ({player.last_score})"
        st.markdown(f"{indicator}**{player.display_name}**: {player.grand_total}{last}")
