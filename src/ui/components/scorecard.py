"""Scorecard component — category grid for the active player."""

from __future__ import annotations

import streamlit as st

from src.session.models import PlayerView
from src.ui.state import CATEGORY_LABELS


def render_scorecard(player: PlayerView, hand_complete: bool, turn_key: str) -> str | None:
    """Render the active player's scorecard with one score button per open category.

    Args:
        player: The player whose turn it is.
        hand_complete: Whether all five dice are entered.
        turn_key: Unique per turn so button keys never collide.

    Returns:
        The category value chosen, or ``None`` if no action taken.
    """
    chosen = None
    for line in player.scores:
        label = CATEGORY_LABELS[line.category]
        cols = st.columns([3, 1, 2])
        cols[0].markdown(label)
        if line.score is not None:
            cols[1].markdown(f"**{line.score}**")
            cols[2].caption("scored")
            continue

        preview = line.preview if line.preview is not None else "-"
        cols[1].markdown(f"{preview}")
        with cols[2]:
            if st.button(
                "Score",
                key=f"score_{turn_key}_{line.category}",
                use_container_width=True,
                disabled=not hand_complete,
            ):
                chosen = line.category

    st.divider()
    st.markdown(
        f"Upper: **{player.upper_total}** (bonus {player.upper_bonus}) &nbsp;|&nbsp; "
        f"Lower: **{player.lower_total}** &nbsp;|&nbsp; Total: **{player.grand_total}**"
    )
    return chosen
