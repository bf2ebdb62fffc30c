"""Results page — final standings and rematch controls."""

from __future__ import annotations

import streamlit as st

from src.ui.state import get_controller, report


def render_results_page() -> None:
    """Render the final standings."""
    controller = get_controller()
    snapshot = controller.snapshot()

    winners = [s for s in snapshot.standings if s.is_winner]
    if len(winners) == 1:
        st.title(f"{winners[0].display_name} Wins!")
    elif winners:
        names = " & ".join(w.display_name for w in winners)
        st.title(f"Tie: {names}")
    else:
        st.title("Game Over")

    st.subheader("Final Standings")
    for standing in snapshot.standings:
        style = "font-weight:700;" if standing.is_winner else ""
        st.markdown(
            f'<div style="{style}">{standing.rank}. {standing.display_name}'
            f" — {standing.grand_total}</div>",
            unsafe_allow_html=True,
        )

    st.divider()
    cols = st.columns(2)
    with cols[0]:
        if st.button("Play Again", type="primary", use_container_width=True):
            report(controller.reset_game(retain_roster=True))
    with cols[1]:
        if st.button("New Players", use_container_width=True):
            report(controller.new_game())
