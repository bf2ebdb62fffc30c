"""Setup page — build the roster and start the game."""

from __future__ import annotations

import streamlit as st

from src.ui.state import get_controller, render_last_error, report


def render_setup_page() -> None:
    """Render the player roster editor."""
    controller = get_controller()
    session = controller.session
    rules = session.rules

    st.title("Yahtzee Scorekeeper")
    st.caption("Pass-and-play scoring for real dice")
    render_last_error()

    st.subheader(f"Players ({len(session.players)}/{rules.max_players})")
    for player in session.players:
        cols = st.columns([4, 1])
        cols[0].markdown(f"{player.player_index + 1}. **{player.display_name}**")
        if cols[1].button("Remove", key=f"remove_{player.player_index}", use_container_width=True):
            report(controller.remove_player(player.player_index))

    with st.form("add_player", clear_on_submit=True):
        name = st.text_input("Player name", max_chars=30)
        submitted = st.form_submit_button(
            "Add Player",
            disabled=len(session.players) >= rules.max_players,
        )
    if submitted:
        report(controller.add_player(name))

    if st.button(
        "Start Game",
        type="primary",
        use_container_width=True,
        disabled=len(session.players) < rules.min_players,
    ):
        report(controller.start_game())

    if len(session.players) < rules.min_players:
        st.caption(f"Add at least {rules.min_players} players to start.")
