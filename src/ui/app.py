"""Yahtzee Scorekeeper — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config import configure_logging, get_settings


_RULES = """\
**Goal:** Highest grand total after 13 rounds wins!

**Each turn:** roll five physical dice (up to three rolls), enter the
faces you ended with, then pick one open category to score.

| Category | Points |
|---|---|
| Ones - Sixes | Sum of matching dice |
| Three / Four of a Kind | Sum of all dice |
| Full House | 25 |
| Small Straight (4 in a row) | 30 |
| Large Straight (5 in a row) | 40 |
| Yahtzee (5 of a kind) | 50 |
| Chance | Sum of all dice |

**Upper bonus:** +35 when Ones - Sixes total 63 or more.
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Yahtzee Scorekeeper",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    if "_logging_configured" not in st.session_state:
        configure_logging(get_settings())
        st.session_state["_logging_configured"] = True

    # Lazy imports to avoid circular deps
    from src.engine.game import GameStatus
    from src.ui.state import get_controller

    status = get_controller().session.status

    if status is GameStatus.SETUP:
        from src.ui.views.setup import render_setup_page
        render_setup_page()
    elif status is GameStatus.PLAYING:
        from src.ui.views.game import render_game_page
        render_game_page()
    else:
        from src.ui.views.results import render_results_page
        render_results_page()

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)


if __name__ == "__main__":
    main()
