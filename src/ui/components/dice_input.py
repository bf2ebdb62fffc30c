"""Dice input — enter the faces of the five physical dice."""

from __future__ import annotations

import streamlit as st

_PIPS = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}


def render_dice_input(dice: list[int | None], turn_key: str) -> tuple[str, int] | None:
    """Render one tap-to-cycle button per die plus a clear button.

    Each tap advances the die: empty -> 1 -> ... -> 6 -> 1.

    Args:
        dice: Current hand, None for unset dice.
        turn_key: Unique per turn so button state never leaks between turns.

    Returns:
        ``("cycle", die_index)``, ``("clear", -1)``, or ``None`` if no action taken.
    """
    cols = st.columns(len(dice) + 1)
    for idx, value in enumerate(dice):
        with cols[idx]:
            label = _PIPS[value] if value is not None else "?"
            if st.button(label, key=f"die_{turn_key}_{idx}", use_container_width=True):
                return ("cycle", idx)
            st.caption(str(value) if value is not None else "unset")

    with cols[-1]:
        if st.button(
            "Clear",
            key=f"clear_{turn_key}",
            use_container_width=True,
            disabled=all(value is None for value in dice),
        ):
            return ("clear", -1)

    if any(value is None for value in dice):
        st.caption("Tap each die until it matches what you rolled.")
    return None
