"""Result display components for Streamlit pages."""

import streamlit as st

from plate_calculator.models import LoadResult
from plate_calculator.plate_distributor import format_plate


def render_result_cards(result: LoadResult):
    """Render the 1RM, target and real weight side by side.

    Args:
        result: LoadResult from calculate_load
    """
    if result.unit == "kg":
        rm_converted = f"{result.one_rep_max_lb:.1f} lb"
    else:
        rm_converted = f"{result.one_rep_max_kg:.1f} kg"

    cols = st.columns(3)
    cols[0].metric("1RM", f"{format_plate(result.one_rep_max)} {result.unit}")
    cols[0].caption(rm_converted)

    cols[1].metric(f"Target ({format_plate(result.percentage)}%)", f"{result.target_kg:.1f} kg")
    cols[1].caption(f"{result.target_lb:.1f} lb")

    cols[2].metric(
        "Real weight",
        f"{result.achieved_kg:.1f} kg",
        delta=f"{result.delta_kg:+.1f} kg",
        delta_color="off",
    )
    cols[2].caption(f"{result.achieved_lb:.1f} lb")


def render_plate_list(result: LoadResult):
    """Render the per-side plate list ("Bar only" when nothing fits)."""
    dist = result.distribution

    st.markdown("#### Per side")
    if dist.lb:
        st.markdown(f"- **lb plates:** {', '.join(format_plate(p) for p in dist.lb)}")
    if dist.kg:
        st.markdown(f"- **kg plates:** {', '.join(format_plate(p) for p in dist.kg)}")
    if dist.is_empty:
        st.markdown("- Bar only")

    st.caption(f"Exact per-side target: {dist.per_side:.2f} kg")
