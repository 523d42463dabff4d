"""Streamlit frontend for the Plate Calculator.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from plate_calculator.config import (
    DEFAULT_BAR_TYPE,
    DEFAULT_PERCENTAGE,
    PERCENTAGE_PRESETS,
    PERCENTAGE_RANGE,
    UNITS,
)
from plate_calculator.errors import PlateCalculatorError
from plate_calculator.inventory import get_plate_config
from plate_calculator.plate_distributor import calculate_load
from pages.components.charts import create_bar_loading_chart
from pages.components.plate_display import render_plate_list, render_result_cards

st.set_page_config(
    page_title="Plate Calculator",
    page_icon="🏋️",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def load_config():
    return get_plate_config()


@st.cache_data
def calculate(rm: str, unit: str, percentage: int, bar_type: str):
    return calculate_load(rm, unit, percentage, bar_type, load_config())


def set_percentage(value: int):
    st.session_state.percentage = value


config = load_config()

# Initialize session state variables
if 'percentage' not in st.session_state:
    st.session_state.percentage = DEFAULT_PERCENTAGE
if 'bar_type' not in st.session_state:
    st.session_state.bar_type = DEFAULT_BAR_TYPE if DEFAULT_BAR_TYPE in config.bar_types else config.bar_types[0]

# Sidebar: inventory in use
with st.sidebar:
    st.markdown("## 🏋️ Plate Calculator")
    st.markdown("---")
    st.markdown("### Plates")
    st.caption("lb: " + ", ".join(f"{p:g}" for p in config.lb_plates))
    st.caption("kg: " + ", ".join(f"{p:g}" for p in config.kg_plates))
    st.markdown("### Bars")
    for bar in config.bars:
        st.caption(f"{bar.name}: {bar.weight_lb:g} lb ({bar.weight_kg:.1f} kg)")

st.title("🏋️ 1RM Plate Calculator")

col1, col2 = st.columns([3, 1])
with col1:
    rm = st.text_input("Your 1RM (one-rep max)", placeholder="e.g. 100")
with col2:
    unit = st.selectbox("Unit", UNITS)

if rm:
    low, high = PERCENTAGE_RANGE
    st.slider("Percentage", min_value=low, max_value=high, step=1, key="percentage")

    preset_cols = st.columns(len(PERCENTAGE_PRESETS))
    for col, pct in zip(preset_cols, PERCENTAGE_PRESETS):
        col.button(
            f"{pct}%",
            key=f"preset_{pct}",
            on_click=set_percentage,
            args=(pct,),
            type="primary" if st.session_state.percentage == pct else "secondary",
            use_container_width=True,
        )

    st.radio(
        "Bar type",
        config.bar_types,
        key="bar_type",
        format_func=lambda name: f"{name.capitalize()} ({config.bar_weight_lb(name):g} lb)",
        horizontal=True,
    )

    try:
        result = calculate(rm, unit, st.session_state.percentage, st.session_state.bar_type)
    except PlateCalculatorError as e:
        st.error(str(e))
        st.stop()

    st.divider()
    render_result_cards(result)

    st.markdown("### Bar setup")
    bar_label = f"{config.bar_weight_lb(result.bar_type):g} lb"
    fig = create_bar_loading_chart(result.distribution, bar_label)
    st.plotly_chart(fig, use_container_width=True)

    render_plate_list(result)
else:
    st.info("Enter your 1RM to see the plates to load.")
