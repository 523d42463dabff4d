"""Percentage Table Page.

Every preset percentage of a 1RM with its plates and real weight.
"""

import pandas as pd
import streamlit as st

from plate_calculator.config import DEFAULT_BAR_TYPE, UNITS
from plate_calculator.errors import PlateCalculatorError
from plate_calculator.inventory import get_plate_config
from plate_calculator.plate_distributor import format_plates, percentage_table
from pages.components.charts import create_percentage_chart

st.set_page_config(page_title="Percentage Table | Plate Calculator", page_icon="📋", layout="wide")
st.title("📋 Percentage Table")

config = get_plate_config()

col1, col2, col3 = st.columns([2, 1, 1])
with col1:
    rm = st.text_input("Your 1RM (one-rep max)", placeholder="e.g. 100")
with col2:
    unit = st.selectbox("Unit", UNITS)
with col3:
    bar_types = config.bar_types
    bar_type = st.selectbox(
        "Bar type",
        bar_types,
        index=bar_types.index(DEFAULT_BAR_TYPE) if DEFAULT_BAR_TYPE in bar_types else 0,
    )

if rm:
    try:
        results = percentage_table(rm, unit, bar_type, config=config)
    except PlateCalculatorError as e:
        st.error(str(e))
        st.stop()

    df = pd.DataFrame({
        '%': [f"{r.percentage:g}%" for r in results],
        'Target (kg)': [round(r.target_kg, 1) for r in results],
        'Target (lb)': [round(r.target_lb, 1) for r in results],
        'Real (kg)': [round(r.achieved_kg, 1) for r in results],
        'Delta (kg)': [round(r.delta_kg, 1) for r in results],
        'Plates per side': [format_plates(r.distribution) for r in results],
    })
    st.dataframe(df, hide_index=True, use_container_width=True)

    fig = create_percentage_chart(results)
    st.plotly_chart(fig, use_container_width=True)
else:
    st.info("Enter your 1RM to build the table.")
