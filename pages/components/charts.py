"""Chart components using Plotly for data visualization."""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from plate_calculator.models import PlateDistribution
from plate_calculator.units import lbs_to_kg

LB_PLATE_COLORS = {
    45: '#1f4e9c',
    35: '#e3b505',
    25: '#2a9d4b',
    15: '#c0392b',
    10: '#444444',
}
KG_PLATE_COLOR = '#9aa5b1'


def create_bar_loading_chart(distribution: PlateDistribution, bar_label: str):
    """Draw one sleeve of the bar with its plates, inside to outside.

    Args:
        distribution: PlateDistribution for one side
        bar_label: Caption for the bar itself (e.g. "45 lb")

    Returns:
        Plotly figure
    """
    fig = go.Figure()

    if distribution.is_empty:
        fig.add_annotation(
            text=f"Bar only ({bar_label})",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        fig.update_layout(xaxis_visible=False, yaxis_visible=False, height=250)
        return fig

    plates = [(p, 'lb', lbs_to_kg(p)) for p in distribution.lb]
    plates += [(p, 'kg', p) for p in distribution.kg]

    labels = [f"{p:g} {unit}" for p, unit, _ in plates]
    # Plate height grows with weight, with a floor so small plates stay visible
    heights = [max(kg, 3) for _, _, kg in plates]
    colors = [
        LB_PLATE_COLORS.get(p, '#1f4e9c') if unit == 'lb' else KG_PLATE_COLOR
        for p, unit, _ in plates
    ]

    fig.add_trace(go.Bar(
        x=list(range(1, len(plates) + 1)),
        y=heights,
        base=[-h / 2 for h in heights],
        marker_color=colors,
        text=labels,
        textposition='inside',
        hovertext=[f"{label} ({kg:.2f} kg)" for label, (_, _, kg) in zip(labels, plates)],
        hoverinfo='text',
        width=0.8,
    ))

    fig.add_shape(
        type="line", x0=0, x1=len(plates) + 1, y0=0, y1=0,
        line={'color': '#888888', 'width': 6}, layer='below'
    )

    fig.update_layout(
        title=f"Per side (bar: {bar_label})",
        xaxis={'visible': False, 'range': [0, len(plates) + 1]},
        yaxis={'visible': False},
        showlegend=False,
        height=300,
    )

    return fig


def create_percentage_chart(results: list):
    """Create line chart of target vs real weight across percentages.

    Args:
        results: List of LoadResult objects, one per percentage

    Returns:
        Plotly figure
    """
    if not results:
        fig = go.Figure()
        fig.add_annotation(
            text="Enter your 1RM to see the table",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        return fig

    df = pd.DataFrame({
        'Percentage': [r.percentage for r in results],
        'Target': [r.target_kg for r in results],
        'Real': [r.achieved_kg for r in results],
    })

    fig = px.line(
        df,
        x='Percentage',
        y=['Target', 'Real'],
        title='Target vs Real Weight',
        markers=True,
        color_discrete_sequence=['#FF6B6B', '#4ECDC4']
    )

    fig.update_layout(
        xaxis_title="% of 1RM",
        yaxis_title="Weight (kg)",
        hovermode='x unified',
        legend_title="Weight"
    )

    return fig
