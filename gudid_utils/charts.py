# charts.py
"""
Plotly figures for the Analytics tab: units over time and the top-device ranking.
"""

from typing import Dict

import plotly.graph_objects as go

from .aggregation import AggregateResult


def _empty_figure(title: str, colors: Dict[str, str]) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text="No data", x=0.5, y=0.5, xref="paper", yref="paper",
        showarrow=False, font=dict(color=colors["text"], size=14),
    )
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        height=300,
        paper_bgcolor=colors["card"],
        plot_bgcolor=colors["card"],
    )
    return fig


def time_series_figure(result: AggregateResult, colors: Dict[str, str],
                       title: str = "Units delivered over time") -> go.Figure:
    """Line chart of summed quantity per delivery date."""
    if not result.time_series:
        return _empty_figure(title, colors)

    dates = [p.date for p in result.time_series]
    values = [p.value for p in result.time_series]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=dates, y=values, mode="lines+markers",
        line=dict(color=colors["primary"], width=3, shape="spline"),
        marker=dict(color=colors["accent"], size=8),
        hovertemplate="<b>%{x|%Y-%m-%d}</b><br>%{y} units<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Delivery date",
        yaxis_title="Units",
        height=350,
        margin=dict(l=20, r=20, t=40, b=20),
        paper_bgcolor=colors["card"],
        plot_bgcolor=colors["card"],
        font=dict(color=colors["text"]),
        showlegend=False,
    )
    return fig


def top_devices_figure(result: AggregateResult, colors: Dict[str, str],
                       title: str = "Top devices by units") -> go.Figure:
    """Horizontal bar chart, largest device on top."""
    if not result.top_devices:
        return _empty_figure(title, colors)

    labels = [d.name for d in result.top_devices]
    values = [d.value for d in result.top_devices]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=values, y=labels, orientation="h",
        marker_color=colors["accent"],
        text=values, textposition="auto",
        hovertemplate="<b>%{y}</b><br>%{x} units<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Units",
        height=max(250, len(labels) * 30),
        margin=dict(l=20, r=20, t=40, b=20),
        yaxis=dict(autorange="reversed"),
        paper_bgcolor=colors["card"],
        plot_bgcolor=colors["card"],
        font=dict(color=colors["text"]),
        showlegend=False,
    )
    return fig
