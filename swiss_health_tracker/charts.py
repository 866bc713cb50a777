from __future__ import annotations

from datetime import date
from typing import Sequence

import plotly.graph_objects as go

from swiss_health_tracker.i18n import translate_text

GOALS_COLOR = "#D52B1E"
RESULTS_COLOR = "#1C9C82"
FONT_COLOR = "#2B2B2B"
GRID_COLOR = "#E3E3E3"


def _apply_light_theme(figure: go.Figure) -> go.Figure:
    figure.update_layout(
        template="plotly_white",
        font=dict(color=FONT_COLOR),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor=GRID_COLOR, zerolinecolor=GRID_COLOR),
        yaxis=dict(gridcolor=GRID_COLOR, zerolinecolor=GRID_COLOR),
    )
    return figure


def build_trend_figure(
    dates: Sequence[date],
    goals_points: Sequence[int],
    results_points: Sequence[int],
    *,
    language: str | None = None,
) -> go.Figure:
    """Plot the goals and results point trends on a shared 0-100 axis."""

    labels = [day.strftime("%d.%m") for day in dates]
    goals_label = translate_text(("Objectifs", "Goals"), language)
    results_label = translate_text(("Résultats", "Results"), language)

    figure = go.Figure(
        data=[
            go.Scatter(
                x=labels,
                y=list(goals_points),
                name=goals_label,
                mode="lines+markers",
                line=dict(color=GOALS_COLOR, width=3),
                hovertemplate=f"<b>%{{x}}</b><br>{goals_label}: %{{y}}<extra></extra>",
            ),
            go.Scatter(
                x=labels,
                y=list(results_points),
                name=results_label,
                mode="lines+markers",
                line=dict(color=RESULTS_COLOR, width=3),
                hovertemplate=f"<b>%{{x}}</b><br>{results_label}: %{{y}}<extra></extra>",
            ),
        ]
    )
    figure.update_layout(
        title_text=translate_text(
            (f"Points des {len(dates)} derniers jours", f"Points over the last {len(dates)} days"), language
        ),
        xaxis_title=translate_text(("Date", "Date"), language),
        yaxis_title=translate_text(("Points", "Points"), language),
        margin=dict(t=60, r=10, b=40, l=10),
        showlegend=True,
    )
    upper = max([100, *goals_points, *results_points])
    figure.update_yaxes(range=[0, upper])
    _apply_light_theme(figure)
    return figure


def build_progress_figure(earned: int, maximum: int, *, language: str | None = None) -> go.Figure:
    """Gauge showing today's earned points against the catalog maximum."""

    gauge = go.Indicator(
        mode="gauge+number",
        value=earned,
        title=dict(text=translate_text(("Points du jour", "Today's points"), language)),
        gauge=dict(
            axis=dict(range=[0, max(maximum, 1)]),
            bar=dict(color=GOALS_COLOR),
        ),
    )
    figure = go.Figure(data=[gauge])
    figure.update_layout(margin=dict(t=40, r=10, b=10, l=10))
    _apply_light_theme(figure)
    return figure


__all__ = ["GOALS_COLOR", "RESULTS_COLOR", "build_progress_figure", "build_trend_figure"]
