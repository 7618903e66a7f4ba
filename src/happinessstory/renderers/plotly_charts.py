"""Plotly interactive chart renderer, one figure per chart kind.

Hover tooltips are carried as per-point hover text, so Plotly owns their
show/hide lifecycle.
"""

from collections.abc import Callable

import numpy as np
import plotly.graph_objects as go

from happinessstory.models import (
    ChartKind,
    GroupSummary,
    InteractiveSceneContext,
    Record,
    SceneView,
)

_BG = "#0d1b35"
_FONT_COLOR = "#e8d5a3"
_GRID_COLOR = "rgba(255,255,255,0.08)"
_HIGHLIGHT_COLOR = "#ff6b6b"
_GROUP_COLORS = ("#2E8B57", "#DC143C")  # high, low

# Tooltip rows per chart kind: (label, attribute)
_TOOLTIP_FIELDS: dict[ChartKind, tuple[tuple[str, str], ...]] = {
    ChartKind.TOP_COUNTRIES: (("Score", "score"),),
    ChartKind.GDP_SCATTER: (
        ("GDP per capita", "gdp_per_capita"),
        ("Happiness Score", "score"),
    ),
    ChartKind.SOCIAL_SUPPORT: (
        ("Social Support", "social_support"),
        ("Happiness Score", "score"),
    ),
    ChartKind.FREEDOM_COMPARISON: (("Freedom", "freedom"),),
    ChartKind.INTERACTIVE: (
        ("Score", "score"),
        ("GDP", "gdp_per_capita"),
        ("Social Support", "social_support"),
        ("Life Expectancy", "life_expectancy"),
        ("Freedom", "freedom"),
        ("Generosity", "generosity"),
        ("Corruption", "corruption"),
    ),
}


def tooltip_html(record: Record, chart_kind: ChartKind) -> str:
    """Hover text for a single country, numbers to 3 decimals."""
    lines = [f"<b>{record.name}</b>", f"Rank: {record.rank}"]
    for label, attr in _TOOLTIP_FIELDS[chart_kind]:
        lines.append(f"{label}: {getattr(record, attr):.3f}")
    return "<br>".join(lines)


def group_tooltip_html(summary: GroupSummary) -> str:
    """Hover text for one bar of the comparison chart."""
    pretty = summary.field.replace("_", " ").title()
    return "<br>".join(
        [
            f"<b>{summary.label}</b>",
            f"Average Happiness Score: {summary.mean_score:.3f}",
            f"Average {pretty} Score: {summary.mean_field:.3f}",
            f"Number of Countries: {summary.count}",
        ]
    )


def _base_layout(fig: go.Figure, title: str) -> None:
    fig.update_layout(
        title=dict(text=title, x=0.5),
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        font=dict(color=_FONT_COLOR),
        showlegend=False,
        margin=dict(l=70, r=30, t=60, b=100),
        height=520,
    )
    fig.update_xaxes(gridcolor=_GRID_COLOR, zeroline=False)
    fig.update_yaxes(gridcolor=_GRID_COLOR, zeroline=False)


def _score_bars(
    records: tuple[Record, ...],
    chart_kind: ChartKind,
    colorscale: str,
    color_max: float,
) -> go.Bar:
    scores = [r.score for r in records]
    return go.Bar(
        x=[r.name for r in records],
        y=scores,
        marker=dict(color=scores, colorscale=colorscale, cmin=0, cmax=color_max),
        opacity=0.8,
        hovertext=[tooltip_html(r, chart_kind) for r in records],
        hovertemplate="%{hovertext}<extra></extra>",
    )


def _top_countries(view: SceneView) -> go.Figure:
    records = view.records
    top = max((r.score for r in records), default=0.0)
    fig = go.Figure(data=[_score_bars(records, ChartKind.TOP_COUNTRIES, "Blues", top)])
    _base_layout(fig, "Happiness Score")
    fig.update_xaxes(tickangle=-45)
    fig.update_yaxes(range=[0, top])
    return fig


def _scatter(view: SceneView, metric: str, axis_label: str, colorscale: str) -> go.Figure:
    records = view.records
    kind = view.scene.chart_kind
    x_vals = np.array([getattr(r, metric) for r in records])
    scores = [r.score for r in records]

    points = go.Scatter(
        x=x_vals,
        y=scores,
        mode="markers",
        marker=dict(
            size=10,
            color=scores,
            colorscale=colorscale,
            cmin=0,
            cmax=view.score_ceiling,
            opacity=0.7,
            showscale=True,
            colorbar=dict(title="Happiness Score"),
        ),
        hovertext=[tooltip_html(r, kind) for r in records],
        hovertemplate="%{hovertext}<extra></extra>",
    )
    traces = [points]

    highlighted = [r for r in records if r.name == view.highlight]
    if highlighted:
        h = highlighted[0]
        traces.append(
            go.Scatter(
                x=[getattr(h, metric)],
                y=[h.score],
                mode="markers",
                marker=dict(
                    symbol="circle-open",
                    size=18,
                    color=_HIGHLIGHT_COLOR,
                    line=dict(width=3, color=_HIGHLIGHT_COLOR),
                ),
                hovertext=[tooltip_html(h, kind)],
                hovertemplate="%{hovertext}<extra></extra>",
            )
        )

    fig = go.Figure(data=traces)
    _base_layout(fig, f"{axis_label} vs Happiness")
    x_max = float(x_vals.max()) if len(x_vals) else 1.0
    fig.update_xaxes(title=axis_label, range=[0, x_max * 1.02])
    fig.update_yaxes(title="Happiness Score", range=[0, view.score_ceiling])
    return fig


def _comparison(view: SceneView) -> go.Figure:
    groups = view.groups
    means = [g.mean_score for g in groups]
    bars = go.Bar(
        x=[g.label for g in groups],
        y=means,
        marker=dict(color=list(_GROUP_COLORS[: len(groups)])),
        opacity=0.8,
        text=[f"{m:.3f}" for m in means],
        textposition="outside",
        hovertext=[group_tooltip_html(g) for g in groups],
        hovertemplate="%{hovertext}<extra></extra>",
    )
    fig = go.Figure(data=[bars])
    _base_layout(fig, "Average Happiness Score by Freedom Level")
    fig.update_yaxes(title="Average Happiness Score", range=[0, max(means, default=0.0) * 1.1])
    return fig


def _interactive(view: SceneView, context: InteractiveSceneContext | None) -> go.Figure:
    records = context.visible_records if context is not None else view.records
    # Fixed to the full dataset so bar heights stay comparable across filters.
    ceiling = context.score_ceiling if context is not None else view.score_ceiling
    fig = go.Figure(data=[_score_bars(records, ChartKind.INTERACTIVE, "Reds", ceiling)])
    _base_layout(fig, "Happiness Score by Country")
    fig.update_xaxes(showticklabels=False)
    fig.update_yaxes(title="Happiness Score", range=[0, ceiling], autorange=False)
    return fig


_RENDERERS: dict[ChartKind, Callable[[SceneView], go.Figure]] = {
    ChartKind.TOP_COUNTRIES: _top_countries,
    ChartKind.GDP_SCATTER: lambda v: _scatter(v, "gdp_per_capita", "GDP per capita", "Blues"),
    ChartKind.SOCIAL_SUPPORT: lambda v: _scatter(
        v, "social_support", "Social Support Score", "Greens"
    ),
    ChartKind.FREEDOM_COMPARISON: _comparison,
}


def render_scene_figure(
    view: SceneView, context: InteractiveSceneContext | None = None
) -> go.Figure:
    """Render a SceneView as a Plotly figure.

    Args:
        view: Derived scene data.
        context: Search context; only read for the interactive scene, where
            it supplies the filtered records.

    Returns:
        Plotly Figure object.
    """
    kind = view.scene.chart_kind
    if kind is ChartKind.INTERACTIVE:
        return _interactive(view, context)
    return _RENDERERS[kind](view)
