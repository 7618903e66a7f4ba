"""Matplotlib static PNG renderer."""

import io

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from happinessstory.models import ChartKind, InteractiveSceneContext, SceneView  # noqa: E402

_BG = "#0d1b35"
_FG = "#e8d5a3"
_CMAPS: dict[ChartKind, str] = {
    ChartKind.TOP_COUNTRIES: "Blues",
    ChartKind.GDP_SCATTER: "Blues",
    ChartKind.SOCIAL_SUPPORT: "Greens",
    ChartKind.INTERACTIVE: "Reds",
}
_SCATTER_METRICS: dict[ChartKind, tuple[str, str]] = {
    ChartKind.GDP_SCATTER: ("gdp_per_capita", "GDP per capita"),
    ChartKind.SOCIAL_SUPPORT: ("social_support", "Social Support Score"),
}


def _style(ax) -> None:
    ax.set_facecolor(_BG)
    ax.tick_params(colors=_FG)
    for spine in ax.spines.values():
        spine.set_color(_FG)
    ax.xaxis.label.set_color(_FG)
    ax.yaxis.label.set_color(_FG)
    ax.title.set_color(_FG)


def render_static_chart(
    view: SceneView,
    context: InteractiveSceneContext | None = None,
    size: tuple[float, float] = (12, 6),
) -> Figure:
    """Render a SceneView as a static matplotlib image.

    Args:
        view: Derived scene data.
        context: Search context for the interactive scene (filtered records).
        size: Figure size in inches.

    Returns:
        matplotlib Figure object.
    """
    kind = view.scene.chart_kind
    fig, ax = plt.subplots(figsize=size)
    fig.patch.set_facecolor(_BG)
    _style(ax)
    ax.set_title(view.scene.title)

    if kind in _SCATTER_METRICS:
        metric, label = _SCATTER_METRICS[kind]
        x = np.array([getattr(r, metric) for r in view.records])
        y = np.array([r.score for r in view.records])
        ax.scatter(x, y, c=y, cmap=_CMAPS[kind], vmin=0, vmax=view.score_ceiling, alpha=0.7)
        for r in view.records:
            if r.name == view.highlight:
                ax.scatter(
                    [getattr(r, metric)], [r.score], s=200, facecolors="none",
                    edgecolors="#ff6b6b", linewidths=2,
                )
        ax.set_xlabel(label)
        ax.set_ylabel("Happiness Score")
        ax.set_ylim(0, view.score_ceiling)
    elif kind is ChartKind.FREEDOM_COMPARISON:
        labels = [g.label for g in view.groups]
        means = [g.mean_score for g in view.groups]
        bars = ax.bar(labels, means, color=["#2E8B57", "#DC143C"][: len(means)], alpha=0.8)
        ax.bar_label(bars, labels=[f"{m:.3f}" for m in means], color=_FG)
        ax.set_ylabel("Average Happiness Score")
        ax.set_ylim(0, max(means, default=0.0) * 1.1)
    else:
        records = view.records
        ceiling = view.score_ceiling
        if kind is ChartKind.INTERACTIVE and context is not None:
            records = context.visible_records
            ceiling = context.score_ceiling
        if kind is ChartKind.TOP_COUNTRIES:
            ceiling = max((r.score for r in records), default=0.0)
        scores = np.array([r.score for r in records])
        cmap = matplotlib.colormaps[_CMAPS[kind]]
        colors = cmap(scores / ceiling) if ceiling else cmap(scores)
        ax.bar([r.name for r in records], scores, color=colors, alpha=0.8)
        ax.set_ylabel("Happiness Score")
        ax.set_ylim(0, ceiling or 1.0)
        if kind is ChartKind.INTERACTIVE:
            ax.set_xticks([])
        else:
            ax.tick_params(axis="x", labelrotation=45)
            for tick in ax.get_xticklabels():
                tick.set_horizontalalignment("right")

    fig.tight_layout()
    return fig


def static_chart_png(view: SceneView, context: InteractiveSceneContext | None = None) -> bytes:
    """Render a SceneView to PNG bytes for download."""
    fig = render_static_chart(view, context)
    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor=_BG)
    plt.close(fig)
    return buf.getvalue()
