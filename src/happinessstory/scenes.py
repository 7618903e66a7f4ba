"""The scene sequence and the per-scene derivation mapping."""

from collections.abc import Sequence

from happinessstory import narrative
from happinessstory.derive import extremes_by_field, group_comparison, sorted_by_score, top_n
from happinessstory.models import ChartKind, Record, Scene, SceneView
from happinessstory.stats import pearson_correlation

TOP_N = 20
EXTREMES_K = 10

SCENES: tuple[Scene, ...] = (
    Scene(
        id=0,
        title="The Happiest Nations in 2019",
        description_template=narrative.TOP_COUNTRIES_TEXT,
        chart_kind=ChartKind.TOP_COUNTRIES,
    ),
    Scene(
        id=1,
        title="Does Money Buy Happiness?",
        description_template=narrative.GDP_TEXT,
        chart_kind=ChartKind.GDP_SCATTER,
    ),
    Scene(
        id=2,
        title="The Power of Social Support",
        description_template=narrative.SOCIAL_SUPPORT_TEXT,
        chart_kind=ChartKind.SOCIAL_SUPPORT,
    ),
    Scene(
        id=3,
        title="Freedom and Happiness",
        description_template=narrative.FREEDOM_TEXT,
        chart_kind=ChartKind.FREEDOM_COMPARISON,
    ),
    Scene(
        id=4,
        title="Explore All Countries",
        description_template=narrative.INTERACTIVE_TEXT,
        chart_kind=ChartKind.INTERACTIVE,
    ),
)

# Country ringed on the scatter scenes
_HIGHLIGHTS: dict[ChartKind, str] = {
    ChartKind.GDP_SCATTER: "Costa Rica",
    ChartKind.SOCIAL_SUPPORT: "Iceland",
}


def score_ceiling(records: Sequence[Record]) -> float:
    """Maximum score over `records`, 0.0 when empty."""
    return max((r.score for r in records), default=0.0)


def build_scene_view(scene: Scene, records: Sequence[Record]) -> SceneView:
    """Derive the chart dataset and narrative for `scene` from the full record set.

    Args:
        scene: Scene descriptor.
        records: Full record set, in load order. Not modified.

    Returns:
        SceneView ready for a renderer.

    Raises:
        InsufficientDataError: The comparison scene has fewer than 2 * EXTREMES_K records.
    """
    kind = scene.chart_kind
    ceiling = score_ceiling(records)
    template = scene.description_template

    if kind is ChartKind.TOP_COUNTRIES:
        return SceneView(
            scene=scene,
            records=top_n(records, TOP_N),
            narrative=narrative.render_narrative(template),
            score_ceiling=ceiling,
        )

    if kind in (ChartKind.GDP_SCATTER, ChartKind.SOCIAL_SUPPORT):
        metric = "gdp_per_capita" if kind is ChartKind.GDP_SCATTER else "social_support"
        r = pearson_correlation(records, metric, "score")
        return SceneView(
            scene=scene,
            records=tuple(records),
            narrative=narrative.render_narrative(template, correlation=r),
            score_ceiling=ceiling,
            correlation=r,
            highlight=_HIGHLIGHTS[kind],
        )

    if kind is ChartKind.FREEDOM_COMPARISON:
        groups = extremes_by_field(records, "freedom", EXTREMES_K)
        high, low = group_comparison(groups)
        r = pearson_correlation(records, "freedom", "score")
        return SceneView(
            scene=scene,
            records=groups.high + groups.low,
            narrative=narrative.render_narrative(
                template, correlation=r, **narrative.comparison_values(high, low)
            ),
            score_ceiling=ceiling,
            correlation=r,
            groups=(high, low),
        )

    if kind is ChartKind.INTERACTIVE:
        ordered = sorted_by_score(records)
        return SceneView(
            scene=scene,
            records=ordered,
            narrative=narrative.render_narrative(template, count=len(ordered)),
            score_ceiling=ceiling,
        )

    raise ValueError(f"Unhandled chart kind: {kind}")
