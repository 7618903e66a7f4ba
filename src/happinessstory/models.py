"""Data model definitions — explicit boundaries between load, derive, and render layers."""

from dataclasses import dataclass
from enum import Enum

# Numeric record attributes usable as field selectors. Score first.
METRIC_FIELDS: tuple[str, ...] = (
    "score",
    "gdp_per_capita",
    "social_support",
    "life_expectancy",
    "freedom",
    "generosity",
    "corruption",
)


@dataclass(frozen=True)
class Record:
    """One country's row of the happiness report."""

    name: str  # Country or region, unique within a dataset
    rank: int  # Overall rank, 1-based
    score: float  # Happiness score
    gdp_per_capita: float
    social_support: float
    life_expectancy: float  # Healthy life expectancy
    freedom: float  # Freedom to make life choices
    generosity: float
    corruption: float  # Perceptions of corruption


class ChartKind(Enum):
    """Chart drawn for a scene."""

    TOP_COUNTRIES = "topCountries"
    GDP_SCATTER = "gdpScatter"
    SOCIAL_SUPPORT = "socialSupport"
    FREEDOM_COMPARISON = "freedomComparison"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class Scene:
    """Static scene descriptor. The scene sequence is fixed at import time."""

    id: int  # 0-based, dense
    title: str
    description_template: str  # str.format placeholders for computed values
    chart_kind: ChartKind


@dataclass(frozen=True)
class ExtremesGroups:
    """Top-k and bottom-k records by one field, each sorted descending by it."""

    field: str
    high: tuple[Record, ...]
    low: tuple[Record, ...]


@dataclass(frozen=True)
class GroupSummary:
    """Averages of one extremes group. Input to the comparison chart."""

    label: str
    field: str  # Compared metric ("freedom")
    mean_score: float
    mean_field: float
    count: int
    names: tuple[str, ...]  # Member countries, in group order


@dataclass(frozen=True)
class SceneView:
    """The sole input to renderers for a non-interactive draw. Fully derived state."""

    scene: Scene
    records: tuple[Record, ...]  # Derived dataset for the chart
    narrative: str
    score_ceiling: float  # Max score over the full dataset (fixed y-axis top)
    correlation: float | None = None
    highlight: str | None = None  # Country ringed on scatter charts
    groups: tuple[GroupSummary, ...] = ()


@dataclass(frozen=True)
class InteractiveSceneContext:
    """Search state of the interactive scene. Lives only while that scene is active."""

    sorted_records: tuple[Record, ...]  # Canonical descending-score order
    score_ceiling: float  # Max score over the full dataset, never the filtered subset
    status_text: str
    query: str = ""  # Case-folded
    visible_records: tuple[Record, ...] = ()
