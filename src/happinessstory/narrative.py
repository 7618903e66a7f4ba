"""Scene narrative text — templates and their interpolation with computed statistics."""

from happinessstory.models import GroupSummary

TOP_COUNTRIES_TEXT = (
    "Let's start by exploring the top 20 happiest countries according to the 2019 "
    "World Happiness Report. Nordic countries dominate the list with Finland, Denmark, "
    "Norway, Iceland, and Sweden in the top 20."
)

GDP_TEXT = (
    "GDP per capita shows a strong positive correlation (r={correlation:.3f}) with "
    "happiness. However, one country that sticks out is Costa Rica (rank 12), which has "
    "lower GDP but higher happiness than many wealthier nations."
)

SOCIAL_SUPPORT_TEXT = (
    "Social support also shows a strong positive correlation (r={correlation:.3f}) with "
    "happiness scores. Countries with stronger social networks tend to be happier. "
    "Iceland, for example, has the highest social support score in the world and one "
    "of the highest happiness scores."
)

FREEDOM_TEXT = (
    "Freedom to make life choices shows a positive correlation (r={correlation:.3f}) "
    "with happiness. The {high_count} countries with the most freedom average a "
    "happiness score of {high_mean:.3f}, against {low_mean:.3f} for the {low_count} "
    "with the least. Still, the correlation is weaker than for GDP or social support."
)

INTERACTIVE_TEXT = (
    "Now you can explore all {count} countries in an interactive bar chart. Countries "
    "are sorted by happiness score, with the happiest countries at the top. Use the "
    "search box to filter and find specific countries - when you search, only matching "
    "countries will be displayed."
)


def render_narrative(template: str, **values: object) -> str:
    """Fill a scene template. Unused values are ignored; missing ones raise KeyError."""
    return template.format(**values)


def comparison_values(high: GroupSummary, low: GroupSummary) -> dict[str, object]:
    """Template values for the comparison scene."""
    return {
        "high_count": high.count,
        "high_mean": high.mean_score,
        "low_count": low.count,
        "low_mean": low.mean_score,
    }


def group_caption(summary: GroupSummary) -> str:
    """One-line member list printed under the comparison chart."""
    return f"{summary.label}: {', '.join(summary.names)}"
