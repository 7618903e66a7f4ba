"""Per-scene derived views of the record set.

Every function returns a new tuple. Inputs are never reordered or mutated;
`sorted()` is stable, so ties keep their input order.
"""

from collections.abc import Sequence

from happinessstory.errors import InsufficientDataError
from happinessstory.models import ExtremesGroups, GroupSummary, Record
from happinessstory.stats import field_values, group_mean

_GROUP_LABELS: dict[str, tuple[str, str]] = {
    "freedom": ("Highest Freedom Countries", "Lowest Freedom Countries"),
}


def sorted_by_score(records: Sequence[Record]) -> tuple[Record, ...]:
    """All records, descending by score."""
    return tuple(sorted(records, key=lambda r: r.score, reverse=True))


def top_n(records: Sequence[Record], n: int) -> tuple[Record, ...]:
    """The `n` highest-scoring records, descending by score.

    Sorts regardless of input order, so callers need not pre-sort.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return sorted_by_score(records)[:n]


def extremes_by_field(records: Sequence[Record], field: str, k: int) -> ExtremesGroups:
    """The `k` highest and `k` lowest records by `field`.

    Both groups are sorted descending by `field`. Overlapping groups are
    rejected rather than returned.

    Args:
        records: Full record set.
        field: Field selector (e.g. "freedom").
        k: Group size.

    Returns:
        ExtremesGroups with disjoint high and low groups.

    Raises:
        InsufficientDataError: If fewer than 2k records are given.
        ValueError: If `k` < 1 or `field` is unknown.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    field_values(records, field)  # validates the selector
    if len(records) < 2 * k:
        raise InsufficientDataError(
            f"Need at least {2 * k} records for top/bottom {k} by {field}, got {len(records)}"
        )
    ordered = sorted(records, key=lambda r: getattr(r, field), reverse=True)
    return ExtremesGroups(field=field, high=tuple(ordered[:k]), low=tuple(ordered[-k:]))


def filter_by_name(records: Sequence[Record], query: str) -> tuple[Record, ...]:
    """Records whose name contains `query`, case-insensitively, in input order."""
    needle = query.lower()
    if not needle:
        return tuple(records)
    return tuple(r for r in records if needle in r.name.lower())


def group_label(field: str, high: bool) -> str:
    """Display label for an extremes group."""
    labels = _GROUP_LABELS.get(field)
    if labels is not None:
        return labels[0] if high else labels[1]
    pretty = field.replace("_", " ").title()
    return f"Highest {pretty} Countries" if high else f"Lowest {pretty} Countries"


def _summarize(group: tuple[Record, ...], field: str, high: bool) -> GroupSummary:
    return GroupSummary(
        label=group_label(field, high),
        field=field,
        mean_score=group_mean(group, "score"),
        mean_field=group_mean(group, field),
        count=len(group),
        names=tuple(r.name for r in group),
    )


def group_comparison(groups: ExtremesGroups) -> tuple[GroupSummary, GroupSummary]:
    """Summaries of the high group then the low group."""
    return (
        _summarize(groups.high, groups.field, high=True),
        _summarize(groups.low, groups.field, high=False),
    )
