"""Dataset loading — CSV parsing, numeric coercion, and validation into Records."""

import logging
from pathlib import Path

import pandas as pd

from happinessstory.errors import DataLoadError, InvalidFieldCoercionError
from happinessstory.models import Record

logger = logging.getLogger(__name__)

RANK_COLUMN = "Overall rank"
NAME_COLUMN = "Country or region"

# CSV header → Record attribute, for the numeric metric columns
METRIC_COLUMNS: dict[str, str] = {
    "Score": "score",
    "GDP per capita": "gdp_per_capita",
    "Social support": "social_support",
    "Healthy life expectancy": "life_expectancy",
    "Freedom to make life choices": "freedom",
    "Generosity": "generosity",
    "Perceptions of corruption": "corruption",
}

REQUIRED_COLUMNS: tuple[str, ...] = (RANK_COLUMN, NAME_COLUMN, *METRIC_COLUMNS)


def load_records(path: Path | str) -> tuple[Record, ...]:
    """Parse a happiness report CSV into Records, in file order.

    Args:
        path: Delimited text file with a header row.

    Returns:
        Tuple of validated Records.

    Raises:
        DataLoadError: File missing, unparseable, or failing validation.
        InvalidFieldCoercionError: A numeric cell is not a number.
    """
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"Data file not found: {path}")
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DataLoadError(f"Cannot parse {path}: {e}") from e

    records = records_from_frame(df)
    logger.info("Loaded %d records from %s", len(records), path)
    return records


def _coerce_column(df: pd.DataFrame, column: str) -> list[float]:
    """Convert a column to floats, failing on the first non-numeric cell."""
    raw = df[column]
    coerced = pd.to_numeric(raw, errors="coerce")
    bad = coerced.isna()
    if bad.any():
        pos = int(bad.to_numpy().argmax())
        raise InvalidFieldCoercionError(column, pos + 1, raw.iloc[pos])
    return [float(v) for v in coerced]


def records_from_frame(df: pd.DataFrame) -> tuple[Record, ...]:
    """Validate a DataFrame with report columns and convert it to Records.

    Raises:
        DataLoadError: Missing columns, empty frame, bad rank, negative metric,
            or duplicate name/rank.
        InvalidFieldCoercionError: A numeric cell is not a number.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DataLoadError(f"Missing required columns: {', '.join(missing)}")
    if df.empty:
        raise DataLoadError("Dataset has no rows")

    ranks = _coerce_column(df, RANK_COLUMN)
    metrics = {attr: _coerce_column(df, col) for col, attr in METRIC_COLUMNS.items()}
    names = [str(n).strip() for n in df[NAME_COLUMN]]

    records: list[Record] = []
    for i, name in enumerate(names):
        row = i + 1
        if not name:
            raise DataLoadError(f"Row {row}: empty {NAME_COLUMN!r}")
        rank = ranks[i]
        if rank < 1 or not rank.is_integer():
            raise DataLoadError(f"Row {row}: {RANK_COLUMN!r} must be a positive integer, got {rank}")
        for col, attr in METRIC_COLUMNS.items():
            if attr != "score" and metrics[attr][i] < 0:
                raise DataLoadError(f"Row {row}: {col!r} must be >= 0, got {metrics[attr][i]}")
        records.append(
            Record(
                name=name,
                rank=int(rank),
                **{attr: values[i] for attr, values in metrics.items()},
            )
        )

    _check_unique(records)
    _check_rank_order(records)
    return tuple(records)


def _check_unique(records: list[Record]) -> None:
    seen_names: set[str] = set()
    seen_ranks: set[int] = set()
    for r in records:
        if r.name in seen_names:
            raise DataLoadError(f"Duplicate country name: {r.name}")
        if r.rank in seen_ranks:
            raise DataLoadError(f"Duplicate rank: {r.rank}")
        seen_names.add(r.name)
        seen_ranks.add(r.rank)


def _check_rank_order(records: list[Record]) -> None:
    """Warn when ascending rank does not follow descending score. Data is kept."""
    by_rank = sorted(records, key=lambda r: r.rank)
    for prev, cur in zip(by_rank, by_rank[1:]):
        if cur.score > prev.score:
            logger.warning(
                "Rank order disagrees with score: %s (rank %d, %.3f) below %s (rank %d, %.3f)",
                cur.name,
                cur.rank,
                cur.score,
                prev.name,
                prev.rank,
                prev.score,
            )
            return
