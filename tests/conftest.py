"""Shared test fixtures for happiness story tests."""

import pytest

from happinessstory.models import Record


def make_record(name: str, score: float, rank: int = 1, **metrics: float) -> Record:
    """Build a Record with zeroed metrics unless given."""
    fields = {
        "gdp_per_capita": 0.0,
        "social_support": 0.0,
        "life_expectancy": 0.0,
        "freedom": 0.0,
        "generosity": 0.0,
        "corruption": 0.0,
    }
    fields.update(metrics)
    return Record(name=name, rank=rank, score=score, **fields)


@pytest.fixture()
def records():
    """25 countries in rank order; gdp and social support rise with score, freedom is shuffled."""
    rows = []
    for i in range(25):
        score = round(7.8 - i * 0.2, 3)
        rows.append(
            make_record(
                f"Country {i + 1:02d}",
                score,
                rank=i + 1,
                gdp_per_capita=round(1.6 - i * 0.05, 3),
                social_support=round(1.5 - i * 0.04, 3),
                life_expectancy=round(1.0 - i * 0.02, 3),
                freedom=round(((i * 7) % 25) / 40, 3),
                generosity=0.1 + (i % 3) * 0.05,
                corruption=0.05 * (i % 5),
            )
        )
    return tuple(rows)


@pytest.fixture()
def five_records():
    return (
        make_record("Iceland", 7.5, rank=3),
        make_record("Finland", 7.8, rank=1),
        make_record("Niceland", 5.0, rank=4),
        make_record("Norway", 7.6, rank=2),
        make_record("Chad", 3.0, rank=5),
    )
