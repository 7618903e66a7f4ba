"""Tests for the scene sequence and per-scene views."""

import pytest

from happinessstory.errors import InsufficientDataError
from happinessstory.models import ChartKind
from happinessstory.narrative import group_caption
from happinessstory.scenes import SCENES, build_scene_view, score_ceiling
from happinessstory.stats import pearson_correlation


def test_scene_ids_dense():
    assert [s.id for s in SCENES] == list(range(len(SCENES)))
    assert [s.chart_kind for s in SCENES] == list(ChartKind)


class TestBuildSceneView:
    def test_top_countries(self, records):
        view = build_scene_view(SCENES[0], tuple(reversed(records)))
        assert len(view.records) == 20
        assert view.records[0].name == "Country 01"
        assert view.correlation is None
        assert "top 20 happiest countries" in view.narrative

    def test_gdp_scatter_uses_everything(self, records):
        view = build_scene_view(SCENES[1], records)
        assert view.records == records
        assert view.correlation == pearson_correlation(records, "gdp_per_capita", "score")
        assert f"(r={view.correlation:.3f})" in view.narrative
        assert view.highlight == "Costa Rica"

    def test_social_support(self, records):
        view = build_scene_view(SCENES[2], records)
        assert view.correlation == pytest.approx(1.0)
        assert "(r=1.000)" in view.narrative
        assert view.highlight == "Iceland"

    def test_freedom_comparison(self, records):
        view = build_scene_view(SCENES[3], records)
        high, low = view.groups
        assert high.count == low.count == 10
        assert high.label == "Highest Freedom Countries"
        assert f"{high.mean_score:.3f}" in view.narrative
        assert f"{low.mean_score:.3f}" in view.narrative
        assert len(view.records) == 20
        assert group_caption(high).startswith("Highest Freedom Countries: ")

    def test_freedom_comparison_needs_twenty(self, records):
        with pytest.raises(InsufficientDataError):
            build_scene_view(SCENES[3], records[:19])

    def test_interactive(self, records):
        view = build_scene_view(SCENES[4], tuple(reversed(records)))
        assert [r.rank for r in view.records] == list(range(1, 26))
        assert "explore all 25 countries" in view.narrative

    def test_score_ceiling_is_dataset_max(self, records):
        for scene in SCENES:
            assert build_scene_view(scene, records).score_ceiling == 7.8


def test_score_ceiling_empty():
    assert score_ceiling(()) == 0.0
