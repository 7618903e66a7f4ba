"""Tests for the scene navigation state machine."""

import pytest

from happinessstory.errors import InsufficientDataError
from happinessstory.models import ChartKind
from happinessstory.navigation import SceneNavigator
from happinessstory.scenes import SCENES
from happinessstory.search import status_text


@pytest.fixture()
def nav(records):
    return SceneNavigator(records)


class TestBoundaries:
    def test_starts_at_zero(self, nav):
        assert nav.current_index == 0
        assert nav.current_scene.chart_kind is ChartKind.TOP_COUNTRIES

    def test_previous_at_start_is_noop(self, nav):
        nav.previous()
        assert nav.current_index == 0

    def test_next_at_end_is_noop(self, nav):
        nav.go_to(nav.scene_count - 1)
        nav.next()
        assert nav.current_index == nav.scene_count - 1

    @pytest.mark.parametrize("index", [-1, len(SCENES), 99])
    def test_out_of_range_go_to_is_noop(self, nav, index):
        nav.go_to(2)
        nav.go_to(index)
        assert nav.current_index == 2

    def test_walk_forward_and_back(self, nav):
        for expected in range(1, nav.scene_count):
            nav.next()
            assert nav.current_index == expected
        for expected in reversed(range(nav.scene_count - 1)):
            nav.previous()
            assert nav.current_index == expected


class TestObservers:
    def test_buttons_at_start(self, nav):
        assert not nav.is_previous_enabled()
        assert nav.is_next_enabled()

    def test_buttons_in_middle(self, nav):
        nav.go_to(2)
        assert nav.is_previous_enabled()
        assert nav.is_next_enabled()

    def test_buttons_at_end(self, nav):
        nav.go_to(4)
        assert nav.is_previous_enabled()
        assert not nav.is_next_enabled()

    def test_progress_ratio(self, nav):
        assert nav.progress_ratio() == pytest.approx(1 / 5)
        nav.go_to(4)
        assert nav.progress_ratio() == pytest.approx(1.0)


class TestSceneViews:
    def test_view_follows_transitions(self, nav):
        assert nav.view.scene.id == 0
        view = nav.next()
        assert view is nav.view
        assert view.scene.chart_kind is ChartKind.GDP_SCATTER

    def test_views_independent_of_navigation_order(self, records):
        direct = SceneNavigator(records)
        direct.go_to(1)
        winding = SceneNavigator(records)
        winding.go_to(4)
        winding.go_to(3)
        winding.go_to(1)
        assert direct.view == winding.view

    def test_records_not_reordered(self, records):
        rows = list(records)
        nav = SceneNavigator(rows)
        for i in range(nav.scene_count):
            nav.go_to(i)
        assert rows == list(records)


class TestInteractiveContext:
    def test_context_only_on_interactive_scene(self, nav):
        assert nav.interactive_context is None
        nav.go_to(4)
        assert nav.interactive_context is not None
        nav.previous()
        assert nav.interactive_context is None

    def test_search_updates_context(self, nav):
        nav.go_to(4)
        ctx = nav.search("country 0")
        assert len(ctx.visible_records) == 9
        assert nav.interactive_context is ctx

    def test_reentering_resets_search(self, nav):
        nav.go_to(4)
        nav.search("country 1")
        nav.go_to(0)
        nav.go_to(4)
        assert nav.interactive_context.query == ""
        assert len(nav.interactive_context.visible_records) == 25

    def test_language_change_rerenders_open_status(self, nav):
        nav.go_to(4)
        nav.search("country 0")
        nav.lang = "ko"
        ctx = nav.interactive_context
        assert ctx.query == "country 0"
        assert len(ctx.visible_records) == 9
        assert ctx.status_text == status_text("country 0", ctx.visible_records, 25, lang="ko")

    def test_language_change_applies_to_later_scenes(self, nav):
        nav.lang = "ko"
        nav.go_to(4)
        assert nav.interactive_context.status_text == status_text(
            "", nav.interactive_context.visible_records, 25, lang="ko"
        )
        assert not nav.interactive_context.status_text.startswith("All")

    def test_search_outside_interactive_raises(self, nav):
        with pytest.raises(RuntimeError):
            nav.search("x")


class TestInsufficientData:
    def test_failed_scene_keeps_current(self, records):
        nav = SceneNavigator(records[:12])
        nav.go_to(2)
        with pytest.raises(InsufficientDataError):
            nav.go_to(3)
        assert nav.current_index == 2
        assert nav.view.scene.id == 2

    def test_empty_scene_list_rejected(self, records):
        with pytest.raises(ValueError):
            SceneNavigator(records, scenes=())
