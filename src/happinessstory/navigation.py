"""Scene navigation state machine."""

import logging
from collections.abc import Sequence

from happinessstory.models import ChartKind, InteractiveSceneContext, Record, Scene, SceneView
from happinessstory.scenes import SCENES, build_scene_view
from happinessstory.search import on_query_change, open_interactive_context

logger = logging.getLogger(__name__)


class SceneNavigator:
    """Tracks the active scene and keeps its derived view in step.

    Boundaries clamp rather than wrap, and an out-of-range jump is ignored.
    Each transition rebuilds the SceneView; entering the interactive scene
    opens a fresh search context and leaving it drops the context.
    """

    def __init__(
        self,
        records: Sequence[Record],
        scenes: Sequence[Scene] = SCENES,
        lang: str = "en",
    ) -> None:
        if not scenes:
            raise ValueError("At least one scene is required")
        self._records = tuple(records)
        self._scenes = tuple(scenes)
        self._lang = lang
        self._index = 0
        self._view: SceneView
        self._context: InteractiveSceneContext | None = None
        self._enter(0)

    @property
    def scene_count(self) -> int:
        return len(self._scenes)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_scene(self) -> Scene:
        return self._scenes[self._index]

    @property
    def scenes(self) -> tuple[Scene, ...]:
        return self._scenes

    @property
    def view(self) -> SceneView:
        return self._view

    @property
    def interactive_context(self) -> InteractiveSceneContext | None:
        """Search context, present only while the interactive scene is active."""
        return self._context

    @property
    def lang(self) -> str:
        return self._lang

    @lang.setter
    def lang(self, lang: str) -> None:
        """Switch the UI language; an open search context gets its status re-rendered."""
        if lang == self._lang:
            return
        self._lang = lang
        if self._context is not None:
            self._context = on_query_change(self._context, self._context.query, lang)

    def is_previous_enabled(self) -> bool:
        return self._index > 0

    def is_next_enabled(self) -> bool:
        return self._index < self.scene_count - 1

    def progress_ratio(self) -> float:
        return (self._index + 1) / self.scene_count

    def next(self) -> SceneView:
        if self.is_next_enabled():
            self._enter(self._index + 1)
        return self._view

    def previous(self) -> SceneView:
        if self.is_previous_enabled():
            self._enter(self._index - 1)
        return self._view

    def go_to(self, index: int) -> SceneView:
        if 0 <= index < self.scene_count:
            self._enter(index)
        else:
            logger.debug("Ignoring jump to scene %d (have %d)", index, self.scene_count)
        return self._view

    def search(self, raw_input: str) -> InteractiveSceneContext:
        """Apply a search box value to the interactive scene.

        Raises:
            RuntimeError: If the interactive scene is not active.
        """
        if self._context is None:
            raise RuntimeError("Search is only available on the interactive scene")
        self._context = on_query_change(self._context, raw_input, self._lang)
        return self._context

    def _enter(self, index: int) -> None:
        scene = self._scenes[index]
        # Derive first so a failed derivation leaves the previous scene intact.
        view = build_scene_view(scene, self._records)
        self._index = index
        self._view = view
        if scene.chart_kind is ChartKind.INTERACTIVE:
            self._context = open_interactive_context(self._records, self._lang)
        else:
            self._context = None
        logger.debug("Entered scene %d (%s)", index, scene.chart_kind.value)
