"""World Happiness Story — Streamlit app stepping through the 2019 World Happiness Report."""

import html
import logging
from collections.abc import Callable

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from happinessstory.config import load_settings  # noqa: E402
from happinessstory.errors import DataLoadError, InsufficientDataError  # noqa: E402
from happinessstory.i18n import t  # noqa: E402
from happinessstory.loader import load_records  # noqa: E402
from happinessstory.logging import configure_logging  # noqa: E402
from happinessstory.models import ChartKind, Record  # noqa: E402
from happinessstory.narrative import group_caption  # noqa: E402
from happinessstory.navigation import SceneNavigator  # noqa: E402
from happinessstory.renderers.plotly_charts import render_scene_figure  # noqa: E402
from happinessstory.renderers.static import static_chart_png  # noqa: E402

_settings = load_settings()
configure_logging(_settings.log_level)
logger = logging.getLogger(__name__)

# --- Language: forced by HAPPINESS_LANG, otherwise browser-first via streamlit-js-eval ---
# On the first run the JS call returns None; the rerun it triggers fills it in.
if _settings.lang is not None:
    st.session_state.lang = _settings.lang
elif "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☺",
    layout="wide",
)

st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #0d1b35 !important;
        color: #e8d5a3;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    .scene-title { font-size: 2rem; font-weight: 600; color: #e8d5a3; margin-top: 1rem; }
    .scene-description { color: #d0d8e8; font-size: 1.05rem; line-height: 1.8; }
    .status-text { color: #aaaaaa; font-style: italic; }
    .error-box {
        text-align: center; padding: 50px; color: #ff9999;
        border: 1px solid #ff6b6b; border-radius: 12px;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


@st.cache_data(show_spinner=False)
def _load(path: str) -> tuple[Record, ...]:
    return load_records(path)


def _nav_buttons(
    prev_enabled: bool,
    next_enabled: bool,
    on_prev: Callable[[], object] | None = None,
    on_next: Callable[[], object] | None = None,
) -> None:
    left, _, right = st.columns([1, 4, 1])
    with left:
        st.button(
            t("btn_previous", _lang),
            key="prev_btn",
            disabled=not prev_enabled,
            on_click=on_prev,
            use_container_width=True,
        )
    with right:
        st.button(
            t("btn_next", _lang),
            key="next_btn",
            disabled=not next_enabled,
            on_click=on_next,
            use_container_width=True,
        )


# --- Data load: failure replaces the scene and leaves navigation inert ---
try:
    _records = _load(str(_settings.data_path))
except DataLoadError as e:
    logger.error("Data load failed: %s", e)
    st.markdown(
        f"<div class='error-box'><h2>{t('error_load_title', _lang)}</h2>"
        f"<p>{t('error_load_body', _lang)}</p></div>",
        unsafe_allow_html=True,
    )
    _nav_buttons(False, False)
    st.stop()

if "navigator" not in st.session_state:
    st.session_state.navigator = SceneNavigator(_records, lang=_lang)
nav: SceneNavigator = st.session_state.navigator
# Browser detection can resolve after the navigator was built.
nav.lang = _lang


def _guarded(action: Callable[..., object], *args: int) -> None:
    """Run a navigation action; a scene that cannot be derived keeps the current one."""
    try:
        action(*args)
    except InsufficientDataError as e:
        logger.error("Cannot open scene: %s", e)
        st.session_state.error_msg = str(e)


# --- Progress + scene dots ---
st.progress(
    nav.progress_ratio(),
    text=t("scene_progress", _lang).format(current=nav.current_index + 1, total=nav.scene_count),
)
dot_cols = st.columns(nav.scene_count)
for i, col in enumerate(dot_cols):
    with col:
        st.button(
            str(i + 1),
            key=f"dot_{i}",
            on_click=_guarded,
            args=(nav.go_to, i),
            type="primary" if i == nav.current_index else "secondary",
            use_container_width=True,
        )

if st.session_state.get("error_msg"):
    st.error(st.session_state.error_msg)
    st.session_state.error_msg = None

# --- Scene content ---
view = nav.view
scene = view.scene
st.markdown(f"<div class='scene-title'>{html.escape(scene.title)}</div>", unsafe_allow_html=True)
st.markdown(
    f"<div class='scene-description'>{html.escape(view.narrative)}</div>",
    unsafe_allow_html=True,
)

context = None
if scene.chart_kind is ChartKind.INTERACTIVE:
    query = st.text_input(
        t("label_search", _lang),
        key="search_query",
        placeholder=t("placeholder_search", _lang),
    )
    context = nav.search(query)

st.plotly_chart(
    render_scene_figure(view, context),
    use_container_width=True,
    config={"displayModeBar": False},
)

if context is not None:
    st.markdown(
        f"<p class='status-text'>{html.escape(context.status_text)}</p>",
        unsafe_allow_html=True,
    )
for group in view.groups:
    st.caption(group_caption(group))

st.download_button(
    t("btn_save", _lang),
    data=static_chart_png(view, context),
    file_name=f"scene_{scene.id + 1}_{scene.chart_kind.value}.png",
    mime="image/png",
)

# --- Previous / Next ---
_nav_buttons(
    nav.is_previous_enabled(),
    nav.is_next_enabled(),
    on_prev=lambda: _guarded(nav.previous),
    on_next=lambda: _guarded(nav.next),
)
