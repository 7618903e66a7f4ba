"""Name search for the interactive scene.

The context is passed in and a new one returned on every query change; no
search state lives outside it.
"""

import dataclasses
from collections.abc import Sequence

from happinessstory.derive import filter_by_name, sorted_by_score
from happinessstory.i18n import t
from happinessstory.models import InteractiveSceneContext, Record
from happinessstory.scenes import score_ceiling


def status_text(query: str, visible: Sequence[Record], total: int, lang: str = "en") -> str:
    """Status line under the interactive chart.

    Empty query → all-shown message with `total`; no match → no-match message
    quoting the query; one match → that country's rank and score; otherwise the
    match count and the query.
    """
    if not query:
        return t("status_all", lang).format(count=total)
    if not visible:
        return t("status_none", lang).format(query=query)
    if len(visible) == 1:
        r = visible[0]
        return t("status_one", lang).format(name=r.name, rank=r.rank, score=r.score)
    return t("status_many", lang).format(count=len(visible), query=query)


def open_interactive_context(
    records: Sequence[Record], lang: str = "en"
) -> InteractiveSceneContext:
    """Fresh context for entering the interactive scene: empty query, everything visible."""
    ordered = sorted_by_score(records)
    return InteractiveSceneContext(
        sorted_records=ordered,
        score_ceiling=score_ceiling(records),
        status_text=status_text("", ordered, len(ordered), lang),
        query="",
        visible_records=ordered,
    )


def on_query_change(
    context: InteractiveSceneContext, raw_input: str, lang: str = "en"
) -> InteractiveSceneContext:
    """Re-derive the visible records and status for a new search box value.

    Filtering runs against the canonical sorted records, so matches keep
    descending score order. `score_ceiling` is carried over unchanged.
    """
    query = raw_input.lower()
    visible = filter_by_name(context.sorted_records, query)
    return dataclasses.replace(
        context,
        query=query,
        visible_records=visible,
        status_text=status_text(query, visible, len(context.sorted_records), lang),
    )
