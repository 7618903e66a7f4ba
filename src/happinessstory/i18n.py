"""Simple two-language (en/ko) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "행복의 지도",
        "en": "World Happiness Story",
    },
    "btn_previous": {
        "ko": "← 이전",
        "en": "← Previous",
    },
    "btn_next": {
        "ko": "다음 →",
        "en": "Next →",
    },
    "btn_save": {
        "ko": "↓ PNG 저장",
        "en": "↓ Save PNG",
    },
    "label_search": {
        "ko": "국가 검색",
        "en": "Search countries",
    },
    "placeholder_search": {
        "ko": "예: land",
        "en": "e.g. land",
    },
    "scene_progress": {
        "ko": "장면 {current} / {total}",
        "en": "Scene {current} of {total}",
    },
    "error_load_title": {
        "ko": "데이터를 불러올 수 없어요",
        "en": "Error Loading Data",
    },
    "error_load_body": {
        "ko": "CSV 파일이 있는지, 형식이 올바른지 확인해 주세요.",
        "en": "Please ensure the CSV file is available and correctly formatted.",
    },
    "status_all": {
        "ko": "전체 {count}개국을 표시 중이에요. 검색창으로 특정 국가를 찾아보세요.",
        "en": "All {count} countries shown. Use the search box to filter and see specific countries.",
    },
    "status_none": {
        "ko": "\"{query}\"와 일치하는 국가가 없어요. 다른 검색어를 입력해 보세요.",
        "en": "No countries found matching \"{query}\". Try a different search term.",
    },
    "status_one": {
        "ko": "{name} 표시 중 (순위: {rank}, 점수: {score:.3f})",
        "en": "Showing {name} (Rank: {rank}, Score: {score:.3f})",
    },
    "status_many": {
        "ko": "\"{query}\"와 일치하는 {count}개국 표시 중.",
        "en": "Showing {count} countries matching \"{query}\".",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
