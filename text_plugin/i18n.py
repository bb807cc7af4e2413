from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_LOCALE = "en"

_BUNDLES: Dict[str, Dict[str, str]] = {
    "en": {
        "label.character_count": "Character count: {count}",
        "label.word_count": "Word count: {count}",
        "error.unknown_operation": "unknown operation: {name}",
        "error.duplicate_function": "function '{name}' is already registered",
    },
    "zh-CN": {
        "label.character_count": "字符数：{count}",
        "label.word_count": "单词数：{count}",
        "error.unknown_operation": "未知操作：{name}",
        "error.duplicate_function": "函数 '{name}' 已注册",
    },
}


def register_bundle(locale: str, messages: Mapping[str, str]) -> None:
    """Add or extend the messages for ``locale``; later keys win."""
    if locale:
        _BUNDLES.setdefault(locale, {}).update(messages)


def available_locales() -> list[str]:
    return sorted(_BUNDLES)


def locale_chain(locale: Optional[str]) -> Tuple[str, ...]:
    """Lookup order for a locale tag: "zh-Hant-TW" -> zh-Hant-TW, zh-Hant, zh, en."""
    chain = []
    parts = (locale or DEFAULT_LOCALE).replace("_", "-").split("-")
    while parts:
        chain.append("-".join(parts))
        parts.pop()
    if DEFAULT_LOCALE not in chain:
        chain.append(DEFAULT_LOCALE)
    return tuple(chain)


def translate(key: str, locale: Optional[str] = None, **params: Any) -> str:
    text = next(
        (_BUNDLES[loc][key] for loc in locale_chain(locale) if key in _BUNDLES.get(loc, {})),
        key,
    )
    if not params:
        return text
    try:
        return text.format(**params)
    except (KeyError, IndexError, ValueError):
        return text


def count_label(kind: str, count: int, locale: Optional[str] = None) -> str:
    return translate(f"label.{kind}", locale, count=count)
