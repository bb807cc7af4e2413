"""TextProcessing sample plugin.

Six side-effect-free text operations a host can dispatch by name. Each
takes a context exposing ``get(key, default)`` and reads ``"input"``
(default ``""``). None of them raises on missing or empty input.

    >>> from text_plugin import Context, TEXT_OPERATIONS
    >>> TEXT_OPERATIONS["toUpperCase"](Context(input="hello world"))
    'HELLO WORLD'
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .functions import FunctionSpec
from .i18n import DEFAULT_LOCALE, count_label
from .plugin_system import PluginContext

INPUT_KEY = "input"
_MODULE = "text_plugin.text_processing"


def _input_text(context: Any) -> str:
    if context is None:
        return ""
    text = context.get(INPUT_KEY, "")
    if text is None:
        return ""
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return str(text)


def to_upper_case(context: Any) -> str:
    """Uppercase every cased character; everything else is left alone."""
    return _input_text(context).upper()


def to_lower_case(context: Any) -> str:
    """Lowercase every cased character; everything else is left alone."""
    return _input_text(context).lower()


def character_count(context: Any, *, locale: Optional[str] = None) -> str:
    """Return ``"Character count: N"`` where N is the UTF-8 byte length of the input."""
    return count_label("character_count", len(_input_text(context).encode("utf-8")), locale)


def word_count(context: Any, *, locale: Optional[str] = None) -> str:
    """Return ``"Word count: N"`` for the whitespace-delimited tokens in the input."""
    return count_label("word_count", len(_input_text(context).split()), locale)


def reverse_text(context: Any) -> str:
    return _input_text(context)[::-1]


def trim_text(context: Any) -> str:
    return _input_text(context).strip()


TEXT_OPERATIONS: Dict[str, Callable[..., str]] = {
    "toUpperCase": to_upper_case,
    "toLowerCase": to_lower_case,
    "characterCount": character_count,
    "reverseText": reverse_text,
    "wordCount": word_count,
    "trimText": trim_text,
}

_DESCRIPTIONS: Dict[str, str] = {
    "toUpperCase": "Converts text to uppercase",
    "toLowerCase": "Converts text to lowercase",
    "characterCount": "Counts characters in text",
    "reverseText": "Reverses text",
    "wordCount": "Counts words in text",
    "trimText": "Trims whitespace from text",
}

_LOCALIZED = {"characterCount", "wordCount"}


@dataclass
class TextProcessingPlugin:
    """Register the text operations: toUpperCase, toLowerCase, characterCount,
    reverseText, wordCount, trimText."""
    name: str = "TextProcessing"
    locale: Optional[str] = None
    description: str = "Essential text processing functions"

    def function_specs(self, locale: Optional[str] = None) -> list[FunctionSpec]:
        loc = self.locale or locale or DEFAULT_LOCALE
        specs = []
        for op_name, fn in TEXT_OPERATIONS.items():
            options = (("locale", loc),) if op_name in _LOCALIZED and loc != DEFAULT_LOCALE else ()
            specs.append(FunctionSpec(
                name=op_name,
                func_path=f"{_MODULE}:{fn.__name__}",
                description=_DESCRIPTIONS[op_name],
                options=options,
            ))
        return specs

    def setup(self, ctx: PluginContext) -> None:
        ctx.function_specs.extend(self.function_specs(ctx.locale))
