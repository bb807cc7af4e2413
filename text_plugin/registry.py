"""Host-facing registration contract.

A host either takes the static ``TEXT_OPERATIONS`` table as-is or builds
one from plugins::

    registry = build_registry([TextProcessingPlugin(locale="zh-CN")])
    get_operation("wordCount", registry)(Context(input="a b"))
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, Mapping, Optional
import logging

from .errors import UnknownOperationError
from .functions import build_function_table
from .i18n import DEFAULT_LOCALE, translate
from .plugin_system import PluginContext, PluginLike, apply_plugins
from .text_processing import TEXT_OPERATIONS, TextProcessingPlugin

logger = logging.getLogger(__name__)

Registry = Dict[str, Callable[..., str]]


def build_registry(plugins: Optional[Iterable[PluginLike]] = None, *, locale: Optional[str] = None) -> Registry:
    loc = locale or DEFAULT_LOCALE
    if plugins is None:
        if loc == DEFAULT_LOCALE:
            return dict(TEXT_OPERATIONS)
        plugins = [TextProcessingPlugin()]
    ctx = PluginContext(locale=loc)
    apply_plugins(plugins, ctx)
    table = build_function_table(ctx.function_specs, locale=loc)
    for name in table:
        logger.debug("Registered function %s", name)
    return table


def get_operation(name: str, registry: Optional[Mapping[str, Callable[..., str]]] = None, *, locale: Optional[str] = None) -> Callable[..., str]:
    table = TEXT_OPERATIONS if registry is None else registry
    try:
        return table[name]
    except KeyError:
        raise UnknownOperationError(translate("error.unknown_operation", locale, name=name), name=name) from None


def describe_functions(plugin: Optional[TextProcessingPlugin] = None, *, qualified: bool = False) -> Dict[str, Any]:
    plugin = plugin or TextProcessingPlugin()
    functions = []
    for spec in plugin.function_specs():
        info = spec.describe()
        if qualified:
            info["name"] = f"{plugin.name}.{spec.name}"
        functions.append(info)
    return {
        "plugin": plugin.name,
        "description": plugin.description,
        "functions": functions,
    }
