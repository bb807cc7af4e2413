"""text_plugin v1.0

TextProcessing sample plugin for hosts that dispatch named functions:
- Six text operations (upper/lower case, character/word count, reverse, trim)
- Read-only Context with a defaulting get(key, default)
- Static name -> function table plus setup(ctx) plugin registration
- Localised count labels (en, zh-CN)
"""

from .context import Context
from .errors import TextPluginError, PluginSetupError, DuplicateFunctionError, UnknownOperationError
from .functions import FunctionSpec, load_dotted, build_function_table
from .plugin_system import Plugin, PluginSpec, PluginContext, apply_plugins
from .text_processing import (
    TEXT_OPERATIONS,
    TextProcessingPlugin,
    to_upper_case,
    to_lower_case,
    character_count,
    word_count,
    reverse_text,
    trim_text,
)
from .registry import build_registry, get_operation, describe_functions
from .i18n import register_bundle, translate, available_locales, locale_chain

__all__ = [
    "Context",
    "TextPluginError",
    "PluginSetupError",
    "DuplicateFunctionError",
    "UnknownOperationError",
    "FunctionSpec",
    "load_dotted",
    "build_function_table",
    "Plugin",
    "PluginSpec",
    "PluginContext",
    "apply_plugins",
    "TEXT_OPERATIONS",
    "TextProcessingPlugin",
    "to_upper_case",
    "to_lower_case",
    "character_count",
    "word_count",
    "reverse_text",
    "trim_text",
    "build_registry",
    "get_operation",
    "describe_functions",
    "register_bundle",
    "translate",
    "available_locales",
    "locale_chain",
]
