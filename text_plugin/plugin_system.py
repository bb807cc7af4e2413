from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Protocol, Union
import logging

from .errors import PluginSetupError
from .functions import FunctionSpec, load_dotted
from .i18n import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

class Plugin(Protocol):
    name: str

    def setup(self, ctx: "PluginContext") -> None:
        ...

@dataclass
class PluginContext:
    function_specs: List[FunctionSpec] = field(default_factory=list)
    locale: str = DEFAULT_LOCALE

@dataclass(frozen=True)
class PluginSpec:
    name: str
    plugin_path: str
    config: Optional[Any] = None
    priority: int = 0

PluginLike = Union[Plugin, PluginSpec]


def apply_plugins(plugins: Iterable[PluginLike], ctx: PluginContext) -> List[Plugin]:
    resolved = [_resolve_plugin(p) for p in plugins]
    resolved.sort(key=lambda x: x[0])
    applied: List[Plugin] = []
    for _, plugin in resolved:
        before = len(ctx.function_specs)
        plugin.setup(ctx)
        logger.debug("Applied plugin %s (%d functions)", plugin.name, len(ctx.function_specs) - before)
        applied.append(plugin)
    return applied


def _resolve_plugin(plugin: PluginLike) -> tuple[int, Plugin]:
    if isinstance(plugin, PluginSpec):
        try:
            factory = load_dotted(plugin.plugin_path)
        except (ImportError, AttributeError) as e:
            raise PluginSetupError(f"cannot load plugin '{plugin.name}': {e}", name=plugin.name) from e
        inst = _instantiate(factory, plugin.config)
        if not hasattr(inst, "setup"):
            raise PluginSetupError(f"plugin '{plugin.name}' does not implement setup(ctx)", name=plugin.name)
        if not getattr(inst, "name", None):
            setattr(inst, "name", plugin.name)
        return plugin.priority, inst
    if not hasattr(plugin, "setup"):
        raise PluginSetupError("plugin object missing setup(ctx)")
    return 0, plugin


def _instantiate(factory: Any, config: Optional[Any]) -> Any:
    if not callable(factory):
        return factory
    if config is None:
        return factory()
    if isinstance(config, dict):
        return factory(**config)
    return factory(config)
