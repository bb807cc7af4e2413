from __future__ import annotations
from dataclasses import dataclass
from functools import partial, update_wrapper
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union
import importlib

from .errors import DuplicateFunctionError, PluginSetupError
from .i18n import translate

@dataclass(frozen=True)
class FunctionSpec:
    """Named function a plugin exposes to the host.

    func_path is an explicit "pkg.mod:func" reference; options are bound as
    keyword arguments when the table is built. A mapping passed as options
    is stored as sorted (key, value) pairs so the spec stays hashable.
    """
    name: str
    func_path: str
    description: str = ""
    options: Union[Tuple[Tuple[str, Any], ...], Mapping[str, Any]] = ()

    def __post_init__(self) -> None:
        if isinstance(self.options, Mapping):
            object.__setattr__(self, "options", tuple(sorted(self.options.items())))

    def describe(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description}

def load_dotted(path: str) -> Callable[..., object]:
    mod, _, attr = path.partition(":")
    if not mod or not attr:
        raise ValueError(f"Invalid dotted path: {path}")
    m = importlib.import_module(mod)
    return getattr(m, attr)

def resolve_function(spec: FunctionSpec) -> Callable[..., Any]:
    try:
        fn = load_dotted(spec.func_path)
    except (ImportError, AttributeError) as e:
        raise PluginSetupError(f"cannot load '{spec.func_path}' for '{spec.name}': {e}", name=spec.name) from e
    if not callable(fn):
        raise PluginSetupError(f"'{spec.func_path}' is not callable", name=spec.name)
    if not spec.options:
        return fn
    bound = partial(fn, **dict(spec.options))
    update_wrapper(bound, fn)
    return bound

def build_function_table(specs: Iterable[FunctionSpec], *, locale: Optional[str] = None) -> Dict[str, Callable[..., Any]]:
    table: Dict[str, Callable[..., Any]] = {}
    for spec in specs:
        if spec.name in table:
            raise DuplicateFunctionError(translate("error.duplicate_function", locale, name=spec.name), name=spec.name)
        table[spec.name] = resolve_function(spec)
    return table
