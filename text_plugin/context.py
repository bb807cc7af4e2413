from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, Optional, Union
import json

ContextLike = Union["Context", Mapping, None]


def _freeze_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class Context(Mapping):
    """Read-only, ordered str -> str bundle handed to an operation by the host.

    Values are coerced on construction (bytes decoded, None -> "", other
    scalars via str()). Every helper returns a new Context.
    """

    __slots__ = ("_data",)

    def __init__(self, variables: Optional[Mapping] = None, /, **kwargs: Any):
        data: Dict[str, str] = {}
        for source in (variables or {}, kwargs):
            for k, v in source.items():
                if not isinstance(k, str):
                    raise TypeError(f"context keys must be str, got {type(k).__name__}")
                data[k] = _freeze_value(v)
        object.__setattr__(self, "_data", data)

    @classmethod
    def of(cls, obj: ContextLike) -> "Context":
        if isinstance(obj, Context):
            return obj
        return cls(obj)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("Context is read-only")

    def __delattr__(self, name: str) -> None:
        raise TypeError("Context is read-only")

    def __reduce__(self):
        return (Context, (self._data,))

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    def __repr__(self) -> str:
        return f"Context({self._data!r})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def is_empty(self) -> bool:
        return not self._data

    def merged(self, other: ContextLike, *, overwrite: bool = True) -> "Context":
        other_ctx = Context.of(other)
        if overwrite:
            return Context({**self._data, **other_ctx._data})
        return Context({**other_ctx._data, **self._data})

    def filtered(self, pred: Callable[[str, str], bool]) -> "Context":
        return Context({k: v for k, v in self._data.items() if pred(k, v)})

    def to_dict(self) -> Dict[str, str]:
        return dict(self._data)

    def to_json(self) -> str:
        return json.dumps(self._data, ensure_ascii=False)
