"""Request-scoped data exposed to included templates."""

from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Dict, Iterator, Optional

DEFAULT_VAR_NAME = "data"

_MISSING = object()


def as_template_object(data: Any) -> Any:
    """Return ``data`` in a form templates can read with attribute access.

    Mappings become namespaces (keys that are not identifiers stay reachable
    through ``getattr``), ``None`` becomes an empty namespace, other scalars
    are wrapped under ``scalar`` and any other object is passed through.
    """

    if isinstance(data, SimpleNamespace):
        return data
    if isinstance(data, Mapping):
        namespace = SimpleNamespace()
        for key, value in data.items():
            setattr(namespace, str(key), value)
        return namespace
    if data is None:
        return SimpleNamespace()
    if isinstance(data, (str, bytes, int, float, bool)):
        return SimpleNamespace(scalar=data)
    if isinstance(data, (list, tuple)):
        return as_template_object({str(index): value for index, value in enumerate(data)})
    return data


class TemplateContext:
    """Named variables visible to templates while they are included."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._vars: Dict[str, Any] = dict(initial or {})

    def set(self, name: str, value: Any) -> None:
        self._vars[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self._vars.get(name, default)

    def push(self, name: str, value: Any) -> "TemplateDataHandle":
        """Set ``name`` and return a handle that puts the old value back."""

        previous = self._vars.get(name, _MISSING)
        self.set(name, value)
        return TemplateDataHandle(self, name, previous)

    def discard(self, name: str) -> bool:
        return self._vars.pop(name, _MISSING) is not _MISSING

    def as_mapping(self) -> Dict[str, Any]:
        return dict(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __getitem__(self, name: str) -> Any:
        return self._vars[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)


class TemplateDataHandle:
    """Releasable reference to one published template variable.

    Releasing restores whatever the name held before publication, unless
    the variable has since been replaced by someone else.
    """

    def __init__(self, context: TemplateContext, var_name: str, previous: Any = _MISSING) -> None:
        self.context = context
        self.var_name = var_name
        self._published = context.get(var_name, _MISSING)
        self._previous = previous
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def value(self) -> Any:
        return self.context.get(self.var_name)

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        if self.context.get(self.var_name, _MISSING) is not self._published:
            return
        if self._previous is _MISSING:
            self.context.discard(self.var_name)
        else:
            self.context.set(self.var_name, self._previous)

    def __enter__(self) -> "TemplateDataHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
