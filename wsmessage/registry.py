"""Registry helpers that lazily import modules and expose named lookups."""

from __future__ import annotations

import importlib
from threading import Lock
from typing import Generic, TypeVar

from . import errors, logs

log = logs.get(__name__)

T = TypeVar('T')


class Registry(Generic[T]):
    """Keeps a registry of subclasses by name.

    Lookups for unknown names import `<package>.<name>` once, which lets
    modules register their classes on import.
    """

    def __init__(self, package: str, base_type: type[T]) -> None:
        self._package = package
        self._base_type = base_type
        self._registry: dict[str, type[T]] = {}
        self._lock = Lock()

    def __getitem__(self, name: str) -> type[T]:
        try:
            return self._registry[name]
        except KeyError:
            pass

        with self._lock:
            self.load(name)

        return self._registry[name]

    def __setitem__(self, name: str, cls: type[T]) -> None:
        current = self._registry.get(name)
        if current is not None and current is not cls:
            raise errors.RegistryError(f'{self._base_type.__name__} already registered: {name}')
        self._registry[name] = cls

    def __contains__(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> tuple[str, ...]:
        """Return all registered names in insertion order."""
        return tuple(self._registry.keys())

    def load(self, name: str) -> None:
        """Import `<package>.<name>` so that it can register itself."""
        if name in self._registry or name.startswith('_') or not name.isidentifier():
            return
        modname = f'{self._package}.{name}'
        log.debug('loading: %s', modname)
        try:
            importlib.import_module(modname)
        except ModuleNotFoundError as exc:
            if exc.name != modname:
                raise
