"""A base class that gives each subclass exactly one lazily built instance."""

from __future__ import annotations

import threading
from typing import Any, TypeVar

S = TypeVar("S", bound="Singleton")

_lock = threading.RLock()
_instances: dict[type, Any] = {}
_constructing: set[type] = set()


class Singleton:
    """Subclasses get one shared instance each, reached through ``instance()``.

    Calling a subclass directly raises TypeError, and instances refuse to be
    copied, so the shared instance stays the only one.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Singleton:
        if cls not in _constructing:
            raise TypeError(f"{cls.__name__} is a singleton; use {cls.__name__}.instance()")
        return super().__new__(cls)

    @classmethod
    def instance(cls: type[S]) -> S:
        """Return the one instance of ``cls``, building it on first use."""
        existing = _instances.get(cls)
        if existing is not None:
            return existing
        with _lock:
            existing = _instances.get(cls)
            if existing is None:
                _constructing.add(cls)
                try:
                    existing = cls()
                finally:
                    _constructing.discard(cls)
                _instances[cls] = existing
            return existing

    def __copy__(self) -> Singleton:
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Singleton:
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")


class GameManager(Singleton):
    """The single manager that loads the game's assets and runs it."""

    def __init__(self) -> None:
        self.assets_loaded = False
        self.running = False

    def load_assets(self) -> None:
        """Mark the game's assets as loaded."""
        self.assets_loaded = True

    def run(self) -> None:
        """Mark the game as running."""
        self.running = True