"""General object pools that reuse released objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")


class PoolFullError(RuntimeError):
    """Raised when a bounded pool has no free object and may not grow."""


class SharedObject:
    """An object worth keeping around rather than building again.

    ``history`` records the methods called since the last reset.
    """

    def __init__(self) -> None:
        self.used = True
        self.history: list[str] = []

    def method_a(self) -> None:
        self.history.append("MethodA")
        print("MethodA")

    def method_b(self) -> None:
        self.history.append("MethodB")
        print("MethodB")

    def reset(self) -> None:
        """Bring the object back to a clean state before it is reused."""
        self.history.clear()
        print("Resetting the state")


class SharedObjectPool:
    """A pool of SharedObject instances that resets them on reuse."""

    def __init__(self) -> None:
        self._objects: list[SharedObject] = []

    def acquire(self) -> SharedObject:
        """Return a free object, reset, or a new one."""
        for obj in self._objects:
            if not obj.used:
                _log.info("[POOL] Returning an existing object")
                obj.used = True
                obj.reset()
                return obj
        _log.info("[POOL] Creating a new object")
        obj = SharedObject()
        self._objects.append(obj)
        return obj

    def release(self, obj: SharedObject) -> None:
        """Mark ``obj`` as free for reuse."""
        for pooled in self._objects:
            if pooled is obj:
                pooled.used = False

    def __len__(self) -> int:
        return len(self._objects)


@dataclass
class _Entry(Generic[T]):
    obj: T
    used: bool = True


class ObjectPool(Generic[T]):
    """A pool of objects built by ``factory`` and torn down by ``disposer``.

    ``max_size`` of None lets the pool grow without bound.
    """

    def __init__(
        self,
        factory: Callable[[], T],
        max_size: int | None = None,
        disposer: Callable[[T], None] | None = None,
    ) -> None:
        self._factory = factory
        self._max_size = max_size
        self._disposer = disposer
        self._entries: list[_Entry[T]] = []

    def acquire(self) -> T:
        """Return a free object, or a new one while there is room.

        Raises PoolFullError when every object is in use and the pool is full.
        """
        for entry in self._entries:
            if not entry.used:
                entry.used = True
                _log.info("[POOL] Returning an existing object")
                return entry.obj
        if self._max_size is not None and len(self._entries) >= self._max_size:
            raise PoolFullError("Pool is full!")
        _log.info("[POOL] Creating a new object")
        obj = self._factory()
        self._entries.append(_Entry(obj))
        return obj

    def release(self, obj: T) -> None:
        """Mark ``obj`` as free for reuse."""
        for entry in self._entries:
            if entry.obj is obj:
                entry.used = False
                break

    def destroy(self) -> None:
        """Dispose of every pooled object and empty the pool."""
        for entry in self._entries:
            if entry.used:
                _log.warning("WARNING! Deleting an object still in use")
            if self._disposer is not None:
                self._disposer(entry.obj)
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)