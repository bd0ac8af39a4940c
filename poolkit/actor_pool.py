"""Pools that hand out hidden actors again instead of creating new ones."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from poolkit.actors import Actor, Alien, Missile

_log = logging.getLogger(__name__)

Creator = Callable[[], Actor]


@dataclass
class _ActorInfo:
    actors: list[Actor] = field(default_factory=list)
    creator: Creator | None = None


def _find_hidden(actors: list[Actor]) -> Actor | None:
    hidden = next((actor for actor in actors if not actor.visible), None)
    if hidden is not None:
        hidden.visible = True
    return hidden


class ActorPool:
    """A pool of actors keyed by type name, each type built by a registered creator."""

    def __init__(self) -> None:
        self._pool: dict[str, _ActorInfo] = {}

    def register_creator(self, key: str, creator: Creator) -> None:
        """Set the callable that builds new actors for ``key``."""
        self._pool.setdefault(key, _ActorInfo()).creator = creator

    def _create(self, key: str) -> Actor | None:
        info = self._pool.setdefault(key, _ActorInfo())
        if info.creator is None:
            _log.warning("Creator not registered")
            return None
        _log.info("[POOL] Creating new actor of type :%s", key)
        actor = info.creator()
        info.actors.append(actor)
        return actor

    def acquire(self, key: str) -> Actor | None:
        """Return a hidden actor of type ``key`` made visible, or a new one.

        Returns None when no creator is registered for ``key``.
        """
        info = self._pool.get(key)
        if info is None:
            return self._create(key)
        actor = _find_hidden(info.actors)
        if actor is None:
            return self._create(key)
        _log.info("[POOL] Returning existing actor of type : %s", key)
        return actor

    def release(self, key: str, actor: Actor) -> None:
        """Hide ``actor`` so the pool can hand it out again.

        Raises KeyError if the pool has never seen ``key``.
        """
        info = self._pool.get(key)
        if info is None:
            raise KeyError(f"Unknown key: {key}")
        for pooled in info.actors:
            if pooled is actor:
                pooled.visible = False
                break

    def __len__(self) -> int:
        return sum(len(info.actors) for info in self._pool.values())


def default_actor_pool() -> ActorPool:
    """Return a pool with creators for ``missile`` and ``alien``."""
    pool = ActorPool()
    pool.register_creator("missile", Missile)
    pool.register_creator("alien", Alien)
    return pool


class MissilePool:
    """A pool that only holds missiles."""

    def __init__(self) -> None:
        self._missiles: list[Missile] = []

    def acquire(self) -> Missile:
        """Return a hidden missile made visible, or a new one."""
        missile = _find_hidden(self._missiles)
        if missile is not None:
            _log.info("[POOL] Returning an existing instance")
            return missile
        _log.info("[POOL] Creating a new instance")
        missile = Missile()
        self._missiles.append(missile)
        return missile

    def release(self, missile: Missile) -> None:
        """Hide ``missile`` so it can be handed out again."""
        for pooled in self._missiles:
            if pooled is missile:
                pooled.visible = False

    def __len__(self) -> int:
        return len(self._missiles)