"""A small game loop that fires, animates and explodes pooled actors."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Sequence, TextIO

from poolkit.actor_pool import MissilePool, default_actor_pool
from poolkit.actors import Actor, Missile
from poolkit.object_pool import SharedObjectPool

Acquirer = Callable[[], "Actor | None"]

_FRAMES_PER_ROUND = 5


class Game:
    """Fires a volley of actors, animates them for a few frames, then explodes them.

    ``acquire`` holds one callable per actor in a volley; each is called on
    every fire. ``tick`` is called with a number of seconds whenever the loop
    pauses. Drawing goes to ``out``.
    """

    def __init__(
        self,
        acquire: Sequence[Acquirer],
        tick: Callable[[float], None] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._acquire = list(acquire)
        self._tick = tick or time.sleep
        self._out = out
        self._actors: list[Actor] = []

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def actors(self) -> tuple[Actor, ...]:
        """The actors currently on screen."""
        return tuple(self._actors)

    def fire(self) -> None:
        """Bring one actor from each acquirer on screen."""
        for acquire in self._acquire:
            actor = acquire()
            if actor is not None:
                self._actors.append(actor)

    def animate(self) -> None:
        """Draw one frame of every actor on screen."""
        for actor in self._actors:
            actor.update(self.out)

    def explode(self) -> None:
        """Hide every actor on screen and clear the screen."""
        self.out.write("X\n")
        for actor in self._actors:
            actor.visible = False
        self._actors.clear()
        self._tick(1)
        self.out.write("\n\n")

    def run(self, rounds: int | None = 2) -> None:
        """Play ``rounds`` rounds, or forever when ``rounds`` is None."""
        if rounds is not None and rounds < 0:
            raise ValueError("rounds must not be negative")
        remaining = rounds
        counter = 0
        while remaining is None or remaining > 0:
            counter += 1
            if counter == 1:
                self.fire()
            if 1 <= counter <= _FRAMES_PER_ROUND:
                self.animate()
            if counter > _FRAMES_PER_ROUND:
                self.explode()
                counter = 0
                if remaining is not None:
                    remaining -= 1
            self._tick(1)


def _run_basic() -> None:
    pool = SharedObjectPool()
    first = pool.acquire()
    first.method_a()
    first.method_b()

    second = pool.acquire()
    second.method_a()
    second.method_b()

    pool.release(first)
    third = pool.acquire()
    third.method_a()
    third.method_b()


def _acquirers(mode: str) -> list[Acquirer]:
    if mode == "actors":
        pool = default_actor_pool()
        return [lambda: pool.acquire("missile"), lambda: pool.acquire("alien")]
    if mode == "missiles":
        missiles = MissilePool()
        return [missiles.acquire, missiles.acquire]
    return [Missile, Missile]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game loop, or the shared-object pool demo with ``--mode basic``."""
    parser = argparse.ArgumentParser(prog="poolkit-game", description=Game.__doc__)
    parser.add_argument(
        "--mode",
        choices=("actors", "missiles", "fresh", "basic"),
        default="actors",
        help="where actors come from (default: actors)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=2,
        help="rounds to play; 0 plays forever (default: 2)",
    )
    parser.add_argument(
        "--tick",
        type=float,
        default=1.0,
        help="seconds per pause (default: 1.0)",
    )
    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must not be negative")
    if args.tick < 0:
        parser.error("--tick must not be negative")

    if args.mode == "basic":
        _run_basic()
        return 0

    scale = args.tick
    game = Game(_acquirers(args.mode), tick=lambda seconds: time.sleep(seconds * scale))
    game.run(args.rounds or None)
    return 0


if __name__ == "__main__":
    sys.exit(main())