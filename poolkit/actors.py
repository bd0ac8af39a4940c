"""Game actors that can be recycled through a pool."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

_log = logging.getLogger(__name__)


class Actor(ABC):
    """Something on screen that can be drawn and hidden.

    A hidden actor is free to be handed out again by a pool.
    """

    def __init__(self) -> None:
        self.visible = True

    @abstractmethod
    def update(self, out: TextIO | None = None) -> None:
        """Draw one frame of the actor to ``out`` (standard output by default)."""


class Missile(Actor):
    """A missile, drawn as an arrow."""

    def __init__(self) -> None:
        super().__init__()
        _log.info("++++ Missile Created")

    def update(self, out: TextIO | None = None) -> None:
        (out or sys.stdout).write("-> ")


class Alien(Actor):
    """An alien, drawn as an at-sign."""

    def __init__(self) -> None:
        super().__init__()
        _log.info("++++++ Alien constructed")

    def update(self, out: TextIO | None = None) -> None:
        (out or sys.stdout).write("@ ")