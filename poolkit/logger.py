"""A log writer with one shared, lazily opened instance."""

from __future__ import annotations

import atexit
import os
import threading
from typing import ClassVar

DEFAULT_PATH = "applog.txt"


class Logger:
    """Writes ``[tag] message`` lines to a file, flushing after each one.

    The file is truncated when the logger opens it. ``instance()`` returns a
    logger shared by the whole process, writing to ``applog.txt``.
    """

    _instance: ClassVar[Logger | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()
    _atexit_registered: ClassVar[bool] = False

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = path
        self.tag = ""
        self._lock = threading.Lock()
        self._stream = open(path, "w", encoding="utf-8")

    @classmethod
    def instance(cls) -> Logger:
        """Return the shared logger, opening it on first use."""
        existing = cls._instance
        if existing is not None:
            return existing
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                if not cls._atexit_registered:
                    atexit.register(cls._discard_instance)
                    cls._atexit_registered = True
            return cls._instance

    @classmethod
    def _discard_instance(cls) -> None:
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.close()
                cls._instance = None

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def write_log(self, message: str) -> None:
        """Append one tagged line and flush it to the file.

        Raises ValueError if the logger has been closed.
        """
        with self._lock:
            if self._stream.closed:
                raise ValueError("write to a closed logger")
            self._stream.write(f"[{self.tag}] {message}\n")
            self._stream.flush()

    def set_tag(self, tag: str) -> None:
        """Set the tag that prefixes every following line."""
        self.tag = tag

    def close(self) -> None:
        """Close the file; closing again does nothing."""
        with self._lock:
            if not self._stream.closed:
                self._stream.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()