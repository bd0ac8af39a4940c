"""Printers kept as singletons and looked up by name through a registry."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from abc import ABC, abstractmethod
from typing import Callable, Sequence, Union

from poolkit.singleton import Singleton

_log = logging.getLogger(__name__)


class Printer(Singleton, ABC):
    """A device that prints text. Each concrete printer has one instance."""

    @abstractmethod
    def print(self, data: str) -> None:
        """Print ``data``."""


class LocalPrinter(Printer):
    """The printer attached to this machine."""

    def __init__(self) -> None:
        _log.info("LocalPrinter instance created")

    def print(self, data: str) -> None:
        sys.stdout.write(f"[LOCALPRINTER]{data}\n")


class PDFPrinter(Printer):
    """A printer that writes PDF documents."""

    def __init__(self) -> None:
        _log.info("PDFPrinter instance created")

    def print(self, data: str) -> None:
        sys.stdout.write(f"[PDFPRINTER]{data}\n")


Creator = Callable[[], Printer]
PrinterSource = Union[Printer, Creator]


class PrinterProvider:
    """A thread-safe registry of printers by name.

    A printer may be registered directly, or as a callable that builds it on
    first lookup.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._printers: dict[str, Printer] = {}
        self._creators: dict[str, Creator] = {}

    def register_printer(self, key: str, printer: PrinterSource) -> None:
        """Register a printer, or a callable that builds it, under ``key``.

        A key that is already registered keeps its first printer.
        """
        with self._lock:
            if key in self._printers or key in self._creators:
                _log.warning("Already registered")
                return
            if isinstance(printer, Printer):
                self._printers[key] = printer
            elif callable(printer):
                self._creators[key] = printer
            else:
                raise TypeError("printer must be a Printer or a callable that returns one")

    def get_printer(self, key: str) -> Printer | None:
        """Return the printer for ``key``, building it if needed, or None."""
        with self._lock:
            printer = self._printers.get(key)
            if printer is not None:
                return printer
            creator = self._creators.pop(key, None)
            if creator is None:
                return None
            printer = creator()
            self._printers[key] = printer
            return printer

    def get_printer_ref(self, key: str) -> Printer:
        """Return the printer for ``key``; raise KeyError if there is none."""
        printer = self.get_printer(key)
        if printer is None:
            raise KeyError(f"No such printer: {key}")
        return printer

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._printers or key in self._creators


def default_provider() -> PrinterProvider:
    """Return a provider with the ``local`` and ``pdf`` printers registered."""
    provider = PrinterProvider()
    provider.register_printer("local", LocalPrinter.instance)
    provider.register_printer("pdf", PDFPrinter.instance)
    return provider


def _print_sales(provider: PrinterProvider) -> None:
    printer = provider.get_printer("local")
    if printer is not None:
        printer.print("Sales data")


def main(argv: Sequence[str] | None = None) -> int:
    """Print sample data on the PDF printer and the local printer."""
    parser = argparse.ArgumentParser(
        prog="poolkit-printers", description="Print sample data on the registered printers."
    )
    parser.parse_args(argv)
    provider = default_provider()
    printer = provider.get_printer("pdf")
    if printer is not None:
        printer.print("Printing data to the printer")
    _print_sales(provider)
    return 0


if __name__ == "__main__":
    sys.exit(main())