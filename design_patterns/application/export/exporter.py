"""Exporters built on a fixed open / write / close sequence."""
from abc import ABC, abstractmethod
from typing import Callable

from design_patterns.domain.base.ports import ConsolePort


class Exporter(ABC):
    """
    Template method base: ``export`` fixes the order of the steps and
    subclasses supply ``write``. ``open`` and ``close`` are optional hooks.
    """

    def export(self, data: str) -> None:
        self.open()
        try:
            self.write(data)
        finally:
            self.close()

    def open(self) -> None:
        pass

    @abstractmethod
    def write(self, data: str) -> None:
        """Write the payload in the exporter's format."""

    def close(self) -> None:
        pass


class CsvExporter(Exporter):
    def __init__(self, console: ConsolePort):
        self.console = console

    def write(self, data: str) -> None:
        self.console.write_line(f"CSV: {data}")


def _noop() -> None:
    pass


def export_with(
    write: Callable[[str], None],
    data: str,
    open_: Callable[[], None] = _noop,
    close: Callable[[], None] = _noop,
) -> None:
    """Function form of ``Exporter.export``: the varying step is passed in."""
    open_()
    try:
        write(data)
    finally:
        close()
