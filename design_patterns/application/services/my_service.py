"""Example service resolved through the DI container."""
from abc import ABC, abstractmethod

from design_patterns.domain.base.ports import ConsolePort


class MyServicePort(ABC):
    """Contract for the demo service."""

    @abstractmethod
    def do_work(self) -> None:
        """Perform the service's work."""


class MyService(MyServicePort):
    """Writes a fixed line to show it was constructed and called."""

    def __init__(self, console: ConsolePort):
        self.console = console

    def do_work(self) -> None:
        self.console.write_line("Service working")
