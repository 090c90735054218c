"""Console port for line-oriented user-visible output."""
from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port for writing demonstration output."""

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write one line of text."""
