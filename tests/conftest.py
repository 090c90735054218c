import pytest
from typing import List

from design_patterns.config.manager import ConfigurationManager
from design_patterns.domain.base.ports import ConsolePort
from design_patterns.infrastructure.di.services import register_all_services


class RecordingConsole(ConsolePort):
    """Console double collecting written lines."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def config_manager():
    # Empty environment so developer shells cannot leak overrides into tests
    return ConfigurationManager(environ={})


@pytest.fixture
def container(config_manager, console):
    return register_all_services(config_manager=config_manager, console=console)
