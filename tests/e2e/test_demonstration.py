import asyncio

import pytest

from design_patterns.bootstrap import Application
from design_patterns.cli.main import main
from design_patterns.config import LoggingConfig
from design_patterns.config.manager import ConfigurationManager
from design_patterns.domain.core import UnknownSectionError
from design_patterns.infrastructure.logging.logger import setup_logging
from design_patterns.interface.demo_runner import run_sections, select_sections
from design_patterns.interface.demo_sections import SECTIONS


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # main() points log handlers at the captured stderr of the running test
    setup_logging(LoggingConfig())


EXPECTED_OUTPUT = [
    "---- Options ----",
    "12345",
    "---- DI ----",
    "Service working",
    "---- Repository & Specification ----",
    "Post by Tonio",
    "---- Event Aggregator ----",
    "UserCreated 1",
    "---- Mediator ----",
    "Mediator send command",
    "Mediator publish event",
    "---- Result ----",
    "42",
    "error",
    "---- Null Object ----",
    "---- Async/Await ----",
    "data",
    "---- Iterator ----",
    "1",
    "2",
    "---- Reactive ----",
    "Received 42",
    "Completed",
    "---- Decorator / Middleware ----",
    "Middleware: Request",
    "---- Pipeline ----",
    "2",
    "---- Template Method ----",
    "CSV: Hello",
]


def test_full_demonstration_output(container, console):
    asyncio.run(run_sections(container))

    assert console.lines == EXPECTED_OUTPUT


def test_demonstration_is_repeatable(container, console):
    asyncio.run(run_sections(container))
    asyncio.run(run_sections(container))

    assert console.lines == EXPECTED_OUTPUT * 2


def test_application_runs_selected_sections(console):
    app = Application(config_manager=ConfigurationManager(environ={}), console=console)

    app.run(["pipeline", "RESULT"])

    assert console.lines == ["---- Result ----", "42", "error", "---- Pipeline ----", "2"]


def test_unknown_section_is_rejected():
    with pytest.raises(UnknownSectionError):
        select_sections(["nope"])


def test_section_keys_are_unique():
    keys = [section.key for section in SECTIONS]

    assert len(keys) == len(set(keys))


def test_cli_prints_demonstration_to_stdout(capsys, monkeypatch):
    monkeypatch.delenv("DESIGN_PATTERNS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DESIGN_PATTERNS_API_KEY", raising=False)

    exit_code = main([])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == EXPECTED_OUTPUT


def test_cli_lists_sections(capsys):
    assert main(["--list-sections"]) == 0

    assert capsys.readouterr().out.splitlines() == [s.key for s in SECTIONS]


def test_cli_reports_unknown_section(capsys):
    exit_code = main(["--section", "bogus"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Unknown section 'bogus'" in captured.err
    assert captured.out == ""


def test_cli_reports_missing_config_file(capsys, tmp_path):
    exit_code = main(["--config", str(tmp_path / "missing.json")])

    assert exit_code == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_cli_creates_missing_log_directory(capsys, monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    monkeypatch.setenv("DESIGN_PATTERNS_LOG_FILE", str(log_file))
    exit_code = main(["--section", "result"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["---- Result ----", "42", "error"]
    assert log_file.exists()


def test_cli_reports_unusable_log_file(capsys, monkeypatch, tmp_path):
    monkeypatch.setenv("DESIGN_PATTERNS_LOG_FILE", str(tmp_path))

    exit_code = main(["--section", "result"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Cannot open log file" in captured.err
    assert captured.out == ""


def test_cli_reports_config_path_that_is_a_directory(capsys, tmp_path):
    exit_code = main(["--config", str(tmp_path)])

    assert exit_code == 1
    assert "Cannot read configuration file" in capsys.readouterr().err
