"""Shared pytest fixtures and test helpers for staffctl tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from staffctl.domain.company import Company
from staffctl.domain.models import Department, Staff
from staffctl.infrastructure.storage import CompanyStore
from staffctl.interaction.prompt import Prompter
from staffctl.services.company import CompanyService


class ScriptedIO:
    """LineIO fake: feeds scripted lines and records everything written.

    ``read_line`` returns None once the script is exhausted, which the
    prompter treats as end of input.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.style: str | None = None
        self.lines = list(lines)
        self.written: list[str] = []
        self.styled_writes: list[tuple[str | None, str]] = []

    def feed(self, *lines: str) -> None:
        self.lines.extend(lines)

    def read_line(self) -> str | None:
        if not self.lines:
            return None
        return self.lines.pop(0) + "\n"

    def write(self, text: str) -> None:
        self.written.append(text)
        self.styled_writes.append((self.style, text))

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    @property
    def output(self) -> str:
        return "".join(self.written)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def io() -> ScriptedIO:
    """Empty scripted console; tests feed lines as needed."""
    return ScriptedIO()


@pytest.fixture
def ui(io: ScriptedIO) -> Prompter:
    """Prompter bound to the scripted console."""
    return Prompter(io)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path for a company data file that does not exist yet."""
    return tmp_path / "staffctl.json"


@pytest.fixture
def company() -> Company:
    """Two departments, three staff; department 942 has no staff."""
    dev = Department(code=181, name="Dev")
    sales = Department(code=305, name="Sales")
    hr = Department(code=942, name="HR")
    return Company(
        [dev, sales, hr],
        [
            Staff(number=826, name="Taro", ruby="タロウ", department=dev),
            Staff(number=12, name="Hanako", ruby="ハナコ", department=sales),
            Staff(number=3, name="Jiro", ruby="ジロウ", department=dev),
        ],
    )


@pytest.fixture
def service(data_file: Path) -> CompanyService:
    """Autosaving service over an initially empty data file."""
    return CompanyService(CompanyStore(data_file))


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated data file.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_ui() -> Callable[..., tuple[Prompter, ScriptedIO]]:
    """Factory: ``make_ui("181", "Dev", "y")`` → ``(prompter, scripted_io)``."""

    def _make(*lines: str, **prompter_kwargs: Any) -> tuple[Prompter, ScriptedIO]:
        scripted = ScriptedIO(lines)
        return Prompter(scripted, **prompter_kwargs), scripted

    return _make
