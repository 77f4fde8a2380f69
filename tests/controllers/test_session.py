"""Tests for the interactive session lifecycle."""

from __future__ import annotations

from pathlib import Path

from staffctl.controllers.session import InteractiveSession
from staffctl.domain.company import Company
from staffctl.domain.models import Department, Staff
from staffctl.infrastructure.storage import load_company, save_company


class TestInteractiveSession:
    def test_exit_saves_and_returns_zero(self, make_ui, data_file: Path) -> None:
        ui, io = make_ui("x")
        assert InteractiveSession(ui, data_file).run() == 0
        assert "<<staffctl>>" in io.output
        assert data_file.is_file()

    def test_changes_persist(self, make_ui, data_file: Path) -> None:
        ui, _ = make_ui("e", "181", "Dev", "y", "y", "a", "826", "Taro", "タロウ", "181", "y", "y", "x")
        assert InteractiveSession(ui, data_file).run() == 0
        loaded = load_company(data_file)
        assert loaded.find_department(181) is not None
        assert [s.number for s in loaded.get_staffs("181")] == [826]

    def test_end_of_input_still_saves(self, make_ui, data_file: Path) -> None:
        ui, _ = make_ui("e", "181", "Dev", "y", "y")
        assert InteractiveSession(ui, data_file).run() == 0
        assert load_company(data_file).find_department(181) is not None

    def test_loads_existing_file(self, make_ui, data_file: Path, company: Company) -> None:
        save_company(company, data_file)
        ui, io = make_ui("s", "x")
        assert InteractiveSession(ui, data_file).run() == 0
        assert "Taro(タロウ)" in io.output

    def test_lists_names_that_look_like_markup(self, make_ui, data_file: Path) -> None:
        dev = Department(code=181, name="[bold]Dev")
        company = Company([dev], [Staff(number=826, name="Taro[/]", ruby="タロウ", department=dev)])
        save_company(company, data_file)
        ui, io = make_ui("s", "d", "x")
        assert InteractiveSession(ui, data_file).run() == 0
        assert "Taro[/](タロウ)" in io.output
        assert "[bold]Dev" in io.output

    def test_malformed_file_reports_error(self, make_ui, data_file: Path) -> None:
        data_file.write_text("{", encoding="utf-8")
        ui, io = make_ui("x")
        assert InteractiveSession(ui, data_file).run() == 1
        assert "[error] Cannot load" in io.output
        assert data_file.read_text(encoding="utf-8") == "{"

    def test_unwritable_target_reports_error(self, make_ui, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        ui, io = make_ui("x")
        assert InteractiveSession(ui, blocker / "company.json").run() == 1
        assert "[error] Cannot save" in io.output
