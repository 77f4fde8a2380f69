"""Tests for the mnemonic-keyed menu."""

from __future__ import annotations

import pytest

from staffctl.interaction.command import SingleStepCommand
from staffctl.interaction.menu import Menu


class _Named(SingleStepCommand[None]):
    def __init__(self, ui, title: str) -> None:
        super().__init__(ui)
        self.title = title

    def run_feature(self, model: None) -> bool:
        return True


def _menu(ui) -> Menu[None]:
    return Menu(ui, [("s", _Named(ui, "Show")), ("a", _Named(ui, "Add")), ("x", _Named(ui, "Exit"))])


class TestConstruction:
    def test_empty_table_rejected(self, make_ui) -> None:
        ui, _ = make_ui()
        with pytest.raises(ValueError, match="at least one"):
            Menu(ui, [])

    def test_multi_character_mnemonic_rejected(self, make_ui) -> None:
        ui, _ = make_ui()
        with pytest.raises(ValueError, match="single character"):
            Menu(ui, [("sh", _Named(ui, "Show"))])

    def test_duplicate_mnemonic_rejected(self, make_ui) -> None:
        ui, _ = make_ui()
        with pytest.raises(ValueError, match="Duplicate"):
            Menu(ui, [("s", _Named(ui, "Show")), ("S", _Named(ui, "Search"))])

    def test_registration_order_preserved(self, make_ui) -> None:
        ui, _ = make_ui()
        menu = _menu(ui)
        assert menu.mnemonics == "sax"
        assert [c.title for c in menu.commands] == ["Show", "Add", "Exit"]
        assert menu.items_line() == "(s)Show, (a)Add, (x)Exit"


class TestSelect:
    def test_select_by_mnemonic(self, make_ui) -> None:
        ui, _ = make_ui("a")
        assert _menu(ui).select("Pick").title == "Add"

    def test_select_case_insensitive(self, make_ui) -> None:
        ui, _ = make_ui("X")
        assert _menu(ui).select("Pick").title == "Exit"

    def test_unknown_mnemonic_reprompts(self, make_ui) -> None:
        ui, _ = make_ui("q", "s")
        assert _menu(ui).select("Pick").title == "Show"

    def test_cancel_returns_none(self, make_ui) -> None:
        ui, _ = make_ui("/")
        assert _menu(ui).select("Pick") is None

    def test_prompt_frames_items_with_separators(self, make_ui) -> None:
        ui, io = make_ui("s")
        _menu(ui).select("Pick")
        items = "(s)Show, (a)Add, (x)Exit"
        line = "-" * len(items)
        assert io.written[0] == f"{line}\n{items}\n{line}\nPick:"
