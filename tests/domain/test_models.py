"""Tests for the Department and Staff entity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from staffctl.domain.models import Department, Staff, name_length_ok


class TestDepartment:
    def test_valid(self) -> None:
        d = Department(code=181, name="Dev")
        assert d.code == 181
        assert d.name == "Dev"

    @pytest.mark.parametrize("code", [100, 999])
    def test_code_bounds_inclusive(self, code: int) -> None:
        assert Department(code=code, name="X").code == code

    @pytest.mark.parametrize("code", [99, 1000, -181])
    def test_code_out_of_range(self, code: int) -> None:
        with pytest.raises(ValidationError):
            Department(code=code, name="X")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Department(code=181, name="")

    def test_name_of_31_characters_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Department(code=181, name="x" * 31)

    def test_frozen(self) -> None:
        d = Department(code=181, name="Dev")
        with pytest.raises(ValidationError):
            d.name = "Other"  # type: ignore[misc]

    def test_code_in_range(self) -> None:
        assert Department.code_in_range(100)
        assert not Department.code_in_range(1000)

    def test_value_equality(self) -> None:
        assert Department(code=181, name="Dev") == Department(code=181, name="Dev")


class TestStaff:
    def test_valid(self) -> None:
        dev = Department(code=181, name="Dev")
        s = Staff(number=826, name="Taro", ruby="タロウ", department=dev)
        assert s.department == dev
        assert s.ruby == "タロウ"

    @pytest.mark.parametrize("number", [0, 10000])
    def test_number_out_of_range(self, number: int) -> None:
        dev = Department(code=181, name="Dev")
        with pytest.raises(ValidationError):
            Staff(number=number, name="Taro", ruby="タロウ", department=dev)

    def test_empty_ruby_rejected(self) -> None:
        dev = Department(code=181, name="Dev")
        with pytest.raises(ValidationError):
            Staff(number=1, name="Taro", ruby="", department=dev)

    def test_number_in_range(self) -> None:
        assert Staff.number_in_range(1)
        assert Staff.number_in_range(9999)
        assert not Staff.number_in_range(0)


class TestNameLength:
    def test_bounds(self) -> None:
        assert not name_length_ok("")
        assert name_length_ok("a")
        assert name_length_ok("a" * 30)
        assert not name_length_ok("a" * 31)

    def test_counts_characters_not_bytes(self) -> None:
        assert name_length_ok("開" * 30)
