"""Tests for the Company aggregate."""

from __future__ import annotations

from staffctl.domain.company import DEFAULT_VERSION, Company
from staffctl.domain.models import Department, Staff


class TestConstruction:
    def test_empty_company(self) -> None:
        c = Company()
        assert c.version == DEFAULT_VERSION
        assert c.departments == ()
        assert c.staffs == ()

    def test_collections_are_read_only_views(self, company: Company) -> None:
        assert isinstance(company.departments, tuple)
        assert isinstance(company.staffs, tuple)

    def test_equality(self, company: Company) -> None:
        clone = Company(company.departments, company.staffs, version=company.version)
        assert clone == company
        assert Company() != company


class TestSearch:
    def test_empty_search_returns_everything(self, company: Company) -> None:
        assert len(company.get_departments("")) == 3
        assert len(company.get_staffs("")) == 3

    def test_department_by_name_substring(self, company: Company) -> None:
        assert [d.code for d in company.get_departments("al")] == [305]

    def test_department_by_exact_code(self, company: Company) -> None:
        assert [d.code for d in company.get_departments("942")] == [942]

    def test_department_code_is_not_substring_matched(self, company: Company) -> None:
        assert company.get_departments("94") == []

    def test_staff_by_name(self, company: Company) -> None:
        assert [s.number for s in company.get_staffs("Han")] == [12]

    def test_staff_by_exact_number(self, company: Company) -> None:
        assert [s.number for s in company.get_staffs("826")] == [826]

    def test_staff_number_is_not_substring_matched(self, company: Company) -> None:
        assert company.get_staffs("82") == []

    def test_staff_by_department_name(self, company: Company) -> None:
        assert sorted(s.number for s in company.get_staffs("Dev")) == [3, 826]

    def test_staff_by_department_code(self, company: Company) -> None:
        assert sorted(s.number for s in company.get_staffs("181")) == [3, 826]

    def test_no_match(self, company: Company) -> None:
        assert company.get_staffs("nobody") == []


class TestMutation:
    def test_add_and_find_department(self) -> None:
        c = Company()
        c.add_department(Department(code=181, name="Dev"))
        found = c.find_department(181)
        assert found is not None
        assert found.name == "Dev"

    def test_remove_unused_department(self, company: Company) -> None:
        assert company.remove_department(942) is True
        assert company.find_department(942) is None

    def test_remove_department_in_use_refused(self, company: Company) -> None:
        before = company.departments
        assert company.is_department_in_use(181)
        assert company.remove_department(181) is False
        assert company.departments == before

    def test_remove_unknown_department(self, company: Company) -> None:
        assert company.remove_department(777) is False

    def test_remove_staff(self, company: Company) -> None:
        assert company.remove_staff(826) is True
        assert company.find_staff(826) is None
        assert len(company.staffs) == 2

    def test_remove_unknown_staff(self, company: Company) -> None:
        assert company.remove_staff(4444) is False

    def test_department_freed_after_last_staff_removed(self, company: Company) -> None:
        company.remove_staff(12)
        assert not company.is_department_in_use(305)
        assert company.remove_department(305) is True


class TestEndToEnd:
    def test_add_search_remove_scenario(self) -> None:
        c = Company()
        dev = Department(code=181, name="Dev")
        c.add_department(dev)
        c.add_staff(Staff(number=826, name="Taro", ruby="タロウ", department=dev))

        assert [s.number for s in c.get_staffs("181")] == [826]
        assert c.remove_department(181) is False
        assert c.remove_staff(826) is True
        assert c.remove_department(181) is True
        assert c == Company()
