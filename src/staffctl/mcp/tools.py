"""MCP tool definitions — 8 tools across 2 entity kinds.

Departments (4) and staff (4): list all, search, add, remove.
Each tool has a ``<name>_impl`` function testable without the mcp package.
``register_tools()`` wraps them with FastMCP decorators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from staffctl.services.company import CompanyService
    from staffctl.services.result import ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": result.error.code,
            "message": result.error.message,
        }
    return response


# ---------------------------------------------------------------------------
# Department tools (4)
# ---------------------------------------------------------------------------


def get_all_departments_impl(service: CompanyService) -> dict[str, Any]:
    """Get every department."""
    return _to_mcp_response(service.list_departments())


def search_departments_impl(service: CompanyService, search_text: str) -> dict[str, Any]:
    """Get departments matching a keyword."""
    return _to_mcp_response(service.search_departments(search_text))


def add_new_department_impl(service: CompanyService, code: int, name: str) -> dict[str, Any]:
    """Add a new department."""
    return _to_mcp_response(service.add_department(code, name))


def remove_department_with_code_impl(service: CompanyService, code: int) -> dict[str, Any]:
    """Remove the department with the given code."""
    return _to_mcp_response(service.remove_department(code))


# ---------------------------------------------------------------------------
# Staff tools (4)
# ---------------------------------------------------------------------------


def get_all_staffs_impl(service: CompanyService) -> dict[str, Any]:
    """Get every staff member."""
    return _to_mcp_response(service.list_staffs())


def search_staffs_impl(service: CompanyService, search_text: str) -> dict[str, Any]:
    """Get staff members matching a keyword."""
    return _to_mcp_response(service.search_staffs(search_text))


def add_new_staff_impl(
    service: CompanyService,
    number: int,
    name: str,
    ruby: str,
    department_code: int,
) -> dict[str, Any]:
    """Add a new staff member."""
    return _to_mcp_response(service.add_staff(number, name, ruby, department_code))


def remove_staff_with_number_impl(service: CompanyService, number: int) -> dict[str, Any]:
    """Remove the staff member with the given number."""
    return _to_mcp_response(service.remove_staff(number))


# ---------------------------------------------------------------------------
# Registration: FastMCP decorators over the _impl functions
# ---------------------------------------------------------------------------


def register_tools(server: Any, service: CompanyService) -> None:
    """Register all 8 MCP tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def get_all_departments() -> dict[str, Any]:
        """Get information on every department."""
        return get_all_departments_impl(service)

    @server.tool()  # type: ignore[untyped-decorator]
    def search_departments(search_text: str) -> dict[str, Any]:
        """Get departments whose name contains the keyword or whose code equals it."""
        return search_departments_impl(service, search_text)

    @server.tool()  # type: ignore[untyped-decorator]
    def add_new_department(code: int, name: str) -> dict[str, Any]:
        """Add a new department (code 100-999, name 1-30 characters)."""
        return add_new_department_impl(service, code, name)

    @server.tool()  # type: ignore[untyped-decorator]
    def remove_department_with_code(code: int) -> dict[str, Any]:
        """Remove the department with this code. Fails while staff are assigned."""
        return remove_department_with_code_impl(service, code)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_all_staffs() -> dict[str, Any]:
        """Get information on every staff member."""
        return get_all_staffs_impl(service)

    @server.tool()  # type: ignore[untyped-decorator]
    def search_staffs(search_text: str) -> dict[str, Any]:
        """Get staff matching the keyword by name, number, or department."""
        return search_staffs_impl(service, search_text)

    @server.tool()  # type: ignore[untyped-decorator]
    def add_new_staff(number: int, name: str, ruby: str, department_code: int) -> dict[str, Any]:
        """Add a new staff member (number 1-9999) to an existing department."""
        return add_new_staff_impl(service, number, name, ruby, department_code)

    @server.tool()  # type: ignore[untyped-decorator]
    def remove_staff_with_number(number: int) -> dict[str, Any]:
        """Remove the staff member with this number."""
        return remove_staff_with_number_impl(service, number)
