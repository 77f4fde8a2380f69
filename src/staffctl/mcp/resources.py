"""MCP resource definitions — read-only company context.

Each resource has a ``<name>_impl`` function testable without the mcp package.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from staffctl.config.settings import StaffSettings
    from staffctl.services.company import CompanyService


def overview_impl(service: CompanyService, settings: StaffSettings) -> dict[str, Any]:
    """Data file location plus department and staff counts."""
    departments = service.list_departments()
    staffs = service.list_staffs()
    return {
        "data_file": str(settings.data_path),
        "departments": departments.data.get("count", 0) if departments.ok else None,
        "staffs": staffs.data.get("count", 0) if staffs.ok else None,
    }


def register_resources(server: Any, service: CompanyService, settings: StaffSettings) -> None:
    """Register MCP resources on the FastMCP server."""

    @server.resource("staffctl://overview")  # type: ignore[untyped-decorator]
    def overview_resource() -> str:
        """Company overview with counts."""
        return json.dumps(overview_impl(service, settings), indent=2)
