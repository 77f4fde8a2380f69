"""FastMCP server setup.

Optional extra — guarded behind try/except ImportError.
Transport: stdio default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from staffctl.config.settings import StaffSettings

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]


def create_server(
    *,
    settings: StaffSettings | None = None,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> Any:
    """Create and configure the MCP server.

    Binds a :class:`CompanyService` to the data file named by *settings*
    (or discovered from CWD) and registers all tools and resources.
    Every successful mutation saves the file. Returns the FastMCP instance.

    *host* and *port* configure the bind address for HTTP transports
    (sse, streamable-http). They are ignored when using stdio.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install staffctl[mcp]"
        raise RuntimeError(msg)

    from staffctl.config.settings import StaffSettings
    from staffctl.infrastructure.storage import CompanyStore
    from staffctl.mcp.resources import register_resources
    from staffctl.mcp.tools import register_tools
    from staffctl.services.company import CompanyService

    settings = settings or StaffSettings.from_cli()
    service = CompanyService(CompanyStore(settings.data_path), autosave=True)

    server = _FastMCP("staffctl", host=host, port=port)

    register_tools(server, service)
    register_resources(server, service, settings)

    return server
