"""MCP adapter — CompanyService exposed as FastMCP tools and resources."""
