"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, staffctl.toml only contains
overrides. A fresh setup needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- staffctl.toml sections ---


class DataConfig(BaseModel):
    """[data] section."""

    model_config = {"frozen": True}

    file: str = "staffctl.json"


class ConsoleConfig(BaseModel):
    """[console] section."""

    model_config = {"frozen": True}

    cancel_token: str = Field(default="/", min_length=1)
    error_header: str = "[error]"
    separator: str = Field(default="-", min_length=1, max_length=1)
    title_width: int = Field(default=80, ge=1)


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
