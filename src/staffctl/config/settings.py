"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs   — CLI flags passed by Click
  2. Env vars      — ``STAFFCTL_*``, nested sections joined with ``__``
                     (``STAFFCTL_CONSOLE__ERROR_HEADER``)
  3. TOML file     — ``staffctl.toml`` from :func:`find_config`
  4. Code defaults — the section models in :mod:`staffctl.config.models`

The TOML file is located before construction and handed to pydantic-settings'
:class:`TomlConfigSettingsSource` through a context variable, because
``settings_customise_sources`` is a classmethod with no access to init
arguments.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from staffctl.config.discovery import find_config
from staffctl.config.models import ConsoleConfig, DataConfig, McpConfig

_active_toml: ContextVar[Path | None] = ContextVar("staffctl_active_toml", default=None)


class StaffSettings(BaseSettings):
    """Settings for the staffctl CLI, interactive session, and MCP server.

    Frozen once built. Stored on
    :class:`~staffctl.commands._context.AppContext` at the CLI root.

    Attributes:
        root: Base directory for relative data paths (the directory holding
            ``staffctl.toml``, or CWD when there is none).
        config_path: The TOML file in effect, or None.
        data_file: Explicit data file override (``--data-file``).
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="STAFFCTL_",
        env_nested_delimiter="__",
    )

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    data_file: Path | None = None

    # Global CLI flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    # staffctl.toml sections
    data: DataConfig = Field(default_factory=DataConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @property
    def data_path(self) -> Path:
        """The company data file: ``data_file`` if set, else ``[data] file`` under *root*."""
        path = self.data_file if self.data_file is not None else Path(self.data.file)
        return path if path.is_absolute() else self.root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then the active TOML file."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        data_file: str | Path | None = None,
        **cli_flags: Any,
    ) -> StaffSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that is not a file means "no config".
        Otherwise ``staffctl.toml`` is discovered from *root* (or CWD).
        A relative *data_file* is taken relative to the current directory.

        Raises:
            click.ClickException: The TOML file is not valid TOML.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(root)

        if root is None:
            root = toml_path.parent if toml_path is not None else Path.cwd()

        if data_file is not None:
            cli_flags["data_file"] = Path(data_file).absolute()

        token = _active_toml.set(toml_path)
        try:
            return cls(root=root, config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _active_toml.reset(token)
