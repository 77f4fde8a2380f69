"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy store/service initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from staffctl.config.settings import StaffSettings
    from staffctl.infrastructure.storage import CompanyStore
    from staffctl.interaction.console import LineIO
    from staffctl.interaction.prompt import Prompter
    from staffctl.services.company import CompanyService
    from staffctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The data file is
    read lazily on first use so ``--help`` and ``--version`` never touch
    it.
    """

    def __init__(self, settings: StaffSettings) -> None:
        self.settings = settings
        self._store: CompanyStore | None = None

        # Configure structured logging
        from staffctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> CompanyStore:
        """The company store (created lazily on first access)."""
        if self._store is None:
            from staffctl.infrastructure.storage import CompanyStore

            self._store = CompanyStore(self.settings.data_path)
        return self._store

    @property
    def service(self) -> CompanyService:
        from staffctl.services.company import CompanyService

        return CompanyService(self.store)

    def prompter(self, io: LineIO | None = None) -> Prompter:
        """Build a Prompter over *io* (default: the terminal) from console settings."""
        from staffctl.interaction.console import TerminalIO
        from staffctl.interaction.prompt import Prompter

        console = self.settings.console
        return Prompter(
            io or TerminalIO(no_color=self.settings.no_color),
            cancel_token=console.cancel_token,
            error_header=console.error_header,
            separator=console.separator,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* per the output flags and exit 1 if it failed.

        Successful output goes to stdout. Failures and, outside JSON mode,
        warnings go to stderr.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        click.echo(format_result(result, settings=output_settings), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
        if output_settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
