"""Root CLI group for staffctl with global flags and command registration."""

from __future__ import annotations

import click

from staffctl import __version__
from staffctl.commands import register_commands
from staffctl.commands._context import AppContext
from staffctl.config.settings import StaffSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="staffctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored console output.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-f",
    "--data-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Company data file (default: [data] file, else staffctl.json).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_color: bool,
    config_path: str | None,
    data_file: str | None,
) -> None:
    """staffctl — staff and department manager."""
    ctx.ensure_object(dict)
    settings = StaffSettings.from_cli(
        config_path=config_path,
        data_file=data_file,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_color=no_color,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
