"""Click base classes that add an eager ``--examples`` flag.

``--help`` stays short; ``staffctl <cmd> --examples`` prints worked
invocations and exits. Pass ``examples=`` to any command or group declared
with these classes (group subcommands inherit :class:`StaffCommand`).
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


EXAMPLES_OPTION = click.Option(
    ["--examples"],
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_examples,
    help="Show usage examples.",
)


class _ExamplesMixin:
    """Stores ``examples`` and appends the shared option when present."""

    examples: str | None
    params: list[click.Parameter]

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(EXAMPLES_OPTION)


class StaffCommand(_ExamplesMixin, click.Command):
    """Command accepting an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class StaffGroup(_ExamplesMixin, click.Group):
    """Group accepting an ``examples`` keyword; its subcommands are StaffCommands."""

    command_class = StaffCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
