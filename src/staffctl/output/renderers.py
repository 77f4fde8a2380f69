"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from staffctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from staffctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # For list results, return keys only
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_key(item) for item in items if _extract_key(item))

    return f"OK: {result.op}"


def render_departments(items: list[dict[str, Any]], *, no_color: bool = False) -> str:
    """Render department items as a table sorted by code."""
    console = create_console(no_color=no_color)
    console.print(department_table(items))
    return get_output(console).rstrip("\n")


def render_staffs(items: list[dict[str, Any]], *, no_color: bool = False) -> str:
    """Render staff items as a table sorted by department code, then number."""
    console = create_console(no_color=no_color)
    console.print(staff_table(items))
    return get_output(console).rstrip("\n")


# ── Tables ────────────────────────────────────────────────────────────


def department_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of departments (``Code`` zero-padded to 3 digits)."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="staff.code", no_wrap=True)
    table.add_column("Name", style="staff.title")

    for item in sorted(items, key=lambda i: i["code"]):
        table.add_row(f"{item['code']:03d}", Text(str(item["name"])))
    return table


def staff_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of staff (``Number`` zero-padded to 4 digits).

    Names are user input, so cells are plain ``Text`` rather than markup.
    """
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Number", style="staff.number", no_wrap=True)
    table.add_column("Name", style="staff.title")
    table.add_column("Department")

    for item in sorted(items, key=lambda i: (i["department_code"], i["number"])):
        table.add_row(
            f"{item['number']:04d}",
            Text(f"{item['name']}({item['ruby']})"),
            Text(f"{item['department_name']}({item['department_code']})"),
        )
    return table


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_key(item: Any) -> str:
    """Extract the identity key from a department or staff item."""
    if isinstance(item, dict):
        for key in ("number", "code"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="staff.ok")
    op = Text(f"  {result.op}", style="staff.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="staff.key")
    if key == "code" or key.endswith("_code"):
        v = Text(str(value), style="staff.code")
    elif key == "number":
        v = Text(str(value), style="staff.number")
    elif key == "name":
        v = Text(str(value), style="staff.title")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="staff.error")
    op = Text(f"  {result.op}", style="staff.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/remove results."""
    _status_line(console, result)
    for key in ("number", "code", "name", "ruby", "department_code", "department_name"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_department_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    console.print(department_table(items))
    console.print(f"\n{result.data.get('count', len(items))} departments")


def _render_staff_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    console.print(staff_table(items))
    console.print(f"\n{result.data.get('count', len(items))} staffs")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add_department": _render_mutation,
    "remove_department": _render_mutation,
    "add_staff": _render_mutation,
    "remove_staff": _render_mutation,
    # Query
    "list_departments": _render_department_list,
    "search_departments": _render_department_list,
    "list_staffs": _render_staff_list,
    "search_staffs": _render_staff_list,
}
