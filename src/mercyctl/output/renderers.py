"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; :func:`render_result`
returns the captured text. Renderers are picked by ``result.op`` and
unknown ops fall back to a key-value listing.

Transform output is printed as :class:`rich.text.Text`, never as markup,
so brackets in dumps and defanged URLs survive untouched.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from mercyctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from mercyctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare output for ``--quiet``: the transform text or the sentinel."""
    return result.output


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    parts = [Text("OK", style="mercy.ok"), Text(f"  {result.op}", style="mercy.op")]
    protocol = result.data.get("protocol")
    if protocol:
        parts.append(Text(f"  {protocol}", style="mercy.protocol"))
    console.print(*parts, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="mercy.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, telemetry spans as an indented tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="mercy.error"),
        Text(f"  {result.op}", style="mercy.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Transform renderers ───────────────────────────────────────────────


def _render_text(result: ServiceResult, console: Console) -> None:
    """decode / encode / hash / info: status line, then the output verbatim."""
    _status_line(console, result)
    console.print(Text(str(result.data.get("output", ""))), soft_wrap=True)


def _render_hexdump(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for row in str(result.data.get("output", "")).splitlines():
        offset, _, rest = row.partition("  ")
        line = Text(offset, style="mercy.offset")
        if rest:
            line.append(f"  {rest}")
        console.print(line, soft_wrap=True)


def _render_mutate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    candidates = result.data.get("candidates", [])
    if not candidates:
        console.print(Text("  no candidates", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Domain", style="mercy.domain", no_wrap=True)
    table.add_column("Extension", style="mercy.extension")
    for index, item in enumerate(candidates, start=1):
        table.add_row(str(index), str(item.get("domain", "")), str(item.get("extension") or ""))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(candidates))} candidates")


def _render_catalog(result: ServiceResult, console: Console) -> None:
    table = Table(title="mercyctl methods", show_header=True, show_lines=True, expand=False)
    table.add_column("Method(s)", style="mercy.op", no_wrap=True)
    table.add_column("Alias(es)", style="dim")
    table.add_column("Protocol(s)", style="mercy.protocol")
    for entry in result.data.get("methods", []):
        table.add_row(
            str(entry.get("method", "")),
            ", ".join(entry.get("aliases", [])),
            "\n".join(entry.get("protocols", [])),
        )
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "decode": _render_text,
    "encode": _render_text,
    "hash": _render_text,
    "info": _render_text,
    "hexdump": _render_hexdump,
    "mutate": _render_mutate,
    "catalog": _render_catalog,
}
