"""Human-readable rendering of ServiceResult with Rich.

Every renderer prints into a StringIO-backed console from
:func:`create_console`; :func:`render_result` returns the captured text.
Ops without a dedicated renderer print their data as ``key: value`` lines.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from scaffoldctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from scaffoldctl.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console", bool], None]

# Value styles by field name; anything unlisted is printed plain.
_VALUE_STYLES = {
    "name": "sc.name",
    "framework": "sc.name",
    "label": "sc.label",
    "path": "sc.path",
    "project_root": "sc.path",
}

# (threshold in ms, style) pairs, slowest first.
_TIMING_STYLES = ((1000.0, "bold red"), (100.0, "yellow"))


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal.

    No ANSI codes are produced when output is not a TTY (pipes, CliRunner).
    """
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_generic)(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """The ``--quiet`` form: a project root, one identifier per line, or a status."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"
    data = result.data
    if result.op == "build_project" and data.get("project_root"):
        return str(data["project_root"])
    names = data.get("frameworks")
    if isinstance(names, list) and names:
        return "\n".join(map(str, names))
    return f"OK: {result.op}"


def _headline(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sc.ok"), Text(f"  {result.op}", style="sc.op"), sep="")


def _kv(console: Console, key: str, value: Any) -> None:
    line = Text(f"  {key}: ", style="sc.key")
    line.append(str(value), style=_VALUE_STYLES.get(key, ""))
    console.print(line)


def _timing_style(duration_ms: float) -> str:
    for threshold, style in _TIMING_STYLES:
        if duration_ms > threshold:
            return style
    return "dim"


def _span_label(span: dict[str, Any]) -> Text:
    duration = float(span.get("duration_ms", 0.0))
    label = Text(f"{duration:>8.2f}ms", style=_timing_style(duration))
    label.append(f"  {span.get('name', '?')}")
    notes = span.get("annotations") or {}
    if notes:
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    return label


def _span_tree(span: dict[str, Any], parent: Tree | None = None) -> Tree:
    label = _span_label(span)
    node = Tree(label, guide_style="dim") if parent is None else parent.add(label)
    for child in span.get("children", []):
        _span_tree(child, node)
    return node


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            console.print(_span_tree(value))
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    line = Text("ERROR", style="sc.error")
    line.append(f"  {result.op}", style="sc.op")
    line.append(f": {error.message if error else 'Unknown error'}")
    console.print(line)
    if verbose and error and error.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            console.print(Text(f"    {key}: {value}"))


def _render_build(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _headline(console, result)
    if "message" in data:
        console.print(Text(f"  {data['message']}"))
    for key in ("framework", "project_root", "file_count"):
        if key in data:
            _kv(console, key, data[key])
    if not verbose:
        return
    for path in data.get("files", []):
        console.print(Text(f"    {path}", style="sc.path"))
    _render_meta(console, result)


def _render_frameworks(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    names: list[str] = data.get("frameworks", [])
    _headline(console, result)
    groups: dict[str, list[str]] = data.get("groups") or {}
    if not groups:
        for name in names:
            console.print(Text(f"  {name}", style="sc.name"))
    for category, members in groups.items():
        console.print()
        console.print(Text(f"  {category}", style="sc.category"))
        for name in members:
            console.print(Text(f"    - {name}", style="sc.name"))
    console.print()
    _kv(console, "count", data.get("count", len(names)))


def _options_table(options: list[dict[str, Any]], verbose: bool) -> Table:
    table = Table(pad_edge=False)
    table.add_column("Option", style="sc.name", no_wrap=True)
    table.add_column("Type")
    table.add_column("Default", style="sc.default")
    table.add_column("Choices")
    if verbose:
        table.add_column("Description", style="dim")
    for option in options:
        cells = [
            str(option.get("key", "")),
            str(option.get("type", "")),
            json.dumps(option.get("default")),
            ", ".join(map(str, option.get("choices", []))),
        ]
        if verbose:
            cells.append(str(option.get("description", "")))
        table.add_row(*cells)
    return table


def _render_describe(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _headline(console, result)
    for key in ("name", "label", "category"):
        if key in data:
            _kv(console, key, data[key])
    if data.get("aliases"):
        _kv(console, "aliases", ", ".join(data["aliases"]))
    if data.get("options"):
        console.print()
        console.print(_options_table(data["options"], verbose))
    presets: dict[str, dict[str, Any]] = data.get("presets") or {}
    if presets:
        console.print()
        console.print(Text("  presets:", style="sc.key"))
    for alias, values in presets.items():
        pinned = ", ".join(f"{k}={json.dumps(v)}" for k, v in values.items())
        console.print(Text(f"    {alias}: {pinned}"))


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict | list):
            value = json.dumps(value, separators=(",", ":"))
        _kv(console, key, value)
    if verbose:
        _render_meta(console, result)


_RENDERERS: dict[str, _Renderer] = {
    "build_project": _render_build,
    "list_frameworks": _render_frameworks,
    "describe_framework": _render_describe,
}
