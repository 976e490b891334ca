"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
every service op has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from surveyctl.output.console import create_console, format_money, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from surveyctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "analyze":
        outliers = result.data.get("outliers", {})
        return (
            f"OK: analyze collected={result.data.get('collected', 0)} "
            f"filtered={result.data.get('filtered', 0)} "
            f"outliers={outliers.get('outlier_count', 0)}"
        )
    if "count" in result.data:
        return f"OK: {result.op} count={result.data['count']}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="survey.ok")
    op = Text(f"  {result.op}", style="survey.op")
    console.print(label, op, end="")
    console.print()


def _section(console: Console, title: str) -> None:
    console.print()
    console.print(Text(title, style="survey.section"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="survey.key")
    if key == "city":
        v = Text(str(value), style="survey.city")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _statistics_table(rows: list[tuple[str, dict[str, Any]]]) -> Table:
    """One row per label with min/max/avg/std income columns."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Scope", style="survey.name")
    table.add_column("Min", style="survey.money", justify="right")
    table.add_column("Max", style="survey.money", justify="right")
    table.add_column("Avg", style="survey.money", justify="right")
    table.add_column("Std", justify="right")
    for label, stats in rows:
        table.add_row(
            label,
            format_money(stats.get("min", 0)),
            format_money(stats.get("max", 0)),
            format_money(round(stats.get("avg", 0.0), 2)),
            f"{stats.get('std', 0.0):,.2f}",
        )
    return table


def _records_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="survey.name")
    table.add_column("Age", justify="right")
    table.add_column("City", style="survey.city")
    table.add_column("Income", style="survey.money", justify="right")
    for item in items:
        table.add_row(
            f"{item.get('first_name', '')} {item.get('last_name', '')}",
            str(item.get("age", "")),
            str(item.get("city", "")),
            format_money(item.get("monthly_income", 0)),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="survey.error")
    op = Text(f"  {result.op}", style="survey.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_analyze(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the full pipeline report: collection, groups, statistics, outliers."""
    d = result.data
    params = d.get("params", {})
    _status_line(console, result)

    _section(console, "Data collection")
    _field(console, "city", params.get("city", ""))
    _field(console, "skipped", params.get("skip", 0))
    _field(console, "collected", f"{d.get('collected', 0)} of {params.get('limit', 0)}")

    _section(console, "Age filtering")
    _field(console, "age range", f"{params.get('min_age')}-{params.get('max_age')} years")
    _field(console, "remaining", d.get("filtered", 0))

    _section(console, "Grouping by first name")
    _field(console, "groups", d.get("group_count", 0))
    top_groups = d.get("top_groups", [])
    for group in top_groups:
        console.print(f"    {group['name']}: {group['size']} persons")

    _section(console, "Income statistics")
    rows: list[tuple[str, dict[str, Any]]] = [("all", d.get("statistics", {}))]
    if verbose:
        rows.extend((g["name"], g["statistics"]) for g in top_groups)
    console.print(_statistics_table(rows))

    _section(console, "Outlier analysis (IQR)")
    outliers = d.get("outliers", {})
    _field(console, "normal", outliers.get("normal_count", 0))
    console.print(
        Text("  outliers: ", style="survey.key"),
        Text(str(outliers.get("outlier_count", 0)), style="survey.outlier"),
    )
    _field(console, "percentage", f"{outliers.get('percentage', 0.0):.2f}%")
    if outliers.get("iqr") is not None:
        _field(console, "q1 / q3", f"{outliers['q1']:,.0f} / {outliers['q3']:,.0f}")
        _field(console, "fences", f"[{outliers['lower']:,.1f}, {outliers['upper']:,.1f}]")

    _section(console, "Sample of collected data")
    sample = d.get("sample", [])
    if sample:
        console.print(_records_table(sample))
    else:
        console.print("  No data found")

    if verbose:
        _render_meta(console, result)


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render generated records as a table."""
    items = result.data.get("items", [])
    console.print(_records_table(items))
    console.print(f"\n{result.data.get('count', len(items))} records")
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "analyze": _render_analyze,
    "generate": _render_generate,
}
