"""Rich renderables for correlation results."""

import math

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from correlation.engine import Correlation, CorrelationResult


def fit_quality(r_squared: float) -> tuple[str, str]:
    """Classify fit strength. Returns (label, rich style)."""
    if math.isnan(r_squared):
        return "DEGENERATE", "red"
    if r_squared >= 0.9:
        return "STRONG", "green"
    elif r_squared >= 0.5:
        return "MODERATE", "yellow"
    else:
        return "WEAK", "red"


def _fmt(value: float, spec: str = ".6g") -> Text:
    if math.isnan(value) or math.isinf(value):
        return Text(str(value), style="bold red")
    return Text(f"{value:{spec}}")


def build_summary_table(corr: Correlation) -> Table:
    """Key/value table of the cached regression values."""
    res = corr.result()

    table = Table(show_header=False, box=None, padding=(0, 1), expand=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Samples", f"{res.count} / {res.size}")
    table.add_row("Mode", Text("RUNNING", style="bold cyan") if corr.get_running_correlation() else "FIXED")

    line = Text()
    line.append("Y = ")
    line.append_text(_fmt(res.a))
    line.append(" + ")
    line.append_text(_fmt(res.b))
    line.append(" · X")
    table.add_row("Fit", line)

    table.add_row("A", _fmt(res.a))
    table.add_row("B", _fmt(res.b))

    if corr.get_r2_calculation():
        table.add_row("R", _fmt(res.r, "+.4f"))
        table.add_row("R²", _fmt(res.r_squared, ".4f"))
    else:
        table.add_row("R", Text("off", style="dim"))
        table.add_row("R²", Text("off", style="dim"))

    if corr.get_e2_calculation():
        table.add_row("E²", _fmt(res.e_squared))
    else:
        table.add_row("E²", Text("off", style="dim"))

    table.add_row("Avg X", _fmt(res.avg_x))
    table.add_row("Avg Y", _fmt(res.avg_y))

    if res.count > 0:
        table.add_row("Min/Max X", f"{corr.get_min_x():.6g} / {corr.get_max_x():.6g}")
        table.add_row("Min/Max Y", f"{corr.get_min_y():.6g} / {corr.get_max_y():.6g}")
    else:
        table.add_row("Min/Max X", Text("---", style="dim"))
        table.add_row("Min/Max Y", Text("---", style="dim"))

    return table


def build_samples_table(corr: Correlation, limit: int | None = None) -> Table:
    """Stored samples with the fitted Y and residual for each slot."""
    table = Table(
        show_header=True,
        header_style="bold",
        box=box.SIMPLE,
        padding=(0, 1),
        expand=True
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Ŷ", justify="right", style="cyan")
    table.add_column("Residual", justify="right")

    n = corr.count()
    if limit is not None:
        n = min(n, limit)

    for i in range(n):
        x = corr.get_x(i)
        y = corr.get_y(i)
        est = corr.get_estimate_y(x)
        table.add_row(str(i), f"{x:.6g}", f"{y:.6g}", f"{est:.6g}", f"{y - est:+.4g}")

    return table


def build_status_panel(corr: Correlation, title: str = "Correlation") -> Panel:
    """Summary table with a fit-quality header, wrapped in a Panel."""
    res: CorrelationResult = corr.result()

    header = Text()
    if res.count == 0:
        header.append("○ NO DATA", style="bold red")
        border = "red"
    else:
        if corr.get_r2_calculation():
            label, style = fit_quality(res.r_squared)
        else:
            label, style = "R² OFF", "dim"
        header.append(f"● {label}", style=f"bold {style}")
        border = style if style != "dim" else "cyan"
        if res.stale:
            header.append("  (stale)", style="yellow")
    header.append("\n")

    body: RenderableType = Group(header, build_summary_table(corr))
    return Panel(body, title=f"[bold]{title}[/bold]", border_style=border)
