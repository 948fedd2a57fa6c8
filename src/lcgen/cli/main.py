"""
lcgen CLI

Command-line interface for the deterministic LCG.

Usage:
    lcgen generate      Print values from a range-confined generator
    lcgen raw           Print raw unsigned values (no range remapping)
    lcgen check         Sample a generator and report range containment
    lcgen config        Show effective settings
"""

import json
import logging
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lcgen import __version__
from lcgen.constants import CLI_COUNT_MAX
from lcgen.core.config import Settings, get_settings
from lcgen.core.models import LcgParams, OutputFormat, RawLcgParams, summarize
from lcgen.lcg import ConstructionError

logger = logging.getLogger(__name__)

# Create the main app
app = typer.Typer(
    name="lcgen",
    help="lcgen - Deterministic Linear Congruential Generator",
    add_completion=False,
)

# Console for rich output
console = Console()


# =============================================================================
# Helpers
# =============================================================================


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(code=1)


def _settings() -> Settings:
    """Load settings, reporting malformed LCGEN_* values as a CLI error."""
    try:
        return get_settings()
    except ValidationError as e:
        _fail(str(e))


def _lcg_params(
    start: Optional[int],
    end: Optional[int],
    multiplier: Optional[int],
    increment: Optional[int],
    seed: Optional[int],
) -> LcgParams:
    """Merge command-line overrides onto the configured defaults."""
    settings = _settings()
    return LcgParams(
        start=settings.range_start if start is None else start,
        end=settings.range_end if end is None else end,
        multiplier=settings.multiplier if multiplier is None else multiplier,
        increment=settings.increment if increment is None else increment,
        seed=settings.seed if seed is None else seed,
    )


def _emit(values: list[int], output: OutputFormat, title: str) -> None:
    if output == OutputFormat.JSON:
        typer.echo(json.dumps(values))
    elif output == OutputFormat.TABLE:
        table = Table(title=title)
        table.add_column("Step", style="cyan", justify="right")
        table.add_column("Value", style="green", justify="right")
        for index, value in enumerate(values, start=1):
            table.add_row(str(index), str(value))
        console.print(table)
    else:
        for value in values:
            typer.echo(value)


# =============================================================================
# Main Commands
# =============================================================================


@app.command()
def generate(
    start: Optional[int] = typer.Option(None, "--start", "-s", help="Range start (inclusive)"),
    end: Optional[int] = typer.Option(None, "--end", "-e", help="Range end (exclusive)"),
    multiplier: Optional[int] = typer.Option(None, "--multiplier", "-a", help="LCG multiplier"),
    increment: Optional[int] = typer.Option(None, "--increment", "-c", help="LCG increment"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Initial seed"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=0, max=CLI_COUNT_MAX, help="Values to print"),
    output: OutputFormat = typer.Option(OutputFormat.PLAIN, "--format", "-f", help="Output format"),
) -> None:
    """Print values from a range-confined generator.

    Unset options fall back to LCGEN_* settings.
    """
    try:
        params = _lcg_params(start, end, multiplier, increment, seed)
        generator = params.build()
    except (ValidationError, ConstructionError) as e:
        _fail(str(e))

    n = _settings().count if count is None else count
    logger.info(f"Generating {n} values over [{params.start}, {params.end})")
    _emit(generator.take(n), output, f"Lcg [{params.start}, {params.end})")


@app.command()
def raw(
    modulus: int = typer.Option(2**32, "--modulus", "-m", help="Modulus (exclusive state bound)"),
    multiplier: Optional[int] = typer.Option(None, "--multiplier", "-a", help="LCG multiplier"),
    increment: Optional[int] = typer.Option(None, "--increment", "-c", help="LCG increment"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Initial seed"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=0, max=CLI_COUNT_MAX, help="Values to print"),
    output: OutputFormat = typer.Option(OutputFormat.PLAIN, "--format", "-f", help="Output format"),
) -> None:
    """Print raw unsigned values with no range remapping."""
    settings = _settings()
    try:
        params = RawLcgParams(
            modulus=modulus,
            multiplier=settings.multiplier if multiplier is None else multiplier,
            increment=settings.increment if increment is None else increment,
            seed=settings.seed if seed is None else seed,
        )
    except ValidationError as e:
        _fail(str(e))

    n = settings.count if count is None else count
    _emit(params.build().take(n), output, f"RawLcg mod {params.modulus}")


@app.command()
def check(
    start: Optional[int] = typer.Option(None, "--start", "-s", help="Range start (inclusive)"),
    end: Optional[int] = typer.Option(None, "--end", "-e", help="Range end (exclusive)"),
    multiplier: Optional[int] = typer.Option(None, "--multiplier", "-a", help="LCG multiplier"),
    increment: Optional[int] = typer.Option(None, "--increment", "-c", help="LCG increment"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Initial seed"),
    count: int = typer.Option(5000, "--count", "-n", min=0, max=CLI_COUNT_MAX, help="Steps to sample"),
) -> None:
    """Sample a generator and report whether every value stayed in range."""
    try:
        params = _lcg_params(start, end, multiplier, increment, seed)
        report = summarize(params, count)
    except (ValidationError, ConstructionError) as e:
        _fail(str(e))

    table = Table(title="Sequence Report")
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    table.add_row("Range", f"[{params.start}, {params.end})")
    table.add_row("Parameters", f"a={params.multiplier} c={params.increment} seed={params.seed}")
    table.add_row("Steps", str(report.count))
    table.add_row("Observed min", str(report.observed_min))
    table.add_row("Observed max", str(report.observed_max))
    table.add_row("Distinct values", str(report.distinct_count))
    table.add_row("Final seed", str(report.final_seed))
    table.add_row(
        "Containment",
        "[green]✓ All in range[/green]"
        if report.all_in_range
        else f"[red]✗ {report.out_of_range_count} out of range[/red]",
    )

    console.print(table)
    if not report.all_in_range:
        raise typer.Exit(code=1)


@app.command()
def config() -> None:
    """Show effective settings (LCGEN_* environment and .env)."""
    settings = _settings()

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Env var", style="dim")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(value), f"LCGEN_{name.upper()}")

    console.print(table)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: LCGEN_LOG_LEVEL)"),
) -> None:
    """lcgen - Deterministic Linear Congruential Generator."""
    level = getattr(logging, (log_level or _settings().log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level)
    logging.getLogger("lcgen").setLevel(level)

    if version:
        console.print(f"lcgen version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print()
        console.print(
            Panel.fit(
                "[bold blue]lcgen[/bold blue]\n"
                "[dim]Deterministic Linear Congruential Generator[/dim]\n\n"
                f"Version {__version__}",
                border_style="blue",
            )
        )
        console.print()
        console.print("Use [cyan]lcgen --help[/cyan] for available commands.")
        console.print()


if __name__ == "__main__":
    app()
