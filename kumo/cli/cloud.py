"""Ichimoku commands for the Kumo CLI.

Generates candles, runs them through the Ichimoku engine and displays
the resulting lines.
"""

import random
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kumo.cli.config import (
    CONFIG_PATH,
    create_template_config,
    generator_from_config,
    load_config,
    parameters_from_config,
)
from kumo.data import generate_candles, revise_candle
from kumo.indicators import IchimokuCloud
from kumo.models import Candle, CandleState, IchimokuResult, TimeFrame

console = Console()

VALID_TIMEFRAMES = [tf.value for tf in TimeFrame]

# Rows shown unless --all is given
DISPLAY_ROWS = 20


def _error(message: str) -> None:
    console.print(Panel(
        message,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _setup(
    ctx: click.Context,
    count: Optional[int],
    seed: Optional[int],
    timeframe: Optional[str],
    short: Optional[int],
    medium: Optional[int],
    long: Optional[int],
) -> tuple[IchimokuCloud, list[Candle]]:
    """Build the engine and the candle history from config and options."""
    config_path = (ctx.obj or {}).get("config_path")
    config = load_config(Path(config_path) if config_path else None)

    try:
        parameters = parameters_from_config(
            config, short_period=short, medium_period=medium, long_period=long
        )
    except ValidationError as e:
        _error(f"[red]Invalid Ichimoku parameters:[/red]\n\n{e}")

    try:
        settings = generator_from_config(config, count=count, seed=seed, timeframe=timeframe)
    except ValidationError as e:
        _error(f"[red]Cannot generate candles:[/red]\n\n{e}")

    candles = generate_candles(
        settings.count, seed=settings.seed, time_frame=settings.timeframe
    )

    return IchimokuCloud(parameters), candles


def _result_cells(result: Optional[IchimokuResult]) -> list[str]:
    if result is None:
        return ["[dim]-[/dim]"] * 5

    cloud_color = "green" if result.senkou_span_a >= result.senkou_span_b else "red"
    return [
        f"{result.tenkan_sen:.8f}",
        f"{result.kijun_sen:.8f}",
        f"[{cloud_color}]{result.senkou_span_a:.8f}[/{cloud_color}]",
        f"[{cloud_color}]{result.senkou_span_b:.8f}[/{cloud_color}]",
        f"{result.chikou_span:.8f}",
    ]


def _results_table(title: str, first_column: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")

    table.add_column(first_column, style="dim")
    table.add_column("Close", justify="right")
    table.add_column("Tenkan-sen", justify="right")
    table.add_column("Kijun-sen", justify="right")
    table.add_column("Senkou A", justify="right")
    table.add_column("Senkou B", justify="right")
    table.add_column("Chikou", justify="right")

    return table


# Shared options for commands that generate candles
def _candle_options(func):
    options = [
        click.option("-n", "--count", type=int, default=None,
                     help="Number of candles to generate (default: 256)"),
        click.option("-s", "--seed", type=int, default=None,
                     help="Random seed for reproducible candles"),
        click.option("-t", "--timeframe", type=click.Choice(VALID_TIMEFRAMES), default=None,
                     help="Candle timeframe (default: 1min)"),
        click.option("--short", type=int, default=None, help="Tenkan-sen period (default: 9)"),
        click.option("--medium", type=int, default=None, help="Kijun-sen period (default: 26)"),
        click.option("--long", "long_", type=int, default=None,
                     help="Senkou Span B period (default: 52)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command()
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a template configuration file.

    \b
    Examples:
      kumo init
      kumo --config ./kumo.toml init --force
    """
    config_path = (ctx.obj or {}).get("config_path")
    path = Path(config_path) if config_path else CONFIG_PATH

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at[/yellow] [cyan]{path}[/cyan]")
        console.print("[dim]Use --force to overwrite it.[/dim]")
        return

    written = create_template_config(path)
    console.print(f"[green]✓[/green] Wrote config template to [cyan]{written}[/cyan]")


@click.command()
@_candle_options
@click.option("-a", "--all", "show_all", is_flag=True, help="Show every candle")
@click.pass_context
def cloud(
    ctx: click.Context,
    count: Optional[int],
    seed: Optional[int],
    timeframe: Optional[str],
    short: Optional[int],
    medium: Optional[int],
    long_: Optional[int],
    show_all: bool,
) -> None:
    """Calculate the Ichimoku Cloud over generated candles.

    Results start once LONG candles have been processed.

    \b
    Examples:
      kumo cloud                       # 256 candles, 9/26/52
      kumo cloud --seed 7 -n 100       # Reproducible run
      kumo cloud --short 7 --medium 22 --long 44
    """
    engine, candles = _setup(ctx, count, seed, timeframe, short, medium, long_)
    results = engine.initialize(candles)

    params = engine.parameters
    table = _results_table(
        f"Ichimoku {params.short_period}/{params.medium_period}/{params.long_period} "
        f"({len(candles)} candles)",
        "Timestamp",
    )

    display = results if show_all else results[-DISPLAY_ROWS:]
    for candle, result in display:
        table.add_row(
            str(candle.timestamp) if candle.timestamp is not None else "-",
            f"{candle.close:.2f}",
            *_result_cells(result),
        )

    console.print(table)

    if len(results) > len(display):
        console.print(f"[dim]Showing last {len(display)} of {len(results)} candles[/dim]")
    console.print(f"Processed: [bold]{engine.processed}[/bold]")


@click.command()
@_candle_options
@click.option("-k", "--ticks", type=click.IntRange(min=0), default=5,
              help="Open revisions before the candle closes (default: 5)")
@click.pass_context
def live(
    ctx: click.Context,
    count: Optional[int],
    seed: Optional[int],
    timeframe: Optional[str],
    short: Optional[int],
    medium: Optional[int],
    long_: Optional[int],
    ticks: int,
) -> None:
    """Preview a forming candle, then commit it.

    Primes the engine with COUNT candles, then sends TICKS open revisions
    of the next candle (previews that do not change the engine state)
    followed by the closed candle.

    \b
    Examples:
      kumo live
      kumo live --ticks 10 --seed 3
    """
    engine, candles = _setup(ctx, count, seed, timeframe, short, medium, long_)
    engine.initialize(candles)

    rng = random.Random(seed)
    next_candle = generate_candles(
        1,
        seed=rng.randrange(2**32),
        time_frame=candles[-1].time_frame if candles else TimeFrame.ONE_MINUTE,
        start_timestamp=(
            candles[-1].timestamp + candles[-1].time_frame.seconds
            if candles and candles[-1].timestamp is not None
            else 0
        ),
        state=CandleState.OPEN,
    )[0]

    table = _results_table(f"Live candle @ {next_candle.timestamp}", "Tick")

    forming = next_candle
    for tick in range(1, ticks + 1):
        forming = revise_candle(forming, rng)
        result = engine.update(forming)
        table.add_row(f"open #{tick}", f"{forming.close:.2f}", *_result_cells(result))

    closed = forming.model_copy(update={"state": CandleState.CLOSED})
    result = engine.update(closed)
    table.add_row("[bold]closed[/bold]", f"{closed.close:.2f}", *_result_cells(result))

    console.print(table)
    console.print(f"Processed: [bold]{engine.processed}[/bold]")
