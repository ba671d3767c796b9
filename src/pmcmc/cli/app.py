"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/cli/app.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pmcmc.config.errors import ConfigError
from pmcmc.config.load import dump_control, load_control
from pmcmc.config.schema import RunConfig
from pmcmc.services.control_service import summarize_control
from pmcmc.utils.logging import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Validate and inspect particle MCMC run controls.",
)
app.info.epilog = "Tip: run `pmcmc <command> --help` for details."
console = Console()
logger = logging.getLogger(__name__)

CONFIG_HELP = "Path to a YAML file with a pmcmc_control block."


@app.callback()
def main(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        envvar="PMCMC_LOG_LEVEL",
        help="Logging level (e.g., DEBUG, INFO, WARNING).",
    ),
) -> None:
    """Validate and inspect particle MCMC run controls."""
    configure_logging(log_level)


def _load_or_exit(config: Path) -> RunConfig:
    try:
        return load_control(config)
    except ConfigError as exc:
        console.print(f"[red]Invalid run control:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)


@app.command("validate", help="Check that a run control is valid.")
def validate(config: Path = typer.Argument(..., help=CONFIG_HELP, metavar="CONFIG", exists=True, dir_okay=False)) -> None:
    cfg = _load_or_exit(config)
    logger.debug("Loaded run control from %s", config)
    console.print(f"OK: {cfg.n_chains} chain(s) x {cfg.n_steps} steps on {cfg.n_workers} worker(s)")


@app.command("summary", help="Show the resolved run control and derived scheduling.")
def summary(config: Path = typer.Argument(..., help=CONFIG_HELP, metavar="CONFIG", exists=True, dir_okay=False)) -> None:
    cfg = _load_or_exit(config)
    table = Table(title="pmcmc control summary", header_style="bold")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in summarize_control(cfg).items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@app.command("resolve", help="Print or write the fully resolved run control as YAML.")
def resolve(
    config: Path = typer.Argument(..., help=CONFIG_HELP, metavar="CONFIG", exists=True, dir_okay=False),
    out: Path | None = typer.Option(None, "--out", "-o", help="Write resolved YAML here instead of stdout."),
) -> None:
    cfg = _load_or_exit(config)
    text = dump_control(cfg, out)
    if out is None:
        typer.echo(text, nl=False)
    else:
        console.print(f"Wrote resolved run control to {out}")
