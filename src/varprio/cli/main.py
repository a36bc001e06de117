"""CLI entry point.

Usage:
    varprio normalize 118887583 TCAAAA TCAAAACAAAA
    varprio ceilings --mode autosomal_recessive
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from varprio.config import config
from varprio.exceptions import InvalidAlleleError
from varprio.models.inheritance import InheritanceModeOptions, ModeOfInheritance, SubModeOfInheritance
from varprio.normalization.normalizer import normalize

app = typer.Typer(
    name="varprio",
    help="Allele normalisation and inheritance-mode settings",
    no_args_is_help=True,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose or config.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


@app.command("normalize")
def normalize_cmd(
    position: int = typer.Argument(help="1-based position of the first REF base"),
    ref: str = typer.Argument(help="Reference allele"),
    alt: str = typer.Argument(help="Alternate allele"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print the minimised representation of an allele."""
    setup_logging(verbose)
    try:
        allele = normalize(position, ref, alt)
    except InvalidAlleleError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"{allele.position}\t{allele.ref}\t{allele.alt}", markup=False, highlight=False)
    if allele.is_symbolic():
        console.print("[yellow]symbolic allele, not trimmed[/yellow]")


@app.command("ceilings")
def ceilings_cmd(
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="Restrict to one mode of inheritance"),
) -> None:
    """Show the population-frequency ceilings applied per inheritance sub-mode."""
    options = config.inheritance.to_options()
    if mode is not None:
        try:
            selected = ModeOfInheritance(mode)
        except ValueError:
            valid = ", ".join(m.value for m in ModeOfInheritance)
            console.print(f"[red]Error: Invalid mode: {mode}. Use one of {valid}.[/red]")
            raise typer.Exit(1)
        if selected != ModeOfInheritance.ANY:
            options = InheritanceModeOptions.of({
                sub_mode: freq for sub_mode, freq in options.max_freqs.items() if sub_mode.mode == selected
            })

    table = Table(title="Maximum allele frequency (%)")
    table.add_column("Sub-mode")
    table.add_column("Mode")
    table.add_column("Max freq", justify="right")
    for sub_mode in SubModeOfInheritance:
        if sub_mode in options.defined_sub_modes:
            table.add_row(sub_mode.value, sub_mode.mode.value, f"{options.max_freq_for_sub_mode(sub_mode):g}")
    console.print(table)


if __name__ == "__main__":
    app()
