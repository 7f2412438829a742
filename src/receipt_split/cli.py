"""CLI for ReceiptSplit using Typer."""

import logging
import sys
from decimal import Decimal
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_settings
from .engine import BillSplitEngine
from .models import Session, SplitResult
from .money import from_cents, to_cents

app = typer.Typer(
    name="receipt-split",
    help="Split a receipt between participants and work out who owes the payer",
)

console = Console()


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def load_session(path: Path) -> Session:
    """Read a session JSON document."""
    return Session.model_validate_json(path.read_text(encoding="utf-8"))


def format_money(amount: Decimal, symbol: str = "$", use_color: bool = True) -> str:
    """
    Format money in accounting style with alignment.

    Negative amounts use parentheses: ($85.02)
    Positive amounts have spaces:      $85.02
    """
    abs_amount = abs(amount)
    if amount < 0:
        if use_color:
            return f"({symbol}[red]{abs_amount:,.2f}[/red])"
        return f"({symbol}{abs_amount:,.2f})"
    if use_color:
        return f" [green]{symbol}{abs_amount:,.2f}[/green] "
    return f" {symbol}{abs_amount:,.2f} "


@app.command()
def split(
    session_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Session JSON file"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Compute settlements for a receipt session.

    Everyone who is not the payer owes the payer their share of the
    entered total.
    """
    setup_logging(verbose)

    try:
        settings = load_settings()
        session = load_session(session_file)
        result = BillSplitEngine(settings).compute_splits(session)

        if as_json:
            typer.echo(result.model_dump_json(indent=2))
            return

        display_result(session, result, settings.currency_symbol)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


def display_result(session: Session, result: SplitResult, symbol: str = "$"):
    """Display settlements, explanations and warnings."""
    console.print("\n[bold]Receipt Split:[/bold]")
    console.print(f"  Participants: {', '.join(session.participants)}")
    console.print(f"  Paid by: {session.payer}")
    console.print(f"  Total: {format_money(session.entered_total, symbol)}")
    console.print()

    if result.settlements:
        table = Table(title="Settlements", show_header=True, header_style="bold magenta")
        table.add_column("From", style="cyan")
        table.add_column("To", style="cyan")
        table.add_column("Amount", justify="right", width=12)

        for settlement in result.settlements:
            table.add_row(
                settlement.from_participant,
                settlement.to_participant,
                format_money(settlement.amount, symbol),
            )

        console.print(table)

        console.print("\n[bold]Breakdown:[/bold]")
        for settlement in result.settlements:
            console.print(
                f"\n  [cyan]{settlement.from_participant}[/cyan] owes "
                f"{format_money(settlement.amount, symbol)}"
            )
            for line in settlement.explanation.splitlines():
                console.print(f"    {line}")
    else:
        console.print("[yellow]Nobody owes anything.[/yellow]")

    if result.has_warnings:
        console.print("\n[bold yellow]Warnings:[/bold yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]⚠️  {warning.describe(symbol)}[/yellow]")


@app.command()
def totals(
    session_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Session JSON file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Show each participant's reconciled share, payer included.
    """
    setup_logging(verbose)

    try:
        settings = load_settings()
        session = load_session(session_file)
        result = BillSplitEngine(settings).compute_splits(session)

        table = Table(title="Shares", show_header=True, header_style="bold magenta")
        table.add_column("Participant", style="cyan")
        table.add_column("Share", justify="right", width=12)

        for participant, share in result.person_totals.items():
            name = f"{participant} (payer)" if participant == session.payer else participant
            table.add_row(name, format_money(share, settings.currency_symbol))

        console.print(table)

        # Verification
        computed_cents = sum(to_cents(share) for share in result.person_totals.values())
        expected_cents = to_cents(session.entered_total)
        if computed_cents == expected_cents:
            console.print("  [green]✓ Shares match the entered total[/green]")
        else:
            console.print(
                f"  [red]✗ Total mismatch: computed {from_cents(computed_cents)}, "
                f"expected {from_cents(expected_cents)}[/red]"
            )

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    app()
