"""CLI for recordbook.

Usage:
    python -m recordbook report scores.txt report.txt   # Grade a score file
    python -m recordbook stock add "USB cable" 40       # Append to the JSON store
    python -m recordbook stock list                     # Show the JSON store
    python -m recordbook -v stock list --store inv.json # Debug logging, custom store
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from recordbook.config import Settings
from recordbook.exceptions import RecordbookError
from recordbook.grades import process_report
from recordbook.inventory_log import InventoryLogger
from recordbook.log import setup_logging
from recordbook.models import InventoryItem

app = typer.Typer(
    name="recordbook",
    help="In-memory record repositories, score reports and a JSON inventory log",
    no_args_is_help=True,
)
stock_app = typer.Typer(help="Inventory items kept in a JSON store", no_args_is_help=True)
app.add_typer(stock_app, name="stock")

console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    settings = Settings.from_env()
    setup_logging("DEBUG" if verbose else settings.log_level, console)


def _open_store(store: Optional[Path]) -> InventoryLogger[InventoryItem]:
    """Load the JSON store, exiting with code 1 if it cannot be read."""
    path = store or Settings.from_env().store_path
    inventory = InventoryLogger(path, InventoryItem.from_dict)
    try:
        inventory.load_from_file()
    except RecordbookError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot read store {path}: {e.strerror or e}")
        raise typer.Exit(1)
    return inventory


@app.command("report")
def cmd_report(
    input_path: Path = typer.Argument(help="Score file with id,fullName,score lines"),
    output_path: Path = typer.Argument(help="Where to write the graded report"),
) -> None:
    """Grade a student score file and write the report."""
    try:
        students = process_report(input_path, output_path)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] input file not found: {input_path}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e.filename or input_path}: {e.strerror or e}")
        raise typer.Exit(1)
    except RecordbookError as e:
        console.print(f"[red]Error:[/red] {input_path}: {e}")
        raise typer.Exit(1)

    table = Table(title="Student Grades", show_header=True, header_style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="green", min_width=15)
    table.add_column("Score", justify="right")
    table.add_column("Grade", justify="center")
    grade_styles = {"A": "green", "B": "green", "C": "yellow", "D": "yellow", "F": "red"}
    for s in students:
        style = grade_styles.get(s.grade, "white")
        table.add_row(str(s.id), s.full_name, str(s.score), f"[{style}]{s.grade}[/{style}]")

    console.print()
    console.print(table)
    console.print(f"Report written to {output_path}")


@stock_app.command("add")
def cmd_stock_add(
    name: str = typer.Argument(help="Item name"),
    quantity: int = typer.Argument(min=0, help="Units in stock"),
    item_id: Optional[int] = typer.Option(None, "--id", help="Item id (default: next free id)"),
    store: Optional[Path] = typer.Option(None, "--store", "-s", help="JSON store path"),
) -> None:
    """Add an item to the inventory store."""
    inventory = _open_store(store)
    items = inventory.get_all()
    if item_id is None:
        item_id = max((i.id for i in items), default=0) + 1
    elif any(i.id == item_id for i in items):
        console.print(f"[red]Error:[/red] item with ID {item_id} already exists")
        raise typer.Exit(1)

    item = InventoryItem(
        id=item_id,
        name=name,
        quantity=quantity,
        date_added=datetime.now(timezone.utc),
    )
    inventory.add(item)
    try:
        path = inventory.save_to_file()
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot write store {inventory.path}: {e.strerror or e}")
        raise typer.Exit(1)
    console.print(f"Added [green]{item.name}[/green] (ID: {item.id}) to {path}")


@stock_app.command("list")
def cmd_stock_list(
    store: Optional[Path] = typer.Option(None, "--store", "-s", help="JSON store path"),
) -> None:
    """Show every item in the inventory store."""
    inventory = _open_store(store)
    items = inventory.get_all()
    if not items:
        console.print(f"[yellow]No items in {inventory.path}[/yellow]")
        return

    table = Table(title=f"Inventory: {inventory.path}", show_header=True, header_style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="green", min_width=15)
    table.add_column("Quantity", justify="right")
    table.add_column("Added")
    for i in items:
        table.add_row(str(i.id), i.name, str(i.quantity), i.date_added.strftime("%Y-%m-%d %H:%M"))

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()
