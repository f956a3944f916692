from __future__ import annotations

from datetime import date

import questionary
from rich.console import Console
from rich.table import Table

from quickbill.constants import LIST_TITLE, NUMERIC_FIELDS
from quickbill.models import format_money
from quickbill.models.bill import Bill
from quickbill.services.bill_store import BillStore

console = Console()

FIELD_LABELS = {"amount": "Amount", "tax": "Tax", "discount": "Discount"}


async def confirm_prompt(message: str) -> bool:
    return bool(await questionary.confirm(message, default=False).ask_async())


def _is_iso_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _bill_label(bill: Bill) -> str:
    return f"{bill.id} - {bill.customer_name} ({bill.bill_date})"


def render_bills(store: BillStore) -> None:
    console.print()
    console.print(f"[bold]{LIST_TITLE}[/bold]")
    if store.error:
        console.print(f"[red]{store.error}[/red]")

    if store.loading:
        console.print("Loading...")
        return
    if not store.bills:
        console.print("[yellow]No bills found[/yellow]")
        return

    table = Table()
    table.add_column("Customer")
    table.add_column("Date", justify="center")
    table.add_column("Amount", justify="right")
    table.add_column("Tax", justify="right")
    table.add_column("Discount", justify="right")
    table.add_column("Total", justify="right")

    for bill in store.bills:
        table.add_row(
            bill.customer_name,
            bill.bill_date,
            format_money(bill.amount),
            format_money(bill.tax),
            format_money(bill.discount),
            format_money(bill.display_total),
        )

    console.print(table)


async def add_bill_menu(store: BillStore) -> None:
    console.print()
    console.print("[bold]Add Bill[/bold]", style="cyan")

    name = await questionary.text("Customer Name:", default=store.form_data.customer_name).ask_async()
    if not name or not name.strip():
        console.print("[yellow]Cancelled.[/yellow]")
        return
    store.set_field("customer_name", name)

    while True:
        bill_date = await questionary.text(
            "Bill date (YYYY-MM-DD):", default=store.form_data.bill_date
        ).ask_async()
        if bill_date is None:
            console.print("[yellow]Cancelled.[/yellow]")
            return
        if _is_iso_date(bill_date.strip()):
            store.set_field("bill_date", bill_date.strip())
            break
        console.print("[red]Invalid date. Use YYYY-MM-DD (e.g. 2025-09-12).[/red]")

    for field in NUMERIC_FIELDS:
        while True:
            value = await questionary.text(
                f"{FIELD_LABELS[field]}:", default=getattr(store.form_data, field)
            ).ask_async()
            if value is None:
                console.print("[yellow]Cancelled.[/yellow]")
                return
            if value.strip() and store.set_field(field, value.strip()):
                break
            console.print("[red]Invalid value. Try again.[/red]")

    console.print(f"  Preview Amount: [bold]{format_money(store.form_data.total)}[/bold]")

    if await store.create():
        console.print("[green bold]Bill added![/green bold]")


async def search_menu(store: BillStore) -> None:
    term = await questionary.text("Filter by customer...", default=store.search_term).ask_async()
    if term is None:
        return
    await store.search(term)


async def delete_bill_menu(store: BillStore) -> None:
    if not store.bills:
        console.print("[yellow]No bills found[/yellow]")
        return

    labels = {_bill_label(bill): bill.id for bill in store.bills}
    choice = await questionary.select("Delete which bill?", choices=[*labels, "Back"]).ask_async()
    if choice is None or choice == "Back":
        return

    if await store.delete(labels[choice]):
        console.print("[green]Bill deleted.[/green]")
