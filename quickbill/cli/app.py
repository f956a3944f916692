import questionary
from rich.console import Console

from quickbill.cli.bill_menu import add_bill_menu, confirm_prompt, delete_bill_menu, render_bills, search_menu
from quickbill.constants import APP_TITLE
from quickbill.repositories.factory import get_bill_repository
from quickbill.services.bill_store import BillStore

console = Console()


async def main_menu(store: BillStore) -> None:
    console.print()
    console.print(f"[bold]{APP_TITLE}[/bold]", style="cyan")

    while True:
        render_bills(store)
        console.print()

        choice = await questionary.select(
            "Menu",
            choices=[
                "Add Bill",
                "Search",
                "Reset",
                "Sort by Date",
                "Delete Bill",
                "Quit",
            ],
        ).ask_async()

        if choice is None or choice == "Quit":
            console.print("[bold]Bye![/bold]")
            break
        elif choice == "Add Bill":
            await add_bill_menu(store)
        elif choice == "Search":
            await search_menu(store)
        elif choice == "Reset":
            await store.reset()
        elif choice == "Sort by Date":
            await store.sort_by_date()
        elif choice == "Delete Bill":
            await delete_bill_menu(store)


async def run_app() -> None:
    async with get_bill_repository() as repo:
        store = BillStore(repo, confirm=confirm_prompt)
        await store.load()
        await main_menu(store)
