from __future__ import annotations

import questionary

from recibo.cli.render import console, print_errors
from recibo.constants import format_amount
from recibo.controller import ItemIndexError, ReceiptFormController

CANCEL = "Cancelar"


def add_item_menu(controller: ReceiptFormController) -> None:
    """Run the add-item dialog until an item is saved or the user gives up."""
    controller.open_add_item_modal()
    console.print()
    console.print("[bold]Agregar Producto/Servicio[/bold]", style="cyan")

    draft = controller.add_item_form
    while controller.is_modal_open:
        description = questionary.text("  Descripción:", default=draft.description).ask()
        if description is None:
            controller.close_modal()
            break
        amount = questionary.text("  Monto (solo números, ej: 1500):", default=draft.amount).ask()
        if amount is None:
            controller.close_modal()
            break

        draft.description = description
        draft.amount = amount.strip()
        item = controller.save_item()
        if item is not None:
            console.print(f"  [green]Agregado: {item.description} ({format_amount(item.amount)})[/green]")
            break

        print_errors(controller.draft_errors())
        if not questionary.confirm("¿Intentar de nuevo?", default=True).ask():
            controller.close_modal()


def remove_item_menu(controller: ReceiptFormController) -> None:
    if not controller.items:
        console.print("[yellow]No hay productos/servicios para eliminar.[/yellow]")
        return

    choices = [
        f"{i} - {item.description} ({format_amount(item.amount)})"
        for i, item in enumerate(controller.items, start=1)
    ]
    choice = questionary.select("Eliminar cuál?", choices=[*choices, CANCEL]).ask()
    if choice is None or choice == CANCEL:
        return

    index = int(choice.split(" - ", 1)[0]) - 1
    try:
        item = controller.remove_item(index)
    except ItemIndexError:
        console.print("[red]Elemento no encontrado.[/red]")
        return
    console.print(f"[green]Eliminado: {item.description}[/green]")
