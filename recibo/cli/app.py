import questionary

from recibo.cli.item_menu import add_item_menu, remove_item_menu
from recibo.cli.receipt_menu import edit_receipt_menu, submit_menu
from recibo.cli.render import console, show_receipt
from recibo.controller import ReceiptFormController
from recibo.storage.factory import get_storage


def _build_controller() -> ReceiptFormController:
    return ReceiptFormController(get_storage())


def main_menu() -> None:
    controller = _build_controller()

    console.print()
    console.print("[bold]Recibo de Pago[/bold]", style="cyan")

    while True:
        console.print()
        show_receipt(controller)

        choice = questionary.select(
            "Menú Principal",
            choices=[
                "Editar Datos del Recibo",
                "Agregar Producto/Servicio",
                "Eliminar Producto/Servicio",
                "Generar Recibo",
                "Salir",
            ],
        ).ask()

        if choice is None or choice == "Salir":
            console.print("[bold]Hasta luego![/bold]")
            break
        elif choice == "Editar Datos del Recibo":
            edit_receipt_menu(controller)
        elif choice == "Agregar Producto/Servicio":
            add_item_menu(controller)
        elif choice == "Eliminar Producto/Servicio":
            remove_item_menu(controller)
        elif choice == "Generar Recibo":
            submit_menu(controller)
