from __future__ import annotations

import questionary

from recibo.cli.render import FIELD_LABELS, console, print_errors
from recibo.controller import ReceiptFormController

PROMPTS = [
    ("from_", "Recibí de:"),
    ("date", "Fecha (AAAA-MM-DD, ej: 2025-01-15):"),
    ("concept", "Concepto:"),
    ("comments", "Comentarios (opcional):"),
    ("received_by", f"{FIELD_LABELS['received_by']}:"),
    ("phone", f"{FIELD_LABELS['phone']}:"),
]


def edit_receipt_menu(controller: ReceiptFormController) -> None:
    """Prompt for every receipt field, keeping current values as defaults.

    Cancelling any prompt discards the whole edit.
    """
    console.print()
    console.print("[bold]Datos del Recibo[/bold]", style="cyan")

    values: dict[str, str] = {}
    for field, prompt in PROMPTS:
        current = getattr(controller.receipt_form, field)
        answer = questionary.text(prompt, default=current).ask()
        if answer is None:
            console.print("[yellow]Edición cancelada.[/yellow]")
            return
        values[field] = answer.strip()

    controller.update_receipt(**values)
    print_errors(controller.receipt_errors())


def submit_menu(controller: ReceiptFormController) -> str | None:
    path = controller.on_submit()
    if path is None:
        console.print("[red]El recibo tiene campos inválidos:[/red]")
        print_errors(controller.receipt_errors())
        return None

    console.print("[green bold]Recibo generado con éxito![/green bold]")
    console.print(f"  Archivo: {path}")
    return path
