from __future__ import annotations

from rich.console import Console
from rich.table import Table

from recibo.constants import format_amount, format_total
from recibo.controller import ReceiptFormController
from recibo.models.receipt import INVALID_DATE, PATTERN, REQUIRED, FieldErrors

console = Console()

FIELD_LABELS = {
    "from_": "Recibí de",
    "concept": "Concepto",
    "comments": "Comentarios",
    "received_by": "Recibido por",
    "phone": "Teléfono",
    "date": "Fecha",
    "description": "Descripción",
    "amount": "Monto",
}

ERROR_MESSAGES = {
    REQUIRED: "es obligatorio",
    PATTERN: "debe contener solo dígitos",
    INVALID_DATE: "debe tener el formato AAAA-MM-DD",
}


def error_lines(errors: FieldErrors) -> list[str]:
    """Human readable messages for a field error mapping, one per violation."""
    lines = []
    for field in sorted(errors):
        label = FIELD_LABELS.get(field, field)
        for reason in sorted(errors[field]):
            lines.append(f"{label} {ERROR_MESSAGES.get(reason, reason)}")
    return lines


def print_errors(errors: FieldErrors) -> None:
    for line in error_lines(errors):
        console.print(f"[red]{line}.[/red]")


def show_receipt(controller: ReceiptFormController) -> None:
    form = controller.receipt_form

    info = Table(show_header=False)
    info.add_column("Campo", style="dim")
    info.add_column("Valor")
    info.add_row("Recibí de", form.from_ or "-")
    info.add_row("Fecha", controller.format_date(form.date) if form.date else "-")
    info.add_row("Concepto", form.concept or "-")
    info.add_row("Comentarios", form.comments or "N/A")
    info.add_row("Recibido por", form.received_by or "-")
    info.add_row("Teléfono", form.phone or "-")
    console.print(info)

    items = Table()
    items.add_column("#", justify="right")
    items.add_column("Descripción del Producto/Servicio")
    items.add_column("Monto", justify="right")
    for i, item in enumerate(controller.items, start=1):
        items.add_row(str(i), item.description, format_amount(item.amount))
    console.print(items)
    console.print(f"  [bold]Total: {format_total(controller.calculate_total())}[/bold]")
