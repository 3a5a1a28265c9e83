from __future__ import annotations

import logging

from recibo.constants import format_date
from recibo.models.receipt import AddItemForm, FieldErrors, LineItem, ReceiptForm
from recibo.pdf.receipt import ReceiptPDF
from recibo.settings import settings
from recibo.storage.base import StorageBackend

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"from_", "concept", "comments", "received_by", "phone", "date"})


class ItemIndexError(IndexError):
    """Raised when removing an item at a position outside the item list."""


def new_receipt_form() -> ReceiptForm:
    return ReceiptForm(received_by=settings.received_by, phone=settings.phone)


class ReceiptFormController:
    """State holder behind the receipt screen.

    Owns the receipt being composed, the add-item draft and the visibility
    flag of the add-item dialog. Operations whose form is invalid do nothing
    and return ``None``; the presentation layer reads ``receipt_errors()`` and
    ``draft_errors()`` to mark the offending fields.
    """

    def __init__(self, storage: StorageBackend, pdf_generator: ReceiptPDF | None = None) -> None:
        self.storage = storage
        self.pdf_generator = pdf_generator or ReceiptPDF()
        self.receipt_form = new_receipt_form()
        self.add_item_form = AddItemForm()
        self.is_modal_open = False

    @property
    def items(self) -> list[LineItem]:
        return self.receipt_form.items

    def calculate_total(self) -> int:
        return sum(item.amount for item in self.items)

    def update_receipt(self, **fields: str) -> None:
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown receipt fields: {', '.join(sorted(unknown))}")
        for name, value in fields.items():
            setattr(self.receipt_form, name, value)

    def receipt_errors(self) -> FieldErrors:
        return self.receipt_form.errors()

    def draft_errors(self) -> FieldErrors:
        return self.add_item_form.errors()

    def open_add_item_modal(self) -> None:
        self.is_modal_open = True

    def close_modal(self) -> None:
        self.add_item_form.reset()
        self.is_modal_open = False

    def save_item(self) -> LineItem | None:
        errors = self.draft_errors()
        if errors:
            logger.debug("Draft item rejected: %s", errors)
            return None

        item = self.add_item_form.to_line_item()
        self.items.append(item)
        logger.debug("Item added: %s (%d), %d items", item.description, item.amount, len(self.items))
        self.close_modal()
        return item

    def remove_item(self, index: int) -> LineItem:
        if not 0 <= index < len(self.items):
            raise ItemIndexError(f"No item at position {index} (receipt has {len(self.items)} items)")
        item = self.items.pop(index)
        logger.debug("Item removed at %d: %s", index, item.description)
        return item

    @staticmethod
    def format_date(date: str) -> str:
        return format_date(date)

    def on_submit(self) -> str | None:
        errors = self.receipt_errors()
        if errors:
            logger.debug("Receipt submission blocked: %s", errors)
            return None

        total = self.calculate_total()
        pdf_bytes = self.pdf_generator.generate(self.receipt_form, total)
        path = self.storage.save(settings.output_filename, pdf_bytes)
        logger.info("Receipt saved: %s (%d items, total=%d)", path, len(self.items), total)

        self.receipt_form = new_receipt_form()
        self.add_item_form.reset()
        return path
