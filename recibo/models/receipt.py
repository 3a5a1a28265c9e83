from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recibo.constants import parse_date
from recibo.models import parse_amount

REQUIRED = "required"
PATTERN = "pattern"
INVALID_DATE = "date"

FieldErrors = dict[str, set[str]]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class LineItem(BaseModel):
    description: str = Field(min_length=1)
    amount: int = Field(ge=0)


class AddItemForm(BaseModel):
    """Draft state of the add-item dialog, holding raw user input."""

    description: str = ""
    amount: str = ""

    def errors(self) -> FieldErrors:
        return validate_add_item(self)

    @property
    def is_valid(self) -> bool:
        return not self.errors()

    def to_line_item(self) -> LineItem:
        amount = parse_amount(self.amount)
        if amount is None or _is_blank(self.description):
            raise ValueError("Draft item is not valid")
        return LineItem(description=self.description, amount=amount)

    def reset(self) -> None:
        self.description = ""
        self.amount = ""


class ReceiptForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field("", alias="from")
    concept: str = ""
    items: list[LineItem] = []
    comments: str = ""
    received_by: str = ""
    phone: str = ""
    date: str = ""

    def errors(self) -> FieldErrors:
        return validate_receipt(self)

    @property
    def is_valid(self) -> bool:
        return not self.errors()


def validate_add_item(form: AddItemForm) -> FieldErrors:
    """Return the violated rules per field of an add-item draft.

    An empty mapping means the draft may be turned into a LineItem.
    """
    errors: FieldErrors = {}
    if _is_blank(form.description):
        errors.setdefault("description", set()).add(REQUIRED)
    if not form.amount:
        errors.setdefault("amount", set()).add(REQUIRED)
    elif parse_amount(form.amount) is None:
        errors.setdefault("amount", set()).add(PATTERN)
    return errors


def validate_receipt(form: ReceiptForm) -> FieldErrors:
    """Return the violated rules per field of the receipt form.

    Items are validated when they are drafted, so an empty item list is
    acceptable here.
    """
    errors: FieldErrors = {}
    for field in ("from_", "concept", "received_by", "phone", "date"):
        if _is_blank(getattr(form, field)):
            errors.setdefault(field, set()).add(REQUIRED)
    if "date" not in errors and parse_date(form.date) is None:
        errors.setdefault("date", set()).add(INVALID_DATE)
    return errors
