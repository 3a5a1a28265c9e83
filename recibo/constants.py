from datetime import date, datetime

MONTHS_ES = {
    1: "enero",
    2: "febrero",
    3: "marzo",
    4: "abril",
    5: "mayo",
    6: "junio",
    7: "julio",
    8: "agosto",
    9: "septiembre",
    10: "octubre",
    11: "noviembre",
    12: "diciembre",
}

INVALID_DATE = "Invalid Date"


def parse_date(value: str) -> date | None:
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def format_date(value: str) -> str:
    """Format an ISO date as a long es-MX date: '2025-09-03' -> '3 de septiembre de 2025'"""
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return f"{parsed.day} de {MONTHS_ES[parsed.month]} de {parsed.year}"


def format_amount(amount: int) -> str:
    """Format a line item amount as printed in the item table: 1500 -> '$1500'"""
    return f"${amount}"


def format_total(total: int) -> str:
    """Format the receipt total with two decimals: 1500 -> '$1500.00'"""
    return f"${total}.00"
