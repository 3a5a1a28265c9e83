import re

AMOUNT_PATTERN = re.compile(r"^[0-9]+$")
AMOUNT_MAX_DIGITS = 12


def parse_amount(text: str) -> int | None:
    """Parse a digits-only amount string. Returns None on invalid input.

    Only plain non-negative integers of ASCII digits are accepted: '1500' -> 1500.
    Decimals, signs, separators, surrounding whitespace and amounts longer
    than ``AMOUNT_MAX_DIGITS`` digits are rejected.
    """
    if not text or len(text) > AMOUNT_MAX_DIGITS or not AMOUNT_PATTERN.fullmatch(text):
        return None
    return int(text)
