"""Shared utilities used across the booking pipeline."""

import re


def normalize_whatsapp_number(value: str) -> str:
    """Reduce a configured number to the digits-only form wa.me expects.

    Spaces, dashes, dots, parentheses and a leading + are dropped. Any other
    character is kept so that configuration validation can reject it.

    Examples:
        >>> normalize_whatsapp_number("+254 705 639 260")
        '254705639260'
        >>> normalize_whatsapp_number("(0712) 345-678")
        '0712345678'
    """
    value = value.strip()
    if value.startswith("+"):
        value = value[1:]
    return re.sub(r"[\s\-\.\(\)]", "", value)
