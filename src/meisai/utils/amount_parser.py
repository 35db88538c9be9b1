"""Amount parsing utilities."""

import re


def parse_yen(amount_str: str) -> int:
    """Parse a whole-yen amount string into an int.

    Handles various formats:
    - "5000"
    - "10,000"
    - "-1,200" (refunds)
    - "￥3,000" / "3,000円"

    Args:
        amount_str: Amount string

    Returns:
        Integer amount in yen

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency marks
    cleaned = re.sub(r"[¥￥円]", "", amount_str)

    # Remove thousands separators
    cleaned = cleaned.replace(",", "").strip()

    try:
        return int(cleaned)
    except ValueError:
        raise ValueError(f"Could not parse amount '{amount_str}'")
