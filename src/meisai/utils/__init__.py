"""Utility functions for meisai."""

from meisai.utils.date_parser import parse_date, month_key, month_range
from meisai.utils.amount_parser import parse_yen
from meisai.utils.encoding import decode_document

__all__ = ["parse_date", "month_key", "month_range", "parse_yen", "decode_document"]
