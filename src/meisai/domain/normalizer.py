"""Normalization of raw statement rows into transactions."""

from typing import Optional, Union

from meisai.domain.entities import NormalizedTransaction, SkipReason
from meisai.domain.errors import ParseError
from meisai.utils.amount_parser import parse_yen
from meisai.utils.date_parser import parse_date

DATE_FIELD = "ご利用日"
STORE_FIELD = "ご利用先など"
AMOUNT_FIELD = "ご利用金額(￥)"
PAYMENT_TYPE_FIELD = "支払区分"
NOTE_FIELD = "摘要"

REQUIRED_FIELDS = (DATE_FIELD, STORE_FIELD, AMOUNT_FIELD)

# Issuer's own administrative lines (fees, adjustments) start with this token
ISSUER_STORE_PREFIX = "ＪＣＢ"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


class TransactionNormalizer:
    """Turns raw row field maps into validated transactions."""

    def __init__(self, excluded_prefix: str = ISSUER_STORE_PREFIX):
        self.excluded_prefix = excluded_prefix

    def normalize(
        self, raw_row: dict[str, str], row_num: Optional[int] = None
    ) -> Union[NormalizedTransaction, SkipReason]:
        """Normalize one raw row.

        Args:
            raw_row: Field name to cell value map from the parser
            row_num: Optional document row number used in error messages

        Returns:
            NormalizedTransaction, or the SkipReason when the row does not
            describe a purchase

        Raises:
            ParseError: If the date or amount of a complete row cannot be parsed
        """
        if any(not _clean(raw_row.get(name)) for name in REQUIRED_FIELDS):
            return SkipReason.MISSING_FIELD

        store_name = _clean(raw_row[STORE_FIELD])
        if store_name.startswith(self.excluded_prefix):
            return SkipReason.EXCLUDED

        prefix = f"Row {row_num}: " if row_num is not None else ""

        try:
            amount = parse_yen(raw_row[AMOUNT_FIELD])
        except ValueError:
            raise ParseError(f"{prefix}Invalid amount value: '{raw_row[AMOUNT_FIELD]}'")

        try:
            transaction_date = parse_date(raw_row[DATE_FIELD])
        except ValueError:
            raise ParseError(f"{prefix}Invalid date value: '{raw_row[DATE_FIELD]}'")

        return NormalizedTransaction(
            transaction_date=transaction_date,
            store_name=store_name,
            amount=amount,
            payment_type=_clean(raw_row.get(PAYMENT_TYPE_FIELD)),
            note=_clean(raw_row.get(NOTE_FIELD)) or None,
        )
