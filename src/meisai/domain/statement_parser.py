"""Statement document parser.

A statement export is a CSV grid with a fixed preamble::

    row 0  ,,今回のお支払日,2025/07/10
    row 1  ,,今回のお支払金額合計(￥),"10,000"
    row 2  ,,うち国内ご利用金額合計(￥),"10,000"
    row 3  ,,うち海外ご利用金額合計(￥),0
    row 4  【ご利用明細】
    row 5  transaction column headers
    row 6+ transaction rows

Column 2 of the first four rows holds a label and column 3 its value.
"""

import csv
import io

from meisai.domain.entities import ParsedStatement
from meisai.domain.errors import FormatError, invalid_header
from meisai.utils.amount_parser import parse_yen
from meisai.utils.date_parser import parse_date

PAYMENT_DATE_LABEL = "今回のお支払日"
TOTAL_AMOUNT_LABEL = "今回のお支払金額合計(￥)"
DOMESTIC_AMOUNT_LABEL = "うち国内ご利用金額合計(￥)"
OVERSEAS_AMOUNT_LABEL = "うち海外ご利用金額合計(￥)"

HEADER_LABELS = (
    PAYMENT_DATE_LABEL,
    TOTAL_AMOUNT_LABEL,
    DOMESTIC_AMOUNT_LABEL,
    OVERSEAS_AMOUNT_LABEL,
)

LABEL_COLUMN = 2
VALUE_COLUMN = 3
COLUMN_HEADER_ROW = 5
FIRST_DATA_ROW = 6


def read_rows(raw_text: str) -> list[list[str]]:
    """Split a document into rows of cells using standard CSV quoting."""
    try:
        return list(csv.reader(io.StringIO(raw_text, newline="")))
    except csv.Error as e:
        raise FormatError(f"Could not read CSV document: {e}")


def parse_header_values(rows: list[list[str]]) -> list[str]:
    """Validate the four header rows and return their values in order.

    Raises:
        FormatError: If a row is missing or short, a label differs, or a value is empty
    """
    if len(rows) < len(HEADER_LABELS):
        raise FormatError(
            invalid_header(f"Insufficient header rows. Found {len(rows)} rows")
        )

    header_rows = rows[: len(HEADER_LABELS)]
    for index, row in enumerate(header_rows):
        if len(row) <= VALUE_COLUMN:
            raise FormatError(
                invalid_header(f"Header row {index} has {len(row)} columns, expected at least 4")
            )

    found_labels = [row[LABEL_COLUMN].strip() for row in header_rows]
    if tuple(found_labels) != HEADER_LABELS:
        raise FormatError(
            invalid_header(f"Expected headers not found. Found: [{', '.join(found_labels)}]")
        )

    values = [row[VALUE_COLUMN].strip() for row in header_rows]
    if not all(values):
        missing = [label for label, value in zip(HEADER_LABELS, values) if not value]
        raise FormatError(invalid_header(f"Missing required fields: {', '.join(missing)}"))

    return values


def map_data_rows(rows: list[list[str]]) -> tuple[dict[str, str], ...]:
    """Map each data row positionally onto the column header row."""
    if len(rows) <= COLUMN_HEADER_ROW:
        return ()

    column_names = [name.strip() for name in rows[COLUMN_HEADER_ROW]]
    records = []
    for row in rows[FIRST_DATA_ROW:]:
        if not row:
            continue
        records.append(
            {
                name: (row[index] if index < len(row) else "")
                for index, name in enumerate(column_names)
            }
        )
    return tuple(records)


def parse_statement(raw_text: str) -> ParsedStatement:
    """Parse a statement document into header values and raw data rows.

    Args:
        raw_text: Decoded document text

    Returns:
        ParsedStatement with header values and one field map per data row

    Raises:
        FormatError: If the fixed header block is absent or its values are invalid
    """
    rows = read_rows(raw_text)
    payment_date_str, total_str, domestic_str, overseas_str = parse_header_values(rows)

    try:
        payment_date = parse_date(payment_date_str)
    except ValueError as e:
        raise FormatError(invalid_header(f"Invalid payment date: {e}"))

    amounts = []
    for label, value in zip(HEADER_LABELS[1:], (total_str, domestic_str, overseas_str)):
        try:
            amounts.append(parse_yen(value))
        except ValueError as e:
            raise FormatError(invalid_header(f"Invalid value for {label}: {e}"))

    total_amount, domestic_amount, overseas_amount = amounts
    return ParsedStatement(
        payment_date=payment_date,
        total_amount=total_amount,
        domestic_amount=domestic_amount,
        overseas_amount=overseas_amount,
        rows=map_data_rows(rows),
    )


class StatementParser:
    """Parser for the fixed statement export layout."""

    def parse(self, raw_text: str) -> ParsedStatement:
        """Parse a document. See ``parse_statement``."""
        return parse_statement(raw_text)
