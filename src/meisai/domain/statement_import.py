"""Statement import domain service."""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional, Union

from meisai.database.base import Database
from meisai.domain.category import FlatCategoryResolver, HierarchicalCategoryResolver
from meisai.domain.dedup import DeduplicationFilter
from meisai.domain.entities import (
    ImportOutcome,
    NormalizedTransaction,
    ParsedStatement,
    SkipReason,
)
from meisai.domain.errors import NotFoundError, statement_not_found
from meisai.domain.normalizer import TransactionNormalizer
from meisai.domain.statement_parser import StatementParser
from meisai.utils.encoding import decode_document

logger = logging.getLogger(__name__)


class StatementImportService:
    """Service for importing statement documents.

    One import runs parse, normalize, dedup, categorize and persist in a single
    unit of work: either the statement and all surviving transactions are
    committed, or nothing is.
    """

    def __init__(self, db: Database):
        """Initialize statement import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.parser = StatementParser()
        self.normalizer = TransactionNormalizer()
        self.dedup = DeduplicationFilter(db)
        self.flat_resolver = FlatCategoryResolver(db)
        self.hierarchical_resolver = HierarchicalCategoryResolver(db)

    def import_file(
        self, file_path: Union[str, Path], statement_id: Optional[int] = None
    ) -> ImportOutcome:
        """Import a statement file from disk.

        The file is decoded as UTF-8, falling back to CP932.

        Raises:
            FileNotFoundError: If the file doesn't exist
            FormatError: If the header block is invalid
            ParseError: If a transaction row has an unparseable value
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Statement file not found: {file_path}")
        return self.import_statement(decode_document(path.read_bytes()), statement_id=statement_id)

    def import_statement(
        self, raw_text: str, statement_id: Optional[int] = None
    ) -> ImportOutcome:
        """Import one statement document.

        Args:
            raw_text: Decoded document text
            statement_id: Existing statement to merge rows into. When None a
                new statement is created from the document header.

        Returns:
            ImportOutcome with the statement ID and per-reason counts

        Raises:
            FormatError: If the header block is invalid; nothing is written
            ParseError: If a transaction row has an unparseable value; the
                whole import is rolled back
            NotFoundError: If statement_id doesn't exist
        """
        parsed = self.parser.parse(raw_text)

        if statement_id is not None and self.db.get_statement(statement_id) is None:
            raise NotFoundError(statement_not_found(statement_id))

        self.flat_resolver.load()
        self.hierarchical_resolver.load()

        skipped: Counter[SkipReason] = Counter()
        imported = 0

        with self.db.unit_of_work():
            if statement_id is None:
                statement_id = self._create_statement(parsed)

            for row_num, raw_row in enumerate(parsed.rows, start=1):
                result = self.normalizer.normalize(raw_row, row_num=row_num)
                if isinstance(result, SkipReason):
                    logger.debug("Row %d skipped: %s", row_num, result.value)
                    skipped[result] += 1
                    continue

                if self.dedup.is_duplicate(statement_id, result):
                    logger.debug(
                        "Row %d skipped: duplicate of %s %s %d",
                        row_num,
                        result.transaction_date,
                        result.store_name,
                        result.amount,
                    )
                    skipped[SkipReason.DUPLICATE] += 1
                    continue

                self._persist_transaction(statement_id, result)
                imported += 1

        outcome = ImportOutcome(
            statement_id=statement_id,
            imported_count=imported,
            duplicate_count=skipped[SkipReason.DUPLICATE],
            excluded_count=skipped[SkipReason.EXCLUDED],
            missing_field_count=skipped[SkipReason.MISSING_FIELD],
        )
        logger.info(
            "Imported %d transactions into statement %d (%d skipped)",
            outcome.imported_count,
            outcome.statement_id,
            outcome.skipped_count,
        )
        return outcome

    def _create_statement(self, parsed: ParsedStatement) -> int:
        statement_id = self.db.create_statement(
            payment_date=parsed.payment_date,
            total_amount=parsed.total_amount,
            domestic_amount=parsed.domestic_amount,
            overseas_amount=parsed.overseas_amount,
        )
        logger.info(
            "Created statement %d for payment date %s", statement_id, parsed.payment_date
        )
        return statement_id

    def _persist_transaction(self, statement_id: int, txn: NormalizedTransaction) -> int:
        category_id = self.flat_resolver.resolve(txn.store_name)
        major_minor = self.hierarchical_resolver.resolve_ids(txn.store_name)
        major_category_id, minor_category_id = major_minor or (None, None)

        return self.db.create_transaction(
            statement_id=statement_id,
            transaction_date=txn.transaction_date,
            store_name=txn.store_name,
            amount=txn.amount,
            payment_type=txn.payment_type,
            note=txn.note,
            category_id=category_id,
            major_category_id=major_category_id,
            minor_category_id=minor_category_id,
        )
