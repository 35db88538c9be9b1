"""Duplicate detection for imported transactions."""

from meisai.database.base import Database
from meisai.domain.entities import NormalizedTransaction


class DeduplicationFilter:
    """Checks whether a transaction already exists under a statement.

    Identity is (statement, date, store name, amount); payment type and note
    are ignored, so the first row imported wins. Lookups go to the store, so
    rows written earlier in the same unit of work are seen as well.
    """

    def __init__(self, db: Database):
        """Initialize deduplication filter.

        Args:
            db: Database instance
        """
        self.db = db

    def is_duplicate(self, statement_id: int, transaction: NormalizedTransaction) -> bool:
        return self.db.transaction_exists(
            statement_id=statement_id,
            transaction_date=transaction.transaction_date,
            store_name=transaction.store_name,
            amount=transaction.amount,
        )
