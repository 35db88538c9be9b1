"""Transaction domain service."""

from typing import Optional

from meisai.database.base import Database
from meisai.domain.entities import Statement, Transaction as TransactionEntity
from meisai.domain.errors import (
    MINOR_NOT_IN_MAJOR,
    NotFoundError,
    ValidationError,
    category_not_found,
    major_category_not_found,
    minor_category_not_found,
    statement_not_found,
    transaction_not_found,
)
from meisai.utils.date_parser import month_key, month_range


class TransactionService:
    """Service for reading transactions and reassigning their categories."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        month: Optional[str] = None,
        statement_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[TransactionEntity]:
        """List transactions newest first.

        Args:
            month: Optional YYYY-MM filter on the transaction date
            statement_id: Optional owning statement filter
            limit: Optional page size
            offset: Number of rows to skip

        Returns:
            List of transaction entities

        Raises:
            ValidationError: If month is malformed or paging values are negative
        """
        start_date = end_date = None
        if month is not None:
            try:
                start_date, end_date = month_range(month)
            except ValueError as e:
                raise ValidationError(str(e))

        if offset < 0 or (limit is not None and limit < 0):
            raise ValidationError("limit and offset must not be negative")

        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            statement_id=statement_id,
            limit=limit,
            offset=offset,
        )

    def list_available_months(self) -> list[str]:
        """Return sorted distinct YYYY-MM keys of all transaction dates."""
        return sorted({month_key(d) for d in self.db.list_transaction_dates()})

    def get_statement(self, statement_id: int) -> Optional[Statement]:
        return self.db.get_statement(statement_id)

    def list_statements(self) -> list[Statement]:
        return self.db.list_statements()

    def require_statement(self, statement_id: int) -> Statement:
        """Get statement by ID or raise NotFoundError."""
        statement = self.db.get_statement(statement_id)
        if statement is None:
            raise NotFoundError(statement_not_found(statement_id))
        return statement

    def update_category(self, transaction_id: int, category_id: Optional[int]) -> None:
        """Set or clear the flat category of one transaction.

        Store mappings are not touched; only this transaction changes.

        Args:
            transaction_id: Transaction ID
            category_id: Flat category ID, or None to clear

        Raises:
            NotFoundError: If transaction or category doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        self.db.update_transaction_category(transaction_id, category_id)

    def update_hierarchical_category(
        self,
        transaction_id: int,
        major_category_id: Optional[int],
        minor_category_id: Optional[int] = None,
    ) -> None:
        """Set or clear the (major, minor) category of one transaction.

        Raises:
            NotFoundError: If transaction, major or minor category doesn't exist
            ValidationError: If a minor is given without a major, or belongs to another major
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        if major_category_id is None:
            if minor_category_id is not None:
                raise ValidationError("A minor category requires a major category")
        elif self.db.get_major_category(major_category_id) is None:
            raise NotFoundError(major_category_not_found(major_category_id))

        if minor_category_id is not None:
            minor = self.db.get_minor_category(minor_category_id)
            if minor is None:
                raise NotFoundError(minor_category_not_found(minor_category_id))
            if minor.major_category_id != major_category_id:
                raise ValidationError(MINOR_NOT_IN_MAJOR)

        self.db.update_transaction_hierarchical_category(
            transaction_id, major_category_id, minor_category_id
        )
