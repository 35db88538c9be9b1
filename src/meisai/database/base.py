"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from meisai.domain.entities import (
    Statement,
    Transaction,
    Category,
    MajorCategory,
    MinorCategory,
    StoreCategoryMapping,
    StoreHierarchicalCategoryMapping,
)


class Database(ABC):
    """Abstract database interface for meisai."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[None]:
        """Group writes into one atomic unit.

        Writes made inside the block are visible to reads inside the block and
        are committed together when it exits normally. Any exception rolls
        all of them back and is re-raised.
        """
        pass

    # Statement operations
    @abstractmethod
    def create_statement(
        self,
        payment_date: date,
        total_amount: int,
        domestic_amount: int,
        overseas_amount: int,
    ) -> int:
        """Create a statement. Returns statement ID."""
        pass

    @abstractmethod
    def get_statement(self, statement_id: int) -> Optional[Statement]:
        """Get statement by ID."""
        pass

    @abstractmethod
    def list_statements(self) -> list[Statement]:
        """List statements, newest payment date first."""
        pass

    # Flat category operations
    @abstractmethod
    def create_category(self, name: str) -> int:
        """Create a flat category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get flat category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get flat category by name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List flat categories ordered by name."""
        pass

    # Hierarchical category operations
    @abstractmethod
    def create_major_category(self, name: str) -> int:
        """Create a major category. Returns major category ID."""
        pass

    @abstractmethod
    def get_major_category(self, major_category_id: int) -> Optional[MajorCategory]:
        """Get major category by ID."""
        pass

    @abstractmethod
    def get_major_category_by_name(self, name: str) -> Optional[MajorCategory]:
        """Get major category by name."""
        pass

    @abstractmethod
    def list_major_categories(self) -> list[MajorCategory]:
        """List major categories ordered by name."""
        pass

    @abstractmethod
    def create_minor_category(self, major_category_id: int, name: str) -> int:
        """Create a minor category under a major. Returns minor category ID."""
        pass

    @abstractmethod
    def get_minor_category(self, minor_category_id: int) -> Optional[MinorCategory]:
        """Get minor category by ID."""
        pass

    @abstractmethod
    def list_minor_categories(self, major_category_id: Optional[int] = None) -> list[MinorCategory]:
        """List minor categories ordered by name, optionally filtered by major."""
        pass

    # Store mapping operations
    @abstractmethod
    def upsert_store_category_mapping(self, store_name: str, category_id: int) -> None:
        """Create or replace the flat mapping for a store."""
        pass

    @abstractmethod
    def get_store_category_mapping(self, store_name: str) -> Optional[StoreCategoryMapping]:
        """Get the flat mapping for a store."""
        pass

    @abstractmethod
    def list_store_category_mappings(self) -> list[StoreCategoryMapping]:
        """List flat mappings ordered by store name."""
        pass

    @abstractmethod
    def delete_store_category_mapping(self, store_name: str) -> None:
        """Delete the flat mapping for a store."""
        pass

    @abstractmethod
    def upsert_store_hierarchical_mapping(
        self, store_name: str, major_category_id: int, minor_category_id: Optional[int]
    ) -> None:
        """Create or replace the hierarchical mapping for a store."""
        pass

    @abstractmethod
    def get_store_hierarchical_mapping(
        self, store_name: str
    ) -> Optional[StoreHierarchicalCategoryMapping]:
        """Get the hierarchical mapping for a store."""
        pass

    @abstractmethod
    def list_store_hierarchical_mappings(self) -> list[StoreHierarchicalCategoryMapping]:
        """List hierarchical mappings ordered by store name."""
        pass

    @abstractmethod
    def delete_store_hierarchical_mapping(self, store_name: str) -> None:
        """Delete the hierarchical mapping for a store."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        statement_id: int,
        transaction_date: date,
        store_name: str,
        amount: int,
        payment_type: str = "",
        note: Optional[str] = None,
        category_id: Optional[int] = None,
        major_category_id: Optional[int] = None,
        minor_category_id: Optional[int] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def transaction_exists(
        self, statement_id: int, transaction_date: date, store_name: str, amount: int
    ) -> bool:
        """Check if a transaction with the given dedup key exists for a statement."""
        pass

    @abstractmethod
    def update_transaction_category(self, transaction_id: int, category_id: Optional[int]) -> None:
        """Update transaction flat category."""
        pass

    @abstractmethod
    def update_transaction_hierarchical_category(
        self,
        transaction_id: int,
        major_category_id: Optional[int],
        minor_category_id: Optional[int],
    ) -> None:
        """Update transaction major/minor category."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        statement_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            statement_id: Optional owning statement filter
            limit: Optional maximum number of rows
            offset: Number of rows to skip
        """
        pass

    @abstractmethod
    def list_transaction_dates(self) -> list[date]:
        """List the distinct transaction dates present."""
        pass
