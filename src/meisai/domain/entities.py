"""Domain model entities for meisai.

These are pure data classes representing business concepts, independent of
database schema. Persistence models are converted into these by
``meisai.database.mappers`` so the pipeline never touches ORM objects.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Statement:
    """Monthly card statement summary."""

    id: int
    payment_date: date
    total_amount: int
    domestic_amount: int
    overseas_amount: int
    imported_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Line-item purchase belonging to a statement."""

    id: int
    statement_id: int
    transaction_date: date
    store_name: str
    amount: int
    payment_type: str
    note: Optional[str]
    category_id: Optional[int]
    major_category_id: Optional[int]
    minor_category_id: Optional[int]


@dataclass(frozen=True)
class Category:
    """Flat category domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class MajorCategory:
    """Top level of the two-level category scheme."""

    id: int
    name: str


@dataclass(frozen=True)
class MinorCategory:
    """Second level of the two-level category scheme."""

    id: int
    major_category_id: int
    name: str


@dataclass(frozen=True)
class StoreCategoryMapping:
    """Store name to flat category rule."""

    store_name: str
    category_id: int


@dataclass(frozen=True)
class StoreHierarchicalCategoryMapping:
    """Store name to (major, minor) category rule."""

    store_name: str
    major_category_id: int
    minor_category_id: Optional[int]


@dataclass(frozen=True)
class HierarchicalCategory:
    """Resolved (major, minor) pair for a store."""

    major: MajorCategory
    minor: Optional[MinorCategory] = None


# Import pipeline values


@dataclass(frozen=True)
class ParsedStatement:
    """Header values and raw data rows extracted from a statement document."""

    payment_date: date
    total_amount: int
    domestic_amount: int
    overseas_amount: int
    rows: tuple[dict[str, str], ...] = ()


@dataclass(frozen=True)
class NormalizedTransaction:
    """Validated transaction row ready for dedup and persistence."""

    transaction_date: date
    store_name: str
    amount: int
    payment_type: str
    note: Optional[str]


class SkipReason(Enum):
    """Why a data row did not produce a transaction."""

    MISSING_FIELD = "missing_field"
    EXCLUDED = "excluded"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class ImportOutcome:
    """Result of importing one statement document."""

    statement_id: int
    imported_count: int
    duplicate_count: int = 0
    excluded_count: int = 0
    missing_field_count: int = 0

    @property
    def skipped_count(self) -> int:
        return self.duplicate_count + self.excluded_count + self.missing_field_count

    @property
    def message(self) -> str:
        message = f"Imported {self.imported_count} transactions into statement {self.statement_id}."
        if self.duplicate_count:
            message += f" Skipped {self.duplicate_count} duplicate transactions."
        return message


# Dashboard view values


class DashboardMode(Enum):
    """Which category scheme a dashboard groups by."""

    FLAT = "flat"
    HIERARCHICAL = "hierarchical"


@dataclass(frozen=True)
class CategorizedTransaction:
    """Transaction annotated with the category names a dashboard groups by.

    ``category_name`` is the flat category name in flat mode and the major
    category name in hierarchical mode.
    """

    transaction: Transaction
    category_name: Optional[str] = None
    minor_category_name: Optional[str] = None

    @property
    def month(self) -> str:
        return self.transaction.transaction_date.strftime("%Y-%m")


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    amount: int
    count: int


@dataclass(frozen=True)
class DetailedCategoryTotal:
    major_category: str
    minor_category: Optional[str]
    amount: int
    count: int


@dataclass(frozen=True)
class MonthlyTotal:
    month: str
    amount: int


@dataclass(frozen=True)
class MonthlyBreakdown:
    """Category breakdowns restricted to one calendar month."""

    month: str
    total: int
    categories: tuple[CategoryTotal, ...] = ()
    detailed_categories: tuple[DetailedCategoryTotal, ...] = ()


@dataclass(frozen=True)
class DashboardView:
    """Aggregated view model handed to the presentation layer."""

    mode: DashboardMode
    total_amount: int
    category_breakdown: tuple[CategoryTotal, ...]
    uncategorized_count: int
    uncategorized_amount: int
    monthly_data: tuple[MonthlyTotal, ...]
    monthly_categories: tuple[MonthlyBreakdown, ...]
    available_months: tuple[str, ...]
    detailed_category_breakdown: tuple[DetailedCategoryTotal, ...] = ()
