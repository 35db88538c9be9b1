"""Dashboard aggregation domain service.

Two read modes exist and differ on purpose:

* flat: groups by the category stamped on each transaction at import time,
  so later mapping changes do not rewrite past reports;
* hierarchical: groups by the (major, minor) pair the store is mapped to
  right now, re-resolved from the store name at read time.
"""

from collections import defaultdict
from typing import Iterable, Optional, Sequence

from meisai.database.base import Database
from meisai.domain.category import HierarchicalCategoryResolver
from meisai.domain.entities import (
    CategorizedTransaction,
    CategoryTotal,
    DashboardMode,
    DashboardView,
    DetailedCategoryTotal,
    MonthlyBreakdown,
    MonthlyTotal,
    Transaction,
)
from meisai.domain.transaction import TransactionService


def category_breakdown(items: Iterable[CategorizedTransaction]) -> tuple[CategoryTotal, ...]:
    """Sum amount and count per category name, largest amount first.

    Uncategorized items are left out. Equal amounts are ordered by name.
    """
    groups: dict[str, dict[str, int]] = defaultdict(lambda: {"amount": 0, "count": 0})
    for item in items:
        if item.category_name is None:
            continue
        groups[item.category_name]["amount"] += item.transaction.amount
        groups[item.category_name]["count"] += 1

    totals = [CategoryTotal(name=name, amount=g["amount"], count=g["count"]) for name, g in groups.items()]
    return tuple(sorted(totals, key=lambda t: (-t.amount, t.name)))


def detailed_category_breakdown(
    items: Iterable[CategorizedTransaction],
) -> tuple[DetailedCategoryTotal, ...]:
    """Sum amount and count per (major, minor) pair, largest amount first.

    A missing minor is its own bucket under the major. Equal amounts are
    ordered by major name, then the no-minor bucket, then minor name.
    """
    groups: dict[tuple[str, Optional[str]], dict[str, int]] = defaultdict(
        lambda: {"amount": 0, "count": 0}
    )
    for item in items:
        if item.category_name is None:
            continue
        key = (item.category_name, item.minor_category_name)
        groups[key]["amount"] += item.transaction.amount
        groups[key]["count"] += 1

    totals = [
        DetailedCategoryTotal(
            major_category=major,
            minor_category=minor,
            amount=g["amount"],
            count=g["count"],
        )
        for (major, minor), g in groups.items()
    ]
    return tuple(
        sorted(
            totals,
            key=lambda t: (
                -t.amount,
                t.major_category,
                t.minor_category is not None,
                t.minor_category or "",
            ),
        )
    )


def aggregate(
    transactions: Iterable[CategorizedTransaction],
    mode: DashboardMode = DashboardMode.FLAT,
) -> DashboardView:
    """Build the dashboard view for already categorized transactions.

    Args:
        transactions: Transactions annotated with the names to group by
        mode: FLAT groups by category name only; HIERARCHICAL adds the
            (major, minor) breakdowns

    Returns:
        DashboardView with totals, breakdowns and the monthly series
    """
    items = list(transactions)
    hierarchical = mode is DashboardMode.HIERARCHICAL

    uncategorized = [item for item in items if item.category_name is None]

    by_month: dict[str, list[CategorizedTransaction]] = defaultdict(list)
    for item in items:
        by_month[item.month].append(item)
    months = tuple(sorted(by_month))

    monthly_data = tuple(
        MonthlyTotal(month=month, amount=sum(i.transaction.amount for i in by_month[month]))
        for month in months
    )
    monthly_categories = tuple(
        MonthlyBreakdown(
            month=month,
            total=sum(i.transaction.amount for i in by_month[month]),
            categories=category_breakdown(by_month[month]),
            detailed_categories=(
                detailed_category_breakdown(by_month[month]) if hierarchical else ()
            ),
        )
        for month in months
    )

    return DashboardView(
        mode=mode,
        total_amount=sum(item.transaction.amount for item in items),
        category_breakdown=category_breakdown(items),
        uncategorized_count=len(uncategorized),
        uncategorized_amount=sum(item.transaction.amount for item in uncategorized),
        monthly_data=monthly_data,
        monthly_categories=monthly_categories,
        available_months=months,
        detailed_category_breakdown=detailed_category_breakdown(items) if hierarchical else (),
    )


class DashboardService:
    """Service for building dashboard view models from stored transactions."""

    def __init__(self, db: Database):
        """Initialize dashboard service.

        Args:
            db: Database instance
        """
        self.db = db
        self.transaction_service = TransactionService(db)

    def categorize_flat(self, transactions: Sequence[Transaction]) -> list[CategorizedTransaction]:
        """Annotate transactions with the flat category stamped at import."""
        names = {c.id: c.name for c in self.db.list_categories()}
        return [
            CategorizedTransaction(
                transaction=txn,
                category_name=names.get(txn.category_id) if txn.category_id is not None else None,
            )
            for txn in transactions
        ]

    def categorize_hierarchical(
        self, transactions: Sequence[Transaction]
    ) -> list[CategorizedTransaction]:
        """Annotate transactions with the store's current (major, minor) mapping."""
        resolver = HierarchicalCategoryResolver(self.db)
        resolver.load()

        result = []
        for txn in transactions:
            category = resolver.resolve(txn.store_name)
            if category is None:
                result.append(CategorizedTransaction(transaction=txn))
                continue
            result.append(
                CategorizedTransaction(
                    transaction=txn,
                    category_name=category.major.name,
                    minor_category_name=category.minor.name if category.minor else None,
                )
            )
        return result

    def build_dashboard(
        self,
        mode: DashboardMode = DashboardMode.FLAT,
        month: Optional[str] = None,
        statement_id: Optional[int] = None,
    ) -> DashboardView:
        """Build a dashboard over stored transactions.

        Args:
            mode: Read mode, see module docstring
            month: Optional YYYY-MM filter
            statement_id: Optional statement filter

        Returns:
            DashboardView
        """
        transactions = self.transaction_service.list_transactions(
            month=month, statement_id=statement_id
        )
        if mode is DashboardMode.HIERARCHICAL:
            categorized = self.categorize_hierarchical(transactions)
        else:
            categorized = self.categorize_flat(transactions)
        return aggregate(categorized, mode)

    def build_flat_dashboard(
        self, month: Optional[str] = None, statement_id: Optional[int] = None
    ) -> DashboardView:
        return self.build_dashboard(DashboardMode.FLAT, month=month, statement_id=statement_id)

    def build_hierarchical_dashboard(
        self, month: Optional[str] = None, statement_id: Optional[int] = None
    ) -> DashboardView:
        return self.build_dashboard(
            DashboardMode.HIERARCHICAL, month=month, statement_id=statement_id
        )
