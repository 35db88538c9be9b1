"""Tests for dashboard aggregation."""

from datetime import date

import pytest

from meisai.domain.dashboard import aggregate, category_breakdown, detailed_category_breakdown
from meisai.domain.entities import (
    CategorizedTransaction,
    CategoryTotal,
    DashboardMode,
    DetailedCategoryTotal,
    MonthlyTotal,
    Transaction,
)
from meisai.domain.errors import ValidationError


def _item(txn_id, day, amount, category=None, minor=None, store="テストストア"):
    txn = Transaction(
        id=txn_id,
        statement_id=1,
        transaction_date=day,
        store_name=store,
        amount=amount,
        payment_type="１回",
        note=None,
        category_id=None,
        major_category_id=None,
        minor_category_id=None,
    )
    return CategorizedTransaction(transaction=txn, category_name=category, minor_category_name=minor)


@pytest.fixture
def flat_items():
    return [
        _item(1, date(2025, 6, 3), 3200, "食料品"),
        _item(2, date(2025, 6, 15), 800, "外食"),
        _item(3, date(2025, 7, 1), 4500, "食料品"),
        _item(4, date(2025, 7, 2), 4000),
    ]


def test_aggregate_totals(flat_items):
    view = aggregate(flat_items)

    assert view.mode is DashboardMode.FLAT
    assert view.total_amount == 12500
    assert view.uncategorized_count == 1
    assert view.uncategorized_amount == 4000
    assert view.category_breakdown == (
        CategoryTotal(name="食料品", amount=7700, count=2),
        CategoryTotal(name="外食", amount=800, count=1),
    )
    assert view.detailed_category_breakdown == ()


def test_aggregate_sum_invariants(flat_items):
    view = aggregate(flat_items)

    categorized = sum(t.amount for t in view.category_breakdown)
    assert categorized + view.uncategorized_amount == view.total_amount
    assert sum(m.amount for m in view.monthly_data) == view.total_amount
    for month in view.monthly_categories:
        assert sum(t.amount for t in month.categories) <= month.total


def test_aggregate_monthly_series(flat_items):
    view = aggregate(flat_items)

    assert view.available_months == ("2025-06", "2025-07")
    assert view.monthly_data == (
        MonthlyTotal(month="2025-06", amount=4000),
        MonthlyTotal(month="2025-07", amount=8500),
    )
    june, july = view.monthly_categories
    assert june.total == 4000
    assert [c.name for c in june.categories] == ["食料品", "外食"]
    assert july.total == 8500
    assert july.categories == (CategoryTotal(name="食料品", amount=4500, count=1),)


def test_aggregate_empty():
    view = aggregate([])

    assert view.total_amount == 0
    assert view.category_breakdown == ()
    assert view.monthly_data == ()
    assert view.available_months == ()
    assert view.uncategorized_count == 0


def test_category_breakdown_ties_ordered_by_name():
    items = [
        _item(1, date(2025, 6, 1), 1000, "日用品"),
        _item(2, date(2025, 6, 2), 1000, "外食"),
        _item(3, date(2025, 6, 3), 2000, "食料品"),
    ]

    assert [t.name for t in category_breakdown(items)] == ["食料品", "外食", "日用品"]


def test_negative_amounts_are_summed():
    items = [
        _item(1, date(2025, 6, 1), 5000, "食料品"),
        _item(2, date(2025, 6, 20), -1200, "食料品"),
    ]

    view = aggregate(items)

    assert view.total_amount == 3800
    assert view.category_breakdown == (CategoryTotal(name="食料品", amount=3800, count=2),)


def test_hierarchical_breakdown_has_no_minor_bucket():
    items = [
        _item(1, date(2025, 6, 3), 3200, "食費", "スーパー"),
        _item(2, date(2025, 6, 15), 800, "食費", "カフェ"),
        _item(3, date(2025, 6, 20), 500, "食費"),
        _item(4, date(2025, 7, 2), 4000, "日用品", "薬局"),
    ]

    view = aggregate(items, DashboardMode.HIERARCHICAL)

    assert view.category_breakdown == (
        CategoryTotal(name="食費", amount=4500, count=3),
        CategoryTotal(name="日用品", amount=4000, count=1),
    )
    assert view.detailed_category_breakdown == (
        DetailedCategoryTotal("日用品", "薬局", 4000, 1),
        DetailedCategoryTotal("食費", "スーパー", 3200, 1),
        DetailedCategoryTotal("食費", "カフェ", 800, 1),
        DetailedCategoryTotal("食費", None, 500, 1),
    )
    assert view.monthly_categories[0].detailed_categories[0] == DetailedCategoryTotal(
        "食費", "スーパー", 3200, 1
    )


def test_detailed_breakdown_ties_put_no_minor_first():
    items = [
        _item(1, date(2025, 6, 1), 1000, "食費", "スーパー"),
        _item(2, date(2025, 6, 2), 1000, "食費"),
        _item(3, date(2025, 6, 3), 1000, "食費", "カフェ"),
    ]

    minors = [t.minor_category for t in detailed_category_breakdown(items)]

    assert minors == [None, "カフェ", "スーパー"]


def test_service_flat_dashboard_over_sample(
    import_service, category_service, dashboard_service, sample_categories, fixtures_dir
):
    category_service.set_store_category("スーパーマルヤ", sample_categories["食料品"])
    category_service.set_store_category("カフェドリーム", sample_categories["外食"])
    import_service.import_file(fixtures_dir / "meisai.csv")

    view = dashboard_service.build_flat_dashboard()

    assert view.total_amount == 12500
    assert view.category_breakdown == (
        CategoryTotal(name="食料品", amount=7700, count=2),
        CategoryTotal(name="外食", amount=800, count=1),
    )
    assert view.uncategorized_count == 1
    assert view.uncategorized_amount == 4000
    assert [(m.month, m.amount) for m in view.monthly_data] == [("2025-06", 4000), ("2025-07", 8500)]


def test_service_month_and_statement_filters(
    import_service, dashboard_service, statement_csv, fixtures_dir
):
    sample = import_service.import_file(fixtures_dir / "meisai.csv")
    import_service.import_statement(statement_csv([("2025/08/01", "テストストア", "9000", "１回", "")]))

    june = dashboard_service.build_dashboard(month="2025-06")
    assert june.total_amount == 4000
    assert june.available_months == ("2025-06",)

    by_statement = dashboard_service.build_dashboard(statement_id=sample.statement_id)
    assert by_statement.total_amount == 12500

    everything = dashboard_service.build_dashboard()
    assert everything.total_amount == 21500


def test_service_invalid_month(dashboard_service):
    with pytest.raises(ValidationError):
        dashboard_service.build_dashboard(month="2025/06")


def test_flat_mode_keeps_import_time_category_while_hierarchical_follows_mapping(
    import_service, category_service, dashboard_service, sample_categories, fixtures_dir
):
    category_service.set_store_category("スーパーマルヤ", sample_categories["食料品"])
    category_service.set_store_hierarchical_category(
        "スーパーマルヤ", sample_categories["食費"], sample_categories["食費 > スーパー"]
    )
    import_service.import_file(fixtures_dir / "meisai.csv")

    category_service.set_store_category("スーパーマルヤ", sample_categories["外食"])
    category_service.set_store_hierarchical_category("スーパーマルヤ", sample_categories["日用品"])

    flat = dashboard_service.build_flat_dashboard()
    assert flat.category_breakdown[0] == CategoryTotal(name="食料品", amount=7700, count=2)

    hierarchical = dashboard_service.build_hierarchical_dashboard()
    assert hierarchical.mode is DashboardMode.HIERARCHICAL
    assert hierarchical.category_breakdown == (CategoryTotal(name="日用品", amount=7700, count=2),)
    assert hierarchical.detailed_category_breakdown == (
        DetailedCategoryTotal("日用品", None, 7700, 2),
    )
    assert hierarchical.uncategorized_count == 2
    assert hierarchical.uncategorized_amount == 4800
