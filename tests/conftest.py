"""Shared pytest fixtures for meisai tests."""

import tempfile
import os
from pathlib import Path
import pytest

from meisai.database.factories import create_sqlite_database
from meisai.domain.category import CategoryService
from meisai.domain.dashboard import DashboardService
from meisai.domain.statement_import import StatementImportService
from meisai.domain.transaction import TransactionService

HEADER_TEMPLATE = (
    '"","","今回のお支払日","{payment_date}"\n'
    '"","","今回のお支払金額合計(￥)","{total}"\n'
    '"","","　うち国内ご利用金額合計(￥)","{domestic}"\n'
    '"","","　うち海外ご利用金額合計(￥)","{overseas}"\n'
    '"【ご利用明細】"\n'
    '"ご利用者","カテゴリ","ご利用日","ご利用先など","ご利用金額(￥)","支払区分",'
    '"今回回数","訂正サイン","お支払い金額(￥)","国内／海外","摘要","備考"\n'
)


def build_statement_csv(
    rows,
    payment_date="2025/07/10",
    total="10,000",
    domestic="10,000",
    overseas="0",
):
    """Build a statement document.

    Each row is a (date, store, amount, payment_type, note) tuple.
    """
    header = HEADER_TEMPLATE.format(
        payment_date=payment_date, total=total, domestic=domestic, overseas=overseas
    )
    body = "".join(
        f'"****-****-****-***","≪ショッピング取組（国内）≫","{date}","{store}","{amount}",'
        f'"{payment_type}","","","{amount}","国内","{note}",""\n'
        for date, store, amount, payment_type, note in rows
    )
    return header + body


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a StatementImportService with a temporary database."""
    return StatementImportService(temp_db)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def statement_csv():
    """Return the statement document builder."""
    return build_statement_csv


@pytest.fixture
def sample_statement_text(fixtures_dir):
    """Return the sample statement export as text."""
    return (fixtures_dir / "meisai.csv").read_text(encoding="utf-8")


@pytest.fixture
def sample_categories(category_service):
    """Create flat and hierarchical categories and return their IDs."""
    food = category_service.create_major_category("食費")
    daily = category_service.create_major_category("日用品")
    return {
        "食料品": category_service.create_category("食料品"),
        "外食": category_service.create_category("外食"),
        "食費": food,
        "日用品": daily,
        "食費 > スーパー": category_service.create_minor_category(food, "スーパー"),
        "食費 > カフェ": category_service.create_minor_category(food, "カフェ"),
        "日用品 > 薬局": category_service.create_minor_category(daily, "薬局"),
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
