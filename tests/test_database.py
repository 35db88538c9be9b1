"""Tests for the database layer."""

from datetime import date
from pathlib import Path

import pytest

from meisai.database.factories import DB_PATH_ENV_VAR, resolve_database_path
from meisai.domain.errors import NotFoundError


def _statement(db):
    return db.create_statement(
        payment_date=date(2025, 7, 10),
        total_amount=10000,
        domestic_amount=10000,
        overseas_amount=0,
    )


def test_resolve_database_path_prefers_argument(monkeypatch, tmp_path):
    monkeypatch.setenv(DB_PATH_ENV_VAR, str(tmp_path / "env.db"))

    assert resolve_database_path(str(tmp_path / "arg.db")) == tmp_path / "arg.db"


def test_resolve_database_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(DB_PATH_ENV_VAR, str(tmp_path / "env.db"))

    assert resolve_database_path() == tmp_path / "env.db"


def test_resolve_database_path_default(monkeypatch, tmp_path):
    monkeypatch.delenv(DB_PATH_ENV_VAR, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert resolve_database_path() == tmp_path / ".meisai" / "meisai.db"
    assert (tmp_path / ".meisai").is_dir()


def test_statement_round_trip(temp_db):
    statement_id = _statement(temp_db)

    statement = temp_db.get_statement(statement_id)
    assert statement.payment_date == date(2025, 7, 10)
    assert statement.total_amount == 10000
    assert temp_db.get_statement(999) is None


def test_unit_of_work_commits(temp_db):
    with temp_db.unit_of_work():
        statement_id = _statement(temp_db)
        temp_db.create_transaction(statement_id, date(2025, 6, 15), "テストストア", 5000)

    temp_db.disconnect()
    assert len(temp_db.list_transactions()) == 1


def test_unit_of_work_rolls_back_on_error(temp_db):
    with pytest.raises(RuntimeError):
        with temp_db.unit_of_work():
            statement_id = _statement(temp_db)
            temp_db.create_transaction(statement_id, date(2025, 6, 15), "テストストア", 5000)
            raise RuntimeError("boom")

    assert temp_db.list_statements() == []
    assert temp_db.list_transactions() == []


def test_nested_unit_of_work_joins_outer(temp_db):
    with pytest.raises(RuntimeError):
        with temp_db.unit_of_work():
            with temp_db.unit_of_work():
                _statement(temp_db)
            raise RuntimeError("boom")

    assert temp_db.list_statements() == []


def test_writes_after_rollback_commit_normally(temp_db):
    with pytest.raises(RuntimeError):
        with temp_db.unit_of_work():
            _statement(temp_db)
            raise RuntimeError("boom")

    _statement(temp_db)
    temp_db.disconnect()

    assert len(temp_db.list_statements()) == 1


def test_transaction_exists(temp_db):
    statement_id = _statement(temp_db)
    temp_db.create_transaction(statement_id, date(2025, 6, 15), "テストストア", 5000)

    assert temp_db.transaction_exists(statement_id, date(2025, 6, 15), "テストストア", 5000)
    assert not temp_db.transaction_exists(statement_id, date(2025, 6, 15), "テストストア", 4000)


def test_list_transaction_dates_distinct(temp_db):
    statement_id = _statement(temp_db)
    temp_db.create_transaction(statement_id, date(2025, 6, 15), "A", 100)
    temp_db.create_transaction(statement_id, date(2025, 6, 15), "B", 200)
    temp_db.create_transaction(statement_id, date(2025, 7, 1), "C", 300)

    assert sorted(temp_db.list_transaction_dates()) == [date(2025, 6, 15), date(2025, 7, 1)]


def test_update_missing_transaction(temp_db):
    with pytest.raises(NotFoundError):
        temp_db.update_transaction_category(999, None)

    with pytest.raises(NotFoundError):
        temp_db.update_transaction_hierarchical_category(999, None, None)


def test_mapping_lookup(temp_db):
    category_id = temp_db.create_category("食料品")
    temp_db.upsert_store_category_mapping("スーパーマルヤ", category_id)

    mapping = temp_db.get_store_category_mapping("スーパーマルヤ")

    assert mapping.category_id == category_id
    assert temp_db.get_store_category_mapping("未登録ストア") is None
