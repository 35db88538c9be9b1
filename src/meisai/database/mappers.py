"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from meisai.domain import entities as domain
from meisai.database.models import (
    Statement as ORMStatement,
    Transaction as ORMTransaction,
    Category as ORMCategory,
    MajorCategory as ORMMajorCategory,
    MinorCategory as ORMMinorCategory,
    StoreCategoryMapping as ORMStoreCategoryMapping,
    StoreHierarchicalCategoryMapping as ORMStoreHierarchicalCategoryMapping,
)


def statement_to_domain(orm_statement: ORMStatement) -> domain.Statement:
    """Convert SQLAlchemy Statement model to domain Statement entity."""
    return domain.Statement(
        id=orm_statement.id,
        payment_date=orm_statement.payment_date,
        total_amount=orm_statement.total_amount,
        domestic_amount=orm_statement.domestic_amount,
        overseas_amount=orm_statement.overseas_amount,
        imported_at=orm_statement.imported_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        statement_id=orm_transaction.statement_id,
        transaction_date=orm_transaction.transaction_date,
        store_name=orm_transaction.store_name,
        amount=orm_transaction.amount,
        payment_type=orm_transaction.payment_type,
        note=orm_transaction.note,
        category_id=orm_transaction.category_id,
        major_category_id=orm_transaction.major_category_id,
        minor_category_id=orm_transaction.minor_category_id,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(id=orm_category.id, name=orm_category.name)


def major_category_to_domain(orm_major: ORMMajorCategory) -> domain.MajorCategory:
    """Convert SQLAlchemy MajorCategory model to domain MajorCategory entity."""
    return domain.MajorCategory(id=orm_major.id, name=orm_major.name)


def minor_category_to_domain(orm_minor: ORMMinorCategory) -> domain.MinorCategory:
    """Convert SQLAlchemy MinorCategory model to domain MinorCategory entity."""
    return domain.MinorCategory(
        id=orm_minor.id,
        major_category_id=orm_minor.major_category_id,
        name=orm_minor.name,
    )


def store_category_mapping_to_domain(
    orm_mapping: ORMStoreCategoryMapping,
) -> domain.StoreCategoryMapping:
    """Convert SQLAlchemy StoreCategoryMapping model to domain entity."""
    return domain.StoreCategoryMapping(
        store_name=orm_mapping.store_name,
        category_id=orm_mapping.category_id,
    )


def store_hierarchical_mapping_to_domain(
    orm_mapping: ORMStoreHierarchicalCategoryMapping,
) -> domain.StoreHierarchicalCategoryMapping:
    """Convert SQLAlchemy StoreHierarchicalCategoryMapping model to domain entity."""
    return domain.StoreHierarchicalCategoryMapping(
        store_name=orm_mapping.store_name,
        major_category_id=orm_mapping.major_category_id,
        minor_category_id=orm_mapping.minor_category_id,
    )
