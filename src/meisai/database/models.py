"""SQLAlchemy models for meisai database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    UniqueConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Statement(Base):
    """Monthly statement summary model."""

    __tablename__ = "statements"

    id = Column(Integer, primary_key=True)
    payment_date = Column(Date, nullable=False)
    total_amount = Column(Integer, nullable=False)
    domestic_amount = Column(Integer, nullable=False, default=0)
    overseas_amount = Column(Integer, nullable=False, default=0)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="statement")


class Category(Base):
    """Flat category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")


class MajorCategory(Base):
    """Top-level hierarchical category model."""

    __tablename__ = "major_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)

    # Relationships
    minor_categories = relationship(
        "MinorCategory", back_populates="major_category", cascade="all, delete-orphan"
    )


class MinorCategory(Base):
    """Second-level hierarchical category model."""

    __tablename__ = "minor_categories"

    id = Column(Integer, primary_key=True)
    major_category_id = Column(Integer, ForeignKey("major_categories.id"), nullable=False)
    name = Column(String, nullable=False)

    __table_args__ = (
        UniqueConstraint("major_category_id", "name", name="uq_minor_category_major_name"),
    )

    # Relationships
    major_category = relationship("MajorCategory", back_populates="minor_categories")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    statement_id = Column(Integer, ForeignKey("statements.id"), nullable=False)
    transaction_date = Column(Date, nullable=False)
    store_name = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)
    payment_type = Column(String, nullable=False, default="")
    note = Column(String, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    major_category_id = Column(Integer, ForeignKey("major_categories.id"), nullable=True)
    minor_category_id = Column(Integer, ForeignKey("minor_categories.id"), nullable=True)

    # Dedup lookups hit (statement, date, store, amount)
    __table_args__ = (
        Index(
            "ix_transaction_dedup_key",
            "statement_id",
            "transaction_date",
            "store_name",
            "amount",
        ),
    )

    # Relationships
    statement = relationship("Statement", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


class StoreCategoryMapping(Base):
    """Store name to flat category mapping model."""

    __tablename__ = "store_category_mappings"

    id = Column(Integer, primary_key=True)
    store_name = Column(String, unique=True, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)


class StoreHierarchicalCategoryMapping(Base):
    """Store name to (major, minor) category mapping model."""

    __tablename__ = "store_hierarchical_category_mappings"

    id = Column(Integer, primary_key=True)
    store_name = Column(String, unique=True, nullable=False)
    major_category_id = Column(Integer, ForeignKey("major_categories.id"), nullable=False)
    minor_category_id = Column(Integer, ForeignKey("minor_categories.id"), nullable=True)

    # Relationships
    major_category = relationship("MajorCategory")
    minor_category = relationship("MinorCategory")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
