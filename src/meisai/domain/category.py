"""Category domain service and store-name category resolvers."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from meisai.database.base import Database
from meisai.domain.entities import (
    Category,
    HierarchicalCategory,
    MajorCategory,
    MinorCategory,
    StoreCategoryMapping,
    StoreHierarchicalCategoryMapping,
)
from meisai.domain.errors import (
    MINOR_NOT_IN_MAJOR,
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_category_name,
    major_category_not_found,
    minor_category_not_found,
)

T = TypeVar("T")


class CategoryResolver(ABC, Generic[T]):
    """Looks up the category a store name is mapped to.

    The mapping table is read once by ``load``; each ``resolve`` afterwards is
    a dictionary lookup. Call ``load`` again to pick up mapping changes.
    """

    def __init__(self, db: Database):
        self.db = db
        self._by_store: Optional[dict[str, T]] = None

    @abstractmethod
    def _load_mappings(self) -> dict[str, T]:
        pass

    def load(self) -> None:
        """Bulk-load the current mapping table."""
        self._by_store = self._load_mappings()

    def resolve(self, store_name: str) -> Optional[T]:
        """Return the category for a store, or None when unmapped."""
        if self._by_store is None:
            self.load()
        return self._by_store.get(store_name)


class FlatCategoryResolver(CategoryResolver[int]):
    """Resolves store names to flat category IDs."""

    def _load_mappings(self) -> dict[str, int]:
        return {m.store_name: m.category_id for m in self.db.list_store_category_mappings()}


class HierarchicalCategoryResolver(CategoryResolver[HierarchicalCategory]):
    """Resolves store names to (major, minor) category pairs."""

    def _load_mappings(self) -> dict[str, HierarchicalCategory]:
        majors = {m.id: m for m in self.db.list_major_categories()}
        minors = {m.id: m for m in self.db.list_minor_categories()}

        resolved = {}
        for mapping in self.db.list_store_hierarchical_mappings():
            major = majors.get(mapping.major_category_id)
            if major is None:
                continue
            minor = None
            if mapping.minor_category_id is not None:
                minor = minors.get(mapping.minor_category_id)
            resolved[mapping.store_name] = HierarchicalCategory(major=major, minor=minor)
        return resolved

    def resolve_ids(self, store_name: str) -> Optional[tuple[int, Optional[int]]]:
        """Return (major_category_id, minor_category_id) for a store, or None."""
        category = self.resolve(store_name)
        if category is None:
            return None
        return (category.major.id, category.minor.id if category.minor else None)


class CategoryService:
    """Service for managing categories and store mappings."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _require_name(name: str, what: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError(f"{what} is required")
        return name

    # Flat categories
    def create_category(self, name: str) -> int:
        """Create a flat category.

        Args:
            name: Category name

        Returns:
            Category ID

        Raises:
            ValidationError: If name is empty
            ConflictError: If a category with this name exists
        """
        name = self._require_name(name, "Category name")
        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(duplicate_category_name("Category", name))
        return self.db.create_category(name)

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.db.get_category(category_id)

    def list_categories(self) -> list[Category]:
        return self.db.list_categories()

    # Hierarchical categories
    def create_major_category(self, name: str) -> int:
        """Create a major category.

        Raises:
            ValidationError: If name is empty
            ConflictError: If a major category with this name exists
        """
        name = self._require_name(name, "Major category name")
        if self.db.get_major_category_by_name(name) is not None:
            raise ConflictError(duplicate_category_name("Major category", name))
        return self.db.create_major_category(name)

    def create_minor_category(self, major_category_id: int, name: str) -> int:
        """Create a minor category under a major category.

        Raises:
            ValidationError: If name is empty
            NotFoundError: If the major category doesn't exist
            ConflictError: If the major already has a minor with this name
        """
        name = self._require_name(name, "Minor category name")
        if self.db.get_major_category(major_category_id) is None:
            raise NotFoundError(major_category_not_found(major_category_id))
        if any(m.name == name for m in self.db.list_minor_categories(major_category_id)):
            raise ConflictError(duplicate_category_name("Minor category", name))
        return self.db.create_minor_category(major_category_id, name)

    def list_major_categories(self) -> list[MajorCategory]:
        return self.db.list_major_categories()

    def list_minor_categories(self, major_category_id: Optional[int] = None) -> list[MinorCategory]:
        return self.db.list_minor_categories(major_category_id)

    # Store mappings
    def set_store_category(self, store_name: str, category_id: int) -> None:
        """Map a store to a flat category, replacing any existing mapping.

        Args:
            store_name: Store name as printed on the statement
            category_id: Flat category ID

        Raises:
            ValidationError: If store name is empty
            NotFoundError: If the category doesn't exist
        """
        store_name = self._require_name(store_name, "Store name")
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        self.db.upsert_store_category_mapping(store_name, category_id)

    def set_store_hierarchical_category(
        self,
        store_name: str,
        major_category_id: int,
        minor_category_id: Optional[int] = None,
    ) -> None:
        """Map a store to a (major, minor) pair, replacing any existing mapping.

        Nothing is written when validation fails, so a previous mapping for
        the store stays in place.

        Args:
            store_name: Store name as printed on the statement
            major_category_id: Major category ID
            minor_category_id: Optional minor category ID; must belong to the major

        Raises:
            ValidationError: If store name is empty or the minor belongs to another major
            NotFoundError: If the major or minor category doesn't exist
        """
        store_name = self._require_name(store_name, "Store name")
        if self.db.get_major_category(major_category_id) is None:
            raise NotFoundError(major_category_not_found(major_category_id))

        if minor_category_id is not None:
            minor = self.db.get_minor_category(minor_category_id)
            if minor is None:
                raise NotFoundError(minor_category_not_found(minor_category_id))
            if minor.major_category_id != major_category_id:
                raise ValidationError(MINOR_NOT_IN_MAJOR)

        self.db.upsert_store_hierarchical_mapping(store_name, major_category_id, minor_category_id)

    def delete_store_category(self, store_name: str) -> None:
        """Remove the flat mapping for a store.

        Raises:
            NotFoundError: If the store has no flat mapping
        """
        self.db.delete_store_category_mapping(store_name)

    def delete_store_hierarchical_category(self, store_name: str) -> None:
        """Remove the hierarchical mapping for a store.

        Raises:
            NotFoundError: If the store has no hierarchical mapping
        """
        self.db.delete_store_hierarchical_mapping(store_name)

    def list_store_categories(self) -> list[StoreCategoryMapping]:
        return self.db.list_store_category_mappings()

    def list_store_hierarchical_categories(self) -> list[StoreHierarchicalCategoryMapping]:
        return self.db.list_store_hierarchical_mappings()
