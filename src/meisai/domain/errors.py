"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class FormatError(DomainError):
    """The statement document does not have the expected fixed layout."""


class ParseError(DomainError):
    """A required field of a well-formed document has an unparseable value."""


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


INVALID_HEADER_FORMAT = "Invalid CSV header format"

MINOR_NOT_IN_MAJOR = "minor category does not belong to the given major category"


def invalid_header(detail: str) -> str:
    """Return message for a header block that does not match the layout."""
    return f"{INVALID_HEADER_FORMAT}: {detail}"


def statement_not_found(statement_id: int) -> str:
    """Return message for missing statement."""
    return f"Statement {statement_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing flat category by ID."""
    return f"Category {category_id} not found"


def major_category_not_found(major_category_id: int) -> str:
    """Return message for missing major category by ID."""
    return f"Major category {major_category_id} not found"


def minor_category_not_found(minor_category_id: int) -> str:
    """Return message for missing minor category by ID."""
    return f"Minor category {minor_category_id} not found"


def store_mapping_not_found(store_name: str) -> str:
    """Return message for a store without a mapping."""
    return f"No category mapping for store '{store_name}'"


def duplicate_category_name(kind: str, name: str) -> str:
    """Return message for a category name that already exists."""
    return f"{kind} '{name}' already exists"
