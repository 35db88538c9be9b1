"""Domain layer for meisai application."""

# Services are imported lazily; the database layer imports domain.entities
# while it is itself being imported.
_SERVICES = {
    "StatementImportService": "meisai.domain.statement_import",
    "CategoryService": "meisai.domain.category",
    "TransactionService": "meisai.domain.transaction",
    "DashboardService": "meisai.domain.dashboard",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
