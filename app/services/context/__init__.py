"""Context engine services - cache registry and table loaders."""

from app.services.context.engine import ContextEngine, ContextTable
from app.services.context.errors import ContextEngineError, TableAlreadyRegisteredError, TableNotFoundError
from app.services.context.loaders import ContextLoaders

__all__ = [
    "ContextEngine",
    "ContextTable",
    "ContextLoaders",
    "ContextEngineError",
    "TableNotFoundError",
    "TableAlreadyRegisteredError",
]
