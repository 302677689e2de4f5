"""Services package - service class exports."""

from app.services.context import ContextEngine, ContextLoaders

__all__ = [
    "ContextEngine",
    "ContextLoaders",
]
