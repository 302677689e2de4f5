"""Context engine API client package."""

from context_client.base import ApiError, BaseClient
from context_client.client import ContextClient

__all__ = [
    "ApiError",
    "BaseClient",
    "ContextClient",
]
