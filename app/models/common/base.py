"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a plain dictionary (enums as their values)."""
        return {k: v.value if isinstance(v, Enum) else v for k, v in asdict(self).items()}
