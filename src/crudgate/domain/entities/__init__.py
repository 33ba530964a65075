"""Domain entities."""

from crudgate.domain.entities.identity import Identity

__all__ = [
    "Identity",
]
