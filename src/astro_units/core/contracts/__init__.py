"""
Contract Validation Module

Сериализация величин и валидация JSON контрактов astro_units.
"""

from .serialization import (
    Quantity,
    quantity_from_contract,
    quantity_to_contract,
)
from .validators import (
    ContractValidator,
    QuantityValidator,
    SchemaLoader,
    validate_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuantityValidator",
    # Types
    "Quantity",
    # Functions
    "validate_quantity",
    "quantity_to_contract",
    "quantity_from_contract",
]
