"""
Contract Validation Module

Модуль для валидации JSON контрактов anybase.
"""

from .validators import (
    ContractValidator,
    ConversionRequestValidator,
    SchemaLoader,
    validate_conversion_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    # Functions
    "validate_conversion_request",
]
