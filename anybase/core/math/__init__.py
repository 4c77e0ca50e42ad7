"""
Core math modules для anybase

Арифметика произвольной точности, достаточная для конвертации оснований.
"""

from anybase.core.math.magnitude import (
    # Limb constants
    INTERMEDIATE_BITS,
    LIMB_RADIX,
    MAX_SMALL_OPERAND,
    # Types
    Magnitude,
    # Validation
    validate_small_operand,
)

__all__ = [
    # Magnitude — Constants
    "INTERMEDIATE_BITS",
    "LIMB_RADIX",
    "MAX_SMALL_OPERAND",
    # Magnitude — Types
    "Magnitude",
    # Magnitude — Validation
    "validate_small_operand",
]
