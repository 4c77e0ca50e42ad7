"""
Domain models and value objects.

Contains digit alphabets and the preset tables of common numeral systems.
"""

from anybase.core.domain.alphabet import (
    Alphabet,
    find_duplicate,
    validate_table,
)
from anybase.core.domain.presets import BASE36, BIN, DEC, HEX, OCT

__all__ = [
    # Alphabet model
    "Alphabet",
    "find_duplicate",
    "validate_table",
    # Presets
    "BIN",
    "OCT",
    "DEC",
    "HEX",
    "BASE36",
]
