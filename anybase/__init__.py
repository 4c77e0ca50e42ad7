"""
anybase — конвертация целых чисел между произвольными алфавитами цифр

Основание задаётся не числом, а упорядоченной строкой символов
(Брайль, CJK, произвольные наборы). Числа могут быть сколь угодно
большими: промежуточное значение хранится в Magnitude (limbs основания
LIMB_RADIX) и никогда не превращается в int.

    >>> convert_base("ff", HEX, OCT)
    '377'
    >>> Converter(DEC, BIN).convert("10")
    '1010'
"""

from anybase.converter import (
    BatchItemResult,
    ConversionResult,
    Converter,
    ConverterConfig,
    convert_base,
    convert_batch,
    convert_request,
)
from anybase.core.contracts import validate_conversion_request
from anybase.core.domain import BASE36, BIN, DEC, HEX, OCT, Alphabet
from anybase.core.errors import (
    ConversionError,
    DivisionByZero,
    InputTooLong,
    InvalidDigit,
    InvalidTable,
    TableRole,
    TableRule,
    UnrepresentableValue,
)
from anybase.core.math import LIMB_RADIX, MAX_SMALL_OPERAND, Magnitude
from anybase.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "convert_base",
    "Converter",
    "ConverterConfig",
    "ConversionResult",
    # Requests
    "convert_request",
    "convert_batch",
    "BatchItemResult",
    "validate_conversion_request",
    # Alphabets
    "Alphabet",
    "BIN",
    "OCT",
    "DEC",
    "HEX",
    "BASE36",
    # Arithmetic
    "Magnitude",
    "LIMB_RADIX",
    "MAX_SMALL_OPERAND",
    # Errors
    "ConversionError",
    "InvalidTable",
    "InvalidDigit",
    "DivisionByZero",
    "UnrepresentableValue",
    "InputTooLong",
    "TableRole",
    "TableRule",
    # Logging
    "setup_logging",
]
