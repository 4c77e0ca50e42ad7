"""Converter — конвертация между алфавитами цифр.

- converter: Converter, ConverterConfig, ConversionResult, convert_base
- batch: convert_request, convert_batch по JSON-запросам
"""

from .batch import BatchItemResult, convert_batch, convert_request
from .converter import (
    ConversionResult,
    Converter,
    ConverterConfig,
    convert_base,
    digits_per_step,
)

__all__ = [
    "Converter",
    "ConverterConfig",
    "ConversionResult",
    "convert_base",
    "digits_per_step",
    "BatchItemResult",
    "convert_batch",
    "convert_request",
]
