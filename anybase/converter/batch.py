"""Batch — конвертация по JSON-запросам

Запрос (conversion_request.json):
    {"input": "ff", "src_table": "0123456789abcdef", "dst_table": "01234567"}

- convert_request: один запрос → строка результата
- convert_batch: список запросов → список BatchItemResult

Нарушение схемы означает ошибку формы входных данных, поэтому
jsonschema.ValidationError пробрасывается вызывающему и прерывает batch.
ConversionError конкретного запроса фиксируется в его BatchItemResult,
остальные запросы выполняются.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from anybase.converter.converter import Converter, ConverterConfig
from anybase.core.contracts import ConversionRequestValidator
from anybase.core.errors import ConversionError

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class BatchItemResult:
    """Результат одного запроса batch."""

    index: int
    request_id: Optional[Any]

    # Ровно одно из полей заполнено
    output: Optional[str]
    error: Optional[ConversionError]

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# FUNCTIONS
# =============================================================================


def convert_request(
    data: Dict[str, Any],
    config: Optional[ConverterConfig] = None
) -> str:
    """
    Конвертация по одному JSON-запросу.

    Args:
        data: conversion_request (dict)
        config: Конфигурация конвертера

    Returns:
        Результат конвертации

    Raises:
        jsonschema.ValidationError: Если запрос не соответствует схеме
        ConversionError: Если алфавиты или вход невалидны
    """
    ConversionRequestValidator().validate(data)
    converter = Converter(data["src_table"], data["dst_table"], config)
    return converter.convert(data["input"])


def convert_batch(
    requests: Iterable[Dict[str, Any]],
    config: Optional[ConverterConfig] = None
) -> List[BatchItemResult]:
    """
    Конвертация набора JSON-запросов.

    Конвертеры кэшируются по паре (src_table, dst_table) в пределах вызова.

    Args:
        requests: Запросы conversion_request
        config: Конфигурация конвертеров

    Returns:
        BatchItemResult для каждого запроса в исходном порядке

    Raises:
        jsonschema.ValidationError: Если любой запрос не соответствует схеме
    """
    validator = ConversionRequestValidator()
    converters: Dict[Tuple[str, str], Converter] = {}
    results: List[BatchItemResult] = []

    for index, data in enumerate(requests):
        validator.validate(data)
        key = (data["src_table"], data["dst_table"])

        try:
            converter = converters.get(key)
            if converter is None:
                converter = Converter(key[0], key[1], config)
                converters[key] = converter
            output = converter.convert(data["input"])
        except ConversionError as e:
            logger.debug("Batch item %d failed: %s", index, e)
            results.append(
                BatchItemResult(
                    index=index,
                    request_id=data.get("request_id"),
                    output=None,
                    error=e,
                )
            )
            continue

        results.append(
            BatchItemResult(
                index=index,
                request_id=data.get("request_id"),
                output=output,
                error=None,
            )
        )

    logger.debug(
        "Batch done: %d requests, %d failed, %d converters",
        len(results),
        sum(1 for r in results if not r.ok),
        len(converters),
    )
    return results
