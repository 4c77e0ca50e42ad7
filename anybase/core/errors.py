"""
Errors — таксономия ошибок конвертации

Все ошибки конвертации наследуются от ConversionError, поэтому вызывающий
код может перехватить их одним except. Ни одна ошибка не повторяется
и не подавляется внутри библиотеки: конвертер либо полностью валиден,
либо не создаётся вовсе.

Таксономия:
- InvalidTable: пустой алфавит или повторяющийся символ
- InvalidDigit: символ входа отсутствует в исходном алфавите
- DivisionByZero: деление Magnitude на ноль (внутренняя защита)
- UnrepresentableValue: ненулевое значение в однобуквенный алфавит
- InputTooLong: вход длиннее ConverterConfig.max_input_length
"""

from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class TableRole(str, Enum):
    """Роль алфавита в конвертере"""

    SOURCE = "src_table"
    DESTINATION = "dst_table"


class TableRule(str, Enum):
    """Нарушенное правило валидации алфавита"""

    EMPTY = "empty"
    DUPLICATE = "duplicate"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(Exception):
    """Базовый класс всех ошибок anybase."""

    pass


class InvalidTable(ConversionError):
    """
    Алфавит пустой или содержит повторяющийся символ.

    Attributes:
        role: Какой алфавит невалиден (src_table / dst_table)
        rule: Какое правило нарушено (empty / duplicate)
        duplicate: Первый повторившийся символ (только для DUPLICATE)
    """

    def __init__(
        self,
        role: TableRole,
        rule: TableRule,
        duplicate: Optional[str] = None,
    ):
        self.role = role
        self.rule = rule
        self.duplicate = duplicate

        if rule == TableRule.EMPTY:
            message = f"{role.value} is empty"
        else:
            message = f"{role.value} contains duplicate characters ({duplicate!r})"
        super().__init__(message)


class InvalidDigit(ConversionError):
    """
    Символ входа не найден в исходном алфавите.

    Attributes:
        char: Невалидный символ
        position: Позиция символа во входе (0-based, в символах, не байтах)
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Input character {char!r} not found in src_table (position {position})"
        )


class DivisionByZero(ConversionError, ZeroDivisionError):
    """
    Деление Magnitude на ноль.

    Конструктор Converter отвергает пустые алфавиты, поэтому на пути
    конвертации делитель всегда >= 1. Ошибка остаётся явной защитой
    контракта div_mod_small.
    """

    def __init__(self):
        super().__init__("division by zero")


class UnrepresentableValue(ConversionError):
    """Ненулевое значение нельзя записать однобуквенным алфавитом."""

    def __init__(self, dst_table: str):
        self.dst_table = dst_table
        super().__init__(
            f"Non-zero value cannot be rendered with single-character dst_table {dst_table!r}"
        )


class InputTooLong(ConversionError):
    """Вход длиннее допустимого ConverterConfig.max_input_length."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Input length {length} exceeds max_input_length {max_length}"
        )
