"""
Alphabet — Модель алфавита цифр

Алфавит задаёт систему счисления упорядоченной строкой различных символов:
символ на позиции i обозначает цифру i, основание равно числу символов.

Символы считаются как Unicode code points (итерация по str), а не как байты
кодировки, поэтому CJK-алфавиты и алфавиты Брайля ведут себя так же,
как ASCII.

Immutable Pydantic модель. Для типизированной ошибки InvalidTable
используйте Alphabet.from_table(); прямой вызов Alphabet(...) с
невалидной таблицей поднимает pydantic.ValidationError.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from anybase.core.errors import InvalidTable, TableRole, TableRule

logger = logging.getLogger(__name__)


# =============================================================================
# ВАЛИДАЦИЯ ТАБЛИЦ
# =============================================================================


def find_duplicate(table: str) -> Optional[str]:
    """
    Первый символ, встретившийся в таблице повторно.

    Args:
        table: Строка символов алфавита

    Returns:
        Повторившийся символ или None, если все символы различны

    Examples:
        >>> find_duplicate("0123")
        >>> find_duplicate("011")
        '1'
    """
    seen: set[str] = set()
    for char in table:
        if char in seen:
            return char
        seen.add(char)
    return None


def validate_table(table: str, role: TableRole) -> None:
    """
    Валидация таблицы алфавита.

    Args:
        table: Строка символов алфавита
        role: Роль таблицы (для сообщения об ошибке)

    Raises:
        InvalidTable: Если таблица пустая или содержит повторы
    """
    if not table:
        logger.debug("Rejected %s: empty table", role.value)
        raise InvalidTable(role, TableRule.EMPTY)

    duplicate = find_duplicate(table)
    if duplicate is not None:
        logger.debug("Rejected %s: duplicate %r", role.value, duplicate)
        raise InvalidTable(role, TableRule.DUPLICATE, duplicate=duplicate)


# =============================================================================
# ALPHABET MODEL
# =============================================================================


class Alphabet(BaseModel):
    """
    Алфавит цифр с обратным поиском символ → значение цифры.

    Immutable модель (frozen=True): строится один раз и больше не меняется.
    """

    table: str = Field(..., min_length=1, description="Символы цифр, позиция = значение")
    role: TableRole = Field(
        TableRole.SOURCE, description="Роль алфавита в конвертере (src_table/dst_table)"
    )

    model_config = {"frozen": True}  # Immutable

    _digits: tuple[str, ...] = PrivateAttr(default=())
    _index: dict[str, int] = PrivateAttr(default_factory=dict)

    @field_validator("table")
    @classmethod
    def validate_unique_chars(cls, v: str) -> str:
        """Отказ при повторяющихся символах (биекция символ → цифра)."""
        duplicate = find_duplicate(v)
        if duplicate is not None:
            raise ValueError(f"table contains duplicate character {duplicate!r}")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._digits = tuple(self.table)
        self._index = {char: value for value, char in enumerate(self._digits)}

    @classmethod
    def from_table(cls, table: str, role: TableRole = TableRole.SOURCE) -> "Alphabet":
        """
        Построение алфавита с типизированной ошибкой.

        Args:
            table: Строка символов алфавита
            role: Роль таблицы

        Returns:
            Валидный Alphabet

        Raises:
            InvalidTable: Если таблица пустая или содержит повторы
        """
        validate_table(table, role)
        return cls(table=table, role=role)

    @property
    def base(self) -> int:
        """Основание системы счисления (число символов)."""
        return len(self._digits)

    @property
    def zero_digit(self) -> str:
        """Символ цифры 0."""
        return self._digits[0]

    def digit_of(self, char: str) -> Optional[int]:
        """Значение цифры для символа или None, если символа нет в алфавите."""
        return self._index.get(char)

    def char_of(self, value: int) -> str:
        """
        Символ для значения цифры.

        Raises:
            IndexError: Если value вне [0, base)
        """
        if not 0 <= value < len(self._digits):
            raise IndexError(f"digit {value} out of range for base {len(self._digits)}")
        return self._digits[value]

    def __len__(self) -> int:
        return len(self._digits)

    def __contains__(self, char: object) -> bool:
        return char in self._index
