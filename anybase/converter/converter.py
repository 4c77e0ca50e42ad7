"""Converter — конвертация числа между произвольными алфавитами цифр

Алгоритм в две фазы, значение ни разу не материализуется как int:
1. Parse (алфавит → Magnitude): Horner-накопление слева направо,
   magnitude = magnitude * src_base + digit
2. Render (Magnitude → алфавит): повторное деление на dst_base,
   цифры получаются от младшей к старшей, затем разворот

Группировка цифр:
- За один шаг обрабатывается группа из m цифр, где m: наибольшая степень
  с base**m <= MAX_SMALL_OPERAND (base 2 → 31 цифра, base 10 → 9, base 16 → 7)
- Это тот же Horner в основании base**m: результат идентичен
  поцифровой обработке, но проходов по limbs в m раз меньше
- ConverterConfig.group_digits=False включает поцифровую обработку

Политика нулей:
- Ведущие нулевые цифры входа отбрасываются
- Нулевое значение (включая пустой вход) даёт ровно один нулевой символ
  алфавита назначения

Сложность O(len(input)**2): каждый шаг проходит по числу limbs,
пропорциональному уже разобранным цифрам. Для входов в тысячи цифр это
ожидаемое поведение; ограничить размер входа можно через max_input_length.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from anybase.core.domain.alphabet import Alphabet
from anybase.core.errors import (
    InputTooLong,
    InvalidDigit,
    TableRole,
    UnrepresentableValue,
)
from anybase.core.math.magnitude import MAX_SMALL_OPERAND, Magnitude

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация Converter."""

    # Обработка групп цифр за один проход по limbs
    group_digits: bool = True

    # Максимальная длина входа в символах (None = без ограничения)
    max_input_length: Optional[int] = None

    def __post_init__(self):
        if self.max_input_length is not None and self.max_input_length < 0:
            raise ValueError(
                f"max_input_length must be non-negative, got {self.max_input_length}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат конвертации с диагностикой."""

    output: str

    # Основания
    src_base: int
    dst_base: int

    # Длины в символах
    input_length: int
    output_length: int

    # Ведущие нулевые цифры входа, не попавшие в результат
    leading_zeros_stripped: int

    # Размер промежуточного Magnitude после parse
    limb_count: int


# =============================================================================
# HELPERS
# =============================================================================


def digits_per_step(base: int, enabled: bool = True) -> int:
    """
    Число цифр в группе для одного шага Horner / деления.

    Args:
        base: Основание алфавита
        enabled: False → всегда 1 (поцифровая обработка)

    Returns:
        Наибольшее m с base**m <= MAX_SMALL_OPERAND (1 для base < 2)

    Examples:
        >>> digits_per_step(2)
        31
        >>> digits_per_step(16)
        7
        >>> digits_per_step(10, enabled=False)
        1
    """
    if not enabled or base < 2:
        return 1

    count = 1
    power = base
    while power * base <= MAX_SMALL_OPERAND:
        power *= base
        count += 1
    return count


# =============================================================================
# CONVERTER
# =============================================================================


class Converter:
    """Конвертер между исходным и целевым алфавитами.

    Оба алфавита валидируются при создании: экземпляр Converter либо
    полностью валиден, либо не создаётся. После создания объект неизменяем,
    каждый вызов convert владеет собственным Magnitude, поэтому один
    конвертер можно использовать из нескольких потоков без блокировок.

    Examples:
        >>> Converter("0123456789", "01").convert("10")
        '1010'
        >>> Converter("0123456789", "01").inverse().convert("1010")
        '10'
    """

    def __init__(
        self,
        src_table: str,
        dst_table: str,
        config: Optional[ConverterConfig] = None
    ):
        """
        Args:
            src_table: Алфавит исходной системы счисления
            dst_table: Алфавит целевой системы счисления
            config: Конфигурация (default: ConverterConfig())

        Raises:
            InvalidTable: Если любой алфавит пустой или содержит повторы
        """
        self.config = config or ConverterConfig()

        self._src = Alphabet.from_table(src_table, TableRole.SOURCE)
        self._dst = Alphabet.from_table(dst_table, TableRole.DESTINATION)

        self._src_group = digits_per_step(self._src.base, self.config.group_digits)
        self._dst_group = digits_per_step(self._dst.base, self.config.group_digits)
        self._src_step = self._src.base ** self._src_group
        self._dst_step = self._dst.base ** self._dst_group

        logger.debug(
            "Converter ready: src_base=%d (x%d per step), dst_base=%d (x%d per step)",
            self._src.base,
            self._src_group,
            self._dst.base,
            self._dst_group,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def src_table(self) -> str:
        return self._src.table

    @property
    def dst_table(self) -> str:
        return self._dst.table

    @property
    def src_base(self) -> int:
        """Основание исходного алфавита (число символов, не байтов)."""
        return self._src.base

    @property
    def dst_base(self) -> int:
        """Основание целевого алфавита (число символов, не байтов)."""
        return self._dst.base

    def inverse(self) -> "Converter":
        """
        Конвертер с переставленными алфавитами.

        Строится заново через конструктор (с полной валидацией),
        исходный экземпляр не меняется.
        """
        return Converter(self._dst.table, self._src.table, self.config)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(self, text: str) -> str:
        """
        Конвертация строки из исходного алфавита в целевой.

        Args:
            text: Число в исходном алфавите (старшая цифра первой)

        Returns:
            То же число в целевом алфавите без ведущих нулей

        Raises:
            InvalidDigit: Первый символ (слева направо), отсутствующий в src_table
            InputTooLong: Если вход длиннее config.max_input_length
            UnrepresentableValue: Ненулевое значение и dst_table из одного символа
        """
        return self._render(self._parse(text))

    def convert_detailed(self, text: str) -> ConversionResult:
        """
        Конвертация с диагностикой (размеры, отброшенные нули, limbs).

        Raises:
            Те же ошибки, что и convert()
        """
        magnitude = self._parse(text)
        limb_count = len(magnitude)
        is_zero = magnitude.is_zero()
        output = self._render(magnitude)

        leading_zeros = len(text) - len(text.lstrip(self._src.zero_digit))
        if is_zero and text:
            # Один нулевой символ остаётся значащим
            leading_zeros -= 1

        return ConversionResult(
            output=output,
            src_base=self._src.base,
            dst_base=self._dst.base,
            input_length=len(text),
            output_length=len(output),
            leading_zeros_stripped=leading_zeros,
            limb_count=limb_count,
        )

    def _parse(self, text: str) -> Magnitude:
        """Parse: Horner-накопление цифр исходного алфавита в Magnitude."""
        if not isinstance(text, str):
            raise TypeError(f"input must be a str, got {type(text).__name__}")

        max_length = self.config.max_input_length
        if max_length is not None and len(text) > max_length:
            raise InputTooLong(len(text), max_length)

        base = self._src.base
        group = self._src_group
        step = self._src_step

        magnitude = Magnitude.zero()
        chunk = 0
        count = 0
        for position, char in enumerate(text):
            digit = self._src.digit_of(char)
            if digit is None:
                logger.debug("Invalid digit %r at position %d", char, position)
                raise InvalidDigit(char, position)

            chunk = chunk * base + digit
            count += 1
            if count == group:
                magnitude.mul_small(step)
                magnitude.add_small(chunk)
                chunk = 0
                count = 0

        if count:
            magnitude.mul_small(base**count)
            magnitude.add_small(chunk)

        logger.debug("Parsed %d digits (base %d) into %d limbs", len(text), base, len(magnitude))
        return magnitude

    def _render(self, magnitude: Magnitude) -> str:
        """Render: извлечение цифр целевого алфавита делением (расходует magnitude)."""
        chars = self._dst.table

        if magnitude.is_zero():
            return chars[0]

        base = self._dst.base
        if base == 1:
            raise UnrepresentableValue(chars)

        group = self._dst_group
        step = self._dst_step

        out: list[str] = []
        while not magnitude.is_zero():
            rem = magnitude.div_mod_small(step)
            if magnitude.is_zero():
                # Старшая группа: без дополнения нулями
                while rem:
                    rem, digit = divmod(rem, base)
                    out.append(chars[digit])
            else:
                for _ in range(group):
                    rem, digit = divmod(rem, base)
                    out.append(chars[digit])

        out.reverse()
        return "".join(out)

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Converter):
            return NotImplemented
        return (
            self._src.table == other._src.table
            and self._dst.table == other._dst.table
            and self.config == other.config
        )

    def __hash__(self) -> int:
        return hash((self._src.table, self._dst.table, self.config))

    def __repr__(self) -> str:
        return f"Converter(src_table={self._src.table!r}, dst_table={self._dst.table!r})"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def convert_base(text: str, src_table: str, dst_table: str) -> str:
    """
    Однократная конвертация без сохранения Converter.

    Эквивалентно Converter(src_table, dst_table).convert(text).

    Examples:
        >>> convert_base("ff", "0123456789abcdef", "01234567")
        '377'
        >>> convert_base("12345", "0123456789", "0123456789abcdefghijklmnopqrstuvwxyz")
        '9ix'

    Raises:
        InvalidTable: Если любой алфавит пустой или содержит повторы
        InvalidDigit: Если вход содержит символ вне src_table
    """
    return Converter(src_table, dst_table).convert(text)
