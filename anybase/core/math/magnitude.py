"""
Magnitude — беззнаковое целое произвольной точности

Значение хранится как последовательность limbs в фиксированном основании
LIMB_RADIX, младший limb первым (little-endian):

    value = Σ limbs[i] * LIMB_RADIX**i

Модуль даёт ровно те примитивы, которые нужны конвертеру алфавитов:
- mul_small: умножение на малый множитель (in place)
- add_small: сложение с малым слагаемым (in place)
- div_mod_small: деление на малый делитель с остатком (in place)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Canonical form: нет limbs старше самого старшего ненулевого;
   ноль: ровно один limb, равный 0 (последовательность никогда не пуста)
2. 0 <= limb < LIMB_RADIX для каждого limb
3. Каждый мутирующий примитив восстанавливает инвариант 1 перед возвратом
4. Промежуточные значения (LIMB_RADIX - 1) * k + carry и r * LIMB_RADIX + limb
   помещаются в INTERMEDIATE_BITS бит для любого k <= MAX_SMALL_OPERAND

Сложность: каждая операция O(len(limbs)). Конвертация n цифр выполняет
O(n) операций над растущим числом, то есть O(n**2) в худшем случае.
"""

from typing import Final, Iterable, Optional

from anybase.core.errors import DivisionByZero

# =============================================================================
# LIMB-ПАРАМЕТРЫ
# =============================================================================

# Основание одного limb. Десятичное основание удобно для диагностики
# (limbs читаются как группы по 9 десятичных цифр)
LIMB_RADIX: Final[int] = 10**9

# Максимальный малый операнд для mul_small / add_small / div_mod_small.
# Длина любого практического алфавита (и степени основания при группировке
# цифр) ограничена этим значением
MAX_SMALL_OPERAND: Final[int] = 2**32 - 1

# Ширина промежуточной арифметики, в которую гарантированно помещаются
# (LIMB_RADIX - 1) * MAX_SMALL_OPERAND + MAX_SMALL_OPERAND < 2**64
# и MAX_SMALL_OPERAND * LIMB_RADIX + (LIMB_RADIX - 1) < 2**64
INTERMEDIATE_BITS: Final[int] = 64


# =============================================================================
# ВАЛИДАЦИЯ ОПЕРАНДОВ
# =============================================================================


def validate_small_operand(value: int, name: str = "k") -> None:
    """
    Валидация малого операнда арифметических примитивов.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        ValueError: Если value < 0 или value > MAX_SMALL_OPERAND
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > MAX_SMALL_OPERAND:
        raise ValueError(f"{name} must be <= {MAX_SMALL_OPERAND}, got {value}")


# =============================================================================
# MAGNITUDE
# =============================================================================


class Magnitude:
    """
    Беззнаковое целое произвольной точности в limbs основания LIMB_RADIX.

    Каждая конвертация владеет собственным экземпляром: он создаётся при
    разборе входа, мутируется на месте и расходуется при рендеринге.

    Examples:
        >>> m = Magnitude.zero()
        >>> m.mul_small(10); m.add_small(7)
        >>> m.div_mod_small(2)
        1
        >>> m.to_int()
        3
    """

    __slots__ = ("_limbs",)

    def __init__(self, limbs: Optional[Iterable[int]] = None):
        """
        Args:
            limbs: Limbs в порядке little-endian (default: ноль).
                Лишние старшие нули отбрасываются.

        Raises:
            ValueError: Если limb вне диапазона [0, LIMB_RADIX)
        """
        self._limbs: list[int] = [0] if limbs is None else list(limbs)

        if not self._limbs:
            self._limbs.append(0)

        for limb in self._limbs:
            if isinstance(limb, bool) or not isinstance(limb, int):
                raise TypeError(f"limb must be an int, got {type(limb).__name__}")
            if not 0 <= limb < LIMB_RADIX:
                raise ValueError(f"limb must be in [0, {LIMB_RADIX}), got {limb}")

        self.normalize()

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Magnitude":
        """Каноническое представление нуля (один нулевой limb)."""
        return cls()

    @classmethod
    def from_int(cls, value: int) -> "Magnitude":
        """
        Построение из неотрицательного int.

        Только для диагностики и тестов: конвертер никогда не
        материализует значение как int.

        Raises:
            ValueError: Если value < 0
        """
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")

        limbs = []
        while True:
            value, limb = divmod(value, LIMB_RADIX)
            limbs.append(limb)
            if value == 0:
                break
        return cls(limbs)

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    @property
    def limbs(self) -> tuple[int, ...]:
        """Копия limbs (little-endian)."""
        return tuple(self._limbs)

    def is_zero(self) -> bool:
        """True если значение равно нулю."""
        return len(self._limbs) == 1 and self._limbs[0] == 0

    def to_int(self) -> int:
        """Значение как int (диагностика и тесты)."""
        value = 0
        for limb in reversed(self._limbs):
            value = value * LIMB_RADIX + limb
        return value

    def copy(self) -> "Magnitude":
        """Независимая копия."""
        clone = Magnitude.__new__(Magnitude)
        clone._limbs = list(self._limbs)
        return clone

    def __len__(self) -> int:
        return len(self._limbs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self._limbs == other._limbs

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Magnitude(limbs={self._limbs!r})"

    # -------------------------------------------------------------------------
    # Арифметика (in place)
    # -------------------------------------------------------------------------

    def normalize(self) -> None:
        """Удаление старших нулевых limbs (минимальная длина 1)."""
        limbs = self._limbs
        while len(limbs) > 1 and limbs[-1] == 0:
            limbs.pop()

    def mul_small(self, k: int) -> None:
        """
        Умножение на малый множитель на месте.

        Проход от младшего limb к старшему:
            carry, limb = divmod(limb * k + carry, LIMB_RADIX)
        затем остаток carry выносится в новые старшие limbs.

        Args:
            k: Множитель, 0 <= k <= MAX_SMALL_OPERAND

        Examples:
            >>> m = Magnitude([999_999_999])
            >>> m.mul_small(2)
            >>> m.limbs
            (999999998, 1)
        """
        validate_small_operand(k)

        if k == 0:
            self._limbs = [0]
            return
        if k == 1:
            return

        limbs = self._limbs
        carry = 0
        for i, limb in enumerate(limbs):
            carry, limbs[i] = divmod(limb * k + carry, LIMB_RADIX)

        while carry:
            carry, limb = divmod(carry, LIMB_RADIX)
            limbs.append(limb)

        self.normalize()

    def add_small(self, k: int) -> None:
        """
        Сложение с малым слагаемым на месте.

        Проход прекращается, как только carry становится 0: старшие limbs
        при этом не меняются.

        Args:
            k: Слагаемое, 0 <= k <= MAX_SMALL_OPERAND
        """
        validate_small_operand(k)

        limbs = self._limbs
        carry = k
        for i, limb in enumerate(limbs):
            if carry == 0:
                break
            carry, limbs[i] = divmod(limb + carry, LIMB_RADIX)

        while carry:
            carry, limb = divmod(carry, LIMB_RADIX)
            limbs.append(limb)

    def div_mod_small(self, k: int) -> int:
        """
        Деление на малый делитель на месте, возвращает остаток.

        Деление столбиком от старшего limb к младшему:
            v = r * LIMB_RADIX + limb
            limb, r = divmod(v, k)

        Args:
            k: Делитель, 1 <= k <= MAX_SMALL_OPERAND

        Returns:
            Остаток от деления (0 <= r < k)

        Raises:
            DivisionByZero: Если k == 0

        Examples:
            >>> m = Magnitude.from_int(255)
            >>> m.div_mod_small(8)
            7
            >>> m.to_int()
            31
        """
        validate_small_operand(k)

        if k == 0:
            raise DivisionByZero()

        limbs = self._limbs
        rem = 0
        for i in range(len(limbs) - 1, -1, -1):
            limbs[i], rem = divmod(rem * LIMB_RADIX + limbs[i], k)

        self.normalize()
        return rem
