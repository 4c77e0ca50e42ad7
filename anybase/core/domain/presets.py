"""
Presets — готовые алфавиты распространённых систем счисления

Строки передаются в Converter / convert_base как есть:

    >>> convert_base("1010", BIN, DEC)
    '10'
"""

from typing import Final

# Двоичная система (base-2)
BIN: Final[str] = "01"

# Восьмеричная система (base-8)
OCT: Final[str] = "01234567"

# Десятичная система (base-10)
DEC: Final[str] = "0123456789"

# Шестнадцатеричная система (base-16), строчные буквы
HEX: Final[str] = "0123456789abcdef"

# Base-36: цифры и строчные латинские буквы
BASE36: Final[str] = DEC + "abcdefghijklmnopqrstuvwxyz"
