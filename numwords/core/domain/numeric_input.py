"""
NumericInput — валидированное входное значение

Нормализация внешнего представления (int, float, Decimal, строка) в
immutable модель: знак, целая часть произвольной точности, цифры дробной
части, флаг специального значения.

Правила нормализации:
- float переводится через repr() (как число записано в коде), а не через
  двоичное представление: 123.45 → целая 123, дробь (4, 5)
- хвостовые нули дроби отбрасываются: 123.50 ≡ 123.5, 123.0 ≡ 123
- отрицательный ноль → ноль без знака
- NaN / ±Infinity → SpecialValue; None, bool, нечисловые строки → INVALID
"""

import math
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from numwords.core.domain.magnitude import MagnitudeOverflow, count_digits


# Максимальное число цифр целой части, которое допускается материализовать.
# Защищает от строк вида "1e1000000" до перевода в int.
MAX_INPUT_DIGITS: Final[int] = 4096

# Максимальное число значащих цифр дроби ("1E-999999999" → FractionOverflow).
MAX_FRACTION_DIGITS: Final[int] = 4096


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionOverflow(MagnitudeOverflow):
    """Дробная часть длиннее MAX_FRACTION_DIGITS цифр."""

    def __init__(self, fraction_digits: int):
        self.magnitude_digits = fraction_digits
        self.limit = 10**MAX_FRACTION_DIGITS
        ValueError.__init__(
            self,
            f"Fraction overflow: {fraction_digits} fraction digits exceed "
            f"the limit of {MAX_FRACTION_DIGITS}",
        )


# =============================================================================
# ENUMS
# =============================================================================


class SpecialValue(str, Enum):
    """Нечисловые и бесконечные входные значения."""

    INFINITY = "infinity"
    NEGATIVE_INFINITY = "negative_infinity"
    NAN = "nan"
    INVALID = "invalid"


# =============================================================================
# NUMERIC INPUT
# =============================================================================


class NumericInput(BaseModel):
    """
    Валидированное входное значение.

    Для special != None остальные поля не используются (integer=0).
    """

    negative: bool = Field(False, description="Знак (False для нуля)")
    integer: int = Field(0, ge=0, description="Целая часть по модулю")
    fraction: tuple[int, ...] = Field(default_factory=tuple, description="Цифры дроби")
    special: SpecialValue | None = Field(None)

    model_config = {"frozen": True}

    @field_validator("fraction")
    @classmethod
    def validate_fraction_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Дробная часть — последовательность цифр без хвостовых нулей."""
        for digit in v:
            if not 0 <= digit <= 9:
                raise ValueError(f"fraction digit {digit} outside 0..9")
        if v and v[-1] == 0:
            raise ValueError("fraction must not carry trailing zeros")
        return v

    @property
    def is_special(self) -> bool:
        return self.special is not None

    @property
    def is_zero(self) -> bool:
        return self.special is None and self.integer == 0 and not self.fraction

    def to_decimal(self) -> Decimal:
        """Абсолютное значение как Decimal (для округления в CURRENCY)."""
        digits = "".join(str(d) for d in self.fraction)
        return Decimal(f"{self.integer}.{digits}" if digits else str(self.integer))


# =============================================================================
# PARSING
# =============================================================================


def _special(kind: SpecialValue) -> NumericInput:
    return NumericInput(special=kind)


def _from_decimal(value: Decimal) -> NumericInput:
    """Перевод конечного Decimal в NumericInput."""
    if value.is_nan():
        return _special(SpecialValue.NAN)
    if value.is_infinite():
        return _special(
            SpecialValue.NEGATIVE_INFINITY if value.is_signed() else SpecialValue.INFINITY
        )

    if value.is_zero():
        return NumericInput()

    if value.adjusted() >= MAX_INPUT_DIGITS:
        raise MagnitudeOverflow(value.adjusted() + 1, 10**MAX_INPUT_DIGITS)

    sign, digit_tuple, exponent = value.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)

    if exponent < 0:
        # Хвостовые нули дроби не входят в лимит: 1.5000 ≡ 15E-1
        significant = digits.rstrip("0")
        exponent += len(digits) - len(significant)
        digits = significant
        if -exponent > MAX_FRACTION_DIGITS:
            raise FractionOverflow(-exponent)

    if exponent >= 0:
        integer = int(digits) * 10**exponent
        fraction_digits = ""
    else:
        # Дополняем слева нулями: 1E-7 → "0000001"
        digits = digits.rjust(-exponent + 1, "0")
        integer = int(digits[:exponent])
        fraction_digits = digits[exponent:].rstrip("0")

    fraction = tuple(int(d) for d in fraction_digits)
    negative = bool(sign) and (integer > 0 or bool(fraction))
    return NumericInput(negative=negative, integer=integer, fraction=fraction)


def parse_numeric_input(value: Any) -> NumericInput:
    """
    Нормализация внешнего значения в NumericInput.

    Args:
        value: int, float, Decimal, числовая строка или что угодно иное

    Returns:
        NumericInput (special=INVALID для неподдерживаемых значений)

    Raises:
        MagnitudeOverflow: Если целая часть длиннее MAX_INPUT_DIGITS цифр
        FractionOverflow: Если дробь длиннее MAX_FRACTION_DIGITS значащих цифр

    Examples:
        >>> parse_numeric_input(-12.50)
        NumericInput(negative=True, integer=12, fraction=(5,), special=None)
        >>> parse_numeric_input("abc").special
        <SpecialValue.INVALID: 'invalid'>
    """
    if value is None or isinstance(value, bool):
        return _special(SpecialValue.INVALID)

    if isinstance(value, int):
        digits = count_digits(value)
        if digits > MAX_INPUT_DIGITS:
            raise MagnitudeOverflow(digits, 10**MAX_INPUT_DIGITS)
        return NumericInput(negative=value < 0, integer=abs(value))

    if isinstance(value, float):
        if math.isnan(value):
            return _special(SpecialValue.NAN)
        if math.isinf(value):
            return _special(
                SpecialValue.NEGATIVE_INFINITY if value < 0 else SpecialValue.INFINITY
            )
        return _from_decimal(Decimal(repr(value)))

    if isinstance(value, Decimal):
        return _from_decimal(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return _special(SpecialValue.INVALID)
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return _special(SpecialValue.INVALID)
        return _from_decimal(parsed)

    return _special(SpecialValue.INVALID)
