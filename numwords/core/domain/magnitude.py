"""
Magnitude Table — таблица scale words языка

Статическая упорядоченная таблица (threshold, scale name, формы по классам
множественного числа). Загружается один раз вместе с language pack и
никогда не изменяется (frozen pydantic модели).

Таблица описывает НЕРАВНОМЕРНУЮ последовательность шагов:
- en: 10^3, 10^6, 10^9 ... (шаг 1000)
- es (long scale): 10^3, 10^6, 10^12, 10^18 (шаги 1000, 10^6, 10^6)
- hi (lakh/crore): 10^3, 10^5, 10^7 ... (шаги 100)
- ja (myriad): 10^4, 10^8 ... (шаг 10^4)

Шаг entry = threshold следующей entry / threshold текущей.
Для верхней entry шаг задаётся через limit (исключающая верхняя граница).
"""

import math

from pydantic import BaseModel, Field, field_validator, model_validator

from numwords.core.domain.grammar import Gender, PluralClass


# =============================================================================
# DIGIT COUNT
# =============================================================================


def count_digits(n: int) -> int:
    """
    Число десятичных цифр |n| без перевода в строку.

    Интерпретатор ограничивает str(int) 4300 цифрами; оценка по bit_length
    уточняется сравнением со степенью 10.
    """
    n = abs(n)
    if n == 0:
        return 1
    digits = int((n.bit_length() - 1) * math.log10(2)) + 1
    if n >= 10**digits:
        digits += 1
    elif n < 10 ** (digits - 1):
        digits -= 1
    return digits


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MagnitudeOverflow(ValueError):
    """
    Значение превышает наибольший разряд, описанный в language pack.

    Единственная ошибка времени конвертации, которая сообщается вызывающему
    коду явно: усечение дало бы численно неверный текст.
    """

    def __init__(self, magnitude_digits: int, limit: int):
        self.magnitude_digits = magnitude_digits
        self.limit = limit
        super().__init__(
            f"Magnitude overflow: value with {magnitude_digits} digits is not "
            f"below the largest representable limit ({count_digits(limit)} digits)"
        )


# =============================================================================
# MAGNITUDE ENTRY
# =============================================================================


class MagnitudeEntry(BaseModel):
    """
    Одна строка Magnitude Table.

    Attributes:
        threshold: Числовое значение единицы разряда (1000, 100000, 10^6 ...)
        name: Каноническая (default) форма scale word
        forms: Формы по классам множественного числа
        gender: Род scale word (управляет формой коэффициента: ru "одна тысяча")
        omit_one: Коэффициент 1 не произносится (es "mil", ja "千")
        noun_preposition: Токен между scale word и денежной единицей,
            если число заканчивается этой scale word (es "un millón de euros")
    """

    threshold: int = Field(..., gt=1, description="Значение единицы разряда")
    name: str = Field(..., min_length=1, description="Default форма scale word")
    forms: dict[PluralClass, str] = Field(default_factory=dict)
    gender: Gender | None = Field(None, description="Род scale word")
    omit_one: bool = Field(False, description="Не произносить коэффициент 1")
    noun_preposition: str | None = Field(None, min_length=1)

    model_config = {"frozen": True}

    def word_for(self, plural_class: PluralClass) -> str:
        """Форма scale word для класса; default форма, если отдельной нет."""
        return self.forms.get(plural_class, self.name)


# =============================================================================
# MAGNITUDE TABLE
# =============================================================================


class MagnitudeTable(BaseModel):
    """
    Упорядоченная (по возрастанию threshold) таблица scale words.

    Инварианты (проверяются при загрузке):
    1. thresholds строго возрастают
    2. каждый threshold делит следующий (шаг — целое число > 1)
    3. limit кратен верхнему threshold и больше него
    """

    entries: tuple[MagnitudeEntry, ...] = Field(..., min_length=1)
    limit: int = Field(..., gt=0, description="Исключающая верхняя граница значения")

    model_config = {"frozen": True}

    @field_validator("entries")
    @classmethod
    def validate_entries_ascending(
        cls, v: tuple[MagnitudeEntry, ...]
    ) -> tuple[MagnitudeEntry, ...]:
        """Проверка возрастания thresholds и целочисленности шагов."""
        for lower, upper in zip(v, v[1:]):
            if upper.threshold <= lower.threshold:
                raise ValueError(
                    f"thresholds must be strictly ascending: "
                    f"{lower.name}={lower.threshold}, {upper.name}={upper.threshold}"
                )
            if upper.threshold % lower.threshold != 0:
                raise ValueError(
                    f"threshold {upper.threshold} ({upper.name}) is not a multiple "
                    f"of {lower.threshold} ({lower.name})"
                )
        return v

    @model_validator(mode="after")
    def validate_limit(self) -> "MagnitudeTable":
        """Проверка, что limit кратен верхнему threshold."""
        top = self.entries[-1].threshold
        if self.limit <= top or self.limit % top != 0:
            raise ValueError(
                f"limit {self.limit} must be a multiple of the top threshold {top} "
                f"and greater than it"
            )
        return self

    @property
    def base(self) -> int:
        """Основание группы единиц (первый threshold: 1000 или 10000)."""
        return self.entries[0].threshold

    def step(self, index: int) -> int:
        """
        Шаг entry: сколько её единиц составляют следующую entry.

        Для верхней entry возвращает limit // threshold (максимальный
        коэффициент + 1).
        """
        entry = self.entries[index]
        if index + 1 < len(self.entries):
            return self.entries[index + 1].threshold // entry.threshold
        return self.limit // entry.threshold
