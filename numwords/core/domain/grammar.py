"""
Grammar — классы множественного числа, правила согласования и род

Общие грамматические перечисления, на которых строится согласование
числительного со scale word (thousand, million, lakh) и с денежной единицей.

Правила согласования (PluralRule):
- INVARIANT: форма не зависит от числа (en scale words, hi, ja)
- ONE_OTHER: 1 → ONE, остальное → OTHER (es, en currency)
- ONE_TWO_OTHER: 1 → ONE, 2 → TWO (dual), остальное → OTHER
- EAST_SLAVIC: 1 / 2-4 / 5+ с исключениями 11-14 (ru, uk, be)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. classify_plural — тотальная функция для всех n >= 0
2. Возвращаемый класс всегда входит в PLURAL_RULE_CLASSES[rule]
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class PluralClass(str, Enum):
    """Класс множественного числа (CLDR-подобные имена)."""

    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class PluralRule(str, Enum):
    """Правило выбора класса множественного числа."""

    INVARIANT = "invariant"
    ONE_OTHER = "one_other"
    ONE_TWO_OTHER = "one_two_other"
    EAST_SLAVIC = "east_slavic"


class Gender(str, Enum):
    """Грамматический род существительного (scale word или денежной единицы)."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


# Допустимые классы для каждого правила.
# Формы в language pack с классом вне этого множества — ошибка конфигурации.
PLURAL_RULE_CLASSES: Final[dict[PluralRule, frozenset[PluralClass]]] = {
    PluralRule.INVARIANT: frozenset({PluralClass.OTHER}),
    PluralRule.ONE_OTHER: frozenset({PluralClass.ONE, PluralClass.OTHER}),
    PluralRule.ONE_TWO_OTHER: frozenset(
        {PluralClass.ONE, PluralClass.TWO, PluralClass.OTHER}
    ),
    PluralRule.EAST_SLAVIC: frozenset(
        {PluralClass.ONE, PluralClass.FEW, PluralClass.MANY}
    ),
}


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify_plural(n: int, rule: PluralRule) -> PluralClass:
    """
    Определение класса множественного числа для неотрицательного n.

    Args:
        n: Количество (коэффициент группы или сумма в денежных единицах)
        rule: Правило согласования языка

    Returns:
        PluralClass из PLURAL_RULE_CLASSES[rule]

    Raises:
        ValueError: Если n отрицательное

    Examples:
        >>> classify_plural(21, PluralRule.EAST_SLAVIC)
        <PluralClass.ONE: 'one'>
        >>> classify_plural(12, PluralRule.EAST_SLAVIC)
        <PluralClass.MANY: 'many'>
        >>> classify_plural(1000, PluralRule.ONE_OTHER)
        <PluralClass.OTHER: 'other'>
    """
    if n < 0:
        raise ValueError(f"Plural class is defined for non-negative counts, got {n}")

    if rule == PluralRule.INVARIANT:
        return PluralClass.OTHER

    if rule == PluralRule.ONE_OTHER:
        return PluralClass.ONE if n == 1 else PluralClass.OTHER

    if rule == PluralRule.ONE_TWO_OTHER:
        if n == 1:
            return PluralClass.ONE
        if n == 2:
            return PluralClass.TWO
        return PluralClass.OTHER

    # EAST_SLAVIC
    last_digit = n % 10
    last_two = n % 100
    if last_digit == 1 and last_two != 11:
        return PluralClass.ONE
    if 2 <= last_digit <= 4 and not 12 <= last_two <= 14:
        return PluralClass.FEW
    return PluralClass.MANY
