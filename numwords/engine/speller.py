"""
Low-Order Speller — слова для числа внутри одной группы

Переводит n из [0, pack.base) в плоскую последовательность токенов.
Соединение токенов (пробел или пустая строка) выполняет Format Pipeline,
поэтому speller никогда не склеивает слова сам, кроме явного tens_fuse.

Порядок разбора:
1. Тысячи (только myriad packs, base 10000): множитель + thousand word
2. Сотни: точная форма (es "cien") → родовая форма → слитная форма →
   множитель + неизменяемое hundred word
3. Связка после сотен (en "and"), если остаток ненулевой
4. Двузначная часть: родовая форма → override → прямой lookup → tens + unit

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат непустой для всех 0 <= n < pack.base
2. Детерминированность: одинаковый вход → одинаковые токены
3. n вне диапазона → ValueError (ошибка вызывающего кода, не данных)
"""

from numwords.core.domain.grammar import Gender
from numwords.core.domain.language_pack import LanguagePack


# =============================================================================
# TWO-DIGIT PART
# =============================================================================


def _spell_two_digit(n: int, pack: LanguagePack, gender: Gender | None) -> list[str]:
    """Слова для 1..99 с учётом рода."""
    gendered = pack.gender_forms.get(gender, {}) if gender is not None else {}

    if n in gendered:
        return [gendered[n]]
    if n in pack.two_digit_overrides:
        return [pack.two_digit_overrides[n]]
    if n < len(pack.words):
        return [pack.words[n]]

    tens_word = pack.tens[n // 10]
    unit = n % 10
    if unit == 0:
        return [tens_word]

    unit_word = gendered.get(unit, pack.words[unit])
    if pack.tens_fuse is not None:
        return [f"{tens_word}{pack.tens_fuse}{unit_word}"]
    if pack.tens_link is not None:
        return [tens_word, pack.tens_link, unit_word]
    return [tens_word, unit_word]


# =============================================================================
# HUNDREDS / THOUSANDS
# =============================================================================


def _spell_hundreds(
    digit: int, remainder: int, pack: LanguagePack, gender: Gender | None
) -> list[str]:
    """Слова для digit * 100 (digit в 1..9)."""
    if remainder == 0 and digit in pack.hundreds_exact:
        return [pack.hundreds_exact[digit]]

    gendered = pack.gender_hundreds.get(gender, {}) if gender is not None else {}
    if digit in gendered:
        return [gendered[digit]]
    if digit in pack.hundreds:
        return [pack.hundreds[digit]]

    if digit == 1 and pack.omit_one_hundred:
        return [pack.hundred]
    return [pack.words[digit], pack.hundred]


def _spell_thousands(digit: int, pack: LanguagePack) -> list[str]:
    """Слова для digit * 1000 внутри myriad группы."""
    if digit == 1 and pack.omit_one_thousand:
        return [pack.thousand]
    return [pack.words[digit], pack.thousand]


# =============================================================================
# SPELL SMALL
# =============================================================================


def spell_small(
    n: int,
    pack: LanguagePack,
    *,
    gender: Gender | None = None,
    conjunction: bool = False,
) -> list[str]:
    """
    Слова для числа внутри одной группы.

    Args:
        n: Значение в [0, pack.base)
        pack: Language pack
        gender: Род существительного, с которым согласуется число
            (None → нейтральные формы из words)
        conjunction: Вставлять связку после сотен (en "one hundred and one"),
            если pack.conjunction_after_hundred

    Returns:
        Непустой список токенов

    Raises:
        ValueError: Если n вне [0, pack.base)

    Examples:
        en: 342 → ["three", "hundred", "forty-two"]
        es: 21 (masculine) → ["veintiún"], 100 → ["cien"], 101 → ["ciento", "uno"]
        ja: 2025 → ["二", "千", "二十五"]
    """
    if not 0 <= n < pack.base:
        raise ValueError(f"spell_small expects 0 <= n < {pack.base}, got {n}")

    if n == 0:
        return [pack.zero]

    tokens: list[str] = []
    rest = n

    if pack.base > 1000:
        thousands, rest = divmod(rest, 1000)
        if thousands:
            tokens.extend(_spell_thousands(thousands, pack))

    if pack.base > 100:
        hundreds, rest = divmod(rest, 100)
        if hundreds:
            tokens.extend(_spell_hundreds(hundreds, rest, pack, gender))

    if rest:
        if tokens and conjunction and pack.conjunction_after_hundred:
            tokens.append(pack.conjunction)
        tokens.extend(_spell_two_digit(rest, pack, gender))

    return tokens
