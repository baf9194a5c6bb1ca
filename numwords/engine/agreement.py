"""
Agreement Resolver — согласование числительного со scale word и единицей

Для коэффициента группы выбирает форму scale word по классу множественного
числа языка и сообщает род, в котором должен быть произнесён сам
коэффициент (ru "две тысячи", es "un millón").

Lookup по классам тотален: классы всех форм проверены при загрузке
language pack (LanguagePack.validate_plural_forms), поэтому здесь
отсутствующая форма означает только "нет отдельной формы" → default.
"""

from dataclasses import dataclass

from numwords.core.domain.grammar import Gender, PluralRule, classify_plural
from numwords.core.domain.language_pack import LanguagePack, UnitNoun
from numwords.core.domain.magnitude import MagnitudeEntry


@dataclass(frozen=True)
class ScaleWord:
    """
    Разрешённая форма scale word.

    Attributes:
        word: Форма scale word для класса коэффициента
        gender: Род, в котором произносится коэффициент
            (None → род внешнего контекста)
    """

    word: str
    gender: Gender | None


def resolve_scale_word(
    coefficient: int, entry: MagnitudeEntry, pack: LanguagePack
) -> ScaleWord:
    """
    Форма scale word для коэффициента.

    Args:
        coefficient: Коэффициент группы (>= 1)
        entry: Строка Magnitude Table
        pack: Language pack (источник правила согласования)

    Returns:
        ScaleWord

    Examples:
        ru: (2, тысяча) → ScaleWord("тысячи", FEMININE)
        ru: (5, миллион) → ScaleWord("миллионов", MASCULINE)
        es: (1000, millón) → ScaleWord("millones", MASCULINE)
    """
    plural_class = classify_plural(coefficient, pack.plural_rule)
    return ScaleWord(word=entry.word_for(plural_class), gender=entry.gender)


def resolve_unit_noun(count: int, noun: UnitNoun, rule: PluralRule) -> str:
    """
    Форма денежной единицы для количества.

    Правило передаётся явно: валюта может иметь собственное правило
    (CurrencyInfo.plural_rule), отличное от правила scale words.

    Examples:
        ru: (21, рубль) → "рубль", (3, рубль) → "рубля", (0, рубль) → "рублей"
        es: (1, euro) → "euro", (0, euro) → "euros"
    """
    return noun.word_for(classify_plural(count, rule))
