"""
Sequence Assembler — сборка токенов по группам разрядов

Проходит GroupValue от старшей группы к младшей:
- нулевые группы пропускаются (кроме значения ноль)
- для каждой scale группы: коэффициент (в роде scale word) + форма scale word
- коэффициент 1 опускается, если scale word помечена omit_one
  (es "mil", ja "千"); pack.omit_one_top_only ограничивает это старшей группой
- связка перед последней группой (en "one thousand and one")

Коэффициент старшей группы может превышать основание speller
(es "mil millones" = 10^9 в long scale). Такой коэффициент
раскладывается и собирается рекурсивно по той же таблице.
"""

from typing import Callable

from numwords.core.domain.grammar import Gender
from numwords.core.domain.language_pack import LanguagePack
from numwords.core.domain.magnitude import MagnitudeEntry
from numwords.core.math.decomposition import GroupValue, decompose
from numwords.engine.agreement import ScaleWord, resolve_scale_word
from numwords.engine.speller import spell_small


SpellFn = Callable[..., list[str]]
ResolveFn = Callable[[int, MagnitudeEntry, LanguagePack], ScaleWord]


def _spell_coefficient(
    coefficient: int,
    pack: LanguagePack,
    spell: SpellFn,
    resolve: ResolveFn,
    gender: Gender | None,
    conjunction: bool,
) -> list[str]:
    """Коэффициент группы; составной коэффициент собирается рекурсивно."""
    if coefficient < pack.base:
        return spell(coefficient, pack, gender=gender, conjunction=conjunction)
    return assemble(
        decompose(coefficient, pack.magnitudes),
        pack,
        spell=spell,
        resolve=resolve,
        gender=gender,
        conjunction=conjunction,
    )


def assemble(
    groups: GroupValue,
    pack: LanguagePack,
    *,
    spell: SpellFn = spell_small,
    resolve: ResolveFn = resolve_scale_word,
    gender: Gender | None = None,
    conjunction: bool = False,
) -> list[str]:
    """
    Сборка последовательности токенов числа.

    Args:
        groups: Результат decompose (старшая группа первой)
        pack: Language pack
        spell: Low-Order Speller
        resolve: Agreement Resolver для scale words
        gender: Род контекста (существительное после числа)
        conjunction: Включена ли связка (en British "and")

    Returns:
        Токены в порядке убывания разряда
    """
    if groups.is_zero:
        return [pack.zero]

    non_zero = groups.non_zero()
    tokens: list[str] = []

    for index, group in enumerate(non_zero):
        if group.magnitude is None:
            if (
                conjunction
                and pack.conjunction_before_final_group
                and index > 0
                and group.coefficient < 100
            ):
                tokens.append(pack.conjunction)
            tokens.extend(
                spell(group.coefficient, pack, gender=gender, conjunction=conjunction)
            )
            continue

        scale = resolve(group.coefficient, group.magnitude, pack)
        omit = (
            group.coefficient == 1
            and group.magnitude.omit_one
            and (index == 0 or not pack.omit_one_top_only)
        )
        if not omit:
            coefficient_gender = scale.gender if scale.gender is not None else gender
            tokens.extend(
                _spell_coefficient(
                    group.coefficient, pack, spell, resolve, coefficient_gender, conjunction
                )
            )
        tokens.append(scale.word)

    return tokens


def render_cardinal(
    magnitude: int,
    pack: LanguagePack,
    *,
    gender: Gender | None = None,
    conjunction: bool = False,
) -> list[str]:
    """
    Кардинальное числительное: decompose + assemble.

    Raises:
        MagnitudeOverflow: Если magnitude >= pack.magnitudes.limit
    """
    return assemble(
        decompose(magnitude, pack.magnitudes),
        pack,
        gender=gender,
        conjunction=conjunction,
    )
