"""
Format Pipeline — режимы PLAIN / CURRENCY / YEAR

Оборачивает кардинальное числительное:
- знак (negative prefix), дробная часть по цифрам
- денежные единицы: major + minor с округлением half-up
- годы: century-split, year word, era affixes (BC / AD)

Pipeline — чистая функция от (NumericInput, RenderOptions, LanguagePack):
состояния между вызовами нет, экземпляр можно разделять между потоками.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль → только zero word (в CURRENCY: zero word + форма major единицы)
2. Отрицательный ноль → без negative prefix
3. Хвостовые нули дроби не произносятся (123.50 ≡ 123.5)
4. MagnitudeOverflow и UnknownCurrencyError пробрасываются из render();
   evaluate() возвращает явный неуспешный ConversionResult
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from numwords.config import settings
from numwords.core.domain.grammar import Gender, PluralRule
from numwords.core.domain.language_pack import (
    CurrencyInfo,
    EraAffix,
    EraPosition,
    LanguagePack,
    UnitNoun,
    UnknownCurrencyError,
)
from numwords.core.domain.numeric_input import (
    NumericInput,
    SpecialValue,
    parse_numeric_input,
)
from numwords.core.domain.options import Mode, NegativeYearStyle, RenderOptions
from numwords.core.math.decomposition import MagnitudeOverflow, decompose
from numwords.engine.agreement import resolve_unit_noun
from numwords.engine.assembler import assemble, render_cardinal
from numwords.engine.fallback import FallbackHandler
from numwords.engine.speller import spell_small
from numwords.packs.registry import load_language_pack


logger = logging.getLogger("numwords")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """
    Результат конвертации без исключений.

    Attributes:
        text: Текст (None, если конвертация не удалась)
        ok: Успех конвертации
        error: Описание ошибки (MagnitudeOverflow, UnknownCurrencyError)
        special: Special флаг входа (сообщение Fallback Handler — тоже ok=True)
    """

    text: str | None
    ok: bool
    error: str | None = None
    special: SpecialValue | None = None


# =============================================================================
# FORMAT PIPELINE
# =============================================================================


class FormatPipeline:
    """Format Pipeline для одного language pack."""

    def __init__(self, pack: LanguagePack, fallback: FallbackHandler | None = None):
        self.pack = pack
        self.fallback = fallback or FallbackHandler()

    def render(self, value: NumericInput, options: RenderOptions | None = None) -> str:
        """
        Текст для нормализованного входа.

        Args:
            value: NumericInput
            options: Параметры вызова (None → defaults)

        Returns:
            Текст на языке pack или сообщение Fallback Handler

        Raises:
            MagnitudeOverflow: Если целая часть не представима таблицей разрядов
            UnknownCurrencyError: Если options.currency_code не описан в pack
        """
        options = options or RenderOptions()

        message = self.fallback.resolve(value, options, self.pack)
        if message is not None:
            return message

        if options.mode == Mode.YEAR:
            tokens = self._render_year(value, options)
        elif options.mode == Mode.CURRENCY:
            tokens = self._render_currency(value, options)
        else:
            tokens = self._render_plain(value, options)

        return self.pack.joiner.join(tokens)

    def evaluate(
        self, value: NumericInput, options: RenderOptions | None = None
    ) -> ConversionResult:
        """Как render(), но ошибки конвертации → ConversionResult(ok=False)."""
        try:
            text = self.render(value, options)
        except (MagnitudeOverflow, UnknownCurrencyError) as e:
            logger.warning("Conversion failed for locale %s: %s", self.pack.code, e)
            return ConversionResult(text=None, ok=False, error=str(e), special=value.special)
        return ConversionResult(text=text, ok=True, special=value.special)

    # -------------------------------------------------------------------------
    # Shared helpers
    # -------------------------------------------------------------------------

    def _conjunction(self, options: RenderOptions) -> bool:
        if options.include_conjunction is not None:
            return options.include_conjunction
        return self.pack.conjunction_by_default

    def _gender(self, options: RenderOptions) -> Gender | None:
        return options.gender or self.pack.default_gender

    def _negative_prefix(self, options: RenderOptions) -> str:
        return options.negative_prefix or self.pack.negative_prefix

    # -------------------------------------------------------------------------
    # PLAIN
    # -------------------------------------------------------------------------

    def _render_plain(self, value: NumericInput, options: RenderOptions) -> list[str]:
        tokens = render_cardinal(
            value.integer,
            self.pack,
            gender=self._gender(options),
            conjunction=self._conjunction(options),
        )

        if value.fraction:
            digit_words = self.pack.digit_words
            tokens.append(self.pack.decimal_word(options.decimal_separator))
            tokens.extend(digit_words[digit] for digit in value.fraction)

        if value.negative:
            tokens.insert(0, self._negative_prefix(options))
        return tokens

    # -------------------------------------------------------------------------
    # CURRENCY
    # -------------------------------------------------------------------------

    @staticmethod
    def _split_amount(value: NumericInput, currency: CurrencyInfo) -> tuple[int, int]:
        """
        Разделение суммы на major и minor единицы.

        Округление half-up до minor_digits; без minor единицы дробь
        отбрасывается.
        """
        if currency.minor is None:
            return value.integer, 0

        scale = 10**currency.minor_digits
        with localcontext() as ctx:
            ctx.prec = len(str(value.integer)) + len(value.fraction) + currency.minor_digits + 2
            minor_total = (value.to_decimal() * scale).quantize(
                Decimal(1), rounding=ROUND_HALF_UP
            )
        return divmod(int(minor_total), scale)

    def _render_amount(
        self, count: int, noun: UnitNoun, rule: PluralRule, conjunction: bool
    ) -> list[str]:
        """Числительное в роде единицы + предлог scale word + форма единицы."""
        groups = decompose(count, self.pack.magnitudes)
        tokens = assemble(groups, self.pack, gender=noun.gender, conjunction=conjunction)

        closing = groups.non_zero()[-1].magnitude
        if closing is not None and closing.noun_preposition:
            tokens.append(closing.noun_preposition)

        tokens.append(resolve_unit_noun(count, noun, rule))
        return tokens

    def _render_currency(self, value: NumericInput, options: RenderOptions) -> list[str]:
        currency = options.currency_info or self.pack.currency_for(options.currency_code)
        rule = currency.plural_rule or self.pack.plural_rule
        conjunction = self._conjunction(options)

        major, minor = self._split_amount(value, currency)

        if major == 0 and minor == 0:
            return [self.pack.zero, resolve_unit_noun(0, currency.major, rule)]

        tokens: list[str] = []
        if major:
            tokens.extend(self._render_amount(major, currency.major, rule, conjunction))
        if minor:
            if major and currency.separator:
                tokens.append(currency.separator)
            tokens.extend(self._render_amount(minor, currency.minor, rule, conjunction))

        if value.negative:
            tokens.insert(0, self._negative_prefix(options))
        return tokens

    # -------------------------------------------------------------------------
    # YEAR
    # -------------------------------------------------------------------------

    def _century_split(self, year: int, conjunction: bool) -> list[str] | None:
        """Century-split чтение года или None, если ни одно правило не подходит."""
        rule = next((r for r in self.pack.year.century_split if r.matches(year)), None)
        if rule is None:
            return None

        high, low = divmod(year, 100)
        tokens = spell_small(high, self.pack)
        if low == 0:
            tokens.append(self.pack.hundred)
            return tokens

        if low < 10 and rule.hundred_for_small_remainder:
            tokens.append(self.pack.hundred)
            if conjunction and self.pack.conjunction:
                tokens.append(self.pack.conjunction)
        tokens.extend(spell_small(low, self.pack))
        return tokens

    @staticmethod
    def _attach_era(tokens: list[str], era: EraAffix) -> list[str]:
        if era.position == EraPosition.PREFIX:
            return [era.word, *tokens]
        return [*tokens, era.word]

    def _render_year(self, value: NumericInput, options: RenderOptions) -> list[str]:
        year = value.integer
        if year == 0:
            return [self.pack.zero]

        conjunction = self._conjunction(options)
        tokens = self._century_split(year, conjunction)
        if tokens is None:
            tokens = render_cardinal(
                year, self.pack, gender=self._gender(options), conjunction=conjunction
            )

        year_format = self.pack.year
        if year_format.year_word:
            tokens.append(year_format.year_word)

        if value.negative:
            style = options.negative_year_style
            if style in (NegativeYearStyle.ERA, NegativeYearStyle.BOTH):
                tokens = self._attach_era(tokens, year_format.bc)
            if style in (NegativeYearStyle.PREFIX, NegativeYearStyle.BOTH):
                tokens.insert(0, self._negative_prefix(options))
        elif options.include_era_suffix:
            tokens = self._attach_era(tokens, year_format.ad)
        return tokens


# =============================================================================
# PUBLIC API
# =============================================================================


def convert(
    value: Any, options: RenderOptions | None = None, *, locale: str | None = None
) -> str:
    """
    Число словами.

    Args:
        value: int, float, Decimal, числовая строка; NaN/Infinity/None/мусор
            дают строку сообщения, а не исключение
        options: RenderOptions (None → defaults языка)
        locale: Идентификатор языка ("es", "en-GB" ...);
            None → settings.default_locale

    Returns:
        Текст

    Raises:
        MagnitudeOverflow: Если значение превышает наибольший разряд языка
            (FractionOverflow: слишком длинная дробь)
        UnknownCurrencyError: Если options.currency_code не описан в pack
        UnknownLocaleError: Если language pack не найден

    Examples:
        >>> convert(21, locale="es")
        'veintiuno'
        >>> convert(123.45, RenderOptions(mode=Mode.CURRENCY), locale="es")
        'ciento veintitrés euros con cuarenta y cinco céntimos'
    """
    pack = load_language_pack(locale or settings.default_locale)
    return FormatPipeline(pack).render(parse_numeric_input(value), options)
