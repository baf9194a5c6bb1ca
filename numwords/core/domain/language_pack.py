"""
LanguagePack — данные и правила одного языка

Immutable Pydantic модели, описывающие словарь и флаги одного языка:
- Слова для 0..N, десятков, сотен, scale words (Magnitude Table)
- Правило согласования (PluralRule) и родовые формы коэффициента
- Денежные единицы, оформление лет (BC/AD, century-split), сообщения об ошибках

Language pack загружается один раз (packs.registry) и далее только читается,
поэтому может разделяться любым количеством потоков без блокировок.

Семантическая валидация выполняется при создании модели: ошибка данных —
это ошибка конфигурации во время загрузки, а не во время конвертации.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from numwords.core.domain.grammar import (
    PLURAL_RULE_CLASSES,
    Gender,
    PluralClass,
    PluralRule,
)
from numwords.core.domain.magnitude import MagnitudeTable


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownCurrencyError(KeyError):
    """ISO код валюты не описан в language pack."""

    def __init__(self, code: str, locale: str):
        self.code = code
        self.locale = locale
        super().__init__(code)

    def __str__(self) -> str:
        return f"Currency {self.code} is not defined for language pack '{self.locale}'"


# =============================================================================
# ENUMS
# =============================================================================


class DecimalSeparator(str, Enum):
    """Выбор слова-разделителя дробной части (point / comma / period)."""

    POINT = "point"
    COMMA = "comma"
    PERIOD = "period"


class EraPosition(str, Enum):
    """Позиция era affix относительно года."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


# =============================================================================
# CURRENCY
# =============================================================================


class UnitNoun(BaseModel):
    """Существительное денежной единицы с формами по классам."""

    name: str = Field(..., min_length=1, description="Default форма")
    forms: dict[PluralClass, str] = Field(default_factory=dict)
    gender: Gender | None = Field(None)

    model_config = {"frozen": True}

    def word_for(self, plural_class: PluralClass) -> str:
        """Форма для класса; default форма, если отдельной нет."""
        return self.forms.get(plural_class, self.name)


class CurrencyInfo(BaseModel):
    """
    Описание валюты: основная и дробная единицы.

    plural_rule — собственное правило согласования единиц; None означает
    правило языка.
    """

    code: str = Field(..., min_length=1, description="ISO код (EUR, RUB ...)")
    major: UnitNoun
    minor: UnitNoun | None = Field(None)
    separator: str | None = Field(None, description="Связка major/minor ('con', 'and')")
    minor_digits: int = Field(2, ge=1, le=4)
    plural_rule: PluralRule | None = Field(None)

    model_config = {"frozen": True}


# =============================================================================
# YEAR FORMAT
# =============================================================================


class EraAffix(BaseModel):
    """Era маркер (BC / AD эквивалент) и его позиция."""

    word: str = Field(..., min_length=1)
    position: EraPosition = Field(EraPosition.SUFFIX)

    model_config = {"frozen": True}


class CenturySplitRule(BaseModel):
    """
    Правило century-split для диапазона лет [start, end].

    1984 → "nineteen eighty-four", 1900 → "nineteen hundred".

    Attributes:
        round_only: Правило действует только для круглых веков (hi: 1900)
        hundred_for_small_remainder: Остаток 1..9 читается через слово сотни
            ("nineteen hundred five"), иначе как две пары ("nineteen five")
    """

    start: int = Field(..., ge=100)
    end: int = Field(..., le=9999)
    round_only: bool = Field(False)
    hundred_for_small_remainder: bool = Field(True)

    model_config = {"frozen": True}

    @field_validator("end")
    @classmethod
    def validate_end_after_start(cls, v: int, info) -> int:
        """Проверка, что end >= start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError(f"end {v} must be >= start {info.data['start']}")
        return v

    def matches(self, year: int) -> bool:
        """Попадает ли (положительный) год под правило."""
        if not self.start <= year <= self.end:
            return False
        return not self.round_only or year % 100 == 0


class YearFormat(BaseModel):
    """Оформление YEAR режима."""

    bc: EraAffix
    ad: EraAffix
    year_word: str | None = Field(None, description="Слово 'год' (ja '年')")
    century_split: tuple[CenturySplitRule, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}


# =============================================================================
# MESSAGES
# =============================================================================


class Messages(BaseModel):
    """Строки Fallback Handler. Все четыре различны по смыслу."""

    not_a_number: str = Field(..., min_length=1)
    invalid: str = Field(..., min_length=1)
    infinity: str = Field(..., min_length=1)
    negative_infinity: str = Field(..., min_length=1)

    model_config = {"frozen": True}


# =============================================================================
# LANGUAGE PACK
# =============================================================================


class LanguagePack(BaseModel):
    """
    Language pack: словарь и флаги одного языка.

    Low-Order Speller:
        words: Слова для 0..len(words)-1 (прямой lookup: teens, es 0..29, hi 0..99)
        tens: Десятки по цифре (2 → "twenty")
        tens_link: Отдельный токен между десятком и единицей (es "y")
        tens_fuse: Строка слияния десятка и единицы (en "-", ja "")
        two_digit_overrides: Исключения для двузначных (vigesimal remnants)
        hundred: Неизменяемое слово сотни с множителем (en "hundred")
        hundreds: Слитные формы сотен по цифре (es "doscientos", ru "двести")
        hundreds_exact: Формы ровных сотен (es 100 → "cien")
        thousand: Слово тысячи внутри myriad группы (ja "千")
        gender_forms / gender_hundreds: Родовые формы коэффициента

    Sequence Assembler:
        conjunction: Токен связки (en "and")
        conjunction_after_hundred / conjunction_before_final_group: где вставлять
        conjunction_by_default: включена ли связка без явного RenderOptions
        omit_one_top_only: omit_one действует только для старшей группы
    """

    code: str = Field(..., min_length=2)
    name: str = Field(..., min_length=1)
    joiner: str = Field(" ", description="Разделитель токенов (' ' или '')")

    # Low-Order Speller
    zero: str = Field(..., min_length=1)
    words: tuple[str, ...] = Field(..., min_length=10)
    tens: dict[int, str] = Field(default_factory=dict)
    tens_link: str | None = Field(None, min_length=1)
    tens_fuse: str | None = Field(None)
    two_digit_overrides: dict[int, str] = Field(default_factory=dict)
    hundred: str | None = Field(None, min_length=1)
    hundreds: dict[int, str] = Field(default_factory=dict)
    hundreds_exact: dict[int, str] = Field(default_factory=dict)
    omit_one_hundred: bool = Field(False)
    thousand: str | None = Field(None, min_length=1)
    omit_one_thousand: bool = Field(False)
    gender_forms: dict[Gender, dict[int, str]] = Field(default_factory=dict)
    gender_hundreds: dict[Gender, dict[int, str]] = Field(default_factory=dict)
    default_gender: Gender | None = Field(None)

    # Sequence Assembler
    conjunction: str | None = Field(None, min_length=1)
    conjunction_after_hundred: bool = Field(False)
    conjunction_before_final_group: bool = Field(False)
    conjunction_by_default: bool = Field(False)
    omit_one_top_only: bool = Field(False)

    # Agreement
    plural_rule: PluralRule
    magnitudes: MagnitudeTable

    # Format Pipeline
    digits: tuple[str, ...] | None = Field(None, min_length=10, max_length=10)
    negative_prefix: str = Field(..., min_length=1)
    decimal_words: dict[DecimalSeparator, str]
    default_decimal_separator: DecimalSeparator
    currency: CurrencyInfo
    currencies: dict[str, CurrencyInfo] = Field(default_factory=dict)
    year: YearFormat

    # Fallback Handler
    messages: Messages

    model_config = {"frozen": True}

    @field_validator("gender_forms")
    @classmethod
    def validate_gender_forms_range(
        cls, v: dict[Gender, dict[int, str]]
    ) -> dict[Gender, dict[int, str]]:
        """Родовые формы определены только для значений 1..99."""
        for gender, forms in v.items():
            for value in forms:
                if not 1 <= value <= 99:
                    raise ValueError(
                        f"gender_forms[{gender.value}] key {value} outside 1..99"
                    )
        return v

    @field_validator("hundreds", "hundreds_exact")
    @classmethod
    def validate_hundreds_digits(cls, v: dict[int, str]) -> dict[int, str]:
        """Формы сотен индексируются цифрой 1..9."""
        for digit in v:
            if not 1 <= digit <= 9:
                raise ValueError(f"hundreds key {digit} outside 1..9")
        return v

    @model_validator(mode="after")
    def validate_speller_tables(self) -> "LanguagePack":
        """
        Проверка полноты таблиц Low-Order Speller.

        Каждое двузначное значение вне прямого lookup должно собираться из
        tens или быть в two_digit_overrides; каждая цифра сотни должна иметь
        слитную форму либо должно быть задано слово сотни.
        """
        base = self.magnitudes.base
        if base not in (100, 1000, 10000):
            raise ValueError(f"grouping base must be 100, 1000 or 10000, got {base}")

        if self.tens_link is not None and self.tens_fuse is not None:
            raise ValueError("tens_link and tens_fuse are mutually exclusive")

        for n in range(len(self.words), 100):
            if n not in self.two_digit_overrides and n // 10 not in self.tens:
                raise ValueError(f"no spelling for {n}: tens[{n // 10}] is missing")

        if base > 100 and self.hundred is None:
            missing = [d for d in range(1, 10) if d not in self.hundreds]
            if missing:
                raise ValueError(f"hundreds missing digits {missing} and no hundred word")

        if base > 1000 and self.thousand is None:
            raise ValueError("myriad grouping requires a thousand word")

        if self.year.century_split and self.hundred is None:
            raise ValueError("century-split year rules require a hundred word")

        if self.conjunction is None and (
            self.conjunction_after_hundred
            or self.conjunction_before_final_group
            or self.conjunction_by_default
        ):
            raise ValueError("conjunction flags are set but no conjunction token")

        missing_separators = set(DecimalSeparator) - set(self.decimal_words)
        if missing_separators:
            raise ValueError(
                f"decimal_words missing {sorted(s.value for s in missing_separators)}"
            )
        return self

    @model_validator(mode="after")
    def validate_plural_forms(self) -> "LanguagePack":
        """
        Проверка, что все формы используют классы своего правила.

        Конвертация полагается на тотальность lookup по классам, поэтому
        неизвестный класс — ошибка загрузки.
        """
        allowed = PLURAL_RULE_CLASSES[self.plural_rule]
        for entry in self.magnitudes.entries:
            unknown = set(entry.forms) - allowed
            if unknown:
                raise ValueError(
                    f"scale word '{entry.name}' uses plural classes "
                    f"{sorted(c.value for c in unknown)} not defined by rule "
                    f"{self.plural_rule.value}"
                )

        for currency in (self.currency, *self.currencies.values()):
            rule = currency.plural_rule or self.plural_rule
            currency_allowed = PLURAL_RULE_CLASSES[rule]
            nouns = [currency.major] + ([currency.minor] if currency.minor else [])
            for noun in nouns:
                unknown = set(noun.forms) - currency_allowed
                if unknown:
                    raise ValueError(
                        f"currency {currency.code} noun '{noun.name}' uses plural "
                        f"classes {sorted(c.value for c in unknown)} not defined "
                        f"by rule {rule.value}"
                    )
        return self

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def base(self) -> int:
        """Основание группы единиц, с которым работает Low-Order Speller."""
        return self.magnitudes.base

    @property
    def digit_words(self) -> tuple[str, ...]:
        """Слова для цифр дробной части."""
        return self.digits if self.digits is not None else self.words[:10]

    def decimal_word(self, separator: DecimalSeparator | None) -> str:
        """Слово-разделитель дробной части (None → default языка)."""
        return self.decimal_words[separator or self.default_decimal_separator]

    def has_currency(self, code: str) -> bool:
        return code == self.currency.code or code in self.currencies

    def currency_for(self, code: str | None) -> CurrencyInfo:
        """
        Валюта по ISO коду.

        Raises:
            UnknownCurrencyError: Если код не описан в language pack
        """
        if code is None or code == self.currency.code:
            return self.currency
        if code not in self.currencies:
            raise UnknownCurrencyError(code, self.code)
        return self.currencies[code]
