"""
RenderOptions — параметры одного вызова конвертации

Value object, создаётся на каждый вызов и не изменяется (frozen).
Поля со значением None берут default из language pack.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from numwords.core.domain.grammar import Gender
from numwords.core.domain.language_pack import (
    CurrencyInfo,
    DecimalSeparator,
    LanguagePack,
)


# =============================================================================
# ENUMS
# =============================================================================


class Mode(str, Enum):
    """Режим Format Pipeline."""

    PLAIN = "plain"
    CURRENCY = "currency"
    YEAR = "year"


class NegativeYearStyle(str, Enum):
    """Оформление отрицательного года."""

    ERA = "era"  # только era affix (BC), без negative prefix
    PREFIX = "prefix"  # только negative prefix
    BOTH = "both"  # negative prefix + era affix


# =============================================================================
# RENDER OPTIONS
# =============================================================================


class RenderOptions(BaseModel):
    """
    Параметры конвертации.

    Attributes:
        mode: PLAIN / CURRENCY / YEAR
        decimal_separator: Слово-разделитель дробной части (None → default языка)
        negative_prefix: Переопределение negative prefix ("negative" вместо "minus")
        include_era_suffix: Добавлять AD-эквивалент для положительных лет
        negative_year_style: Оформление отрицательных лет
        gender: Род для PLAIN режима (где язык его различает)
        currency_info: Полное переопределение денежных единиц
        currency_code: Выбор одной из валют language pack по ISO коду
        include_conjunction: Британский "and" (None → default языка)
        fallback_on_error: Строка вместо "not a number"/"invalid" сообщений
    """

    mode: Mode = Field(Mode.PLAIN, description="Режим конвертации")
    decimal_separator: DecimalSeparator | None = Field(None)
    negative_prefix: str | None = Field(None, min_length=1)
    include_era_suffix: bool = Field(False)
    negative_year_style: NegativeYearStyle = Field(NegativeYearStyle.ERA)
    gender: Gender | None = Field(None)
    currency_info: CurrencyInfo | None = Field(None)
    currency_code: str | None = Field(None, min_length=1)
    include_conjunction: bool | None = Field(None)
    fallback_on_error: str | None = Field(None)

    model_config = {"frozen": True}

    @field_validator("currency_code")
    @classmethod
    def validate_currency_code(cls, v: str | None, info: ValidationInfo) -> str | None:
        """Проверка кода валюты по language pack из context (см. for_pack)."""
        pack = (info.context or {}).get("pack")
        if v is not None and pack is not None and not pack.has_currency(v):
            raise ValueError(
                f"currency {v} is not defined for language pack '{pack.code}'"
            )
        return v

    @classmethod
    def for_pack(cls, pack: LanguagePack, **fields: Any) -> "RenderOptions":
        """
        RenderOptions, проверенные по language pack.

        Неизвестный currency_code → pydantic ValidationError при создании,
        а не ошибка во время конвертации.

        Examples:
            RenderOptions.for_pack(pack, mode=Mode.CURRENCY, currency_code="GBP")
        """
        return cls.model_validate(fields, context={"pack": pack})
