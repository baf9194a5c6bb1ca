"""
numwords: numbers to words in several natural languages.

    >>> from numwords import convert, RenderOptions, Mode
    >>> convert(1000000, locale="es")
    'un millón'
    >>> convert(1984, RenderOptions(mode=Mode.YEAR), locale="en")
    'nineteen eighty-four'
"""

from numwords.core.contracts import LanguagePackConfigurationError
from numwords.core.domain import (
    DecimalSeparator,
    FractionOverflow,
    Gender,
    LanguagePack,
    MagnitudeOverflow,
    Mode,
    NegativeYearStyle,
    RenderOptions,
    UnknownCurrencyError,
)
from numwords.engine import ConversionResult, FormatPipeline, convert
from numwords.packs import UnknownLocaleError, available_locales, load_language_pack

__all__ = [
    # Conversion
    "convert",
    "FormatPipeline",
    "ConversionResult",
    # Options
    "RenderOptions",
    "Mode",
    "DecimalSeparator",
    "NegativeYearStyle",
    "Gender",
    # Language packs
    "LanguagePack",
    "load_language_pack",
    "available_locales",
    # Errors
    "MagnitudeOverflow",
    "FractionOverflow",
    "UnknownCurrencyError",
    "LanguagePackConfigurationError",
    "UnknownLocaleError",
]
