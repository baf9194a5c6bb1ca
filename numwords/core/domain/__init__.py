"""
Domain models and value objects.

Contains grammar enums, the Magnitude Table, LanguagePack, RenderOptions
and NumericInput.
"""

from numwords.core.domain.grammar import (
    PLURAL_RULE_CLASSES,
    Gender,
    PluralClass,
    PluralRule,
    classify_plural,
)
from numwords.core.domain.language_pack import (
    CenturySplitRule,
    CurrencyInfo,
    DecimalSeparator,
    EraAffix,
    EraPosition,
    LanguagePack,
    Messages,
    UnitNoun,
    UnknownCurrencyError,
    YearFormat,
)
from numwords.core.domain.magnitude import (
    MagnitudeEntry,
    MagnitudeOverflow,
    MagnitudeTable,
    count_digits,
)
from numwords.core.domain.numeric_input import (
    MAX_FRACTION_DIGITS,
    MAX_INPUT_DIGITS,
    FractionOverflow,
    NumericInput,
    SpecialValue,
    parse_numeric_input,
)
from numwords.core.domain.options import Mode, NegativeYearStyle, RenderOptions

__all__ = [
    # Grammar
    "PLURAL_RULE_CLASSES",
    "Gender",
    "PluralClass",
    "PluralRule",
    "classify_plural",
    # Magnitude Table
    "MagnitudeEntry",
    "MagnitudeOverflow",
    "MagnitudeTable",
    "count_digits",
    # Language pack
    "CenturySplitRule",
    "CurrencyInfo",
    "DecimalSeparator",
    "EraAffix",
    "EraPosition",
    "LanguagePack",
    "Messages",
    "UnitNoun",
    "UnknownCurrencyError",
    "YearFormat",
    # Render options
    "Mode",
    "NegativeYearStyle",
    "RenderOptions",
    # Numeric input
    "MAX_FRACTION_DIGITS",
    "MAX_INPUT_DIGITS",
    "FractionOverflow",
    "NumericInput",
    "SpecialValue",
    "parse_numeric_input",
]
