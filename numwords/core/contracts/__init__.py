"""
Contract Validation Module

Модуль для валидации JSON данных language packs.
"""

from .validators import (
    LanguagePackConfigurationError,
    LanguagePackValidator,
    SchemaLoader,
    validate_language_pack,
)

__all__ = [
    # Exceptions
    "LanguagePackConfigurationError",
    # Classes
    "SchemaLoader",
    "LanguagePackValidator",
    # Functions
    "validate_language_pack",
]
