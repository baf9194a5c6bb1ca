"""
JSON Schema Contract Validators

Валидация данных language pack до построения pydantic модели.

Загрузка language pack выполняется в два этапа:
1. Структурная проверка JSON данных против language_pack.json
   (Draft 2020-12): обязательные таблицы, типы, допустимые enum значения
2. Семантическая проверка при построении LanguagePack (pydantic validators):
   арифметика Magnitude Table, полнота таблиц speller, классы форм

Любая ошибка любого этапа — LanguagePackConfigurationError во время
загрузки. Во время конвертации данные pack считаются корректными.

Схемы:
- language_pack.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import ValidationError as PydanticValidationError

from numwords.core.domain.language_pack import LanguagePack


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LanguagePackConfigurationError(ValueError):
    """Некорректные данные language pack (ошибка загрузки, не конвертации)."""

    def __init__(self, locale: str, reason: str):
        self.locale = locale
        self.reason = reason
        super().__init__(f"Invalid language pack '{locale}': {reason}")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение JSON Schema из contracts/schema/ (package data).

    Схема проверяется meta-схемой Draft 2020-12 один раз и кэшируется.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения ('language_pack').

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# LANGUAGE PACK CONTRACT
# =============================================================================


class LanguagePackValidator:
    """
    Структурная проверка данных language pack по language_pack.json.

    Сообщает все нарушения сразу, упорядоченные по пути в документе.
    """

    SCHEMA_NAME = "language_pack"

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or _SCHEMA_LOADER).load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(schema)

    def errors(self, data: Dict[str, Any]) -> list[str]:
        """Нарушения схемы в виде 'path: message' (пустой список — данные валидны)."""
        found = sorted(
            self._validator.iter_errors(data),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        return [
            f"{'/'.join(str(part) for part in e.absolute_path) or '<root>'}: {e.message}"
            for e in found
        ]


# =============================================================================
# LOADING
# =============================================================================


def validate_language_pack(data: Dict[str, Any], locale: str) -> LanguagePack:
    """
    Двухэтапная валидация данных и построение LanguagePack.

    Args:
        data: Данные pack (распарсенный JSON)
        locale: Идентификатор языка (для сообщений об ошибках)

    Returns:
        Frozen LanguagePack

    Raises:
        LanguagePackConfigurationError: Если данные не проходят схему или
            семантическую проверку
    """
    errors = LanguagePackValidator().errors(data)
    if errors:
        raise LanguagePackConfigurationError(locale, "; ".join(errors))

    try:
        return LanguagePack.model_validate(data)
    except PydanticValidationError as e:
        reasons = "; ".join(
            f"{'/'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise LanguagePackConfigurationError(locale, reasons) from e
