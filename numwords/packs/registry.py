"""
Language Pack Registry — загрузка language packs по идентификатору языка

Locale → LanguagePack, один раз на процесс:
1. Нормализация идентификатора ("es-ES", "en_GB" → "es", "en")
2. Поиск <code>.json: settings.pack_dir (если задан), затем встроенные data/
3. Валидация (JSON Schema + pydantic) → frozen LanguagePack
4. Кэширование: повторные вызовы возвращают тот же объект

Загруженный pack только читается, поэтому кэш безопасно разделять
между потоками.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from numwords.config import settings
from numwords.core.contracts.validators import (
    LanguagePackConfigurationError,
    validate_language_pack,
)
from numwords.core.domain.language_pack import LanguagePack


logger = logging.getLogger("numwords")

BUNDLED_PACK_DIR = Path(__file__).parent / "data"


class UnknownLocaleError(LookupError):
    """Для идентификатора языка нет language pack."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"No language pack for locale '{locale}' "
            f"(available: {', '.join(available_locales())})"
        )


def normalize_locale(locale: str) -> str:
    """
    Основной subtag идентификатора языка в нижнем регистре.

    Examples:
        >>> normalize_locale("es-ES")
        'es'
        >>> normalize_locale(" EN_gb ")
        'en'
    """
    return locale.strip().replace("_", "-").split("-", 1)[0].lower()


def _search_dirs() -> list[Path]:
    dirs = [BUNDLED_PACK_DIR]
    if settings.pack_dir is not None:
        dirs.insert(0, settings.pack_dir)
    return dirs


def _find_pack_file(code: str) -> Path | None:
    for directory in _search_dirs():
        candidate = directory / f"{code}.json"
        if candidate.is_file():
            return candidate
    return None


def available_locales() -> list[str]:
    """Коды языков, для которых есть pack (встроенные и из settings.pack_dir)."""
    codes = set()
    for directory in _search_dirs():
        if directory.is_dir():
            codes.update(path.stem for path in directory.glob("*.json"))
    return sorted(codes)


@lru_cache(maxsize=None)
def _load(code: str) -> LanguagePack:
    path = _find_pack_file(code)
    if path is None:
        raise UnknownLocaleError(code)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LanguagePackConfigurationError(code, f"{path.name} is not valid JSON: {e}") from e

    pack = validate_language_pack(data, code)
    if pack.code != code:
        raise LanguagePackConfigurationError(
            code, f"{path.name} declares code '{pack.code}'"
        )

    logger.info("Loaded language pack %s (%s) from %s", pack.code, pack.name, path)
    return pack


def load_language_pack(locale: str) -> LanguagePack:
    """
    Language pack для идентификатора языка.

    Args:
        locale: "es", "es-ES", "en_GB" ...

    Returns:
        Frozen LanguagePack (один и тот же объект для одного языка)

    Raises:
        UnknownLocaleError: Если pack не найден
        LanguagePackConfigurationError: Если данные pack некорректны
    """
    return _load(normalize_locale(locale))


def clear_cache() -> None:
    """Сброс кэша загруженных packs (после смены settings.pack_dir)."""
    _load.cache_clear()
