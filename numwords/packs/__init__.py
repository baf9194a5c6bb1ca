"""
Language pack registry and bundled pack data (data/<locale>.json).
"""

from numwords.packs.registry import (
    UnknownLocaleError,
    available_locales,
    clear_cache,
    load_language_pack,
    normalize_locale,
)

__all__ = [
    "UnknownLocaleError",
    "available_locales",
    "clear_cache",
    "load_language_pack",
    "normalize_locale",
]
