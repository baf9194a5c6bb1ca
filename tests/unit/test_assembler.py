"""
Тесты для Sequence Assembler

Проверяет:
1. Ноль → только zero word
2. Пропуск нулевых групп, порядок старшая → младшая
3. Omit-one (es "mil", omit_one_top_only)
4. Связку перед последней группой (en "and")
5. Род коэффициента по scale word (ru "две тысячи")
6. Составной коэффициент старшей группы (es "mil millones")
7. Инъекцию spell / resolve функций
"""

import json

import pytest

from numwords.core.domain.language_pack import LanguagePack
from numwords.core.domain.magnitude import MagnitudeOverflow
from numwords.core.math.decomposition import decompose
from numwords.engine.agreement import ScaleWord
from numwords.engine.assembler import assemble, render_cardinal
from numwords.packs.registry import BUNDLED_PACK_DIR, load_language_pack


@pytest.fixture
def en():
    return load_language_pack("en")


@pytest.fixture
def es():
    return load_language_pack("es")


@pytest.fixture
def ru():
    return load_language_pack("ru")


# =============================================================================
# BASIC ASSEMBLY
# =============================================================================


class TestAssemble:
    """Базовые тесты сборки"""

    def test_zero(self, en, es) -> None:
        assert render_cardinal(0, en) == ["zero"]
        assert render_cardinal(0, es) == ["cero"]

    def test_skips_zero_groups(self, en) -> None:
        assert render_cardinal(1_000_005, en) == ["one", "million", "five"]
        assert render_cardinal(2_000_000_000, en) == ["two", "billion"]

    def test_descending_order(self, en) -> None:
        assert render_cardinal(1_234_567, en) == [
            "one", "million",
            "two", "hundred", "thirty-four", "thousand",
            "five", "hundred", "sixty-seven",
        ]

    def test_lakh_crore(self) -> None:
        hi = load_language_pack("hi")
        assert render_cardinal(12_34_567, hi) == [
            "बारह", "लाख", "चौंतीस", "हज़ार", "पाँच", "सौ", "सड़सठ",
        ]

    def test_myriad(self) -> None:
        ja = load_language_pack("ja")
        assert render_cardinal(12345, ja) == ["一", "万", "二", "千", "三", "百", "四十五"]

    def test_overflow_propagates(self, en) -> None:
        with pytest.raises(MagnitudeOverflow):
            render_cardinal(10**36, en)


# =============================================================================
# CONJUNCTION
# =============================================================================


class TestConjunction:
    """Тесты для связки en "and" """

    def test_before_final_group(self, en) -> None:
        assert render_cardinal(1001, en, conjunction=True) == ["one", "thousand", "and", "one"]
        assert render_cardinal(1_000_001, en, conjunction=True) == [
            "one", "million", "and", "one",
        ]

    def test_not_before_final_group_with_hundreds(self, en) -> None:
        assert render_cardinal(1200, en, conjunction=True) == [
            "one", "thousand", "two", "hundred",
        ]

    def test_after_hundred_inside_group(self, en) -> None:
        assert render_cardinal(2101, en, conjunction=True) == [
            "two", "thousand", "one", "hundred", "and", "one",
        ]

    def test_off_by_default(self, en) -> None:
        assert render_cardinal(1001, en) == ["one", "thousand", "one"]


# =============================================================================
# OMIT-ONE & AGREEMENT
# =============================================================================


class TestOmitOne:
    """Тесты для коэффициента 1"""

    def test_spanish_mil(self, es) -> None:
        assert render_cardinal(1000, es) == ["mil"]
        assert render_cardinal(1001, es) == ["mil", "uno"]
        assert render_cardinal(2000, es) == ["dos", "mil"]

    def test_spanish_million_keeps_one(self, es) -> None:
        assert render_cardinal(1_000_000, es) == ["un", "millón"]
        assert render_cardinal(2_000_000, es) == ["dos", "millones"]

    def test_top_only(self) -> None:
        """omit_one_top_only: коэффициент 1 опускается только в старшей группе"""
        with open(BUNDLED_PACK_DIR / "en.json", "r", encoding="utf-8") as f:
            data = json.load(f)
        data["plural_rule"] = "one_two_other"
        data["omit_one_top_only"] = True
        data["magnitudes"]["entries"][0] = {
            "threshold": 1000,
            "name": "alf",
            "forms": {"one": "alf", "two": "alfayn", "other": "alaf"},
            "omit_one": True,
        }
        pack = LanguagePack.model_validate(data)

        assert render_cardinal(1000, pack) == ["alf"]
        assert render_cardinal(2000, pack) == ["two", "alfayn"]
        assert render_cardinal(1_001_000, pack) == ["one", "million", "one", "alf"]


class TestGenderAgreement:
    """Тесты для рода коэффициента"""

    def test_russian_thousand_feminine(self, ru) -> None:
        assert render_cardinal(1000, ru) == ["одна", "тысяча"]
        assert render_cardinal(2000, ru) == ["две", "тысячи"]
        assert render_cardinal(21_000, ru) == ["двадцать", "одна", "тысяча"]
        assert render_cardinal(5000, ru) == ["пять", "тысяч"]

    def test_russian_million_masculine(self, ru) -> None:
        assert render_cardinal(2_000_000, ru) == ["два", "миллиона"]

    def test_units_group_uses_context_gender(self, ru) -> None:
        from numwords.core.domain.grammar import Gender

        assert render_cardinal(2002, ru, gender=Gender.FEMININE) == [
            "две", "тысячи", "две",
        ]
        assert render_cardinal(2002, ru) == ["две", "тысячи", "два"]


# =============================================================================
# COMPOUND COEFFICIENT
# =============================================================================


def test_compound_top_coefficient(es):
    """es long scale: 10^9 = "mil millones" """
    assert render_cardinal(10**9, es) == ["mil", "millones"]
    assert render_cardinal(2 * 10**9 + 1, es) == ["dos", "mil", "millones", "uno"]
    assert render_cardinal(10**12, es) == ["un", "billón"]


def test_injected_functions(en):
    """spell / resolve передаются как функции"""
    tokens = assemble(
        decompose(2003, en.magnitudes),
        en,
        spell=lambda n, pack, **kwargs: [f"<{n}>"],
        resolve=lambda coefficient, entry, pack: ScaleWord("K", None),
    )
    assert tokens == ["<2>", "K", "<3>"]
