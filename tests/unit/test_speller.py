"""
Тесты для Low-Order Speller

Проверяет:
1. Прямой lookup (teens, es 0..29, hi 0..99)
2. Десятки: отдельные токены, связка (es "y"), слияние (en "-", ja "")
3. Сотни: неизменяемое слово с множителем, слитные формы, точная форма (es "cien")
4. Myriad: цифра тысяч внутри группы (ja "千")
5. Родовые формы (es "un"/"una", ru "одна"/"две")
6. Связку после сотен (en "and"), override для двузначных
7. Непустоту и детерминированность для всего диапазона
"""

import json

import pytest

from numwords.core.domain.grammar import Gender
from numwords.core.domain.language_pack import LanguagePack
from numwords.engine.speller import spell_small
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


@pytest.fixture
def ja():
    return load_language_pack("ja")


@pytest.fixture
def hi():
    return load_language_pack("hi")


# =============================================================================
# TWO-DIGIT PART
# =============================================================================


class TestTwoDigit:
    """Тесты для 0..99"""

    def test_zero(self, en, ja) -> None:
        assert spell_small(0, en) == ["zero"]
        assert spell_small(0, ja) == ["ゼロ"]

    def test_direct_lookup(self, en, es, hi) -> None:
        assert spell_small(7, en) == ["seven"]
        assert spell_small(15, en) == ["fifteen"]
        assert spell_small(21, es) == ["veintiuno"]
        assert spell_small(67, hi) == ["सड़सठ"]

    def test_round_tens(self, en, es) -> None:
        assert spell_small(40, en) == ["forty"]
        assert spell_small(30, es) == ["treinta"]

    def test_fused_tens(self, en, ja) -> None:
        """en "-", ja "" — один токен"""
        assert spell_small(42, en) == ["forty-two"]
        assert spell_small(11, ja) == ["十一"]
        assert spell_small(99, ja) == ["九十九"]

    def test_linked_tens(self, es) -> None:
        """es: десяток + "y" + единица — три токена"""
        assert spell_small(45, es) == ["cuarenta", "y", "cinco"]

    def test_separate_tens(self, ru) -> None:
        assert spell_small(42, ru) == ["сорок", "два"]


# =============================================================================
# HUNDREDS & THOUSANDS
# =============================================================================


class TestHundreds:
    """Тесты для сотен"""

    def test_invariant_hundred_word(self, en, hi) -> None:
        assert spell_small(100, en) == ["one", "hundred"]
        assert spell_small(342, en) == ["three", "hundred", "forty-two"]
        assert spell_small(199, hi) == ["एक", "सौ", "निन्यानवे"]

    def test_fused_hundreds(self, es, ru) -> None:
        assert spell_small(200, ru) == ["двести"]
        assert spell_small(555, es) == ["quinientos", "cincuenta", "y", "cinco"]

    def test_exact_hundred_override(self, es) -> None:
        """es: ровно 100 → "cien", 101..199 → "ciento" """
        assert spell_small(100, es) == ["cien"]
        assert spell_small(101, es) == ["ciento", "uno"]

    def test_omit_one_hundred(self, ja) -> None:
        assert spell_small(100, ja) == ["百"]
        assert spell_small(300, ja) == ["三", "百"]

    def test_myriad_thousands_digit(self, ja) -> None:
        assert spell_small(1000, ja) == ["千"]
        assert spell_small(2025, ja) == ["二", "千", "二十五"]
        assert spell_small(1111, ja) == ["千", "百", "十一"]
        assert spell_small(9999, ja) == ["九", "千", "九", "百", "九十九"]

    def test_conjunction_after_hundred(self, en) -> None:
        assert spell_small(101, en, conjunction=True) == ["one", "hundred", "and", "one"]
        assert spell_small(101, en) == ["one", "hundred", "one"]

    def test_no_conjunction_for_round_hundred(self, en) -> None:
        assert spell_small(300, en, conjunction=True) == ["three", "hundred"]

    def test_no_conjunction_below_hundred(self, en) -> None:
        assert spell_small(42, en, conjunction=True) == ["forty-two"]


# =============================================================================
# GENDER
# =============================================================================


class TestGenderedForms:
    """Тесты для родовых форм"""

    def test_spanish_apocope(self, es) -> None:
        assert spell_small(1, es, gender=Gender.MASCULINE) == ["un"]
        assert spell_small(21, es, gender=Gender.MASCULINE) == ["veintiún"]
        assert spell_small(31, es, gender=Gender.MASCULINE) == ["treinta", "y", "un"]

    def test_spanish_feminine(self, es) -> None:
        assert spell_small(1, es, gender=Gender.FEMININE) == ["una"]
        assert spell_small(500, es, gender=Gender.FEMININE) == ["quinientas"]
        assert spell_small(201, es, gender=Gender.FEMININE) == ["doscientas", "una"]

    def test_spanish_neutral(self, es) -> None:
        """Без рода — полные формы ("uno", "veintiuno")"""
        assert spell_small(1, es) == ["uno"]
        assert spell_small(31, es) == ["treinta", "y", "uno"]

    def test_russian_feminine(self, ru) -> None:
        assert spell_small(2, ru, gender=Gender.FEMININE) == ["две"]
        assert spell_small(22, ru, gender=Gender.FEMININE) == ["двадцать", "две"]
        assert spell_small(5, ru, gender=Gender.FEMININE) == ["пять"]

    def test_gender_without_forms_is_neutral(self, en) -> None:
        assert spell_small(1, en, gender=Gender.FEMININE) == ["one"]


# =============================================================================
# OVERRIDES & RANGE
# =============================================================================


def test_two_digit_override():
    """Vigesimal остатки задаются таблицей two_digit_overrides"""
    with open(BUNDLED_PACK_DIR / "en.json", "r", encoding="utf-8") as f:
        data = json.load(f)
    data["two_digit_overrides"] = {"80": "four-score", "90": "four-score-ten"}
    pack = LanguagePack.model_validate(data)

    assert spell_small(80, pack) == ["four-score"]
    assert spell_small(90, pack) == ["four-score-ten"]
    assert spell_small(91, pack) == ["ninety-one"]


def test_out_of_range_rejected(en, ja):
    with pytest.raises(ValueError, match="0 <= n < 1000"):
        spell_small(1000, en)
    with pytest.raises(ValueError):
        spell_small(-1, en)
    with pytest.raises(ValueError, match="0 <= n < 10000"):
        spell_small(10_000, ja)


def test_total_and_deterministic_over_range():
    """Для каждого pack и каждого n < base — непустой детерминированный результат"""
    for locale in ("en", "es", "ru", "hi", "ja"):
        pack = load_language_pack(locale)
        for n in range(pack.base):
            first = spell_small(n, pack)
            assert first
            assert all(first)
            assert spell_small(n, pack) == first
