"""
Тесты для Magnitude Table

Проверяет:
1. Валидацию при построении: возрастание, делимость, limit
2. Шаги (step) для равномерных и неравномерных таблиц
3. Выбор формы scale word по классу
4. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from numwords.core.domain.grammar import Gender, PluralClass
from numwords.core.domain.magnitude import (
    MagnitudeEntry,
    MagnitudeOverflow,
    MagnitudeTable,
    count_digits,
)


def _entry(threshold: int, name: str, **kwargs) -> MagnitudeEntry:
    return MagnitudeEntry(threshold=threshold, name=name, **kwargs)


@pytest.fixture
def lakh_table() -> MagnitudeTable:
    """Неравномерная таблица: 10^3, 10^5, 10^7"""
    return MagnitudeTable(
        entries=(
            _entry(1000, "thousand"),
            _entry(100_000, "lakh"),
            _entry(10_000_000, "crore"),
        ),
        limit=10**12,
    )


# =============================================================================
# VALIDATION
# =============================================================================


class TestMagnitudeTableValidation:
    """Тесты для валидации таблицы при загрузке"""

    def test_valid_table(self, lakh_table: MagnitudeTable) -> None:
        assert lakh_table.base == 1000
        assert len(lakh_table.entries) == 3

    def test_thresholds_must_ascend(self) -> None:
        with pytest.raises(ValidationError, match="strictly ascending"):
            MagnitudeTable(
                entries=(_entry(10**6, "million"), _entry(1000, "thousand")),
                limit=10**9,
            )

    def test_thresholds_must_divide(self) -> None:
        with pytest.raises(ValidationError, match="not a multiple"):
            MagnitudeTable(
                entries=(_entry(1000, "thousand"), _entry(1500, "odd")),
                limit=15_000,
            )

    def test_limit_must_exceed_top_threshold(self) -> None:
        with pytest.raises(ValidationError, match="limit"):
            MagnitudeTable(entries=(_entry(1000, "thousand"),), limit=1000)

    def test_limit_must_be_multiple_of_top_threshold(self) -> None:
        with pytest.raises(ValidationError, match="limit"):
            MagnitudeTable(entries=(_entry(1000, "thousand"),), limit=1_500_000 + 1)

    def test_empty_table_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MagnitudeTable(entries=(), limit=1000)

    def test_threshold_must_exceed_one(self) -> None:
        with pytest.raises(ValidationError):
            _entry(1, "unit")


# =============================================================================
# STEPS
# =============================================================================


class TestSteps:
    """Тесты для шагов таблицы"""

    def test_non_uniform_steps(self, lakh_table: MagnitudeTable) -> None:
        """thousand → lakh: x100, lakh → crore: x100, crore → limit: x10^5"""
        assert lakh_table.step(0) == 100
        assert lakh_table.step(1) == 100
        assert lakh_table.step(2) == 100_000

    def test_uniform_steps(self) -> None:
        table = MagnitudeTable(
            entries=(_entry(10**4, "man"), _entry(10**8, "oku")),
            limit=10**12,
        )
        assert table.base == 10_000
        assert table.step(0) == 10_000
        assert table.step(1) == 10_000


# =============================================================================
# ENTRIES
# =============================================================================


class TestMagnitudeEntry:
    """Тесты для MagnitudeEntry"""

    def test_form_lookup(self) -> None:
        entry = _entry(
            1000,
            "тысяча",
            forms={
                PluralClass.ONE: "тысяча",
                PluralClass.FEW: "тысячи",
                PluralClass.MANY: "тысяч",
            },
            gender=Gender.FEMININE,
        )
        assert entry.word_for(PluralClass.FEW) == "тысячи"
        assert entry.word_for(PluralClass.MANY) == "тысяч"

    def test_missing_form_falls_back_to_name(self) -> None:
        entry = _entry(1000, "thousand")
        assert entry.word_for(PluralClass.OTHER) == "thousand"
        assert entry.word_for(PluralClass.ONE) == "thousand"

    def test_entry_is_frozen(self) -> None:
        entry = _entry(1000, "thousand")
        with pytest.raises(ValidationError):
            entry.name = "grand"


def test_overflow_message_reports_digits():
    """MagnitudeOverflow сообщает размер значения и предел."""
    error = MagnitudeOverflow(30, 10**27)
    assert isinstance(error, ValueError)
    assert error.magnitude_digits == 30
    assert error.limit == 10**27
    assert "28 digits" in str(error)


def test_count_digits():
    """Число цифр без str(): работает и за пределом 4300 цифр"""
    assert count_digits(0) == 1
    assert count_digits(9) == 1
    assert count_digits(10) == 2
    assert count_digits(-999) == 3
    assert count_digits(10**27) == 28
    assert count_digits(10**5000 - 1) == 5000
    assert count_digits(10**5000) == 5001
    for power in range(1, 200):
        assert count_digits(2**power) == len(str(2**power))


def test_overflow_message_for_huge_limit():
    error = MagnitudeOverflow(9000, 10**8000)
    assert "9000 digits" in str(error)
    assert "8001 digits" in str(error)
