"""
Group Decomposer — разложение целого числа на группы разрядов

Разбивает неотрицательное целое произвольной точности на последовательность
(coefficient, MagnitudeEntry) по Magnitude Table языка.

Поддерживаемые системы группировки:
- Равномерная (en: 1000, ja myriad: 10000)
- Неравномерная (hi lakh/crore: 1000, затем x100; es long scale: 1000, x1000, x10^6)

После первой границы каждое следующее деление использует шаг СЛЕДУЮЩЕЙ
entry таблицы, а не фиксированное основание.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Тотальность для всех 0 <= magnitude < table.limit
2. magnitude >= table.limit → MagnitudeOverflow (без усечения)
3. Ноль → ровно одна группа (0, None)
4. Старшая группа всегда ненулевая; нулевые промежуточные группы сохраняются
5. Порядок групп: строго по убыванию разряда
"""

from dataclasses import dataclass

from numwords.core.domain.magnitude import (
    MagnitudeEntry,
    MagnitudeOverflow,
    MagnitudeTable,
    count_digits,
)


# =============================================================================
# GROUP VALUE
# =============================================================================


@dataclass(frozen=True)
class Group:
    """Одна группа разложения. magnitude=None — группа единиц."""

    coefficient: int
    magnitude: MagnitudeEntry | None


@dataclass(frozen=True)
class GroupValue:
    """Результат разложения: группы от старшего разряда к младшему."""

    groups: tuple[Group, ...]

    def __iter__(self):
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def is_zero(self) -> bool:
        """Значение равно нулю (единственная группа с коэффициентом 0)."""
        return len(self.groups) == 1 and self.groups[0].coefficient == 0

    @property
    def coefficients(self) -> tuple[int, ...]:
        return tuple(group.coefficient for group in self.groups)

    def non_zero(self) -> tuple[Group, ...]:
        """Группы с ненулевым коэффициентом (порядок сохраняется)."""
        return tuple(group for group in self.groups if group.coefficient)


# =============================================================================
# DECOMPOSITION
# =============================================================================


def decompose(magnitude: int, table: MagnitudeTable) -> GroupValue:
    """
    Разложение неотрицательного целого по Magnitude Table.

    Args:
        magnitude: Неотрицательное целое (знак обработан Format Pipeline)
        table: Magnitude Table языка

    Returns:
        GroupValue, старшая группа первой

    Raises:
        ValueError: Если magnitude отрицательное
        MagnitudeOverflow: Если magnitude >= table.limit

    Examples:
        en (шаг 1000): 1_234_567 → (1, million), (234, thousand), (567, None)
        hi (1000, x100): 12_34_567 → (12, lakh), (34, thousand), (567, None)
    """
    if magnitude < 0:
        raise ValueError(f"Decomposition requires a non-negative magnitude, got {magnitude}")

    if magnitude >= table.limit:
        raise MagnitudeOverflow(count_digits(magnitude), table.limit)

    if magnitude == 0:
        return GroupValue(groups=(Group(coefficient=0, magnitude=None),))

    groups: list[Group] = [Group(coefficient=magnitude % table.base, magnitude=None)]
    rest = magnitude // table.base

    for index, entry in enumerate(table.entries):
        if rest == 0:
            break
        step = table.step(index)
        groups.append(Group(coefficient=rest % step, magnitude=entry))
        rest //= step

    return GroupValue(groups=tuple(reversed(groups)))
