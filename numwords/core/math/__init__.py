"""
Core math modules для numwords

Разложение целого произвольной точности на группы разрядов.
"""

# Group Decomposer
from numwords.core.math.decomposition import (
    Group,
    GroupValue,
    MagnitudeOverflow,
    decompose,
)

__all__ = [
    # Group Decomposer — Exceptions
    "MagnitudeOverflow",
    # Group Decomposer — Types
    "Group",
    "GroupValue",
    # Group Decomposer — Functions
    "decompose",
]
