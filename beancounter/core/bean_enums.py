"""Bean enumeration types."""

from enum import Enum, IntEnum


class FallDirection(IntEnum):
    """Side a bean takes when it hits a peg.

    The integer value is the column offset in the next row, so
    ``column + direction`` is the bean's new column.
    """

    LEFT = 0
    """Bean keeps its column index in the next row."""

    RIGHT = 1
    """Bean moves one column to the right in the next row."""


class BeanMode(Enum):
    """Fall policy of a bean."""

    LUCK = "luck"
    """Every peg is an independent fair coin flip."""

    SKILL = "skill"
    """Bean falls right skill_level times, then left forever."""
