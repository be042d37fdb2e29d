"""
Directional comparison of records by grade.

A GradeComparator is an immutable value holding only its direction. It
imposes a total order on records consistent with integer ordering of their
``grade`` attribute, reversed for the descending direction, and plugs into
``sorted`` / ``list.sort`` through ``key()``.

Usage:
    sorted(students, key=ASCENDING.key())
    students.sort(key=GradeComparator.for_direction("desc").key())
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, field_validator

from gradesort.core.models import DirectionLike, SortDirection, parse_direction
from gradesort.utils.type_guards import ensure_graded


def _cmp(x: int, y: int) -> int:
    return (x > y) - (x < y)


class GradeComparator(BaseModel):
    """
    Three-way comparison of two records by grade.

    ``compare(a, b)`` returns -1 when ``a`` sorts before ``b``, 0 when they
    tie and 1 when ``a`` sorts after ``b``. Stateless beyond its direction,
    so one instance can be shared freely between threads.
    """
    model_config = ConfigDict(frozen=True)

    direction: SortDirection = SortDirection.ASCENDING

    @field_validator('direction', mode='before')
    @classmethod
    def normalize_direction(cls, v: Any) -> SortDirection:
        """Accept text aliases and sign multipliers."""
        return parse_direction(v)

    @property
    def order(self) -> int:
        """Sign multiplier: +1 ascending, -1 descending."""
        return self.direction.multiplier

    def compare(self, a: Any, b: Any) -> int:
        """
        Compare two records by grade.

        Args:
            a: First record, must expose an integer ``grade``
            b: Second record, must expose an integer ``grade``

        Returns:
            -1, 0 or 1 following the comparator's direction

        Raises:
            InvalidRecordError: If either record is None or has no integer grade
        """
        grade_a = ensure_graded(a, position='a')
        grade_b = ensure_graded(b, position='b')
        return self.order * _cmp(grade_a, grade_b)

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def key(self) -> Callable[[Any], Any]:
        """Wrap the comparison as a sort key for ``sorted`` and ``list.sort``."""
        return cmp_to_key(self.compare)

    def reversed(self) -> GradeComparator:
        """Return the well-known comparator of the opposite direction."""
        return GradeComparator.for_direction(self.direction.opposite)

    @classmethod
    def for_direction(cls, direction: DirectionLike) -> GradeComparator:
        """
        Get the shared comparator for a direction.

        Args:
            direction: SortDirection, text alias ("asc", "descending", ...)
                or sign multiplier (1 / -1)

        Returns:
            ASCENDING or DESCENDING

        Raises:
            InvalidArgumentError: If direction names no direction
        """
        return _WELL_KNOWN[parse_direction(direction)]

    def __repr__(self) -> str:
        return f"GradeComparator({self.direction.value})"


ASCENDING = GradeComparator(direction=SortDirection.ASCENDING)
DESCENDING = GradeComparator(direction=SortDirection.DESCENDING)

_WELL_KNOWN = {
    SortDirection.ASCENDING: ASCENDING,
    SortDirection.DESCENDING: DESCENDING,
}
