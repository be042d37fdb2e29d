"""
Core data models for grade ordering.

Defines the ordering direction and the Student record. The comparator only
needs an object exposing an integer ``grade`` attribute; ``Student`` is a
convenience record, not a requirement.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from gradesort.config.constants import (
    ASCENDING_ALIASES,
    DESCENDING_ALIASES,
    MAX_GRADE,
    MIN_GRADE,
)
from gradesort.core.exceptions import InvalidArgumentError


class SortDirection(str, Enum):
    """Ordering sense applied to the grade comparison."""
    ASCENDING = "ascending"     # lowest grade first
    DESCENDING = "descending"   # highest grade first

    @property
    def multiplier(self) -> int:
        """Sign applied to the base integer comparison."""
        return 1 if self is SortDirection.ASCENDING else -1

    @property
    def opposite(self) -> SortDirection:
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


DirectionLike = Union[SortDirection, str, int]


def parse_direction(value: DirectionLike) -> SortDirection:
    """
    Normalize a direction given as enum, text alias or sign multiplier.

    Args:
        value: ``SortDirection``, ``"asc"``/``"ascending"``/``"desc"``/
            ``"descending"`` (case-insensitive), or ``1`` / ``-1``

    Returns:
        The matching SortDirection

    Raises:
        InvalidArgumentError: If the value names no direction

    Examples:
        >>> parse_direction("DESC")
        <SortDirection.DESCENDING: 'descending'>
        >>> parse_direction(1)
        <SortDirection.ASCENDING: 'ascending'>
    """
    if isinstance(value, SortDirection):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        if value == 1:
            return SortDirection.ASCENDING
        if value == -1:
            return SortDirection.DESCENDING
    elif isinstance(value, str):
        text = value.strip().lower()
        if text in ASCENDING_ALIASES:
            return SortDirection.ASCENDING
        if text in DESCENDING_ALIASES:
            return SortDirection.DESCENDING

    raise InvalidArgumentError(
        f"Unknown sort direction: {value!r}",
        {'accepted': sorted(ASCENDING_ALIASES | DESCENDING_ALIASES)}
    )


@runtime_checkable
class GradedRecord(Protocol):
    """Anything exposing a readable integer ``grade`` attribute."""
    grade: int


class Student(BaseModel):
    """
    A student and the grade they obtained.

    Frozen so records can be shared between sorts and threads.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    grade: int = Field(..., ge=MIN_GRADE, le=MAX_GRADE)
    student_id: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.name} ({self.grade})"
