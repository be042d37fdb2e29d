"""
Type guard functions for runtime type checking.

Provides type guards for validating records handed to the comparator.
"""

from typing import Any, TypeGuard

from gradesort.core.exceptions import InvalidRecordError
from gradesort.core.models import GradedRecord


def is_integer_grade(value: Any) -> TypeGuard[int]:
    """
    Check if value is usable as a grade.

    ``bool`` is a subclass of ``int`` but is not a grade.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def has_integer_grade(record: Any) -> TypeGuard[GradedRecord]:
    """
    Check if record exposes an integer ``grade`` attribute.

    Args:
        record: Value to check

    Returns:
        True if ``record.grade`` exists and is an integer
    """
    if record is None:
        return False
    return is_integer_grade(getattr(record, 'grade', None))


def ensure_graded(record: Any, position: str | None = None) -> int:
    """
    Read the grade of a record, failing fast when it has none.

    Args:
        record: Record to read
        position: Where the record came from ("a", "b" or "index N"), for the error

    Returns:
        The record's grade

    Raises:
        InvalidRecordError: If the record is None, has no grade, or the
            grade is not an integer
    """
    if record is None:
        raise InvalidRecordError("Record is None", position=position)

    try:
        grade = record.grade
    except AttributeError:
        raise InvalidRecordError(
            f"{type(record).__name__} has no 'grade' attribute",
            position=position
        ) from None

    if not is_integer_grade(grade):
        raise InvalidRecordError(
            f"grade must be an integer, got {type(grade).__name__}",
            position=position
        )
    return grade
