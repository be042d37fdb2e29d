"""
Sorting utilities for grade ordering.

Thin wrappers handing a GradeComparator to Python's built-in sort, which is
stable: records with equal grades keep their input order. Records are checked
before sorting, so an invalid record fails even in a one-element input and
an in-place sort never leaves the list half reordered.
"""

from typing import Any, Iterable, List, MutableSequence, Optional, Sequence

from gradesort.config.logging_config import get_logger
from gradesort.config.settings import get_settings
from gradesort.core.comparator import GradeComparator
from gradesort.core.exceptions import InvalidRecordError
from gradesort.core.models import DirectionLike
from gradesort.utils.type_guards import ensure_graded

logger = get_logger(__name__)


def resolve_comparator(direction: Optional[DirectionLike] = None) -> GradeComparator:
    """
    Pick the comparator for a direction, falling back to the configured default.

    Args:
        direction: Explicit direction, or None for ``GRADE_SORT_DEFAULT_DIRECTION``

    Returns:
        The shared comparator for that direction
    """
    if direction is None:
        direction = get_settings().default_direction
    return GradeComparator.for_direction(direction)


def _check_records(records: Sequence[Any]) -> None:
    try:
        for index, record in enumerate(records):
            ensure_graded(record, position=f"index {index}")
    except InvalidRecordError as e:
        logger.warning(f"Cannot sort by grade: {e}")
        raise


def sort_with(records: Iterable[Any], comparator: GradeComparator) -> List[Any]:
    """
    Return a new list of records ordered by the given comparator.

    Args:
        records: Records exposing an integer ``grade``
        comparator: Comparator deciding the order

    Returns:
        New sorted list; the input is not modified

    Raises:
        InvalidRecordError: If a record has no integer grade
    """
    items = list(records)
    _check_records(items)
    logger.debug(f"Sorting {len(items)} records {comparator.direction.value}")
    return sorted(items, key=comparator.key())


def sort_by_grade(
    records: Iterable[Any],
    direction: Optional[DirectionLike] = None
) -> List[Any]:
    """
    Sort records by grade into a new list.

    Args:
        records: Records exposing an integer ``grade``
        direction: "ascending"/"descending" (or alias); None uses the default

    Returns:
        New list ordered by grade

    Examples:
        >>> [s.grade for s in sort_by_grade(students, "desc")]
        [95, 75, 60]
    """
    return sort_with(records, resolve_comparator(direction))


def sort_by_grade_in_place(
    records: MutableSequence[Any],
    direction: Optional[DirectionLike] = None
) -> None:
    """Sort a mutable sequence of records by grade in place."""
    comparator = resolve_comparator(direction)
    _check_records(records)
    logger.debug(f"Sorting {len(records)} records in place {comparator.direction.value}")
    if isinstance(records, list):
        records.sort(key=comparator.key())
    else:
        records[:] = sorted(records, key=comparator.key())
