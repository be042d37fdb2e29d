"""
Core module for grade ordering.

Exports the comparator, models and exceptions for easy access.
"""

from gradesort.core.exceptions import (
    GradeSortError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidRecordError,
)

from gradesort.core.models import (
    GradedRecord,
    SortDirection,
    Student,
    parse_direction,
)

from gradesort.core.comparator import (
    ASCENDING,
    DESCENDING,
    GradeComparator,
)

__all__ = [
    # Exceptions
    'GradeSortError',
    'ConfigurationError',
    'InvalidArgumentError',
    'InvalidRecordError',
    # Models
    'GradedRecord',
    'SortDirection',
    'Student',
    'parse_direction',
    # Comparator
    'ASCENDING',
    'DESCENDING',
    'GradeComparator',
]
