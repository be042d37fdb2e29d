"""
gradesort: order student records by grade.

Exports the comparator, its well-known instances and the sort helpers.
"""

from gradesort.core import (
    ASCENDING,
    DESCENDING,
    ConfigurationError,
    GradeComparator,
    GradedRecord,
    GradeSortError,
    InvalidArgumentError,
    InvalidRecordError,
    SortDirection,
    Student,
    parse_direction,
)
from gradesort.utils.sorting import (
    resolve_comparator,
    sort_by_grade,
    sort_by_grade_in_place,
    sort_with,
)

__version__ = "0.1.0"

__all__ = [
    'ASCENDING',
    'DESCENDING',
    'ConfigurationError',
    'GradeComparator',
    'GradedRecord',
    'GradeSortError',
    'InvalidArgumentError',
    'InvalidRecordError',
    'SortDirection',
    'Student',
    'parse_direction',
    'resolve_comparator',
    'sort_by_grade',
    'sort_by_grade_in_place',
    'sort_with',
]
