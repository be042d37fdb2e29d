"""
Tests for the grade comparator.
"""

import itertools
import threading
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from gradesort.core.comparator import ASCENDING, DESCENDING, GradeComparator
from gradesort.core.exceptions import InvalidArgumentError, InvalidRecordError
from gradesort.core.models import SortDirection, Student


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


@pytest.fixture
def students():
    """A small class with one tie."""
    return [
        Student(name="Ada", grade=60),
        Student(name="Ben", grade=95),
        Student(name="Cleo", grade=75),
        Student(name="Dan", grade=75),
        Student(name="Eve", grade=0),
        Student(name="Finn", grade=100),
    ]


def test_lower_grade_sorts_first_ascending():
    """70 vs 85: ascending puts a first, descending puts it after."""
    a = Student(name="a", grade=70)
    b = Student(name="b", grade=85)

    assert ASCENDING.compare(a, b) < 0
    assert DESCENDING.compare(a, b) > 0


def test_equal_grades_compare_equal():
    """90 vs 90 ties in both directions."""
    a = Student(name="a", grade=90)
    b = Student(name="b", grade=90)

    assert ASCENDING.compare(a, b) == 0
    assert DESCENDING.compare(a, b) == 0


def test_sorting_with_key():
    """Scenario from the tutorial: [60, 95, 75]."""
    records = [SimpleNamespace(grade=60), SimpleNamespace(grade=95), SimpleNamespace(grade=75)]

    assert [r.grade for r in sorted(records, key=ASCENDING.key())] == [60, 75, 95]
    assert [r.grade for r in sorted(records, key=DESCENDING.key())] == [95, 75, 60]


def test_result_is_unit_sign():
    """compare returns exactly -1, 0 or 1."""
    low = SimpleNamespace(grade=-1000)
    high = SimpleNamespace(grade=10**12)

    assert ASCENDING.compare(low, high) == -1
    assert ASCENDING.compare(high, low) == 1
    assert DESCENDING.compare(low, high) == 1
    assert ASCENDING.compare(low, low) == 0


def test_call_is_compare():
    a = Student(name="a", grade=10)
    b = Student(name="b", grade=20)

    assert ASCENDING(a, b) == ASCENDING.compare(a, b)
    assert DESCENDING(a, b) == DESCENDING.compare(a, b)


def test_directions_are_inverse(students):
    """Descending flips the sign whenever grades differ."""
    for a, b in itertools.product(students, repeat=2):
        if a.grade != b.grade:
            assert sign(ASCENDING(a, b)) == -sign(DESCENDING(a, b))


def test_reflexive(students):
    for a in students:
        assert ASCENDING(a, a) == 0
        assert DESCENDING(a, a) == 0


def test_antisymmetric(students):
    for a, b in itertools.product(students, repeat=2):
        assert sign(ASCENDING(a, b)) == -sign(ASCENDING(b, a))
        assert sign(DESCENDING(a, b)) == -sign(DESCENDING(b, a))


def test_transitive(students):
    for a, b, c in itertools.product(students, repeat=3):
        if ASCENDING(a, b) <= 0 and ASCENDING(b, c) <= 0:
            assert ASCENDING(a, c) <= 0


def test_accepts_any_record_with_grade():
    """Duck typing: plain objects and pydantic records mix."""
    class Row:
        def __init__(self, grade):
            self.grade = grade

    assert ASCENDING(Row(1), Student(name="x", grade=2)) == -1


def test_none_record_fails_fast():
    """An absent record raises instead of defaulting."""
    a = Student(name="a", grade=50)

    with pytest.raises(InvalidRecordError) as exc_info:
        ASCENDING.compare(None, a)
    assert exc_info.value.position == "a"

    with pytest.raises(InvalidRecordError) as exc_info:
        DESCENDING.compare(a, None)
    assert exc_info.value.position == "b"


def test_missing_grade_attribute():
    with pytest.raises(InvalidRecordError) as exc_info:
        ASCENDING.compare(SimpleNamespace(score=3), SimpleNamespace(grade=3))

    assert exc_info.value.attribute == "grade"
    assert "no 'grade' attribute" in str(exc_info.value)


@pytest.mark.parametrize("bad_grade", ["90", 90.0, None, True])
def test_non_integer_grade(bad_grade):
    """Strings, floats, None and bools are not grades."""
    with pytest.raises(InvalidRecordError):
        ASCENDING.compare(SimpleNamespace(grade=bad_grade), SimpleNamespace(grade=1))


def test_invalid_record_is_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        ASCENDING.compare(object(), object())


def test_well_known_instances():
    assert ASCENDING.direction is SortDirection.ASCENDING
    assert DESCENDING.direction is SortDirection.DESCENDING
    assert ASCENDING.order == 1
    assert DESCENDING.order == -1


@pytest.mark.parametrize("direction,expected", [
    (SortDirection.ASCENDING, ASCENDING),
    ("asc", ASCENDING),
    ("Ascending", ASCENDING),
    (1, ASCENDING),
    (SortDirection.DESCENDING, DESCENDING),
    ("DESC", DESCENDING),
    ("descending", DESCENDING),
    (-1, DESCENDING),
])
def test_for_direction_returns_shared_instance(direction, expected):
    assert GradeComparator.for_direction(direction) is expected


def test_for_direction_rejects_unknown():
    with pytest.raises(InvalidArgumentError):
        GradeComparator.for_direction("sideways")
    with pytest.raises(InvalidArgumentError):
        GradeComparator.for_direction(0)


def test_reversed():
    assert ASCENDING.reversed() is DESCENDING
    assert DESCENDING.reversed() is ASCENDING


def test_value_semantics():
    """Comparators with the same direction are equal and hash alike."""
    built = GradeComparator(direction="desc")

    assert built == DESCENDING
    assert built != ASCENDING
    assert hash(built) == hash(DESCENDING)
    assert GradeComparator() == ASCENDING
    assert repr(DESCENDING) == "GradeComparator(descending)"


def test_constructor_rejects_unknown_direction():
    with pytest.raises(InvalidArgumentError):
        GradeComparator(direction="up")


def test_immutable():
    with pytest.raises(ValidationError):
        ASCENDING.direction = SortDirection.DESCENDING
    assert ASCENDING.direction is SortDirection.ASCENDING


def test_shared_between_threads(students):
    """One instance sorts concurrently without interference."""
    results = []

    def worker():
        ordered = sorted(students, key=DESCENDING.key())
        results.append([s.grade for s in ordered])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [[100, 95, 75, 75, 60, 0]] * 8
