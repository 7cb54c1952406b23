import pytest

from rustdrill.drills.containers import (
    Cons,
    create_empty_list,
    create_non_empty_list,
    offset_sums,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()


def test_non_empty_list_contents():
    assert list(create_non_empty_list()) == [1, 1]
    assert create_non_empty_list() == Cons(1, Cons(1, None))


def test_offset_sums_cover_every_number():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_small_example():
    assert offset_sums([1, 2, 3, 4], 2) == [4, 6]


def test_offset_sums_more_workers_than_numbers():
    assert offset_sums([5], 3) == [5, 0, 0]


def test_offset_sums_rejects_no_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)