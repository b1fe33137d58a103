import pytest

from dsakit.arrays import FixedArray


def make():
    return FixedArray(10, [10, 20, 30, 40])


def test_access_first_element():
    arr = FixedArray(5, [10, 20, 30, 40, 50])
    assert arr[0] == 10
    assert arr[-1] == 50
    assert len(arr) == 5


def test_forward_and_reverse_traversal():
    arr = FixedArray(5, [1, 2, 3, 4, 5])
    assert list(arr) == [1, 2, 3, 4, 5]
    assert list(reversed(arr)) == [5, 4, 3, 2, 1]


def test_insert_at_beginning():
    arr = make()
    arr.insert(0, 5)
    assert list(arr) == [5, 10, 20, 30, 40]


def test_insert_in_middle():
    arr = make()
    arr.insert(2, 99)
    assert list(arr) == [10, 20, 99, 30, 40]


def test_insert_at_end():
    arr = make()
    arr.insert(len(arr), 50)
    assert list(arr) == [10, 20, 30, 40, 50]


def test_delete_from_beginning():
    arr = make()
    assert arr.delete(0) == 10
    assert list(arr) == [20, 30, 40]


def test_delete_from_middle():
    arr = FixedArray(10, [10, 20, 30, 40, 50])
    assert arr.delete(2) == 30
    assert list(arr) == [10, 20, 40, 50]


def test_delete_from_end():
    arr = make()
    assert arr.delete(len(arr) - 1) == 40
    assert list(arr) == [10, 20, 30]


@pytest.mark.parametrize(
    "index, value, expected",
    [
        (0, 99, [99, 20, 30, 40, 50]),
        (2, 55, [10, 20, 55, 40, 50]),
        (4, 77, [10, 20, 30, 40, 77]),
    ],
)
def test_update(index, value, expected):
    arr = FixedArray(5, [10, 20, 30, 40, 50])
    arr.update(index, value)
    assert list(arr) == expected


def test_insert_into_full_array_raises():
    arr = FixedArray(5, [10, 20, 30, 40, 50])
    with pytest.raises(OverflowError):
        arr.insert(0, 1)
    assert list(arr) == [10, 20, 30, 40, 50]


def test_insert_position_out_of_range():
    arr = make()
    with pytest.raises(IndexError):
        arr.insert(5, 1)
    with pytest.raises(IndexError):
        arr.insert(-1, 1)


def test_delete_and_update_out_of_range():
    arr = make()
    with pytest.raises(IndexError):
        arr.delete(4)
    with pytest.raises(IndexError):
        arr.update(10, 1)
    with pytest.raises(IndexError):
        arr[4]


def test_too_many_initial_values():
    with pytest.raises(ValueError):
        FixedArray(2, [1, 2, 3])


def test_insert_then_delete_round_trip():
    arr = make()
    before = list(arr)
    arr.insert(3, 123)
    assert arr.delete(3) == 123
    assert list(arr) == before