import pytest

from joywork.vector import DynamicArray


def filled(values, capacity=10):
    arr = DynamicArray(capacity)
    for value in values:
        arr.push_back(value)
    return arr


def test_push_back_beyond_capacity_keeps_all_values():
    values = [i + 100 for i in range(20)]
    arr = filled(values)
    assert len(arr) == 20
    assert list(arr) == values
    assert arr.capacity == 21


def test_zero_capacity_grows_on_first_push():
    arr = DynamicArray(0)
    arr.push_back("x")
    assert arr.capacity == 1
    assert list(arr) == ["x"]


def test_copy_is_independent():
    arr = filled(range(5))
    duplicate = arr.copy()
    assert list(duplicate) == list(arr)
    assert duplicate.capacity == arr.capacity
    duplicate[0] = 42
    duplicate.push_back(99)
    assert arr[0] == 0
    assert len(arr) == 5


def test_indexing_and_assignment():
    arr = filled([7, 8, 9])
    arr[1] = 80
    assert arr[1] == 80
    assert arr[-1] == 9
    with pytest.raises(IndexError):
        arr[3]
    with pytest.raises(IndexError):
        arr[-4] = 1


def test_front_back_and_pop():
    arr = filled([1, 2, 3])
    assert arr.front() == 1
    assert arr.back() == 3
    assert arr.pop_back() == 3
    assert arr.back() == 2
    assert len(arr) == 2


def test_empty_access_raises():
    arr = DynamicArray(4)
    assert arr.is_empty()
    with pytest.raises(IndexError):
        arr.pop_back()
    with pytest.raises(IndexError):
        arr.back()
    with pytest.raises(IndexError):
        arr.front()


def test_clear_keeps_capacity():
    arr = filled(range(15), capacity=4)
    capacity = arr.capacity
    arr.clear()
    assert arr.is_empty()
    assert list(arr) == []
    assert arr.capacity == capacity


def test_reserve_never_shrinks():
    arr = DynamicArray(8)
    arr.reserve(3)
    assert arr.capacity == 8
    arr.reserve(30)
    assert arr.capacity == 30


def test_resize_grow_and_shrink():
    arr = filled([5, 6], capacity=2)
    arr.resize(9)
    assert len(arr) == 9
    assert arr.capacity >= 9
    assert list(arr)[:2] == [5, 6]
    assert all(item is None for item in list(arr)[2:])
    arr.resize(1)
    assert list(arr) == [5]


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)
    with pytest.raises(ValueError):
        DynamicArray(2).resize(-3)