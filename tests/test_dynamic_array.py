import pytest

from algostructs.dynamic_array import DynamicArray


def test_default_capacity_is_five():
    assert DynamicArray.default_capacity() == 5
    assert DynamicArray().capacity == DynamicArray.default_capacity()


def test_new_array_is_empty():
    array = DynamicArray()
    assert len(array) == 0
    assert list(array) == []


def test_items_set_size_and_capacity():
    array = DynamicArray([10, 20, 30])
    assert len(array) == 3
    assert array.capacity == 3
    assert list(array) == [10, 20, 30]


def test_explicit_capacity():
    array = DynamicArray(capacity=12)
    assert array.capacity == 12
    assert len(array) == 0


def test_append_keeps_order():
    array = DynamicArray()
    for value in [1, 2, 3]:
        array.append(value)
    assert list(array) == [1, 2, 3]


def test_append_doubles_capacity_when_full():
    array = DynamicArray()
    start = array.capacity
    for value in range(start + 1):
        array.append(value)
    assert array.capacity == start * 2
    assert len(array) == start + 1


def test_append_to_empty_item_list_grows():
    array = DynamicArray([])
    array.append("x")
    assert list(array) == ["x"]
    assert array.capacity >= len(array)


def test_insert_shifts_elements_right():
    array = DynamicArray([1, 2, 4])
    pos = array.insert(3, 2)
    assert pos == 2
    assert list(array) == [1, 2, 3, 4]


def test_insert_at_end_and_front():
    array = DynamicArray([2])
    array.insert(3, 1)
    array.insert(1, 0)
    assert list(array) == [1, 2, 3]


@pytest.mark.parametrize("pos", [-1, 4])
def test_insert_out_of_range(pos):
    array = DynamicArray([1, 2, 3])
    with pytest.raises(IndexError):
        array.insert(9, pos)


def test_erase_removes_and_returns_next_index():
    array = DynamicArray(["a", "b", "c"])
    pos = array.erase(1)
    assert pos == 1
    assert array[pos] == "c"
    assert list(array) == ["a", "c"]


def test_erase_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().erase(0)


@pytest.mark.parametrize("pos", [-1, 3])
def test_erase_out_of_range(pos):
    with pytest.raises(IndexError):
        DynamicArray([1, 2, 3]).erase(pos)


def test_getitem_and_setitem():
    array = DynamicArray([1, 2, 3])
    array[1] = 20
    assert array[1] == 20
    assert array[0] == 1


@pytest.mark.parametrize("index", [-1, 3])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        DynamicArray([1, 2, 3])[index]


def test_setitem_out_of_range():
    array = DynamicArray([1])
    with pytest.raises(IndexError):
        array[1] = 5
    assert list(array) == [1]
    assert len(array) == 1


def test_equality_compares_elements_not_capacity():
    assert DynamicArray([1, 2], capacity=10) == DynamicArray([1, 2])
    assert not DynamicArray([1, 2]) == DynamicArray([1, 3])
    assert not DynamicArray([1, 2]) == DynamicArray([1, 2, 3])


def test_capacity_smaller_than_items_rejected():
    with pytest.raises(ValueError):
        DynamicArray([1, 2, 3], capacity=1)