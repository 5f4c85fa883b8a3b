import pytest

from algostructs.rotation import left_rotate, right_rotate

BASE = [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("positions", range(0, 20))
def test_left_then_right_restores(positions):
    data = list(BASE)
    left_rotate(data, positions)
    right_rotate(data, positions)
    assert data == BASE


@pytest.mark.parametrize("positions", range(0, 20))
def test_rotation_keeps_elements(positions):
    data = list(BASE)
    left_rotate(data, positions)
    assert sorted(data) == BASE
    right_rotate(data, positions)
    assert sorted(data) == BASE


@pytest.mark.parametrize("rotate", [left_rotate, right_rotate])
def test_full_turn_is_identity(rotate):
    data = list(BASE)
    rotate(data, len(BASE) * 3)
    assert data == BASE


@pytest.mark.parametrize("positions", range(1, 7))
def test_left_equals_complementary_right(positions):
    left = list(BASE)
    right = list(BASE)
    left_rotate(left, positions)
    right_rotate(right, len(BASE) - positions)
    assert left == right


def test_left_by_one_moves_front_to_back():
    data = list(BASE)
    left_rotate(data, 1)
    assert data == BASE[1:] + BASE[:1]


def test_right_by_one_moves_back_to_front():
    data = list(BASE)
    right_rotate(data, 1)
    assert data == BASE[-1:] + BASE[:-1]


def test_rotates_strings():
    words = ["apple", "banana", "cherry"]
    left_rotate(words, 4)
    assert words == ["banana", "cherry", "apple"]


@pytest.mark.parametrize("rotate", [left_rotate, right_rotate])
def test_empty_sequence_unchanged(rotate):
    data = []
    rotate(data, 3)
    assert data == []


@pytest.mark.parametrize("rotate", [left_rotate, right_rotate])
def test_negative_positions_rejected(rotate):
    with pytest.raises(ValueError):
        rotate(list(BASE), -1)