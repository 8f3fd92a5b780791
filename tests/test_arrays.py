import pytest

from algokit.arrays import (
    LUT_SIZE,
    apply_lut,
    create_array,
    insertion_sort,
    reverse_matrix,
    strndup,
)


def _compare(a, b):
    return (a > b) - (a < b)


def test_reverse_matrix_example():
    matrix = [["a", "b"], ["c"]]
    reverse_matrix(matrix)
    assert matrix == [["c"], ["b", "a"]]


def test_reverse_matrix_twice_restores():
    original = [["1", "2", "3"], ["4"], ["5", "6"]]
    matrix = [row[:] for row in original]
    reverse_matrix(matrix)
    reverse_matrix(matrix)
    assert matrix == original


def test_reverse_matrix_flattened_is_reversed():
    original = [["a", "b", "c"], ["d", "e"], ["f"]]
    matrix = [row[:] for row in original]
    reverse_matrix(matrix)
    flat = [x for row in matrix for x in row]
    assert flat == [x for row in original for x in row][::-1]


def test_reverse_matrix_empty():
    matrix = []
    reverse_matrix(matrix)
    assert matrix == []


def test_insertion_sort_numbers():
    items = [5, 3, 9, 1, 3, 0, -2]
    expected = sorted(items)
    insertion_sort(items, _compare)
    assert items == expected


def test_insertion_sort_is_stable():
    items = [("b", 1), ("a", 2), ("b", 0), ("a", 1)]
    expected = sorted(items, key=lambda pair: pair[0])
    insertion_sort(items, lambda x, y: _compare(x[0], y[0]))
    assert items == expected


def test_insertion_sort_descending_comparator():
    items = [2, 8, 4]
    insertion_sort(items, lambda a, b: _compare(b, a))
    assert items == sorted(items, reverse=True)


def test_insertion_sort_empty():
    items = []
    insertion_sort(items, _compare)
    assert items == []


def test_apply_lut_identity_unchanged():
    matrix = [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [252, 253, 254, 255]]
    original = [row[:] for row in matrix]
    apply_lut(matrix, list(range(LUT_SIZE)))
    assert matrix == original


def test_apply_lut_inverting_twice_restores():
    matrix = [[0, 10, 20, 30], [40, 50, 60, 70], [80, 90, 100, 110], [120, 130, 140, 255]]
    original = [row[:] for row in matrix]
    invert = [255 - i for i in range(LUT_SIZE)]
    apply_lut(matrix, invert)
    assert matrix != original
    assert matrix[0][0] == invert[0]
    apply_lut(matrix, invert)
    assert matrix == original


def test_apply_lut_constant_table():
    matrix = [[1, 2, 3, 4] for _ in range(4)]
    apply_lut(matrix, [7] * LUT_SIZE)
    assert matrix == [[7] * 4 for _ in range(4)]


def test_apply_lut_wrong_table_size():
    with pytest.raises(ValueError):
        apply_lut([[0]], [0] * 10)


def test_apply_lut_non_byte_value():
    with pytest.raises(ValueError):
        apply_lut([[256]], list(range(LUT_SIZE)))


def test_create_array_size():
    array = create_array(4)
    assert len(array) == 4
    assert all(value == 0 for value in array)


@pytest.mark.parametrize("size", [0, -3])
def test_create_array_rejects_non_positive(size):
    with pytest.raises(ValueError):
        create_array(size)


def test_strndup_truncates():
    assert strndup("hello", 3) == "hel"


@pytest.mark.parametrize("text", ["", "a", "hello world"])
def test_strndup_whole_when_n_covers(text):
    assert strndup(text, len(text) + 1) == text
    assert strndup(text, len(text)) == text
    assert strndup(text, len(text) + 10) == text


def test_strndup_zero_is_empty():
    assert strndup("abc", 0) == ""


def test_strndup_negative_rejected():
    with pytest.raises(ValueError):
        strndup("abc", -1)