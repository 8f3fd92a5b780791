import pytest

from algokit.linked_list import LinkedList


def test_construct_and_iterate():
    values = [3, 1, 2]
    lst = LinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_empty_length():
    assert len(LinkedList()) == 0


def test_prepend_and_append():
    lst = LinkedList()
    lst.append(2)
    lst.prepend(1)
    lst.append(3)
    assert list(lst) == [1, 2, 3]


def test_print(capsys):
    LinkedList([1, 2, 3]).print()
    assert capsys.readouterr().out == "1 2 3\n"


def test_print_empty(capsys):
    LinkedList().print()
    assert capsys.readouterr().out == ""


def test_insert_middle_and_front():
    lst = LinkedList([1, 3])
    lst.insert(2, 1)
    lst.insert(0, 0)
    assert list(lst) == [0, 1, 2, 3]


def test_insert_past_end_appends():
    lst = LinkedList([1, 2])
    lst.insert(9, 100)
    assert list(lst) == [1, 2, 9]


def test_insert_negative_rejected():
    with pytest.raises(IndexError):
        LinkedList([1]).insert(5, -1)


def test_remove():
    lst = LinkedList([10, 20, 30])
    assert lst.remove(1) == 20
    assert list(lst) == [10, 30]
    assert lst.remove(0) == 10
    assert list(lst) == [30]


def test_remove_out_of_range_is_noop():
    lst = LinkedList([1, 2])
    assert lst.remove(5) is None
    assert list(lst) == [1, 2]
    assert LinkedList().remove(0) is None


def test_find():
    lst = LinkedList([4, 5, 4])
    assert lst.find(4) == 0
    assert lst.find(5) == 1
    assert lst.find(7) == -1


def test_concat_moves_items():
    a = LinkedList([1, 2])
    b = LinkedList([3, 4])
    a.concat(b)
    assert list(a) == [1, 2, 3, 4]
    assert len(b) == 0


def test_concat_self_rejected():
    a = LinkedList([1])
    with pytest.raises(ValueError):
        a.concat(a)


@pytest.mark.parametrize("values", [[], [1], [5, 3, 9, 1, 3], [2, -1, 0]])
def test_sort(values):
    lst = LinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)


def test_reverse_twice_is_identity():
    values = [1, 2, 3, 4]
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.reverse()
    assert list(lst) == values


def test_split_middle():
    values = [1, 2, 3, 4, 5]
    lst = LinkedList(values)
    tail = lst.split(2)
    assert list(lst) == values[:2]
    assert list(tail) == values[2:]


def test_split_zero_moves_all():
    values = [1, 2]
    lst = LinkedList(values)
    tail = lst.split(0)
    assert list(tail) == values
    assert len(lst) == 0


def test_split_past_end_returns_empty():
    values = [1, 2]
    lst = LinkedList(values)
    tail = lst.split(2)
    assert len(tail) == 0
    assert list(lst) == values


def test_holds_arbitrary_values():
    lst = LinkedList()
    lst.prepend("b")
    lst.prepend({"k": 1})
    assert list(lst) == [{"k": 1}, "b"]