import pytest

from dsbasics.linked_lists import CircularList, DoublyLinkedList, SinglyLinkedList


def test_singly_add_tail_keeps_order():
    lst = SinglyLinkedList()
    for value in (1, 2, 3):
        lst.add_tail(value)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_singly_add_head_reverses_order():
    lst = SinglyLinkedList()
    for value in (1, 2, 3):
        lst.add_head(value)
    assert list(lst) == [3, 2, 1]


def test_singly_mixed_ends():
    lst = SinglyLinkedList()
    lst.add_head(2)
    lst.add_tail(3)
    lst.add_head(1)
    assert list(lst) == [1, 2, 3]


def test_singly_empty_and_clear():
    lst = SinglyLinkedList()
    assert lst.is_empty() is True
    lst.add_tail(1)
    assert lst.is_empty() is False
    lst.clear()
    assert lst.is_empty() is True
    assert list(lst) == []
    assert len(lst) == 0


def test_singly_add_tail_after_clear():
    lst = SinglyLinkedList()
    lst.add_tail(5)
    lst.clear()
    lst.add_tail(6)
    assert list(lst) == [6]


def test_doubly_source_sequence():
    lst = DoublyLinkedList()
    lst.insert(10, 0)
    lst.insert(20, 1)
    lst.insert(30, 1)
    lst.insert(40, 2)
    assert list(lst) == [10, 30, 40, 20]
    assert len(lst) == 4


def test_doubly_insert_positions_match_list_insert():
    lst = DoublyLinkedList()
    expected = []
    for value, position in [(1, 0), (2, 0), (3, 2), (4, 1), (5, 4), (6, 2)]:
        lst.insert(value, position)
        expected.insert(position, value)
        assert list(lst) == expected


def test_doubly_reverse_matches_forward():
    lst = DoublyLinkedList()
    for position, value in enumerate((7, 8, 9)):
        lst.insert(value, position)
    lst.insert(6, 1)
    assert list(reversed(lst)) == list(reversed(list(lst)))


@pytest.mark.parametrize("position", [-1, 2])
def test_doubly_invalid_position(position):
    lst = DoublyLinkedList()
    lst.insert(1, 0)
    with pytest.raises(IndexError):
        lst.insert(2, position)
    assert list(lst) == [1]


def test_circular_source_example():
    ring = CircularList()
    for value in (1, 2, 3):
        ring.append(value)
    ring.set_head(2)
    assert len(ring) == 3
    assert ring.format() == "2->3->1"


def test_circular_rotation_invariant():
    values = [4, 5, 6, 7, 8]
    for k in range(1, len(values) + 1):
        ring = CircularList()
        for value in values:
            ring.append(value)
        ring.set_head(k)
        assert list(ring) == values[k - 1:] + values[: k - 1]


def test_circular_append_after_rotation_goes_before_head():
    ring = CircularList()
    for value in (1, 2, 3):
        ring.append(value)
    ring.set_head(3)
    ring.append(4)
    assert list(ring) == [3, 1, 2, 4]


@pytest.mark.parametrize("position", [0, 4, -2])
def test_circular_invalid_position(position):
    ring = CircularList()
    for value in (1, 2, 3):
        ring.append(value)
    with pytest.raises(IndexError):
        ring.set_head(position)


def test_circular_empty():
    ring = CircularList()
    assert list(ring) == []
    with pytest.raises(IndexError):
        ring.set_head(1)
    with pytest.raises(ValueError):
        ring.format()