import pytest

from dsakit.singly_linked import (
    ListNode,
    SinglyLinkedList,
    build_list,
    reverse_recursive,
    reverse_with_stack,
    to_list,
)

SAMPLES = [[], [1], [4, 3, 2, 6, 7], ["a", "b", "c"]]


@pytest.mark.parametrize("values", SAMPLES)
def test_build_and_to_list_round_trip(values):
    assert to_list(build_list(values)) == values


def test_build_list_empty_is_none():
    assert build_list([]) is None


def test_build_list_links_nodes():
    head = build_list([1, 2])
    assert head.val == 1
    assert head.next.val == 2
    assert head.next.next is None


@pytest.mark.parametrize("reverse", [reverse_with_stack, reverse_recursive])
@pytest.mark.parametrize("values", SAMPLES)
def test_reversals(reverse, values):
    assert to_list(reverse(build_list(values))) == list(reversed(values))


@pytest.mark.parametrize("reverse", [reverse_with_stack, reverse_recursive])
def test_reverse_keeps_nodes(reverse):
    head = build_list([1, 2, 3])
    originals = {id(node) for node in (head, head.next, head.next.next)}
    new_head = reverse(head)
    seen = set()
    node = new_head
    while node is not None:
        seen.add(id(node))
        node = node.next
    assert seen == originals
    assert head.next is None


def test_list_node_defaults():
    node = ListNode(5)
    assert node.val == 5 and node.next is None


def test_append_builds_in_order():
    linked = SinglyLinkedList()
    for value in [10, 20, 30, 40]:
        linked.append(value)
    assert list(linked) == [10, 20, 30, 40]
    assert len(linked) == 4


def test_positional_worked_example():
    linked = SinglyLinkedList()
    for position, value in enumerate([10, 20, 30, 40], start=1):
        linked.insert_at(position, value)
    model = [10, 20, 30, 40]
    assert list(linked) == model

    linked.insert_at(3, 25)
    model.insert(2, 25)
    assert list(linked) == model

    assert linked.delete_at(2) == 20
    model.pop(1)
    assert list(linked) == model
    assert len(linked) == len(model)


def test_insert_at_end_and_front():
    linked = SinglyLinkedList([1, 2])
    linked.insert_at(3, 3)
    linked.insert_at(1, 0)
    assert list(linked) == [0, 1, 2, 3]


@pytest.mark.parametrize("position", [0, -1, 4])
def test_insert_out_of_range(position):
    linked = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        linked.insert_at(position, 9)
    assert list(linked) == [1, 2]


def test_delete_on_empty():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at(1)


@pytest.mark.parametrize("position", [0, 3])
def test_delete_out_of_range(position):
    linked = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        linked.delete_at(position)
    assert len(linked) == 2


def test_delete_first_and_last():
    linked = SinglyLinkedList([1, 2, 3])
    assert linked.delete_at(3) == 3
    assert linked.delete_at(1) == 1
    assert list(linked) == [2]


def test_update_returns_old_value():
    linked = SinglyLinkedList([10, 20, 30, 40])
    assert linked.update_at(2, 99) == 20
    assert list(linked) == [10, 99, 30, 40]


def test_update_errors():
    with pytest.raises(IndexError):
        SinglyLinkedList().update_at(1, 5)
    with pytest.raises(IndexError):
        SinglyLinkedList([1]).update_at(2, 5)


def test_reverse_method():
    values = [4, 3, 2, 6, 7]
    linked = SinglyLinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    assert len(linked) == len(values)


def test_str_format():
    assert str(SinglyLinkedList([4, 3, 2])) == "4 -> 3 -> 2 -> NULL"
    assert str(SinglyLinkedList()) == "NULL"