import pytest

from algokata.linked_lists import (
    ListNode,
    RandomNode,
    copy_random_list,
    detect_cycle,
    from_values,
    remove_nth_from_end,
    to_values,
)


def _nodes(head):
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5], [5, 5, -1]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_drops_that_element(n):
    values = [10, 20, 30, 40, 50]
    result = to_values(remove_nth_from_end(from_values(values), n))
    assert len(result) == len(values) - 1
    assert values[-n] not in result
    assert result == sorted(result)
    assert set(result) | {values[-n]} == set(values)


def test_remove_first_node_returns_second():
    values = [1, 2, 3]
    head = from_values(values)
    second = head.next
    assert remove_nth_from_end(head, len(values)) is second


def test_remove_only_node():
    assert remove_nth_from_end(ListNode(1), 1) is None


def test_remove_keeps_head_when_not_first():
    head = from_values([1, 2, 3])
    assert remove_nth_from_end(head, 1) is head


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_rejects_bad_n(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2, 3]), n)


def test_remove_from_empty_list_raises():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)


def _random_list(values, randoms):
    nodes = [RandomNode(v) for v in values]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    for node, target in zip(nodes, randoms):
        node.random = None if target is None else nodes[target]
    return nodes


@pytest.mark.parametrize(
    "values,randoms",
    [
        ([7, 13, 11, 10, 1], [None, 0, 4, 2, 0]),
        ([1, 2], [1, 1]),
        ([3, 3, 3], [None, 0, None]),
    ],
)
def test_copy_random_list_preserves_structure(values, randoms):
    originals = _random_list(values, randoms)
    copied = _nodes(copy_random_list(originals[0]))
    assert [node.val for node in copied] == values
    assert all(c is not o for c, o in zip(copied, originals))
    index = {id(node): i for i, node in enumerate(copied)}
    assert [None if c.random is None else index[id(c.random)] for c in copied] == randoms


def test_copy_does_not_touch_original():
    originals = _random_list([4, 5], [1, 0])
    copy_random_list(originals[0])
    assert originals[0].random is originals[1]
    assert originals[1].random is originals[0]


def test_copy_of_empty_list_is_none():
    assert copy_random_list(None) is None


@pytest.mark.parametrize(
    "values,pos",
    [([3, 2, 0, -4], 1), ([1, 2], 0), ([1], 0), ([1, 2, 3, 4, 5], 4)],
)
def test_detect_cycle_finds_entry(values, pos):
    nodes = _nodes(from_values(values))
    nodes[-1].next = nodes[pos]
    assert detect_cycle(nodes[0]) is nodes[pos]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_detect_cycle_on_acyclic_list(values):
    assert detect_cycle(from_values(values)) is None