from aoc2025.util.linked_list import LinkedList, LinkedListNode


def test_empty_list_iterates_nothing():
    assert list(LinkedList()) == []


def test_add_node_appends_in_order():
    ll = LinkedList()
    for value in ("a", "b", "c"):
        ll.add_node(LinkedListNode(value))
    assert list(ll) == ["a", "b", "c"]


def test_add_head_prepends():
    ll = LinkedList()
    for value in (1, 2, 3):
        ll.add_head(LinkedListNode(value))
    assert list(ll) == [3, 2, 1]


def test_add_head_discards_nodes_chain():
    ll = LinkedList()
    ll.add_node(LinkedListNode(1))
    node = LinkedListNode(0, LinkedListNode(99))
    ll.add_head(node)
    assert list(ll) == [0, 1]


def test_node_append_walks_to_end():
    node = LinkedListNode(1)
    node.append(2)
    node.append(3)
    ll = LinkedList(node)
    assert list(ll) == [1, 2, 3]


def test_has_children_is_true_only_for_last_node():
    node = LinkedListNode("x")
    assert node.has_children() is True
    node.append("y")
    assert node.has_children() is False
    assert node.next.has_children() is True


def test_equality_compares_chains():
    first = LinkedList()
    second = LinkedList()
    for value in (5, 6):
        first.add_node(LinkedListNode(value))
        second.add_node(LinkedListNode(value))
    assert first == second
    second.add_node(LinkedListNode(7))
    assert not first == second