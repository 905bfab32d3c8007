import pytest

from fenix.klist import HListHead, HListNode, LinkedList, ListError, ListNode


def make_nodes(*owners):
    return [ListNode(o) for o in owners]


def test_new_list_is_empty():
    lst = LinkedList()
    assert lst.empty()
    assert len(lst) == 0
    assert list(lst) == []
    assert not lst.is_singular()


def test_add_is_stack_order():
    lst = LinkedList()
    for node in make_nodes("a", "b", "c"):
        lst.add(node)
    assert list(lst) == ["c", "b", "a"]
    assert lst.first() == "c"
    assert lst.last() == "a"


def test_add_tail_is_queue_order():
    lst = LinkedList()
    for node in make_nodes("a", "b", "c"):
        lst.add_tail(node)
    assert list(lst) == ["a", "b", "c"]
    assert list(reversed(lst)) == ["c", "b", "a"]
    assert len(lst) == 3


def test_first_last_on_empty_raise():
    lst = LinkedList()
    with pytest.raises(ListError):
        lst.first()
    with pytest.raises(ListError):
        lst.last()


def test_singular_and_is_last():
    lst = LinkedList()
    a, b = make_nodes("a", "b")
    lst.add_tail(a)
    assert lst.is_singular()
    assert lst.is_last(a)
    lst.add_tail(b)
    assert not lst.is_singular()
    assert not lst.is_last(a)
    assert lst.is_last(b)


def test_unlink_removes_and_deletes():
    lst = LinkedList()
    a, b, c = make_nodes("a", "b", "c")
    for n in (a, b, c):
        lst.add_tail(n)
    b.unlink()
    assert list(lst) == ["a", "c"]
    assert not b.is_linked()
    with pytest.raises(ListError):
        b.unlink()


def test_unlinked_node_can_be_added_again():
    lst = LinkedList()
    a, b = make_nodes("a", "b")
    lst.add_tail(a)
    lst.add_tail(b)
    a.unlink()
    lst.add_tail(a)
    assert list(lst) == ["b", "a"]


def test_unlink_init_resets_node():
    lst = LinkedList()
    a, b = make_nodes("a", "b")
    lst.add_tail(a)
    lst.add_tail(b)
    a.unlink_init()
    assert list(lst) == ["b"]
    assert not a.is_linked()
    assert a.next is a and a.prev is a
    a.unlink_init()
    assert a.next is a


def test_adding_linked_node_raises():
    lst = LinkedList()
    other = LinkedList()
    a, b = make_nodes("a", "b")
    lst.add_tail(a)
    lst.add_tail(b)
    with pytest.raises(ListError):
        other.add(a)
    with pytest.raises(ListError):
        other.add_tail(b)


def test_replace_puts_new_in_place():
    lst = LinkedList()
    a, b, c = make_nodes("a", "b", "c")
    for n in (a, b, c):
        lst.add_tail(n)
    x = ListNode("x")
    b.replace(x)
    assert list(lst) == ["a", "x", "c"]
    assert list(reversed(lst)) == ["c", "x", "a"]


def test_replace_init_resets_old():
    lst = LinkedList()
    a, b = make_nodes("a", "b")
    lst.add_tail(a)
    lst.add_tail(b)
    x = ListNode("x")
    a.replace_init(x)
    assert list(lst) == ["x", "b"]
    assert not a.is_linked()
    assert a.next is a


def test_move_between_lists():
    src = LinkedList()
    dst = LinkedList()
    a, b, c = make_nodes("a", "b", "c")
    for n in (a, b, c):
        src.add_tail(n)
    d = ListNode("d")
    dst.add_tail(d)
    dst.move(b)
    dst.move_tail(a)
    assert list(src) == ["c"]
    assert list(dst) == ["b", "d", "a"]


def test_move_tail_within_list_rotates():
    lst = LinkedList()
    a, b, c = make_nodes("a", "b", "c")
    for n in (a, b, c):
        lst.add_tail(n)
    lst.move_tail(a)
    assert list(lst) == ["b", "c", "a"]


def test_move_of_deleted_node_raises():
    lst = LinkedList()
    a = ListNode("a")
    lst.add_tail(a)
    a.unlink()
    with pytest.raises(ListError):
        lst.move(a)


def test_nodes_iteration_is_safe_against_removal():
    lst = LinkedList()
    nodes = make_nodes(1, 2, 3, 4)
    for n in nodes:
        lst.add_tail(n)
    for node in lst.nodes():
        if node.owner % 2 == 0:
            node.unlink()
    assert list(lst) == [1, 3]
    assert len(lst) == 2


def test_hlist_new_empty():
    head = HListHead()
    node = HListNode("a")
    assert head.empty()
    assert node.unhashed()
    assert list(head) == []


def test_hlist_add_head_order():
    head = HListHead()
    nodes = [HListNode(o) for o in ("a", "b", "c")]
    for n in nodes:
        head.add_head(n)
    assert list(head) == ["c", "b", "a"]
    assert not head.empty()
    assert all(not n.unhashed() for n in nodes)


def test_hlist_delete_middle_and_first():
    head = HListHead()
    a, b, c = (HListNode(o) for o in ("a", "b", "c"))
    for n in (a, b, c):
        head.add_head(n)
    b.delete()
    assert list(head) == ["c", "a"]
    c.delete()
    assert list(head) == ["a"]
    assert a.pprev is head
    assert not b.unhashed()
    with pytest.raises(ListError):
        b.delete()


def test_hlist_delete_init_resets():
    head = HListHead()
    a = HListNode("a")
    head.add_head(a)
    a.delete_init()
    assert head.empty()
    assert a.unhashed()
    a.delete_init()
    assert a.unhashed()


def test_hlist_add_before_and_behind():
    head = HListHead()
    a, b, c, d = (HListNode(o) for o in ("a", "b", "c", "d"))
    head.add_head(a)
    b.add_before(a)
    assert list(head) == ["b", "a"]
    c.add_behind(b)
    assert list(head) == ["b", "c", "a"]
    d.add_behind(a)
    assert list(head) == ["b", "c", "a", "d"]
    c.delete()
    assert list(head) == ["b", "a", "d"]
    assert a.pprev is b


def test_hlist_add_before_unhashed_raises():
    a = HListNode("a")
    b = HListNode("b")
    with pytest.raises(ListError):
        b.add_before(a)


def test_hlist_fake():
    a = HListNode("a")
    assert not a.is_fake()
    a.add_fake()
    assert a.is_fake()
    assert not a.unhashed()
    a.delete_init()
    assert a.unhashed()


def test_hlist_is_singular_in():
    head = HListHead()
    a, b = HListNode("a"), HListNode("b")
    head.add_head(a)
    assert a.is_singular_in(head)
    head.add_head(b)
    assert not a.is_singular_in(head)
    assert not b.is_singular_in(head)


def test_hlist_move_to():
    old = HListHead()
    new = HListHead()
    a, b = HListNode("a"), HListNode("b")
    old.add_head(a)
    old.add_head(b)
    old.move_to(new)
    assert old.empty()
    assert list(new) == ["b", "a"]
    assert b.pprev is new
    b.delete()
    assert list(new) == ["a"]


def test_hlist_move_to_empty():
    old = HListHead()
    new = HListHead()
    new.add_head(HListNode("x"))
    old.move_to(new)
    assert new.empty()
    assert old.empty()


def test_hlist_nodes_safe_against_removal():
    head = HListHead()
    for o in range(5):
        head.add_head(HListNode(o))
    for node in head.nodes():
        if node.owner in (0, 2, 4):
            node.delete()
    assert list(head) == [3, 1]