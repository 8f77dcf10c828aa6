import pytest

from aesdkit.tailq import TailQ


def test_construct_keeps_order():
    queue = TailQ([1, 2, 3])
    assert list(queue) == [1, 2, 3]
    assert queue.first().value == 1
    assert queue.last().value == 3


def test_empty_queue():
    queue = TailQ()
    assert queue.is_empty()
    assert queue.first() is None
    assert queue.last() is None
    assert len(queue) == 0


def test_insert_head_and_tail():
    queue = TailQ()
    queue.insert_tail("b")
    queue.insert_head("a")
    queue.insert_tail("c")
    assert list(queue) == ["a", "b", "c"]
    assert queue.last().value == "c"


def test_insert_after_last_moves_tail():
    queue = TailQ(["a"])
    new = queue.insert_after(queue.last(), "b")
    assert queue.last() is new
    assert list(queue) == ["a", "b"]


def test_insert_before_first_moves_head():
    queue = TailQ(["b"])
    new = queue.insert_before(queue.first(), "a")
    assert queue.first() is new
    assert list(queue) == ["a", "b"]


def test_insert_in_middle():
    queue = TailQ(["a", "d"])
    queue.insert_after(queue.first(), "b")
    queue.insert_before(queue.last(), "c")
    assert list(queue) == ["a", "b", "c", "d"]
    assert list(reversed(queue)) == ["d", "c", "b", "a"]


def test_remove_updates_ends():
    queue = TailQ(["a", "b", "c"])
    assert queue.remove(queue.last()) == "c"
    assert queue.last().value == "b"
    assert queue.remove(queue.first()) == "a"
    assert queue.first() is queue.last()
    assert queue.remove(queue.first()) == "b"
    assert queue.is_empty()
    assert queue.last() is None


def test_remove_foreign_node_rejected():
    left = TailQ(["a"])
    right = TailQ(["b"])
    with pytest.raises(ValueError):
        left.remove(right.first())


def test_reversed_allows_removal():
    queue = TailQ(["a", "b", "c"])
    seen = []
    for value in reversed(queue):
        seen.append(value)
        queue.remove(queue.last())
    assert seen == ["c", "b", "a"]
    assert queue.is_empty()


def test_concat_moves_everything():
    left = TailQ(["a"])
    right = TailQ(["b", "c"])
    left.concat(right)
    assert list(left) == ["a", "b", "c"]
    assert list(reversed(left)) == ["c", "b", "a"]
    assert right.is_empty()
    assert right.last() is None
    assert left.remove(left.last()) == "c"


def test_concat_into_empty_and_with_self():
    left = TailQ()
    right = TailQ(["x"])
    left.concat(right)
    assert list(left) == ["x"]
    with pytest.raises(ValueError):
        left.concat(left)


def test_swap_exchanges_contents():
    left = TailQ(["a"])
    right = TailQ(["b", "c"])
    left.swap(right)
    assert list(left) == ["b", "c"]
    assert list(right) == ["a"]
    assert left.last().value == "c"
    assert right.remove(right.first()) == "a"


def test_swap_with_empty():
    left = TailQ()
    right = TailQ(["a"])
    left.swap(right)
    assert list(left) == ["a"]
    assert right.is_empty()
    assert right.last() is None


def test_len_matches_values():
    values = list(range(5))
    assert len(TailQ(values)) == len(values)