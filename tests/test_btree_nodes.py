import pytest

from hydrazine.btree_nodes import Body, Cursor, Leaf


def _filled_leaf(keys, capacity=8):
    leaf = Leaf(capacity)
    for key in keys:
        leaf.insert(key, f"v{key}")
    return leaf


def test_leaf_insert_keeps_keys_sorted():
    keys = [5, 1, 4, 2, 3]
    leaf = _filled_leaf(keys)
    assert leaf.keys == sorted(keys)
    assert leaf.values == [f"v{k}" for k in sorted(keys)]
    assert len(leaf) == len(keys)


def test_leaf_insert_reports_index_and_novelty():
    leaf = _filled_leaf([10, 30])
    index, inserted = leaf.insert(20, "twenty")
    assert inserted is True
    assert leaf.keys[index] == 20


def test_leaf_duplicate_keeps_old_value():
    leaf = _filled_leaf([1, 2, 3])
    index, inserted = leaf.insert(2, "other")
    assert inserted is False
    assert leaf.keys[index] == 2
    assert leaf.values[index] == "v2"
    assert len(leaf) == 3


def test_leaf_full_and_deficient():
    leaf = Leaf(4)
    assert leaf.deficient()
    assert not leaf.full()
    for key in range(4):
        leaf.insert(key, key)
    assert leaf.full()
    assert not leaf.deficient()


def test_leaf_rejects_tiny_capacity():
    with pytest.raises(ValueError):
        Leaf(1)


def test_leaf_split_preserves_entries_and_links():
    keys = list(range(8))
    leaf = _filled_leaf(keys)
    right = leaf.split()
    assert leaf.keys + right.keys == keys
    assert leaf.values + right.values == [f"v{k}" for k in keys]
    assert max(leaf.keys) < min(right.keys)
    assert leaf.next is right
    assert right.previous is leaf
    assert abs(len(leaf) - len(right)) <= 1


def test_leaf_split_relinks_existing_neighbour():
    first = _filled_leaf(range(6))
    third = first.split()
    second = first.split()
    assert first.next is second
    assert second.next is third
    assert third.previous is second
    assert first.keys + second.keys + third.keys == list(range(6))


def test_body_child_index_routes_separator_right():
    body = Body(1, 4)
    body.keys = [10, 20]
    assert body.child_index(5) == 0
    assert body.child_index(10) == 1
    assert body.child_index(15) == 1
    assert body.child_index(20) == 2
    assert body.child_index(99) == 2


def test_body_insert_child_places_child_after_key():
    left, middle, right = Leaf(4), Leaf(4), Leaf(4)
    body = Body(1, 4)
    body.children = [left]
    body.insert_child(0, 50, right)
    body.insert_child(0, 25, middle)
    assert body.keys == [25, 50]
    assert body.children == [left, middle, right]


def test_body_insert_child_out_of_range():
    body = Body(1, 4)
    body.children = [Leaf(4)]
    with pytest.raises(IndexError):
        body.insert_child(2, 1, Leaf(4))


def test_body_split_pushes_middle_key_up():
    body = Body(2, 5)
    keys = [10, 20, 30, 40, 50]
    children = [Leaf(4) for _ in range(6)]
    body.keys = list(keys)
    body.children = list(children)
    separator, right = body.split()
    assert body.keys + [separator] + right.keys == keys
    assert body.children + right.children == children
    assert len(body.children) == len(body.keys) + 1
    assert len(right.children) == len(right.keys) + 1
    assert right.level == body.level


def test_body_validation():
    with pytest.raises(ValueError):
        Body(0, 4)
    with pytest.raises(ValueError):
        Body(1, 2)


def test_body_full_and_deficient():
    body = Body(1, 4)
    assert body.deficient()
    body.keys = [1, 2, 3, 4]
    assert body.full()
    assert not body.deficient()


def test_cursor_walks_across_leaves():
    keys = list(range(7))
    first = _filled_leaf(keys)
    first.split()
    cursor = Cursor(first, 0)
    seen = []
    while not cursor.at_end():
        seen.append(cursor.item())
        cursor.next()
    assert seen == [(k, f"v{k}") for k in keys]


def test_cursor_end_is_past_last_leaf():
    first = _filled_leaf(range(6))
    last = first.split()
    cursor = Cursor(first, 0)
    for _ in range(6):
        cursor.next()
    assert cursor == Cursor(last, len(last))
    with pytest.raises(IndexError):
        cursor.item()


def test_cursor_previous_inverts_next():
    first = _filled_leaf(range(6))
    first.split()
    start = Cursor(first, len(first) - 1)
    moved = start.copy().next()
    assert moved != start
    assert moved.previous() == start


def test_cursor_previous_stays_at_beginning():
    leaf = _filled_leaf([1, 2])
    cursor = Cursor(leaf, 0)
    cursor.previous()
    assert cursor == Cursor(leaf, 0)
    assert cursor.item() == (1, "v1")


def test_cursor_equality_needs_same_leaf():
    a = _filled_leaf([1, 2])
    b = _filled_leaf([1, 2])
    assert Cursor(a, 1) == Cursor(a, 1)
    assert not Cursor(a, 1) == Cursor(b, 1)
    assert not Cursor(a, 0) == Cursor(a, 1)


def test_cursor_on_no_leaf():
    cursor = Cursor(None, 0)
    assert cursor.at_end()
    with pytest.raises(IndexError):
        cursor.item()
    with pytest.raises(IndexError):
        cursor.next()