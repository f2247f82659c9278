import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from treelab.avl import AVLTree
from treelab.avl_checks import DebugCheckError, check_balance, check_heights


DEMO_KEYS = [37, 19, 51, 55, 4, 11, 20, 2, 3, 5, 6, 7]


@pytest.fixture
def demo_tree():
    tree = AVLTree()
    for key in DEMO_KEYS:
        tree.insert(key, str(key))
    return tree


def test_new_tree_is_empty():
    tree = AVLTree()
    assert tree.empty() is True
    assert list(tree.items()) == []


def test_not_empty_after_insertions(demo_tree):
    assert demo_tree.empty() is False


def test_items_sorted(demo_tree):
    assert list(demo_tree.items()) == [(k, str(k)) for k in sorted(DEMO_KEYS)]


def test_find_returns_data(demo_tree):
    assert demo_tree.find(51) == "51"


def test_remove_returns_data(demo_tree):
    assert demo_tree.remove(11) == "11"
    assert demo_tree.remove(51) == "51"
    assert demo_tree.remove(19) == "19"
    assert demo_tree.remove(6) == "6"
    remaining = sorted(set(DEMO_KEYS) - {11, 51, 19, 6})
    assert [k for k, _ in demo_tree.items()] == remaining


def test_find_missing_raises(demo_tree):
    demo_tree.remove(51)
    with pytest.raises(KeyError):
        demo_tree.find(51)


def test_remove_missing_raises(demo_tree):
    with pytest.raises(KeyError):
        demo_tree.remove(99)


def test_duplicate_insert_raises(demo_tree):
    with pytest.raises(ValueError):
        demo_tree.insert(37, "again")
    assert demo_tree.find(37) == "37"


def test_contains(demo_tree):
    assert demo_tree.contains(20) is True
    assert demo_tree.contains(21) is False
    assert 55 in demo_tree
    assert 56 not in demo_tree


def test_clear(demo_tree):
    demo_tree.clear()
    assert demo_tree.empty() is True
    assert 37 not in demo_tree


def test_ascending_inserts_rotate():
    tree = AVLTree()
    for key, data in [(1, "a"), (2, "b"), (3, "c")]:
        tree.insert(key, data)
    assert tree.root.key == 2
    assert tree.format_vertical() == (
        '. [2: "b"] Bal: 0 Ht: 1\n'
        ' |- [1: "a"] Bal: 0 Ht: 0\n'
        ' |- [3: "c"] Bal: 0 Ht: 0\n'
    )


def test_format_in_order():
    tree = AVLTree()
    for key, data in [(2, "b"), (1, "a"), (3, "c")]:
        tree.insert(key, data)
    assert tree.format_in_order() == " [1 : a] [2 : b] [3 : c] "


def test_print_functions_write_formats(demo_tree):
    in_order = io.StringIO()
    demo_tree.print_in_order(in_order)
    assert in_order.getvalue() == demo_tree.format_in_order()
    vertical = io.StringIO()
    demo_tree.print_vertical(vertical)
    assert vertical.getvalue() == demo_tree.format_vertical()


def test_empty_tree_formats():
    tree = AVLTree()
    assert tree.format_in_order() == " "
    assert tree.format_vertical() == ". []\n"


def test_remove_root_with_two_children():
    tree = AVLTree()
    for key in [2, 1, 3]:
        tree.insert(key, str(key))
    assert tree.remove(2) == "2"
    assert tree.root.key == 1
    assert tree.root.right.key == 3
    assert tree.run_debugging_checks() is True


def test_debugging_checks_detect_corruption(demo_tree):
    demo_tree.root.height += 5
    with pytest.raises(DebugCheckError):
        demo_tree.run_debugging_checks()


def test_extended_sequence():
    tree = AVLTree()
    for i in range(10, 901):
        tree.insert(i, str(i))
    expected = set(range(10, 901))
    for i in range(10, 901, 7):
        tree.remove(i)
        expected.discard(i)
    for i in range(900, 9, -3):
        if i in tree:
            tree.remove(i)
            expected.discard(i)
    for i in range(10, 900, 2):
        for k in (i, i + 1, 900 - i + 10):
            if k not in tree:
                tree.insert(k, str(k))
                expected.add(k)
    for i in range(10, 901, 7):
        for k in (i, 900 - i + 10):
            if k in tree:
                tree.remove(k)
                expected.discard(k)
    assert [k for k, _ in tree.items()] == sorted(expected)
    assert check_heights(tree.root) and check_balance(tree.root)


@settings(max_examples=60, deadline=None)
@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50)), max_size=80))
def test_matches_dict_model(operations):
    tree = AVLTree()
    model = {}
    for is_insert, key in operations:
        if is_insert:
            if key in model:
                with pytest.raises(ValueError):
                    tree.insert(key, key * 2)
            else:
                tree.insert(key, key * 2)
                model[key] = key * 2
        elif key in model:
            assert tree.remove(key) == model.pop(key)
        else:
            with pytest.raises(KeyError):
                tree.remove(key)
    assert list(tree.items()) == sorted(model.items())
    assert tree.empty() == (not model)
    assert check_balance(tree.root)