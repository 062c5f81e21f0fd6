import pytest

from shopalgos.price_tree import Node, build_tree, products_in_range

PRICES = [9, 6, 14, 20, 1, 30, 8, 17, 5]


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def test_build_tree_is_ordered():
    root = build_tree(PRICES)
    assert root.val == PRICES[0]
    assert _inorder(root) == sorted(PRICES)


def test_source_example_order():
    root = build_tree(PRICES)
    assert products_in_range(root, 7, 20) == [9, 8, 14, 20, 17]


@pytest.mark.parametrize("low,high", [(7, 20), (0, 100), (6, 6), (21, 29), (30, 30)])
def test_range_contains_exactly_matching_values(low, high):
    root = build_tree(PRICES)
    found = products_in_range(root, low, high)
    assert sorted(found) == sorted(p for p in PRICES if low <= p <= high)


def test_duplicates_go_left():
    root = Node(5)
    root.insert(5)
    assert root.left == Node(5)
    assert root.right is None
    assert products_in_range(root, 5, 5) == [5, 5]


def test_empty_prices_raise():
    with pytest.raises(ValueError):
        build_tree([])


def test_no_root():
    assert products_in_range(None, 0, 10) == []