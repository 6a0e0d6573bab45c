import random

import pytest

from dsalgo.binarytree import BinarySearchTree, BinaryTree, Node


def _sample_tree():
    #        1
    #     2     3
    #   4     6   7
    tree = BinaryTree()
    root = tree.root
    root.value = 1
    left = tree.insert_left(root, 2)
    tree.insert_left(left, 4)
    right = tree.insert_right(root, 3)
    tree.insert_left(right, 6)
    tree.insert_right(right, 7)
    return tree


def test_new_tree_has_zero_root():
    tree = BinaryTree()
    assert tree.root.value == 0
    assert list(tree.breadth_first()) == [0]


def test_insert_returns_child():
    tree = BinaryTree(5)
    child = tree.insert_left(tree.root, 9)
    assert tree.root.left is child
    assert child.value == 9


def test_insert_replaces_existing_child():
    tree = BinaryTree(5)
    tree.insert_right(tree.root, 1)
    tree.insert_right(tree.root, 2)
    assert tree.root.right.value == 2


def test_breadth_first():
    tree = _sample_tree()
    assert list(tree.breadth_first()) == [1, 2, 3, 4, 6, 7]


def test_depth_first_matches_pre_order():
    tree = _sample_tree()
    assert list(tree.depth_first()) == list(tree.pre_order(tree.root))


def test_traversals_visit_every_node_once():
    tree = _sample_tree()
    expected = sorted(tree.breadth_first())
    for traversal in (tree.pre_order, tree.in_order, tree.post_order):
        assert sorted(traversal(tree.root)) == expected


def test_pre_and_post_order_root_positions():
    tree = _sample_tree()
    assert list(tree.pre_order(tree.root))[0] == tree.root.value
    assert list(tree.post_order(tree.root))[-1] == tree.root.value


def test_traversals_of_empty_subtree():
    tree = _sample_tree()
    assert list(tree.in_order(None)) == []
    assert tree.sum(None) == 0
    assert tree.depth(None) == 0


def test_sum_matches_values():
    tree = _sample_tree()
    assert tree.sum(tree.root) == sum(tree.breadth_first())


def test_search():
    tree = _sample_tree()
    assert tree.search(tree.root, 1) is True
    assert tree.search(tree.root, 0) is False
    assert tree.search(tree.root, 8) is False
    assert tree.search(tree.root, 7) is True


def test_depth():
    tree = _sample_tree()
    assert tree.depth(tree.root) == 3
    assert tree.depth(tree.root.left) == tree.depth(tree.root) - 1


def test_bst_in_order_is_sorted():
    values = [8, 3, 10, 1, 6]
    bst = BinarySearchTree(values)
    assert list(bst.in_order(bst.root)) == sorted(values)


def test_bst_insert_duplicate_returns_none():
    bst = BinarySearchTree([5, 3])
    assert bst.insert(3) is None
    assert list(bst.in_order(bst.root)) == [3, 5]


def test_bst_insert_returns_new_node():
    bst = BinarySearchTree([5])
    node = bst.insert(9)
    assert isinstance(node, Node) and node.value == 9
    assert bst.root.right is node


def test_bst_find_and_contains():
    bst = BinarySearchTree([5, 3, 1, 2, 9, 10, 4, 8, 0])
    assert bst.find(4).value == 4
    assert bst.find(7) is None
    assert 10 in bst
    assert 11 not in bst


def test_bst_erase_node_with_two_children():
    values = [5, 3, 1, 2, 9, 10, 4, 8, 0]
    bst = BinarySearchTree(values)
    bst.erase(3)
    assert list(bst.in_order(bst.root)) == sorted(v for v in values if v != 3)
    assert 3 not in bst


def test_bst_erase_root_and_leaf():
    bst = BinarySearchTree([5, 9, 10])
    bst.erase(5)
    assert list(bst.in_order(bst.root)) == [9, 10]
    bst.erase(10)
    assert list(bst.in_order(bst.root)) == [9]
    bst.erase(9)
    assert bst.root is None
    assert list(bst.breadth_first()) == []


def test_bst_erase_missing_raises():
    bst = BinarySearchTree([5, 3])
    with pytest.raises(KeyError):
        bst.erase(4)
    with pytest.raises(KeyError):
        BinarySearchTree().erase(1)


def test_bst_random_erasures_keep_order():
    rng = random.Random(7)
    values = rng.sample(range(200), 60)
    bst = BinarySearchTree(values)
    remaining = set(values)
    for value in rng.sample(values, 40):
        bst.erase(value)
        remaining.discard(value)
        assert list(bst.in_order(bst.root)) == sorted(remaining)
    assert all(value in bst for value in remaining)