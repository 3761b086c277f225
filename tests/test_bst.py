from algos.bst import (
    Node,
    bst_delete,
    bst_insert,
    bst_search,
    in_order_successor,
    minimum,
    walk_inorder,
    walk_postorder,
    walk_preorder,
)
from algos.stack import Stack

SLICE = [3, 2, 8, 1, 7, 6, 4, 5]
EXPECTED = [1, 2, 3, 4, 5, 6, 7, 8]


def build(values):
    root = Node(values[0])
    for value in values[1:]:
        root = bst_insert(root, Node(value))
    return root


def test_source_case_iterative_inorder_with_stack():
    root = build(SLICE)
    stack = Stack(8)
    current = root
    result = []
    while current is not None or not stack.empty():
        while current is not None:
            stack.push(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    assert result == EXPECTED


def test_walk_inorder():
    assert list(walk_inorder(build(SLICE))) == EXPECTED


def test_walk_preorder():
    assert list(walk_preorder(build(SLICE))) == [3, 2, 1, 8, 7, 6, 4, 5]


def test_walk_postorder():
    assert list(walk_postorder(build(SLICE))) == [1, 2, 5, 4, 6, 7, 8, 3]


def test_walk_empty_tree():
    assert list(walk_inorder(None)) == []


def test_insert_into_empty_tree_returns_node():
    node = Node(4)
    assert bst_insert(None, node) is node


def test_insert_sets_parent():
    root = build([3, 2])
    assert root.left.parent is root


def test_search_found_and_missing():
    root = build(SLICE)
    assert bst_search(root, 6).data == 6
    assert bst_search(root, 42) is None


def test_minimum():
    root = build(SLICE)
    assert minimum(root).data == 1
    assert minimum(root.right).data == 4
    assert minimum(None) is None


def test_in_order_successor_walks_every_node():
    root = build(SLICE)
    node = minimum(root)
    seen = []
    while node is not None:
        seen.append(node.data)
        node = in_order_successor(root, node)
    assert seen == EXPECTED


def test_in_order_successor_of_last_is_none():
    root = build(SLICE)
    assert in_order_successor(root, bst_search(root, 8)) is None


def test_delete_leaf():
    root = build(SLICE)
    root = bst_delete(root, Node(5))
    assert list(walk_inorder(root)) == [1, 2, 3, 4, 6, 7, 8]


def test_delete_node_with_one_child():
    root = build(SLICE)
    root = bst_delete(root, Node(2))
    assert list(walk_inorder(root)) == [1, 3, 4, 5, 6, 7, 8]
    assert root.left.data == 1
    assert root.left.parent is root


def test_delete_node_with_two_children():
    root = build(SLICE)
    root = bst_delete(root, Node(3))
    assert root.data == 4
    assert list(walk_inorder(root)) == [1, 2, 4, 5, 6, 7, 8]


def test_delete_root_with_single_child_returns_new_root():
    root = build([1, 2, 3])
    new_root = bst_delete(root, Node(1))
    assert new_root.data == 2
    assert new_root.parent is None
    assert list(walk_inorder(new_root)) == [2, 3]


def test_delete_missing_leaves_tree():
    root = build(SLICE)
    assert bst_delete(root, Node(99)) is root
    assert list(walk_inorder(root)) == EXPECTED


def test_delete_everything():
    root = build(SLICE)
    for value in SLICE:
        root = bst_delete(root, Node(value))
    assert root is None