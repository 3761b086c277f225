# algos

A small library of classic algorithms and data structures in plain Python, with
no dependencies outside the standard library.

- **Sorting** (`algos.sort`): `insert_sort`, `merge_sort`, `quick_sort`, `heap_sort`,
  `count_sort` and `radix_sort`.
- **Stack** (`algos.stack`): `Stack`, a stack with a fixed capacity.
- **Binary search tree** (`algos.bst`): `Node`, `bst_insert`, `bst_search`,
  `bst_delete`, `minimum`, `in_order_successor`, and the walks `walk_inorder`,
  `walk_preorder` and `walk_postorder`.
- **Red-black tree** (`algos.rbt`): `rbt_insert`, `rbt_search` and `rbt_delete`,
  working on the same `Node`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting

`insert_sort`, `merge_sort`, `quick_sort` and `heap_sort` sort a list in place and
return `None`. `merge_sort` is stable.

```python
from algos.sort import heap_sort, merge_sort, quick_sort

data = [3, 2, 8, 1, 7, 6, 4, 5]
merge_sort(data)            # data is now [1, 2, 3, 4, 5, 6, 7, 8]

values = [5, 4, 3, 2, 1]
quick_sort(values, 1, 3)    # sorts indices 1..3 inclusive: [5, 2, 3, 4, 1]
quick_sort(values)          # lo defaults to 0, hi to the last index
```

`quick_sort` uses Hoare partitioning; it does nothing when a bound is negative or
`lo >= hi`.

`count_sort` and `radix_sort` return a new sorted list and leave their input alone.
Both take `k`, the largest value in the input:

```python
from algos.sort import count_sort, radix_sort

count_sort([3, 2, 8, 1, 7, 6, 4, 5], 8)          # [1, 2, 3, 4, 5, 6, 7, 8]
radix_sort([30, 242, 8, 112, 13, 57, 1, 88], 242)  # [1, 8, 13, 30, 57, 88, 112, 242]
```

`count_sort` raises `ValueError` for a value outside `0..k`; `radix_sort` raises
`ValueError` for a negative value and makes one decimal-digit pass per digit of `k`.

## Stack

```python
from algos.stack import Stack

stack = Stack(2)
stack.push("a")     # True
stack.push("b")     # True
stack.push("c")     # False: the stack is full and "c" is ignored
len(stack)          # 2
stack.pop()         # "b"
stack.pop()         # "a"
stack.pop()         # None: nothing left
stack.empty()       # True
```

A negative capacity raises `ValueError`.

## Binary search tree

`Node` is a dataclass with `data`, `color`, `left`, `right` and `parent`. The
functions take the root node and return the root of the tree afterwards; equal
keys go to the right.

```python
from algos.bst import Node, bst_delete, bst_insert, bst_search, walk_inorder

root = Node(3)
for value in (2, 8, 1, 7, 6, 4, 5):
    root = bst_insert(root, Node(value))

list(walk_inorder(root))        # [1, 2, 3, 4, 5, 6, 7, 8]
node = bst_search(root, 7)      # the node holding 7, or None
root = bst_delete(root, Node(3))
list(walk_inorder(root))        # [1, 2, 4, 5, 6, 7, 8]
```

- The walks are generators yielding each node's `data`.
- `minimum(node)` returns the leftmost node of a subtree (or `None` for `None`).
- `in_order_successor(root, node)` returns the next node in order, or `None` for
  the last one.
- `bst_delete(root, node)` removes the node whose data equals `node.data`. A node
  with two children takes its in-order successor's data, and the successor is
  unlinked instead. A key that is not in the tree leaves it unchanged.

## Red-black tree

The red-black functions use the same `Node`; `algos.bst.BLACK` (0) and
`algos.bst.RED` (1) are the colours. Always keep the returned root, since
rotations can change it.

```python
from algos.bst import Node, walk_inorder
from algos.rbt import rbt_delete, rbt_insert, rbt_search

root = None
for value in (3, 2, 8, 1, 7, 6, 4, 5):
    root = rbt_insert(root, Node(value))

list(walk_inorder(root))        # [1, 2, 3, 4, 5, 6, 7, 8]
node = rbt_search(root, 6)
root = rbt_delete(root, node)
list(walk_inorder(root))        # [1, 2, 3, 4, 5, 7, 8]
```

`rbt_delete` takes the node object itself and raises `ValueError` if it does not
belong to the tree at `root`.

## What this package does not do

It is a library only: there is no command-line tool.