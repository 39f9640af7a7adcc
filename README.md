# dsakit

Small, readable implementations of classic data structures and algorithms,
with no dependencies outside the standard library.

## Installation

```
pip install dsakit
```

The `test` extra installs pytest and hypothesis for running the test suite:

```
pip install "dsakit[test]"
```

## Modules

### `dsakit.arrays`

Helpers that treat a Python list as a simple array.

- `append_item(items, item)` adds to the end.
- `insert_at(items, item, position)` inserts at a zero-based position; the
  position may equal the length, which appends. Any other out-of-range
  position raises `IndexError`.
- `remove_last(items)` removes and returns the last item; `IndexError` if empty.
- `remove_nth(items, position)` and `update_nth(items, position, item)` use
  one-based positions and raise `IndexError` when out of range.
- `reverse_in_place(items)` and `exchange_sort(items)` (ascending, by pairwise
  exchanges) change the list in place.
- `linear_search(items, key)` returns the first matching index, or `None`.
- `format_array`, `format_reverse` and `format_matrix` render values separated
  by single spaces, the matrix as one line per row.

### `dsakit.linked_list`

`LinkedList` (built from `ListNode` objects) takes an optional iterable of
initial items and offers `push_front`, `append` and in-place `reverse`. It
supports iteration, `len()`, and `str()`, which joins the values with spaces.

### `dsakit.stack`

- `ArrayStack(capacity=101)`: bounded; `push` raises `StackFullError` when full.
  Iterates bottom to top.
- `LinkedStack()`: unbounded. Iterates top to bottom.

Both have `push`, `pop`, `top`, `is_empty` and `len()`; `pop` and `top` on an
empty stack raise `StackEmptyError` (a subclass of `IndexError`).
`reverse_string(text)` reverses a string by way of a stack.

### `dsakit.expressions`

- `is_balanced(expression)` checks that `()`, `{}` and `[]` are properly
  matched; other characters are ignored. `are_pair(opening, closing)` tests a
  single pair.
- `evaluate_postfix(expression)` evaluates non-negative integer operands with
  `+ - * /`. Spaces and commas separate tokens. Division truncates toward
  zero. Too few operands, or an empty expression, raise `ValueError`.
- `is_operator(char)` and `perform_operation(operator, left, right)` are the
  building blocks; an unknown operator raises `ValueError`.

### `dsakit.bst`

`BinarySearchTree` keeps duplicates, placing values less than or equal to a
node in its left subtree. It provides `insert`, `in`, `delete` (removes one
occurrence; a node with two children takes the largest value of its left
subtree; absent values are ignored), `minimum` and `maximum` (`ValueError` on
an empty tree), `height` (-1 when empty), `is_balanced` (compares the heights
of the root's two subtrees), the traversals `inorder`, `preorder`,
`postorder` and `level_order` (each returning a list), ascending iteration
and `len()`.

Node-level functions work on `Node` objects directly: `insert_node`,
`insert_mirrored` (reversed ordering, producing a tree that is not a search
tree), `height`, `is_binary_search_tree` (checks each node against its
immediate children), and generator versions of the four traversals.

### `dsakit.queues`

- `ArrayQueue(capacity=101)`: bounded; `enqueue` raises `QueueFullError` when full.
- `LinkedQueue()`: unbounded.

Both have `enqueue`, `dequeue`, `peek`, `is_empty`, front-to-rear iteration and
`len()`; `dequeue` and `peek` on an empty queue raise `QueueEmptyError`.

### `dsakit.graph`

- `adjacency_list(vertex_count, edges)` and `adjacency_matrix(vertex_count, edges)`
  build undirected graphs; vertices outside `0..vertex_count-1` raise `IndexError`.
- `format_adjacency_list(graph)` renders lines like `0 -> 1 2`.
- `bfs(start, graph)` and `dfs(start, graph)` return the visiting order. The
  graph may be a mapping from vertex to neighbours or a list of neighbour
  lists. `dfs` uses an explicit stack, so the last-listed neighbour is
  explored first.

## Example

```python
from dsakit.bst import BinarySearchTree
from dsakit.expressions import evaluate_postfix, is_balanced
from dsakit.graph import bfs, dfs
from dsakit.stack import reverse_string

tree = BinarySearchTree([20, 10, 30, 25, 8])
tree.level_order()   # [20, 10, 30, 8, 25]
tree.inorder()       # [8, 10, 20, 25, 30]
25 in tree           # True

is_balanced("{[()]}")          # True
evaluate_postfix("2 3 * 4 +")  # 10

graph = {0: [1, 2], 1: [0, 2, 3], 2: [0, 1], 3: [1]}
bfs(0, graph)        # [0, 1, 2, 3]
dfs(0, graph)        # [0, 2, 1, 3]

reverse_string("hello")  # "olleh"
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read
input interactively; callers pass in the data and get results back.