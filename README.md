# algobox

Classic algorithms in plain Python, using only the standard library.

## Modules

- `algobox.graphs`
  - `bfs_order(matrix, source)`: breadth-first order over a square adjacency
    matrix. Only entries equal to `1` count as edges. After the search from
    `source` it restarts from each unvisited vertex in ascending order, so
    every vertex appears once.
  - `dfs_order(adjacency, start)`: depth-first order of the vertices
    reachable from `start`. `adjacency` is a mapping or a sequence of
    neighbour lists; neighbours are explored in listed order.
  - `dijkstra(cost, source)`: shortest distances from `source` over a square
    cost matrix. Missing edges are `None` or `math.inf`; unreachable vertices
    get `math.inf`; negative costs raise `ValueError`.
- `algobox.search`
  - `linear_search(values, target)`: index of the first equal item, or `None`.
  - `binary_search(values, target)`: an index of `target` in a sorted
    sequence, or `None`.
  - `max_subarray_sum(values)`: Kadane's largest contiguous sum. The empty
    run counts, so the result is never below zero.
- `algobox.sorting`: `bubble_sort`, `insertion_sort`, `quick_sort` and
  `counting_sort`. Each returns a new ascending list; `counting_sort` accepts
  only non-negative integers and raises `ValueError` otherwise.
- `algobox.arithmetic`
  - `hcf(a, b)`: highest common factor; `0` if either argument is `0`,
    `ValueError` for negatives.
  - `fib(n)`: the `n`-th Fibonacci number (`n <= 1` is returned as is).
  - `power(x, y)`: `x ** y` by repeated squaring; a negative `y` raises
    `ValueError`.
  - `swap_with_temp(a, b)` and `swap_without_temp(a, b)`: return `(b, a)`.
  - `ascii_value(char)`: code point of a single character.
- `algobox.patterns`: `heart()`, `left_triangle()`, `right_triangle()`,
  `full_pyramid(rows)`, `inverted_left_triangle(rows)` and
  `number_pyramid(rows)`. Each returns the pattern as a list of lines.
- `algobox.greetings`: `diwali_message(now=None)` returns a dated message
  (with a banner on the 27th of any month); `greeting()` returns a fixed
  greeting.
- `algobox.bst`: `BinarySearchTree`, an unbalanced tree that puts equal
  values on the left. It supports `insert`, membership with `in`,
  `minimum` and `maximum` (both raise `ValueError` on an empty tree),
  `height` (`-1` when empty) and the traversals `inorder`, `preorder` and
  `postorder`, each returning a list. The constructor accepts an optional
  iterable of initial values.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algobox.sorting import quick_sort
from algobox.search import binary_search, max_subarray_sum
from algobox.graphs import dijkstra
from algobox.bst import BinarySearchTree
from algobox.patterns import full_pyramid

quick_sort([5, 2, 9, 1])                              # [1, 2, 5, 9]
binary_search([1, 2, 5, 9], 5)                        # 2
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])     # 6
dijkstra([[0, 4, None], [4, 0, 1], [None, 1, 0]], 0)  # [0, 4, 5]

tree = BinarySearchTree([8, 3, 10, 1, 6])
3 in tree, tree.minimum(), tree.maximum()             # (True, 1, 10)
tree.inorder()                                        # [1, 3, 6, 8, 10]

print("\n".join(full_pyramid(3)))
```

## Command line

Installing the package provides an `algobox` command with three
subcommands:

```
algobox kadane -2 1 -3 4 -1 2 1 -5 4
algobox quicksort 5 2 9 1
algobox bst
```

- `kadane` prints `Maximum Sum of Contiguous Subarray is: <sum>`.
- `quicksort` prints `Array after sorting:` followed by the sorted values.
- `bst` runs a numbered menu on standard input (insert, search, min and
  max, height, the three traversals, `8` to exit). It stops at the end of
  input; a token that is not an integer ends it with exit status 2.

Run `algobox --help` for details.

## What it does not do

The command line covers only the tree menu, the largest contiguous sum and
quicksort. The graph, searching, other sorting, arithmetic, pattern and
greeting functions are available from Python only.