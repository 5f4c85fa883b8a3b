# algostructs

Classic algorithms and data structures written in plain Python for study. Each
one is short enough to read in a sitting. Each one comes with tests, so you can
check how it behaves and compare it with the others.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Algorithms

- `algostructs.searching.binary_search(items, value)` searches an ascending sequence by halving it. It returns the index of `value`, or `None` if the value is absent.
- `algostructs.sorting` has three sorts, and each one sorts a mutable sequence in place:
  - `count_sort(items)` and `radix_sort(items)` accept non-negative integers only. They raise `ValueError` when a sequence of two or more items holds a negative number. Radix sort works on decimal digits, starting with the least significant.
  - `quick_sort(items)` uses the first element of each range as its pivot.
- `algostructs.rotation` rotates a mutable sequence circularly in place:
  - `left_rotate(items, positions)` and `right_rotate(items, positions)` reduce `positions` modulo the length first.
  - A negative `positions` raises `ValueError`.
- `algostructs.parentheses.parentheses_match(text)` checks that `()`, `[]` and `{}` are balanced and nested in a fixed order. Braces may hold braces or brackets. Brackets may hold brackets or parentheses. Parentheses may hold only parentheses. All other characters are ignored.
- `algostructs.pair_sum.find_pairs_with_sum(items, k)` returns every pair of positions whose values sum to `k`:
  - Each pair is a tuple with the smaller value first.
  - Pairs are listed in the order their second element is reached.
  - The result is an empty list when there are no such pairs.
- `algostructs.divide_and_conquer` has three functions:
  - `recursive_binary_search(data, target)` returns an index or `None`.
  - `merge_k_sorted(lists, recursive=True)` merges sorted lists into one sorted list. With `recursive=True` it halves the range of lists recursively. With `recursive=False` it merges neighbouring lists in pairs, round after round. It returns `None` when given no lists.
  - `matrix_multiply(matrix1, matrix2)` multiplies square matrices of equal size by splitting them into blocks recursively. The size must be a power of two, at least 2. Any other size, and any empty or mismatched matrix, raises `ValueError`.
- `algostructs.combinatorics` computes factorials and binomial coefficients several ways:
  - `factorial_recursive(n)` and `factorial_iterative(n)` compute factorials.
  - `combination_with_factorial_iteration(n, r)`, `combination_with_factorial_recursion(n, r)` and `combination_with_pascal_triangle(n, r)` compute binomial coefficients.
  - Negative `n`, or `r` outside `0..n`, raises `ValueError`.
- `algostructs.benchmarking.benchmark_function(name, func, *args)` calls `func(*args)` once. It prints the result and the elapsed time, then returns the result.

## Data structures

- `algostructs.dynamic_array.DynamicArray(items=None, capacity=None)` is a growable array:
  - Its `capacity` property doubles when the array is full. The default capacity is 5, which `DynamicArray.default_capacity()` also returns.
  - It offers `append`, `insert(item, pos)`, `erase(pos)`, indexing, `len`, iteration and equality.
  - An index outside `0 <= index < len` raises `IndexError`, and negative indices are not counted from the end.
- `algostructs.queue.Queue` is a first-in, first-out queue:
  - It offers `push`, `pop` (which returns the front element), `front`, `back`, `is_empty` and `len`.
  - Calling `pop`, `front` or `back` on an empty queue raises `IndexError`.
- `algostructs.disjoint_set.DisjointSet(n)` is union-find over `0 .. n-1` with path compression:
  - `union(a, b)` makes the root of `a`'s set the root of the merged set. It returns `False` if the two elements were already in the same set.
  - `find(x)` returns the root of the set that holds `x`.
- `algostructs.unordered_map.UnorderedMap(buckets=16)` is a hash map with separate chaining:
  - Keys must be in `range(256)`, and a key outside that range raises `ValueError`. A key is hashed modulo the bucket count.
  - It offers `insert`, `erase`, `find` (which returns `None` for a missing key), `load_factor()` and `len`.
- `algostructs.avl_tree` is a self-balancing AVL binary search tree:
  - `AVLNode` is the tree node.
  - `insert_avl(root, value)` inserts a value and returns the new root.
  - `compute_height`, `get_height` and `get_balance_factor` deal with node heights and balance.
  - `in_order(root)` is a generator of the tree's values in ascending order.
- `algostructs.rb_tree` is a red-black binary search tree:
  - `RBNode` is the tree node and `Color` is its colour.
  - `insert_rb(root, value)` inserts a value and returns the new root.
  - `get_parent`, `get_grandparent` and `get_uncle` return a node's relatives.
  - `in_order(root)` returns a list of the tree's values in ascending order.

Neither tree stores duplicate values. Inserting a value that is already present has no effect.

## Example

```python
from algostructs.avl_tree import insert_avl, in_order
from algostructs.unordered_map import UnorderedMap

root = None
for value in (30, 20, 10):
    root = insert_avl(root, value)
print(root.data)              # 20
print(list(in_order(root)))   # [10, 20, 30]

table = UnorderedMap(buckets=4)
table.insert(1, "one")
print(table.find(1))          # one
print(table.load_factor())    # 0.25
```

## Command line

This command computes the binomial coefficient C(n, r) in three ways and prints each result with the time it took. The defaults are n = 11 and r = 5:

```
algostructs-combinations
algostructs-combinations 20 10
```

## What it does not do

The trees support insertion and in-order traversal only. Nodes cannot be removed, and there is no lookup function apart from walking the nodes yourself. The package has no other commands, and nothing is saved to disk.