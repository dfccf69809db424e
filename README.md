# oslab

A small collection of data structures and simulations for studying
operating systems.

- `oslab.rbtree`: `RBTree`, a red-black tree ordered by a three-way
  `compare` function, with an optional `destroy` callback for removed items.
  Equal keys are kept as separate nodes. The tree tracks its smallest node
  (`minimal()`) and offers `first()`, `is_empty()`, `find()`, `successor()`,
  `apply()` with a `Traversal` order (`PREORDER`, `INORDER`, `POSTORDER`),
  `insert()`, `delete(node, keep)`, the invariant checks `check_order()` and
  `check_black_height()`, a sideways text rendering `format()`, and `clear()`.
  Iterating over a tree yields the stored items in order. Nodes are `Node`
  objects coloured with `Color.RED` or `Color.BLACK`.
- `oslab.data`: `Record`, an integer `key` with an optional `payload`, and
  the helpers `compare_records`, `format_key` (decimal key) and
  `format_char` (the ASCII character of the key).
- `oslab.example`: `run_example()` inserts the letters `REDSOXCUBT` into a
  tree, deletes `O`, then removes the minimum until the tree is empty, and
  returns the rendering of every step.
- `oslab.proc`: `Process`, with a `pid`, a `vruntime` and a
  `residual_duration`. `run_one_tick()` prints its state, consumes one tick of
  work and adds one to the virtual runtime; it raises `RuntimeError` when the
  process has already terminated. `terminate()` and `is_terminated()` are
  provided as well.
- `oslab.slice`: `Slice(size, empty_value=0)`, a fixed-capacity FIFO queue
  guarded by a lock. `push()` returns `False` and drops the value when the
  queue is full; `pop()` returns `empty_value` when it is empty.
  `exercise(queue, threads=5)` starts threads that each push `10` and pop once,
  and returns what they popped.
- `oslab.histogram`: `sample()` sums twelve steps of -1 or +1, `collect(n)`
  counts `n` samples in 25 buckets for -12..12, and `format_histogram()`
  draws them as `value: ***` lines.

## Installation

```
pip install .
```

## Usage

```python
from oslab.rbtree import RBTree
from oslab.data import Record, compare_records

tree = RBTree(compare_records, lambda record: None)
for key in (5, 1, 3):
    tree.insert(Record(key))

print([record.key for record in tree])   # [1, 3, 5]
print(tree.minimal().data.key)           # 1
```

```python
from oslab.slice import Slice

queue = Slice(3, -1)
queue.push(7)
print(queue.pop())   # 7
print(queue.pop())   # -1, the queue is empty
```

## Commands

```
oslab-rb-example                     # print every step of the letter insertion and deletion walk-through
oslab-slice [--threads N] [--size N] # push and pop from several threads, print the popped values, fail if the queue is not empty
oslab-histogram [N] [--seed S]       # print the histogram of N samples (N is read from stdin if not given)
```

## What it does not do

There is no scheduler: `Process` models a single process and the tree can
order items by key, but nothing picks processes from the tree and runs them
tick by tick. There is no network server or client either; `Slice` is only
the queue.

## Tests

```
pip install .[test]
pytest
```