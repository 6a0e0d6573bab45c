# dsalgo

Classic data structures and algorithms in plain Python, with no
third-party dependencies, plus a few small object-modelling exercises.
Each structure is kept short and readable so it can serve as a reference.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting — `dsalgo.sorting`

`sequential_sort`, `selection_sort`, `bubble_sort`, `insertion_sort`,
`merge_sort` and `quick_sort` each take any iterable of comparable values
and return a new sorted list; the input is left untouched.

```python
from dsalgo.sorting import quick_sort
quick_sort([8, 7, 2, 3, 1])   # [1, 2, 3, 7, 8]
```

## Dynamic programming — `dsalgo.dynamic`

- `fibonacci(n)` — the n-th Fibonacci number, 1 for `n <= 2`
  (`fibonacci(50)` is `12586269025`).
- `find_ways(rows, columns)` — the number of right/down paths from the
  top-left to the bottom-right cell of a grid.
- `can_accumulate(numbers, total)`, `how_accumulate(numbers, total)`,
  `optimize_accumulate(numbers, total)` — whether `total` is a sum of the
  numbers (each reusable), the first combination found, and a shortest
  combination. The last two return a list or `None`. Numbers must be
  positive, otherwise `ValueError` is raised.
- `can_generate(words, target)`, `how_many_generate(words, target)`,
  `all_combinations(words, target)` — whether `target` is a
  concatenation of the words, how many ways there are, and every way as a
  list of word lists. Empty words are ignored.

## Heap — `dsalgo.heap`

`MaxHeap(values=())` with `insert(value)` and `pop()`, which returns the
largest value and raises `IndexError` when the heap is empty. `len()`
gives the size and iteration walks the values in storage order.

## Binary trees — `dsalgo.binarytree`

- `Node(value, left, right)`.
- `BinaryTree(root_value=0)` starts with a root node at `tree.root`, and
  offers `insert_left`, `insert_right`, the generators `breadth_first`,
  `depth_first`, `pre_order(node)`, `in_order(node)` and
  `post_order(node)`, and `sum(node)`, `search(node, value)` and
  `depth(node)` (0 for an empty subtree).
- `BinarySearchTree(values=())` of distinct values: `insert(value)`
  returns the new node or `None` for a duplicate, `find(value)` returns
  the node or `None`, `erase(value)` removes a value (replacing it with
  its in-order predecessor when it has a left subtree) and raises
  `KeyError` if it is absent, and `value in tree` tests membership.

## Linked lists — `dsalgo.linkedlist`

`Monster(name, hp)` records, whose names are at most 9 characters
(`NAME_LENGTH` is 10; longer names raise `ValueError`). They are kept in
`SinglyLinkedMonsters` or `DoublyLinkedMonsters`, both with
`create(name, hp)`, `find(name)`, `delete(name)` (returns whether a
monster was removed), `clear()`, `len()` and iteration in insertion
order. The doubly linked list also supports `reversed()`.

## Stacks and queues

### `dsalgo.containers`

`LinkedStack` and `LinkedQueue` share the abstract `LinkedContainer`
interface: `insert(value)`, `erase()` (removes and returns the next
value), `peek()`, `clear()`, `clone()` (an independent copy of the same
kind), `len()` and iteration in removal order. Taking from an empty
container raises `EmptyContainerError`, a subclass of `IndexError`.

### `dsalgo.bounded`

Fixed-capacity containers, `DEFAULT_CAPACITY` being 10:

- `RingQueue(capacity)` — a circular queue that keeps one slot free, so
  it holds `capacity - 1` values.
- `FullRingQueue(capacity)` — a circular queue that uses every slot.
- `BoundedStack(capacity)` — `push` and `pop`, iterating top to bottom.

Adding to a full container raises `ContainerFullError`; removing from an
empty one raises `ContainerEmptyError`. `run_menu(container, lines, out)`
drives a container from text commands.

## Object models

- `dsalgo.text.Text` — a mutable string: `Text.blank(size)`, `assign`,
  `append`, `+`, `+=`, indexing, slicing and item assignment of a single
  character, and equality with `str` or `Text`.
- `dsalgo.date` — `Date(year=1, month=1, day=1)` with `set_date`,
  `days_until(year, month, day)`, `add_days(days)` and the `leap`
  property; it prints as `YYYY-MM-DD`. Invalid dates raise
  `InvalidDateError`. `is_leap_year(year)` and
  `days_in_month(year, month)` are available on their own.
- `dsalgo.animals` — `Animal(age=0, weight=1)` with `sound()`,
  `Cat` with a `CatBreed` and `groom()`, `Dog` with a `DogBreed` and
  `bark()`.
- `dsalgo.point.Point2D(x=0, y=0)` — `+` and `-`, in-place `increment()`
  and `decrement()`, indexing by `0`/`1` or `"x"`/`"y"`, length through
  `abs()` or `float()`, and calling: `p()` moves to the origin,
  `p(x, y)` moves to `(x, y)`.

## Students and small utilities

- `dsalgo.students` — `Student(number, name, score)` and
  `StudentRoster` with `add` (a taken number raises
  `DuplicateStudentError`), `remove(number)`, `total()`, `average()`
  (integer average), `above_average()`, `len()` and iteration in number
  order. `default_roster()` returns four sample students. Also
  `is_same_image(first, second)` (anagram test), `max_letter(text)`
  (most frequent character, earliest to reach the count on a tie) and
  `format_grid(rows, columns)` (a grid of `-1` in nested braces).
- `dsalgo.cards` — `random_digits(count, rng=None)` and
  `shuffled_deck(rng=None)`, a shuffle of `DECK` (cards 1 to 10). Pass a
  seeded `random.Random` for reproducible results.

## Command-line menus

```
dsalgo-bounded [queue|full-queue|stack] [--capacity N]
dsalgo-students
```

`dsalgo-bounded` (default kind `queue`) reads whitespace-separated
commands from standard input: `1 <value>` adds, `2` removes, `3` quits.
`dsalgo-students` starts from the default roster and accepts `1 <number>
<name> <score>` to add, `2 <number>` to remove, `3` to list, `4` for the
total and average, `5` for students at or above average and `6` to quit.
Both also stop at the end of input.

## Limits

The student roster lives only in memory: nothing is saved between runs
of `dsalgo-students`. The package has no graphical interface.