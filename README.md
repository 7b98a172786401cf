# dsbasics

Small, readable implementations of classic data structures and a few
stack-based algorithms, with no dependencies beyond the standard library.

## Installation

    pip install .

## What is inside

### `dsbasics.arrays`

- `insert_value(values, capacity, value, position)` inserts `value` at
  `position` into a fixed-capacity array and returns a list of exactly
  `capacity` slots, with unused slots set to zero. It raises
  `OverflowError` when the array is already full, `IndexError` for a
  position outside `0..len(values)` and `ValueError` for a non-positive
  capacity.
- `DynamicArray(capacity=2)` doubles its capacity whenever `append` finds it
  full. `get(index)` raises `IndexError` outside the stored elements;
  `capacity()` returns the reserved slots; `info()` returns a text summary.
  It supports `len()` and iteration.

### `dsbasics.linked_lists`

- `SinglyLinkedList`: `add_head`, `add_tail`, `is_empty`, `clear`,
  iteration and `len()`.
- `DoublyLinkedList`: `insert(value, position)` places `value` at index
  `position` (raising `IndexError` outside `0..len`); it iterates forwards
  and, with `reversed()`, backwards.
- `CircularList`: `append` adds a node just before the head,
  `set_head(position)` moves the head to a 1-based position (raising
  `IndexError` otherwise), and `format()` renders the ring as `1->2->3`
  (raising `ValueError` when empty).

### `dsbasics.stack_algorithms`

- `is_balanced(text)` checks the brackets `()[]{}`. A closing bracket with
  nothing open fails at once; a closing bracket that does not match the
  innermost open one is skipped; the text is balanced when nothing is left
  open.
- `factorial(n)` returns `n!` (`ValueError` for negative `n`), and
  `format_factorial(n)` shows it as a product, e.g. `3! = 3 * 2 * 1 = 6`.
- `evaluate_rpn(expression)` evaluates a whitespace-separated postfix
  expression of integers with `+ - * /`; division truncates toward zero.
  Malformed input, a missing operand, leftover operands or division by zero
  raise `ExpressionError` (a `ValueError`).

### `dsbasics.queues`

- `Queue`: unbounded FIFO with `enqueue`, `dequeue`, `peek`, `is_empty`.
- `CircularQueue(capacity)`: fixed-size ring buffer with `enqueue`,
  `dequeue`, `peek`, `is_empty`, `is_full`.
- `PriorityQueue(capacity, ascending=True)`: `enqueue(task, priority)` and
  `dequeue()`, which returns the name of the task with the lowest priority
  number (or the highest when `ascending` is false); ties go to the earliest
  task.
- `Deque`: `add_front`, `add_rear`, `remove_front`, `remove_rear`,
  `peek_front`, `peek_rear`, `is_empty`.

Taking from an empty queue raises `QueueEmptyError` (an `IndexError`);
adding to a full bounded queue raises `QueueFullError` (an
`OverflowError`). All queues support `len()`, and all but `PriorityQueue`
iterate from front to back.

## Examples

```python
from dsbasics.stack_algorithms import evaluate_rpn, is_balanced
from dsbasics.queues import CircularQueue, PriorityQueue

evaluate_rpn("2 10 4 * / 6 +")   # 6
is_balanced("(a+b*[c-{d/e}])")   # True

cq = CircularQueue(3)
for item in (1, 2, 3):
    cq.enqueue(item)
cq.dequeue()                     # 1
cq.enqueue(4)
list(cq)                         # [2, 3, 4]

pq = PriorityQueue(5, ascending=True)
pq.enqueue("Task A", 3)
pq.enqueue("Task D", 1)
pq.dequeue()                     # "Task D"
```

## Command line

    dsbasics

prints a short greeting. The command does nothing else; the data structures
and algorithms are used from Python.

## Running the tests

    pip install .[test]
    pytest