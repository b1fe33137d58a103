# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies: sorting and searching routines, a bounded array, linked lists,
stacks, queues, a priority queue, a few recursive classics and small practice
problems.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `partition` |
| `dsakit.searching` | `binary_search`, `linear_search`, `find_max`, `find_min`, `second_largest`, `third_largest` |
| `dsakit.arrays` | `FixedArray`, a capacity-bound array with `insert`, `delete` and `update` |
| `dsakit.recursion` | `factorial`, `fibonacci`, `fibonacci_iterative`, `climb_stairs` |
| `dsakit.singly_linked` | `ListNode`, `build_list`, `to_list`, `reverse_with_stack`, `reverse_recursive`, `SinglyLinkedList` |
| `dsakit.doubly_linked` | `DoublyLinkedList` |
| `dsakit.circular_linked` | `CircularLinkedList` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues` | `ArrayQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.priority` | `PriorityQueue`, `Scored`, `order_by_marks` |
| `dsakit.problems` | `running_sum`, `reverse_in_place`, `reverse_with_stack`, `reverse_string`, `RecentCounter` |
| `dsakit.text` | `count_characters`, `CharacterCounts`, `alphabetical_order` |
| `dsakit.students` | `add`, `greeting`, `Person`, `Student` |
| `dsakit.fileio` | `read_lines`, `count_lines` |
| `dsakit.cli` | `run_menu`, `main` — the interactive list menu |

Some behaviour worth knowing:

- Every sort takes any iterable and returns a new ascending list; the input is
  left untouched. `partition` is the exception: it rearranges a slice of a
  mutable sequence in place and returns the pivot's final index.
- `binary_search`, `linear_search` and the `search` methods of the linked
  lists return `None` when the value is absent. List positions are 1-based.
- `second_largest` and `third_largest` look for distinct values and raise
  `ValueError` when there are not enough of them.
- `ArrayQueue` is a linear queue: slots freed at the front are not reused until
  the queue drains completely, so it can report full while holding fewer than
  `capacity` values.
- `PriorityQueue` serves the largest priority first unless
  `largest_first=False`; items of equal priority come out in push order.
- `RecentCounter.ping(t)` counts the pings at or after `t - 3000`.
- `count_characters` counts ASCII vowels, consonants, digits and whitespace;
  punctuation and non-ASCII characters are not counted.

## Examples

```python
from dsakit.sorting import merge_sort, quick_sort
from dsakit.searching import binary_search, third_largest

merge_sort([9, 5, 1, 4, 3])                   # [1, 3, 4, 5, 9]
quick_sort([10, 7, 8, 9, 1, 5])               # [1, 5, 7, 8, 9, 10]
binary_search([2, 4, 6, 8, 10, 12, 14], 10)   # 4
third_largest([10, 25, 30, 5, 40, 15])        # 25
```

```python
from dsakit.singly_linked import SinglyLinkedList

items = SinglyLinkedList([10, 20, 30, 40])
items.insert_at(3, 25)
items.delete_at(2)
print(items)        # 10 -> 25 -> 30 -> 40 -> NULL
```

```python
from dsakit.stacks import ArrayStack

stack = ArrayStack(capacity=100)
stack.push(10)
stack.push(20)
stack.pop()         # 20
```

```python
from dsakit.priority import PriorityQueue

heap = PriorityQueue([10, 5, 30], largest_first=True)
heap.pop()          # 30
heap.peek()         # 10
```

Operations that have nothing to act on, such as popping an empty stack,
deleting past the end of a list or dequeuing from an empty queue, raise an
exception instead of printing a message.

## Command line

The package installs one command, an interactive menu over a doubly linked
list of integers:

```
dsakit
```

It offers inserting at the beginning, the end or a given position, deleting
from the beginning, the end, a position or by value, showing the list forwards
or backwards, counting nodes and searching for a value. Choose option 12 to
leave; the menu also ends at the end of input. The list lives only for the
session: nothing is saved between runs.

## Running the tests

```
pytest
```