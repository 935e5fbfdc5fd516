# algokit

A small collection of classic algorithms in plain Python with no third-party
dependencies: comparison sorts, a three-way merge sort, radix sort, a sorted
linked list, infix-to-postfix conversion and a handful of numeric routines.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.sorting`

Each function accepts any iterable and returns a new list. The input is left
unchanged.

- `bubble_sort(items)`: stops early once a pass makes no swap
- `insertion_sort(items)`
- `selection_sort(items)`
- `heap_sort(items)`: binary max-heap
- `quicksort(items)`: partitions around the last element
- `merge_sort(items)`: top-down
- `sort_descending(items)`: largest first
- `sort012(items)`: single-pass sort for values in {0, 1, 2}. It raises
  `ValueError` for any other value.

```python
from algokit.sorting import heap_sort, sort012

heap_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
sort012([0, 1, 1, 0, 1, 2, 1, 2, 0])    # [0, 0, 0, 1, 1, 1, 1, 2, 2]
```

### `algokit.three_way_merge`

- `three_way_merge_sort(items)`: merge sort that splits into three parts
- `three_way_merge_sort_desc(items)`: the same, largest first
- `count_words(path)`: the number of whitespace-separated tokens in a text file

The module also provides a timing command. It reads the numbered data files
`File 1.txt`, `File 2.txt`, … and their already-sorted counterparts
`File 1_asc.txt`, `File 2_asc.txt`, …. Each file is a whitespace-separated
list of integers.

```
algokit-merge-timing [DIRECTORY] [--files N]
```

`DIRECTORY` defaults to the current directory. `--files` defaults to 10. For
each file the command prints the element count and three CPU times:

- the average case, which sorts `File N.txt`
- the best case, which sorts `File N_asc.txt`
- the worst case, which sorts the sorted data into descending order

If a file is missing or holds something other than integers, the command
prints an error and exits with status 1.

### `algokit.radix`

- `radix_sort(items)`: least-significant-digit radix sort of non-negative
  integers. It raises `TypeError` for non-integers and `ValueError` for
  negative values.
- `count_digits(x)`: the number of decimal digits in `x`, ignoring the sign.
  `count_digits(0)` is 0.

### `algokit.linked_list`

`SortedLinkedList` keeps its values in ascending order as they are inserted.
It can also be built from an iterable. It supports iteration and `len()`.

```python
from algokit.linked_list import SortedLinkedList

values = SortedLinkedList()
for v in (5, 10, 7, 3, 1, 9):
    values.insert(v)
list(values)   # [1, 3, 5, 7, 9, 10]
len(values)    # 6
```

### `algokit.expressions`

- `infix_to_postfix(infix)`: converts an infix expression to postfix form.
  Operators are treated as left-associative. Every other character, spaces
  included, is copied through unchanged. Parentheses are not given any
  special meaning.
- `is_operator(ch)`: whether `ch` is one of `+ - * /`
- `precedence(ch)`: 3 for `*` and `/`, 2 for `+` and `-`, and 1 otherwise

### `algokit.numeric`

- `factorial(n)`: `n!`, which is 1 for `n` below 2
- `factorial_digits(n)`: the decimal digits of `n!`, most significant first
- `fibonacci(n)`: the n-th Fibonacci number
- `fibonacci_series(count)`: the first `count` Fibonacci numbers
- `josephus(n, k)`: the 1-based position of the survivor when every k-th of
  `n` people is removed
- `hanoi_moves(count, source=1, spare=2, target=3)`: yields `(from, to)` peg
  moves that solve the Tower of Hanoi
- `bisect_sqrt(x, epsilon=1e-6)`: the square root of `x` by bisection. It
  returns the lower bound, which is within `epsilon` below the true root.
- `min_denominations(value, denominations=DENOMINATIONS)`: greedy
  change-making, largest coin first. The default denominations are
  1, 2, 5, 10, 20, 50, 100, 500 and 1000. It raises `ValueError` when exact
  change cannot be made.
- `count_digits_in_text(text)`: how many characters of `text` are the
  digits `0` to `9`

```python
from algokit.numeric import josephus, factorial, min_denominations

josephus(10, 3)          # 4
factorial(5)             # 120
min_denominations(93)    # [50, 20, 20, 2, 1]
```

## What the package does not include

The package has no search routines. Use `bisect` or `list.index` from the
standard library for lookups.