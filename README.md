# algokit

A collection of small, classic algorithms and data structures for Python,
with no third-party dependencies.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.tinyprintf` | `tiny_format` and `tinyprintf`, a minimal printf supporting `%d %u %x %o %c %s %%` |
| `algokit.levenshtein` | `levenshtein`, the edit distance between two sequences (strings, lists, ...) |
| `algokit.textutils` | `strcasecmp`, `tokenize` and `fnmatch` (a glob match with `*`, `?` and `\` escapes) |
| `algokit.rotx` | `rotx_char`, `rotx` and the `algokit-rotx` command |
| `algokit.rounding` | `my_round`, rounding half away from zero at single precision |
| `algokit.freq_analysis` | `letter_frequencies`, `freq_analysis`, `print_freq_analysis` |
| `algokit.dlist` | `DList`, a sequence of non-negative integers with positional editing, split, concat and edit distance |
| `algokit.vector` | `Vector`, an integer array with an explicit `capacity` that doubles when full and halves when sparse |
| `algokit.heap` | `MaxHeap`, a binary max-heap with `add`, `pop`, `preorder` and a tracked `capacity` |
| `algokit.linked_list` | `LinkedList`, a sequence with prepend/append, insert, remove, find, concat, sort, reverse and split |
| `algokit.binary_tree` | `BinaryTree` nodes and `size`, `height`, `prefix`/`infix`/`postfix`, their `print_*` forms, `is_perfect`, `is_degenerate`, `is_full` |
| `algokit.hash_map` | `HashMap`, string keys to string values with chained buckets, and `hash_key` |
| `algokit.variant` | `Variant`, `VariantType`, `variant_display`, `variant_find`, `variant_sum` |
| `algokit.traffic_lights` | `TrafficLights`, eight on/off lights packed into one byte |
| `algokit.pairs` | `Pair`, `three_pairs_sum`, `pairs_sum` |
| `algokit.sieve` | `primes_up_to` (n at most 1000), `count_primes_below`, `print_primes`, `print_prime_count` |
| `algokit.arrays` | `reverse_matrix`, `insertion_sort`, `apply_lut`, `create_array`, `strndup` |

## Examples

```python
from algokit.tinyprintf import tiny_format
from algokit.levenshtein import levenshtein
from algokit.heap import MaxHeap
from algokit.dlist import DList

tiny_format("%s [%d] %x", "answer", 42, 255)   # 'answer [42] ff'
levenshtein("kitten", "sitting")               # 3

heap = MaxHeap()
for value in (3, 9, 1):
    heap.add(value)
heap.pop()                                     # 9

items = DList([1, 2, 3])
items.reverse()
list(items)                                    # [3, 2, 1]
```

`tinyprintf` writes the same text to standard output and returns the number
of characters written. Unknown conversions such as `%t` are copied as they
are and take no argument.

## Errors

Operations raise instead of returning status values: bad positions raise
`IndexError`, and invalid values (a negative element in a `DList`, a negative
capacity for a `Vector`, a missing `tinyprintf` argument) raise `ValueError`.
Popping an empty `MaxHeap` raises `IndexError`.

## Command line

`algokit-rotx` reads standard input, rotates ASCII letters by the given
amount (digits modulo 10, everything else unchanged) and writes the result to
standard output:

```
echo "Hello 123" | algokit-rotx 3
```

With no argument it does nothing and exits successfully. An argument that is
not a number counts as 0.