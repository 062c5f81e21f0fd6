# shopalgos

A handful of small, dependency-free algorithms for everyday shop and workplace
data. Requires Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `shopalgos.anagrams`

- `word_grouping(words)` groups words made of the same letters, ignoring case.
  Groups come out in the order their first word was seen, and each word keeps
  its spelling and position within its group. A word holding anything other
  than the letters a to z (after lower-casing) raises `ValueError`.
- `find_group(groups, word)` returns the first group containing `word` exactly,
  or `None`.

### `shopalgos.meetings`

- `overlap(start_a, start_b, end_a, end_b)` returns the shared span of
  `[start_a, end_a]` and `[start_b, end_b]` as a `(start, end)` tuple, or
  `None`. Spans that only touch at an end do not overlap.
- `overlapping_meetings(meetings_a, meetings_b)` takes two lists of
  `(start, end)` pairs and returns every overlap between a meeting of the first
  and a meeting of the second, in the order the pairs are compared.

### `shopalgos.maxstack`

- `MaxStack` is a stack of integers whose largest value is known in constant
  time.
  - `push(value)` adds a value.
  - `pop()` removes and returns the top value, or returns `None` if the stack
    is empty.
  - `max_value()` returns the largest value on the stack; it raises
    `IndexError` if the stack is empty.
  - `len(stack)` gives the number of values held.

### `shopalgos.price_tree`

- `Node(val, left=None, right=None)` is a binary search tree node. Its
  `insert(value)` places values greater than a node to its right and all others
  to its left.
- `build_tree(prices)` builds a tree with the first price as the root; an empty
  input raises `ValueError`.
- `products_in_range(root, low, high)` returns the values between `low` and
  `high`, both included, in pre-order (node, left, right), without visiting
  subtrees that cannot hold a value in range. `root` may be `None`.

### `shopalgos.suggestions`

- `product_suggestions(product_prices, amount)` returns `(price, partner)`
  tuples whose sum is `amount`. A pair is reported when its second price is
  reached; the partner is an earlier price that has not already completed a
  pair.

### `shopalgos.busy_time`

- `longest_period(working_slots)` returns the length of the longest run of
  consecutive slot numbers (0 for no slots).
- `longest_busy_time(working_slots)` takes one list of slots per employee and
  returns the index of the first employee with the longest run; no schedules at
  all raises `ValueError`.

### `shopalgos.popularity`

- `popularity_analysis(scores)` returns `True` if the scores never go down or
  never go up, and `False` if they fluctuate. An empty sequence raises
  `ValueError`.

## Example

```python
from shopalgos.anagrams import find_group, word_grouping
from shopalgos.maxstack import MaxStack
from shopalgos.price_tree import build_tree, products_in_range
from shopalgos.suggestions import product_suggestions

groups = word_grouping(["The", "teh", "het", "apple", "appel"])
print(find_group(groups, "teh"))    # ['The', 'teh', 'het']

stack = MaxStack()
for price in (55, 80, 120, 99):
    stack.push(price)
print(stack.max_value())            # 120

root = build_tree([9, 6, 14, 20, 1, 30, 8, 17, 5])
print(products_in_range(root, 7, 20))  # [9, 8, 14, 20, 17]

print(product_suggestions([11, 30, 55, 34, 45, 10, 19, 20, 60, 5, 23], 50))
# [(20, 30), (5, 45)]
```

## What it does not do

This is a library only: it has no command-line program, and it does not read
or store data anywhere. Callers pass in their own lists of words, meetings,
prices, slots and scores.

## Running the tests

```
pip install ".[test]"
pytest
```