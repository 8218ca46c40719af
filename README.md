# dslab

A collection of classic algorithm exercises, usable both as a library and
from the command line.

## What is inside

| Module | What it does |
| --- | --- |
| `dslab.randomtree` | `TreeNode` and `generate_random_tree`, random tree shapes stored in an array in preorder, with `arity_string` and `format_tree` |
| `dslab.basics` | `classify_triangle`, `standard_deviation`, `sorted_line_numbers` |
| `dslab.partitions` | `restricted_growth_functions`, `partition_value`, `best_partitions`: the set partitions whose per-block XORs have the largest AND |
| `dslab.subarray` | `max_subarrays`, the maximum contiguous sum and its shortest spans |
| `dslab.fillable` | `FillableArray`, an integer array with constant-time `fill` |
| `dslab.hypergeom` | `binomial` and three ways of computing an upper-tail hypergeometric p-value |
| `dslab.products` | `compare_products`, which of two lists of unsigned numbers has the larger product |
| `dslab.arrange` | `arrange`, separating equal neighbouring words by swaps |
| `dslab.primepairs` | `find_prime_factor`, `binary_search`, `prime_pairs_available` |
| `dslab.serializability` | `Operation`, `parse_transaction`, `build_schedule`, `precedence_matrix`, `has_cycle`, `is_conflict_serializable` |

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no runtime dependencies.

## Library use

```python
import random
from dslab.randomtree import generate_random_tree, arity_string, format_tree

nodes = generate_random_tree(5, random.Random(1))
print(arity_string(nodes))     # child count of each node, in preorder
print(format_tree(nodes))      # node count, then "value left right" per node
```

```python
from dslab.subarray import max_subarrays
from dslab.fillable import FillableArray
from dslab.products import compare_products
from dslab.arrange import arrange

print(max_subarrays([-2, 1, -3, 4, -1, 2, 1, -5, 4]))   # (6, [(3, 6)])

array = FillableArray([1, 2, 3])
array.fill(9)
array.write(1, 4)
print(list(array))                                    # [9, 4, 9]

print(compare_products([2, 3], [6]))                  # L1 L2
print(arrange(["ram", "ram", "sita"]))                # ['ram', 'sita', 'ram']
```

```python
from dslab.hypergeom import p_value_recurrence, p_value_factorial

# probability of at least 2 marked items in 5 draws from 20, 6 of them marked
print(p_value_factorial(2, 5, 6, 20))
print(p_value_recurrence(2, 5, 6, 20))
```

## Command line

Each exercise has its own command:

```
dslab-random-tree 10 --seed 3          # random tree shape as a node table
dslab-random-tree 10 --linenum         # child references shifted by two
dslab-triangle                         # reads three "x y" vertices from stdin
dslab-stddev                           # reads integers ending with 0 from stdin
dslab-partitions                       # reads one line of integers from stdin
dslab-subarray                         # reads one line of integers from stdin
dslab-fillable                         # first line: values; then +, = and @ commands
dslab-hypergeom --method binomial      # reads "threshold draws successes population"
dslab-products                         # reads two lines of integers from stdin
dslab-arrange ram ram sita             # words as arguments
dslab-primepairs                       # reads a count, coefficients, then a set line
dslab-serializability t1.txt t2.txt    # one file per transaction
```

`dslab-fillable` understands `+ index value` (write), `= index` (read) and
`@ value` (fill); any other line ends the session. `dslab-hypergeom` accepts
`--method recurrence` (the default), `factorial` or `binomial`, and prints the
p-value with the time the computation took.

A transaction file for `dslab-serializability` starts with the number of
operations, followed by one line per operation holding its serial number in
the merged schedule and the operation, such as `3 read(A)`, `4 write(A)` or
`5 commit`.

## What the package does not do

The package has no binary search tree or self-balancing tree type: the only
tree code is the random shape generator in `dslab.randomtree`, which does not
keep values in search order and offers no insertion, deletion or lookup. There
are also no exercises on clock-hand angles or on recovering crossover points
between strings.

## Running the tests

```
pip install ".[test]"
pytest
```