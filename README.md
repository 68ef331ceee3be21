# algolab

A small collection of classic data structures and algorithms. Each one can be
used as a library and as a command-line tool that reads its input from
standard input.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                   | Contents                                                              |
|--------------------------|-----------------------------------------------------------------------|
| `algolab.bst`            | `BinarySearchTree` with `insert`, `delete`, `inorder` and iteration; `run_operations` |
| `algolab.median`         | `median(values)`                                                      |
| `algolab.quicksort`      | `partition`, `quicksort`, `timed_random_sort`                         |
| `algolab.stack`          | `ArrayStack` with a fixed capacity, `StackOverflowError`, `StackUnderflowError` |
| `algolab.heapsort`       | `heapify`, `heap_sort`                                                |
| `algolab.graph`          | `Graph`, an undirected adjacency-list graph                           |
| `algolab.flow`           | `FlowGraph`, `Edge` and `max_flow` (Edmonds–Karp)                     |
| `algolab.evacuation`     | `evacuation_flow`: maximum flow from the first to the last city       |
| `algolab.airline_crews`  | `assign_crews`: maximum bipartite matching of flights to crews        |
| `algolab.stock_charts`   | `min_overlaid_charts`: fewest charts via minimum path cover           |

## Library use

```python
from algolab.bst import BinarySearchTree
from algolab.median import median
from algolab.heapsort import heap_sort
from algolab.stack import ArrayStack, StackUnderflowError

tree = BinarySearchTree([5, 3, 8, 3])   # equal keys go to the left
tree.delete(8)                          # True: one occurrence removed
print(list(tree))                       # [3, 3, 5]

print(median([3, 1, 2]))                # 2.0
print(median([4, 1, 3, 2]))             # 2.5

numbers = [4, 1, 3]
heap_sort(numbers)                      # sorts in place: [1, 3, 4]

stack = ArrayStack(capacity=2)
stack.push(4)
stack.pop()
try:
    stack.pop()
except StackUnderflowError:
    print("nothing left to pop")
```

`ArrayStack` holds at most 100 values by default; pushing beyond its capacity
raises `StackOverflowError`. Both errors are subclasses of `IndexError`.

Flow problems:

```python
from algolab.evacuation import evacuation_flow
from algolab.airline_crews import assign_crews
from algolab.stock_charts import min_overlaid_charts

# roads are (from, to, capacity) with cities numbered from 1
print(evacuation_flow(3, [(1, 2, 2), (2, 3, 1), (1, 3, 1)]))

# rows are flights, columns are crews; 1 means the crew can take the flight.
# The result holds the 1-based crew of each flight, or -1 for none.
print(assign_crews([[1, 1, 0], [0, 1, 0]]))

# one row of prices per stock
print(min_overlaid_charts([[1, 2, 3], [2, 3, 4], [0, 5, 1]]))
```

A `FlowGraph` can also be built by hand: `add_edge` stores each edge with a
zero-capacity reverse partner at the next id, and `max_flow(graph, source,
sink)` saturates the network and returns the flow value.

## Command-line tools

Each tool reads whitespace-separated numbers from standard input:

```
algolab-bst              # operations: "1 k" inserts k, "2 k" deletes k, "-1" ends
algolab-median           # a count, then that many numbers; prints them sorted and the median
algolab-quicksort        # an array size; sorts random numbers and reports the CPU time
algolab-stack            # pops an empty stack to show underflow handling
algolab-heapsort         # a count, then that many numbers; prints them before and after sorting
algolab-graph            # prints the adjacency lists of a sample graph (no input)
algolab-evacuation       # city count, road count, then "from to capacity" per road
algolab-airline-crews    # flight count, crew count, then the 0/1 matrix
algolab-stock-charts     # stock count, point count, then the prices
```

Example:

```
printf '1 5 1 3 1 8 2 3 -1\n' | algolab-bst
```

prints `5 8 `.

When the input is short or malformed, the tools print an error on standard
error and exit with status 1. `algolab-bst` is the exception for an unknown
operation code: it prints `Invalid Operator!` and exits with status 0 without
printing the tree. `algolab-stock-charts` prints `0` when either count is zero
and rejects more than 1000 stocks or points.