# dstructs

A collection of classic data structures with the operations of their
textbook abstract types: stacks, queues, a bounded binary min-heap, an
open-addressing hash table, an insertion-ordered set, a binary search tree,
general and binary trees, and a directed graph kept in an adjacency matrix.
Where it makes sense they also support `len()`, iteration, `in`, `==` and
`str()`.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is included

| Module                   | Contents                                                       |
|--------------------------|----------------------------------------------------------------|
| `dstructs.stack`         | `LinkedStack`, `MultipleStack` (a fixed number of stacks)      |
| `dstructs.queues`        | `LinkedQueue` (unbounded), `ArrayQueue` (bounded circular buffer) |
| `dstructs.priorityqueue` | `PriorityQueue` (bounded binary min-heap), `heapsort`          |
| `dstructs.hashtable`     | `HashTable` with linear probing, `string_hash`                 |
| `dstructs.linkedset`     | `LinkedSet`, a set kept in insertion order                     |
| `dstructs.bst`           | `BinarySearchTree`, `BSTNode`                                  |
| `dstructs.tree`          | `Tree`, the abstract ordered tree with `children`, `depth`, `width` |
| `dstructs.linkedtree`    | `LinkedTree`, `TreeNode` (first-child / next-sibling links)    |
| `dstructs.listtree`      | `ListTree` (child lists in a fixed table of integer slots)     |
| `dstructs.bintree`       | `BinaryTree`, `BinTreeNode`                                    |
| `dstructs.graph`         | `Graph`, the abstract directed graph with `arcs`, `dfs`, `bfs`; `Arc` |
| `dstructs.matgraph`      | `MatrixGraph`, a `Graph` stored in an adjacency matrix         |

## Examples

Stacks and queues:

```python
from dstructs.stack import LinkedStack
from dstructs.queues import ArrayQueue

stack = LinkedStack([1, 2])
stack.push(1, unique=True)   # skipped, 1 is already on the stack
print(stack.top())           # 2
print(list(stack))           # [2, 1], top first

queue = ArrayQueue(capacity=10)
for value in range(3):
    queue.enqueue(value)
print(queue.top())           # 0
print(queue.dequeue())       # 0
```

A priority queue and heapsort:

```python
from dstructs.priorityqueue import PriorityQueue, heapsort

heap = PriorityQueue()
for value in (10, 5, 2, 3, 4):
    heap.insert(value)
print(heap.min())            # 2
heap.delete_min()
print(heap.min())            # 3
print(heapsort([9, 4, 7]))   # [4, 7, 9]
```

A hash table with open addressing. String keys are hashed with
`string_hash`; other keys with Python's `hash`:

```python
from dstructs.hashtable import HashTable

table = HashTable(divisor=10)
table.insert("firstkey", 10)
table.insert("firstkey", 99)  # ignored, the key is already present
table.modify("firstkey", 20)
print(table.retrieve("firstkey"), "firstkey" in table)  # 20 True
table.resize()                # doubles the buckets and reinserts every pair
print(table.divisor())        # 20
```

Sets:

```python
from dstructs.linkedset import LinkedSet

a = LinkedSet(range(5))
b = LinkedSet(range(3, 8))
print(a.union(b), a.intersection(b), a.difference(b))
```

A binary search tree:

```python
from dstructs.bst import BinarySearchTree

tree = BinarySearchTree()
for key in (10, 20, 15, 5, 4, 2, 22):
    tree.insert(key, key)
tree.erase(20)
print(list(tree.inorder()))          # [2, 4, 5, 10, 15, 22]
print(tree.successor(tree.search(10)).key)  # 15
```

General trees:

```python
from dstructs.linkedtree import LinkedTree
from dstructs.listtree import ListTree

linked = LinkedTree()
linked.insert_root("a")
linked.insert_first_child(linked.root(), "c")
linked.insert_first_child(linked.root(), "b")
print(list(linked.bfs()))            # ['a', 'b', 'c']

table_tree = ListTree(capacity=10)
table_tree.insert_root("a")
table_tree.insert_first_child(0, "b")
table_tree.insert_next_sibling(1, "c")
print(table_tree.depth(), table_tree.width())  # 1 2
```

A binary tree:

```python
from dstructs.bintree import BinaryTree

tree = BinaryTree()
tree.insert_root(10)
tree.insert_left(tree.root(), 20)
print(tree)                  # [10, [20, NIL, NIL ], NIL ]
print(tree.depth())          # 1
```

A graph stored as an adjacency matrix:

```python
from dstructs.matgraph import MatrixGraph

graph = MatrixGraph(4)
a, b, c = graph.add_node(), graph.add_node(), graph.add_node()
graph.write_label(a, "a")
graph.add_arc(a, b, 10)
graph.add_arc(b, c, 5)
print(graph.has_path(a, c), graph.find_path(a, c))  # True [0, 1, 2]
print(list(graph.bfs(a)), graph.out_degree(a))      # [0, 1, 2] 1
```

## Errors

Some operations on an empty structure quietly do nothing and return `None`:
`LinkedStack.pop`, `LinkedQueue.dequeue` and `ArrayQueue.dequeue`. Likewise,
enqueueing onto a full `ArrayQueue`, inserting into a full `HashTable` and
adding children to a full `ListTree` are ignored. Other operations raise:
`top()` of an empty stack or queue and `min()` / `delete_min()` of an empty
`PriorityQueue` raise `IndexError`, as do inserting into a full
`PriorityQueue` and adding a node to a full `MatrixGraph`;
`HashTable.retrieve` and `HashTable.modify` raise `KeyError` for a missing
key; `MatrixGraph` raises `ValueError` for unknown nodes and `KeyError` for
missing arcs.

## What is not included

There is no general list type here: no position-based linked or array list
and no sorted list. `Graph` is abstract and `MatrixGraph` is its only
implementation. The structures live in memory only; there is no
command-line tool and nothing is saved to disk.