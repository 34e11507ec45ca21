# joywork

Classic data structures, two algorithm exercises and helpers for compact
binary serialization, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module               | Contents |
|----------------------|----------|
| `joywork.vector`     | `DynamicArray`: a growable array with an explicit `capacity` that grows to `capacity * 2 + 1` when full |
| `joywork.bst`        | `BinarySearchTree`: unbalanced search tree with `insert`, `remove`, `find_min`, `find_max`, `in`, traversals and `format_tree` |
| `joywork.avl`        | `AVLTree`: self-balancing search tree with `insert`, `height`, `max_depth_diff`, traversals and `format_tree` |
| `joywork.splay`      | `SplayTree`: top-down splay tree; `contains`, `find_min`, `find_max`, `insert` and `remove` move the accessed element to the root |
| `joywork.leetcode`   | `two_sum`, `add_two_numbers` and the `ListNode` linked list they work on |
| `joywork.generic`    | `compare` (three-way comparison from a "less" function) and `top` (last element, or a default) |
| `joywork.byteswap`   | `byte_swap2`, `byte_swap4`, `byte_swap8` and `swap_value` for reversing byte order |
| `joywork.streams`    | `OutputMemoryStream` / `InputMemoryStream` for raw bytes and little-endian 32-bit integers; `StreamOverflowError` |
| `joywork.reflection` | `PrimitiveType`, `MemberVariable` and `DataType` for describing the members of a record |
| `joywork.gameplay`   | `GameObject` with unique network ids (counting from 1) and `LinkingContext`, a two-way id/object map |
| `joywork.textquery`  | `TextGraph`: records the lines (counted from 0) on which each whitespace-separated word occurs |

All trees order elements with `<` and ignore duplicate insertions. Removing
an absent element does nothing. `find_min`, `find_max` (and `SplayTree.root`)
raise `ValueError` on an empty tree.

## Examples

### Trees

```python
from joywork.bst import BinarySearchTree
from joywork.avl import AVLTree
from joywork.splay import SplayTree

tree = BinarySearchTree([6, 4, 1, 3, 5, 8, 7, 10])
tree.insert(9)
tree.remove(4)
print(list(tree.inorder()))          # [1, 3, 5, 6, 7, 8, 9, 10]
print(7 in tree, tree.find_min(), tree.find_max())

avl = AVLTree([3, 2, 1, 4, 5, 6, 7])
print(avl.height(), avl.max_depth_diff())
print(avl.format_tree())

splay = SplayTree([12, 5, 25, 20, 30])   # built without splaying
splay.contains(20)                        # 20 is splayed to the root
print(splay.root())                       # 20
```

`copy()` on every tree returns an independent deep copy.

### Dynamic array

```python
from joywork.vector import DynamicArray

values = DynamicArray(10)
for n in range(20):
    values.push_back(n + 100)
print(len(values), values.capacity, values[0], values.back())
print(values.pop_back())     # 119
```

`pop_back`, `back` and `front` raise `IndexError` on an empty array;
`resize` fills new positions with `None`.

### Algorithm exercises

```python
from joywork.leetcode import ListNode, two_sum, add_two_numbers

print(two_sum([2, 7, 11, 15], 9))          # [0, 1]
total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
print(list(total))                          # [7, 0, 8]
```

### Binary serialization

```python
from joywork.streams import OutputMemoryStream, InputMemoryStream
from joywork.byteswap import byte_swap4, swap_value

out = OutputMemoryStream()
out.write_uint32(0x01FA9E80)
out.write_int32(-5)

reader = InputMemoryStream(out.getvalue())
print(hex(reader.read_uint32()), reader.read_int32(), reader.remaining)
print(hex(byte_swap4(0x01FA9E80)))          # 0x809efa01
print(swap_value(1, "h"))                   # 256
```

Reading past the end raises `StreamOverflowError`.

### Text indexing

```python
import io
from joywork.textquery import TextGraph

graph = TextGraph(io.StringIO("the quick fox\nthe lazy dog\n"))
print(graph.line_numbers("the"))            # [0, 1]
print(graph.words())
```

## What it does not do

- There is no command-line program; everything is used as a library.
- `AVLTree` supports insertion only, not removal.
- There is no networking: the streams build and read byte buffers, but
  nothing here opens sockets or sends them anywhere.
- `TextGraph` only indexes words by line; it has no query language for
  combining searches.