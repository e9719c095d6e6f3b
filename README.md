# hydrazine

A small collection of general-purpose building blocks:

- **JSON values** (`hydrazine.json_values`). `Value`, `Number`, `String`,
  `Array`, `DenseArray` and `Object`, with `as_integer`, `as_real`,
  `as_number`, `as_string`, `as_array`, `as_dense_array`, `as_object`,
  `as_boolean` and `is_null`. Asking a value for a kind it does not hold
  raises `JsonError`. An `Object` keeps its keys in sorted order.
- **Parser** (`hydrazine.json_parser`). `parse(text)` reads the first value in
  the text; `Parser` reads values one after another. The dialect is lenient: it
  accepts `#` line comments, bare identifiers as keys and values, and `True` and
  `False` as well as `true` and `false`. An array made up only of integers comes
  back as a compact `DenseArray`. Malformed input and duplicate keys raise
  `ParseError`, which carries the line number and the text that follows.
- **Emitter** (`hydrazine.json_emitter`). `Emitter(use_tabs, indent_size)`
  writes values as indented text with `emit_pretty(output, value)` or returns
  it with `to_string(value)`. Reals are written with six significant digits;
  the elements of a `DenseArray` are written in hexadecimal.
- **Visitor** (`hydrazine.json_visitor`). Wraps a value and walks it with `[]`
  indexing (a missing object key gives a null visitor), typed reads `as_bool`,
  `as_int`, `as_float` and `as_str`, `array()`, `size_array()`,
  `object_items()` and `find(key)`.
- **BTree** (`hydrazine.btree`, nodes in `hydrazine.btree_nodes`). A sorted map
  backed by a B+ tree with chained leaves: `insert`, `update`, `find`, `count`,
  `lower_bound`, `upper_bound` and `equal_range` (these return `Cursor`
  positions), in-order and reverse iteration, lexicographic comparison, `swap`,
  `clear`, an optional `default_factory` for missing keys, and a Graphviz dump
  made by `to_dot`.
- **Debug formatting** (`hydrazine.debug_format`). `to_string`,
  `to_formatted_string` and `strip_report_path`.

## Installation

```
pip install .
```

## Examples

Parse a document and read values from it:

```python
from hydrazine.json_parser import parse
from hydrazine.json_visitor import Visitor

doc = parse('{ name: "kernel", sizes: [1, 2, 3] # comment\n }')
v = Visitor(doc)
v["name"].as_str()       # "kernel"
v["sizes"][1].as_int()   # 2
```

Write a value back out as indented text:

```python
from hydrazine.json_emitter import Emitter

print(Emitter(use_tabs=False, indent_size=2).to_string(doc))
```

Use the sorted map:

```python
from hydrazine.btree import BTree

tree = BTree([(3, "c"), (1, "a"), (2, "b")])
list(tree.items())   # [(1, "a"), (2, "b"), (3, "c")]
2 in tree            # True
tree.lower_bound(2).item()   # (2, "b")
```

Format sequences and paths for log messages:

```python
from hydrazine.debug_format import to_string, strip_report_path

to_string([1, 2, 3], ", ")          # "1, 2, 3"
strip_report_path("src/lib/file.py")  # "file.py"
```

## Limitations

- A `BTree` cannot remove single entries; only `clear` empties it.
- The emitter writes indented text only; there is no compact output form.
- The package is a library and installs no command.

## Tests

```
pip install .[test]
pytest
```