# abstractions_kit

A collection of small, self-contained building blocks: number encodings,
text comparison helpers, simple numerics, classic container abstractions,
two interchangeable text-editor buffers, a k-d tree for nearest-neighbour
search and a 2D Gauss-Newton ICP aligner.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `abstractions_kit.codes` | `binary_codes`, `binary_to_decimal`, `gray_codes`, `integer_to_string`, `string_to_integer` (bases 2 to 36, negative numbers allowed) |
| `abstractions_kit.textcompare` | `compare_ignoring_case`, `normalize_title`, `same_title` |
| `abstractions_kit.roman` | `roman_to_int` |
| `abstractions_kit.numerics` | `solve_quadratic`, `merge`, `merge_sort`, `integrate`, `min_scaled_index`, `parse_score`, `summarize_scores`, `ScoreSummary` |
| `abstractions_kit.intarray` | `IntArray`: a fixed-size, zero-initialised, bounds-checked integer array |
| `abstractions_kit.mystring` | `MyString`: a mutable string with `substr`, concatenation and indexing |
| `abstractions_kit.charstack` | `CharStack` and `StackEmptyError` |
| `abstractions_kit.array_buffer` | `ArrayEditorBuffer`: an editor buffer backed by a list |
| `abstractions_kit.stack_buffer` | `StackEditorBuffer`: the same interface backed by two stacks |
| `abstractions_kit.pointfiles` | `Point3D`, `noisy_half_circle`, `write_points_csv` |
| `abstractions_kit.kdtree` | `KdTree` with exact or approximate k-nearest-neighbour search |
| `abstractions_kit.icp2d` | `Icp2d`, `SE2`, `compute_jacobian`, `AlignmentError` |

## Examples

```python
from abstractions_kit.codes import gray_codes, integer_to_string, string_to_integer
from abstractions_kit.roman import roman_to_int

integer_to_string(42, 16)        # "2A"
string_to_integer("111111", 2)   # 63
gray_codes(2)                    # ["00", "01", "11", "10"]
roman_to_int("MCMLXIX")          # 1969
```

```python
from abstractions_kit.intarray import IntArray

arr = IntArray(5)
arr[2] = 40
arr.get(2)      # 40
arr.get(10)     # raises IndexError: Index out of bounds
```

Both editor buffers share one interface:

```python
from abstractions_kit.stack_buffer import StackEditorBuffer

buf = StackEditorBuffer()
for ch in "hello":
    buf.insert_character(ch)
buf.move_cursor_to_start()
buf.delete_character()
buf.text()      # "ello"
buf.cursor()    # 0
print(buf.render())
```

## Command-line tools

```
abstractions-codes binary 3          # list all 3-bit codes with their values
abstractions-codes gray 3            # list the 3-bit Gray code
abstractions-codes to-string 42 16   # prints 2A
abstractions-codes to-int 111111 2   # prints 63
abstractions-roman MCMLXIX           # prints 1969
abstractions-points fixed --output points.csv
abstractions-points circle --output circlepoints.csv --num-points 100 --radius 5 --sigma 0.2 --seed 1
```

Run any of them with `--help` for their options.

## What this package does not do

There is no interactive text-editor program and no line-command
interpreter for the editor buffers; drive `ArrayEditorBuffer` and
`StackEditorBuffer` through their methods from your own code.