# drills

`drills` holds reference solutions to a course of small Rust exercises,
written as plain Python functions and classes. It also has two helpers for
working in a course directory: one writes a `rust-project.json` for
rust-analyzer, the other prints coloured status lines.

## Requirements

- Python 3.11 or newer
- [rich](https://pypi.org/project/rich/) is installed with the package
- `rustc` on your `PATH`, but only if you use `drills.project` to find the
  toolchain and `RUST_SRC_PATH` is not set

## Reference solutions

The solutions are in `drills.lessons`:

| module         | contents                                                                 |
|----------------|--------------------------------------------------------------------------|
| `quizzes`      | `calculate_price_of_apples`, `transformer` with `Uppercase`, `Trim`, `Append`, `ReportCard` |
| `control_flow` | `bigger`, `foo_if_fizz`, `animal_habitat`, `is_even`, `sale_price`       |
| `sequences`    | `array_and_vec`, `vec_loop`, `vec_map`, `middle_slice`, `second_element` |
| `structs`      | `Order`, `create_order_template`, `Package`, `Point`, `State` and its messages |
| `text`         | `trim_me`, `compose_me`, `replace_me`                                    |
| `hashmaps`     | `Fruit`, `fruit_basket`, `Team`, `build_scores_table`                    |
| `errors`       | `maybe_icecream`, `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `traits`       | `Wrapper`, `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types` |
| `iterators`    | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `Progress` counters |
| `conversions`  | `Person`, `person_from`, `parse_person`, `Color`, `color_from_tuple`, `color_from_array`, `color_from_slice` |

Where an exercise returns an error value, the Python solution raises an
exception instead: `ParsePersonError`, `IntoColorError`,
`ParsePosNonzeroError`, `CreationError`, `DivisionError` and so on. Each one
is a `ValueError` or an `ArithmeticError`.

```python
from drills.lessons.conversions import parse_person, color_from_slice
from drills.lessons.iterators import capitalize_words_string

print(parse_person("Mark,20"))                           # Person(name='Mark', age=20)
print(capitalize_words_string(["hello", " ", "world"]))  # Hello World
color_from_slice([0, 0])                                 # raises IntoColorError
```

## rust-analyzer project file

Run `drills.project.RustAnalyzerProject` from the course directory:

```python
from drills.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()     # RUST_SRC_PATH, or `rustc --print sysroot` + lib/rustlib/src/rust/library
project.exercises_to_json()   # one crate (edition 2021, cfg "test") per .rs file under ./exercises
project.write_to_disk()       # writes ./rust-project.json
```

`to_dict()` returns the same document as plain data.

## Status lines

`drills.ui.warn(message)` prints a red line and `drills.ui.success(message)`
prints a green one. If the `NO_EMOJI` environment variable is set, the lines
start with `!` and `✓` instead of emoji.

## What this package does not do

This package has no command-line program. It does not compile, run or test
exercises. It does not read an exercise list, it does not check whether an
exercise is still marked as pending, and it does not watch files for
changes. It cannot reset an exercise or show the hint for one.