# smlkit

`smlkit` is a set of small building blocks for Python programs. It has no
dependencies outside the standard library.

## Modules

- `smlkit.errors`: error codes (`ErrorCode`), log severities (`LogSeverity`),
  shared status values (`CommonStatus`), and `ErrorConfig`, which writes
  numbered messages either to the console (debug and info to standard output,
  deprecations, warnings and errors to standard error) or, when configured
  with a log file, appended to a file named after the log location and the
  current time. `ErrorConfig.log()` only reports; `ErrorConfig.throw()` also
  raises `FatalError` (a `SystemExit` whose status is the severity) for
  severities above `WARNING`. `error_to_string()` and `severity_to_string()`
  give the names; `check()` raises `CheckFailedError` when its condition is
  false; `init_errors_and_logging()` builds an `ErrorConfig`, using `./logs/`
  when a log file is wanted but no location is given. The log directory is not
  created; if the file cannot be opened, the message goes to standard output.
- `smlkit.colors`: ANSI escape sequences as the `Color` string enum (regular,
  bold, underlined, background and high-intensity variants, plus `RESET`) and
  `colorize(text, color)`, which wraps text in a colour and a reset.
- `smlkit.allocators`: helpers that hand out `bytearray` buffers: `malloc`,
  `calloc`, `alloc`, `realloc`, `realloc_change_place_bytes` and
  `realloc_change_place_elements`. Zero-sized requests give `None`, totals that
  do not fit in an unsigned 64-bit integer raise `OverflowError`, and failed
  allocations raise `MemoryError`. `realloc` resizes a `bytearray` in place
  and can retry; the `change_place` variants always return a new buffer with
  the old contents copied over. The `simulated_failure("malloc" | "calloc" |
  "alloc")` context manager makes allocations fail inside a `with` block, for
  testing.
- `smlkit.smlstr`: `SmlStr`, a string container that tracks `capacity` and
  `last_index` and doubles its capacity as text is appended; `sub_str()`
  returns a slice, or `None` for a missing text or an empty range;
  `str_help()` prints and returns a short help text.
- `smlkit.linalg`: 32-bit float `Vector` and `Matrix` types built with
  `new_vec`, `new_vec_zeroes` and `new_mat`. `str(vector)` formats values with
  two decimals, e.g. `[-1.00, 23.00]`, and `[]` for an empty vector.
- `smlkit.arguments`: `ArgParser`, a minimal parser for `-x value`, `-xvalue`,
  `--long value` and boolean flags, described by `ArgSpec` entries. Unknown
  options and plain words are ignored; an option that needs a value but comes
  last raises `MissingValueError`. `format_help()` and `print_help()` produce
  the usage text.
- `smlkit.file_utils`: `get_file_size`, `file_read` and `file_concat` for open
  streams. `file_concat` drops the last character of the first file (usually
  its trailing newline), writes the joined text to a new file and to standard
  output, and returns the new file rewound and open for reading and writing.

## Installation

```
pip install .
```

The tests need pytest, which comes with the `test` extra:

```
pip install ".[test]"
```

## Command line

The package installs a demo command for the argument parser. It knows
`-a/--alpha <value>`, `-b/--beta` and `-c/--config <value>`, and prints one
line per option with its value (`(null)` for options not given):

```
smlkit-demo -a 1 --beta -c settings.toml
```

Run with no arguments, or with only `-h` or `--help`, it also prints the help
text. A missing option value is reported on standard error with exit status 1.

## Examples

```python
from smlkit.arguments import ArgParser, ArgSpec

specs = [
    ArgSpec("a", "alpha", True, "Alpha parameter"),
    ArgSpec("b", "beta", False, "Beta parameter"),
]
parser = ArgParser(["prog", "-a5", "--beta"], specs)
print(parser.parse())           # {'alpha': '5', 'beta': 'true'}
print(parser.format_help("prog"))
```

```python
from smlkit.linalg import new_mat, new_vec, new_vec_zeroes

print(new_vec(2, -1.0, 23.0))   # [-1.00, 23.00]
print(new_vec_zeroes(3))        # [0.00, 0.00, 0.00]
matrix = new_mat(3, 2, 1, 2, 0.0, 1.0, 2.0)
print(list(matrix.data))        # [1.0, 2.0, 0.0, 0.0, 0.0, 0.0]
```

```python
from smlkit.smlstr import SmlStr, sub_str

s = SmlStr("A")
s.append("BC")
print(str(s))                           # ABC
print(sub_str("Hello World", 0, 5))     # Hello
```

```python
from smlkit.colors import Color, colorize

print(colorize("done", Color.GRN))
```

```python
from smlkit.errors import ErrorCode, LogSeverity, init_errors_and_logging

config = init_errors_and_logging("my-app", False, None)
config.log(ErrorCode.IO_ERROR, LogSeverity.WARNING, "could not open %s", "data.txt")
```

## What it does not do

The buffer helpers only hand out and resize `bytearray` objects; there is no
freeing, since Python reclaims buffers itself. The vector and matrix types
hold data and print vectors, but offer no arithmetic and no string form for
matrices.