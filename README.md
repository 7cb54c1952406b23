# rustdrill

rustdrill is a Python library for working with small Rust exercises. It reads an exercise list, compiles exercises with `rustc` or `cargo clippy`, runs the result, and tells you whether an exercise is still pending. It also holds Python reference solutions for the exercises.

## Requirements

- Python 3.11 or later
- To compile exercises: a Rust toolchain with `rustc` on your `PATH`. Clippy exercises also need `cargo clippy`.

## Installation

```console
pip install .
```

To install the test dependencies as well:

```console
pip install ".[test]"
```

## Exercises

An exercise list is TOML text with an `exercises` array. Each entry has a `name`, a `path`, a `mode` (`compile`, `test` or `clippy`) and a `hint`:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with let."
```

```python
from pathlib import Path
from rustdrill.exercise import CompileError, RunError, load_exercises

exercises = load_exercises(Path("info.toml").read_text())
exercise = exercises[0]

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompileError as error:
    print(error.output.stderr)
except RunError as error:
    print(error.output.stdout, error.output.stderr)
```

What `rustdrill.exercise` offers:

- `load_exercises(text)` parses the list into `Exercise` objects. An entry that lacks one of the four keys raises `ValueError`.
- `Exercise.compile()` compiles by mode: `compile` builds a binary, `test` builds a test harness, and `clippy` writes `./exercises/clippy/Cargo.toml`, builds a binary, then runs `cargo clean` and `cargo clippy -- -D warnings`. On failure it removes the temporary binary and raises `CompileError`, whose `output` holds the captured `stdout` and `stderr`.
- `CompiledExercise.run()` runs the binary (test harnesses get `--show-output`) and returns an `ExerciseOutput`, or raises `RunError` when it exits unsuccessfully. `CompiledExercise.close()`, or leaving the `with` block, removes the binary.
- `Exercise.state()` returns the lines around the first `I AM NOT DONE` comment as `ContextLine` objects (`line`, `number`, `important`), two lines either side, or an empty list once the comment is gone. `Exercise.looks_done()` is true when that list is empty.
- `temp_file()` names the temporary binary for the current process and thread; `clean()` removes it.

An exercise counts as pending while its source still holds a line such as:

```rust
// I AM NOT DONE
```

`rustdrill.ui` prints coloured status lines: `warn(message)` in red and `success(message)` in green, each returning the plain text it printed. Set the `NO_EMOJI` environment variable to get `!` and `✓` instead of emoji.

## Reference solutions

The `rustdrill.drills` package holds Python solutions grouped by topic: `quiz`, `basics`, `colors`, `errors`, `collections`, `enums`, `structs`, `iterators`, `containers`, `threads`, `traits`, `generics`, `ownership`, `primitives` and `macros`. For example:

```python
from rustdrill.drills.quiz import calculate_apple_price
from rustdrill.drills.iterators import divide

calculate_apple_price(35)  # 70
divide(81, 9)              # 9
```

## What it does not do

rustdrill has no command-line program. There is no command to verify every exercise in order, to run or give the hint for a single exercise, to list exercises with their status, or to watch the exercise files and check them again on change. Those steps are left to your own code, built on `load_exercises`, `Exercise.compile`, `CompiledExercise.run` and `Exercise.looks_done`.