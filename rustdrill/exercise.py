"""Exercises: their description, compilation, running and progress state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rustdrill.ui import use_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary file name unique to this process and thread."""
    thread_id = "".join(ch for ch in f"Thread{threading.get_ident()}" if ch.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring any failure."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.StrEnum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompileError(Exception):
    """Compilation of an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class RunError(Exception):
    """The compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _capture(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary, raising RunError if it fails."""
        return self.exercise._run()

    def close(self) -> None:
        """Remove the compiled binary."""
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising CompileError on failure."""
        source = str(self.path)
        target = temp_file()
        if self.mode is Mode.COMPILE:
            result = _capture(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
        elif self.mode is Mode.TEST:
            result = _capture(["rustc", "--test", source, "-o", target, *RUSTC_COLOR_ARGS])
        else:
            result = self._clippy(source, target)

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(_output(result))

    def _clippy(self, source: str, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml)
        except OSError as error:
            message = (
                "Failed to write 📎 Clippy 📎 Cargo.toml file."
                if use_emoji()
                else "Failed to write Clippy Cargo.toml file."
            )
            raise OSError(message) from error
        # Build a binary too, so clippy exercises can also be run.
        _capture(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
        # A clean is needed for clippy to report every lint.
        _capture(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ]
        )

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _capture(args)
        output = _output(result)
        if result.returncode != 0:
            raise RunError(output)
        return output

    def state(self) -> list[ContextLine]:
        """Return the lines around the pending marker; empty when done."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return []

        lines = source.splitlines()
        matched = next(i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line))
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if first <= i <= last
        ]

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return not self.state()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml contents."""
    data = tomllib.loads(text)
    exercises = []
    for entry in data["exercises"]:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as error:
            raise ValueError(f"exercise entry is missing {error.args[0]!r}") from error
    return exercises