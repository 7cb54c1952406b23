"""Compile, run and track small Rust exercises, with Python reference solutions."""

__version__ = "4.3.0"