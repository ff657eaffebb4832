"""Compile, run and track a course of small Rust exercises, with worked lesson solutions."""

__version__ = "0.1.0"