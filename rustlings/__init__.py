"""A runner that compiles, tests and tracks Rust exercises, with worked solutions."""

__version__ = "4.6.0"