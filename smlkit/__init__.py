"""Small utilities: errors and logging, terminal colours, byte buffers, strings, vectors and matrices, argument parsing and file helpers."""

__version__ = "0.1.0"

__all__ = [
    "allocators",
    "arguments",
    "cli",
    "colors",
    "errors",
    "file_utils",
    "linalg",
    "smlstr",
]