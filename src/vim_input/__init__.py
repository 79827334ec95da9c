"""Modal single-line input widget with vim motions and snapshot undo."""

__all__ = [
    "adapters",
    "buffer",
    "clipboard",
    "completion",
    "config",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
