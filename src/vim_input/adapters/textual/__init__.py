"""Textual bindings for the input widget."""

from .controller import (
    INSERT_KEYS,
    NORMAL_KEYS,
    InputMirror,
    TextualInputAdapter,
    TextualUIHooks,
)

__all__ = [
    "INSERT_KEYS",
    "NORMAL_KEYS",
    "InputMirror",
    "TextualInputAdapter",
    "TextualUIHooks",
]
