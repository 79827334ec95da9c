"""Editing state machine and the visible input component."""

from .input import Input, InputOptions, Position
from .text_editor import TextEditor

__all__ = ["Input", "InputOptions", "Position", "TextEditor"]
