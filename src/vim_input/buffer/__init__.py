"""Buffer snapshots, undo history and character helpers."""

from .chars import CharKind, char_width, display_width
from .snapshot import (
    NO_OP,
    InputMode,
    InputOp,
    OpKind,
    Snapshot,
    clamp_upper_bound,
)
from .snapshots import SnapshotStack

__all__ = [
    "CharKind",
    "InputMode",
    "InputOp",
    "NO_OP",
    "OpKind",
    "Snapshot",
    "SnapshotStack",
    "char_width",
    "clamp_upper_bound",
    "display_width",
]
