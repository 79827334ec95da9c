"""Single buffer state tracked by the undo history."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .chars import char_width


class InputMode(Enum):
    NORMAL = "normal"
    INSERT = "insert"

    @property
    def delta(self) -> int:
        """1 when the cursor rests on a character instead of between two."""

        return int(self is not InputMode.INSERT)


def clamp_upper_bound(mode: InputMode, count: int) -> int:
    """Largest cursor position allowed in ``mode`` for ``count`` characters."""

    return max(count - mode.delta, 0)


class OpKind(Enum):
    NONE = "none"
    DELETE = "delete"
    YANK = "yank"


@dataclass(frozen=True, slots=True)
class InputOp:
    """Pending operator; ``insert`` only matters for deletes (change vs cut)."""

    kind: OpKind = OpKind.NONE
    insert: bool = False

    @classmethod
    def delete(cls, insert: bool) -> "InputOp":
        return cls(OpKind.DELETE, insert)

    @classmethod
    def yank(cls) -> "InputOp":
        return cls(OpKind.YANK)

    @property
    def pending(self) -> bool:
        return self.kind is not OpKind.NONE


NO_OP = InputOp()


@dataclass(slots=True)
class Snapshot:
    """Text plus cursor, viewport and modal state.

    Positions are character indexes into ``value``. ``start`` anchors a
    selection or an operator range; the cursor is the other end.
    """

    value: str = ""
    cursor: int = 0
    offset: int = 0
    mode: InputMode = InputMode.INSERT
    op: InputOp = NO_OP
    start: Optional[int] = None

    @property
    def count(self) -> int:
        return len(self.value)

    def copy(self) -> "Snapshot":
        return replace(self)

    def slice(self, start: int, end: int) -> str:
        return self.value[start:end]

    def insert(self) -> bool:
        if self.mode is not InputMode.NORMAL or self.op.pending:
            return False
        self.mode = InputMode.INSERT
        self.start = None
        return True

    def visual(self) -> bool:
        if self.mode is not InputMode.NORMAL or not self.value:
            return False
        self.op = NO_OP
        self.start = self.cursor
        return True

    def range(self, cursor: int, include: bool) -> Optional[Tuple[int, int]]:
        """Consume the anchor and return the ordered range it spans to ``cursor``.

        With ``include`` the character under the far end is part of the range.
        """

        if self.start is None:
            return None
        anchor, self.start = self.start, None
        lo, hi = (anchor, cursor) if anchor <= cursor else (cursor, anchor)
        if include:
            hi = min(hi + 1, self.count)
        return lo, hi

    def window(self, limit: int) -> Tuple[int, int]:
        return self.find_window(self.value, self.offset, limit)

    @staticmethod
    def find_window(text: str, offset: int, limit: int) -> Tuple[int, int]:
        """Widest run of ``text`` from ``offset`` narrower than ``limit`` columns."""

        width = 0
        end = offset
        for char in text[offset:]:
            width += char_width(char)
            if width >= limit:
                break
            end += 1
        return offset, end


__all__ = [
    "InputMode",
    "InputOp",
    "NO_OP",
    "OpKind",
    "Snapshot",
    "clamp_upper_bound",
]
