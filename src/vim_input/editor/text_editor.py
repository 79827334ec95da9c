"""Modal single-line editing: motions, operators, undo and scrolling."""

from __future__ import annotations

from typing import Optional

from vim_input.buffer import (
    NO_OP,
    CharKind,
    InputMode,
    InputOp,
    OpKind,
    Snapshot,
    SnapshotStack,
    clamp_upper_bound,
    display_width,
)
from vim_input.clipboard import Clipboard, ClipboardError, SystemClipboard, block_on
from vim_input.config import EditorConfig
from vim_input.runtime import telemetry


class TextEditor:
    """Vim-flavoured editing over a :class:`SnapshotStack`.

    Every public method runs to completion and returns whether the call
    changed anything worth redrawing. Clipboard round-trips block the caller.
    """

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        clipboard: Optional[Clipboard] = None,
    ) -> None:
        self.config = config or EditorConfig.from_env()
        self.clipboard: Clipboard = clipboard or SystemClipboard()
        self._snaps = SnapshotStack()

    @property
    def snap(self) -> Snapshot:
        return self._snaps.current

    @property
    def history(self) -> SnapshotStack:
        return self._snaps

    def escape(self) -> bool:
        snap = self.snap
        if snap.mode is InputMode.NORMAL:
            snap.op = NO_OP
            snap.start = None
        else:
            snap.mode = InputMode.NORMAL
            self.move_(-1)
        self._snaps.tag()
        return True

    def insert(self, append: bool = False) -> bool:
        if not self.snap.insert():
            return False
        if append:
            self.move_(1)
        return True

    def visual(self) -> bool:
        if self.snap.mode is InputMode.INSERT:
            self.escape()
        if not self.snap.visual():
            return False
        self._snaps.tag()
        return True

    def undo(self) -> bool:
        if not self._snaps.undo():
            return False
        telemetry.record_event(
            "editor.undo", level="debug", data={"index": self._snaps.index}
        )
        return self.escape()

    def redo(self) -> bool:
        if not self._snaps.redo():
            return False
        telemetry.record_event(
            "editor.redo", level="debug", data={"index": self._snaps.index}
        )
        return True

    def move_(self, step: int) -> bool:
        snap = self.snap
        if step <= 0:
            target = max(snap.cursor + step, 0)
        else:
            target = min(snap.count, snap.cursor + step)
        changed = self._handle_op(target, include=False)
        self._scroll()
        return changed

    def move_in_operating(self, step: int) -> bool:
        if not self.snap.op.pending:
            return False
        return self.move_(step)

    def backward(self) -> bool:
        snap = self.snap
        if snap.cursor == 0:
            return self.move_(0)

        behind = snap.slice(0, snap.cursor)[::-1]
        prev = CharKind.of(behind[0])
        for i, char in enumerate(behind[1:], start=1):
            kind = CharKind.of(char)
            if prev is not CharKind.SPACE and prev is not kind:
                return self.move_(-i)
            prev = kind

        if prev is not CharKind.SPACE:
            return self.move_(-snap.count)
        return False

    def forward(self, end: bool = False) -> bool:
        snap = self.snap
        if snap.cursor >= snap.count:
            return self.move_(0)

        ahead = snap.slice(snap.cursor, snap.count)
        prev = CharKind.of(ahead[0])
        for i, char in enumerate(ahead[1:], start=1):
            kind = CharKind.of(char)
            if end:
                hit = prev is not CharKind.SPACE and prev is not kind and i != 1
            else:
                hit = kind is not CharKind.SPACE and kind is not prev
            if hit and snap.op.pending:
                return self.move_(i)
            if hit:
                return self.move_(i - 1 if end else i)
            prev = kind

        return self.move_(snap.count)

    def type_(self, char: str) -> bool:
        snap = self.snap
        snap.value = snap.value[: snap.cursor] + char + snap.value[snap.cursor :]
        return self.move_(1)

    def backspace(self) -> bool:
        snap = self.snap
        if snap.cursor < 1:
            return False
        if snap.cursor == snap.count:
            snap.value = snap.value[:-1]
        else:
            snap.value = snap.value[: snap.cursor - 1] + snap.value[snap.cursor :]
        return self.move_(-1)

    def delete(self, insert: bool = False) -> bool:
        snap = self.snap
        if not snap.op.pending:
            return self._begin_op(InputOp.delete(insert))
        if snap.op.kind is not OpKind.DELETE:
            return False

        # Same operator twice: the whole line goes.
        snap.value = ""
        snap.cursor = 0
        snap.offset = 0
        snap.op = NO_OP
        snap.start = None
        snap.mode = InputMode.INSERT if insert else InputMode.NORMAL
        self._snaps.tag()
        return True

    def yank(self) -> bool:
        snap = self.snap
        if not snap.op.pending:
            return self._begin_op(InputOp.yank())
        if snap.op.kind is not OpKind.YANK:
            return False

        # Same operator twice: copy the whole line, then rest on its last char.
        snap.start = 0
        self.move_(snap.count)
        self.move_(self.snap.count)
        return False

    def paste(self, before: bool = False) -> bool:
        snap = self.snap
        replaced = False
        if snap.op.pending:
            snap.op = NO_OP
            snap.start = None
        elif snap.start is not None:
            snap.op = InputOp.delete(False)
            replaced = self._handle_op(snap.cursor, include=True)
            self._scroll()

        text = self._read_clipboard()
        if not text:
            return replaced

        self.insert(not before)
        for char in text:
            self.type_(char)
        self.escape()
        return True

    def value(self) -> str:
        """The slice of the buffer currently inside the viewport."""

        snap = self.snap
        return snap.slice(*snap.window(self.config.limit))

    def mode(self) -> InputMode:
        return self.snap.mode

    def _begin_op(self, op: InputOp) -> bool:
        snap = self.snap
        snap.op = op
        if snap.start is None:
            snap.start = snap.cursor
            return False

        changed = self._handle_op(snap.cursor, include=True)
        if changed:
            self.move_(0)
        return changed

    def _handle_op(self, cursor: int, include: bool) -> bool:
        snap = self.snap
        if not snap.op.pending:
            return self._settle(snap.copy(), cursor)

        # Record where the operator started so undo lands back there.
        self._snaps.tag()
        old = snap.copy()
        with telemetry.span(
            f"operator::{snap.op.kind.value}",
            component="operators",
            metadata={"start": snap.start, "cursor": cursor, "include": include},
        ):
            bounds = snap.range(cursor, include)
            if bounds is not None:
                lo, hi = bounds
                if snap.op.kind is OpKind.DELETE:
                    snap.value = snap.value[:lo] + snap.value[hi:]
                    snap.mode = InputMode.INSERT if snap.op.insert else InputMode.NORMAL
                    cursor = lo
                else:
                    self._write_clipboard(snap.slice(lo, hi))
                    cursor = snap.cursor
        return self._settle(old, cursor)

    def _settle(self, old: Snapshot, cursor: int) -> bool:
        snap = self.snap
        snap.op = NO_OP
        snap.cursor = min(cursor, clamp_upper_bound(snap.mode, snap.count))
        if snap == old:
            return False
        if old.op.pending:
            self._snaps.tag()
        return True

    def _scroll(self) -> None:
        snap = self.snap
        if snap.cursor < snap.offset:
            snap.offset = snap.cursor
        elif not snap.value:
            snap.offset = 0
        else:
            delta = snap.mode.delta
            visible = snap.slice(snap.offset, snap.cursor + delta)
            if display_width(visible) >= self.config.limit:
                _, fits = Snapshot.find_window(visible[::-1], 0, self.config.limit)
                snap.offset = snap.cursor - max(fits - delta, 0)

    def _read_clipboard(self) -> str:
        with telemetry.span("clipboard::read", component="clipboard"):
            try:
                return block_on(self.clipboard.read()) or ""
            except ClipboardError as exc:
                telemetry.record_event(
                    "clipboard.read_failed", level="warning", data={"error": str(exc)}
                )
                return ""

    def _write_clipboard(self, text: str) -> None:
        with telemetry.span("clipboard::write", component="clipboard"):
            try:
                block_on(self.clipboard.write(text))
            except ClipboardError as exc:
                telemetry.record_event(
                    "clipboard.write_failed", level="warning", data={"error": str(exc)}
                )


__all__ = ["TextEditor"]
