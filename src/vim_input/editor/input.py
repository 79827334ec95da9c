"""The visible input box: completion protocol and render geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from textual.geometry import Offset, Region

from vim_input.buffer import display_width
from vim_input.clipboard import Clipboard
from vim_input.completion import InputCompletion
from vim_input.config import EditorConfig
from vim_input.runtime import telemetry

from .text_editor import TextEditor

Position = Tuple[int, int]  # (x, y) anchor in screen cells


@dataclass(slots=True)
class InputOptions:
    title: str
    value: str = ""
    position: Position = (0, 0)


class Input(TextEditor):
    """Text editor that is shown on request and reports back once.

    ``show`` arms an :class:`InputCompletion`; ``close`` resolves it with the
    buffer or cancels it. Showing again cancels whatever was pending.
    """

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        clipboard: Optional[Clipboard] = None,
    ) -> None:
        super().__init__(config=config, clipboard=clipboard)
        self.title = ""
        self.position: Position = (0, 0)
        self.visible = False
        self._completion: Optional[InputCompletion] = None

    def show(
        self, options: InputOptions, completion: Optional[InputCompletion] = None
    ) -> InputCompletion:
        self.close(False)
        self._snaps.reset(options.value)

        self.title = options.title
        self.position = options.position
        self._completion = completion or InputCompletion()
        self.visible = True
        telemetry.record_event(
            "input.show",
            level="debug",
            data={"title": self.title, "position": self.position},
        )
        return self._completion

    def close(self, submit: bool) -> bool:
        completion, self._completion = self._completion, None
        if completion is not None:
            if submit:
                completion.submit(self.snap.value)
            else:
                completion.cancel(title=self.title)
            telemetry.record_event(
                "input.close",
                level="debug",
                data={"title": self.title, "submit": submit},
            )
        self.visible = False
        return True

    def area(self) -> Region:
        x, y = self.position
        return Region(
            x,
            y + self.config.header_offset,
            self.config.viewport_width,
            self.config.height,
        )

    def cursor(self) -> Offset:
        snap = self.snap
        area = self.area()
        width = display_width(snap.slice(snap.offset, snap.cursor))
        return Offset(area.x + width + 1, area.y + 1)

    def selected(self) -> Optional[Region]:
        """Highlight for the selection, excluding the cell under the cursor."""

        snap = self.snap
        if snap.start is None:
            return None

        if snap.start < snap.cursor:
            lo, hi = snap.start, snap.cursor
        else:
            lo, hi = snap.cursor + 1, snap.start + 1

        win_start, win_end = snap.window(self.config.limit)
        lo = max(lo, win_start)
        hi = max(min(hi, win_end), lo)

        area = self.area()
        return Region(
            area.x + 1 + display_width(snap.slice(snap.offset, lo)),
            area.y + 1,
            display_width(snap.slice(lo, hi)),
            1,
        )


__all__ = ["Input", "InputOptions", "Position"]
