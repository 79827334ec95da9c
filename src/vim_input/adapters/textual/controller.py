"""Textual adapter that turns key names into Input calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textual.geometry import Offset, Region

from vim_input.buffer import InputMode
from vim_input.editor import Input
from vim_input.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class InputMirror:
    """Everything a host needs to draw the input box."""

    title: str
    value: str
    mode: InputMode
    cursor: Offset
    selection: Optional[Region]
    area: Region
    visible: bool


@dataclass(slots=True)
class TextualUIHooks:
    update_input: Callable[[InputMirror], None]
    # Called once the input closes; receives whether it was submitted.
    on_close: Callable[[bool], None] = _noop
    log: Callable[[str], None] = _noop


KeyAction = Callable[[Input], bool]

NORMAL_KEYS: Dict[str, KeyAction] = {
    "escape": lambda i: i.escape(),
    "i": lambda i: i.insert(False),
    "a": lambda i: i.insert(True),
    "v": lambda i: i.visual(),
    "u": lambda i: i.undo(),
    "ctrl+r": lambda i: i.redo(),
    "h": lambda i: i.move_(-1),
    "left": lambda i: i.move_(-1),
    "l": lambda i: i.move_(1),
    "right": lambda i: i.move_(1),
    "space": lambda i: i.move_in_operating(1),
    "0": lambda i: i.move_(-i.snap.count),
    "home": lambda i: i.move_(-i.snap.count),
    "dollar_sign": lambda i: i.move_(i.snap.count),
    "end": lambda i: i.move_(i.snap.count),
    "b": lambda i: i.backward(),
    "w": lambda i: i.forward(False),
    "e": lambda i: i.forward(True),
    "d": lambda i: i.delete(False),
    "c": lambda i: i.delete(True),
    "y": lambda i: i.yank(),
    "p": lambda i: i.paste(False),
    "P": lambda i: i.paste(True),
}

INSERT_KEYS: Dict[str, KeyAction] = {
    "escape": lambda i: i.escape(),
    "backspace": lambda i: i.backspace(),
    "left": lambda i: i.move_(-1),
    "right": lambda i: i.move_(1),
    "home": lambda i: i.move_(-i.snap.count),
    "end": lambda i: i.move_(i.snap.count),
}


class TextualInputAdapter:
    """Dispatches Textual key events to an :class:`Input` and mirrors its state."""

    def __init__(self, input_: Input, hooks: TextualUIHooks) -> None:
        self.input = input_
        self.hooks = hooks

    def handle_textual_key(self, key: str, *, character: Optional[str] = None) -> bool:
        """Apply one key press. Returns whether the box needs a redraw."""

        if not self.input.visible:
            return False

        mode = self.input.mode()
        self._log_state("key ->", key=key, character=character)
        if key == "enter":
            return self._close(True)
        if key == "ctrl+c" or (key == "escape" and self._idle()):
            return self._close(False)

        table = NORMAL_KEYS if mode is InputMode.NORMAL else INSERT_KEYS
        action = table.get(key)
        if action is None and mode is InputMode.NORMAL and character:
            action = table.get(character)

        if action is not None:
            changed = action(self.input)
        elif mode is InputMode.INSERT and character and character.isprintable():
            changed = self.input.type_(character)
        else:
            return False

        self.refresh()
        self._log_state("result <-", changed=changed)
        return changed

    def refresh(self) -> None:
        self.hooks.update_input(self.mirror())

    def mirror(self) -> InputMirror:
        return InputMirror(
            title=self.input.title,
            value=self.input.value(),
            mode=self.input.mode(),
            cursor=self.input.cursor(),
            selection=self.input.selected(),
            area=self.input.area(),
            visible=self.input.visible,
        )

    def _idle(self) -> bool:
        """Normal mode with nothing pending: escape dismisses the box."""

        snap = self.input.snap
        return (
            snap.mode is InputMode.NORMAL and not snap.op.pending and snap.start is None
        )

    def _close(self, submit: bool) -> bool:
        telemetry.record_event(
            "adapter.close", level="debug", data={"submit": submit}
        )
        self.input.close(submit)
        self.hooks.on_close(submit)
        self.refresh()
        return True

    def _log_state(self, prefix: str, **fields: object) -> None:
        snap = self.input.snap
        state = {
            "mode": snap.mode.value,
            "cursor": snap.cursor,
            "offset": snap.offset,
            "op": snap.op.kind.value,
            "start": snap.start,
        }
        state.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix, *(f"{key}={value!r}" for key, value in state.items())])
        self.hooks.log(line)


__all__ = [
    "INSERT_KEYS",
    "InputMirror",
    "NORMAL_KEYS",
    "TextualInputAdapter",
    "TextualUIHooks",
]
