from __future__ import annotations

from typing import List

import pytest

from vim_input.adapters.textual import InputMirror, TextualInputAdapter, TextualUIHooks
from vim_input.buffer import InputMode
from vim_input.clipboard import MemoryClipboard
from vim_input.completion import InputCanceledError, InputCompletion
from vim_input.config import EditorConfig
from vim_input.editor import Input, InputOptions


def make_adapter(
    value: str = "hello world",
) -> tuple[TextualInputAdapter, InputCompletion, List[InputMirror], List[bool]]:
    input_ = Input(config=EditorConfig(), clipboard=MemoryClipboard())
    completion = input_.show(
        InputOptions(title="Rename", value=value, position=(2, 1))
    )
    mirrors: List[InputMirror] = []
    closes: List[bool] = []
    hooks = TextualUIHooks(update_input=mirrors.append, on_close=closes.append)
    return TextualInputAdapter(input_, hooks), completion, mirrors, closes


def press(adapter: TextualInputAdapter, *keys: str) -> None:
    for key in keys:
        adapter.handle_textual_key(key, character=key if len(key) == 1 else None)


def test_typing_in_insert_mode_updates_mirror() -> None:
    adapter, _, mirrors, _ = make_adapter()

    press(adapter, "x")

    assert mirrors[-1].value == "xhello world"
    assert mirrors[-1].mode is InputMode.INSERT
    assert mirrors[-1].title == "Rename"


def test_normal_mode_operator_sequence() -> None:
    adapter, _, mirrors, _ = make_adapter()

    press(adapter, "escape", "d", "w")

    assert mirrors[-1].value == "world"
    assert mirrors[-1].mode is InputMode.NORMAL


def test_dollar_sign_resolves_by_key_name() -> None:
    adapter, _, _, _ = make_adapter()
    press(adapter, "escape")

    adapter.handle_textual_key("dollar_sign", character="$")

    assert adapter.input.snap.cursor == 10


def test_visual_selection_is_mirrored() -> None:
    adapter, _, mirrors, _ = make_adapter()

    press(adapter, "escape", "v", "l", "l")

    assert mirrors[-1].selection is not None
    assert mirrors[-1].selection.width == 2


def test_enter_submits_value() -> None:
    adapter, completion, mirrors, closes = make_adapter()

    press(adapter, "escape", "c", "w", "h", "i", " ", "enter")

    assert completion.result(timeout=1) == "hi world"
    assert closes == [True]
    assert mirrors[-1].visible is False


def test_escape_in_idle_normal_mode_cancels() -> None:
    adapter, completion, _, closes = make_adapter()

    press(adapter, "escape", "escape")

    assert closes == [False]
    with pytest.raises(InputCanceledError):
        completion.result(timeout=1)


def test_escape_with_pending_operator_does_not_cancel() -> None:
    adapter, completion, _, closes = make_adapter()

    press(adapter, "escape", "d", "escape")

    assert closes == []
    assert not completion.done()
    assert adapter.input.snap.op.pending is False


def test_hidden_input_ignores_keys() -> None:
    adapter, _, _, _ = make_adapter()
    press(adapter, "enter")

    assert adapter.handle_textual_key("x", character="x") is False


def test_undo_key_restores_text() -> None:
    adapter, _, mirrors, _ = make_adapter()

    press(adapter, "escape", "d", "d", "u")

    assert mirrors[-1].value == "hello world"
