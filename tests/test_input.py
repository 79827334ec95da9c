from __future__ import annotations

import asyncio

import pytest
from textual.geometry import Offset, Region

from vim_input.buffer import InputMode
from vim_input.clipboard import MemoryClipboard
from vim_input.completion import InputCanceledError, InputCompletion
from vim_input.config import EditorConfig
from vim_input.editor import Input, InputOptions


def make_input(config: EditorConfig | None = None) -> Input:
    return Input(config=config or EditorConfig(), clipboard=MemoryClipboard())


def show(input_: Input, value: str = "hello", position=(5, 1)) -> InputCompletion:
    return input_.show(InputOptions(title="Rename", value=value, position=position))


def test_show_arms_widget() -> None:
    input_ = make_input()

    show(input_)

    assert input_.visible is True
    assert input_.title == "Rename"
    assert input_.value() == "hello"
    assert input_.mode() is InputMode.INSERT
    assert input_.snap.cursor == 0


def test_close_submit_delivers_full_value() -> None:
    input_ = make_input()
    completion = show(input_)
    input_.type_("x")

    assert input_.close(True) is True

    assert input_.visible is False
    assert completion.result(timeout=1) == "xhello"


def test_close_cancel_delivers_error() -> None:
    input_ = make_input()
    completion = show(input_)

    input_.close(False)

    with pytest.raises(InputCanceledError) as info:
        completion.result(timeout=1)
    assert info.value.title == "Rename"


def test_show_again_cancels_previous_request() -> None:
    input_ = make_input()
    first = show(input_)

    second = show(input_, value="other")

    assert first.done()
    with pytest.raises(InputCanceledError):
        first.result(timeout=1)
    assert not second.done()
    assert input_.value() == "other"


def test_show_resets_history() -> None:
    input_ = make_input()
    show(input_)
    input_.type_("x")
    input_.escape()

    show(input_, value="fresh")

    assert len(input_.history) == 1
    assert input_.undo() is False


def test_show_uses_supplied_completion() -> None:
    input_ = make_input()
    completion = InputCompletion()

    assert input_.show(InputOptions(title="t"), completion) is completion


def test_completion_fires_once() -> None:
    input_ = make_input()
    completion = show(input_)
    input_.close(True)

    assert completion.cancel() is False
    assert completion.submit("late") is False
    assert input_.close(False) is True
    assert completion.result(timeout=1) == "hello"


def test_completion_is_awaitable() -> None:
    input_ = make_input()
    completion = show(input_, value="async")

    async def scenario() -> str:
        input_.close(True)
        return await completion

    assert asyncio.run(scenario()) == "async"


def test_area_is_offset_below_anchor() -> None:
    input_ = make_input()
    show(input_, position=(5, 1))

    assert input_.area() == Region(5, 3, 50, 3)


def test_area_follows_config() -> None:
    input_ = make_input(EditorConfig(viewport_width=30, height=4, header_offset=1))
    show(input_, position=(0, 0))

    assert input_.area() == Region(0, 1, 30, 4)


def test_cursor_tracks_display_width() -> None:
    input_ = make_input()
    show(input_, position=(5, 1))
    assert input_.cursor() == Offset(6, 4)

    input_.move_(5)
    assert input_.cursor() == Offset(11, 4)


def test_cursor_counts_wide_characters_twice() -> None:
    input_ = make_input()
    show(input_, value="你好", position=(5, 1))

    input_.move_(2)

    assert input_.cursor() == Offset(10, 4)


def test_selected_is_none_without_anchor() -> None:
    input_ = make_input()
    show(input_)

    assert input_.selected() is None


def test_selected_forward_selection_excludes_cursor_cell() -> None:
    input_ = make_input()
    show(input_, value="hello world", position=(5, 1))
    input_.escape()
    input_.move_(2)
    input_.visual()
    input_.move_(3)

    assert input_.selected() == Region(8, 4, 3, 1)


def test_selected_backward_selection() -> None:
    input_ = make_input()
    show(input_, value="hello world", position=(5, 1))
    input_.escape()
    input_.move_(2)
    input_.visual()
    input_.move_(-2)

    assert input_.selected() == Region(7, 4, 2, 1)


def test_value_is_windowed_slice() -> None:
    input_ = make_input(EditorConfig(viewport_width=12, margin=2))
    show(input_, value="abcdefghijklmnopqrstuvwxyz")

    assert input_.value() == "abcdefghi"

    input_.move_(26)
    assert input_.value() == "rstuvwxyz"
