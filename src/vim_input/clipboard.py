"""Clipboard collaborators and the bridge used by synchronous editing code."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Coroutine, Optional, Protocol, TypeVar

import pyperclip

T = TypeVar("T")


class ClipboardError(RuntimeError):
    """Raised by clipboard backends when the system clipboard is unusable."""

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class Clipboard(Protocol):
    async def read(self) -> Optional[str]:
        """Return the clipboard text, or ``None`` when it holds none."""
        ...

    async def write(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""
        ...


class SystemClipboard:
    """Clipboard backed by ``pyperclip``; calls run on a worker thread."""

    async def read(self) -> Optional[str]:
        try:
            text = await asyncio.to_thread(pyperclip.paste)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc), operation="read") from exc
        return text or None

    async def write(self, text: str) -> None:
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc), operation="write") from exc


class MemoryClipboard:
    """Process-local clipboard for headless hosts and tests."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    async def read(self) -> Optional[str]:
        return self.text or None

    async def write(self, text: str) -> None:
        self.text = text


def block_on(coro: Coroutine[Any, Any, T]) -> T:
    """Drive ``coro`` to completion and return its result.

    Without a running event loop on this thread the coroutine gets its own
    loop. Inside a running loop it is run on a private worker thread while
    the calling thread, and therefore its loop, waits.
    """

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="clipboard") as pool:
        return pool.submit(asyncio.run, coro).result()


__all__ = [
    "Clipboard",
    "ClipboardError",
    "MemoryClipboard",
    "SystemClipboard",
    "block_on",
]
