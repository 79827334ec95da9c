"""One-shot channel carrying the outcome of a shown input."""

from __future__ import annotations

import asyncio
from concurrent.futures import Future
from typing import Any, Generator, Optional


class InputCanceledError(RuntimeError):
    """Delivered to the waiting caller when the input is dismissed."""

    def __init__(self, message: str = "canceled", *, title: str | None = None) -> None:
        super().__init__(message)
        self.title = title


class InputCompletion:
    """Resolves exactly once: to the submitted text or to a cancellation.

    Later ``submit``/``cancel`` calls are ignored and return ``False``. The
    handle can be waited on from threads (``result``) or awaited from asyncio.
    """

    def __init__(self) -> None:
        self._future: Future[str] = Future()

    def done(self) -> bool:
        return self._future.done()

    def submit(self, value: str) -> bool:
        if self._future.done():
            return False
        self._future.set_result(value)
        return True

    def cancel(self, *, title: str | None = None) -> bool:
        if self._future.done():
            return False
        self._future.set_exception(InputCanceledError(title=title))
        return True

    def result(self, timeout: Optional[float] = None) -> str:
        return self._future.result(timeout)

    def __await__(self) -> Generator[Any, None, str]:
        return asyncio.wrap_future(self._future).__await__()


__all__ = ["InputCanceledError", "InputCompletion"]
