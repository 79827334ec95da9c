"""Linear undo/redo history of whole-buffer snapshots."""

from __future__ import annotations

from typing import List

from .snapshot import Snapshot


class SnapshotStack:
    """Committed snapshots plus the live one being edited.

    ``_versions[_index]`` is the last commit the live snapshot descends from.
    Edits go to ``current``; ``tag`` turns them into a new commit and drops any
    redo tail. A tag that finds the text unchanged only refreshes the
    commit's cursor, offset and mode.
    """

    def __init__(self, value: str = "") -> None:
        self._versions: List[Snapshot] = []
        self._index: int = 0
        self._current = Snapshot()
        self.reset(value)

    def __len__(self) -> int:
        return len(self._versions)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Snapshot:
        return self._current

    def reset(self, value: str) -> None:
        self._versions = [Snapshot(value=value)]
        self._index = 0
        self._current = self._versions[0].copy()

    def tag(self) -> bool:
        committed = self._versions[self._index]
        if committed.value == self._current.value:
            self._versions[self._index] = self._current.copy()
            return False

        del self._versions[self._index + 1 :]
        self._versions.append(self._current.copy())
        self._index += 1
        return True

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._versions) - 1

    def undo(self) -> bool:
        self.tag()
        if not self.can_undo():
            return False
        self._index -= 1
        self._current = self._versions[self._index].copy()
        return True

    def redo(self) -> bool:
        self.tag()
        if not self.can_redo():
            return False
        self._index += 1
        self._current = self._versions[self._index].copy()
        return True


__all__ = ["SnapshotStack"]
