"""FIFO queue of directories waiting to be expanded."""

from collections import deque
from typing import Deque, Iterable

from ..exceptions import QueueEmptyError


class DirectoryQueue:
    """First-in-first-out queue of pending directory paths.

    FIFO order is what makes the traversal breadth-first: every directory
    found while draining level N is appended behind everything already
    waiting, so it is only expanded after the rest of level N.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: Deque[str] = deque(paths)

    def enqueue(self, path: str) -> None:
        """Append ``path`` as the new tail."""
        self._paths.append(path)

    def dequeue(self) -> str:
        """Remove and return the head.

        Raises:
            QueueEmptyError: If no paths remain
        """
        if not self._paths:
            raise QueueEmptyError("dequeue from an empty directory queue")
        return self._paths.popleft()

    def is_empty(self) -> bool:
        return not self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __bool__(self) -> bool:
        return bool(self._paths)

    def __repr__(self) -> str:
        return f"DirectoryQueue({list(self._paths)!r})"
