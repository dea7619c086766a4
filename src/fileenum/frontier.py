# Explicit work list of directories waiting to be scanned.
# Replaces recursion so traversal depth costs heap, not stack frames.

from __future__ import annotations

from typing import Iterable, List


class Frontier:
    """Last-in-first-out stack of pending directory paths."""

    def __init__(self, root: str):
        self._stack: List[str] = [root]

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def push_children(self, children: Iterable[str]) -> None:
        # Push in reverse so the first child ends up on top and is popped
        # first, giving the same order as a recursive pre-order walk.
        for child in reversed(list(children)):
            self._stack.append(child)

    def pop(self) -> str:
        return self._stack.pop()
