"""CaptureCache - values computed on a scope's first frame and reused until it completes."""
from __future__ import annotations

from typing import Any, Callable, Hashable, TypeVar

T = TypeVar("T")


class CaptureCache:
    """Two maps scoped to one primitive or one sequence run.

    ``capture`` keeps the first value offered for a key, ``once`` keeps the
    result of the first function call for a key.  ``None`` and ``0`` are
    legitimate stored values.  The owning animator calls ``clear`` when the
    scope completes.
    """

    def __init__(self) -> None:
        self._values: dict[Hashable, Any] = {}
        self._memo: dict[Hashable, Any] = {}

    def capture(self, key: Hashable, value: T) -> T:
        if key not in self._values:
            self._values[key] = value
        return self._values[key]

    def once(self, key: Hashable, fn: Callable[[], T]) -> T:
        if key not in self._memo:
            self._memo[key] = fn()
        return self._memo[key]

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._values.get(key, default)

    def clear(self) -> None:
        self._values.clear()
        self._memo.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values or key in self._memo

    def __len__(self) -> int:
        return len(self._values) + len(self._memo)
