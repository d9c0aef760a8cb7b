"""StageRegistry - named stage functions for NamedStage dispatch."""
from __future__ import annotations

from tick_motion.types import Found, NotFound, Resolution, StageFn


class StageRegistry:
    """Maps stage names to sequence-producing callables."""

    def __init__(self) -> None:
        self._funcs: dict[str, StageFn] = {}

    def register(self, name: str, fn: StageFn) -> None:
        """Register a named stage function. Overwrites if already registered."""
        self._funcs[name] = fn

    def unregister(self, name: str) -> None:
        self._funcs.pop(name, None)

    def resolve(self, name: str) -> Resolution:
        """Look up a name. Missing names give ``NotFound``, never an exception."""
        fn = self._funcs.get(name)
        if fn is None:
            return NotFound(name)
        return Found(fn)

    def has(self, name: str) -> bool:
        return name in self._funcs

    def names(self) -> list[str]:
        """List all registered stage names."""
        return list(self._funcs)
