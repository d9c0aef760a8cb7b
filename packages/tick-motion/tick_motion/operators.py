"""Per-frame functions behind the tween operators.

Each ``make_*_frame`` factory returns a ``frame(n)`` callable for
``Animator.step``.  Start values, goals and snapshots are kept in the
animator's primitive cache under keys prefixed by the primitive id, so the
frame functions hold no state of their own and can be re-run after the
cache is cleared.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from tick_motion import props
from tick_motion.cache import CaptureCache
from tick_motion.easing import ease
from tick_motion.types import FrameFn, Mutation, Tag, is_number

logger = logging.getLogger(__name__)

_SNAPSHOT = "snapshot"
_OFFSET = "offset"


def _start(
    cache: CaptureCache, key: tuple, mutation: Mutation, name: str, n: int,
) -> float | None:
    start = cache.capture(key, props.read(mutation.target, name))
    if not is_number(start):
        if n == 0:
            logger.debug("Skipping non-numeric %r on %r", name, mutation.target)
        return None
    return start


def _nudge(target: Any, name: str, amount: float) -> None:
    current = props.read(target, name)
    if is_number(current):
        props.write(target, name, current + amount)


def _eased(
    cache: CaptureCache, key: tuple, mutation: Mutation, name: str,
    delta: float, n: int, duration: int,
) -> None:
    start = _start(cache, key, mutation, name, n)
    if start is None:
        return
    if n == duration - 1:
        props.write(mutation.target, name, start + delta)
        return
    curve = ease(mutation.ease)
    t = min(n / duration, 1.0)
    props.write(mutation.target, name, start + delta * curve(t))


def _flat(
    cache: CaptureCache, key: tuple, mutation: Mutation, name: str,
    delta: float, n: int, duration: int,
) -> None:
    start = _start(cache, key, mutation, name, n)
    if start is None:
        return
    if n == duration - 1:
        props.write(mutation.target, name, start + delta)
        return
    _nudge(mutation.target, name, delta / duration)


def _converge(
    cache: CaptureCache, key: tuple, mutation: Mutation, name: str,
    goal: float, n: int, duration: int,
) -> None:
    start = _start(cache, key, mutation, name, n)
    if start is None:
        return
    increment = cache.once(key, lambda: (goal - start) / duration)
    if n == duration - 1:
        props.write(mutation.target, name, goal)
        return
    _nudge(mutation.target, name, increment)


def _return(
    mutation: Mutation, name: str, origin: float, offset: float,
    n: int, duration: int,
) -> None:
    if n == duration - 1:
        props.write(mutation.target, name, origin)
    elif n > 0:
        _nudge(mutation.target, name, -offset / (duration - 1))


def _snapshot_and_offset(
    cache: CaptureCache, pid: int, mutations: Sequence[Mutation],
) -> dict[tuple[int, str], float]:
    """Record original values of every ``from`` property, then offset them once.

    Returns ``{(item index, name): original value}``.  Both steps run only
    on the first frame of the primitive.
    """

    def snapshot() -> dict[tuple[int, str], float]:
        origins: dict[tuple[int, str], float] = {}
        for index, mutation in enumerate(mutations):
            if mutation.tag is not Tag.FROM:
                continue
            for name, _ in mutation.numeric_changes():
                value = props.read(mutation.target, name)
                if is_number(value):
                    origins[(index, name)] = value
                else:
                    logger.debug(
                        "Skipping non-numeric %r on %r", name, mutation.target
                    )
        return origins

    def apply_offsets() -> bool:
        for index, name in origins:
            mutation = mutations[index]
            _nudge(mutation.target, name, mutation.changes[name])
        return True

    origins = cache.once((pid, _SNAPSHOT), snapshot)
    cache.once((pid, _OFFSET), apply_offsets)
    return origins


def make_animate_frame(
    cache: CaptureCache, pid: int, mutations: Sequence[Mutation], duration: int,
) -> FrameFn:
    """Eased delta: ``start + delta * ease(n / duration)``, exact on the last frame."""

    def frame(n: int) -> None:
        if duration == 0:
            return
        for index, mutation in enumerate(mutations):
            for name, delta in mutation.numeric_changes():
                _eased(cache, (pid, index, name), mutation, name, delta, n, duration)

    return frame


def make_to_frame(
    cache: CaptureCache, pid: int, mutations: Sequence[Mutation], duration: int,
) -> FrameFn:
    """Fixed increments toward absolute goals, captured on the first frame."""

    def frame(n: int) -> None:
        for index, mutation in enumerate(mutations):
            for name, goal in mutation.numeric_changes():
                _converge(cache, (pid, index, name), mutation, name, goal, n, duration)

    return frame


def make_from_frame(
    cache: CaptureCache, pid: int, mutations: Sequence[Mutation], duration: int,
) -> FrameFn:
    """Jump by the offset on the first frame, then glide back to the original."""
    items = [
        Mutation(m.target, m.changes, ease=m.ease, tag=Tag.FROM) for m in mutations
    ]

    def frame(n: int) -> None:
        origins = _snapshot_and_offset(cache, pid, items)
        for (index, name), origin in origins.items():
            mutation = items[index]
            _return(mutation, name, origin, mutation.changes[name], n, duration)

    return frame


def make_mix_frame(
    cache: CaptureCache, pid: int, mutations: Sequence[Mutation], duration: int,
) -> FrameFn:
    """Per-item ``from``/``to``/``animate`` behaviour sharing one snapshot."""

    def frame(n: int) -> None:
        origins = _snapshot_and_offset(cache, pid, mutations)
        for index, mutation in enumerate(mutations):
            for name, value in mutation.numeric_changes():
                key = (pid, index, name)
                if mutation.tag is Tag.FROM:
                    origin = origins.get((index, name))
                    if origin is not None:
                        _return(mutation, name, origin, value, n, duration)
                elif mutation.tag is Tag.TO:
                    _converge(cache, key, mutation, name, value, n, duration)
                else:
                    _flat(cache, key, mutation, name, value, n, duration)

    return frame


def make_func_frame(fn: Callable[[int], object]) -> FrameFn:
    def frame(n: int) -> None:
        fn(n)

    return frame


def noop_frame(n: int) -> None:
    pass
