"""Animator - frame stepping, sequences and the looping stage program."""
from __future__ import annotations

import itertools
import logging
import math
from typing import Any, Callable, Iterable, Sequence

from tick_motion import operators
from tick_motion.cache import CaptureCache
from tick_motion.easing import EasingRef
from tick_motion.path import Point, make_path_frame
from tick_motion.registry import StageRegistry
from tick_motion.types import (
    DirectStage,
    FrameFn,
    MutationLike,
    NamedStage,
    NotFound,
    Primitive,
    Stage,
    StageFn,
    Status,
    coerce_mutations,
)

logger = logging.getLogger(__name__)

_Factory = Callable[[CaptureCache, int, Sequence[Any], int], FrameFn]


class Animator:
    """Owns every counter and cache of one animation program.

    Nothing here keeps time.  Whoever drives the animator calls ``tick()``
    once per frame; each call runs at most one primitive frame and at most
    one sequence or program advance.
    """

    def __init__(self, delay_mult: float = 1.0, loop: bool = False) -> None:
        if delay_mult <= 0:
            raise ValueError("delay_mult must be positive")
        self._delay_mult = delay_mult
        self.loop = loop

        self._frame = 0
        self._sequence_step = 0
        self._program_index = 0
        self._running = False

        self.primitive_cache = CaptureCache()
        self.sequence_cache = CaptureCache()

        self._stages: list[Stage] = []
        self._registry = StageRegistry()
        self._ids = itertools.count()

    # --- State ---

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def sequence_step(self) -> int:
        return self._sequence_step

    @property
    def program_index(self) -> int:
        return self._program_index

    @property
    def running(self) -> bool:
        return self._running

    @property
    def delay_mult(self) -> float:
        return self._delay_mult

    @property
    def registry(self) -> StageRegistry:
        return self._registry

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    def set_delay_mult(self, value: float) -> None:
        """Scale the durations of primitives built from now on.

        Ignored while a primitive is mid-flight (``frame > 0``) or when
        ``value`` is not positive.
        """
        if self._frame == 0 and value > 0:
            self._delay_mult = value
        else:
            logger.debug(
                "Ignoring delay_mult=%r (frame=%d)", value, self._frame
            )

    # --- Stepping ---

    def step(self, frame_count: int, per_frame: FrameFn) -> Status:
        """Run ``per_frame(frame)`` until ``frame_count`` frames have run.

        The call after the last frame clears the primitive cache and
        returns ``DONE`` without calling ``per_frame``.
        """
        if self._frame < frame_count:
            per_frame(self._frame)
            self._frame += 1
            return Status.CONTINUE
        self.primitive_cache.clear()
        return Status.DONE

    def sequence(self, primitives: Sequence[Callable[[], Any]]) -> Status:
        """Advance an ordered list of primitives by one call.

        Only the current primitive runs.  When it reports done the frame
        counter resets for the next one.  After the last primitive the step
        index moves one past the end, the sequence cache is cleared and
        ``DONE`` is returned; calling again after that returns ``DONE``
        without running anything.
        """
        count = len(primitives)
        if self._sequence_step > count:
            return Status.DONE
        if self._sequence_step < count:
            if not primitives[self._sequence_step]():
                return Status.CONTINUE
            self._frame = 0
            self._sequence_step += 1
            if self._sequence_step < count:
                return Status.CONTINUE
        self._sequence_step += 1
        self.sequence_cache.clear()
        return Status.DONE

    # --- Program ---

    def add_stage(self, stage: Stage | StageFn) -> None:
        if not isinstance(stage, (DirectStage, NamedStage)):
            stage = DirectStage(stage)
        self._stages.append(stage)

    def register(self, name: str, fn: StageFn) -> None:
        """Register ``fn`` for stages added as ``NamedStage(name)``."""
        self._registry.register(name, fn)

    def truncate(self, length: int) -> None:
        """Drop stages from ``length`` on; a running stage still finishes."""
        del self._stages[length:]

    def tick(self) -> None:
        if self._program_index >= len(self._stages):
            self._end_program()
            return

        self._running = True
        stage = self._stages[self._program_index]
        if isinstance(stage, NamedStage):
            found = self._registry.resolve(stage.name)
            if isinstance(found, NotFound):
                logger.debug("No stage function named %r", found.name)
                return
            func = found.func
        else:
            func = stage.func

        if not func(*stage.args):
            return
        self._frame = 0
        self._sequence_step = 0
        self._program_index += 1
        logger.debug("Stage %d complete", self._program_index - 1)
        if self._program_index >= len(self._stages):
            self._end_program()

    def _end_program(self) -> None:
        if self._running:
            logger.debug("Program complete (loop=%s)", self.loop)
        if self.loop:
            self._program_index = 0
        self._running = False

    # --- Primitive builders ---

    def _frames(self, duration: float) -> int:
        if duration <= 1:
            return 1
        return max(1, math.floor(duration * self._delay_mult))

    def _build(
        self,
        kind: str,
        factory: _Factory,
        duration: float,
        mutations: Iterable[MutationLike],
    ) -> Primitive:
        items = coerce_mutations(mutations)
        frames = self._frames(duration) if items else 0
        pid = next(self._ids)
        frame_fn = factory(self.primitive_cache, pid, items, frames)
        return Primitive(self, pid, kind, frames, frame_fn)

    def animate(self, duration: float, mutations: Iterable[MutationLike]) -> Primitive:
        """Apply deltas with each mutation's easing; lands exactly on ``start + delta``."""
        return self._build("animate", operators.make_animate_frame, duration, mutations)

    def to(self, duration: float, mutations: Iterable[MutationLike]) -> Primitive:
        """Move linearly to the absolute values in ``changes``."""
        return self._build("to", operators.make_to_frame, duration, mutations)

    def from_(self, duration: float, mutations: Iterable[MutationLike]) -> Primitive:
        """Jump by ``changes`` on the first frame, then return to the start."""
        return self._build("from", operators.make_from_frame, duration, mutations)

    def mix(self, duration: float, mutations: Iterable[MutationLike]) -> Primitive:
        """Per-mutation ``from``/``to``/``animate`` behaviour chosen by its tag."""
        return self._build("mix", operators.make_mix_frame, duration, mutations)

    def delay(self, duration: float) -> Primitive:
        frames = 0 if duration <= 0 else self._frames(duration)
        return Primitive(self, next(self._ids), "delay", frames, operators.noop_frame)

    def animate_func(self, duration: float, fn: Callable[[int], object]) -> Primitive:
        """Call ``fn(frame)`` once per frame."""
        frames = self._frames(duration)
        return Primitive(
            self, next(self._ids), "func", frames, operators.make_func_frame(fn)
        )

    def path(
        self,
        target: Any,
        points: Sequence[Point],
        duration: float = 100,
        easing: EasingRef = "linear",
    ) -> Primitive:
        """Move ``target.x``/``target.y`` along a Catmull-Rom curve through ``points``."""
        pid = next(self._ids)
        if len(points) < 2:
            return Primitive(self, pid, "path", 0, operators.noop_frame)
        frames = self._frames(duration)
        frame_fn = make_path_frame(target, points, frames, easing)
        return Primitive(self, pid, "path", frames, frame_fn)

    # --- One-primitive stages ---

    def add_primitive_stage(self, primitive: Callable[[], Any]) -> None:
        """Schedule a single primitive as its own stage."""
        self.add_stage(DirectStage(self.sequence, ([primitive],)))

    def standalone_animate(self, duration: float, mutations: Iterable[MutationLike]) -> None:
        self.add_primitive_stage(self.animate(duration, mutations))

    def standalone_to(self, duration: float, mutations: Iterable[MutationLike]) -> None:
        self.add_primitive_stage(self.to(duration, mutations))

    def standalone_from(self, duration: float, mutations: Iterable[MutationLike]) -> None:
        self.add_primitive_stage(self.from_(duration, mutations))

    def standalone_mix(self, duration: float, mutations: Iterable[MutationLike]) -> None:
        self.add_primitive_stage(self.mix(duration, mutations))

    def standalone_delay(self, duration: float) -> None:
        self.add_primitive_stage(self.delay(duration))

    def standalone_func(self, duration: float, fn: Callable[[int], object]) -> None:
        self.add_primitive_stage(self.animate_func(duration, fn))

    def standalone_path(
        self,
        target: Any,
        points: Sequence[Point],
        duration: float = 100,
        easing: EasingRef = "linear",
    ) -> None:
        """Schedule a path stage.  Fewer than two points schedules nothing."""
        if len(points) < 2:
            return
        self.add_primitive_stage(self.path(target, points, duration, easing))
