"""Shared types for the motion engine: status codes, mutations, primitives, stages."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Union

from tick_motion.easing import EasingRef

if TYPE_CHECKING:
    from tick_motion.animator import Animator

FrameFn = Callable[[int], None]
StageFn = Callable[..., Any]


class Status(IntEnum):
    """Result of one call to a primitive, sequence or stage.

    ``DONE`` is truthy, so plain callables returning ``True``/``False``
    compose with the engine as well.
    """

    CONTINUE = 0
    DONE = 1


class Tag(str, Enum):
    """Per-item behaviour inside a ``mix`` primitive."""

    FROM = "from"
    TO = "to"
    ANIMATE = "animate"


class MutationError(ValueError):
    """Raised when a mutation is malformed (no ``changes`` mapping, bad tag)."""


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Mutation:
    """One target and the property changes to apply to it.

    What ``changes`` means depends on the operator: a delta for ``animate``
    and ``from_``, an absolute goal for ``to``.
    """

    target: Any
    changes: Mapping[str, Any]
    ease: EasingRef = "linear"
    tag: Tag = Tag.ANIMATE

    def __post_init__(self) -> None:
        if not isinstance(self.changes, Mapping):
            raise MutationError(
                f"changes must be a mapping, got {type(self.changes).__name__}"
            )
        try:
            self.tag = Tag(self.tag)
        except ValueError:
            raise MutationError(f"Unknown mutation tag {self.tag!r}") from None

    def numeric_changes(self) -> list[tuple[str, float]]:
        """Changes that take part in tweening, in declaration order."""
        return [(k, v) for k, v in self.changes.items() if is_number(v)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Mutation:
        """Build from ``{"target", "changes", "parameters": {"ease"}, "tag"}``."""
        if "changes" not in data:
            raise MutationError("mutation has no 'changes'")
        params = data.get("parameters") or {}
        return cls(
            target=data.get("target"),
            changes=data["changes"],
            ease=data.get("ease", params.get("ease", "linear")),
            tag=data.get("tag", Tag.ANIMATE),
        )


MutationLike = Union[Mutation, Mapping[str, Any]]


def coerce_mutations(items: Iterable[MutationLike]) -> list[Mutation]:
    out: list[Mutation] = []
    for item in items:
        if isinstance(item, Mutation):
            out.append(item)
        elif isinstance(item, Mapping):
            out.append(Mutation.from_dict(item))
        else:
            raise MutationError(
                f"Expected Mutation or mapping, got {type(item).__name__}"
            )
    return out


@dataclass(eq=False)
class Primitive:
    """Smallest schedulable animation unit.

    Calling it runs one frame through ``animator.step`` and reports
    ``Status``.  Anything captured on the first frame lives in the
    animator's primitive cache under keys that start with ``id``.
    """

    animator: Animator = field(repr=False)
    id: int
    kind: str
    duration: int
    frame_fn: FrameFn = field(repr=False)

    def __call__(self) -> Status:
        return self.animator.step(self.duration, self.frame_fn)


@dataclass(frozen=True)
class DirectStage:
    """Stage that calls ``func(*args)`` directly."""

    func: StageFn
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class NamedStage:
    """Stage resolved through the animator's ``StageRegistry`` on every tick."""

    name: str
    args: tuple[Any, ...] = ()


Stage = Union[DirectStage, NamedStage]


@dataclass(frozen=True)
class Found:
    func: StageFn


@dataclass(frozen=True)
class NotFound:
    name: str


Resolution = Union[Found, NotFound]
