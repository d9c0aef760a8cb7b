"""tick-motion - Frame-stepped property tweening, sequences and stage programs."""
from __future__ import annotations

from tick_motion.animator import Animator
from tick_motion.cache import CaptureCache
from tick_motion.driver import Driver
from tick_motion.easing import EASINGS, ease
from tick_motion.registry import StageRegistry
from tick_motion.types import (
    DirectStage,
    Found,
    Mutation,
    MutationError,
    NamedStage,
    NotFound,
    Primitive,
    Status,
    Tag,
)

__all__ = [
    "Animator",
    "Driver",
    "CaptureCache",
    "StageRegistry",
    "EASINGS",
    "ease",
    "Mutation",
    "MutationError",
    "Primitive",
    "Status",
    "Tag",
    "DirectStage",
    "NamedStage",
    "Found",
    "NotFound",
]
