"""Easing functions for tween interpolation.

Every function maps normalized progress ``t`` in [0, 1] to eased progress,
with 0 -> 0 and 1 -> 1.  Back and elastic curves overshoot between the
endpoints on purpose.
"""
from __future__ import annotations

import math
import re
from typing import Callable, Union

EasingFn = Callable[[float], float]
EasingRef = Union[str, EasingFn]

_C1 = 1.70158
_C2 = _C1 * 1.525
_C3 = _C1 + 1
_C4 = (2 * math.pi) / 3

_N1 = 7.5625
_D1 = 2.75


def linear(t: float) -> float:
    return t


# Quadratic

def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


# Cubic

def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return (t - 1) ** 3 + 1


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return (t - 1) * (2 * t - 2) ** 2 + 1


# Exponential

def ease_in_expo(t: float) -> float:
    if t == 0:
        return 0.0
    return 2 ** (10 * (t - 1))


def ease_out_expo(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    t *= 2
    if t < 1:
        return 0.5 * 2 ** (10 * (t - 1))
    return 0.5 * (2 - 2 ** (-10 * (t - 1)))


# Back

def ease_in_back(t: float) -> float:
    return _C3 * t * t * t - _C1 * t * t


def ease_out_back(t: float) -> float:
    return 1 + _C3 * (t - 1) ** 3 + _C1 * (t - 1) ** 2


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        return ((2 * t) ** 2 * ((_C2 + 1) * 2 * t - _C2)) / 2
    return ((2 * t - 2) ** 2 * ((_C2 + 1) * (t * 2 - 2) + _C2) + 2) / 2


# Elastic

def ease_out_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return 2 ** (-10 * t) * math.sin((t * 10 - 0.75) * _C4) + 1


def drag(t: float) -> float:
    """Fast start, long deceleration."""
    return 1 - (1 - t) ** 3


# Bounce

def ease_out_bounce(t: float) -> float:
    if t < 1 / _D1:
        return _N1 * t * t
    if t < 2 / _D1:
        t -= 1.5 / _D1
        return _N1 * t * t + 0.75
    if t < 2.5 / _D1:
        t -= 2.25 / _D1
        return _N1 * t * t + 0.9375
    t -= 2.625 / _D1
    return _N1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1 - ease_out_bounce(1 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1 - ease_out_bounce(1 - 2 * t)) * 0.5
    return (1 + ease_out_bounce(2 * t - 1)) * 0.5


EASINGS: dict[str, EasingFn] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_expo": ease_in_expo,
    "ease_out_expo": ease_out_expo,
    "ease_in_out_expo": ease_in_out_expo,
    "ease_in_back": ease_in_back,
    "ease_out_back": ease_out_back,
    "ease_in_out_back": ease_in_out_back,
    "ease_out_elastic": ease_out_elastic,
    "drag": drag,
    "bounce": ease_out_bounce,
    "ease_out_bounce": ease_out_bounce,
    "ease_in_bounce": ease_in_bounce,
    "ease_in_out_bounce": ease_in_out_bounce,
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def ease(name: EasingRef | None) -> EasingFn:
    """Resolve an easing by name.  Never fails: unknown names give ``linear``.

    Accepts canonical snake_case names (``"ease_in_out_cubic"``), their
    camelCase spelling (``"easeInOutCubic"``) or a callable, which is
    returned as is.
    """
    if callable(name):
        return name
    if not name or not isinstance(name, str):
        return linear
    fn = EASINGS.get(name)
    if fn is None:
        fn = EASINGS.get(_snake(name), linear)
    return fn
