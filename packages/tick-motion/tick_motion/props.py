"""Property access on tween targets: mappings by key, everything else by attribute."""
from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

logger = logging.getLogger(__name__)


def read(target: Any, name: str) -> Any:
    """Current value of ``name`` on ``target``, or ``None`` if it has none."""
    if isinstance(target, Mapping):
        return target.get(name)
    return getattr(target, name, None)


def write(target: Any, name: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def has(target: Any, name: str) -> bool:
    if isinstance(target, Mapping):
        return name in target
    return hasattr(target, name)


def set_all(target: Any, **values: Any) -> None:
    """Assign several properties at once.

    Unknown names and writes the target rejects are logged and skipped, so
    a reset frame keeps going past one bad property.
    """
    for name, value in values.items():
        if not has(target, name):
            logger.warning("Unknown property %r on %r", name, target)
            continue
        try:
            write(target, name, value)
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Failed to set %r on %r: %s", name, target, exc)
