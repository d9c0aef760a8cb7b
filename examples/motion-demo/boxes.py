"""Box target and renderer."""
from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Box:
    """Rectangle with the properties the demo program animates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0
    opacity: float = 1.0
    rotation: float = 0.0
    color: tuple[int, int, int] = (0, 200, 220)


def draw_box(surface: pygame.Surface, box: Box) -> None:
    """Draw ``box`` rotated around its center with its opacity as alpha."""
    w = max(int(box.width), 1)
    h = max(int(box.height), 1)
    alpha = max(0, min(255, int(box.opacity * 255)))

    sprite = pygame.Surface((w, h), pygame.SRCALPHA)
    sprite.fill((*box.color, alpha))
    rotated = pygame.transform.rotate(sprite, -box.rotation)

    center = (box.x + w / 2, box.y + h / 2)
    surface.blit(rotated, rotated.get_rect(center=center))
