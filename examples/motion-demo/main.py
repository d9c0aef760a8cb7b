"""Motion Demo - two boxes driven by a looping tick-motion program.

Box 1 runs one multi-step sequence: reset, wait, grow and spin toward a
target, wait, slide with ease_out, fade out.  Box 2 runs a chain of
standalone stages: reset, drag across the screen, wait, fade, reset.

Controls:
  Up/Down  Slow down / speed up box 1 from its next pass (delay_mult)
  L        Toggle looping
  Esc      Quit
"""
from __future__ import annotations

import sys

import pygame

from boxes import Box, draw_box
from tick_motion import Animator, Mutation, props

SCREEN_W = 1000
SCREEN_H = 400
FPS = 60
TPS = 100

BG_COLOR = (20, 20, 30)
TEXT_COLOR = (200, 200, 210)


def build_intro(animator: Animator, box1: Box) -> list:
    return [
        animator.animate_func(1, lambda n: props.set_all(
            box1, x=10, y=50, opacity=0, width=100, height=100, rotation=0,
        )),
        animator.delay(50),
        animator.to(60, [Mutation(box1, {
            "x": 200, "opacity": 1, "rotation": 90, "width": 200, "height": 200,
        })]),
        animator.delay(20),
        animator.animate(80, [Mutation(box1, {"x": 500}, ease="ease_out")]),
        animator.to(60, [Mutation(box1, {"opacity": 0})]),
    ]


def build_program(animator: Animator, box1: Box, box2: Box) -> None:
    def intro_stage():
        # Rebuilt once per pass so a new delay_mult applies from the next pass.
        intro = animator.sequence_cache.once("intro", lambda: build_intro(animator, box1))
        return animator.sequence(intro)

    animator.add_stage(intro_stage)

    def reset_box2(n: int) -> None:
        props.set_all(box2, x=200, y=250, opacity=1)

    animator.standalone_func(1, reset_box2)
    animator.standalone_animate(150, [Mutation(box2, {"x": 600}, ease="drag")])
    animator.standalone_delay(20)
    animator.standalone_animate(20, [Mutation(box2, {"opacity": -1})])
    animator.standalone_func(1, reset_box2)


def draw_status(surface: pygame.Surface, font: pygame.font.Font, animator: Animator) -> None:
    lines = [
        f"stage {animator.program_index}/{len(animator.stages)}",
        f"frame {animator.frame}",
        f"delay_mult {animator.delay_mult:.2f}",
        f"loop {'on' if animator.loop else 'off'}",
        f"running {animator.running}",
    ]
    for i, text in enumerate(lines):
        surface.blit(font.render(text, True, TEXT_COLOR), (10, 10 + i * 16))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Motion Demo - tick-motion")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    box1 = Box(color=(220, 90, 60))
    box2 = Box(color=(60, 200, 120))
    animator = Animator(loop=True)
    build_program(animator, box1, box2)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_UP:
                    animator.set_delay_mult(animator.delay_mult * 1.25)
                elif event.key == pygame.K_DOWN:
                    animator.set_delay_mult(animator.delay_mult * 0.8)
                elif event.key == pygame.K_l:
                    animator.loop = not animator.loop

        # --- Tick ---
        while accumulator >= tick_interval:
            animator.tick()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_box(screen, box1)
        draw_box(screen, box2)
        draw_status(screen, font, animator)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
