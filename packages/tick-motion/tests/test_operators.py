"""Tests for the tween operators: animate, to, from_, mix, delay, animate_func."""

from dataclasses import dataclass

import pytest

from tick_motion import Animator, Mutation, MutationError, Status, Tag


@dataclass
class Box:
    """Test target with attribute properties."""

    x: float = 0.0
    y: float = 0.0
    opacity: float = 1.0
    label: str = "box"


def call(primitive, times):
    """Call ``primitive`` ``times`` times and return the last status."""
    status = None
    for _ in range(times):
        status = primitive()
    return status


class TestAnimate:
    """Delta-apply with easing."""

    def test_reaches_start_plus_delta(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.animate(10, [Mutation(box, {"x": 100})])
        assert call(prim, 10) is Status.CONTINUE
        assert box.x == 100
        assert prim() is Status.DONE

    def test_linear_midway(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.animate(10, [Mutation(box, {"x": 100})])
        call(prim, 5)
        # frames 0..4 ran; frame 4 sits at t=0.4
        assert box.x == pytest.approx(40.0)

    def test_first_frame_is_start(self):
        animator = Animator()
        box = Box(x=3.0)
        prim = animator.animate(10, [Mutation(box, {"x": 100})])
        prim()
        assert box.x == 3.0

    def test_easing_applied(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.animate(10, [Mutation(box, {"x": 100}, ease="ease_in")])
        call(prim, 5)
        assert box.x == pytest.approx(16.0)

    @pytest.mark.parametrize("duration", [2, 3, 7, 10, 33])
    @pytest.mark.parametrize("easing", ["linear", "ease_out", "ease_in_out_back", "bounce"])
    def test_exact_end_value(self, duration, easing):
        """No floating drift: the final frame lands on start + delta exactly."""
        animator = Animator()
        box = Box(x=0.3)
        prim = animator.animate(duration, [Mutation(box, {"x": 0.1}, ease=easing)])
        call(prim, duration)
        assert box.x == 0.3 + 0.1

    def test_start_captured_once(self):
        """External writes mid-run do not move the captured start."""
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.animate(10, [Mutation(box, {"x": 50})])
        call(prim, 3)
        box.x = 999.0
        call(prim, 7)
        assert box.x == 50

    def test_multiple_targets_and_properties(self):
        animator = Animator()
        a, b = Box(x=1.0, y=2.0), {"x": 10.0}
        prim = animator.animate(4, [Mutation(a, {"x": 1, "y": -2}), Mutation(b, {"x": 5})])
        call(prim, 4)
        assert (a.x, a.y) == (2.0, 0.0)
        assert b["x"] == 15.0

    def test_dict_mutations_with_parameters(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.animate(
            10, [{"target": box, "changes": {"x": 100}, "parameters": {"ease": "easeIn"}}]
        )
        call(prim, 5)
        assert box.x == pytest.approx(16.0)

    def test_non_numeric_entries_skipped(self):
        animator = Animator()
        box = Box(x=0.0, label="box")
        prim = animator.animate(3, [Mutation(box, {"x": 3, "label": "moved"})])
        call(prim, 3)
        assert box.x == 3
        assert box.label == "box"

    def test_non_numeric_target_value_skipped(self):
        animator = Animator()
        box = Box(label="box")
        prim = animator.animate(3, [Mutation(box, {"label": 5})])
        call(prim, 4)
        assert box.label == "box"

    def test_bool_changes_are_not_numbers(self):
        animator = Animator()
        target = {"visible": 0}
        prim = animator.animate(2, [Mutation(target, {"visible": True})])
        call(prim, 3)
        assert target["visible"] == 0

    def test_empty_mutation_list_completes_without_frames(self):
        animator = Animator()
        prim = animator.animate(10, [])
        assert prim.duration == 0
        assert prim() is Status.DONE
        assert animator.frame == 0

    def test_captures_namespaced_by_primitive(self):
        animator = Animator()
        box = Box(x=0.0)
        first = animator.animate(3, [Mutation(box, {"x": 10})])
        second = animator.animate(3, [Mutation(box, {"x": 10})])
        assert first.id != second.id
        first()
        assert (first.id, 0, "x") in animator.primitive_cache
        assert (second.id, 0, "x") not in animator.primitive_cache


class TestDuration:
    """Duration normalization shared by every operator."""

    @pytest.mark.parametrize("requested", [-5, 0, 0.5, 1])
    def test_small_durations_clamp_to_one_frame(self, requested):
        animator = Animator()
        prim = animator.to(requested, [Mutation(Box(), {"x": 1})])
        assert prim.duration == 1

    def test_fractional_duration_floors(self):
        animator = Animator()
        assert animator.to(7.9, [Mutation(Box(), {"x": 1})]).duration == 7

    def test_delay_mult_scales_at_construction(self):
        animator = Animator(delay_mult=2.5)
        assert animator.animate(10, [Mutation(Box(), {"x": 1})]).duration == 25

    def test_scaled_duration_never_below_one(self):
        animator = Animator(delay_mult=0.1)
        assert animator.animate(3, [Mutation(Box(), {"x": 1})]).duration == 1

    def test_one_frame_animate_lands_on_end(self):
        animator = Animator()
        box = Box(x=1.0)
        prim = animator.animate(1, [Mutation(box, {"x": 4})])
        assert prim() is Status.CONTINUE
        assert box.x == 5.0
        assert prim() is Status.DONE


class TestTo:
    """Converge linearly to absolute goals."""

    def test_fixed_increments(self):
        animator = Animator()
        box = Box(x=10.0)
        prim = animator.to(4, [Mutation(box, {"x": 50})])
        prim()
        assert box.x == 20.0
        call(prim, 2)
        assert box.x == 40.0
        prim()
        assert box.x == 50.0
        assert prim() is Status.DONE

    @pytest.mark.parametrize("duration", [2, 3, 7, 10, 33])
    def test_exact_goal(self, duration):
        animator = Animator()
        box = Box(x=0.1)
        prim = animator.to(duration, [Mutation(box, {"x": 0.7})])
        call(prim, duration)
        assert box.x == 0.7

    def test_ignores_easing(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.to(4, [Mutation(box, {"x": 8}, ease="ease_in")])
        call(prim, 2)
        assert box.x == 4.0

    def test_increment_computed_once(self):
        """A nudge mid-run shifts the path but not the per-frame step."""
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.to(4, [Mutation(box, {"x": 40})])
        prim()
        box.x += 100
        prim()
        assert box.x == 120.0
        call(prim, 2)
        assert box.x == 40

    def test_multiple_properties(self):
        animator = Animator()
        box = Box(x=0.0, opacity=0.0)
        prim = animator.to(5, [Mutation(box, {"x": 200, "opacity": 1})])
        call(prim, 5)
        assert (box.x, box.opacity) == (200, 1)


class TestFrom:
    """Jump to an offset, then glide back to the original value."""

    def test_offset_then_return(self):
        animator = Animator()
        box = Box(x=5.0)
        prim = animator.from_(10, [Mutation(box, {"x": 10})])
        prim()
        assert box.x == 15.0
        call(prim, 9)
        assert box.x == 5.0
        assert prim() is Status.DONE

    def test_moves_back_steadily(self):
        animator = Animator()
        box = Box(x=5.0)
        prim = animator.from_(10, [Mutation(box, {"x": 10})])
        call(prim, 2)
        assert box.x == pytest.approx(15.0 - 10 / 9)

    def test_one_frame_ends_at_original(self):
        animator = Animator()
        box = Box(y=3.0)
        prim = animator.from_(1, [Mutation(box, {"y": -20})])
        prim()
        assert box.y == 3.0

    def test_offset_applied_once(self):
        animator = Animator()
        target = {"x": 0.0}
        prim = animator.from_(3, [Mutation(target, {"x": 30})])
        values = []
        for _ in range(3):
            prim()
            values.append(target["x"])
        assert values == [30.0, 15.0, 0.0]

    def test_offsets_on_same_property_stack(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.from_(3, [Mutation(box, {"x": 10}), Mutation(box, {"x": 20})])
        values = []
        for _ in range(3):
            prim()
            values.append(box.x)
        assert values == [30.0, 15.0, 0.0]

    def test_back_to_back_from_primitives_do_not_alias(self):
        animator = Animator()
        a, b = Box(x=0.0), Box(x=100.0)
        seq = [
            animator.from_(3, [Mutation(a, {"x": 10})]),
            animator.from_(3, [Mutation(b, {"x": 50})]),
        ]
        for _ in range(4):
            animator.sequence(seq)
        assert a.x == 0.0
        animator.sequence(seq)
        assert b.x == 150.0
        for _ in range(3):
            animator.sequence(seq)
        assert b.x == 100.0


class TestMix:
    """Tagged items sharing one primitive."""

    def test_to_item(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.mix(5, [Mutation(box, {"x": 50}, tag=Tag.TO)])
        call(prim, 5)
        assert box.x == 50

    def test_from_item(self):
        animator = Animator()
        box = Box(y=0.0)
        prim = animator.mix(5, [Mutation(box, {"y": 10}, tag="from")])
        prim()
        assert box.y == 10.0
        call(prim, 4)
        assert box.y == 0.0

    def test_animate_item_is_flat(self):
        animator = Animator()
        box = Box(x=0.0)
        prim = animator.mix(5, [Mutation(box, {"x": 10}, tag="animate", ease="ease_in")])
        call(prim, 2)
        assert box.x == 4.0
        call(prim, 3)
        assert box.x == 10

    def test_all_tags_together(self):
        animator = Animator()
        box = Box(x=0.0, y=0.0, opacity=0.0)
        prim = animator.mix(
            4,
            [
                {"target": box, "changes": {"x": 100}, "tag": "to"},
                {"target": box, "changes": {"y": -40}, "tag": "from"},
                {"target": box, "changes": {"opacity": 1}, "tag": "animate"},
            ],
        )
        prim()
        assert box.y == -40.0
        call(prim, 3)
        assert (box.x, box.y, box.opacity) == (100, 0.0, 1)
        assert prim() is Status.DONE


class TestDelayAndFunc:
    def test_delay_zero_done_first_call(self):
        animator = Animator()
        assert animator.delay(0)() is Status.DONE

    def test_delay_counts_frames(self):
        animator = Animator()
        prim = animator.delay(3)
        assert [prim() for _ in range(4)] == [Status.CONTINUE] * 3 + [Status.DONE]

    def test_delay_scaled(self):
        animator = Animator(delay_mult=2)
        assert animator.delay(3).duration == 6

    def test_animate_func_receives_frames(self):
        animator = Animator()
        frames = []
        prim = animator.animate_func(3, frames.append)
        call(prim, 4)
        assert frames == [0, 1, 2]

    def test_animate_func_minimum_one_frame(self):
        animator = Animator()
        frames = []
        prim = animator.animate_func(0, frames.append)
        call(prim, 2)
        assert frames == [0]


class TestMalformedMutations:
    """Bad mutation shapes fail when the primitive is built, not mid-tick."""

    def test_missing_changes(self):
        animator = Animator()
        with pytest.raises(MutationError):
            animator.animate(10, [{"target": Box()}])

    def test_changes_not_a_mapping(self):
        with pytest.raises(MutationError):
            Mutation(Box(), changes=5)

    def test_unknown_tag(self):
        with pytest.raises(MutationError):
            Mutation(Box(), {"x": 1}, tag="sideways")

    def test_item_not_a_mutation(self):
        animator = Animator()
        with pytest.raises(MutationError):
            animator.to(10, [42])

    def test_mutation_error_is_value_error(self):
        assert issubclass(MutationError, ValueError)
