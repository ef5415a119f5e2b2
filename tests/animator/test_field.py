"""Tests for the per-frame dot physics."""

import numpy as np
import pytest

from cv2web.animator.field import DotField, smoothstep_falloff, step
from cv2web.animator.pointer import TrailPoint

from tests.conftest import constant_noise

PHYSICS = dict(mouse_radius=50.0, repulsion_strength=1.5, return_speed=0.6, noise=constant_noise(0.5))


def make_field(points) -> DotField:
    xs = np.array([p[0] for p in points], dtype=np.float64)
    ys = np.array([p[1] for p in points], dtype=np.float64)
    n = len(xs)
    return DotField(
        x=xs.copy(),
        y=ys.copy(),
        base_x=xs,
        base_y=ys,
        base_size=np.full(n, 4.0),
        brightness=np.full(n, 200.0),
        is_accent=np.zeros(n, dtype=bool),
        size_multiplier=np.ones(n),
        twinkle_phase=np.zeros(n),
        twinkle_speed=np.full(n, 0.03),
        vx=np.zeros(n),
        vy=np.zeros(n),
    )


class TestFalloff:
    def test_endpoints(self):
        assert smoothstep_falloff(0.0, 10.0) == pytest.approx(1.0)
        assert smoothstep_falloff(10.0, 10.0) == 0.0
        assert smoothstep_falloff(15.0, 10.0) == 0.0

    def test_midpoint(self):
        assert smoothstep_falloff(5.0, 10.0) == pytest.approx(0.5)

    def test_zero_radius(self):
        assert smoothstep_falloff(0.0, 0.0) == 0.0


class TestStep:
    def test_no_interaction_full_opacity(self):
        dots = make_field([(10, 10), (100, 50), (180, 90)])
        step(dots, [], None, time=1.0, **PHYSICS)
        np.testing.assert_array_equal(dots.opacity, 1.0)
        assert not dots.twinkling.any()
        np.testing.assert_array_equal(dots.x, dots.base_x)

    def test_trail_point_on_dot_is_safe(self):
        dots = make_field([(50, 50)])
        trail = [TrailPoint(x=50, y=50, timestamp=0.0, strength=1.0)]
        with np.errstate(all="raise"):
            step(dots, trail, None, time=1.0, **PHYSICS)
        assert np.isfinite(dots.x).all()
        assert dots.vx[0] == 0.0
        assert dots.vy[0] == 0.0
        # Full falloff: opacity reduces to the twinkle amount alone
        twinkle = np.sin(0.03) * 0.5 + 0.5
        assert dots.opacity[0] == pytest.approx(0.3 + twinkle * 0.7)

    def test_repulsion_pushes_away(self):
        dots = make_field([(60, 50)])
        trail = [TrailPoint(x=50, y=50, timestamp=0.0, strength=1.0)]
        step(dots, trail, None, time=1.0, **PHYSICS)
        assert dots.vx[0] > 0
        assert dots.vy[0] == pytest.approx(0.0)
        assert dots.x[0] > 60

    def test_force_scales_with_strength(self):
        strong = make_field([(60, 50)])
        weak = make_field([(60, 50)])
        step(strong, [TrailPoint(50, 50, 0.0, 1.0)], None, time=1.0, **PHYSICS)
        step(weak, [TrailPoint(50, 50, 0.0, 0.25)], None, time=1.0, **PHYSICS)
        assert strong.vx[0] == pytest.approx(weak.vx[0] * 4)

    def test_far_trail_point_ignored(self):
        dots = make_field([(200, 50)])
        step(dots, [TrailPoint(50, 50, 0.0, 1.0)], None, time=1.0, **PHYSICS)
        assert dots.vx[0] == 0.0
        assert dots.opacity[0] == 1.0

    def test_spring_returns_to_rest(self):
        dots = make_field([(50, 50)])
        dots.x[0] = 70.0
        for _ in range(200):
            step(dots, [], None, time=1.0, **PHYSICS)
        assert dots.x[0] == pytest.approx(50.0, abs=0.01)
        assert abs(dots.vx[0]) < 0.01

    def test_velocity_integration(self):
        dots = make_field([(50, 50)])
        dots.x[0] = 60.0
        step(dots, [], None, time=1.0, **PHYSICS)
        # v = (50 - 60) * 0.6 * 0.1 * 0.85
        assert dots.vx[0] == pytest.approx(-0.51)
        assert dots.x[0] == pytest.approx(59.49)

    def test_pointer_presence_twinkles_without_motion(self):
        dots = make_field([(50, 50), (150, 50)])
        step(dots, [], (52, 50), time=1.0, **PHYSICS)
        assert dots.twinkling.tolist() == [True, False]
        assert dots.twinkle_phase[0] == pytest.approx(0.03)
        assert dots.twinkle_phase[1] == 0.0
        assert dots.opacity[0] < 1.0
        assert dots.opacity[1] == 1.0
        # Presence alone never pushes
        assert dots.vx[0] == 0.0

    def test_noise_perturbs_radius(self):
        # Same geometry, radius 0.7x vs 1.3x of mouse_radius
        near = dict(PHYSICS, noise=constant_noise(0.0))
        far = dict(PHYSICS, noise=constant_noise(1.0))
        small = make_field([(90, 50)])
        large = make_field([(90, 50)])
        step(small, [TrailPoint(50, 50, 0.0, 1.0)], None, time=1.0, **near)
        step(large, [TrailPoint(50, 50, 0.0, 1.0)], None, time=1.0, **far)
        assert small.vx[0] == 0.0
        assert large.vx[0] > 0

    def test_empty_field(self):
        dots = DotField()
        assert step(dots, [TrailPoint(0, 0, 0.0, 1.0)], (0, 0), time=0.0, **PHYSICS) is dots


def test_particles_snapshot():
    dots = make_field([(1, 2), (3, 4)])
    particles = dots.particles()
    assert len(particles) == 2
    assert particles[1].base_x == 3.0
    assert particles[1].vx == 0.0
    assert dots.radii.tolist() == [2.0, 2.0]
