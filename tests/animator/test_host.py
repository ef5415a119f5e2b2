"""Tests for the headless host, scheduler and clock."""

import numpy as np
import pygame

from cv2web.animator.host import FrameClock, ManualScheduler, SurfaceHost, surface_to_array


class TestManualScheduler:
    def test_request_and_run(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append("a"))
        scheduler.request_frame(lambda: calls.append("b"))
        assert scheduler.pending == 2
        assert scheduler.run_frame() == 2
        assert calls == ["a", "b"]
        assert scheduler.pending == 0

    def test_cancel(self):
        scheduler = ManualScheduler()
        calls = []
        handle = scheduler.request_frame(lambda: calls.append(1))
        scheduler.cancel_frame(handle)
        scheduler.cancel_frame(handle)
        assert scheduler.run_frame() == 0
        assert calls == []

    def test_rerequest_deferred_to_next_frame(self):
        scheduler = ManualScheduler()
        calls = []

        def tick():
            calls.append(1)
            scheduler.request_frame(tick)

        scheduler.request_frame(tick)
        scheduler.run_frame()
        scheduler.run_frame()
        assert len(calls) == 2
        assert scheduler.pending == 1


def test_frame_clock():
    clock = FrameClock(start=10.0)
    assert clock() == 10.0
    assert clock.advance(0.5) == 10.5
    assert clock() == 10.5


class TestSurfaceHost:
    def test_surface_matches_size(self, host):
        assert host.size == (200, 100)
        assert host.surface.get_size() == (200, 100)

    def test_zero_size_has_no_surface(self):
        assert SurfaceHost(0, 100).surface is None
        assert SurfaceHost(100, -1).surface is None

    def test_dispatch_and_remove(self, host):
        seen = []
        handler = lambda x, y: seen.append((x, y))  # noqa: E731
        host.add_listener("move", handler)
        host.dispatch("move", 3.0, 4.0)
        host.remove_listener("move", handler)
        host.remove_listener("move", handler)
        host.dispatch("move", 5.0, 6.0)
        assert seen == [(3.0, 4.0)]
        assert host.listener_count == 0

    def test_resize_notifies_until_disconnected(self, host):
        sizes = []
        observation = host.observe_resize(lambda w, h: sizes.append((w, h)))
        host.resize(300, 150)
        assert host.surface.get_size() == (300, 150)
        observation.disconnect()
        observation.disconnect()
        host.resize(400, 150)
        assert sizes == [(300, 150)]
        assert host.observer_count == 0


def test_surface_to_array_orientation():
    surface = pygame.Surface((4, 2))
    surface.fill((0, 0, 0))
    surface.set_at((3, 0), (255, 0, 0))
    arr = surface_to_array(surface)
    assert arr.shape == (2, 4, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[0, 3]) == (255, 0, 0)
