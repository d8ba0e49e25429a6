"""Tests for pixel producers and render entry points.

Tests cover:
- Render configuration validation and camera-derived sizes
- Sequential producer order, areas and failure isolation
- Parallel producer completeness and agreement with the sequential one
- render_scene() preconditions and progressive finalization
- Callback-driven rendering into canvases
"""

import threading

import pytest

from src.raytracer.camera.orthogonal import OrthogonalCamera
from src.raytracer.core.errors import NormalNotFoundError, SceneConfigurationError
from src.raytracer.core.progressive import ProgressiveRenderIterator
from src.raytracer.core.renderer import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    AreaRenderIterator,
    FailedPixel,
    ParallelRenderIterator,
    Pixel,
    ProgressiveRenderer,
    RenderConfiguration,
    render_scene,
    render_single_pixel,
    simple_render_to_canvas,
)
from src.raytracer.core.strategy import RandomAntiAliasingRenderStrategy, StandardRenderStrategy
from src.raytracer.materials.color import Color
from src.raytracer.preview.canvas import FramebufferCanvas


def row_major(width, height):
    return [(x, y) for y in range(height) for x in range(width)]


class TestRenderConfiguration:
    """Tests for canvas size and strategy settings."""

    def test_defaults(self):
        config = RenderConfiguration()
        size = (config.canvas_width, config.canvas_height)
        assert size == (DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)
        assert (config.canvas_width, config.canvas_height) == (1024, 576)
        assert isinstance(config.render_strategy, StandardRenderStrategy)

    def test_pixel_footprint(self):
        config = RenderConfiguration(4, 2)
        assert config.total_pixels == 8
        assert config.pixel_width == 0.25
        assert config.pixel_height == 0.5

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 5)])
    def test_rejects_non_positive_size(self, width, height):
        with pytest.raises(SceneConfigurationError):
            RenderConfiguration(width, height)

    def test_from_camera_width(self):
        camera = OrthogonalCamera(width=16.0, height=8.0)
        config = RenderConfiguration.from_camera(camera, width=200)
        assert (config.canvas_width, config.canvas_height) == (200, 100)

    def test_from_camera_height(self):
        camera = OrthogonalCamera(width=16.0, height=8.0)
        config = RenderConfiguration.from_camera(camera, height=50)
        assert (config.canvas_width, config.canvas_height) == (100, 50)

    def test_from_camera_default_width(self):
        config = RenderConfiguration.from_camera(OrthogonalCamera(width=16.0, height=8.0))
        size = (config.canvas_width, config.canvas_height)
        assert size == (DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_WIDTH // 2)

    def test_from_camera_both_sizes_rejected(self):
        with pytest.raises(ValueError, match="either"):
            RenderConfiguration.from_camera(OrthogonalCamera(), width=10, height=10)

    def test_from_camera_keeps_strategy(self):
        strategy = RandomAntiAliasingRenderStrategy(2)
        config = RenderConfiguration.from_camera(
            OrthogonalCamera(), width=32, render_strategy=strategy
        )
        assert config.render_strategy is strategy


class TestPixelResults:
    """Tests for the pixel output units."""

    def test_pixel_unwrap(self):
        pixel = Pixel(1, 2, Color.RED)
        assert pixel.ok
        assert pixel.unwrap() is pixel

    def test_failed_pixel_unwrap_raises(self):
        failed = FailedPixel(1, 2, NormalNotFoundError(0))
        assert not failed.ok
        with pytest.raises(NormalNotFoundError):
            failed.unwrap()

    def test_render_single_pixel(self, simple_scene, tiny_config):
        pixel = render_single_pixel(simple_scene, tiny_config, 3, 2)
        assert (pixel.x, pixel.y) == (3, 2)
        assert isinstance(pixel.color, Color)


class TestAreaRenderIterator:
    """Tests for the sequential producer."""

    def test_full_area_row_major(self, simple_scene, tiny_config):
        """Test that every pixel is produced once, left to right, top to bottom."""
        iterator = AreaRenderIterator.with_full_area(simple_scene, tiny_config)
        assert len(iterator) == 48
        assert [(p.x, p.y) for p in iterator] == row_major(8, 6)

    def test_exhausted_iterator_stays_empty(self, simple_scene, tiny_config):
        iterator = AreaRenderIterator.with_full_area(simple_scene, tiny_config)
        list(iterator)
        assert list(iterator) == []

    def test_sub_area(self, simple_scene, tiny_config):
        """Test that (x, y, width, height) selects an offset rectangle."""
        iterator = AreaRenderIterator(simple_scene, tiny_config, 2, 1, 3, 2)
        assert iterator.total_pixels() == 6
        assert [(p.x, p.y) for p in iterator] == [(2, 1), (3, 1), (4, 1), (2, 2), (3, 2), (4, 2)]

    def test_default_area_extends_to_canvas_edge(self, simple_scene, tiny_config):
        iterator = AreaRenderIterator(simple_scene, tiny_config, area_x=6, area_y=4)
        assert [(p.x, p.y) for p in iterator] == [(6, 4), (7, 4), (6, 5), (7, 5)]

    def test_empty_area(self, simple_scene, tiny_config):
        assert list(AreaRenderIterator(simple_scene, tiny_config, 0, 0, 0, 3)) == []

    @pytest.mark.parametrize("area", [(-1, 0, 2, 2), (7, 0, 2, 1), (0, 5, 1, 2)])
    def test_rejects_area_outside_canvas(self, simple_scene, tiny_config, area):
        with pytest.raises(ValueError, match="does not fit"):
            AreaRenderIterator(simple_scene, tiny_config, *area)

    def test_rejects_scene_without_light(self, simple_scene, tiny_config):
        with pytest.raises(SceneConfigurationError, match="no light"):
            AreaRenderIterator.with_full_area(simple_scene.replace(lights=[]), tiny_config)

    def test_failures_do_not_stop_iteration(self, failing_scene, tiny_config):
        """Test that a failing pixel is reported and the next ones still come."""
        results = list(AreaRenderIterator.with_full_area(failing_scene, tiny_config))
        assert [(r.x, r.y) for r in results] == row_major(8, 6)
        failed = [r for r in results if not r.ok]
        succeeded = [r for r in results if r.ok]
        assert failed and succeeded
        assert all(isinstance(r.error, NormalNotFoundError) for r in failed)
        assert all(r.color == Color.BLUE for r in succeeded)


class TestParallelRenderIterator:
    """Tests for the thread-pool producer."""

    def test_produces_each_pixel_once(self, simple_scene, tiny_config):
        iterator = ParallelRenderIterator(simple_scene, tiny_config, max_workers=4)
        assert len(iterator) == 48
        coordinates = [(p.x, p.y) for p in iterator]
        assert len(coordinates) == 48
        assert sorted(coordinates) == sorted(row_major(8, 6))

    def test_matches_sequential_colors(self, test_scene, tiny_config):
        """Test that both producers compute the same image."""
        sequential = {
            (p.x, p.y): p.color
            for p in AreaRenderIterator.with_full_area(test_scene, tiny_config)
        }
        parallel = {
            (p.x, p.y): p.color
            for p in ParallelRenderIterator(test_scene, tiny_config, max_workers=3)
        }
        assert parallel == sequential

    def test_stops_after_last_pixel(self, simple_scene):
        iterator = ParallelRenderIterator(simple_scene, RenderConfiguration(2, 2), max_workers=2)
        assert len(list(iterator)) == 4
        with pytest.raises(StopIteration):
            next(iterator)

    def test_failures_are_isolated(self, failing_scene, tiny_config):
        results = list(ParallelRenderIterator(failing_scene, tiny_config, max_workers=4))
        assert len(results) == 48
        failed = {(r.x, r.y) for r in results if not r.ok}
        expected = {
            (r.x, r.y)
            for r in AreaRenderIterator.with_full_area(failing_scene, tiny_config)
            if not r.ok
        }
        assert failed == expected

    def test_unexpected_errors_become_failed_pixels(self, simple_scene, tiny_config, monkeypatch):
        """Test that the reader is not left waiting when a worker crashes."""
        from src.raytracer.core import renderer

        def explode(scene, config, x, y):
            raise RuntimeError("boom")

        monkeypatch.setattr(renderer, "render_single_pixel", explode)
        results = list(ParallelRenderIterator(simple_scene, tiny_config, max_workers=2))
        assert len(results) == 48
        assert all(isinstance(r.error, RuntimeError) for r in results)

    def test_work_runs_off_the_calling_thread(self, simple_scene, monkeypatch):
        from src.raytracer.core import renderer

        threads = set()
        real_render = renderer.render_single_pixel

        def recording(scene, config, x, y):
            threads.add(threading.current_thread().name)
            return real_render(scene, config, x, y)

        monkeypatch.setattr(renderer, "render_single_pixel", recording)
        list(ParallelRenderIterator(simple_scene, RenderConfiguration(4, 4), max_workers=2))
        assert threads
        assert all(name.startswith("raytracer-worker") for name in threads)

    def test_rejects_invalid_worker_count(self, simple_scene, tiny_config):
        with pytest.raises(ValueError):
            ParallelRenderIterator(simple_scene, tiny_config, max_workers=0)

    def test_rejects_scene_without_light(self, simple_scene, tiny_config):
        with pytest.raises(SceneConfigurationError, match="no light"):
            ParallelRenderIterator(simple_scene.replace(lights=[]), tiny_config)


class TestRenderScene:
    """Tests for the render_scene() entry point."""

    def test_no_light_fails_before_any_pixel(self, simple_scene, tiny_config):
        with pytest.raises(SceneConfigurationError, match="no light"):
            render_scene(simple_scene.replace(lights=[]), tiny_config)

    @pytest.mark.parametrize("parallel", [False, True])
    def test_finally_callback_runs_once(self, simple_scene, tiny_config, parallel):
        calls = []
        results = render_scene(
            simple_scene, tiny_config, parallel=parallel, finally_callback=lambda: calls.append(1)
        )
        assert isinstance(results, ProgressiveRenderIterator)
        assert len(results) == 48
        assert len(list(results)) == 48
        assert calls == [1]
        assert results.finished
        assert results.progress == 1.0

    def test_sequential_order(self, simple_scene, tiny_config):
        results = render_scene(simple_scene, tiny_config, parallel=False)
        assert [(p.x, p.y) for p in results] == row_major(8, 6)

    def test_logs_progress(self, simple_scene, tiny_config, caplog):
        caplog.set_level("DEBUG", logger="src.raytracer")
        list(render_scene(simple_scene, tiny_config, parallel=False))
        messages = [record.getMessage() for record in caplog.records]
        assert "render: 1 objects to process" in messages
        assert "Canvas size: 8x6" in messages
        assert "render: done!" in messages


class TestProgressiveRenderer:
    """Tests for callback-driven rendering."""

    def test_pushes_every_pixel(self, simple_scene, tiny_config):
        received = []
        finished = []
        renderer = ProgressiveRenderer(simple_scene, tiny_config)
        renderer.render(received.append, lambda: finished.append(True))
        assert len(received) == 48
        assert all(isinstance(p, Pixel) for p in received)
        assert finished == [True]

    def test_stops_at_first_pixel_error(self, failing_scene, tiny_config):
        received = []
        with pytest.raises(NormalNotFoundError):
            ProgressiveRenderer(failing_scene, tiny_config).render(received.append)
        assert 0 < len(received) < 48

    def test_total_pixels_and_repr(self, simple_scene, tiny_config):
        renderer = ProgressiveRenderer(simple_scene, tiny_config)
        assert renderer.total_pixels == 48
        assert "width=8" in repr(renderer)

    @pytest.mark.parametrize("parallel", [False, True])
    def test_simple_render_to_canvas(self, test_scene, tiny_config, parallel):
        canvas = FramebufferCanvas(8, 6)
        simple_render_to_canvas(test_scene, canvas, tiny_config, parallel=parallel)
        assert canvas.drawn == 48

    def test_parallel_and_sequential_images_match(self, test_scene, tiny_config):
        sequential = FramebufferCanvas(8, 6)
        parallel = FramebufferCanvas(8, 6)
        simple_render_to_canvas(test_scene, sequential, tiny_config, parallel=False)
        simple_render_to_canvas(test_scene, parallel, tiny_config, parallel=True, max_workers=4)
        assert (sequential.image == parallel.image).all()
