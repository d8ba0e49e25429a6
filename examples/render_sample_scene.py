#!/usr/bin/env python3
"""Render the sample scene to a PNG file.

This script renders the showcase scene (checkered sphere, mirror sphere,
transparent spheres and a mirrored floor) with the recursive ray tracer and
writes the framebuffer to disk.

Usage:
    python -m examples.render_sample_scene [options]

Options:
    --width WIDTH           Image width in pixels (height follows the camera ratio)
    --height HEIGHT         Image height in pixels (width follows the camera ratio)
    --strategy-random N     Random anti-aliasing with N rays per pixel
    --seed SEED             Seed for the anti-aliasing jitter
    --no-parallel           Render sequentially on the main thread
    --workers N             Worker threads for parallel rendering
    --scene {test,simple}   Which sample scene to render (default: test)
    --gamma GAMMA           Gamma applied before quantization (default: 1.0)
    --output OUTPUT         Output file path (default: sample_scene.png)
    --log-level LEVEL       Log level (default: RAYTRACER_LOG_LEVEL or INFO)

Example:
    python -m examples.render_sample_scene --width 320 --strategy-random 8
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.raytracer.core.errors import RaytracerError
from src.raytracer.core.log import setup_logging
from src.raytracer.core.renderer import RenderConfiguration, simple_render_to_canvas
from src.raytracer.core.strategy import (
    RandomAntiAliasingRenderStrategy,
    RenderStrategy,
    StandardRenderStrategy,
)
from src.raytracer.preview.canvas import FramebufferCanvas
from src.raytracer.preview.export import save_png
from src.raytracer.scene.samples import generate_simple_scene, generate_test_scene

logger = logging.getLogger("examples.render_sample_scene")

SCENES = {
    "test": generate_test_scene,
    "simple": generate_simple_scene,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sample scene with the recursive ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Image height in pixels")
    parser.add_argument(
        "--strategy-random",
        type=int,
        default=None,
        metavar="N",
        help="Use random anti-aliasing with N rays per pixel",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the anti-aliasing jitter")
    parser.add_argument(
        "--no-parallel",
        action="store_true",
        help="Render sequentially instead of using a thread pool",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker thread count")
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="test",
        help="Sample scene to render (default: test)",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma applied before quantization (default: 1.0)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sample_scene.png",
        help="Output file path (default: sample_scene.png)",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Log level name")
    return parser.parse_args(argv)


def build_configuration(args: argparse.Namespace, camera) -> RenderConfiguration:
    """Build the render configuration from the command-line options."""
    strategy: RenderStrategy
    if args.strategy_random is not None:
        strategy = RandomAntiAliasingRenderStrategy(args.strategy_random, seed=args.seed)
    else:
        strategy = StandardRenderStrategy()

    if args.width is not None and args.height is not None:
        return RenderConfiguration(args.width, args.height, strategy)
    return RenderConfiguration.from_camera(
        camera, width=args.width, height=args.height, render_strategy=strategy
    )


def render_sample_scene(args: argparse.Namespace) -> Path:
    """Render the selected scene and save it.

    Returns:
        Path to the saved image file.
    """
    scene = SCENES[args.scene]()
    config = build_configuration(args, scene.camera)
    canvas = FramebufferCanvas(
        config.canvas_width, config.canvas_height, scene.config.world_color.to_tuple()
    )

    logger.info("Rendering %r scene with %r", args.scene, config.render_strategy)
    simple_render_to_canvas(
        scene, canvas, config, parallel=not args.no_parallel, max_workers=args.workers
    )

    output_file = Path(args.output)
    save_png(canvas, output_file, gamma=args.gamma)
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        output_file = render_sample_scene(args)
    except (RaytracerError, ValueError, OSError) as e:
        logger.error("Error: %s", e)
        return 1

    logger.info("Saved to: %s", output_file.absolute())
    return 0


if __name__ == "__main__":
    sys.exit(main())
