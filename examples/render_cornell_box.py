#!/usr/bin/env python3
"""Render the Cornell-box demo scene.

This script renders the demo scene end to end: it builds the scene and its
camera, renders with the chosen sampler and sample density, and saves the
result.

Usage:
    python examples/render_cornell_box.py OUTPUT WIDTH HEIGHT N B [options]

Arguments:
    OUTPUT              Output image path (e.g. render.png)
    WIDTH, HEIGHT       Image size in pixels
    N                   Sample density; each pixel gets N*N samples
    B                   Glossy reflection bounces (0 disables reflections)

Options:
    --sampler NAME      uniform, jittered or random (default: jittered)
    --parallel          Render rows on a thread pool
    --workers COUNT     Thread count for --parallel (default: CPU count)
    --seed SEED         Seed for reproducible renders
    --no-gamma          Skip sRGB gamma correction
    --quiet             Suppress progress output
    --verbose           Log renderer activity

Example:
    python examples/render_cornell_box.py cornell.png 320 240 2 1 --parallel
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the Cornell-box demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("output", type=str, help="Output image path")
    parser.add_argument("width", type=int, help="Image width in pixels")
    parser.add_argument("height", type=int, help="Image height in pixels")
    parser.add_argument("n", type=int, metavar="N", help="Sample density (N*N samples per pixel)")
    parser.add_argument("b", type=int, metavar="B", help="Glossy reflection bounces")
    parser.add_argument(
        "--sampler",
        type=str,
        default="jittered",
        choices=("uniform", "jittered", "random"),
        help="Sub-pixel sample pattern (default: jittered)",
    )
    parser.add_argument("--parallel", action="store_true", help="Render rows in parallel")
    parser.add_argument("--workers", type=int, default=None, help="Thread count for --parallel")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--no-gamma", action="store_true", help="Skip sRGB gamma correction")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--verbose", action="store_true", help="Log renderer activity")
    return parser.parse_args(argv)


def render_cornell_box(
    output_path: str,
    width: int,
    height: int,
    samples: int,
    bounces: int,
    *,
    sampler_name: str = "jittered",
    parallel: bool = False,
    workers: int | None = None,
    seed: int | None = None,
    correct_gamma: bool = True,
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save it to a file.

    Returns:
        Path to the saved image file.
    """
    from facetracer.core.renderer import Renderer, RenderSettings
    from facetracer.core.sampler import get_sampler
    from facetracer.preview.display import show_progress
    from facetracer.preview.export import save_png
    from facetracer.scene.cornell_box import create_cornell_box_scene

    if not quiet:
        print(f"Creating Cornell box scene ({width}x{height})...")
    scene = create_cornell_box_scene(width, height)

    settings = RenderSettings(
        samples=samples,
        bounces=bounces,
        correct_gamma=correct_gamma,
        seed=seed,
        workers=workers,
    )
    renderer = Renderer(scene, settings, get_sampler(sampler_name))

    if not quiet:
        print(f"Rendering {samples * samples} samples per pixel, {bounces} bounces...")
    callback = None if quiet else show_progress

    start_time = time.time()
    if parallel:
        image = renderer.render_parallel(callback=callback)
    else:
        image = renderer.render(callback=callback)

    output_file = save_png(image, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        render_cornell_box(
            args.output,
            args.width,
            args.height,
            args.n,
            args.b,
            sampler_name=args.sampler,
            parallel=args.parallel,
            workers=args.workers,
            seed=args.seed,
            correct_gamma=not args.no_gamma,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
