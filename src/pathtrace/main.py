# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtrace.renderer.integrator import MAX_DEPTH
from pathtrace.renderer.raytracer import DEFAULT_SAMPLES, DEFAULT_SEED, QUALITY_LEVELS, Renderer
from pathtrace.renderer.tone_mapping import save_image
from pathtrace.scenes import SCENES, build_scene

logger = logging.getLogger(__name__)

DEFAULT_SCENE = "cornell_box"
DEFAULT_WIDTH = 400


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtrace",
        description="Render a demo scene with a Monte-Carlo path tracer and save it as PNG.",
    )
    parser.add_argument("--scene", default=DEFAULT_SCENE, choices=sorted(SCENES),
                        help="scene to render (default: %(default)s)")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--height", type=int,
                        help="image height in pixels (default: width, square image)")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per path")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="preset for width, samples and depth; explicit flags win")
    parser.add_argument("--workers", type=int,
                        help="worker processes; 1 renders inline (default: CPU count)")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help="seed for scene construction and sampling (default: %(default)s)")
    parser.add_argument("--output", "-o", default="render.png",
                        help="output image path (default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="store_true", help="log debug output")
    return parser


def resolve_settings(args: argparse.Namespace) -> dict:
    """
    Merge the quality preset (if any) with explicit flags, flags taking
    precedence.
    """
    preset = QUALITY_LEVELS[args.quality] if args.quality else {}
    width = args.width if args.width is not None else preset.get("width", DEFAULT_WIDTH)
    height = args.height if args.height is not None else width
    samples = args.samples if args.samples is not None else preset.get("samples", DEFAULT_SAMPLES)
    max_depth = args.max_depth if args.max_depth is not None else preset.get("max_depth", MAX_DEPTH)
    for name, value in (("width", width), ("height", height), ("samples", samples)):
        if value <= 0:
            raise ValueError(f"--{name} must be positive, got {value}")
    if max_depth < 0:
        raise ValueError(f"--max-depth must not be negative, got {max_depth}")
    return {"width": width, "height": height, "samples": samples, "max_depth": max_depth}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = resolve_settings(args)
    except ValueError as e:
        parser.error(str(e))

    scene = build_scene(args.scene, settings["width"] / settings["height"],
                        random.Random(args.seed))
    renderer = Renderer(
        settings["width"],
        settings["height"],
        samples_per_pixel=settings["samples"],
        max_depth=settings["max_depth"],
        workers=args.workers,
        seed=args.seed,
    )
    pixels = renderer.render(scene)
    save_image(pixels, args.output)
    logger.info("Saved %s to %s", args.scene, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
