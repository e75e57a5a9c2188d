# pathtracer/main.py
import argparse
import logging
import sys
from typing import List, Optional

from pathtracer import config
from pathtracer.camera.camera import Camera
from pathtracer.errors import PathTracerError
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, get_scene

logger = logging.getLogger(__name__)


def parse_aspect_ratio(value: str) -> float:
    """Accepts '16:9' or a plain number."""
    try:
        if ":" in value:
            num, den = value.split(":", 1)
            return float(num) / float(den)
        return float(value)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"invalid aspect ratio {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathtracer", description="Render a scene with a CPU path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="showcase")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=parse_aspect_ratio, default=16 / 9)
    parser.add_argument("--samples", type=int, default=100, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, default=50, help="maximum ray bounces")
    parser.add_argument("--vfov", type=float, default=90.0, help="vertical field of view in degrees")
    parser.add_argument("--defocus-angle", type=float, default=0.0)
    parser.add_argument("--focus-distance", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--workers", type=int, default=config.WORKERS)
    parser.add_argument("--no-gamma", action="store_true", help="write linear values without gamma correction")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    parser.add_argument("--output", default=str(config.OUTPUT_DIR / "render.ppm"))
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        camera = Camera(
            aspect_ratio=args.aspect_ratio,
            image_width=args.width,
            samples_per_pixel=args.samples,
            max_depth=args.max_depth,
            vfov=args.vfov,
            defocus_angle=args.defocus_angle,
            focus_distance=args.focus_distance,
        )
        renderer = Renderer(camera, workers=args.workers, seed=args.seed)
        logger.info("Rendering scene %r with %r", args.scene, camera)
        path = renderer.render_to_file(get_scene(args.scene), args.output, gamma_correct=not args.no_gamma)
    except (PathTracerError, ValueError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Saved %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
