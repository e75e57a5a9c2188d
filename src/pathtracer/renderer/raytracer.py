# pathtracer/renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pathtracer import config
from pathtracer.camera.camera import Camera
from pathtracer.core.color import Color
from pathtracer.core.utils import make_rng, spawn_rngs
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.image import PathLike, save_render

logger = logging.getLogger(__name__)


def render_band_worker(args) -> Tuple[List[int], List[Color]]:
    # This runs in a worker process. The camera and world arrive pickled and
    # are only read; the generator is private to this band.
    camera, world, rows, rng = args
    return rows, camera.render_rows(world, rows, rng)


def make_bands(height: int, workers: int) -> List[List[int]]:
    """
    Splits rows into interleaved bands (row r goes to band r % workers) so
    expensive regions of the image are spread over every worker.
    """
    bands = [list(range(start, height, workers)) for start in range(workers)]
    return [band for band in bands if band]


class Renderer:
    """
    Drives a camera over a scene, in-process or across worker processes.
    """
    def __init__(self, camera: Camera, workers: Optional[int] = None, seed: Optional[int] = None):
        if workers is None:
            workers = config.WORKERS
        if workers < 1:
            raise ValueError(f"workers must be at least 1 (given {workers})")
        self.camera = camera
        self.workers = workers
        self.seed = config.SEED if seed is None else seed

    def render(self, world: Hittable) -> List[Color]:
        width, height = self.camera.dim()
        if self.workers == 1:
            return self.camera.render(world, make_rng(self.seed))

        bands = make_bands(height, self.workers)
        rngs = spawn_rngs(self.seed, len(bands))
        pixels: List[Optional[Color]] = [None] * (width * height)

        logger.info("Rendering %dx%d image on %d workers", width, height, len(bands))
        t0 = time.perf_counter()
        with ProcessPoolExecutor(max_workers=len(bands)) as exe:
            jobs = [(self.camera, world, band, rng) for band, rng in zip(bands, rngs)]
            for rows, colors in exe.map(render_band_worker, jobs):
                self._scatter_rows(pixels, rows, colors, width)
        logger.info("Rendered in %.2fs", time.perf_counter() - t0)
        return pixels

    @staticmethod
    def _scatter_rows(pixels: list, rows: Sequence[int], colors: Sequence[Color], width: int):
        for i, row in enumerate(rows):
            pixels[row * width:(row + 1) * width] = colors[i * width:(i + 1) * width]

    def render_to_file(self, world: Hittable, path: PathLike, gamma_correct: bool = True) -> Path:
        """
        Renders the scene and writes it to path. Returns the written path.
        """
        width, height = self.camera.dim()
        colors = self.render(world)
        return save_render(path, colors, width, height, gamma_correct)
