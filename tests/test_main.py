import argparse
import logging

import pytest

from pathtracer.logging_config import CONSOLE_HANDLER, PACKAGE_LOGGER, setup_logging
from pathtracer.main import main, parse_aspect_ratio
from pathtracer.renderer.image import read_image


def test_parse_aspect_ratio():
    assert parse_aspect_ratio("16:9") == pytest.approx(16 / 9)
    assert parse_aspect_ratio("1.5") == 1.5
    for bad in ("16:0", "wide", "1:x"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_aspect_ratio(bad)


def test_main_renders_scene(tmp_path):
    output = tmp_path / "render.png"
    code = main(["--scene", "single", "--width", "16", "--aspect-ratio", "2:1", "--samples", "1",
                 "--max-depth", "3", "--seed", "1", "--workers", "1", "--output", str(output)])
    assert code == 0
    assert read_image(output).shape == (8, 16, 3)


def test_main_reports_invalid_camera(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger=PACKAGE_LOGGER):
        code = main(["--samples", "0", "--output", str(tmp_path / "never.ppm")])
    assert code == 1
    assert "samples_per_pixel" in caplog.text
    assert not (tmp_path / "never.ppm").exists()


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    setup_logging("WARNING")
    console = [h for h in logger.handlers if h.name == CONSOLE_HANDLER]
    assert len(console) == 1
    assert logger.level == logging.WARNING
