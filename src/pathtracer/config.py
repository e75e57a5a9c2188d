"""Environment-driven settings for pathtracer."""

import math
import os
from pathlib import Path
from typing import Optional


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


def positive_float(name: str, default: str) -> float:
    """Reads a finite float greater than 0 from the environment variable name."""
    raw = os.getenv(name, default)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number (given {raw!r})") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a finite number greater than 0 (given {raw!r})")
    return value


# Paths
OUTPUT_DIR = Path(os.getenv("PATHTRACER_OUTPUT_DIR", "output"))

# Logging settings
LOG_LEVEL = os.getenv("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PATHTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Rendering settings
SEED = _optional_int(os.getenv("PATHTRACER_SEED"))
WORKERS = int(os.getenv("PATHTRACER_WORKERS", "1"))
# Lower bound on accepted hit distances, keeps rays from re-hitting their own origin.
T_MIN = positive_float("PATHTRACER_T_MIN", "0.001")
