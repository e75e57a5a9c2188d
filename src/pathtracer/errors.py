"""Exception types raised by pathtracer."""


class PathTracerError(Exception):
    """Base class for all pathtracer errors."""


class CameraError(PathTracerError, ValueError):
    """Invalid camera configuration, raised before any rendering happens."""


class ImageEncodingError(PathTracerError, ValueError):
    """Pixel data that cannot be encoded with the requested dimensions or bit depth."""
