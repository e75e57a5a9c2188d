# pathtracer/materials/presets.py
from pathtracer.core.color import Color
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


class ColorPresets:
    """Common albedo colors for scene building."""

    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.8, 0.8, 0.0)
    BLUE = Color(0.1, 0.2, 0.5)
    GREEN = Color(0.2, 0.8, 0.2)
    GRAY = Color(0.5, 0.5, 0.5)
    SKY_BLUE = Color(0.5, 0.7, 1.0)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)


class MetalPresets:
    """Metals with measured-looking albedos and a little fuzz."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def chrome() -> Metal:
        return Metal(Color(0.9, 0.9, 0.9), fuzz=0.0)

    @staticmethod
    def brushed(albedo: Color = Color(0.8, 0.8, 0.8)) -> Metal:
        return Metal(albedo, fuzz=0.3)


class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def air() -> Dielectric:
        return Dielectric(1.0)

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def bubble(medium_index: float = 1.5) -> Dielectric:
        """Air pocket inside a medium: the index relative to the enclosing material."""
        return Dielectric(1.0 / medium_index)
