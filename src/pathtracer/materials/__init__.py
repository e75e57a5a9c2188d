from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian, ProbabilisticLambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.normal_map import NormalMap

__all__ = [
    "Dielectric",
    "Lambertian",
    "Material",
    "Metal",
    "NormalMap",
    "ProbabilisticLambertian",
]
