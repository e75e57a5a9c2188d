from pathtracer.core.vector import Vector3


def assert_vec_close(a: Vector3, b: Vector3, tol: float = 1e-9):
    assert abs(a.x - b.x) <= tol, (a, b)
    assert abs(a.y - b.y) <= tol, (a, b)
    assert abs(a.z - b.z) <= tol, (a, b)
