"""Hand-made loops and a fake intersector shared by the tests."""

import numpy as np

from core.errors import NoIntersection
from core.ports import SectionComputerPort


def square(side, center=(0.0, 0.0), z=0.0, ccw=True, closed=True):
    """Axis-aligned square in the plane z=const, optionally repeating its first point."""
    h = side / 2.0
    cx, cy = center
    pts = [(cx - h, cy - h), (cx + h, cy - h), (cx + h, cy + h), (cx - h, cy + h)]
    if not ccw:
        pts = pts[::-1]
    P = np.array([(x, y, z) for x, y in pts], dtype=np.float64)
    if closed:
        P = np.vstack([P, P[:1]])
    return P


def plane_basis(normal):
    n = np.asarray(normal, dtype=np.float64)
    n = n / np.linalg.norm(n)
    a = np.array([0.0, 0.0, 1.0]) if abs(n[2]) < 0.9 else np.array([1.0, 0.0, 0.0])
    u = np.cross(n, a)
    u /= np.linalg.norm(u)
    v = np.cross(n, u)
    return u, v


def square_in_plane(normal, side, origin=(0.0, 0.0, 0.0)):
    """Closed square loop of the given side lying in the plane through origin."""
    u, v = plane_basis(normal)
    o = np.asarray(origin, dtype=np.float64)
    h = side / 2.0
    corners = [o + s * h * u + t * h * v for s, t in ((-1, -1), (1, -1), (1, 1), (-1, 1))]
    return np.array(corners + [corners[0]])


class FakeIntersector(SectionComputerPort):
    """Returns prepared loops per call, in call order."""

    def __init__(self, loops_per_call, missing=()):
        self.loops_per_call = list(loops_per_call)
        self.missing = set(missing)
        self.calls = []

    def intersect(self, mesh, plane):
        t = len(self.calls)
        self.calls.append(plane)
        if t in self.missing:
            raise NoIntersection("plane misses the mesh")
        return self.loops_per_call[t]
