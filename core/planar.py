# core/planar.py
"""
Planar predicates on loops viewed through a Projection.

All functions work on the reduced vertex sequence: a repeated closing point is
removed once, before anything is evaluated, so area, simplicity and
containment always see the same polygon for a given loop.
"""
from typing import Tuple

import numpy as np

from .config import BOUNDARY_EPS, CLOSURE_EPS
from .models import Projection, Side


def reduce_loop(loop, tol: float = CLOSURE_EPS) -> np.ndarray:
    """Drop the closing point if it repeats the first one. Returns (K,3)."""
    P = np.asarray(loop, dtype=np.float64).reshape(-1, 3)
    if P.shape[0] >= 2 and np.allclose(P[0], P[-1], rtol=0.0, atol=tol):
        return P[:-1]
    return P


def project_points(points, projection: Projection) -> np.ndarray:
    P = np.asarray(points, dtype=np.float64)
    return P[..., list(projection.kept)]


def project_loop(loop, projection: Projection) -> np.ndarray:
    """Reduced loop as a (K,2) polygon in the projection's 2D frame."""
    return project_points(reduce_loop(loop), projection)


def _orient(a, b, c):
    # z of (b-a) x (c-a); broadcasts over leading dimensions
    return (b[..., 0] - a[..., 0]) * (c[..., 1] - a[..., 1]) - (b[..., 1] - a[..., 1]) * (c[..., 0] - a[..., 0])


def _on_segment(a, b, p):
    # p is assumed collinear with a-b
    lo = np.minimum(a, b)
    hi = np.maximum(a, b)
    return np.all((p >= lo) & (p <= hi), axis=-1)


def _segments_touch(p, q, c, d) -> np.ndarray:
    """Segment p-q against segments c[i]-d[i]; True where they share any point."""
    d1 = _orient(c, d, p)
    d2 = _orient(c, d, q)
    d3 = _orient(p, q, c)
    d4 = _orient(p, q, d)
    proper = (d1 * d2 < 0.0) & (d3 * d4 < 0.0)
    touch = (
        ((d1 == 0.0) & _on_segment(c, d, p))
        | ((d2 == 0.0) & _on_segment(c, d, q))
        | ((d3 == 0.0) & _on_segment(p, q, c))
        | ((d4 == 0.0) & _on_segment(p, q, d))
    )
    return proper | touch


def signed_area_2d(poly) -> float:
    """Shoelace area; positive for counter-clockwise vertex order."""
    P = np.asarray(poly, dtype=np.float64)
    if P.shape[0] < 3:
        return 0.0
    # shift to the first vertex; keeps precision far from the origin
    P = P - P[0]
    x, y = P[:, 0], P[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def is_simple_2d(poly) -> bool:
    """
    A polygon is simple when its edges meet only where consecutive edges share
    their common vertex. Repeated vertices and edges folding back onto the
    previous edge make it non-simple.
    """
    P = np.asarray(poly, dtype=np.float64)
    n = P.shape[0]
    if n < 3:
        return False

    A = P
    B = np.roll(P, -1, axis=0)
    if np.any(np.all(A == B, axis=1)):
        return False

    # consecutive edges: collinear and pointing back -> overlap
    prev = np.roll(P, 1, axis=0)
    fold = (_orient(prev, P, B) == 0.0) & (np.sum((prev - P) * (B - P), axis=1) > 0.0)
    if np.any(fold):
        return False

    # non-adjacent edge pairs, each pair tested once
    for i in range(n - 2):
        js = np.arange(i + 2, n)
        if i == 0:
            js = js[js != n - 1]
        if js.size == 0:
            continue
        if np.any(_segments_touch(A[i], B[i], A[js], B[js])):
            return False
    return True


def locate_point_2d(poly, point, tol: float = BOUNDARY_EPS) -> Side:
    """Crossing-number test with an explicit boundary band of width tol."""
    P = np.asarray(poly, dtype=np.float64)
    p = np.asarray(point, dtype=np.float64).reshape(2)
    if P.shape[0] < 3:
        return Side.OUTSIDE

    A = P
    B = np.roll(P, -1, axis=0)
    AB = B - A
    edge_len = np.linalg.norm(AB, axis=1)
    cross = _orient(A, B, p)
    with np.errstate(divide="ignore", invalid="ignore"):
        dist = np.where(edge_len > 0.0, np.abs(cross) / edge_len, np.linalg.norm(p - A, axis=1))
    lo = np.minimum(A, B) - tol
    hi = np.maximum(A, B) + tol
    if np.any((dist <= tol) & np.all((p >= lo) & (p <= hi), axis=1)):
        return Side.ON_BOUNDARY

    ay, by = A[:, 1], B[:, 1]
    straddle = (ay > p[1]) != (by > p[1])
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = A[:, 0] + (p[1] - ay) * AB[:, 0] / (by - ay)
    crossings = np.count_nonzero(straddle & (p[0] < x_cross))
    return Side.INSIDE if crossings % 2 == 1 else Side.OUTSIDE


def point_in_polygon(loop, projection: Projection, point) -> Side:
    """Locate a 3D point against a loop, both seen through the same projection."""
    return locate_point_2d(project_loop(loop, projection), project_points(point, projection))


def evaluate(loop, projection: Projection) -> Tuple[float, bool]:
    """Signed projected area and simplicity flag of a loop."""
    poly = project_loop(loop, projection)
    return signed_area_2d(poly), is_simple_2d(poly)
