# core/classifier.py
from typing import Optional, Sequence

import numpy as np

from .errors import NonSimplePolygonWarning
from .models import LoopSection, Projection, Side
from .planar import evaluate, point_in_polygon, reduce_loop


def find_container(index: int, loops: Sequence[np.ndarray], projection: Projection) -> Optional[int]:
    """
    Index of the sibling loop whose polygon holds the first vertex of loops[index].
    Only single-level containment is tracked: when several siblings hold the
    vertex, the last one in iteration order wins. A later sibling that does not
    hold the vertex leaves an earlier container in place; the nesting flag is
    never cleared once set.
    """
    reduced = reduce_loop(loops[index])
    if reduced.shape[0] == 0:
        return None
    first = reduced[0]
    container = None
    for j, other in enumerate(loops):
        if j == index:
            continue
        if point_in_polygon(other, projection, first) == Side.INSIDE:
            container = j
    return container


def classify_sign(index: int, loops: Sequence[np.ndarray], projection: Projection) -> int:
    """+1 for material, -1 when the loop sits inside a sibling (a hole)."""
    return -1 if find_container(index, loops, projection) is not None else 1


def signed_loop_area(
    index: int,
    loops: Sequence[np.ndarray],
    projection: Projection,
    plane_index: int = 0,
) -> LoopSection:
    """
    Area of loops[index] in its own plane, signed by containment:
    sign * |projected area| / cos_theta.
    """
    loop = np.asarray(loops[index], dtype=np.float64)
    area_2d, is_simple = evaluate(loop, projection)
    parent = find_container(index, loops, projection)
    sign = -1.0 if parent is not None else 1.0
    area = sign * abs(area_2d) / projection.cos_theta

    warning = None
    if not is_simple:
        warning = NonSimplePolygonWarning(plane_index, index)
    return LoopSection(area=area, polyline=loop, is_simple=is_simple, parent=parent, warning=warning)
