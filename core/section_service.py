# core/section_service.py
import logging
from collections import defaultdict
from typing import List

import numpy as np
import trimesh

from .config import WELD_EPS
from .errors import IntersectorFailure
from .models import Plane

logger = logging.getLogger(__name__)


class SectionService:
    @staticmethod
    def compute_section(mesh: trimesh.Trimesh, plane: Plane, eps: float = WELD_EPS) -> List[np.ndarray]:
        """
        Without Shapely/GEOS:
        - trimesh.intersections.mesh_plane -> 3D segments
        - weld segment ends within eps and stitch them into polylines
        - drop NaN points and repeated consecutive points
        Returns: [np.ndarray(K,3), ...]; a closed loop repeats its first point last.
        An empty list means the plane misses the mesh.
        """
        V = np.asarray(mesh.vertices, dtype=np.float64)
        F = np.asarray(mesh.faces, dtype=np.int64).reshape(-1, 3)
        if V.size == 0 or F.size == 0:
            return []

        try:
            segs = trimesh.intersections.mesh_plane(
                mesh=mesh,
                plane_normal=plane.normal,
                plane_origin=plane.origin,
            )
        except Exception as e:
            raise IntersectorFailure(f"mesh_plane failed for plane {plane.origin.tolist()}: {e}") from e
        if segs is None or len(segs) == 0:
            return []

        segs = np.asarray(segs, dtype=np.float64).reshape(-1, 2, 3)
        paths = SectionService.stitch_segments(segs, eps)

        for P in paths:
            if not np.allclose(P[0], P[-1], rtol=0.0, atol=eps):
                logger.warning(f"[SEC] open polyline with {len(P)} points at plane {plane.origin.tolist()}")
        return paths

    @staticmethod
    def stitch_segments(segs: np.ndarray, eps: float = WELD_EPS) -> List[np.ndarray]:
        """Chain (N,2,3) segments sharing welded endpoints into polylines."""
        def key(p):  # tolerance hash
            return tuple(np.round(p / eps).astype(np.int64).tolist())

        if len(segs) == 0:
            return []
        finite = np.all(np.isfinite(segs.reshape(len(segs), -1)), axis=1)

        adj = defaultdict(list)
        for i, (a, b) in enumerate(segs):
            if not finite[i]:
                continue
            adj[key(a)].append((i, 0))
            adj[key(b)].append((i, 1))

        unused = [i for i in range(len(segs)) if finite[i]]
        unused_set = set(unused)
        paths = []

        for i0 in unused:
            if i0 not in unused_set:
                continue
            unused_set.remove(i0)
            a, b = segs[i0]
            path = [a, b]

            for forward in (True, False):
                cur = path[-1] if forward else path[0]
                while True:
                    nxt = None
                    for si, end_id in adj.get(key(cur), []):
                        if si in unused_set:
                            nxt = (si, segs[si][1 - end_id])
                            break
                    if nxt is None:
                        break
                    si, other = nxt
                    unused_set.remove(si)
                    if forward:
                        # no repeated consecutive points
                        if not np.allclose(path[-1], other, rtol=0.0, atol=eps):
                            path.append(other)
                    else:
                        if not np.allclose(path[0], other, rtol=0.0, atol=eps):
                            path.insert(0, other)
                    cur = other

            P = np.asarray(path, dtype=np.float64)
            # a closed loop needs three distinct points plus the closing one
            closed = np.allclose(P[0], P[-1], rtol=0.0, atol=eps)
            if P.shape[0] >= (4 if closed else 3):
                paths.append(P)

        return paths
