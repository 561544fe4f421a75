# workers/section_worker.py
import logging
from multiprocessing import Pool
from typing import List, Optional, Sequence

import numpy as np
import trimesh

from core.models import CrossSection, Plane
from core.pipeline import CrossSectionPipeline
from core.ports import SectionComputerPort

logger = logging.getLogger(__name__)

# Per-process state, set once by _init_child
_PIPELINE: Optional[CrossSectionPipeline] = None
_MESH: Optional[trimesh.Trimesh] = None


def _init_child(vertices, faces, intersector):
    global _PIPELINE, _MESH
    # process=False -> keep the parent's vertices exactly as they are
    _MESH = trimesh.Trimesh(vertices=vertices, faces=faces, process=False)
    _PIPELINE = CrossSectionPipeline(intersector)


def _child_section(job):
    t, plane = job
    return _PIPELINE.process_plane(_MESH, plane, t)


class SectionWorker:
    """
    Slices the planes of one run on a process pool.
    Usage:
      worker = SectionWorker(TrimeshSectionAdapter(), processes=4)
      sections = worker.run(mesh, planes)   # same order as planes
    The first error raised for any plane propagates and ends the run.
    """

    def __init__(self, intersector: SectionComputerPort, processes: int = 1):
        self.intersector = intersector
        self.processes = max(1, int(processes or 1))

    def run(self, mesh: trimesh.Trimesh, planes: Sequence[Plane]) -> List[CrossSection]:
        planes = list(planes)
        if self.processes == 1 or len(planes) <= 1:
            return CrossSectionPipeline(self.intersector).run(mesh, planes)

        V = np.asarray(mesh.vertices, dtype=np.float64)
        F = np.asarray(mesh.faces, dtype=np.int64).reshape(-1, 3)
        n_proc = min(self.processes, len(planes))
        logger.info(f"Slicing {len(planes)} plane(s) on {n_proc} processes ...")

        with Pool(processes=n_proc, initializer=_init_child, initargs=(V, F, self.intersector)) as pool:
            # map keeps input order and re-raises the first child exception
            return pool.map(_child_section, list(enumerate(planes)))
