# adapters/section_adapter.py
from typing import List

import numpy as np
import trimesh

from core.config import WELD_EPS
from core.models import Plane
from core.ports import SectionComputerPort
from core.section_service import SectionService


class TrimeshSectionAdapter(SectionComputerPort):
    def __init__(self, eps: float = WELD_EPS):
        self.eps = eps

    def intersect(self, mesh: trimesh.Trimesh, plane: Plane) -> List[np.ndarray]:
        return SectionService.compute_section(mesh, plane, eps=self.eps)
