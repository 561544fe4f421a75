# core/pipeline.py
import logging
from typing import Any, List, Sequence

import numpy as np

from .classifier import signed_loop_area
from .errors import NoIntersection
from .models import CrossSection, Plane
from .ports import SectionComputerPort
from .projection import select_projection

logger = logging.getLogger(__name__)


def evaluate_cross_section(plane: Plane, loops: Sequence[np.ndarray], plane_index: int = 0) -> CrossSection:
    """
    Signed areas for every loop cut by one plane, in intersector order.
    Loops are only ever compared with siblings from the same plane.
    """
    # the loops lie in the cutting plane, so they share its normal
    projection = select_projection(plane.normal)
    loops = [np.asarray(loop, dtype=np.float64) for loop in loops]

    section = CrossSection(plane=plane)
    for i in range(len(loops)):
        loop_section = signed_loop_area(i, loops, projection, plane_index=plane_index)
        if loop_section.warning is not None:
            logger.warning(str(loop_section.warning))
        section.loops.append(loop_section)

    logger.debug(
        f"[SEC] plane {plane_index}: {section.loop_count} loop(s), "
        f"net area {section.net_area:.6g} (dropped axis {projection.dropped.name})"
    )
    return section


class CrossSectionPipeline:
    """
    Slices a mesh with each plane in turn and evaluates the resulting loops.
    The plane order of the input is the order of the output.
    """

    def __init__(self, intersector: SectionComputerPort):
        self.intersector = intersector

    def process_plane(self, mesh: Any, plane: Plane, plane_index: int = 0) -> CrossSection:
        # fail on a degenerate normal before asking the intersector anything
        select_projection(plane.normal)
        try:
            loops = list(self.intersector.intersect(mesh, plane))
        except NoIntersection:
            loops = []
        return evaluate_cross_section(plane, loops, plane_index=plane_index)

    def run(self, mesh: Any, planes: Sequence[Plane]) -> List[CrossSection]:
        logger.info(f"Slicing {len(planes)} plane(s) ...")
        return [self.process_plane(mesh, plane, t) for t, plane in enumerate(planes)]
