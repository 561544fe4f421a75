# core/models.py
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np

from .errors import NonSimplePolygonWarning


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


class Side(Enum):
    """Location of a point relative to a closed polygon."""
    INSIDE = "inside"
    ON_BOUNDARY = "on_boundary"
    OUTSIDE = "outside"


@dataclass(frozen=True, eq=False)
class Plane:
    """A cutting plane: a point on it and its (not necessarily unit) normal."""
    origin: np.ndarray
    normal: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "origin", np.asarray(self.origin, dtype=np.float64).reshape(3))
        object.__setattr__(self, "normal", np.asarray(self.normal, dtype=np.float64).reshape(3))

    @classmethod
    def from_values(cls, ox, oy, oz, nx, ny, nz) -> "Plane":
        return cls(origin=np.array([ox, oy, oz]), normal=np.array([nx, ny, nz]))


@dataclass(frozen=True)
class Projection:
    """
    Which coordinate axis is discarded to view a planar loop in 2D.

    cos_theta is |cos| of the angle between the loop normal and the dropped axis;
    a projected area divided by it gives back the area in the loop's own plane.
    """
    dropped: Axis
    cos_theta: float

    @property
    def kept(self) -> Tuple[int, int]:
        # drop X -> YZ, drop Y -> XZ, drop Z -> XY
        return tuple(int(a) for a in Axis if a != self.dropped)


@dataclass
class LoopSection:
    """One loop of a cross-section and its signed area (negative = hole)."""
    area: float
    polyline: np.ndarray  # (K,3)
    is_simple: bool = True
    parent: Optional[int] = None
    warning: Optional[NonSimplePolygonWarning] = None

    @property
    def sign(self) -> int:
        return -1 if self.area < 0 else 1

    @property
    def vertex_count(self) -> int:
        return int(self.polyline.shape[0])


@dataclass
class CrossSection:
    """All loops cut by one plane, in the order the intersector produced them."""
    plane: Plane
    loops: List[LoopSection] = field(default_factory=list)

    @property
    def loop_count(self) -> int:
        return len(self.loops)

    @property
    def net_area(self) -> float:
        return float(sum(loop.area for loop in self.loops))

    @property
    def warnings(self) -> List[NonSimplePolygonWarning]:
        return [loop.warning for loop in self.loops if loop.warning is not None]
