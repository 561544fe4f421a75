# core/ports.py
from abc import ABC, abstractmethod
from typing import Any, List, Sequence

import numpy as np

from .models import CrossSection, Plane


class ModelLoaderPort(ABC):
    @abstractmethod
    def load(self, file_path: str) -> Any:
        """Return a closed triangle mesh usable by a SectionComputerPort."""


class PlaneReaderPort(ABC):
    @abstractmethod
    def read_planes(self, file_path: str) -> List[Plane]:
        ...


class SectionComputerPort(ABC):
    @abstractmethod
    def intersect(self, mesh: Any, plane: Plane) -> List[np.ndarray]:
        """
        Cut the mesh with the plane.
        Returns closed polylines [np.ndarray(K,3), ...]; a closed loop repeats its
        first point at the end. An empty list (or NoIntersection) means the plane
        misses the mesh.
        """


class SectionExporterPort(ABC):
    @abstractmethod
    def export_txt(self, sections: Sequence[CrossSection], file_path: str) -> None:
        ...
