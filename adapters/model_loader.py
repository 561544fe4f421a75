# adapters/model_loader.py
import logging
from pathlib import Path

import numpy as np
import trimesh

from core.errors import FileAccessError, InvalidMeshError

logger = logging.getLogger(__name__)


class ModelLoader:
    def __init__(self):
        self.mesh = None          # trimesh.Trimesh once loaded

    def load_model(self, file_path: str) -> trimesh.Trimesh:
        file_path = Path(file_path)
        if not file_path.is_file():
            raise FileAccessError(f"Invalid file: {file_path}")

        try:
            # Coincident vertices (STL) are merged so shared edges are recognised
            m = trimesh.load(str(file_path), force='mesh')
        except OSError as e:
            raise FileAccessError(f"Invalid file: {file_path} ({e})") from e
        except Exception as e:
            raise InvalidMeshError(f"Failed to read a mesh from file {file_path}: {e}") from e

        if isinstance(m, trimesh.Scene):
            if not m.geometry:
                raise InvalidMeshError(f"Failed to read a mesh from file {file_path}: no geometry")
            # Merge geometries if there are multiple
            m = trimesh.util.concatenate(tuple(m.geometry.values()))
        if not isinstance(m, trimesh.Trimesh):
            raise InvalidMeshError(f"Expected a triangle mesh, but got: {type(m).__name__}")
        if m.is_empty:
            raise InvalidMeshError(f"Failed to read a mesh from file {file_path}: mesh is empty")

        F = np.asarray(m.faces)
        if F.ndim != 2 or F.shape[1] != 3:
            raise InvalidMeshError("Only triangle meshes are supported!")
        if not m.is_watertight:
            raise InvalidMeshError(f"Mesh is not a closed surface: {file_path}")

        self.mesh = m
        logger.info(f"[OK] Model loaded: {file_path}")
        logger.info(f"     Vertex count: {len(m.vertices)}")
        logger.info(f"     Face count:   {len(m.faces)}")
        return m
