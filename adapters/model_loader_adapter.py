# adapters/model_loader_adapter.py
import trimesh

from core.ports import ModelLoaderPort
from adapters.model_loader import ModelLoader


class TrimeshModelLoaderAdapter(ModelLoaderPort):
    def load(self, file_path: str) -> trimesh.Trimesh:
        return ModelLoader().load_model(file_path)
