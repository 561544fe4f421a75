import builtins

import pytest
import trimesh

from adapters.model_loader_adapter import TrimeshModelLoaderAdapter
from core.errors import FileAccessError, InvalidMeshError


def test_missing_file(tmp_path):
    with pytest.raises(FileAccessError):
        TrimeshModelLoaderAdapter().load(str(tmp_path / "nonexistent.stl"))


def test_directory_is_not_a_mesh_file(tmp_path):
    with pytest.raises(FileAccessError):
        TrimeshModelLoaderAdapter().load(str(tmp_path))


def test_loads_closed_stl(box_stl):
    mesh = TrimeshModelLoaderAdapter().load(str(box_stl))
    assert isinstance(mesh, trimesh.Trimesh)
    assert mesh.is_watertight
    assert len(mesh.faces) == 12


def test_open_surface_is_rejected(tmp_path, box_mesh):
    open_box = trimesh.Trimesh(vertices=box_mesh.vertices, faces=box_mesh.faces[:-1], process=False)
    path = tmp_path / "open.ply"
    open_box.export(str(path))
    with pytest.raises(InvalidMeshError):
        TrimeshModelLoaderAdapter().load(str(path))


def test_unparseable_file_is_an_invalid_mesh(tmp_path):
    path = tmp_path / "garbage.off"
    path.write_text("OFF\nthis is not a mesh\n", encoding="utf-8")
    with pytest.raises(InvalidMeshError):
        TrimeshModelLoaderAdapter().load(str(path))


def test_unreadable_file_is_a_file_error(box_stl, monkeypatch):
    real_open = builtins.open

    def deny(file, *args, **kwargs):
        if str(file).endswith(".stl"):
            raise PermissionError(13, "Permission denied", str(file))
        return real_open(file, *args, **kwargs)

    monkeypatch.setattr(builtins, "open", deny)
    with pytest.raises(FileAccessError):
        TrimeshModelLoaderAdapter().load(str(box_stl))
