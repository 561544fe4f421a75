import pytest
import trimesh

from helpers import square


@pytest.fixture
def concentric_squares():
    return [square(10.0), square(4.0, ccw=False)]


@pytest.fixture
def box_mesh():
    return trimesh.creation.box(extents=[10.0, 10.0, 10.0])


@pytest.fixture
def box_stl(tmp_path, box_mesh):
    path = tmp_path / "box.stl"
    box_mesh.export(str(path))
    return path
