"""
Shared test fixtures — test client, reference meshes, STL payloads.
"""

import numpy as np
import pytest
import trimesh
from fastapi.testclient import TestClient

from printweight.main import app
from printweight.models import Mesh


# Unit cube on {0,1}^3, 12 triangles, every face wound outward
CUBE_VERTICES = [
    [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],
    [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1],
]
CUBE_FACES = [
    [0, 2, 1], [0, 3, 2],  # bottom
    [4, 5, 6], [4, 6, 7],  # top
    [0, 1, 5], [0, 5, 4],  # front
    [3, 7, 6], [3, 6, 2],  # back
    [0, 4, 7], [0, 7, 3],  # left
    [1, 2, 6], [1, 6, 5],  # right
]


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def unit_cube():
    return Mesh(CUBE_VERTICES, CUBE_FACES)


@pytest.fixture
def cube_stl_bytes():
    """Binary STL of the unit cube."""
    tm = trimesh.Trimesh(vertices=np.array(CUBE_VERTICES, dtype=float),
                         faces=np.array(CUBE_FACES), process=False)
    return tm.export(file_type="stl")


@pytest.fixture
def cube_stl_ascii():
    """ASCII STL of the unit cube, as bytes."""
    tm = trimesh.Trimesh(vertices=np.array(CUBE_VERTICES, dtype=float),
                         faces=np.array(CUBE_FACES), process=False)
    text = tm.export(file_type="stl_ascii")
    return text.encode("utf-8") if isinstance(text, str) else text


@pytest.fixture
def cube_stl_path(tmp_path, cube_stl_bytes):
    path = tmp_path / "cube.stl"
    path.write_bytes(cube_stl_bytes)
    return path
