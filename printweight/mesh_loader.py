"""
STL loading — turns an STL file (ASCII or binary) into a validated Mesh.

Parsing is delegated to trimesh. Coincident vertices are merged on load,
so the result is an indexed mesh with shared vertices and faces in file
order.
"""

import io
import logging
from pathlib import Path
from typing import Union

import trimesh

from .errors import InvalidMesh
from .models import Mesh

logger = logging.getLogger(__name__)

NOT_AN_STL = "Not a valid STL file"


def _to_mesh(loaded) -> Mesh:
    if not isinstance(loaded, trimesh.Trimesh) or len(loaded.faces) == 0:
        raise InvalidMesh(NOT_AN_STL)
    return Mesh(loaded.vertices, loaded.faces)


def load_mesh_bytes(data: bytes) -> Mesh:
    """Parse STL bytes held in memory (e.g. an HTTP upload)."""
    if not data:
        raise InvalidMesh(NOT_AN_STL)
    try:
        loaded = trimesh.load_mesh(io.BytesIO(data), file_type="stl")
    except Exception as e:
        logger.warning("STL parse failed: %s", e)
        raise InvalidMesh(NOT_AN_STL) from e
    return _to_mesh(loaded)


def load_mesh(path: Union[str, Path]) -> Mesh:
    """Read and parse an STL file from disk."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"STL file not found: {path}")
    return load_mesh_bytes(path.read_bytes())
