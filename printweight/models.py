import enum

import numpy as np

from .errors import InvalidMesh


# --- Enums ---

class Material(str, enum.Enum):
    PLA = "pla"
    ABS = "abs"
    PETG = "petg"
    TPU = "tpu"


# --- Geometry values ---

class Mesh:
    """
    Indexed triangle mesh: vertex positions plus faces as vertex index triples.

    The constructor is the only place mesh structure is checked. Once built,
    the arrays are float64 / int64 copies flagged read-only, so the geometry
    functions can assume every face index is in range.

    Face winding is significant: it decides the sign of each face's
    tetrahedron volume. The mesh is not checked for closedness.
    """

    __slots__ = ("_vertices", "_faces")

    def __init__(self, vertices, faces):
        try:
            vertices = np.array(vertices, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidMesh(f"Vertices are not numeric: {e}")
        if vertices.size == 0:
            vertices = vertices.reshape(0, 3)
        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise InvalidMesh(f"Vertices must have shape (N, 3), got {vertices.shape}")
        if not np.all(np.isfinite(vertices)):
            raise InvalidMesh("Vertices contain NaN or infinite coordinates")

        faces = np.array(faces)
        if faces.size == 0:
            faces = faces.reshape(0, 3)
        if faces.ndim != 2 or faces.shape[1] != 3:
            raise InvalidMesh(f"Faces must have shape (M, 3), got {faces.shape}")
        if faces.size and not np.issubdtype(faces.dtype, np.integer):
            raise InvalidMesh(f"Face indices must be integers, got {faces.dtype}")
        faces = faces.astype(np.int64)

        if faces.size:
            lo, hi = int(faces.min()), int(faces.max())
            if lo < 0 or hi >= len(vertices):
                raise InvalidMesh(
                    f"Face index out of range: indices span [{lo}, {hi}] "
                    f"but mesh has {len(vertices)} vertices"
                )

        vertices.flags.writeable = False
        faces.flags.writeable = False
        self._vertices = vertices
        self._faces = faces

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices

    @property
    def faces(self) -> np.ndarray:
        return self._faces

    @property
    def face_count(self) -> int:
        return len(self._faces)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def triangles(self) -> np.ndarray:
        """Face corner coordinates, shape (M, 3, 3)."""
        return self._vertices[self._faces]

    def __repr__(self):
        return f"Mesh(vertices={self.vertex_count}, faces={self.face_count})"


class BoundingBox:
    """Axis-aligned box from component-wise min/max over a mesh's vertices."""

    __slots__ = ("min_corner", "max_corner")

    def __init__(self, min_corner, max_corner):
        self.min_corner = tuple(float(c) for c in min_corner)
        self.max_corner = tuple(float(c) for c in max_corner)

    @property
    def extents(self) -> tuple:
        """Current size along x, y, z."""
        return tuple(hi - lo for lo, hi in zip(self.min_corner, self.max_corner))

    def __repr__(self):
        return f"BoundingBox(min={self.min_corner}, max={self.max_corner})"
