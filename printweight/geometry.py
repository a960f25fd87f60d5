"""
Mesh geometry — enclosed volume and per-axis rescaling.

Pure functions over a validated Mesh. No I/O, no shared state.
"""

import logging
import math

import numpy as np

from .errors import DegenerateGeometry
from .models import BoundingBox, Mesh

logger = logging.getLogger(__name__)


def calculate_volume(mesh: Mesh) -> float:
    """
    Enclosed volume of a closed, consistently wound mesh (mesh units cubed).

    Each face contributes the signed volume of the tetrahedron it forms with
    the origin, (1/6) * v0 . (v1 x v2). For a closed surface the signed
    contributions cancel outside the solid, so the origin can be anywhere.
    The absolute value of the total makes the result independent of whether
    the winding is outward or inward, as long as it is consistent.
    """
    if mesh.face_count == 0:
        return 0.0

    tris = mesh.triangles()
    v0, v1, v2 = tris[:, 0], tris[:, 1], tris[:, 2]

    v321 = v2[:, 0] * v1[:, 1] * v0[:, 2]
    v231 = v1[:, 0] * v2[:, 1] * v0[:, 2]
    v312 = v2[:, 0] * v0[:, 1] * v1[:, 2]
    v132 = v0[:, 0] * v2[:, 1] * v1[:, 2]
    v213 = v1[:, 0] * v0[:, 1] * v2[:, 2]
    v123 = v0[:, 0] * v1[:, 1] * v2[:, 2]

    signed = (1.0 / 6.0) * (-v321 + v231 + v312 - v132 - v213 + v123)
    return abs(float(np.sum(signed, dtype=np.float64)))


def bounding_box(mesh: Mesh) -> BoundingBox:
    """Component-wise min/max over all vertices."""
    if mesh.vertex_count == 0:
        raise DegenerateGeometry("Mesh has no vertices — bounding box is undefined")
    return BoundingBox(mesh.vertices.min(axis=0), mesh.vertices.max(axis=0))


def scale_volume(original_volume: float, target_x: float, target_y: float,
                 target_z: float, mesh: Mesh) -> float:
    """
    Volume after scaling the mesh independently along each axis so its
    bounding box measures exactly (target_x, target_y, target_z).

    Volume scales with the product of the per-axis linear factors, so the
    scaling does not need to be uniform.

    Raises DegenerateGeometry when an axis has zero extent or a target is
    not a positive finite number, instead of returning inf/NaN.
    """
    targets = (target_x, target_y, target_z)
    for axis, target in zip("xyz", targets):
        if not math.isfinite(target) or target <= 0:
            raise DegenerateGeometry(
                f"Target {axis} dimension must be a positive number, got {target}"
            )

    box = bounding_box(mesh)
    volume_scale = 1.0
    for axis, target, current in zip("xyz", targets, box.extents):
        if current <= 0:
            raise DegenerateGeometry(
                f"Mesh has zero extent along {axis} — cannot scale to {target}"
            )
        volume_scale *= target / current

    logger.debug("Bounding box extents %s, volume scale factor %.6g",
                 box.extents, volume_scale)
    return original_volume * volume_scale
