"""
Geometry tests — mesh construction, enclosed volume, per-axis rescaling.

Tests:
1-5.   Mesh validating constructor
6-12.  calculate_volume: reference cube, tetrahedron, orientation/origin independence
13-19. bounding_box + scale_volume, degenerate geometry
"""

import math

import numpy as np
import pytest
import trimesh

from printweight.errors import DegenerateGeometry, InvalidMesh
from printweight.geometry import bounding_box, calculate_volume, scale_volume
from printweight.models import Mesh


# ============================================================
# Mesh constructor
# ============================================================

def test_mesh_promotes_to_float64(unit_cube):
    mesh = Mesh(unit_cube.vertices.astype(np.float32), unit_cube.faces)
    assert mesh.vertices.dtype == np.float64
    assert mesh.face_count == 12
    assert mesh.vertex_count == 8


def test_mesh_is_read_only(unit_cube):
    with pytest.raises(ValueError):
        unit_cube.vertices[0, 0] = 5.0
    with pytest.raises(ValueError):
        unit_cube.faces[0, 0] = 1


def test_mesh_rejects_out_of_range_index(unit_cube):
    with pytest.raises(InvalidMesh, match="out of range"):
        Mesh(unit_cube.vertices, [[0, 1, 8]])
    with pytest.raises(InvalidMesh, match="out of range"):
        Mesh(unit_cube.vertices, [[-1, 1, 2]])


def test_mesh_rejects_bad_shapes(unit_cube):
    with pytest.raises(InvalidMesh):
        Mesh([[0, 0], [1, 1]], [])
    with pytest.raises(InvalidMesh):
        Mesh(unit_cube.vertices, [[0, 1, 2, 3]])
    with pytest.raises(InvalidMesh):
        Mesh(unit_cube.vertices, [[0.0, 1.5, 2.0]])
    with pytest.raises(InvalidMesh):
        Mesh([[0, 0, float("nan")]], [])


def test_mesh_without_faces_is_allowed(unit_cube):
    mesh = Mesh(unit_cube.vertices, [])
    assert mesh.face_count == 0


# ============================================================
# Volume
# ============================================================

def test_unit_cube_volume(unit_cube):
    """Reference scenario: unit cube has volume exactly 1."""
    assert calculate_volume(unit_cube) == pytest.approx(1.0)


def test_zero_faces_volume_is_zero(unit_cube):
    assert calculate_volume(Mesh(unit_cube.vertices, [])) == 0.0
    assert calculate_volume(Mesh([], [])) == 0.0


def test_tetrahedron_volume():
    verts = [[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]]
    faces = [[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]]
    assert calculate_volume(Mesh(verts, faces)) == pytest.approx(1.0 / 6.0)


def test_reversed_winding_gives_same_volume(unit_cube):
    """Flipping every face flips the signed sum; abs() discards it."""
    flipped = Mesh(unit_cube.vertices, unit_cube.faces[:, ::-1])
    assert calculate_volume(flipped) == pytest.approx(calculate_volume(unit_cube))


@pytest.mark.parametrize("offset", [(5, 0, 0), (-100, 250, 3.5), (100, 100, 100)])
def test_translation_does_not_change_volume(unit_cube, offset):
    moved = Mesh(unit_cube.vertices + np.array(offset), unit_cube.faces)
    assert calculate_volume(moved) == pytest.approx(1.0, rel=1e-9)


def test_rotated_box_volume():
    """Non-axis-aligned box keeps its volume."""
    box = trimesh.creation.box(extents=(2.0, 3.0, 4.0))
    box.apply_transform(trimesh.transformations.rotation_matrix(0.7, [1, 2, 3]))
    mesh = Mesh(box.vertices, box.faces)
    assert calculate_volume(mesh) == pytest.approx(24.0, rel=1e-9)


def test_coarse_sphere_matches_trimesh():
    """Tessellated sphere volume agrees with trimesh's mass properties."""
    sphere = trimesh.creation.icosphere(subdivisions=2, radius=10.0)
    mesh = Mesh(sphere.vertices, sphere.faces)
    volume = calculate_volume(mesh)
    assert volume == pytest.approx(sphere.volume, rel=1e-9)
    assert 0 < volume < 4.0 / 3.0 * math.pi * 1000


# ============================================================
# Bounding box + scaling
# ============================================================

def test_bounding_box_extents():
    mesh = Mesh([[-1, 2, 3], [4, -5, 6], [0, 0, 10]], [[0, 1, 2]])
    box = bounding_box(mesh)
    assert box.min_corner == (-1.0, -5.0, 3.0)
    assert box.max_corner == (4.0, 2.0, 10.0)
    assert box.extents == (5.0, 7.0, 7.0)


def test_scale_unit_cube_to_10mm(unit_cube):
    """Reference scenario: (1,1,1) scaled to (10,10,10) gives 1000."""
    assert scale_volume(1.0, 10, 10, 10, unit_cube) == pytest.approx(1000.0)


def test_scale_is_per_axis(unit_cube):
    assert scale_volume(1.0, 2, 3, 4, unit_cube) == pytest.approx(24.0)


def test_scale_increases_with_each_target(unit_cube):
    base = scale_volume(1.0, 10, 10, 10, unit_cube)
    assert scale_volume(1.0, 11, 10, 10, unit_cube) > base
    assert scale_volume(1.0, 10, 11, 10, unit_cube) > base
    assert scale_volume(1.0, 10, 10, 11, unit_cube) > base


def test_flat_mesh_is_degenerate():
    flat = Mesh([[0, 0, 0], [1, 0, 0], [0, 1, 0]], [[0, 1, 2]])
    with pytest.raises(DegenerateGeometry, match="zero extent along z"):
        scale_volume(0.0, 10, 10, 10, flat)


def test_empty_mesh_is_degenerate():
    with pytest.raises(DegenerateGeometry):
        scale_volume(0.0, 10, 10, 10, Mesh([], []))


@pytest.mark.parametrize("target", [0, -5, float("inf"), float("nan")])
def test_non_positive_target_is_degenerate(unit_cube, target):
    with pytest.raises(DegenerateGeometry):
        scale_volume(1.0, 10, target, 10, unit_cube)
