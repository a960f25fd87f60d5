"""
Weight estimation pipeline.

mesh -> enclosed volume -> volume scaled to target dimensions -> weight.
Pure math, strictly linear, no state between calls.

Input: validated Mesh, target x/y/z (mm), infill %, material name
Output: WeightEstimate
"""

import logging
from typing import Optional

from .geometry import calculate_volume, scale_volume
from .models import Mesh
from .schemas import WeightEstimate
from .weights import DENSITIES, calculate_weight, resolve_material, validate_infill

logger = logging.getLogger(__name__)


def estimate_weight(mesh: Mesh, x_dim: float, y_dim: float, z_dim: float,
                    infill_percentage: float, material: Optional[str] = None) -> WeightEstimate:
    """
    Run the full pipeline for one mesh.

    Infill is checked before any geometry work so a bad request fails
    without touching the mesh. Raises OutOfRangeInfill or DegenerateGeometry.
    """
    infill = validate_infill(infill_percentage)
    resolved = resolve_material(material)
    density = DENSITIES[resolved]

    original_volume = calculate_volume(mesh)
    scaled_volume = scale_volume(original_volume, x_dim, y_dim, z_dim, mesh)
    weight = calculate_weight(scaled_volume, infill, density)

    logger.debug(
        "%r: volume %.4f -> %.4f mm3 at (%s, %s, %s), %s%% %s -> %.4f g",
        mesh, original_volume, scaled_volume, x_dim, y_dim, z_dim,
        infill, resolved.value, weight,
    )
    return WeightEstimate(
        material=resolved,
        material_density=density,
        infill_percentage=infill,
        original_volume_mm3=original_volume,
        scaled_volume_mm3=scaled_volume,
        weight_grams=weight,
    )
