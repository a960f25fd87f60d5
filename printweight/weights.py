# FDM print weight model — material densities and the shell/infill decomposition

import logging
import math
from typing import Optional

from .errors import OutOfRangeInfill
from .models import Material

logger = logging.getLogger(__name__)

# Densities (g/cm³)
DENSITIES = {
    Material.PLA: 1.24,
    Material.ABS: 1.04,
    Material.PETG: 1.27,
    Material.TPU: 1.21,
}

DEFAULT_MATERIAL = Material.PLA

MM3_PER_CM3 = 1000.0

# Two 0.4mm perimeters
SHELL_THICKNESS_MM = 0.8
# Top/bottom solid layers, fraction of total volume
SOLID_LAYERS_FACTOR = 0.15
# Empirical: shell fraction = SHELL_THICKNESS_MM / SHELL_DIVISOR. Keep as is for numeric parity.
SHELL_DIVISOR = 10.0

INFILL_MIN = 0.0
INFILL_MAX = 100.0


def resolve_material(name: Optional[str]) -> Material:
    """
    Case-insensitive material lookup.
    Absent or unrecognised names fall back to PLA.
    """
    if name is None:
        return DEFAULT_MATERIAL
    key = str(name).strip().lower()
    try:
        return Material(key)
    except ValueError:
        logger.info("Unknown material %r — defaulting to %s", name, DEFAULT_MATERIAL.value)
        return DEFAULT_MATERIAL


def density_for_material(name: Optional[str]) -> float:
    """Density in g/cm³ for a material name, PLA if unknown."""
    return DENSITIES[resolve_material(name)]


def validate_infill(infill_percentage: float) -> float:
    """Return infill as float, or raise OutOfRangeInfill outside 0-100 (NaN included)."""
    infill = float(infill_percentage)
    if math.isnan(infill) or infill < INFILL_MIN or infill > INFILL_MAX:
        raise OutOfRangeInfill(infill)
    return infill


def calculate_weight(volume_mm3: float, infill_percentage: float, material_density: float) -> float:
    """
    Estimated printed weight in grams.

    A fixed fraction of the volume (shell + solid top/bottom layers) is
    printed solid; the rest is infill space, of which only
    infill_percentage % is material.
    """
    infill = validate_infill(infill_percentage)
    volume_cm3 = volume_mm3 / MM3_PER_CM3

    shell_volume_percentage = SHELL_THICKNESS_MM / SHELL_DIVISOR
    effective_volume = (
        (shell_volume_percentage + SOLID_LAYERS_FACTOR) * volume_cm3
        + (1 - shell_volume_percentage - SOLID_LAYERS_FACTOR) * volume_cm3 * (infill / 100)
    )
    return effective_volume * material_density


def format_weight(weight_grams: float) -> str:
    """Two decimal places, e.g. 0.4762 -> '0.48'."""
    return f"{weight_grams:.2f}"
