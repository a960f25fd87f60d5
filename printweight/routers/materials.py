from fastapi import APIRouter

from .. import schemas
from ..weights import DEFAULT_MATERIAL, DENSITIES

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=schemas.MaterialList)
def list_materials():
    """Supported filaments and their densities (g/cm³)."""
    return {
        "materials": [
            {"material": mat, "density_g_cm3": density, "is_default": mat == DEFAULT_MATERIAL}
            for mat, density in DENSITIES.items()
        ]
    }
