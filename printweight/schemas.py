from pydantic import BaseModel, ConfigDict
from typing import List

from .models import Material
from .weights import format_weight


class WeightEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    material: Material
    material_density: float
    infill_percentage: float
    original_volume_mm3: float
    scaled_volume_mm3: float
    weight_grams: float

    def to_payload(self) -> dict:
        """Wire payload: weight as a 2-decimal string."""
        return {"weight_grams": format_weight(self.weight_grams)}


class WeightResponse(BaseModel):
    weight_grams: str


class ErrorResponse(BaseModel):
    error: str


class MaterialDensity(BaseModel):
    material: Material
    density_g_cm3: float
    is_default: bool = False


class MaterialList(BaseModel):
    materials: List[MaterialDensity]
