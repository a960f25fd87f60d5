"""
Weight estimation endpoint.

POST /calculate_weight — upload an STL, get the estimated print weight.

Query: x_dim, y_dim, z_dim (mm), infill_percentage (0-100), material (optional).
The STL may come in any multipart field that carries a filename.
Each request is parsed in memory and handled independently; parsing and
the volume math run in the threadpool, off the event loop.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from .. import schemas
from ..config import settings
from ..errors import DegenerateGeometry, InvalidMesh, OutOfRangeInfill
from ..estimator import estimate_weight
from ..mesh_loader import load_mesh_bytes
from ..weights import validate_infill

logger = logging.getLogger(__name__)

router = APIRouter(tags=["weight"])

NO_FILE = "No STL file was uploaded"


def _too_large(size: int) -> HTTPException:
    return HTTPException(
        status_code=413,
        detail=f"File too large ({size / 1024 / 1024:.1f}MB). "
               f"Maximum is {settings.MAX_UPLOAD_MB}MB.",
    )


async def _first_upload(request: Request) -> Optional[UploadFile]:
    """First form value that is a file, whatever the field is called."""
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("multipart/form-data"):
        return None
    form = await request.form()
    for _, value in form.multi_items():
        if isinstance(value, UploadFile) and value.filename:
            return value
    return None


def _estimate_from_bytes(file_bytes: bytes, x_dim: float, y_dim: float, z_dim: float,
                         infill_percentage: float, material: Optional[str]) -> schemas.WeightEstimate:
    try:
        mesh = load_mesh_bytes(file_bytes)
    except InvalidMesh as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        estimate = estimate_weight(mesh, x_dim, y_dim, z_dim, infill_percentage, material)
    except DegenerateGeometry as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("%s: %.2f g", mesh, estimate.weight_grams)
    return estimate


@router.post(
    "/calculate_weight",
    response_model=schemas.WeightResponse,
    responses={400: {"model": schemas.ErrorResponse}, 413: {"model": schemas.ErrorResponse}},
)
async def calculate_weight_from_stl(
    request: Request,
    x_dim: float = Query(...),
    y_dim: float = Query(...),
    z_dim: float = Query(...),
    infill_percentage: float = Query(...),
    material: Optional[str] = Query(None),
):
    """
    Estimate the printed weight of an uploaded STL.

    - Rejects a missing or empty upload
    - Rejects uploads over MAX_UPLOAD_MB, before reading them when the size is known
    - Rejects infill outside 0-100
    - Rejects files trimesh cannot read as STL
    - Rejects flat meshes and non-positive target dimensions
    - Returns weight in grams as a 2-decimal string
    """
    upload = await _first_upload(request)
    if upload is None:
        raise HTTPException(status_code=400, detail=NO_FILE)

    max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
    if upload.size is not None and upload.size > max_bytes:
        raise _too_large(upload.size)

    file_bytes = await upload.read()
    if len(file_bytes) == 0:
        raise HTTPException(status_code=400, detail=NO_FILE)
    if len(file_bytes) > max_bytes:
        raise _too_large(len(file_bytes))

    # Validate infill before parsing
    try:
        validate_infill(infill_percentage)
    except OutOfRangeInfill as e:
        raise HTTPException(status_code=400, detail=str(e))

    estimate = await run_in_threadpool(
        _estimate_from_bytes, file_bytes, x_dim, y_dim, z_dim, infill_percentage, material,
    )
    return estimate.to_payload()
