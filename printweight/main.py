from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .config import settings
from .routers import materials, weight

logger = logging.getLogger("printweight")

app = FastAPI(
    title="printweight",
    description="Printed weight estimation for STL models",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=settings.CORS_MAX_AGE,
)

app.include_router(weight.router)
app.include_router(materials.router)


# Every error goes out as {"error": "<message>"}
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("query", "body"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "invalid request"))
    message = "; ".join(parts) or "Invalid request"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=422, content={"error": message})


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
