import logging
import traceback
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tourcms.config import APP_ENV, CORS_ORIGINS, UPLOAD_ROOT
from tourcms.models.db import init_db
from tourcms.services.images import content_type_for

# Importing the registry registers every content type
import tourcms.api.resources  # noqa: F401
from tourcms.api.crud_router import build_router
from tourcms.api.packages import router as packages_router
from tourcms.api.weather import router as weather_router
from tourcms.api.enquiry import router as enquiry_router
from tourcms.services.resources import all_resources

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Path(UPLOAD_ROOT).mkdir(parents=True, exist_ok=True)
    init_db()
    logger.info(f"Database ready; serving uploads from {UPLOAD_ROOT}")
    yield


app = FastAPI(title="Tourism CMS API", lifespan=lifespan)

# CORS middleware must be added before routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def upload_headers(request: Request, call_next):
    """Let other origins embed uploaded images and fix their Content-Type."""
    response = await call_next(request)
    if request.url.path.startswith("/uploads/"):
        response.headers["Cross-Origin-Resource-Policy"] = "cross-origin"
        response.headers["Access-Control-Allow-Origin"] = "*"
        content_type = content_type_for(request.url.path)
        if content_type and response.status_code < 400:
            response.headers["Content-Type"] = content_type
    return response


def error_response(status_code: int, message: str, detail=None):
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "detail": detail if detail is not None else message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Bad path/query parameters keep FastAPI's 422."""
    logger.warning(f"Validation error: {exc.errors()}")
    return error_response(422, "Request validation failed", jsonable_errors(exc))


def jsonable_errors(exc: RequestValidationError):
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), exc.detail)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return error_response(400, "A record with these values already exists or a reference is invalid.")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {exc}\n{error_detail}")
    detail = f"Internal server error: {str(exc)}" if APP_ENV == "development" else None
    return error_response(500, "Internal server error", detail)


@app.get("/health")
def health():
    return {"ok": True, "origins": CORS_ORIGINS}


for resource in all_resources():
    app.include_router(build_router(resource))
app.include_router(packages_router)
app.include_router(weather_router)
app.include_router(enquiry_router)

# UPLOAD_ROOT is created in lifespan, after the mount is declared
app.mount("/uploads", StaticFiles(directory=UPLOAD_ROOT, check_dir=False), name="uploads")
