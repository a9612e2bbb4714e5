"""
FastAPI backend for the back-office console.
Exposes master data, MIS reports, LMS data and bulk upload via REST API.
"""
import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

from api import bulk_upload, business, master_data, reports, training
from db_setup.init_db import init_database


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    yield


app = FastAPI(
    title="Insurance Back-Office API",
    description="Master data, MIS reports, LMS and bulk upload for the back-office console",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS configuration - allow the console frontend
frontend_url = os.getenv("BACKOFFICE_FRONTEND_URL", "http://localhost:3000")
allowed_origins = list({o for o in [frontend_url, "http://localhost:3000", "http://127.0.0.1:3000"] if o})

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the console's {success, error} envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Field-level validation errors, keyed by field name for inline display"""
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors[".".join(loc) or "request"] = error.get("msg", "Invalid value")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": "Validation failed", "errors": errors},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal server error",
            "error_code": "INTERNAL_ERROR"
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# business must be registered before the generic /{table} routes
app.include_router(bulk_upload.router, prefix="/api/bulk-upload", tags=["Bulk Upload"])
app.include_router(business.router, prefix="/api/master-data/business", tags=["Business Master"])
app.include_router(master_data.router, prefix="/api/master-data", tags=["Master Data"])
app.include_router(reports.router, prefix="/api/reports", tags=["Reports"])
app.include_router(training.router, prefix="/api/training", tags=["LMS"])


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("BACKOFFICE_API_PORT", "8000"))
    uvicorn.run(app, host="0.0.0.0", port=port)
