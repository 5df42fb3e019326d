import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_mastermind.core.api_key_store import ApiKeyStore
from blog_mastermind.core.config import FRONTEND_URL, LOG_LEVEL

# Import routers
from blog_mastermind.routes.analyze import router as analyze_router
from blog_mastermind.routes.config import router as config_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# -------------------------------------------------
# Create FastAPI app
# -------------------------------------------------
app = FastAPI(
    title="Semantic Blog Mastermind",
    version="1.0.0"
)

# Single in-memory key store for this process
app.state.api_key_store = ApiKeyStore()

# -------------------------------------------------
# CORS settings
# -------------------------------------------------
allowed_origins = [
    FRONTEND_URL,
    "http://localhost:3000",
    "http://localhost:8000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)


# -------------------------------------------------
# Error payloads: {"error": "..."} everywhere
# -------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# -------------------------------------------------
# Register Routers
# -------------------------------------------------
app.include_router(analyze_router)
app.include_router(config_router)


# -------------------------------------------------
# Page + Health Check
# -------------------------------------------------
@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health():
    return {
        "status": "ok",
        "message": "Semantic Blog Mastermind is running!"
    }
