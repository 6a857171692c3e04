## Main application entry point
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from app.agents.errors import CapstoneError
from app.catalog import form_options
from app.generation.routes import NO_STORE_HEADERS, method_guard_router, router as generation_router
from app.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

app = FastAPI(title="Capstone Project Generator")

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")

@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", form_options())

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.exception_handler(CapstoneError)
async def capstone_error_handler(request: Request, exc: CapstoneError):
    payload = exc.to_payload()
    if exc.status_code >= 500:
        logger.error("Error generating capstone project: %s", exc, exc_info=exc.__cause__)
        if settings.env == "dev" and exc.__cause__ is not None:
            payload["details"] = f"{type(exc.__cause__).__name__}: {exc.__cause__}"
    return JSONResponse(payload, status_code=exc.status_code, headers=NO_STORE_HEADERS)

app.include_router(generation_router)
if settings.STRICT_METHODS:
    app.include_router(method_guard_router)

logger.info("Using %s as generation provider", settings.LLM_PROVIDER)
