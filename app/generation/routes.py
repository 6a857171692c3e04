# app/generation/routes.py
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.agents.capstone_writer import generate_capstone_project
from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client
from app.agents.validation import validate_project_input

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"

# Outputs are randomized per call, so nothing in between may cache them
NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate",
    "Pragma": "no-cache",
}

router = APIRouter()

# Only included when settings.STRICT_METHODS is on
method_guard_router = APIRouter()


@router.post(GENERATE_PATH)
async def generate_capstone(request: Request, llm: LLMClient = Depends(get_llm_client)):
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None

    logger.info(
        "Received request with body: %s",
        {k: body.get(k) for k in ("industry", "projectType", "difficulty")} if isinstance(body, dict) else body,
    )

    project = validate_project_input(body)
    logger.info("Normalized inputs: %s", project.model_dump(by_alias=True))

    capstone = await run_in_threadpool(generate_capstone_project, project, llm)

    return JSONResponse(capstone.model_dump(), headers=NO_STORE_HEADERS)


@method_guard_router.api_route(GENERATE_PATH, methods=["GET", "PUT", "PATCH", "DELETE"])
async def generate_method_not_allowed(request: Request):
    logger.warning("Invalid method: %s", request.method)
    return JSONResponse(
        {"error": "Method Not Allowed. Use POST request."},
        status_code=405,
        headers={**NO_STORE_HEADERS, "Allow": "POST"},
    )
