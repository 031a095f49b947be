# FastAPI entry point; wires the generation router, CORS and error responses
# exam_generator/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import os
import sys

# Add project root to sys.path to allow for absolute imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from exam_generator.endpoints import generate as generate_router
from exam_generator.utils.config import settings
from exam_generator.utils.logger import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Exam Question Generator API starting up...")
    logger.info(f"Model: {settings.model_name} at {settings.model_endpoint}")
    if not settings.github_pat:
        # Requests will fail closed until the credential is provided.
        logger.warning("GITHUB_PAT is not set; generation requests will be rejected.")
    if settings.strict_validation:
        logger.info("Strict validation of model output is enabled.")
    logger.info("Startup complete.")
    yield
    logger.info("Exam Question Generator API shutting down...")

# --- FastAPI App Initialization ---
app = FastAPI(
    title="Exam Question Generator API",
    description="Generates exam questions and answer keys with a hosted language model.",
    version="0.1.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Responses ---
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    )
    logger.info(f"Rejected invalid request to {request.url.path}: {problems}")
    return JSONResponse(status_code=422, content={"error": f"Invalid request: {problems}"})

# --- API Routers ---
app.include_router(generate_router.router, prefix="/api", tags=["Generation"])

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the Exam Question Generator API"}
