"""
FastAPI application wiring the voice terminal routes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from voice_terminal.api.routers import no_command_response
from voice_terminal.api.routers import router as api_router
from voice_terminal.config.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title="Voice Terminal API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # malformed /execute bodies are reported like a missing phrase
    if request.url.path == "/execute":
        logger.warning(f"Rejected /execute body: {exc.errors()}")
        return no_command_response()
    return await request_validation_exception_handler(request, exc)
