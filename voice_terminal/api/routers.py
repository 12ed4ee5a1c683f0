"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse, PlainTextResponse

from voice_terminal.api.dependencies import get_handle_phrase_uc
from voice_terminal.api.schemas import ErrorResponse, ExecuteRequest, ExecuteResponse
from voice_terminal.exceptions import BaseAppError, SessionError

NO_COMMAND_ERROR = "No command provided"
INVALID_SESSION_ERROR = "Session id must be valid UTF-8 text"
HEALTH_MESSAGE = "Voice Terminal Backend Connected Successfully!"

router = APIRouter()


def no_command_response() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": NO_COMMAND_ERROR})


def _is_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@router.post(
    "/execute",
    response_model=ExecuteResponse,
    responses={400: {"model": ErrorResponse}},
)
def execute(body: Optional[ExecuteRequest] = Body(None)):
    """
    Translate a natural-language phrase and run the resulting command.

    Args:
        body: Request body containing the phrase and an optional session id

    Returns:
        ExecuteResponse: Output of the command or a status message. Blocked,
        unknown and failed commands are reported here too, with status 200.
    """
    if body is None or not body.command or not body.command.strip():
        return no_command_response()
    # lone surrogates pass JSON parsing but cannot be encoded for output
    if not _is_encodable(body.command):
        return no_command_response()
    if not _is_encodable(body.session_id):
        return JSONResponse(status_code=400, content={"error": INVALID_SESSION_ERROR})
    try:
        result = get_handle_phrase_uc().execute(body.command, body.session_id)
    except SessionError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except BaseAppError as e:
        return ExecuteResponse(output=str(e))
    return ExecuteResponse(output=result.output)


@router.get("/", response_class=PlainTextResponse)
def health():
    """Health check."""
    return PlainTextResponse(content=HEALTH_MESSAGE, status_code=200)
