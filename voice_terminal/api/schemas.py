"""
Pydantic models for API requests and responses.
"""

from typing import Optional

from pydantic import BaseModel, Field

from voice_terminal.entities.session import DEFAULT_SESSION_ID


class ExecuteRequest(BaseModel):
    """Schema for a phrase execution request."""

    command: Optional[str] = Field(
        None, description="Natural-language phrase, e.g. 'list files'"
    )
    session_id: str = Field(
        DEFAULT_SESSION_ID,
        description="Session whose working directory is used and updated",
    )


class ExecuteResponse(BaseModel):
    """Schema for a handled phrase."""

    output: str = Field(..., description="Command output or status message")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    error: str = Field(..., description="Error message")
