"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from pydantic import BaseModel, ConfigDict, Field


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Unknown fields are rejected before reaching business logic
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass


class EnvelopeDTO(ResponseDTO):
    """Every JSON response carries a success flag."""

    success: bool = Field(default=True, description="Whether the request succeeded")


class MessageResponseDTO(EnvelopeDTO):
    """Response with no payload besides a message."""

    message: str = Field(description="Human readable message")


class ErrorResponseDTO(ResponseDTO):
    """Error envelope returned for every failed request."""

    success: bool = Field(default=False)
    error: str = Field(description="Error message")
    status: int = Field(description="HTTP status code")
