"""Failure taxonomy for design generation.

Architectural role:
    Defines the exceptions raised by the orchestration layer and converted to
    `ErrorPayload` JSON by API adapters.

Status mapping:
    - `InvalidInputError` -> HTTP 400
    - `ConfigurationError` -> HTTP 500
    - `TextGenerationError` / `ImageGenerationError` -> HTTP 500
    - `UnexpectedDesignError` -> HTTP 500

Transport failures:
    Provider clients raise `ProviderRequestError`. It never reaches API
    adapters directly; the orchestrator wraps it into the matching upstream
    failure so `details` always carries the provider message.
"""

from interior_designer.core.design_types import ErrorPayload


class DesignError(Exception):
    """Base class for failures that map to a structured error response.

    Attributes:
        message: User-facing error text (the `error` field).
        details: Optional diagnostic text (the `details` field).
        status_code: HTTP status used by the HTTP adapter.
    """

    status_code = 500
    default_message = "Design generation failed"

    def __init__(self, message: str | None = None, details: str | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> dict:
        """Return the `ErrorPayload` shape, omitting empty `details`."""
        payload = ErrorPayload(error=self.message, details=self.details or None)
        return payload.model_dump(exclude_none=True)


class InvalidInputError(DesignError):
    status_code = 400
    default_message = "Invalid request body"


class ConfigurationError(DesignError):
    default_message = "OpenAI API key not configured"


class TextGenerationError(DesignError):
    default_message = "Failed to generate design suggestions"


class ImageGenerationError(DesignError):
    default_message = "Failed to generate image"


class UnexpectedDesignError(DesignError):
    default_message = "An unexpected error occurred"


class ProviderRequestError(RuntimeError):
    """Raised by provider clients when a call is rejected or errors out.

    Attributes:
        status_code: Upstream HTTP status, or `None` for transport errors.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
