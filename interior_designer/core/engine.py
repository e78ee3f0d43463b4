"""Core request orchestration for design generation.

Architectural role:
    Provides the single execution pipeline used by API/CLI layers to turn one
    design request into markdown suggestions plus a generated visualization.

Control-flow model:
    1. Fail fast when the provider credential is missing.
    2. Parse the body into `DesignRequest` and validate fields in fixed order.
    3. Call the text-generation provider.
    4. Call the image-generation provider (only after step 3 succeeded).
    5. Assemble `DesignResponse`.

All-or-nothing contract:
    A call returns a complete `DesignResponse` or raises a `DesignError`.
    Suggestions produced in step 3 are discarded when step 4 fails.

Interaction surface:
    - Text: `llm.service.generate_design_suggestions` via an injected client.
    - Image: `image.service.generate_room_visualization` via an injected client.
    - Configuration: an injected `DesignerConfig`; no module-global clients.

Concurrency:
    The orchestrator keeps no mutable state between calls, so one instance
    can serve concurrent requests. Provider calls within a request are
    strictly sequential and cannot be cancelled once started.

Determinism:
    Validation and prompt assembly are deterministic. Provider output is not;
    identical requests produce independent provider calls.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError

from interior_designer.core.design_types import DesignRequest, DesignResponse
from interior_designer.core.errors import (
    ConfigurationError,
    ImageGenerationError,
    InvalidInputError,
    TextGenerationError,
)
from interior_designer.image.client import ImageClient
from interior_designer.image.service import generate_room_visualization
from interior_designer.llm.client import ChatClient
from interior_designer.llm.provider_config import DESIGN_STYLES, DesignerConfig
from interior_designer.llm.service import generate_design_suggestions


logger = logging.getLogger(__name__)


class TextClientProtocol(Protocol):
    """Minimal interface required from the text-generation provider."""

    def create_completion(self, payload: dict) -> dict:
        """Return an OpenAI-style chat completion body."""
        ...


class ImageClientProtocol(Protocol):
    """Minimal interface required from the image-generation provider."""

    def generate(self, payload: dict) -> dict:
        """Return an OpenAI-style image generation body."""
        ...


def normalize_style(style: str) -> str | None:
    """Return the canonical style name, or `None` if it is not supported."""
    candidate = style.strip().lower()
    return candidate if candidate in DESIGN_STYLES else None


def parse_design_request(body: Any, require_image_description: bool = True) -> DesignRequest:
    """Parse and validate a raw request body.

    Validation order (first failure wins):
        1. Body is a mapping matching the request schema.
        2. `imageBase64` present and non-empty.
        3. `style` present and one of `DESIGN_STYLES`.
        4. `imageDescription` present (when required).

    Returns:
        A `DesignRequest` with trimmed text fields and normalized style.

    Raises:
        InvalidInputError: on the first violated rule.
    """
    if not isinstance(body, Mapping):
        raise InvalidInputError("Invalid request body")

    try:
        request = DesignRequest.model_validate(dict(body))
    except ValidationError as err:
        raise InvalidInputError("Invalid request body", details=str(err)) from err

    if not request.image_base64:
        raise InvalidInputError("Image is required")

    if not request.style or not request.style.strip():
        raise InvalidInputError("Style is required")

    style = normalize_style(request.style)
    if style is None:
        raise InvalidInputError(
            "Unsupported style",
            details=f"Expected one of: {', '.join(DESIGN_STYLES)}",
        )

    description = (request.image_description or "").strip()
    if require_image_description and not description:
        raise InvalidInputError("Room description is required")

    return request.model_copy(
        update={
            "style": style,
            "image_description": description,
            "additional_preferences": (request.additional_preferences or "").strip(),
            "design_prompt": (request.design_prompt or "").strip(),
        }
    )


class DesignOrchestrator:
    """Validates design requests and drives the two provider calls.

    Args:
        config: Explicit runtime configuration.
        text_client: Chat completion provider client.
        image_client: Image generation provider client.
    """

    def __init__(
        self,
        config: DesignerConfig,
        text_client: TextClientProtocol,
        image_client: ImageClientProtocol,
    ):
        self.config = config
        self.text_client = text_client
        self.image_client = image_client

    @classmethod
    def from_config(cls, config: DesignerConfig, session=None) -> "DesignOrchestrator":
        """Build an orchestrator wired to the real HTTP provider clients."""
        return cls(
            config,
            ChatClient.from_config(config, session=session),
            ImageClient.from_config(config, session=session),
        )

    def ensure_configured(self) -> None:
        """Raise `ConfigurationError` when the provider credential is missing."""
        if not self.config.api_key:
            raise ConfigurationError()

    def generate_design(self, body: Any) -> DesignResponse:
        """Run validation and both provider calls for one request body.

        Raises:
            ConfigurationError: credential missing; no provider is contacted.
            InvalidInputError: body fails validation.
            TextGenerationError: text provider failed; image provider untouched.
            ImageGenerationError: image provider failed; suggestions discarded.
        """
        self.ensure_configured()

        request = parse_design_request(body, self.config.require_image_description)

        try:
            suggestions = generate_design_suggestions(self.text_client, request, self.config)
        except Exception as err:
            logger.exception("Design suggestion generation failed")
            raise TextGenerationError(details=str(err)) from err

        try:
            image_urls = generate_room_visualization(self.image_client, request, self.config)
        except Exception as err:
            logger.exception("Room visualization generation failed")
            raise ImageGenerationError(details=str(err)) from err

        logger.info(
            "Design generated style=%s suggestions_chars=%d images=%d",
            request.style,
            len(suggestions),
            len(image_urls),
        )
        return DesignResponse(
            design_suggestions=suggestions,
            generated_image_urls=image_urls,
        )
