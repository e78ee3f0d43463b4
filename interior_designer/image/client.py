"""OpenAI-compatible image-generation HTTP client.

Processing flow:
    1. Receive a prepared JSON payload from `image.service`.
    2. Submit it to the configured `/images/generations` endpoint.
    3. Return the parsed JSON response or raise on failure.

Base64 and temporary files:
    - This module does not decode Base64 content.
    - This module does not create or manage temporary files.

Size validation:
    - No local payload-size validation is performed here.

Error handling strategy:
    - Transport and HTTP failures raise `ProviderRequestError` for upstream
      handling (see `llm.client.post_json`).

Determinism:
    - Request assembly is deterministic for fixed inputs/configuration.
    - Final output remains provider/network dependent.
"""

import logging

from interior_designer.llm.client import post_json


logger = logging.getLogger(__name__)


class ImageClient:
    """Client for a single image-generation endpoint.

    Args:
        api_key: Bearer credential.
        url: Full image generation endpoint URL.
        timeout: Per-request timeout in seconds, or `None`.
        session: Optional `requests.Session`.
    """

    def __init__(self, api_key, url, timeout=None, session=None):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_config(cls, config, session=None) -> "ImageClient":
        return cls(config.api_key, config.image_url, timeout=config.timeout, session=session)

    def generate(self, payload: dict) -> dict:
        """Send an image-generation request and return the parsed JSON response."""
        logger.debug(
            "Requesting image generation model=%s n=%s size=%s",
            payload.get("model"),
            payload.get("n"),
            payload.get("size"),
        )
        return post_json(self.url, self.api_key, payload, timeout=self.timeout, session=self.session)
