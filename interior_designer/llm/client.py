"""Transport client for OpenAI-compatible chat completion requests.

Architectural role:
    Executes the HTTP request against the configured text-generation provider
    and returns the decoded JSON body. Payload construction and completion
    extraction live in `llm.service`.

Model invocation flow:
    `service.generate_design_suggestions` -> `ChatClient.create_completion`
    -> `POST {base_url}/chat/completions` -> decoded JSON.

Retry behavior:
    No retry loop is implemented here. Each call is attempted once; bounded
    retries, when configured, wrap this call from `llm.retry`.

Failure handling model:
    Transport errors, non-2xx responses, and undecodable bodies raise
    `ProviderRequestError` carrying the provider's own error message where one
    is available.
"""

import logging

import requests

from interior_designer.core.errors import ProviderRequestError


logger = logging.getLogger(__name__)


def provider_error_message(response: requests.Response) -> str:
    """Extract the provider's error message from an error response.

    OpenAI-compatible providers answer with `{"error": {"message": ...}}`.
    Falls back to a status-labelled excerpt of the raw body.
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    body = (response.text or "").strip()[:300]
    if body:
        return f"HTTP {response.status_code}: {body}"
    return f"HTTP {response.status_code}"


def post_json(url: str, api_key: str, payload: dict, timeout=None, session=None) -> dict:
    """POST a JSON payload with bearer auth and return the decoded JSON body.

    Raises:
        ProviderRequestError: on any transport, status, or decoding failure.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    sender = session or requests

    try:
        response = sender.post(url, headers=headers, json=payload, timeout=timeout)
    except requests.exceptions.RequestException as err:
        raise ProviderRequestError(str(err)) from err

    if not response.ok:
        raise ProviderRequestError(
            provider_error_message(response),
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as err:
        raise ProviderRequestError(
            "Provider returned a non-JSON response",
            status_code=response.status_code,
        ) from err


class ChatClient:
    """OpenAI-compatible chat completion client.

    Args:
        api_key: Bearer credential.
        url: Full chat completions endpoint URL.
        timeout: Per-request timeout in seconds, or `None` for the transport
            default.
        session: Optional `requests.Session` (connection reuse, test doubles).
    """

    def __init__(self, api_key, url, timeout=None, session=None):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_config(cls, config, session=None) -> "ChatClient":
        return cls(config.api_key, config.chat_url, timeout=config.timeout, session=session)

    def create_completion(self, payload: dict) -> dict:
        """Send one chat completion request and return the raw response body."""
        logger.debug("Requesting chat completion model=%s", payload.get("model"))
        return post_json(self.url, self.api_key, payload, timeout=self.timeout, session=self.session)
