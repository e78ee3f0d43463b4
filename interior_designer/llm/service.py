"""Prompt-to-payload adapter for design suggestion generation.

Architectural role:
    Bridges prompt construction (`prompting.prompt_builder`) to transport
    (`llm.client.ChatClient`) and normalizes the provider response to plain
    markdown text.

Model call flow:
    request fields -> prompt -> payload -> `call_with_retry(client...)`
    -> first completion text.

Determinism:
    Payload construction is deterministic for fixed inputs and configuration.
    Generated output remains non-deterministic because inference runs remotely.
"""

from interior_designer.llm.retry import call_with_retry
from interior_designer.prompting.prompt_builder import build_messages, build_suggestion_prompt


def build_completion_payload(design_request, config) -> dict:
    """Build the chat completion payload for one design request.

    The room photo is attached as a vision input only when
    `config.include_image_in_prompt` is set.
    """
    prompt = build_suggestion_prompt(
        design_request.image_description,
        design_request.style,
        design_request.additional_preferences,
        design_request.design_prompt,
    )
    image = design_request.image_base64 if config.include_image_in_prompt else None
    return {
        "model": config.text_model,
        "messages": build_messages(prompt, image),
    }


def extract_completion_text(data) -> str:
    """Return the first completion's message content, or `""` when absent."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""


def generate_design_suggestions(client, design_request, config) -> str:
    """Invoke the text provider once (or per retry policy) and return markdown.

    Failure scenarios:
        `ProviderRequestError` from the client propagates to the caller.
    """
    payload = build_completion_payload(design_request, config)
    data = call_with_retry(lambda: client.create_completion(payload), config.retry)
    return extract_completion_text(data)
