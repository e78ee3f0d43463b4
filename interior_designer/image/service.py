"""Image service used by the design orchestrator.

Role in pipeline:
    - Receives validated request fields from orchestration.
    - Builds the image prompt and fixed generation parameters.
    - Returns one URL slot per image the provider returned.

Size validation:
    - Size, quality, count, and rendering style are fixed constants from
      `llm.provider_config`; callers cannot override them.

Error handling strategy:
    - `ProviderRequestError` from the client is propagated unchanged.
"""

from interior_designer.llm.provider_config import (
    IMAGE_COUNT,
    IMAGE_QUALITY,
    IMAGE_SIZE,
    IMAGE_STYLE,
)
from interior_designer.llm.retry import call_with_retry
from interior_designer.prompting.prompt_builder import build_image_prompt


def build_image_payload(design_request, config) -> dict:
    return {
        "model": config.image_model,
        "prompt": build_image_prompt(
            design_request.image_description,
            design_request.style,
            design_request.design_prompt,
        ),
        "n": IMAGE_COUNT,
        "size": IMAGE_SIZE,
        "quality": IMAGE_QUALITY,
        "style": IMAGE_STYLE,
    }


def extract_image_urls(data) -> list[str]:
    """Map every returned image entry to its URL.

    Entries without a string URL become `""` so the slot count always matches the
    number of images returned.
    """
    if not isinstance(data, dict):
        return []
    urls = []
    for item in data.get("data") or []:
        url = item.get("url") if isinstance(item, dict) else None
        urls.append(url if isinstance(url, str) else "")
    return urls


def generate_room_visualization(client, design_request, config) -> list[str]:
    """Generate the redesign visualization and return its image URLs."""
    payload = build_image_payload(design_request, config)
    data = call_with_retry(lambda: client.generate(payload), config.retry)
    return extract_image_urls(data)
