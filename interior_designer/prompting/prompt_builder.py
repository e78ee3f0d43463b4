"""Prompt assembly helpers used by the design orchestrator.

This module only builds prompt strings and message payloads from already
validated request fields. Validation, model invocation, and response
normalization happen outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed ordering of prompt components.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - User text is interpolated as raw strings.
    - Upstream layers are responsible for validation and trust boundaries.
"""


# =========================================================
# SYSTEM INSTRUCTION
# =========================================================

SYSTEM_MESSAGE = (
    "You are an expert interior designer. Provide detailed design suggestions "
    "based on the uploaded image and selected style."
)


# =========================================================
# DESIGN SUGGESTIONS PROMPT
# =========================================================
# Component order:
#   1) Room description
#   2) Style
#   3) Additional preferences ("None" when empty)
#   4) Design prompt ("None" when empty)
#   5) Markdown output instruction

def build_suggestion_prompt(
    image_description: str,
    style: str,
    additional_preferences: str = "",
    design_prompt: str = "",
) -> str:
    """Build the user instruction for the text-generation provider.

    Edge cases:
        - Empty optional fields are rendered as the literal `None` so the
          model sees that nothing was requested.
        - An empty description (relaxed configuration) is rendered as
          `Not provided`.
    """
    return (
        f"Image description: {image_description or 'Not provided'}\n"
        f"Style: {style}\n"
        f"Additional preferences: {additional_preferences or 'None'}\n"
        f"Design prompt: {design_prompt or 'None'}\n\n"
        "Please provide detailed design suggestions in markdown format."
    )


def build_user_content(prompt: str, image_data_uri: str | None = None):
    """Return chat `content` for the user turn.

    Without an image this is the plain prompt string. With an image it is the
    multi-part vision form: one text part followed by one `image_url` part
    carrying the data URI.
    """
    if not image_data_uri:
        return prompt
    return [
        {"type": "text", "text": prompt},
        {"type": "image_url", "image_url": {"url": image_data_uri}},
    ]


def build_messages(prompt: str, image_data_uri: str | None = None) -> list:
    """Return the system + user message pair for a chat completion."""
    return [
        {"role": "system", "content": SYSTEM_MESSAGE},
        {"role": "user", "content": build_user_content(prompt, image_data_uri)},
    ]


# =========================================================
# IMAGE PROMPT
# =========================================================

def build_image_prompt(image_description: str, style: str, design_prompt: str = "") -> str:
    """Build the photorealistic redesign prompt for the image provider."""
    room = image_description or "room"
    parts = [f"Create a photorealistic interior design visualization of a {room} in {style} style."]
    if design_prompt:
        parts.append(f"Incorporate these elements: {design_prompt}")
    parts.append("Make it look like a professional interior design photograph.")
    return " ".join(parts)
