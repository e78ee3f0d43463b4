"""Request/response data contracts for design generation.

Architectural role:
    Defines the JSON shapes exchanged between API adapters and
    `core.engine`. Field names on the wire are camelCase; Python attributes
    are snake_case.

Lifecycle:
    A `DesignRequest` is constructed once per call from the client body,
    consumed by the orchestrator, and discarded. `DesignResponse` and
    `ErrorPayload` are ephemeral. Nothing here is persisted.
"""

from pydantic import BaseModel, ConfigDict, Field


class DesignRequest(BaseModel):
    """Client-supplied design request.

    Every field is optional at the schema level so that presence checks can
    run in a fixed order with field-specific error messages.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_base64: str | None = Field(default=None, alias="imageBase64")
    style: str | None = None
    additional_preferences: str | None = Field(default=None, alias="additionalPreferences")
    image_description: str | None = Field(default=None, alias="imageDescription")
    design_prompt: str | None = Field(default=None, alias="designPrompt")


class DesignResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    design_suggestions: str = Field(alias="designSuggestions")
    generated_image_urls: list[str] = Field(default_factory=list, alias="generatedImageUrls")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class ErrorPayload(BaseModel):
    error: str
    details: str | None = None
