"""Text-generation access package.

Architectural role:
    Provides runtime configuration, request-payload construction, retry
    wrapping, and transport used by the orchestrator to obtain design
    suggestions.

Module split:
    - `provider_config`: `DesignerConfig`, model/endpoint defaults, key lookup.
    - `service`: design-request-to-payload adapter and completion extraction.
    - `client`: OpenAI-compatible HTTP transport.
    - `retry`: bounded retry wrapper around single provider calls.
"""
