"""Core orchestration package.

Architectural role:
    Exposes the design orchestration layer that sits between API/CLI
    entrypoints and the provider adapters (`llm`, `image`).

Composition:
    - `engine`: validation and sequential provider orchestration.
    - `design_types`: request/response schemas shared with API adapters.
    - `errors`: failure taxonomy mapped to structured error responses.

Determinism and side effects:
    Package import itself is deterministic and side-effect free. Runtime side
    effects (provider HTTP calls) are performed by `engine` per request.
"""
