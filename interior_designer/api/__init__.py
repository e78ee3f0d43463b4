"""Interior designer API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level parsing and response shaping.
- Delegates validation and provider orchestration to the core layer.

Scope:
- Request lifecycle control for adapter concerns only.
- No direct provider invocation logic is implemented in this package root.
"""
