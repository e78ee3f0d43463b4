"""Upload preprocessing package for API clients.

Architectural role:
- Converts user-selected room photos into `data:` URIs for design requests.
- Applies the image media-type allow-list before encoding.

Scope:
- Content preprocessing only; no HTTP endpoint definitions.
"""
