"""Image generation adapter package.

Scope:
    Provides the image-provider client and the service that turns a design
    request into one room visualization.

Non-goals:
    - No Base64 decoding/encoding pipeline (see `api.multimodal`).
    - No download or storage of generated images; only URLs are returned.
"""
