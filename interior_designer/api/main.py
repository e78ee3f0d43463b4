"""
ASGI entrypoint for the design API.

Usage:
- `uvicorn interior_designer.api.main:app`
- `interior-designer-api` (console script; honors `HOST` / `PORT`)

Side effects:
- Builds `DesignerConfig` from the environment at import time. A missing
  credential does not prevent startup; every design request then fails
  with a configuration error.
"""

import logging
import os

import uvicorn

from interior_designer.api.http_api import create_app


logging.basicConfig(
    level=logging.DEBUG if os.getenv("DEBUG") == "true" else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


def main():
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
