"""
Terminal adapter for the design orchestrator.

Architectural role:
- Stand-in for the browser form: collects a room photo path, a style, and
  text preferences from the command line.
- Encodes the photo through `UploadEncoder` exactly like the form does.
- Delegates validation and generation to `core.engine.DesignOrchestrator`.
- Renders markdown suggestions and generated image URLs to stdout.

Request lifecycle:
1. Parse arguments.
2. Encode the photo to a `data:` URI (unsupported media types yield no image).
3. Build the request body and call the orchestrator.
4. Print suggestions and numbered image URLs, or the error text.

Error handling strategy:
- `DesignError` prints only its `error` text to stderr and exits with 1;
  `details` go to the debug log.
- Unreadable photo files are reported as errors, not tracebacks.
"""

import argparse
import asyncio
import logging
import sys

from interior_designer.api.multimodal.upload_encoder import SelectedFile, encode_file
from interior_designer.core.engine import DesignOrchestrator
from interior_designer.core.errors import DesignError
from interior_designer.llm.provider_config import DESIGN_STYLES, DesignerConfig


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interior-designer",
        description="Generate interior design suggestions for a room photo",
    )
    parser.add_argument("photo", help="Room photo (JPEG or PNG)")
    parser.add_argument("--style", required=True, help=f"One of: {', '.join(DESIGN_STYLES)}")
    parser.add_argument("--description", default="", help="What type of room is this?")
    parser.add_argument("--preferences", default="", help="Color scheme, functional requirements, ...")
    parser.add_argument("--prompt", default="", help="How would you like your space to look?")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def render_result(payload: dict, out=None) -> None:
    """Print a `DesignResponse` payload as markdown followed by image links."""
    out = out or sys.stdout
    print("## Design Suggestions\n", file=out)
    print(payload["designSuggestions"] or "(no suggestions returned)", file=out)

    urls = payload["generatedImageUrls"]
    if urls:
        print("\n## Generated Designs\n", file=out)
        for number, url in enumerate(urls, start=1):
            print(f"{number}. {url or '(missing image URL)'}", file=out)


def main(argv=None, orchestrator: DesignOrchestrator | None = None) -> int:
    """Run one design request from the command line and return the exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        image_base64 = asyncio.run(encode_file(SelectedFile.from_path(args.photo)))
    except OSError as err:
        print(f"Error: could not read {args.photo}: {err.strerror or err}", file=sys.stderr)
        return 1

    if orchestrator is None:
        orchestrator = DesignOrchestrator.from_config(DesignerConfig.from_env())

    body = {
        "imageBase64": image_base64,
        "style": args.style,
        "additionalPreferences": args.preferences,
        "imageDescription": args.description,
        "designPrompt": args.prompt,
    }

    try:
        result = orchestrator.generate_design(body)
    except DesignError as err:
        logger.debug("Design failed: %s details=%s", err.message, err.details)
        print(f"Error: {err.message}", file=sys.stderr)
        return 1

    render_result(result.to_payload())
    return 0


if __name__ == "__main__":
    sys.exit(main())
