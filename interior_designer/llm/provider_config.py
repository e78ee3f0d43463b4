"""Provider/runtime configuration for the design pipeline.

Architectural role:
    Centralizes model selection, endpoint resolution, credential lookup, and
    behavior switches into one explicit `DesignerConfig` object. API adapters
    build it once with `DesignerConfig.from_env()` and inject it into the
    orchestrator and provider clients; nothing else reads the environment.

Model call flow integration:
    - `llm.client.ChatClient` consumes `chat_url`, `api_key`, `timeout`.
    - `image.client.ImageClient` consumes `image_url`, `api_key`, `timeout`.
    - `llm.service` / `image.service` consume model names and retry policy.
    - `core.engine` consumes `require_image_description` and
      `include_image_in_prompt`.

Determinism:
    Deterministic for a fixed process environment and key files. Values are
    resolved when `from_env()` is called (plus key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `api_key=None`. The orchestrator
    turns it into a `ConfigurationError` on every request instead of calling
    a provider.

Known gap:
    `timeout=None` (the default) leaves provider calls bounded only by the
    transport default, which for `requests` means no timeout at all.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://api.openai.com/v1"
CHAT_COMPLETIONS_PATH = "/chat/completions"
IMAGE_GENERATIONS_PATH = "/images/generations"
KEY_FILE = "config/openai.key"

TEXT_MODEL = "gpt-4o-mini"
IMAGE_MODEL = "dall-e-3"

# Fixed image request parameters (one square HD image, natural rendering).
IMAGE_COUNT = 1
IMAGE_SIZE = "1024x1024"
IMAGE_QUALITY = "hd"
IMAGE_STYLE = "natural"

DESIGN_STYLES = (
    "modern",
    "farmhouse",
    "vintage",
    "scandinavian",
    "bohemian",
    "industrial",
    "minimalist",
    "coastal",
    "mid-century",
    "contemporary",
)


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/openai.key` -> `OPENAI_API_KEY`).
        2. Raw file contents at `path`.

    Edge cases:
        - `None` path returns `None`.
        - Missing or empty file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return float(value)


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry settings applied around each provider call.

    `max_attempts=1` means a single attempt (no retry).
    """

    max_attempts: int = 1
    backoff_seconds: float = 1.0
    max_backoff_seconds: float = 10.0


@dataclass(frozen=True)
class DesignerConfig:
    """Explicit configuration injected into orchestrator and clients."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    text_model: str = TEXT_MODEL
    image_model: str = IMAGE_MODEL
    timeout: float | None = None
    require_image_description: bool = True
    include_image_in_prompt: bool = False
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    debug: bool = False

    @property
    def chat_url(self) -> str:
        return self.base_url.rstrip("/") + CHAT_COMPLETIONS_PATH

    @property
    def image_url(self) -> str:
        return self.base_url.rstrip("/") + IMAGE_GENERATIONS_PATH

    @classmethod
    def from_env(cls, key_file: str = KEY_FILE) -> "DesignerConfig":
        """Build configuration from environment variables and key files.

        Recognized variables:
            `OPENAI_API_KEY`, `OPENAI_BASE_URL`, `TEXT_MODEL`, `IMAGE_MODEL`,
            `REQUEST_TIMEOUT`, `REQUIRE_IMAGE_DESCRIPTION`,
            `INCLUDE_IMAGE_IN_PROMPT`, `PROVIDER_MAX_ATTEMPTS`,
            `PROVIDER_BACKOFF_SECONDS`, `DEBUG`.

        Raises:
            ValueError: numeric variables that do not parse.
        """
        retry = RetryPolicy(
            max_attempts=max(1, int(os.getenv("PROVIDER_MAX_ATTEMPTS", "1"))),
            backoff_seconds=_env_float("PROVIDER_BACKOFF_SECONDS", 1.0),
        )
        return cls(
            api_key=load_key(key_file),
            base_url=os.getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL),
            text_model=os.getenv("TEXT_MODEL", TEXT_MODEL),
            image_model=os.getenv("IMAGE_MODEL", IMAGE_MODEL),
            timeout=_env_float("REQUEST_TIMEOUT", None),
            require_image_description=_env_flag("REQUIRE_IMAGE_DESCRIPTION", True),
            include_image_in_prompt=_env_flag("INCLUDE_IMAGE_IN_PROMPT", False),
            retry=retry,
            debug=os.getenv("DEBUG") == "true",
        )
