import pytest

from interior_designer.llm.provider_config import DesignerConfig, load_key

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "TEXT_MODEL",
    "IMAGE_MODEL",
    "REQUEST_TIMEOUT",
    "REQUIRE_IMAGE_DESCRIPTION",
    "INCLUDE_IMAGE_IN_PROMPT",
    "PROVIDER_MAX_ATTEMPTS",
    "PROVIDER_BACKOFF_SECONDS",
    "DEBUG",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    config = DesignerConfig.from_env()

    assert config.api_key is None
    assert config.text_model == "gpt-4o-mini"
    assert config.image_model == "dall-e-3"
    assert config.timeout is None
    assert config.require_image_description is True
    assert config.include_image_in_prompt is False
    assert config.retry.max_attempts == 1
    assert config.chat_url == "https://api.openai.com/v1/chat/completions"


def test_environment_overrides(clean_env):
    clean_env.setenv("OPENAI_API_KEY", "sk-env")
    clean_env.setenv("OPENAI_BASE_URL", "http://localhost:9000/v1")
    clean_env.setenv("REQUEST_TIMEOUT", "45")
    clean_env.setenv("REQUIRE_IMAGE_DESCRIPTION", "false")
    clean_env.setenv("INCLUDE_IMAGE_IN_PROMPT", "1")
    clean_env.setenv("PROVIDER_MAX_ATTEMPTS", "3")
    clean_env.setenv("DEBUG", "true")

    config = DesignerConfig.from_env()

    assert config.api_key == "sk-env"
    assert config.image_url == "http://localhost:9000/v1/images/generations"
    assert config.timeout == 45.0
    assert config.require_image_description is False
    assert config.include_image_in_prompt is True
    assert config.retry.max_attempts == 3
    assert config.debug is True


def test_key_file_used_when_env_missing(clean_env, tmp_path):
    key_file = tmp_path / "config" / "openai.key"
    key_file.parent.mkdir()
    key_file.write_text("sk-file\n")

    assert load_key("config/openai.key") == "sk-file"
    assert DesignerConfig.from_env().api_key == "sk-file"


def test_empty_key_file_counts_as_missing(clean_env, tmp_path):
    key_file = tmp_path / "openai.key"
    key_file.write_text("  \n")

    assert load_key(str(key_file)) is None
    assert load_key(None) is None
