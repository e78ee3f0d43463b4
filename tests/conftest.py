import pytest
from fastapi.testclient import TestClient

from interior_designer.api.http_api import create_app
from interior_designer.core.engine import DesignOrchestrator
from interior_designer.core.errors import ProviderRequestError
from interior_designer.llm.provider_config import DesignerConfig

PNG_DATA_URI = "data:image/png;base64,iVBORw0KGgo="


class FakeTextClient:
    def __init__(self, content="X", error=None, response=None):
        self.content = content
        self.error = error
        self.response = response
        self.payloads = []

    @property
    def call_count(self):
        return len(self.payloads)

    def create_completion(self, payload):
        self.payloads.append(payload)
        if self.error:
            raise ProviderRequestError(self.error, status_code=500)
        if self.response is not None:
            return self.response
        return {"choices": [{"message": {"role": "assistant", "content": self.content}}]}


class FakeImageClient:
    def __init__(self, urls=("u1",), error=None, response=None):
        self.urls = list(urls)
        self.error = error
        self.response = response
        self.payloads = []

    @property
    def call_count(self):
        return len(self.payloads)

    def generate(self, payload):
        self.payloads.append(payload)
        if self.error:
            raise ProviderRequestError(self.error, status_code=400)
        if self.response is not None:
            return self.response
        return {"created": 0, "data": [{"url": url} for url in self.urls]}


@pytest.fixture
def config():
    return DesignerConfig(api_key="test-key")


@pytest.fixture
def text_client():
    return FakeTextClient()


@pytest.fixture
def image_client():
    return FakeImageClient()


@pytest.fixture
def orchestrator(config, text_client, image_client):
    return DesignOrchestrator(config, text_client, image_client)


@pytest.fixture
def client(orchestrator):
    return TestClient(create_app(orchestrator))


@pytest.fixture
def design_body():
    return {
        "imageBase64": PNG_DATA_URI,
        "style": "modern",
        "additionalPreferences": "warm colors",
        "imageDescription": "kitchen",
        "designPrompt": "large window",
    }
