import os
import sys
from typing import Any, Dict, List, Optional

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from sales_agent.llm.gemini_client import GeminiText

os.environ.setdefault("GEMINI_API_KEY", "test-key")


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, reason: str = "OK", text: str = "") -> None:
        self.status_code = status_code
        self._json = json_data
        self.reason = reason
        self.text = text

    def json(self) -> Any:
        if self._json is None:
            raise ValueError("No JSON body")
        return self._json


class FakeSession:
    """Stands in for requests.Session; replays queued responses in order."""

    def __init__(self, responses: Optional[List[FakeResponse]] = None) -> None:
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, headers=None, data=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "data": data, "timeout": timeout})
        if not self.responses:
            raise AssertionError("Unexpected outbound call")
        return self.responses.pop(0)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def text_client(fake_session):
    return GeminiText(api_key="test-key", model="test-model", session_factory=lambda: fake_session)


def search_response(*attributions: Dict[str, str]) -> Dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": "search summary"}]},
                "groundingMetadata": {
                    "groundingAttributions": [{"web": dict(attr)} for attr in attributions],
                },
            }
        ]
    }


def generation_response(drafts_text: str = '[{"tone": "Professional", "subject": "Hi", "body": "<p>Hello</p>"}]') -> Dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": drafts_text}]},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {"promptTokenCount": 10, "totalTokenCount": 20},
        "modelVersion": "test-model",
    }
