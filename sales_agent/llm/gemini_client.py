# sales_agent/llm/gemini_client.py
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
from requests import Response

logger = logging.getLogger(__name__)


# --------------------------
# REST endpoints (v1beta)
# --------------------------
_GEN_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

_DEFAULT_TEXT_MODEL = "gemini-2.5-flash"


# --------------------------
# Error primitives
# --------------------------
class GeminiError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        reason: str = "",
        payload: Optional[Dict] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.payload = payload or {}


def _default_session_factory() -> requests.Session:
    session = requests.Session()
    adapter = requests.adapters.HTTPAdapter(max_retries=0)  # single attempt per call
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _post(
    url: str,
    api_key: str,
    payload: Dict,
    *,
    timeout: int = 60,
    session_factory: Callable[[], requests.Session] = _default_session_factory,
) -> Dict:
    """POST to Google Generative Language REST API, raising GeminiError on non-2xx."""

    session = session_factory()
    headers = {
        "Content-Type": "application/json; charset=utf-8",
        "x-goog-api-key": api_key,
    }

    try:
        resp: Response = session.post(url, headers=headers, data=json.dumps(payload), timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Gemini HTTP request failed: %s", exc)
        raise GeminiError(f"Gemini HTTP request failed: {exc}", payload={"error": str(exc)}) from exc

    if resp.status_code // 100 == 2:
        try:
            return resp.json()
        except ValueError as exc:
            raise GeminiError(
                "Gemini returned a non-JSON response",
                status_code=resp.status_code,
                reason=resp.reason or "",
                payload={"error": resp.text},
            ) from exc

    try:
        data = resp.json()
    except ValueError:
        data = {"error": {"code": resp.status_code, "message": resp.text}}

    reason = resp.reason or ""
    raise GeminiError(
        f"Gemini API Error: {resp.status_code} {reason} - {json.dumps(data, ensure_ascii=False)}",
        status_code=resp.status_code,
        reason=reason,
        payload=data,
    )


# --------------------------
# generateContent client
# --------------------------
@dataclass
class GeminiText:
    """
    Lightweight client for the Gemini ``generateContent`` REST endpoint.

    Callers build the full request body; this class only handles the
    endpoint, credentials and transport.
    """

    api_key: Optional[str] = None
    model: str = _DEFAULT_TEXT_MODEL
    timeout: int = 60  # seconds
    session_factory: Callable[[], requests.Session] = _default_session_factory

    def __post_init__(self) -> None:
        self.api_key = self.api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY is not set")

    def generate_content(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = _GEN_URL.format(model=self.model)
        logger.debug("Calling Gemini model %s", self.model)
        return _post(
            url,
            self.api_key,
            payload,
            timeout=self.timeout,
            session_factory=self.session_factory,
        )

    def search_grounded(self, prompt: str) -> Dict[str, Any]:
        """Single-turn call with the Google Search tool enabled."""
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "tools": [{"google_search": {}}],
        }
        return self.generate_content(payload)


def first_candidate_text(data: Dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return parts[0].get("text", "") if parts else ""
