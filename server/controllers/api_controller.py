import logging
from typing import Callable, Mapping

from flask import Blueprint, current_app, jsonify, request

from sales_agent.llm.gemini_client import GeminiText
from server.services.email_draft_service import EmailDraftService

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

MISSING_KEY_MESSAGE = (
    "Server configuration error: API key not set "
    "(GEMINI_API_KEY environment variable is missing)."
)


def build_draft_service(config: Mapping[str, object]) -> EmailDraftService:
    text_client = GeminiText(
        api_key=str(config["GEMINI_API_KEY"]),
        model=str(config.get("GEMINI_MODEL") or "gemini-2.5-flash"),
        timeout=int(config.get("GEMINI_TIMEOUT") or 60),
    )
    return EmailDraftService(text_client=text_client)


# Swapped out in tests to inject fake HTTP sessions.
draft_service_factory: Callable[[Mapping[str, object]], EmailDraftService] = build_draft_service


@api_blueprint.get("/health")
def healthcheck():
    """Lightweight health probe for uptime checks."""
    return jsonify({"status": "ok"}), 200


@api_blueprint.post("/generate")
def generate_drafts():
    """
    Generate three email drafts for the posted sales form.

    The upstream Gemini response body is returned unchanged; the drafts are
    the JSON array embedded as text in its first candidate.
    """
    if not current_app.config.get("GEMINI_API_KEY"):
        return jsonify({"error": MISSING_KEY_MESSAGE}), 500

    try:
        service = draft_service_factory(current_app.config)
        data = service.generate_drafts(request.get_json(silent=True))
        return jsonify(data), 200
    except Exception as exc:
        logger.exception("Error in draft generation proxy")
        return jsonify({"error": str(exc)}), 500
