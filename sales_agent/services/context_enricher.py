"""
Search-grounded context enrichment for the recipient of a draft.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from sales_agent.llm.gemini_client import GeminiError, GeminiText

from .models import DraftRequest, GroundingAttribution

logger = logging.getLogger(__name__)

SEARCH_PROMPT_PREFIX = "Search for information related to: "
SOURCE_SEPARATOR = "\n---\n"


def build_search_queries(request: DraftRequest) -> List[str]:
    queries: List[str] = []
    name = request.customer_name
    company = request.customer_company
    website = request.customer_website

    if request.customer_linkedin_profile:
        queries.append(f"site:linkedin.com/in/ {name or request.customer_linkedin_profile}")
    elif name and company:
        queries.append(f"role of {name} at {company}")

    if company:
        queries.append(f"{company} strategic priorities")
        queries.append(f"{company} challenges")
    elif website:
        queries.append(f"site:{website} strategic priorities")
        queries.append(f"site:{website} challenges")

    if request.customer_report_url:
        queries.append(f"{request.customer_report_url} goals AND challenges")

    return queries


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def extract_attributions(result: Any) -> List[GroundingAttribution]:
    candidates = _as_dict(result).get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return []
    metadata = _as_dict(_as_dict(candidates[0]).get("groundingMetadata"))
    # Newer API versions report sources as groundingChunks with the same web shape.
    entries = metadata.get("groundingAttributions") or metadata.get("groundingChunks") or []
    if not isinstance(entries, list):
        return []

    attributions: List[GroundingAttribution] = []
    for entry in entries:
        web = _as_dict(_as_dict(entry).get("web"))
        attributions.append(
            GroundingAttribution(
                title=str(web.get("title") or ""),
                snippet=str(web.get("snippet") or ""),
            )
        )
    return attributions


def render_context(attributions: Sequence[GroundingAttribution]) -> str:
    return SOURCE_SEPARATOR.join(
        f"Source {index} - Title: {attr.title or 'No Title'} - Snippet: {attr.snippet or 'No Snippet'}"
        for index, attr in enumerate(attributions, start=1)
    )


class ContextEnricher:
    """
    Best-effort lookup of public context about the recipient and their company.
    Upstream failures degrade to an empty context instead of raising.
    """

    def __init__(self, text_client: Optional[GeminiText] = None):
        self.text = text_client or GeminiText()

    def enrich(self, request: DraftRequest) -> str:
        queries = build_search_queries(request)
        if not queries:
            logger.info("No recipient details to search for; skipping enrichment")
            return ""

        prompt = SEARCH_PROMPT_PREFIX + "; ".join(queries)
        try:
            result = self.text.search_grounded(prompt)
        except GeminiError as exc:
            logger.warning("Search enrichment failed (status %s); continuing without context", exc.status_code)
            return ""

        attributions = extract_attributions(result)
        logger.info("Search enrichment returned %d source(s)", len(attributions))
        return render_context(attributions)
