import logging
from typing import Any, Dict, Mapping, Optional

from sales_agent.llm.gemini_client import GeminiText
from sales_agent.services.context_enricher import ContextEnricher
from sales_agent.services.draft_generator import DraftGenerator
from sales_agent.services.models import DraftRequest

logger = logging.getLogger(__name__)


class EmailDraftService:
    """Runs one drafting request: search enrichment first, then draft generation."""

    def __init__(
        self,
        text_client: Optional[GeminiText] = None,
        enricher: Optional[ContextEnricher] = None,
        generator: Optional[DraftGenerator] = None,
    ) -> None:
        if enricher is None or generator is None:
            text_client = text_client or GeminiText()
        self._enricher = enricher or ContextEnricher(text_client)
        self._generator = generator or DraftGenerator(text_client)

    def generate_drafts(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        request = DraftRequest.from_payload(payload)
        search_context = self._enricher.enrich(request)
        if not search_context:
            logger.info("Generating drafts without search context")
        return self._generator.generate(request, search_context)
