"""
Prompt assembly and the structured generation call that produces the three drafts.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from sales_agent.llm.gemini_client import GeminiText, first_candidate_text

from .models import DraftRequest, EmailDraft, SenderCompany
from .vendors import resolve_sender_company

logger = logging.getLogger(__name__)

NOT_SPECIFIED = "Not specified"
NO_CONTEXT_PLACEHOLDER = "No external search context was found."
DEFAULT_LANGUAGE = "English"
DRAFT_TONES = ("Professional", "Engaging", "Relaxed")

LENGTH_DIRECTIVES: Mapping[str, str] = {
    "short": "Be very concise, ~50-75 words.",
    "moderate": "Be moderate in length, ~120-180 words.",
    "detailed": "Be comprehensive and detailed, ~200-300 words.",
}
DEFAULT_LENGTH_DIRECTIVE = "No fixed length: vary length and structure across the three drafts."

DRAFT_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "tone": {"type": "STRING"},
            "subject": {"type": "STRING"},
            "body": {"type": "STRING"},
        },
        "required": ["tone", "subject", "body"],
        # ordering hint only; consumers must not rely on key order
        "propertyOrdering": ["tone", "subject", "body"],
    },
}


def length_directive(message_length: str) -> str:
    return LENGTH_DIRECTIVES.get((message_length or "").strip().lower(), DEFAULT_LENGTH_DIRECTIVE)


def _or_not_specified(value: str) -> str:
    return value or NOT_SPECIFIED


def build_system_instruction(language: str) -> str:
    tones = ", ".join(DRAFT_TONES[:-1]) + f", and {DRAFT_TONES[-1]}"
    return f"""
You are a world-class sales agent specializing in B2B enterprise solutions. Your goal is to generate three highly personalized email drafts in three distinct tones: {tones}.

The final output MUST be in {language} language, based on the user's explicit request.

Your pitch must be tailored based on the customer's role and challenges, using the provided context and the search results.

Crucial Tasks:
1. Role Analysis: Infer the customer's executive role (e.g., CFO, Head of Supply Chain) based on the customer's name, company, and search context.
2. Value Alignment: Align the pitch (My Company's Value Proposition) directly with the typical priorities of that identified role (e.g., CFO prioritizes ROI, Head of Ops prioritizes efficiency).
3. Competitor Differentiator: Briefly mention why the user's service is superior to the mentioned competitor, if provided.
4. Tone & Length: Adhere to the requested tone and length constraint.

Formatting:
- The email body MUST be formatted using HTML tags (like <p>, <strong>, <br>) for professional presentation.
- The final response MUST be a valid JSON array of exactly three objects, each with "tone", "subject" and "body" string fields.
    """.strip()


def build_user_prompt(request: DraftRequest, sender: SenderCompany, search_context: str, language: str) -> str:
    highlights = "\n".join(f"- {h}" for h in sender.highlights) or NOT_SPECIFIED
    return f"""
My Information:
- My Name: {_or_not_specified(request.my_name)}
- My Role: {_or_not_specified(request.my_role)}
- My Company's Name: {_or_not_specified(sender.name)}
- My Company's Website: {_or_not_specified(sender.website)}
- My Company's Core Services/Value Proposition: {_or_not_specified(request.my_services)}
- My Company's Key Highlights:
{highlights}

Customer Information:
- Customer Name: {_or_not_specified(request.customer_name)}
- Customer Business: {_or_not_specified(request.customer_company)}
- Customer LinkedIn/Role: {_or_not_specified(request.customer_linkedin_profile)}
- Customer Personality Type: {_or_not_specified(request.customer_personality_type)}
- Competitor Solution (currently used): {_or_not_specified(request.competitor_solution)}

Google Search Context on Customer and Industry Challenges:
---
{search_context or NO_CONTEXT_PLACEHOLDER}
---

Constraints:
- Output Language: {language}
- Message Length: {length_directive(request.message_length)}

Generate the JSON array now.
    """.strip()


@dataclass
class DraftPrompt:
    system_instruction: str
    user_prompt: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": self.user_prompt}]}],
            "systemInstruction": {"parts": [{"text": self.system_instruction}]},
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": DRAFT_RESPONSE_SCHEMA,
            },
        }


def build_draft_prompt(request: DraftRequest, search_context: str) -> DraftPrompt:
    language = request.current_lang or DEFAULT_LANGUAGE
    sender = resolve_sender_company(request)
    return DraftPrompt(
        system_instruction=build_system_instruction(language),
        user_prompt=build_user_prompt(request, sender, search_context, language),
    )


class DraftGenerator:
    """Runs the schema-constrained generation call; upstream errors propagate."""

    def __init__(self, text_client: Optional[GeminiText] = None):
        self.text = text_client or GeminiText()

    def generate(self, request: DraftRequest, search_context: str) -> Dict[str, Any]:
        prompt = build_draft_prompt(request, search_context)
        data = self.text.generate_content(prompt.to_payload())
        logger.info("Draft generation succeeded with %d candidate(s)", len(data.get("candidates") or []))
        return data


def parse_drafts(response: Mapping[str, Any]) -> List[EmailDraft]:
    """
    Decode the JSON-array-as-text payload of a generation response.
    Raises ValueError when the text is not an array of draft objects.
    """
    text = first_candidate_text(dict(response))
    if not text:
        raise ValueError("Generation response contains no draft text")
    try:
        items = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Draft text is not valid JSON: {exc}") from exc
    if not isinstance(items, list):
        raise ValueError("Draft text is not a JSON array")

    drafts: List[EmailDraft] = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError("Draft entry is not an object")
        drafts.append(
            EmailDraft(
                tone=str(item.get("tone") or ""),
                subject=str(item.get("subject") or ""),
                body=str(item.get("body") or ""),
            )
        )
    return drafts
