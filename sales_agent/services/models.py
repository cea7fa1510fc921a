"""
Shared data models for the email drafting pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Tuple

# Form keys as posted by the frontend, mapped to DraftRequest attributes.
_FORM_KEYS = {
    "myName": "my_name",
    "myRole": "my_role",
    "myServices": "my_services",
    "myCompanyName": "my_company_name",
    "myCompanyWebsite": "my_company_website",
    "customCompanyName": "custom_company_name",
    "customCompanyWebsite": "custom_company_website",
    "customerName": "customer_name",
    "customerCompany": "customer_company",
    "customerWebsite": "customer_website",
    "customerLinkedinProfile": "customer_linkedin_profile",
    "customerReportUrl": "customer_report_url",
    "customerPersonalityType": "customer_personality_type",
    "competitorSolution": "competitor_solution",
    "messageLength": "message_length",
    "currentLang": "current_lang",
}


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass
class DraftRequest:
    """
    Flat request envelope for one drafting run. Every field is a string;
    absent fields are empty strings.
    """

    my_name: str = ""
    my_role: str = ""
    my_services: str = ""
    my_company_name: str = ""
    my_company_website: str = ""
    custom_company_name: str = ""
    custom_company_website: str = ""
    customer_name: str = ""
    customer_company: str = ""
    customer_website: str = ""
    customer_linkedin_profile: str = ""
    customer_report_url: str = ""
    customer_personality_type: str = ""
    competitor_solution: str = ""
    message_length: str = ""
    current_lang: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DraftRequest":
        if not isinstance(payload, Mapping):
            raise TypeError("Request body must be a JSON object")
        values = {attr: _clean(payload.get(key)) for key, attr in _FORM_KEYS.items()}
        return cls(**values)


@dataclass(frozen=True)
class VendorProfile:
    key: str
    name: str
    website: str
    highlights: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SenderCompany:
    """Sender company as it appears in the prompt after override resolution."""

    name: str
    website: str
    highlights: Sequence[str]


@dataclass(frozen=True)
class GroundingAttribution:
    title: str = ""
    snippet: str = ""


@dataclass
class EmailDraft:
    tone: str
    subject: str
    body: str
