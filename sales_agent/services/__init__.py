from .context_enricher import ContextEnricher
from .draft_generator import DraftGenerator, parse_drafts
from .models import DraftRequest, EmailDraft, GroundingAttribution, VendorProfile
from .vendors import VENDOR_PROFILES, get_vendor_profile

__all__ = [
    "ContextEnricher",
    "DraftGenerator",
    "DraftRequest",
    "EmailDraft",
    "GroundingAttribution",
    "VendorProfile",
    "VENDOR_PROFILES",
    "get_vendor_profile",
    "parse_drafts",
]
