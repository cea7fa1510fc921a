from .email_draft_service import EmailDraftService

__all__ = [
    "EmailDraftService",
]
