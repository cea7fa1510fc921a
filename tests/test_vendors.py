import pytest

from sales_agent.services.models import DraftRequest
from sales_agent.services.vendors import (
    OTHER_VENDOR_KEY,
    VENDOR_PROFILES,
    get_vendor_profile,
    resolve_sender_company,
)


def test_vendor_table_is_read_only():
    with pytest.raises(TypeError):
        VENDOR_PROFILES["Acme"] = VENDOR_PROFILES["SAP"]


def test_unknown_key_falls_back_to_other():
    assert get_vendor_profile("Initech") is VENDOR_PROFILES[OTHER_VENDOR_KEY]
    assert get_vendor_profile("") is VENDOR_PROFILES[OTHER_VENDOR_KEY]


def test_known_vendor_ignores_custom_values():
    sender = resolve_sender_company(
        DraftRequest(my_company_name="Oracle", custom_company_name="Mine", custom_company_website="mine.example")
    )

    assert sender.name == "Oracle"
    assert sender.website == "https://www.oracle.com"


def test_other_selection_prefers_custom_values():
    sender = resolve_sender_company(
        DraftRequest(
            my_company_name=OTHER_VENDOR_KEY,
            custom_company_name="Globex",
            custom_company_website="https://globex.example",
        )
    )

    assert sender.name == "Globex"
    assert sender.website == "https://globex.example"
    assert list(sender.highlights) == list(VENDOR_PROFILES[OTHER_VENDOR_KEY].highlights)


def test_other_selection_without_custom_values_keeps_defaults():
    sender = resolve_sender_company(DraftRequest(my_company_name=OTHER_VENDOR_KEY))

    assert sender.name == ""
    assert sender.website == ""


def test_unrecognized_key_keeps_typed_name_and_ignores_custom_values():
    sender = resolve_sender_company(
        DraftRequest(my_company_name="Initech", custom_company_name="Globex", my_company_website="https://initech.example")
    )

    assert sender.name == "Initech"
    assert sender.website == "https://initech.example"


def test_draft_request_from_payload_cleans_values():
    request = DraftRequest.from_payload(
        {"customerName": "  Jane Doe ", "customerCompany": None, "messageLength": "short", "unknown": "x"}
    )

    assert request.customer_name == "Jane Doe"
    assert request.customer_company == ""
    assert request.message_length == "short"


def test_draft_request_rejects_non_mapping():
    with pytest.raises(TypeError):
        DraftRequest.from_payload(["not", "a", "mapping"])
