"""
Static vendor profiles used to describe the sender's company.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import DraftRequest, SenderCompany, VendorProfile

OTHER_VENDOR_KEY = "Other"

_PROFILES = (
    VendorProfile(
        key="SAP",
        name="SAP",
        website="https://www.sap.com",
        highlights=(
            "Integrated ERP suite (SAP S/4HANA) covering finance, supply chain and manufacturing",
            "Real-time analytics on a single in-memory data platform",
            "Industry cloud solutions for more than 25 industries",
            "Global partner ecosystem and proven large-scale implementations",
        ),
    ),
    VendorProfile(
        key="Oracle",
        name="Oracle",
        website="https://www.oracle.com",
        highlights=(
            "Oracle Fusion Cloud ERP with quarterly feature updates",
            "Autonomous Database with built-in security and self-tuning",
            "Oracle Cloud Infrastructure with predictable, low-cost pricing",
            "Embedded AI across finance, HR and supply chain applications",
        ),
    ),
    VendorProfile(
        key="Microsoft",
        name="Microsoft",
        website="https://www.microsoft.com",
        highlights=(
            "Dynamics 365 business applications unified with Microsoft 365",
            "Copilot AI assistance embedded in everyday workflows",
            "Azure cloud with enterprise-grade compliance coverage",
            "Power Platform for low-code automation and reporting",
        ),
    ),
    VendorProfile(
        key="Salesforce",
        name="Salesforce",
        website="https://www.salesforce.com",
        highlights=(
            "Customer 360 platform unifying sales, service and marketing data",
            "Einstein AI for predictive insights and automated recommendations",
            "AppExchange marketplace with thousands of pre-built integrations",
            "Rapid time-to-value with cloud-native deployment",
        ),
    ),
    VendorProfile(
        key="Workday",
        name="Workday",
        website="https://www.workday.com",
        highlights=(
            "Unified HCM and financial management on one data model",
            "Continuous planning for finance, workforce and sales",
            "Two major releases per year with no upgrade projects",
            "Role-based dashboards for executives and managers",
        ),
    ),
    VendorProfile(
        key=OTHER_VENDOR_KEY,
        name="",
        website="",
        highlights=(
            "Proven track record of measurable ROI for enterprise customers",
            "Fast implementation with minimal disruption to operations",
            "Dedicated customer success and support team",
            "Scalable solution that grows with the business",
        ),
    ),
)

VENDOR_PROFILES: Mapping[str, VendorProfile] = MappingProxyType({p.key: p for p in _PROFILES})


def get_vendor_profile(key: str) -> VendorProfile:
    """Return the profile for ``key``, falling back to the generic ``Other`` profile."""
    return VENDOR_PROFILES.get(key, VENDOR_PROFILES[OTHER_VENDOR_KEY])


def resolve_sender_company(request: DraftRequest) -> SenderCompany:
    profile = get_vendor_profile(request.my_company_name)
    name = profile.name
    website = profile.website
    if request.my_company_name == OTHER_VENDOR_KEY:
        name = request.custom_company_name or name
        website = request.custom_company_website or website
    elif request.my_company_name not in VENDOR_PROFILES:
        # unknown selection: keep what the caller typed as the display name
        name = request.my_company_name
    if not website:
        website = request.my_company_website
    return SenderCompany(name=name, website=website, highlights=list(profile.highlights))
