"""Static option lists served to the budget forms."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


def _options(*items: tuple[str, str] | tuple[str, str, str]) -> tuple[Mapping[str, str], ...]:
    built = []
    for item in items:
        option = {"id": item[0], "label": item[1]}
        if len(item) > 2:
            option["description"] = item[2]
        built.append(MappingProxyType(option))
    return tuple(built)


MANAGEMENT_FIRM_FORM_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "managementFirmGroups": _options(
            ("MFG-1001", "Downtown Management Group", "Primary firm for downtown communities"),
            ("MFG-2034", "Lakeside HOA Services", "Covers lakeside estates and villas"),
            ("MFG-3045", "Skyline Property Managers", "Specialised in high-rise towers"),
        ),
        "serviceChargeGroups": _options(
            ("SCG-11", "Residential Villas - Tier A"),
            ("SCG-22", "Residential Apartments - Tier B"),
            ("SCG-33", "Mixed Use Communities"),
        ),
        "categories": _options(
            ("CAT-OPS", "Operations"),
            ("CAT-MAINT", "Maintenance"),
            ("CAT-ADMIN", "Administration"),
        ),
        "subCategories": _options(
            ("SUB-SECURITY", "Security Services"),
            ("SUB-LANDSCAPE", "Landscaping"),
            ("SUB-CLEANING", "Cleaning & Housekeeping"),
        ),
        "services": _options(
            ("SRV-SEC-01", "24/7 Guarding"),
            ("SRV-LAND-02", "Seasonal Landscaping"),
            ("SRV-HK-03", "Common Area Cleaning"),
        ),
        "budgetPeriods": tuple(
            MappingProxyType({"code": year, "title": f"Fiscal Year {year}", "from": f"{year}-01-01", "to": f"{year}-12-31"})
            for year in ("2024", "2025", "2026")
        ),
    }
)

MASTER_BUDGET_FORM_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "chargeTypes": _options(
            ("1", "Service Charge", "Regular service charges"),
            ("2", "Maintenance Fee", "Maintenance and upkeep fees"),
            ("3", "Special Assessment", "Special assessment charges"),
        ),
        "groupNames": _options(
            ("GRP-001", "Residential Group A"),
            ("GRP-002", "Residential Group B"),
            ("GRP-003", "Commercial Group"),
        ),
        "categories": _options(
            ("CAT-MAINT", "Maintenance"),
            ("CAT-ADMIN", "Administration"),
            ("CAT-SECURITY", "Security"),
        ),
        "categorySubs": _options(
            ("SUB-ELEC", "Electrical"),
            ("SUB-PLUMB", "Plumbing"),
            ("SUB-AC", "HVAC"),
        ),
        "categorySubToSubs": _options(
            ("SUB2-REPAIR", "Repairs"),
            ("SUB2-UPGRADE", "Upgrades"),
            ("SUB2-INSPECT", "Inspections"),
        ),
        "services": _options(
            ("SRV-001", "24/7 Maintenance Service"),
            ("SRV-002", "Emergency Response"),
            ("SRV-003", "Regular Maintenance"),
        ),
    }
)


def to_jsonable(options: Mapping[str, Any]) -> dict[str, Any]:
    """Copy the read-only option tables into plain JSON containers."""

    return {key: [dict(item) for item in items] for key, items in options.items()}


__all__ = ["MANAGEMENT_FIRM_FORM_OPTIONS", "MASTER_BUDGET_FORM_OPTIONS", "to_jsonable"]
