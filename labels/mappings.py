"""Static label tables used when the catalogue has no value for a config id."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping


class BudgetLabelIds:
    """Config ids for the management-firm budget wizard."""

    STEP_DETAILS = "CDL_BUDGET_DETAILS"
    STEP_DOCUMENTS = "CDL_BUDGET_DOCUMENTS"
    STEP_REVIEW = "CDL_BUDGET_REVIEW"
    MANAGEMENT_FIRM_GROUP_ID = "CDL_BUDGET_MF_GROUP_ID"
    MANAGEMENT_FIRM_GROUP_NAME = "CDL_BUDGET_MF_GROUP_NAME"
    MANAGEMENT_FIRM_GROUP_LOCAL_NAME = "CDL_BUDGET_MF_GROUP_LOCAL_NAME"
    MASTER_COMMUNITY_NAME = "CDL_BUDGET_MASTER_COMMUNITY_NAME"
    MASTER_COMMUNITY_LOCAL_NAME = "CDL_BUDGET_MASTER_COMMUNITY_LOCAL_NAME"
    MANAGEMENT_COMPANY_ID = "CDL_BUDGET_MGMT_COMPANY_ID"
    MANAGEMENT_COMPANY_NAME = "CDL_BUDGET_MGMT_COMPANY_NAME"
    MANAGEMENT_COMPANY_LOCAL_NAME = "CDL_BUDGET_MGMT_COMPANY_LOCAL_NAME"
    MANAGEMENT_FIRM_MANAGER_EMAIL = "CDL_BUDGET_MF_MANAGER_EMAIL"
    SERVICE_CHARGE_GROUP_ID = "CDL_BUDGET_SC_GROUP_ID"
    SERVICE_CHARGE_GROUP_NAME = "CDL_BUDGET_SC_GROUP_NAME"
    SERVICE_CHARGE_GROUP_LOCAL_NAME = "CDL_BUDGET_SC_GROUP_LOCAL_NAME"
    BUDGET_PERIOD_CODE = "CDL_BUDGET_PERIOD_CODE"
    BUDGET_PERIOD_TITLE = "CDL_BUDGET_PERIOD_TITLE"
    BUDGET_PERIOD_FROM = "CDL_BUDGET_PERIOD_FROM"
    BUDGET_PERIOD_TO = "CDL_BUDGET_PERIOD_TO"
    CATEGORY_CODE = "CDL_BUDGET_CATEGORY_CODE"
    CATEGORY_NAME = "CDL_BUDGET_CATEGORY_NAME"
    SUB_CATEGORY_CODE = "CDL_BUDGET_SUB_CATEGORY_CODE"
    SUB_CATEGORY_NAME = "CDL_BUDGET_SUB_CATEGORY_NAME"
    SERVICE_CODE = "CDL_BUDGET_SERVICE_CODE"
    SERVICE_NAME = "CDL_BUDGET_SERVICE_NAME"
    TOTAL_COST = "CDL_BUDGET_TOTAL_COST"
    VAT_AMOUNT = "CDL_BUDGET_VAT_AMOUNT"
    DOCUMENTS_SAVE_HEADING = "CDL_BUDGET_DOCUMENTS_SAVE_HEADING"
    DOCUMENTS_SAVE_MESSAGE = "CDL_BUDGET_DOCUMENTS_SAVE_MESSAGE"


class MasterBudgetLabelIds:
    """Config ids for the master budget wizard."""

    STEP_DETAILS = "CDL_MBUDGET_DETAILS"
    STEP_DOCUMENTS = "CDL_MBUDGET_DOCUMENTS"
    STEP_REVIEW = "CDL_MBUDGET_REVIEW"
    CHARGE_TYPE_ID = "CDL_MBUDGET_CHARGE_TYPE_ID"
    CHARGE_TYPE = "CDL_MBUDGET_CHARGE_TYPE"
    GROUP_NAME = "CDL_MBUDGET_GROUP_NAME"
    CATEGORY_CODE = "CDL_MBUDGET_CATEGORY_CODE"
    CATEGORY_NAME = "CDL_MBUDGET_CATEGORY_NAME"
    SERVICE_CODE = "CDL_MBUDGET_SERVICE_CODE"
    SERVICE_NAME = "CDL_MBUDGET_SERVICE_NAME"
    PROVISIONAL_BUDGET_CODE = "CDL_MBUDGET_PROVISIONAL_CODE"


class CapitalPartnerLabelIds:
    """Config ids for the owner registry (capital partner) wizard."""

    STEP_BASIC = "CDL_OWN_BASIC_INFO"
    STEP_DOCUMENTS = "CDL_OWN_DOCUMENTS"
    STEP_UNIT = "CDL_OWN_UNIT_DETAILS"
    STEP_JOINT_OWNERS = "CDL_OWN_JOINT_OWNER_DETAILS"
    STEP_REVIEW = "CDL_OWN_REVIEW"
    TYPE = "CDL_OWNER_TYPE"
    FIRST_NAME = "CDL_OWNER_FIRSTNAME"
    LAST_NAME = "CDL_OWNER_LASTNAME"
    OWNERSHIP = "CDL_OWNER_OWNERSHIP"
    EMAIL = "CDL_OWNER_EMAIL"
    MOBILE = "CDL_OWNER_MOBILE"
    UNIT_NUMBER = "CDL_OWNER_UNIT_NUMBER"
    UNIT_NET_PRICE = "CDL_OWNER_UNIT_NET_PRICE"
    UNIT_GROSS_PRICE = "CDL_OWNER_UNIT_GROSS_PRICE"


BUDGET_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        BudgetLabelIds.STEP_DETAILS: "Budget Details",
        BudgetLabelIds.STEP_DOCUMENTS: "Documents",
        BudgetLabelIds.STEP_REVIEW: "Review",
        BudgetLabelIds.MANAGEMENT_FIRM_GROUP_ID: "Management Firm Group ID",
        BudgetLabelIds.MANAGEMENT_FIRM_GROUP_NAME: "Management Firm Group Name",
        BudgetLabelIds.MANAGEMENT_FIRM_GROUP_LOCAL_NAME: "Management Firm Group Local Name",
        BudgetLabelIds.MASTER_COMMUNITY_NAME: "Master Community Name",
        BudgetLabelIds.MASTER_COMMUNITY_LOCAL_NAME: "Master Community Local Name",
        BudgetLabelIds.MANAGEMENT_COMPANY_ID: "Management Company ID",
        BudgetLabelIds.MANAGEMENT_COMPANY_NAME: "Management Company Name",
        BudgetLabelIds.MANAGEMENT_COMPANY_LOCAL_NAME: "Management Company Local Name",
        BudgetLabelIds.MANAGEMENT_FIRM_MANAGER_EMAIL: "Property Manager Email",
        BudgetLabelIds.SERVICE_CHARGE_GROUP_ID: "Service Charge Group ID",
        BudgetLabelIds.SERVICE_CHARGE_GROUP_NAME: "Service Charge Group",
        BudgetLabelIds.SERVICE_CHARGE_GROUP_LOCAL_NAME: "Service Charge Group Local Name",
        BudgetLabelIds.BUDGET_PERIOD_CODE: "Budget Period Code",
        BudgetLabelIds.BUDGET_PERIOD_TITLE: "Budget Period Title",
        BudgetLabelIds.BUDGET_PERIOD_FROM: "Budget Period From",
        BudgetLabelIds.BUDGET_PERIOD_TO: "Budget Period To",
        BudgetLabelIds.CATEGORY_CODE: "Category Code",
        BudgetLabelIds.CATEGORY_NAME: "Category Name",
        BudgetLabelIds.SUB_CATEGORY_CODE: "Sub Category Code",
        BudgetLabelIds.SUB_CATEGORY_NAME: "Sub Category Name",
        BudgetLabelIds.SERVICE_CODE: "Service Code",
        BudgetLabelIds.SERVICE_NAME: "Service Name",
        BudgetLabelIds.TOTAL_COST: "Total Cost",
        BudgetLabelIds.VAT_AMOUNT: "VAT Amount",
        BudgetLabelIds.DOCUMENTS_SAVE_HEADING: "Save budget details first",
        BudgetLabelIds.DOCUMENTS_SAVE_MESSAGE: "Documents can be uploaded once the budget has been saved.",
    }
)

MASTER_BUDGET_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        MasterBudgetLabelIds.STEP_DETAILS: "Master Budget Details",
        MasterBudgetLabelIds.STEP_DOCUMENTS: "Documents",
        MasterBudgetLabelIds.STEP_REVIEW: "Review",
        MasterBudgetLabelIds.CHARGE_TYPE_ID: "Charge Type ID",
        MasterBudgetLabelIds.CHARGE_TYPE: "Charge Type",
        MasterBudgetLabelIds.GROUP_NAME: "Group Name",
        MasterBudgetLabelIds.CATEGORY_CODE: "Category Code",
        MasterBudgetLabelIds.CATEGORY_NAME: "Category Name",
        MasterBudgetLabelIds.SERVICE_CODE: "Service Code",
        MasterBudgetLabelIds.SERVICE_NAME: "Service Name",
        MasterBudgetLabelIds.PROVISIONAL_BUDGET_CODE: "Provisional Budget Code",
    }
)

CAPITAL_PARTNER_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "CDL_OWNER_REGISTRY": "Owner Registry",
        "CDL_OWNER_NEW": "Register New Owner Registry",
        "CDL_OWNER_BASIC_INFO": "Owner Registry Basic Information",
        CapitalPartnerLabelIds.TYPE: "Owner Registry Type",
        CapitalPartnerLabelIds.FIRST_NAME: "Owner Registry First Name",
        CapitalPartnerLabelIds.LAST_NAME: "Last Name",
        CapitalPartnerLabelIds.OWNERSHIP: "Ownership Share (%)",
        CapitalPartnerLabelIds.EMAIL: "Owner Registry Email Address",
        CapitalPartnerLabelIds.MOBILE: "Primary Mobile Number",
        "CDL_OWNER_UNIT_DETAILS": "Unit Details",
        CapitalPartnerLabelIds.UNIT_NUMBER: "Unit Number",
        CapitalPartnerLabelIds.UNIT_NET_PRICE: "Net Sale Price",
        CapitalPartnerLabelIds.UNIT_GROSS_PRICE: "Gross Sale Price",
        "CDL_OWNER_BANK_DETAILS": "Banking & Payment Details",
    }
)

LOCAL_LABELS_BY_DOMAIN: Final[Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {
        "budget": BUDGET_LABELS,
        "master_budget": MASTER_BUDGET_LABELS,
        "capital_partner": CAPITAL_PARTNER_LABELS,
    }
)


def local_labels_for(domain: str) -> Mapping[str, str]:
    """Return the static table for ``domain`` (empty for unknown domains)."""

    return LOCAL_LABELS_BY_DOMAIN.get(domain, MappingProxyType({}))


__all__ = [
    "BUDGET_LABELS",
    "BudgetLabelIds",
    "CAPITAL_PARTNER_LABELS",
    "CapitalPartnerLabelIds",
    "LOCAL_LABELS_BY_DOMAIN",
    "MASTER_BUDGET_LABELS",
    "MasterBudgetLabelIds",
    "local_labels_for",
]
