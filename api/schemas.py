"""Pydantic shapes for stored records and route responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecordBase(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    documents: list[Any] = Field(default_factory=list)
    createdAt: str
    updatedAt: str


class ManagementFirmBudgetRecord(RecordBase):
    managementFirmGroupId: str = ""
    managementFirmGroupName: str = ""
    managementFirmGroupLocalName: str = ""
    masterCommunityName: str = ""
    masterCommunityLocalName: str = ""
    managementCompanyId: str = ""
    managementCompanyName: str = ""
    managementCompanyLocalName: str = ""
    managementFirmManagerEmail: str = ""
    serviceChargeGroupId: str = ""
    serviceChargeGroupName: str = ""
    serviceChargeGroupLocalName: str = ""
    budgetPeriodCode: str = ""
    budgetPeriodTitle: str = ""
    budgetPeriodFrom: str | None = None
    budgetPeriodTo: str | None = None
    categoryCode: str = ""
    categoryName: str = ""
    categoryLocalName: str = ""
    subCategoryCode: str = ""
    subCategoryName: str = ""
    subCategoryLocalName: str = ""
    serviceCode: str = ""
    serviceName: str = ""
    serviceLocalName: str = ""
    totalCost: int | float = 0
    vatAmount: int | float = 0
    budgetMasterData: list[Any] = Field(default_factory=list)


class MasterBudgetRecord(RecordBase):
    chargeTypeId: int | float = 0
    chargeType: str = ""
    groupName: str = ""
    categoryCode: str = ""
    categoryName: str = ""
    categorySubCode: str = ""
    categorySubName: str = ""
    categorySubToSubCode: str = ""
    categorySubToSubName: str = ""
    serviceName: str = ""
    serviceCode: str = ""
    provisionalBudgetCode: str = ""


class CreatedResponse(BaseModel):
    id: str
    referenceCode: str
    data: dict[str, Any]


class RecordResponse(BaseModel):
    budget: dict[str, Any]


class RecordListResponse(BaseModel):
    budgets: list[dict[str, Any]]


class DeletedResponse(BaseModel):
    success: bool = True


class FormOptionsResponse(BaseModel):
    options: dict[str, Any]


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "CreatedResponse",
    "DeletedResponse",
    "FormOptionsResponse",
    "ManagementFirmBudgetRecord",
    "MasterBudgetRecord",
    "MessageResponse",
    "RecordBase",
    "RecordListResponse",
    "RecordResponse",
]
