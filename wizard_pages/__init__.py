"""Wizard step metadata registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .base import WizardDefinition, WizardPage
from .capital_partner import WIZARD as CAPITAL_PARTNER_WIZARD
from .management_firm_budget import WIZARD as MANAGEMENT_FIRM_BUDGET_WIZARD
from .master_budget import WIZARD as MASTER_BUDGET_WIZARD

WIZARDS: Mapping[str, WizardDefinition] = MappingProxyType(
    {
        wizard.wizard_id: wizard
        for wizard in (MANAGEMENT_FIRM_BUDGET_WIZARD, MASTER_BUDGET_WIZARD, CAPITAL_PARTNER_WIZARD)
    }
)


def get_wizard(wizard_id: str) -> WizardDefinition:
    try:
        return WIZARDS[wizard_id]
    except KeyError:
        raise KeyError(f"Unknown wizard '{wizard_id}'") from None


__all__ = [
    "CAPITAL_PARTNER_WIZARD",
    "MANAGEMENT_FIRM_BUDGET_WIZARD",
    "MASTER_BUDGET_WIZARD",
    "WIZARDS",
    "WizardDefinition",
    "WizardPage",
    "get_wizard",
]
