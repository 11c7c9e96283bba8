"""Navigation helpers for the entity wizards."""

from __future__ import annotations

from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.router import PageProgressSnapshot, ResumeContext, StepperController, TransitionResult
from wizard.navigation.state import DraftStatus, DraftStore, StepperState

__all__ = [
    "DraftStatus",
    "DraftStore",
    "PageProgressSnapshot",
    "ResumeContext",
    "StepperController",
    "StepperState",
    "TransitionResult",
    "WizardSessionKeys",
]
