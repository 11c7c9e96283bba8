"""Wizard helpers package."""

from __future__ import annotations

from .validation import FieldRule, validate_field, validate_step

__all__ = ["FieldRule", "validate_field", "validate_step"]
