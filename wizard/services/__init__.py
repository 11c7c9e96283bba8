"""Service layer for wizard persistence."""

from .persistence import DraftPersistence, EntityApiClient, SavedRecord, budget_client, master_budget_client

__all__ = [
    "DraftPersistence",
    "EntityApiClient",
    "SavedRecord",
    "budget_client",
    "master_budget_client",
]
