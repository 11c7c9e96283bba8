"""Session state utilities."""

from .bootstrap import bootstrap_app, ensure_app_ready, get_label_store, is_app_ready, reset_app_state

__all__ = ["bootstrap_app", "ensure_app_ready", "get_label_store", "is_app_ready", "reset_app_state"]
