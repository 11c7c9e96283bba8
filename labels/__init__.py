"""Label catalogue loading and resolution."""

from labels.models import EMPTY_SNAPSHOT, LabelEntry, LabelItem, LabelSnapshot, ProcessedLabels
from labels.resolver import LabelLookup, available_languages, get_label, has_labels, process_labels
from labels.service import LabelsService
from labels.store import LabelCacheStore

__all__ = [
    "EMPTY_SNAPSHOT",
    "LabelCacheStore",
    "LabelEntry",
    "LabelItem",
    "LabelLookup",
    "LabelSnapshot",
    "LabelsService",
    "ProcessedLabels",
    "available_languages",
    "get_label",
    "has_labels",
    "process_labels",
]
