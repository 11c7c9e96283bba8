"""Pure label resolution over an explicit snapshot and a static fallback table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from labels.models import EMPTY_SNAPSHOT, LabelItem, ProcessedLabels

logger = logging.getLogger(__name__)

DEFAULT_LABEL_LANGUAGE = "EN"
_NO_LOCAL_LABELS: Mapping[str, str] = MappingProxyType({})


def _non_empty(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _languages_for(snapshot: Mapping[str, Mapping[str, str]] | None, config_id: str) -> Mapping[str, str] | None:
    if not isinstance(snapshot, Mapping):
        return None
    try:
        languages = snapshot.get(config_id)
    except TypeError:
        return None
    return languages if isinstance(languages, Mapping) else None


def get_label(
    snapshot: Mapping[str, Mapping[str, str]] | None,
    config_id: str,
    language_code: str | None = DEFAULT_LABEL_LANGUAGE,
    fallback: str | None = None,
    *,
    local_mapping: Mapping[str, str] | None = None,
    default_language: str = DEFAULT_LABEL_LANGUAGE,
) -> str:
    """Return the best available label for ``config_id``.

    The lookup prefers the snapshot value in ``language_code``, then the
    snapshot value in ``default_language``, then ``local_mapping`` and finally
    ``fallback``. When no fallback is supplied the config id itself is
    returned. The function never raises and never performs I/O.

    Args:
        snapshot: ``config_id -> language -> value`` mapping of loaded labels.
        config_id: Stable key identifying the label.
        language_code: Requested language, e.g. ``"EN"``.
        fallback: Human-readable default returned verbatim as a last resort.
        local_mapping: Static ``config_id -> value`` table.
        default_language: Catalogue language used when ``language_code`` is missing.

    Returns:
        The resolved label.
    """

    key = config_id if isinstance(config_id, str) else str(config_id)
    languages = _languages_for(snapshot, key)
    if languages is not None:
        if isinstance(language_code, str):
            resolved = _non_empty(languages.get(language_code))
            if resolved is not None:
                return resolved
        resolved = _non_empty(languages.get(default_language))
        if resolved is not None:
            return resolved
    if isinstance(local_mapping, Mapping):
        resolved = _non_empty(local_mapping.get(key))
        if resolved is not None:
            return resolved
    if fallback is not None:
        return fallback if isinstance(fallback, str) else str(fallback)
    return key


def process_labels(items: Iterable[LabelItem | Mapping[str, Any]]) -> ProcessedLabels:
    """Reduce a flat catalogue response into ``config_id -> language -> value``.

    Deleted or disabled entries are skipped, as are items that do not match
    the catalogue shape. Later items win for the same id and language.
    """

    processed: ProcessedLabels = {}
    for raw in items or ():
        if isinstance(raw, LabelItem):
            item = raw
        else:
            try:
                item = LabelItem.model_validate(raw)
            except ValidationError as error:
                logger.debug("Skipping malformed label item: %s", error)
                continue
        if not item.is_active:
            continue
        entry = item.to_entry()
        processed.setdefault(entry.config_id, {})[entry.language_code] = entry.value
    return processed


def has_labels(snapshot: Mapping[str, Mapping[str, str]] | None) -> bool:
    return isinstance(snapshot, Mapping) and len(snapshot) > 0


def available_languages(snapshot: Mapping[str, Mapping[str, str]] | None) -> list[str]:
    """Return the language codes present in ``snapshot`` in first-seen order."""

    if not isinstance(snapshot, Mapping):
        return []
    seen: dict[str, None] = {}
    for languages in snapshot.values():
        for language in languages:
            seen.setdefault(language, None)
    return list(seen)


@dataclass(frozen=True)
class LabelLookup:
    """Bind a snapshot, static table and UI language into a callable lookup."""

    snapshot: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: EMPTY_SNAPSHOT)
    local_mapping: Mapping[str, str] = field(default_factory=lambda: _NO_LOCAL_LABELS)
    language: str = DEFAULT_LABEL_LANGUAGE

    def __call__(self, config_id: str, fallback: str | None = None, *, language: str | None = None) -> str:
        return get_label(
            self.snapshot,
            config_id,
            language or self.language,
            fallback,
            local_mapping=self.local_mapping,
        )

    def has_labels(self) -> bool:
        return has_labels(self.snapshot)

    def available_languages(self) -> list[str]:
        return available_languages(self.snapshot)


__all__ = [
    "DEFAULT_LABEL_LANGUAGE",
    "LabelLookup",
    "available_languages",
    "get_label",
    "has_labels",
    "process_labels",
]
