"""Label catalogue payloads and the immutable snapshot used for lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field

ProcessedLabels = dict[str, dict[str, str]]


class LabelEntry(BaseModel):
    """One localized value for a ``(config_id, language_code)`` pair."""

    model_config = ConfigDict(frozen=True)

    config_id: str
    language_code: str
    value: str


class AppLanguageCode(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    language_code: str = Field(alias="languageCode")
    rtl: bool = False


class LabelItem(BaseModel):
    """Raw item as returned by the label catalogue endpoints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None
    config_id: str = Field(alias="configId")
    config_value: str = Field(alias="configValue")
    app_language_code: AppLanguageCode = Field(alias="appLanguageCode")
    enabled: bool | None = None
    deleted: bool | None = None

    @property
    def is_active(self) -> bool:
        return not self.deleted and self.enabled is not False

    def to_entry(self) -> LabelEntry:
        return LabelEntry(
            config_id=self.config_id,
            language_code=self.app_language_code.language_code,
            value=self.config_value,
        )


class LabelSnapshot(Mapping[str, Mapping[str, str]]):
    """Read-only ``config_id -> language -> value`` view handed to resolvers.

    A snapshot never changes after construction; the cache store publishes a
    new snapshot whenever a load merges fresh values.
    """

    __slots__ = ("_data",)

    def __init__(self, labels: Mapping[str, Mapping[str, str]] | None = None) -> None:
        frozen = {
            config_id: MappingProxyType(dict(languages))
            for config_id, languages in (labels or {}).items()
        }
        self._data: Mapping[str, Mapping[str, str]] = MappingProxyType(frozen)

    def __getitem__(self, config_id: str) -> Mapping[str, str]:
        return self._data[config_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"LabelSnapshot({len(self._data)} labels)"

    def value(self, config_id: str, language_code: str) -> str | None:
        languages = self._data.get(config_id)
        if languages is None:
            return None
        return languages.get(language_code)

    def merged(self, labels: Mapping[str, Mapping[str, str]]) -> "LabelSnapshot":
        """Return a new snapshot where ``labels`` overwrite per config id and language."""

        combined: ProcessedLabels = {config_id: dict(languages) for config_id, languages in self._data.items()}
        for config_id, languages in labels.items():
            combined.setdefault(config_id, {}).update(languages)
        return LabelSnapshot(combined)

    def to_dict(self) -> ProcessedLabels:
        return {config_id: dict(languages) for config_id, languages in self._data.items()}


EMPTY_SNAPSHOT = LabelSnapshot()


__all__ = [
    "AppLanguageCode",
    "EMPTY_SNAPSHOT",
    "LabelEntry",
    "LabelItem",
    "LabelSnapshot",
    "ProcessedLabels",
]
