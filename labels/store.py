"""Session-wide label cache with per-domain loading and stale-on-failure semantics."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Mapping

from core.errors import AuthExpiredError, LabelFetchError
from labels.mappings import local_labels_for
from labels.models import EMPTY_SNAPSHOT, LabelItem, LabelSnapshot
from labels.resolver import DEFAULT_LABEL_LANGUAGE, LabelLookup, get_label, process_labels
from labels.service import LabelsService

logger = logging.getLogger(__name__)


class LabelCacheStore:
    """Hold one immutable :class:`LabelSnapshot` per label domain.

    Loads run the blocking HTTP call in a worker thread. A domain that is
    already loading is skipped, and a failed load records the error while the
    previously published snapshot stays in place.
    """

    def __init__(
        self,
        service: LabelsService | None = None,
        *,
        domains: Iterable[str] | None = None,
        default_language: str = DEFAULT_LABEL_LANGUAGE,
    ) -> None:
        self.service = service or LabelsService()
        self.domains: tuple[str, ...] = tuple(domains) if domains is not None else self.service.domains
        self.default_language = default_language
        self._snapshots: dict[str, LabelSnapshot] = {}
        self._loading: set[str] = set()
        self.errors: dict[str, str] = {}

    @property
    def labels(self) -> Mapping[str, LabelSnapshot]:
        return dict(self._snapshots)

    @property
    def is_loading(self) -> bool:
        return bool(self._loading)

    def is_domain_loading(self, domain: str) -> bool:
        return domain in self._loading

    @property
    def error(self) -> str | None:
        """Most recent load error across all domains, if any."""

        if not self.errors:
            return None
        return next(reversed(self.errors.values()))

    def snapshot(self, domain: str) -> LabelSnapshot:
        return self._snapshots.get(domain, EMPTY_SNAPSHOT)

    def has_labels(self, domain: str) -> bool:
        return len(self.snapshot(domain)) > 0

    def get_label(
        self,
        domain: str,
        config_id: str,
        language_code: str | None = None,
        fallback: str | None = None,
    ) -> str:
        return get_label(
            self.snapshot(domain),
            config_id,
            language_code or self.default_language,
            fallback,
            local_mapping=local_labels_for(domain),
            default_language=self.default_language,
        )

    def lookup(self, domain: str, language: str | None = None) -> LabelLookup:
        """Bind the current snapshot of ``domain`` for repeated lookups."""

        return LabelLookup(
            snapshot=self.snapshot(domain),
            local_mapping=local_labels_for(domain),
            language=language or self.default_language,
        )

    async def load_labels(self, domains: Iterable[str] | None = None) -> Mapping[str, LabelSnapshot]:
        """Fetch and merge labels for ``domains`` (all configured domains by default)."""

        targets = tuple(domains) if domains is not None else self.domains
        await asyncio.gather(*(self._load_domain(domain) for domain in targets))
        return self.labels

    async def refresh(self, domains: Iterable[str] | None = None) -> Mapping[str, LabelSnapshot]:
        targets = tuple(domains) if domains is not None else self.domains
        logger.info("Refreshing labels for %s", ", ".join(targets))
        return await self.load_labels(targets)

    async def _load_domain(self, domain: str) -> None:
        if self.is_domain_loading(domain):
            logger.debug("Labels for %s already loading; skipping", domain)
            return
        self._loading.add(domain)
        try:
            items = await asyncio.to_thread(self.service.fetch_labels, domain)
            processed = process_labels(items)
        except (LabelFetchError, AuthExpiredError) as error:
            self.errors[domain] = str(error)
            logger.warning(
                "Keeping %d cached %s labels after failed load: %s",
                len(self.snapshot(domain)),
                domain,
                error,
            )
        else:
            self._snapshots[domain] = self.snapshot(domain).merged(processed)
            self.errors.pop(domain, None)
            logger.debug("Loaded %d %s label ids", len(processed), domain)
        finally:
            self._loading.discard(domain)

    def apply_label(self, domain: str, item: LabelItem) -> None:
        """Merge a single catalogue item into the published snapshot of ``domain``."""

        self._snapshots[domain] = self.snapshot(domain).merged(process_labels([item]))

    async def create_label(
        self,
        domain: str,
        config_id: str,
        value: str,
        language_code: str | None = None,
    ) -> LabelItem:
        item = await asyncio.to_thread(
            self.service.create_label,
            domain,
            config_id,
            value,
            language_code or self.default_language,
        )
        self.apply_label(domain, item)
        return item

    async def update_label(self, domain: str, label_id: int, value: str) -> LabelItem:
        item = await asyncio.to_thread(self.service.update_label, domain, label_id, value)
        self.apply_label(domain, item)
        return item


__all__ = ["LabelCacheStore"]
