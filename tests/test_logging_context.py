from __future__ import annotations

import asyncio
import logging
from typing import Any

from utils.logging_context import configure_logging, log_context, set_entity_id, set_session_id
from wizard.navigation import ResumeContext, StepperController
from wizard.services import SavedRecord
from wizard_pages import CAPITAL_PARTNER_WIZARD

from tests.drafts import CAPITAL_PARTNER_BASIC


class _RecordingPersistence:
    def __init__(self) -> None:
        self.logger = logging.getLogger("test.logging.persistence")

    def create(self, payload: Any) -> SavedRecord:
        self.logger.info("Creating record")
        return SavedRecord(id="cp-1")

    def update(self, entity_id: str, payload: Any) -> Any:
        return payload

    def fetch(self, entity_id: str) -> Any:
        return {}


def test_log_context_overrides_and_restores(caplog: Any) -> None:
    configure_logging()
    set_session_id("session-123")
    logger = logging.getLogger("test.logging.context")
    caplog.set_level(logging.INFO, logger=logger.name)

    with log_context(wizard_step="details", entity_id="rec-1"):
        logger.info("inside")
    logger.info("outside")

    inside, outside = caplog.records[-2:]
    assert inside.session_id == "session-123"
    assert inside.wizard_step == "details"
    assert inside.entity_id == "rec-1"
    assert outside.wizard_step == "-"
    assert outside.entity_id == "-"
    set_session_id(None)


def test_blank_values_render_as_dash(caplog: Any) -> None:
    configure_logging()
    set_entity_id("   ")
    logger = logging.getLogger("test.logging.blank")
    caplog.set_level(logging.INFO, logger=logger.name)

    logger.info("blank")

    assert caplog.records[-1].entity_id == "-"


def test_controller_saves_log_wizard_step(caplog: Any) -> None:
    configure_logging()
    persistence = _RecordingPersistence()
    caplog.set_level(logging.INFO, logger=persistence.logger.name)
    controller = StepperController(
        CAPITAL_PARTNER_WIZARD, persistence, resume=ResumeContext(), session_state={}
    )

    asyncio.run(controller.next(CAPITAL_PARTNER_BASIC))

    records = [record for record in caplog.records if record.message == "Creating record"]
    assert records, "Expected the persistence call to log"
    assert records[0].wizard_step == "basic"
