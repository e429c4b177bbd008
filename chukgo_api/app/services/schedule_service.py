"""Storage of coach availability slots.  Slots are only stored and listed."""

import logging
from typing import List

from ..core.store import SCHEDULES, EntityStore
from ..schemas.schedule import ScheduleCreate, ScheduleRead

logger = logging.getLogger(__name__)


class ScheduleService:
    @classmethod
    async def get_schedules_by_coach(cls, store: EntityStore, coach_id: int) -> List[ScheduleRead]:
        return [ScheduleRead.model_validate(r) for r in store.list(SCHEDULES) if r["coach_id"] == coach_id]

    @classmethod
    async def create_schedule(cls, store: EntityStore, coach_id: int, data: ScheduleCreate) -> ScheduleRead:
        record = data.model_dump()
        record["coach_id"] = coach_id
        stored = store.insert(SCHEDULES, record)
        logger.info("Coach %s added schedule slot %s", coach_id, stored["id"])
        return ScheduleRead.model_validate(stored)
