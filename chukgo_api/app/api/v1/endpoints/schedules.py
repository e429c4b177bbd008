from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from chukgo_api.app.core.security import require_coach
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.schedule import ScheduleCreate, ScheduleRead
from chukgo_api.app.services.coach_service import CoachService
from chukgo_api.app.services.schedule_service import ScheduleService


router = APIRouter()


@router.post("", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    data: ScheduleCreate,
    current_user: Dict[str, Any] = Depends(require_coach),
    store: EntityStore = Depends(get_store),
) -> ScheduleRead:
    """Add an availability slot to the caller's coach profile."""
    coach = await CoachService.get_coach_by_user(store, current_user["id"])
    if not coach:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Coach profile required")
    return await ScheduleService.create_schedule(store, coach.id, data)
