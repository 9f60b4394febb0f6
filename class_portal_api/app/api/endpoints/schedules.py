"""
Schedule endpoints.

The weekly timetable, listed Monday to Sunday and by start time within
each day.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_schedule_service
from class_portal_api.app.schemas.schedule import ScheduleCreate, ScheduleRead, ScheduleUpdate
from class_portal_api.app.services.schedule_service import ScheduleService

router = APIRouter()


@router.get("", response_model=List[ScheduleRead])
async def list_schedules(service: ScheduleService = Depends(get_schedule_service)) -> List[ScheduleRead]:
    return await service.list()


@router.get("/{schedule_id}", response_model=ScheduleRead)
async def get_schedule(
    schedule_id: int,
    service: ScheduleService = Depends(get_schedule_service),
) -> ScheduleRead:
    schedule = await service.get(schedule_id)
    if schedule is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schedule not found")
    return schedule


@router.post("", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    schedule_in: ScheduleCreate,
    service: ScheduleService = Depends(get_schedule_service),
) -> ScheduleRead:
    return await service.create(schedule_in)


@router.put("/{schedule_id}", response_model=ScheduleRead)
async def update_schedule(
    schedule_id: int,
    schedule_in: ScheduleUpdate,
    service: ScheduleService = Depends(get_schedule_service),
) -> ScheduleRead:
    schedule = await service.update(schedule_id, schedule_in)
    if schedule is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schedule not found")
    return schedule


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(
    schedule_id: int,
    service: ScheduleService = Depends(get_schedule_service),
) -> None:
    deleted = await service.delete(schedule_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schedule not found")
    return None
