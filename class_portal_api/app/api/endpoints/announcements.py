"""
Announcement endpoints.

Announcements are returned newest first.  When a new announcement is
posted without a ``date``, today's date is used.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_announcement_service
from class_portal_api.app.schemas.announcement import AnnouncementCreate, AnnouncementRead, AnnouncementUpdate
from class_portal_api.app.services.announcement_service import AnnouncementService

router = APIRouter()


@router.get("", response_model=List[AnnouncementRead])
async def list_announcements(
    service: AnnouncementService = Depends(get_announcement_service),
) -> List[AnnouncementRead]:
    """Return all announcements, newest first."""
    return await service.list()


@router.get("/{announcement_id}", response_model=AnnouncementRead)
async def get_announcement(
    announcement_id: int,
    service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementRead:
    announcement = await service.get(announcement_id)
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Announcement not found")
    return announcement


@router.post("", response_model=AnnouncementRead, status_code=status.HTTP_201_CREATED)
async def create_announcement(
    announcement_in: AnnouncementCreate,
    service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementRead:
    return await service.create(announcement_in)


@router.put("/{announcement_id}", response_model=AnnouncementRead)
async def update_announcement(
    announcement_id: int,
    announcement_in: AnnouncementUpdate,
    service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementRead:
    announcement = await service.update(announcement_id, announcement_in)
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Announcement not found")
    return announcement


@router.delete("/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_announcement(
    announcement_id: int,
    service: AnnouncementService = Depends(get_announcement_service),
) -> None:
    deleted = await service.delete(announcement_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Announcement not found")
    return None
