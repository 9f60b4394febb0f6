"""
Core member endpoints.

CRUD routes for the class officers displayed on the home page.  The
list is ordered president, secretary, treasurer.  A student number
may only be used by one core member; a clash answers HTTP 409.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_core_member_service
from class_portal_api.app.schemas.core_member import CoreMemberCreate, CoreMemberRead, CoreMemberUpdate
from class_portal_api.app.services.member_service import CoreMemberService

router = APIRouter()


@router.get("", response_model=List[CoreMemberRead])
async def list_core_members(service: CoreMemberService = Depends(get_core_member_service)) -> List[CoreMemberRead]:
    """Return all core members."""
    return await service.list()


@router.get("/{member_id}", response_model=CoreMemberRead)
async def get_core_member(
    member_id: int,
    service: CoreMemberService = Depends(get_core_member_service),
) -> CoreMemberRead:
    member = await service.get(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Core member not found")
    return member


@router.post("", response_model=CoreMemberRead, status_code=status.HTTP_201_CREATED)
async def create_core_member(
    member_in: CoreMemberCreate,
    service: CoreMemberService = Depends(get_core_member_service),
) -> CoreMemberRead:
    return await service.create(member_in)


@router.put("/{member_id}", response_model=CoreMemberRead)
async def update_core_member(
    member_id: int,
    member_in: CoreMemberUpdate,
    service: CoreMemberService = Depends(get_core_member_service),
) -> CoreMemberRead:
    """Update a core member; fields missing from the body are kept."""
    member = await service.update(member_id, member_in)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Core member not found")
    return member


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_core_member(
    member_id: int,
    service: CoreMemberService = Depends(get_core_member_service),
) -> None:
    deleted = await service.delete(member_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Core member not found")
    return None
