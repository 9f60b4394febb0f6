"""
Class member endpoints.

The class directory.  Searching and paging happen in the web client,
so the list endpoint returns every member.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_class_member_service
from class_portal_api.app.schemas.class_member import ClassMemberCreate, ClassMemberRead, ClassMemberUpdate
from class_portal_api.app.services.member_service import ClassMemberService

router = APIRouter()


@router.get("", response_model=List[ClassMemberRead])
async def list_class_members(
    service: ClassMemberService = Depends(get_class_member_service),
) -> List[ClassMemberRead]:
    return await service.list()


@router.get("/{member_id}", response_model=ClassMemberRead)
async def get_class_member(
    member_id: int,
    service: ClassMemberService = Depends(get_class_member_service),
) -> ClassMemberRead:
    member = await service.get(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class member not found")
    return member


@router.post("", response_model=ClassMemberRead, status_code=status.HTTP_201_CREATED)
async def create_class_member(
    member_in: ClassMemberCreate,
    service: ClassMemberService = Depends(get_class_member_service),
) -> ClassMemberRead:
    return await service.create(member_in)


@router.put("/{member_id}", response_model=ClassMemberRead)
async def update_class_member(
    member_id: int,
    member_in: ClassMemberUpdate,
    service: ClassMemberService = Depends(get_class_member_service),
) -> ClassMemberRead:
    member = await service.update(member_id, member_in)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class member not found")
    return member


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class_member(
    member_id: int,
    service: ClassMemberService = Depends(get_class_member_service),
) -> None:
    deleted = await service.delete(member_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class member not found")
    return None
