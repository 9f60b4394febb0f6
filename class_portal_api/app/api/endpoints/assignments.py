"""Assignment endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_assignment_service
from class_portal_api.app.schemas.assignment import AssignmentCreate, AssignmentRead, AssignmentUpdate
from class_portal_api.app.services.assignment_service import AssignmentService

router = APIRouter()


@router.get("", response_model=List[AssignmentRead])
async def list_assignments(service: AssignmentService = Depends(get_assignment_service)) -> List[AssignmentRead]:
    return await service.list()


@router.get("/{assignment_id}", response_model=AssignmentRead)
async def get_assignment(
    assignment_id: int,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentRead:
    assignment = await service.get(assignment_id)
    if assignment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return assignment


@router.post("", response_model=AssignmentRead, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment_in: AssignmentCreate,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentRead:
    return await service.create(assignment_in)


@router.put("/{assignment_id}", response_model=AssignmentRead)
async def update_assignment(
    assignment_id: int,
    assignment_in: AssignmentUpdate,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentRead:
    assignment = await service.update(assignment_id, assignment_in)
    if assignment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return assignment


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(
    assignment_id: int,
    service: AssignmentService = Depends(get_assignment_service),
) -> None:
    deleted = await service.delete(assignment_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return None
