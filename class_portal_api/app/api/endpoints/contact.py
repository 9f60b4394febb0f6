"""
Contact form endpoints.

Visitors submit messages with ``POST /contact``; the server stamps
``createdAt``.  Messages can be listed, read and deleted but never
edited.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_contact_service
from class_portal_api.app.schemas.contact import ContactMessageCreate, ContactMessageRead
from class_portal_api.app.services.contact_service import ContactService

router = APIRouter()


@router.post("", response_model=ContactMessageRead, status_code=status.HTTP_201_CREATED)
async def send_contact_message(
    message_in: ContactMessageCreate,
    service: ContactService = Depends(get_contact_service),
) -> ContactMessageRead:
    return await service.create(message_in)


@router.get("", response_model=List[ContactMessageRead])
async def list_contact_messages(service: ContactService = Depends(get_contact_service)) -> List[ContactMessageRead]:
    return await service.list()


@router.get("/{message_id}", response_model=ContactMessageRead)
async def get_contact_message(
    message_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactMessageRead:
    message = await service.get(message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact message not found")
    return message


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact_message(
    message_id: int,
    service: ContactService = Depends(get_contact_service),
) -> None:
    deleted = await service.delete(message_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact message not found")
    return None
