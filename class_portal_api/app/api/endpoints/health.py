"""Liveness endpoint reporting the number of records per collection."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from class_portal_api.app.api.deps import get_storage
from class_portal_api.app.core.storage import Storage

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(storage: Storage = Depends(get_storage)) -> Dict[str, Any]:
    return {"status": "ok", "records": storage.counts()}
