"""
Top‑level API router.

This router aggregates the resource routers under their URL names.
It is mounted under ``settings.api_prefix`` (``/api`` by default) in
``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import (
    announcements,
    assignments,
    class_members,
    contact,
    core_members,
    finance,
    health,
    schedules,
    transactions,
    users,
)

router = APIRouter()

router.include_router(core_members.router, prefix="/core-members", tags=["core members"])
router.include_router(class_members.router, prefix="/class-members", tags=["class members"])
router.include_router(announcements.router, prefix="/announcements", tags=["announcements"])
router.include_router(schedules.router, prefix="/schedules", tags=["schedules"])
router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
router.include_router(transactions.router, prefix="/transactions", tags=["finance"])
router.include_router(finance.router, prefix="/finance-summary", tags=["finance"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
