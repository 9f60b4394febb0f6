"""
FastAPI dependencies.

The application's ``Storage`` lives on ``app.state`` (see
``main.create_app``).  Handlers never touch it directly: they declare
the service they need and receive one bound to that store.
"""

from fastapi import Depends, Request

from class_portal_api.app.core.storage import Storage
from class_portal_api.app.services.announcement_service import AnnouncementService
from class_portal_api.app.services.assignment_service import AssignmentService
from class_portal_api.app.services.contact_service import ContactService
from class_portal_api.app.services.finance_service import FinanceService
from class_portal_api.app.services.member_service import ClassMemberService, CoreMemberService
from class_portal_api.app.services.schedule_service import ScheduleService
from class_portal_api.app.services.transaction_service import TransactionService
from class_portal_api.app.services.user_service import UserService


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_core_member_service(storage: Storage = Depends(get_storage)) -> CoreMemberService:
    return CoreMemberService(storage)


def get_class_member_service(storage: Storage = Depends(get_storage)) -> ClassMemberService:
    return ClassMemberService(storage)


def get_announcement_service(storage: Storage = Depends(get_storage)) -> AnnouncementService:
    return AnnouncementService(storage)


def get_schedule_service(storage: Storage = Depends(get_storage)) -> ScheduleService:
    return ScheduleService(storage)


def get_assignment_service(storage: Storage = Depends(get_storage)) -> AssignmentService:
    return AssignmentService(storage)


def get_transaction_service(storage: Storage = Depends(get_storage)) -> TransactionService:
    return TransactionService(storage)


def get_finance_service(storage: Storage = Depends(get_storage)) -> FinanceService:
    return FinanceService(storage)


def get_contact_service(storage: Storage = Depends(get_storage)) -> ContactService:
    return ContactService(storage)


def get_user_service(storage: Storage = Depends(get_storage)) -> UserService:
    return UserService(storage)
