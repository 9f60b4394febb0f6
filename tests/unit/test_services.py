import random
from datetime import date, datetime, timezone

import pytest

from class_portal_api.app.core.exceptions import DuplicateRecordError
from class_portal_api.app.core.seed import ANNOUNCEMENTS, SCHEDULES, TRANSACTIONS
from class_portal_api.app.schemas.announcement import AnnouncementCreate, AnnouncementUpdate
from class_portal_api.app.schemas.class_member import ClassMemberCreate, ClassMemberUpdate
from class_portal_api.app.schemas.contact import ContactMessageCreate
from class_portal_api.app.schemas.core_member import CoreMemberCreate
from class_portal_api.app.schemas.schedule import WEEKDAYS, ScheduleCreate
from class_portal_api.app.schemas.transaction import TransactionCreate
from class_portal_api.app.schemas.user import UserCreate
from class_portal_api.app.services.announcement_service import AnnouncementService
from class_portal_api.app.services.contact_service import ContactService
from class_portal_api.app.services.crud_service import CrudService
from class_portal_api.app.services.member_service import ClassMemberService, CoreMemberService
from class_portal_api.app.services.schedule_service import ScheduleService
from class_portal_api.app.services.transaction_service import TransactionService
from class_portal_api.app.services.user_service import UserService


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
async def test_announcements_newest_first_for_any_insert_order(storage, seed):
    items = list(ANNOUNCEMENTS)
    random.Random(seed).shuffle(items)
    service = AnnouncementService(storage)
    for item in items:
        await service.create(AnnouncementCreate(**item))
    dates = [a.date for a in await service.list()]
    assert dates == sorted(dates, reverse=True)


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
async def test_schedules_in_weekday_order_for_any_insert_order(storage, seed):
    items = list(SCHEDULES)
    random.Random(seed).shuffle(items)
    service = ScheduleService(storage)
    for day, start, end, subject, room, color in items:
        await service.create(
            ScheduleCreate(day=day, start_time=start, end_time=end, subject=subject, room=room, color=color)
        )
    keys = [(WEEKDAYS.index(s.day), s.start_time) for s in await service.list()]
    assert keys == sorted(keys)
    assert (await service.list())[0].subject == "Cryptography Basics"


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", [0, 1, 2])
async def test_transactions_newest_first_for_any_insert_order(storage, seed):
    items = list(TRANSACTIONS)
    random.Random(seed).shuffle(items)
    service = TransactionService(storage)
    for tx_date, description, category, amount, tx_type in items:
        await service.create(
            TransactionCreate(date=tx_date, description=description, category=category, amount=amount, type=tx_type)
        )
    dates = [t.date for t in await service.list()]
    assert dates == sorted(dates, reverse=True)


@pytest.mark.asyncio
async def test_core_members_listed_by_role(storage):
    service = CoreMemberService(storage)
    for role, nim in [("treasurer", "3"), ("president", "1"), ("secretary", "2")]:
        await service.create(CoreMemberCreate(name=role, student_id=nim, role=role, image_url="x.jpg"))
    assert [m.role for m in await service.list()] == ["president", "secretary", "treasurer"]


@pytest.mark.asyncio
async def test_announcement_date_defaults_to_today(storage):
    service = AnnouncementService(storage)
    created = await service.create(
        AnnouncementCreate(title="Quiz", content="Bring a pen", category="new", posted_by="Budi")
    )
    assert created.date == date.today()


@pytest.mark.asyncio
async def test_update_only_overwrites_supplied_fields(storage):
    service = AnnouncementService(storage)
    created = await service.create(
        AnnouncementCreate(
            title="Quiz", content="Bring a pen", date=date(2024, 1, 1), category="new", posted_by="Budi"
        )
    )
    updated = await service.update(created.id, AnnouncementUpdate(title="Quiz moved", posted_by=None))
    assert updated.title == "Quiz moved"
    assert updated.content == "Bring a pen"
    assert updated.date == date(2024, 1, 1)
    assert updated.posted_by == "Budi"


@pytest.mark.asyncio
async def test_update_and_delete_missing_record(storage):
    service = ClassMemberService(storage)
    assert await service.update(5, ClassMemberUpdate(name="x")) is None
    assert await service.delete(5) is False
    assert await service.get(5) is None


@pytest.mark.asyncio
async def test_duplicate_student_id_is_rejected(storage):
    service = ClassMemberService(storage)
    await service.create(ClassMemberCreate(name="A", student_id="100", image_url="a.jpg"))
    b = await service.create(ClassMemberCreate(name="B", student_id="101", image_url="b.jpg"))
    with pytest.raises(DuplicateRecordError):
        await service.create(ClassMemberCreate(name="C", student_id="100", image_url="c.jpg"))
    with pytest.raises(DuplicateRecordError):
        await service.update(b.id, ClassMemberUpdate(student_id="100"))


@pytest.mark.asyncio
async def test_contact_message_is_stamped(storage):
    service = ContactService(storage)
    before = datetime.now(timezone.utc)
    message = await service.create(
        ContactMessageCreate(name="Eko", email="eko@example.com", subject="Hi", message="Hello there")
    )
    assert message.urgent is False
    assert before <= message.created_at <= datetime.now(timezone.utc)
    assert not hasattr(service, "update")
    assert not issubclass(ContactService, CrudService)
    assert await service.delete(message.id) is True
    assert await service.get(message.id) is None


@pytest.mark.asyncio
async def test_user_lookup_by_username(storage):
    service = UserService(storage)
    created = await service.create(UserCreate(username="treasurer", password="secret"))
    assert (await service.get_by_username("treasurer")).id == created.id
    assert await service.get_by_username("nobody") is None
    assert "password" not in created.model_dump()
    with pytest.raises(DuplicateRecordError):
        await service.create(UserCreate(username="treasurer", password="other"))
