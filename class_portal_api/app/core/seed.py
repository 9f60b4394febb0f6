"""
Fixture data for the class portal.

``seed_storage`` fills a fresh ``Storage`` with a fixed set of records
so the portal is usable without an admin workflow: three officers,
38 class members, announcements, the weekly schedule, assignments and
a few months of transactions.  It is called once when the application
is created, before any request is served.

Seeding is not idempotent.  Running it twice on the same store would
duplicate every record; for the member collections the duplicate
student numbers are rejected with ``DuplicateRecordError``.
"""

import logging
from datetime import date

from .storage import EntityType, Storage
from ..schemas.announcement import AnnouncementCreate
from ..schemas.assignment import AssignmentCreate
from ..schemas.class_member import ClassMemberCreate
from ..schemas.core_member import CoreMemberCreate
from ..schemas.schedule import ScheduleCreate
from ..schemas.transaction import TransactionCreate


logger = logging.getLogger(__name__)

CORE_MEMBERS = [
    {
        "name": "Anaya Wijaya",
        "student_id": "19210720",
        "role": "president",
        "image_url": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?auto=format&fit=crop&w=500&h=350",
        "description": "Leads the class council and represents the class to the faculty.",
    },
    {
        "name": "Budi Santoso",
        "student_id": "19210721",
        "role": "secretary",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=500&h=350",
        "description": "Keeps the class records and publishes announcements.",
    },
    {
        "name": "Cindy Permata",
        "student_id": "19210722",
        "role": "treasurer",
        "image_url": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&w=500&h=350",
        "description": "Collects the monthly dues and manages class expenses.",
    },
]

MEMBER_IMAGES = [
    "https://images.unsplash.com/photo-1639149888905-fb39731f2e6c?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1580489944761-15a19d654956?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1531746020798-e6953c6e8e04?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1591084728795-1149f32d9866?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1463453091185-61582044d556?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1534528741775-53994a69daeb?auto=format&fit=crop&w=300&h=160",
    "https://images.unsplash.com/photo-1560250097-0b93528c311a?auto=format&fit=crop&w=300&h=160",
]

MEMBER_NAMES = [
    "Dewi Anggraini", "Eko Prasetyo", "Fani Sulistiawati", "Gunawan Wibisono",
    "Hani Puspita", "Irfan Malik", "Jasmine Putri", "Kevin Anggara",
]

CLASS_SIZE = 38
FIRST_MEMBER_NIM = 19210723

ANNOUNCEMENTS = [
    {
        "date": date(2023, 10, 15),
        "title": "Mid-term Exam Schedule",
        "content": "The mid-term exams will be held from October 25 to October 30. "
                   "Please check the schedule below and prepare accordingly.",
        "posted_by": "Anaya Wijaya",
        "category": "important",
    },
    {
        "date": date(2023, 10, 10),
        "title": "Group Project Assignment",
        "content": "Group project assignments for this semester have been posted. "
                   "Please form groups of 4-5 students and submit your proposal by October 20.",
        "posted_by": "Budi Santoso",
        "category": "new",
    },
    {
        "date": date(2023, 10, 5),
        "title": "Rescheduled Class for Next Week",
        "content": "The cryptography class on Monday has been rescheduled to Wednesday "
                   "at the same time due to a faculty meeting.",
        "posted_by": "Anaya Wijaya",
        "category": "upcoming",
    },
]

# (day, start, end, subject, room, color)
SCHEDULES = [
    ("Monday", "08:00", "10:00", "Cryptography Basics", "Room 301", "primary"),
    ("Wednesday", "08:00", "10:00", "System Security", "Lab 102", "accent"),
    ("Friday", "08:00", "10:00", "Advanced Algorithms", "Room 305", "primary"),
    ("Tuesday", "10:15", "12:15", "Database Systems", "Lab 104", "accent"),
    ("Thursday", "10:15", "12:15", "Networking Fundamentals", "Room 302", "primary"),
    ("Monday", "13:00", "15:00", "Web Security", "Lab 101", "accent"),
    ("Wednesday", "13:00", "15:00", "Project Workshop", "Lab 103", "accent"),
]

ASSIGNMENTS = [
    {
        "title": "Cryptography Implementation",
        "due_date": date(2023, 10, 25),
        "assigned_date": date(2023, 10, 10),
        "description": "Implement a basic encryption algorithm using the principles discussed in class.",
        "type": "group",
        "submitted": 12,
        "total": CLASS_SIZE,
        "status": "upcoming",
    },
    {
        "title": "Security Analysis Report",
        "due_date": date(2023, 10, 18),
        "assigned_date": date(2023, 10, 1),
        "description": "Analyze a case study of a recent security breach and write a detailed report.",
        "type": "individual",
        "submitted": 25,
        "total": CLASS_SIZE,
        "status": "upcoming",
    },
    {
        "title": "Network Security Quiz",
        "due_date": date(2023, 9, 30),
        "assigned_date": date(2023, 9, 25),
        "description": "Online quiz covering topics from chapters 3-5 of the textbook.",
        "type": "individual",
        "submitted": 38,
        "total": CLASS_SIZE,
        "status": "completed",
    },
]

# (date, description, category, amount, type)
TRANSACTIONS = [
    (date(2023, 10, 12), "Monthly Class Dues", "dues", 1900000, "income"),
    (date(2023, 10, 5), "Class Event Supplies", "supplies", 750000, "expense"),
    (date(2023, 9, 28), "Study Materials Printing", "materials", 450000, "expense"),
    (date(2023, 9, 20), "Fundraising Event", "fundraising", 2500000, "income"),
    (date(2023, 9, 15), "Monthly Class Dues", "dues", 1900000, "income"),
    (date(2023, 9, 10), "Field Trip Transportation", "transportation", 1200000, "expense"),
    (date(2023, 9, 5), "Welcome Party Decorations", "events", 350000, "expense"),
    (date(2023, 8, 28), "Monthly Class Dues", "dues", 1300000, "income"),
]


def class_members():
    """Yield the 38 seeded class members in creation order."""
    for i, name in enumerate(MEMBER_NAMES):
        yield {
            "name": name,
            "student_id": str(FIRST_MEMBER_NIM + i),
            "image_url": MEMBER_IMAGES[i % len(MEMBER_IMAGES)],
        }
    for i in range(CLASS_SIZE - len(MEMBER_NAMES)):
        position = len(MEMBER_NAMES) + i
        gender = "men" if i % 2 == 0 else "women"
        yield {
            "name": f"Student {position + 1}",
            "student_id": str(FIRST_MEMBER_NIM + position),
            "image_url": f"https://randomuser.me/api/portraits/{gender}/{position}.jpg",
        }


def seed_storage(storage: Storage) -> None:
    """Populate ``storage`` with the fixture records."""
    for member in CORE_MEMBERS:
        storage.create(
            EntityType.CORE_MEMBER,
            CoreMemberCreate(**member).model_dump(),
            unique=("student_id",),
        )
    for member in class_members():
        storage.create(
            EntityType.CLASS_MEMBER,
            ClassMemberCreate(**member).model_dump(),
            unique=("student_id",),
        )
    for announcement in ANNOUNCEMENTS:
        storage.create(EntityType.ANNOUNCEMENT, AnnouncementCreate(**announcement).model_dump())
    for day, start, end, subject, room, color in SCHEDULES:
        entry = ScheduleCreate(
            day=day, start_time=start, end_time=end, subject=subject, room=room, color=color
        )
        storage.create(EntityType.SCHEDULE, entry.model_dump())
    for assignment in ASSIGNMENTS:
        storage.create(EntityType.ASSIGNMENT, AssignmentCreate(**assignment).model_dump())
    for tx_date, description, category, amount, tx_type in TRANSACTIONS:
        tx = TransactionCreate(
            date=tx_date, description=description, category=category, amount=amount, type=tx_type
        )
        storage.create(EntityType.TRANSACTION, tx.model_dump())
    logger.info("Seeded storage: %s", storage.counts())
