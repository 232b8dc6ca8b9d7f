"""
Error translator and storage constraint tests.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillloop.core.errors import duplicate_field
from skillloop.db.models import ExperienceLevel, Request, RequestStatus, Skill, User


class _DriverError(Exception):
    def __init__(self, message: str, sqlstate: str):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity(message: str, sqlstate: str | None = None) -> IntegrityError:
    orig = _DriverError(message, sqlstate) if sqlstate else Exception(message)
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize(
    "message, sqlstate, field",
    [
        ("UNIQUE constraint failed: users.email", None, "email"),
        ("UNIQUE constraint failed: requests.skill_id, requests.from_user_id", None, "skill_id"),
        (
            'duplicate key value violates unique constraint "ix_users_phone"\n'
            "DETAIL:  Key (phone)=(1234567890) already exists.",
            "23505",
            "phone",
        ),
        (
            'insert or update on table "skills" violates foreign key constraint "skills_user_id_fkey"\n'
            'DETAIL:  Key (user_id)=(0b7c) is not present in table "users".',
            "23503",
            None,
        ),
        ('DETAIL:  Key (user_id)=(0b7c) is not present in table "users".', None, None),
        ("FOREIGN KEY constraint failed", None, None),
        ("something else entirely", None, None),
    ],
)
def test_duplicate_field(message, sqlstate, field):
    assert duplicate_field(_integrity(message, sqlstate)) == field


async def _user(session: AsyncSession, n: int) -> User:
    user = User(name=f"User {n}", email=f"u{n}@example.com", phone=f"55500000{n:02d}", hashed_password="x")
    session.add(user)
    await session.flush()
    return user


@pytest.mark.asyncio
async def test_unique_phone_enforced_by_store(session: AsyncSession):
    await _user(session, 1)
    session.add(User(name="Clone", email="clone@example.com", phone="5550000001", hashed_password="x"))
    with pytest.raises(IntegrityError):
        await session.flush()


@pytest.mark.asyncio
async def test_single_pending_request_enforced_by_store(session: AsyncSession):
    owner = await _user(session, 1)
    requester = await _user(session, 2)
    skill = Skill(
        user_id=owner.id,
        category="Music",
        title="Guitar Lessons",
        description="Acoustic guitar lessons.",
        experience_level=ExperienceLevel.INTERMEDIATE,
    )
    session.add(skill)
    await session.flush()

    def pending() -> Request:
        return Request(skill_id=skill.id, from_user_id=requester.id, to_user_id=owner.id)

    first = pending()
    session.add(first)
    await session.flush()

    # Resolved requests do not count against the constraint
    first.status = RequestStatus.REJECTED
    await session.flush()
    session.add(pending())
    await session.flush()

    session.add(pending())
    with pytest.raises(IntegrityError):
        await session.flush()
