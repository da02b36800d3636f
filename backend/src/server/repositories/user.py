"""User data-access layer."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from server.models import User


async def get_user(db: AsyncSession, user_id: str) -> User | None:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up by email. Stored emails are lowercase."""
    stmt = select(User).where(User.email == email.lower())
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def add_user(db: AsyncSession, email: str, name: str) -> User:
    """Insert a user and flush so constraint violations surface here."""
    user = User(email=email, name=name)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user
