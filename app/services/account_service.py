import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.services.security import create_access_token, hash_password, verify_password
from app.utils.exceptions import ConflictError, InvalidCredentialsError, NotFoundError, store_error_message

logger = logging.getLogger(__name__)


async def register_user(db: AsyncSession, username: str, password: str) -> User:
    user = User(username=username, password_hash=hash_password(password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Registration rejected for %r: %s", username, store_error_message(exc))
        raise ConflictError(store_error_message(exc)) from exc
    await db.refresh(user)

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def login_user(db: AsyncSession, username: str, password: str) -> str:
    """Check credentials and return a signed access token."""
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalars().first()

    if user is None:
        logger.warning("Login for unknown user %r", username)
        raise NotFoundError("User not found", status_code=400)

    if not verify_password(password, user.password_hash):
        logger.warning("Invalid password for user %r", username)
        raise InvalidCredentialsError("Invalid password")

    logger.info("User %s logged in", user.username)
    return create_access_token(user.username)
