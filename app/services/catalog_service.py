import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.book import Book
from app.schemas.book import BookPayload
from app.utils.exceptions import ConflictError, NotFoundError, store_error_message

logger = logging.getLogger(__name__)


async def _rejected(db: AsyncSession, exc: IntegrityError) -> ConflictError:
    await db.rollback()
    logger.warning("Book write rejected by store: %s", store_error_message(exc))
    return ConflictError(store_error_message(exc))


async def _commit(db: AsyncSession) -> None:
    try:
        await db.commit()
    except IntegrityError as exc:
        raise await _rejected(db, exc) from exc


async def list_books(db: AsyncSession, title: str | None = None, author: str | None = None) -> list[Book]:
    """Return all books, or those matching one filter.

    Only one filter is applied: ``title`` when given, otherwise ``author``.
    Matching is a case-insensitive substring search.
    """
    stmt = select(Book).order_by(Book.id)
    if title:
        stmt = stmt.where(Book.title.icontains(title, autoescape=True))
    elif author:
        stmt = stmt.where(Book.author.icontains(author, autoescape=True))

    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_book(db: AsyncSession, payload: BookPayload, actor: str | None = None) -> Book:
    book = Book(**payload.model_dump())
    db.add(book)
    await _commit(db)
    await db.refresh(book)

    logger.info("Book %s created by %s (isbn=%s)", book.id, actor, book.isbn)
    return book


async def update_book(db: AsyncSession, book_id: int, payload: BookPayload, actor: str | None = None) -> Book:
    # full replace: fields absent from the payload are written as null
    stmt = (
        update(Book)
        .where(Book.id == book_id)
        .values(**payload.model_dump())
        .returning(Book)
    )
    try:
        result = await db.execute(stmt)
    except IntegrityError as exc:
        raise await _rejected(db, exc) from exc
    book = result.scalars().first()
    await db.commit()
    if book is None:
        raise NotFoundError("Book not found")

    logger.info("Book %s updated by %s", book.id, actor)
    return book


async def delete_book(db: AsyncSession, book_id: int, actor: str | None = None) -> None:
    result = await db.execute(delete(Book).where(Book.id == book_id))
    await db.commit()
    if result.rowcount == 0:
        raise NotFoundError("Book not found")

    logger.info("Book %s deleted by %s", book_id, actor)
