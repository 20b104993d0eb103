from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.book import BookPayload, BookResponse
from app.services import catalog_service

router = APIRouter(prefix="/books", tags=["books"])


@router.get("")
async def get_books(title: str | None = None, author: str | None = None, db: AsyncSession = Depends(get_db)):
    books = await catalog_service.list_books(db, title=title, author=author)
    return [BookResponse.model_validate(b).model_dump() for b in books]


@router.post("", status_code=201)
async def create_book(
    payload: BookPayload,
    user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    book = await catalog_service.create_book(db, payload, actor=user["username"])
    return BookResponse.model_validate(book).model_dump()


@router.put("/{book_id}")
async def update_book(
    book_id: int,
    payload: BookPayload,
    user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    book = await catalog_service.update_book(db, book_id, payload, actor=user["username"])
    return BookResponse.model_validate(book).model_dump()


@router.delete("/{book_id}", status_code=204)
async def delete_book(
    book_id: int,
    user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await catalog_service.delete_book(db, book_id, actor=user["username"])
    return Response(status_code=204)
