from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.auth import Credentials, TokenResponse, UserResponse
from app.services.account_service import login_user, register_user

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=201)
async def register(request: Credentials, db: AsyncSession = Depends(get_db)):
    user = await register_user(db, request.username, request.password)
    return UserResponse.model_validate(user).model_dump()


@router.post("/login")
async def login(request: Credentials, db: AsyncSession = Depends(get_db)):
    token = await login_user(db, request.username, request.password)
    return TokenResponse(access_token=token).model_dump(by_alias=True)
