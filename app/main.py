from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables
from app.routers.auth import router as auth_router
from app.routers.books import router as books_router
from app.services.security import signing_key
from app.utils.exceptions import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    signing_key()
    if settings.create_tables_on_startup:
        await create_tables()
    yield


app = FastAPI(
    title="Book Catalog API",
    description="Book catalog with user accounts and bearer-token protected writes",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(books_router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "book-catalog-api", "version": "0.1.0"}
