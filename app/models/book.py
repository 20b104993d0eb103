from sqlalchemy import Column, Integer, String

from app.database import Base


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    author = Column(String(100), nullable=False)
    isbn = Column(String(20), nullable=False, unique=True)
    published_year = Column(Integer, nullable=True)
