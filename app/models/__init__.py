from app.models.book import Book
from app.models.user import User

__all__ = ["Book", "User"]
