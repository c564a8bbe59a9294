"""API routers."""
from fastapi import APIRouter

from bookstore.api import books
from bookstore.config import settings

api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(books.router)

__all__ = ["api_router"]
