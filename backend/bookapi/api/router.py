# bookapi/api/router.py
from fastapi import APIRouter


def build_api_router(backend: str) -> APIRouter:
    """Only one HTTP variant is mounted: /book for memory, /books for mongo."""
    api_router = APIRouter()
    if backend == "mongo":
        from bookapi.api.routes.mongo_books import router as books_router
    else:
        from bookapi.api.routes.memory_books import router as books_router
    api_router.include_router(books_router)
    return api_router
