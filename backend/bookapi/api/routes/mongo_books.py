# bookapi/api/routes/mongo_books.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from bookapi.api.deps import get_store, json_body
from bookapi.db.mongo_store import MongoBookStore
from bookapi.errors import BookNotFoundError, InvalidBookIdError, StoreError
from bookapi.schemas.book import DocumentBook

router = APIRouter(prefix="/books", tags=["books"])
logger = logging.getLogger(__name__)

book_body = json_body(DocumentBook, "Format buku tidak valid")

NOT_FOUND = "Buku tidak ditemukan"
INVALID_ID = "Format ID tidak valid"


def _require_fields(book: DocumentBook) -> None:
    if not book.title or not book.author:
        raise HTTPException(status_code=400, detail="Judul dan penulis buku harus diisi")


@router.get("")
def get_all_books(store: MongoBookStore = Depends(get_store)):
    try:
        books = store.list_all()
    except StoreError:
        logger.exception("listing books failed")
        raise HTTPException(status_code=500, detail="Gagal mengambil data buku")
    return [b.to_json() for b in books]


@router.get("/{book_id}")
def get_book_by_id(book_id: str, store: MongoBookStore = Depends(get_store)):
    try:
        book = store.get_by_id(book_id)
    except InvalidBookIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except BookNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except StoreError:
        logger.exception("fetching book %s failed", book_id)
        raise HTTPException(status_code=500, detail="Gagal mengambil data buku")
    return book.to_json()


@router.post("", status_code=201)
def create_book(book: DocumentBook = Depends(book_body), store: MongoBookStore = Depends(get_store)):
    _require_fields(book)
    try:
        created = store.create(book)
    except StoreError:
        logger.exception("inserting book failed")
        raise HTTPException(status_code=500, detail="Gagal menambahkan buku")
    return created.to_json()


@router.put("/{book_id}")
def update_book(book_id: str, book: DocumentBook = Depends(book_body), store: MongoBookStore = Depends(get_store)):
    _require_fields(book)
    try:
        updated = store.update(book_id, book)
    except InvalidBookIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except BookNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except StoreError:
        logger.exception("updating book %s failed", book_id)
        raise HTTPException(status_code=500, detail="Gagal memperbarui buku")
    return updated.to_json()


@router.delete("/{book_id}")
def delete_book(book_id: str, store: MongoBookStore = Depends(get_store)):
    try:
        return store.delete(book_id)
    except InvalidBookIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except BookNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except StoreError:
        logger.exception("deleting book %s failed", book_id)
        raise HTTPException(status_code=500, detail="Gagal menghapus buku")
