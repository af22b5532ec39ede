# bookapi/api/routes/memory_books.py
from __future__ import annotations

import re

from fastapi import APIRouter, Depends, HTTPException

from bookapi.api.deps import get_store, json_body
from bookapi.schemas.book import INT64_MAX, INT64_MIN, Book
from bookapi.services.memory_store import MemoryBookStore

router = APIRouter(prefix="/book", tags=["book"])

create_body = json_body(Book, "Format buku tidak valid")
update_body = json_body(Book, "Format update tidak valid")


ID_RE = re.compile(r"[+-]?[0-9]+")


def _parse_id(raw: str) -> int:
    # ASCII digits only, within int64; int() alone would take " 5 " or "1_0"
    if ID_RE.fullmatch(raw):
        n = int(raw)
        if INT64_MIN <= n <= INT64_MAX:
            return n
    raise HTTPException(status_code=400, detail="Id harus berupa angka")


@router.get("")
def get_all_books(store: MemoryBookStore = Depends(get_store)):
    return [b.to_json() for b in store.list_all()]


@router.get("/{book_id}")
def get_book_by_id(book_id: str, store: MemoryBookStore = Depends(get_store)):
    book = store.get_by_id(_parse_id(book_id))
    if book is None:
        raise HTTPException(status_code=400, detail="Data tidak ada")
    return book.to_json()


@router.post("")
def create_book(book: Book = Depends(create_body), store: MemoryBookStore = Depends(get_store)):
    if book.title == "":
        raise HTTPException(status_code=400, detail="Judul buku harus diisi")
    return store.create(book).to_json()


@router.put("/{book_id}")
def update_book(book_id: str, book: Book = Depends(update_body), store: MemoryBookStore = Depends(get_store)):
    updated = store.update(_parse_id(book_id), book)
    if updated is None:
        raise HTTPException(status_code=400, detail="Gagal update buku")
    return updated.to_json()


@router.delete("/{book_id}")
def delete_book(book_id: str, store: MemoryBookStore = Depends(get_store)):
    if not store.delete(_parse_id(book_id)):
        raise HTTPException(status_code=400, detail="Gagal menghapus buku")
    return True


@router.delete("")
def delete_all_books(store: MemoryBookStore = Depends(get_store)):
    store.clear_all()
    return {"message": "Semua data berhasil dihapus"}
