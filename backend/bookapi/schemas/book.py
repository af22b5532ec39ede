# bookapi/schemas/book.py
from __future__ import annotations

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field, ValidationInfo, field_validator

# Fields a caller may replace on update; the id is never rewritten.
UPDATABLE_FIELDS = ("title", "author", "isbn", "year")

# BSON and the original int fields both stop at 64-bit signed integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class BookFields(BaseModel):
    title: str = ""
    author: str = ""
    isbn: str = ""
    year: int = Field(0, ge=INT64_MIN, le=INT64_MAX)

    @field_validator(*UPDATABLE_FIELDS, mode="before")
    @classmethod
    def _null_is_zero(cls, v: Any, info: ValidationInfo) -> Any:
        # JSON null decodes to the zero value, like a missing field
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class Book(BookFields):
    """In-memory record, keyed by a sequential integer id."""

    id: Optional[int] = None

    def to_json(self) -> Dict[str, Any]:
        # id is left out while unset
        return self.model_dump(exclude_none=True)


class DocumentBook(BookFields):
    """Document-store record, keyed by the hex string of a MongoDB ObjectId."""

    id: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(include=set(UPDATABLE_FIELDS))

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "DocumentBook":
        d = dict(doc)
        oid = d.pop("_id", None)
        d["id"] = str(oid) if isinstance(oid, ObjectId) else oid
        return cls.model_validate(d)
