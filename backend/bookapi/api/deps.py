# bookapi/api/deps.py
from __future__ import annotations

from typing import Any, Callable, Type, TypeVar

from fastapi import HTTPException, Request
from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def get_store(request: Request) -> Any:
    store = request.app.state.store
    if store is None:
        raise HTTPException(status_code=503, detail="store_not_ready")
    return store


def json_body(model: Type[M], error_message: str) -> Callable[..., Any]:
    """Dependency decoding the request body into ``model``.

    Bad JSON and wrongly typed fields both answer 400 with ``error_message``
    instead of FastAPI's 422 validation report.
    """

    async def _decode(request: Request) -> M:
        try:
            data = await request.json()
            return model.model_validate(data)
        except ValueError:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise HTTPException(status_code=400, detail=error_message)

    return _decode
