# bookapi/main.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookapi.settings import STORE_BACKENDS, settings
from bookapi.api.router import build_api_router
from bookapi.services.store import BookStore, close_store, open_store

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(store: Optional[BookStore] = None, backend: Optional[str] = None) -> FastAPI:
    """Build the API.

    ``store`` is used as-is when given (tests pass their own); otherwise one is
    opened from settings on startup and released on shutdown. ``backend``
    picks the HTTP variant and defaults to ``settings.STORE_BACKEND``.
    """
    _configure_logging()
    backend = (backend or settings.STORE_BACKEND).strip().lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(f"unknown STORE_BACKEND {backend!r}, expected one of {STORE_BACKENDS}")

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
    app.state.store = store
    app.state.backend = backend

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(build_api_router(backend), prefix=settings.API_PREFIX)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Terjadi kesalahan pada server"}, status_code=500)

    @app.get("/health")
    def health():
        return {"status": "ok", "backend": app.state.backend}

    owns_store = store is None

    @app.on_event("startup")
    def _startup():
        # connection failures propagate and abort startup
        if owns_store:
            app.state.store = open_store(replace(settings, STORE_BACKEND=backend))

    @app.on_event("shutdown")
    def _shutdown():
        if owns_store and app.state.store is not None:
            close_store(app.state.store)
            app.state.store = None

    return app


app = create_app()


def run() -> None:
    import uvicorn

    print(f"http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
