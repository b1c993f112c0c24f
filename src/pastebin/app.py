from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from .db import PasteStore, StorageError
from .pages import INDEX_HTML, render_paste
from .settings import Settings
from .utils.logger import setup_logger
from .utils.token import generate_token

logger = logging.getLogger("pastebin")


class PasteForm(BaseModel):
    # a missing field is an empty paste, not a validation error
    content: str = ""


def get_store(request: Request) -> PasteStore:
    return request.app.state.store


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # uvicorn has set up its loggers by the time the lifespan starts
        setup_logger(settings.log_level)
        # StorageError escapes here on purpose: no database, no server
        app.state.store = PasteStore.open(settings.database_url)
        logger.info("[startup] paste database ready at %s", settings.database_url)
        try:
            yield
        finally:
            app.state.store.close()
            logger.info("[shutdown] paste database closed")

    app = FastAPI(title="Pastebin", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("[%s %s] storage failure: %s", request.method, request.url.path, exc, exc_info=exc)
        return PlainTextResponse("Internal Server Error", status_code=500)

    # -----------------------------------------------------------------------
    # Static assets
    # -----------------------------------------------------------------------

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    @app.get("/style.css")
    async def stylesheet():
        path = settings.static_dir / "style.css"
        if not path.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(path, media_type="text/css")

    # -----------------------------------------------------------------------
    # Pastes
    # -----------------------------------------------------------------------

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return HTMLResponse(INDEX_HTML)

    # Plain ``def`` handlers run on the worker threadpool; the store's lock
    # serializes their database work.
    @app.post("/submit")
    def submit(form: Annotated[PasteForm, Form()], store: PasteStore = Depends(get_store)):
        token = generate_token()
        store.insert(token, form.content)
        logger.debug("[submit] stored token=%s chars=%d", token, len(form.content))
        return RedirectResponse(url=f"/paste/{token}", status_code=303)

    @app.get("/paste/{token}", response_class=HTMLResponse)
    def get_paste(token: str, store: PasteStore = Depends(get_store)):
        content = store.lookup(token)
        if content is None:
            logger.debug("[paste] miss token=%s", token)
        return HTMLResponse(render_paste(token, content, escape=settings.escape_html))

    return app


app = create_app()
