from __future__ import annotations

import asyncio
import datetime as _dt
from pathlib import Path
from urllib.parse import quote, quote_plus, urlencode

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from tasktrack import messages
from tasktrack.core.errors import PersistenceFailure, TaskError
from tasktrack.core.ordering import visible_tasks
from tasktrack.core.validate import format_date
from tasktrack.observability import configure_uvicorn_logging, get_json_logger, get_metrics
from tasktrack.store.task_store import TaskStore

from .forms import css_value, form_field, form_to_patch, is_true

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["fmt_date"] = format_date
    templates.env.filters["path_esc"] = lambda s: quote(str(s), safe="")
    templates.env.filters["q_esc"] = lambda s: quote_plus(str(s))
    templates.env.filters["css_value"] = css_value
    return templates


def _redirect_with_flash(flash: str) -> RedirectResponse:
    return RedirectResponse(url="/?" + urlencode({"flash": flash}), status_code=303)


def create_app(store: TaskStore) -> FastAPI:
    app = FastAPI(title="tasktrack")
    # Configure uvicorn logging at app startup to avoid import-time side effects
    configure_uvicorn_logging()
    logger = get_json_logger("tasktrack.web")
    metrics = get_metrics()
    templates = _templates()

    def _client_error(path: str, exc: TaskError) -> Response:
        metrics.increment("web_client_errors", {"path": path})
        logger.info(
            "rejected mutation",
            extra={"event": "web_rejected", "path": path, "attributes": {"error": str(exc)}},
        )
        return PlainTextResponse(str(exc), status_code=400)

    def _server_error(path: str, exc: PersistenceFailure) -> Response:
        # The in-memory change stays; only the write-back failed
        metrics.increment("web_server_errors", {"path": path})
        return PlainTextResponse(f"saved in memory only: {exc}", status_code=500)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    # ----------------------------
    # Pages
    # ----------------------------

    @app.get("/", response_class=HTMLResponse)
    async def index(
        request: Request, show: str = Query("", alias="all"), flash: str = ""
    ) -> Response:
        show_all = is_true(show)
        tasks = await asyncio.to_thread(store.snapshot)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "today": format_date(_dt.date.today()),
                "show_all": show_all,
                "flash": flash,
                "tasks": visible_tasks(tasks, show_all),
            },
        )

    @app.get("/edit/{summary:path}", response_class=HTMLResponse)
    async def edit(request: Request, summary: str) -> Response:
        example = await asyncio.to_thread(store.find_first, summary)
        if example is None:
            raise HTTPException(status_code=404, detail="no todo with that summary")
        return templates.TemplateResponse(
            request,
            "edit.html",
            {"match": summary, "example": example},
        )

    # ----------------------------
    # Mutations (POST only)
    # ----------------------------

    @app.post("/add")
    async def add(request: Request) -> Response:
        form = await request.form()
        try:
            await asyncio.to_thread(
                store.create,
                form_field(form, "summary"),
                form_field(form, "details"),
                form_field(form, "deadline"),
                form_field(form, "priority"),
            )
        except PersistenceFailure as exc:
            return _server_error("add", exc)
        except TaskError as exc:
            return _client_error("add", exc)
        return _redirect_with_flash(messages.TODO_ADDED)

    @app.post("/delete/{summary:path}")
    async def delete(summary: str) -> Response:
        try:
            removed = await asyncio.to_thread(store.delete, summary)
        except PersistenceFailure as exc:
            return _server_error("delete", exc)
        return _redirect_with_flash(messages.deleted(removed, summary))

    @app.post("/set/{summary:path}")
    async def set_fields(request: Request, summary: str) -> Response:
        form = await request.form()
        try:
            patch = form_to_patch(form)
            updated = await asyncio.to_thread(store.patch, summary, patch)
        except PersistenceFailure as exc:
            return _server_error("set", exc)
        except TaskError as exc:
            return _client_error("set", exc)
        return _redirect_with_flash(messages.updated(updated, summary))

    return app


__all__ = ["create_app"]
