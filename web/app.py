from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from pathlib import Path

from fastapi import Depends, FastAPI, File, HTTPException, Request, Response, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from textstats.analyze import analyze
from textstats.config import get_settings
from textstats.errors import NoDataToExport, TextStatsError
from textstats.export import REPORT_FILENAME
from textstats.loader import extract_text, read_upload
from textstats.session import AnalysisSession

logger = logging.getLogger(__name__)

WEB_DIR = Path(__file__).parent
SESSION_COOKIE = "textstats_session"
MAX_SESSIONS = 256

app = FastAPI(title="Text Statistics Web Interface")

# Mount static files
app.mount("/static", StaticFiles(directory=WEB_DIR / "static"), name="static")

# Templates
templates = Jinja2Templates(directory=WEB_DIR / "templates")

# One session per browser, keyed by cookie; least recently used evicted first
sessions: "OrderedDict[str, AnalysisSession]" = OrderedDict()
sessions_lock = threading.Lock()


def get_session(request: Request, response: Response) -> AnalysisSession:
    """Return the caller's session, creating it and its cookie if needed."""
    key = request.cookies.get(SESSION_COOKIE)
    with sessions_lock:
        if key in sessions:
            sessions.move_to_end(key)
            return sessions[key]
        key = key or uuid.uuid4().hex
        session = sessions[key] = AnalysisSession()
        while len(sessions) > MAX_SESSIONS:
            sessions.popitem(last=False)
    response.set_cookie(SESSION_COOKIE, key, httponly=True, samesite="lax")
    return session


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Upload page."""
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "allowed_extensions": settings.allowed_extensions,
            "max_file_size": settings.max_file_size,
            "error_display_ms": settings.error_display_seconds * 1000,
        },
    )


@app.post("/upload")
async def upload(
    file: UploadFile = File(...),
    session: AnalysisSession = Depends(get_session),
) -> dict:
    """Analyze an uploaded document and make it the caller's current report."""
    request_id = session.begin()
    try:
        info, data = await read_upload(file)
        text = await run_in_threadpool(extract_text, info.name, data)
    except TextStatsError as exc:
        logger.info("Request %d rejected %s: %s", request_id, file.filename, exc.message)
        raise HTTPException(status_code=exc.status_code, detail=exc.user_message())

    report = await run_in_threadpool(analyze, text)
    if not session.complete(request_id, report):
        raise HTTPException(status_code=409, detail="Superseded by a newer request")

    logger.info("Request %d analyzed %s: %d words", request_id, info.name, report.total_words)
    return {
        "request_id": request_id,
        "file": info.model_dump(),
        "report": report.model_dump(mode="json", by_alias=True),
    }


@app.get("/export")
async def export(session: AnalysisSession = Depends(get_session)) -> Response:
    """Download the caller's current report as JSON."""
    try:
        content = session.export()
    except NoDataToExport as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.user_message())
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )


def create_app() -> FastAPI:
    return app
