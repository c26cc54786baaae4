from __future__ import annotations

import logging
from typing import Optional

from fastapi import Body, FastAPI, File, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from textstats.analyze import analyze
from textstats.errors import NoDataToExport, TextStatsError
from textstats.export import REPORT_FILENAME, dump_report
from textstats.loader import extract_text, read_upload
from textstats.model import AnalysisReport


logger = logging.getLogger(__name__)

app = FastAPI(title="Text Statistics API")


class AnalyzeTextRequest(BaseModel):
	text: str


@app.get("/health")
def health() -> dict:
	return {"status": "ok"}


@app.post("/analyze", response_model=AnalysisReport)
async def analyze_file(file: UploadFile = File(...)) -> AnalysisReport:
	try:
		info, data = await read_upload(file)
		text = await run_in_threadpool(extract_text, info.name, data)
	except TextStatsError as exc:
		logger.info("Rejected %s: %s", file.filename, exc.message)
		raise HTTPException(status_code=exc.status_code, detail=exc.user_message())

	report = await run_in_threadpool(analyze, text)
	logger.info("Analyzed %s (%s): %d words", info.name, info.size_label, report.total_words)
	return report


@app.post("/analyze/text", response_model=AnalysisReport)
def analyze_raw_text(req: AnalyzeTextRequest) -> AnalysisReport:
	return analyze(req.text)


@app.post("/export")
def export(report: Optional[AnalysisReport] = Body(None)) -> Response:
	try:
		content = dump_report(report)
	except NoDataToExport as exc:
		raise HTTPException(status_code=400, detail=exc.user_message())
	return Response(
		content=content,
		media_type="application/json",
		headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
	)


def create_app() -> FastAPI:
	return app
