from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .errors import NoDataToExport
from .model import AnalysisReport

logger = logging.getLogger(__name__)

REPORT_FILENAME = "text_analysis_report.json"


def require_report(report: Optional[AnalysisReport]) -> AnalysisReport:
	if report is None:
		raise NoDataToExport()
	return report


def dump_report(report: Optional[AnalysisReport]) -> str:
	"""Pretty-printed JSON using the public camelCase field names."""
	report = require_report(report)
	return json.dumps(report.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def load_report(text: str) -> AnalysisReport:
	return AnalysisReport.model_validate_json(text)


def write_report(report: Optional[AnalysisReport], path: Union[str, Path]) -> Path:
	target = Path(path)
	if target.is_dir():
		target = target / REPORT_FILENAME
	target.write_text(dump_report(report), encoding="utf-8")
	logger.info("Report written to %s", target)
	return target
