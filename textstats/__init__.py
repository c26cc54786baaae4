"""Text statistics for plain-text and Word documents.

Modules:
- analyze.py: The analysis engine turning text into a report.
- model.py: Report and file metadata structures.
- loader.py: File validation and text extraction.
- export.py: JSON export of reports.
- summarize.py: Plain-text rendering of reports.
- session.py: Tracking of the latest analysis request.
- config.py, log.py: Settings and logging setup.
"""

from .analyze import analyze
from .model import AnalysisReport, FileInfo

__all__ = [
	"analyze",
	"AnalysisReport",
	"FileInfo",
]
