from __future__ import annotations

import logging
import threading
from typing import Optional

from .export import dump_report
from .model import AnalysisReport

logger = logging.getLogger(__name__)


class AnalysisSession:
	"""Holds the latest accepted report for one client.

	Every analysis is tagged with the id returned by :meth:`begin`. A result
	is only accepted while its id is still the newest one issued, so a slow
	extraction of an older file cannot replace the report of a newer one.
	The web interface keeps one session per browser cookie, so tabs of the
	same browser share a session and supersede each other's uploads.
	"""

	def __init__(self):
		self._lock = threading.Lock()
		self._latest_id = 0
		self._current: Optional[AnalysisReport] = None

	@property
	def current(self) -> Optional[AnalysisReport]:
		return self._current

	def begin(self) -> int:
		with self._lock:
			self._latest_id += 1
			return self._latest_id

	def complete(self, request_id: int, report: AnalysisReport) -> bool:
		with self._lock:
			if request_id != self._latest_id:
				logger.info(
					"Discarding result of request %d, superseded by %d", request_id, self._latest_id
				)
				return False
			self._current = report
			return True

	def export(self) -> str:
		return dump_report(self._current)
