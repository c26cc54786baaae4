from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
	"""Send log records to stderr, replacing handlers from earlier calls."""
	if level is None:
		level = get_settings().log_level
	logging.basicConfig(
		level=getattr(logging, level.upper(), logging.INFO),
		format=LOG_FORMAT,
		stream=sys.stderr,
		force=True,
	)
