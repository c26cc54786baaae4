from __future__ import annotations

import io
import logging
import os
from typing import Awaitable, Callable, Dict, Iterator, Optional, Tuple

import docx
from docx.document import Document
from docx.table import Table

from .config import Settings, get_settings
from .errors import ExtractionError, FileTooLarge, ReadError, UnsupportedFileType
from .model import FileInfo
from .summarize import format_file_size

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

EXTENSION_KIND: Dict[str, str] = {
	".txt": "text",
	".doc": "word",
	".docx": "word",
}


def file_extension(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return ext.lower()


def detect_kind(filename: str) -> str:
	return EXTENSION_KIND.get(file_extension(filename), "unknown")


def validate_file(filename: str, size: int, settings: Optional[Settings] = None) -> FileInfo:
	settings = settings or get_settings()
	if file_extension(filename) not in settings.allowed_extensions or detect_kind(filename) == "unknown":
		raise UnsupportedFileType()
	if size > settings.max_file_size:
		raise FileTooLarge()
	return FileInfo(
		name=os.path.basename(filename),
		size=size,
		kind=detect_kind(filename),
		size_label=format_file_size(size),
	)


def decode_text(data: bytes) -> str:
	# utf-8-sig drops a leading BOM
	return data.decode("utf-8-sig", errors="replace")


def _iter_paragraph_text(container) -> Iterator[str]:
	for block in container.iter_inner_content():
		if isinstance(block, Table):
			# merged cells repeat in row.cells, once per spanned grid position
			seen = set()
			for row in block.rows:
				for cell in row.cells:
					if cell._tc in seen:
						continue
					seen.add(cell._tc)
					yield from _iter_paragraph_text(cell)
		else:
			yield block.text


def extract_word_text(data: bytes) -> str:
	try:
		document: Document = docx.Document(io.BytesIO(data))
		paragraphs = list(_iter_paragraph_text(document))
	except Exception as exc:
		logger.warning("Word extraction failed: %s", exc)
		raise ExtractionError(str(exc) or exc.__class__.__name__) from exc
	logger.debug("Extracted %d paragraphs from Word document", len(paragraphs))
	return "".join(f"{text}\n\n" for text in paragraphs)


def extract_text(filename: str, data: bytes) -> str:
	kind = detect_kind(filename)
	if kind == "text":
		return decode_text(data)
	if kind == "word":
		return extract_word_text(data)
	raise UnsupportedFileType()


def load_path(path: str, settings: Optional[Settings] = None) -> Tuple[FileInfo, str]:
	"""Validate, read and extract a file from disk."""
	try:
		size = os.path.getsize(path)
	except OSError as exc:
		logger.warning("Cannot stat %s: %s", path, exc)
		raise ReadError() from exc
	info = validate_file(path, size, settings)
	try:
		with open(path, "rb") as fh:
			data = fh.read()
	except OSError as exc:
		logger.warning("Cannot read %s: %s", path, exc)
		raise ReadError() from exc
	return info, extract_text(path, data)


async def read_limited(read: Callable[[int], Awaitable[bytes]], limit: int) -> bytes:
	"""Drain an async ``read(n)`` callable, failing once ``limit`` bytes are passed."""
	chunks = []
	total = 0
	try:
		while True:
			chunk = await read(CHUNK_SIZE)
			if not chunk:
				break
			total += len(chunk)
			if total > limit:
				raise FileTooLarge()
			chunks.append(chunk)
	except OSError as exc:
		logger.warning("Upload read failed: %s", exc)
		raise ReadError() from exc
	return b"".join(chunks)


async def read_upload(upload, settings: Optional[Settings] = None) -> Tuple[FileInfo, bytes]:
	"""Validate and read an uploaded file object with ``filename``, ``size`` and async ``read``."""
	settings = settings or get_settings()
	name = upload.filename or ""
	validate_file(name, upload.size or 0, settings)
	data = await read_limited(upload.read, settings.max_file_size)
	return validate_file(name, len(data), settings), data
