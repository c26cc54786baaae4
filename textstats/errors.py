from __future__ import annotations

from typing import Optional


class TextStatsError(Exception):
	"""Base class for failures surfaced to the user as a single message."""

	status_code: int = 400
	default_message: str = "Unexpected error"

	def __init__(self, message: Optional[str] = None):
		self.message = message or self.default_message
		super().__init__(self.message)

	def user_message(self) -> str:
		return self.message


class UnsupportedFileType(TextStatsError):
	status_code = 415
	default_message = "Please upload a .txt or .docx file"


class FileTooLarge(TextStatsError):
	status_code = 413
	default_message = "File size must be less than 1MB"


class ProcessingError(TextStatsError):
	"""Failure while turning file bytes into text."""

	def user_message(self) -> str:
		return f"Error processing file: {self.message}"


class ExtractionError(ProcessingError):
	status_code = 422
	default_message = "Failed to read DOCX file"

	def __init__(self, cause: Optional[str] = None):
		message = f"{self.default_message}: {cause}" if cause else None
		super().__init__(message)
		self.cause = cause


class ReadError(ProcessingError):
	default_message = "Failed to read text file"


class NoDataToExport(TextStatsError):
	status_code = 404
	default_message = "No analysis data to export"
