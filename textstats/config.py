"""Runtime settings, read from ``TEXTSTATS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="TEXTSTATS_", env_file=".env", extra="ignore")

	max_file_size: int = Field(1024 * 1024, description="Upload ceiling in bytes", gt=0)
	allowed_extensions: List[str] = Field(
		default_factory=lambda: [".txt", ".doc", ".docx"],
		description="Accepted file extensions",
	)
	error_display_seconds: int = Field(5, description="How long the web page shows an error")
	log_level: str = Field("INFO", description="Root log level")
	host: str = Field("127.0.0.1", description="Bind address for `serve`")
	port: int = Field(8000, description="Bind port for `serve`")

	@field_validator("allowed_extensions")
	@classmethod
	def normalize_extensions(cls, value: List[str]) -> List[str]:
		return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]

	@field_validator("log_level")
	@classmethod
	def upper_log_level(cls, value: str) -> str:
		return value.upper()


@lru_cache
def get_settings() -> Settings:
	return Settings()
