from __future__ import annotations

from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class AnalysisReport(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	total_characters: int = Field(alias="totalCharacters", ge=0)
	total_characters_with_spaces: int = Field(alias="totalCharactersWithSpaces", ge=0)
	total_words: int = Field(alias="totalWords", ge=0)
	unique_words: int = Field(alias="uniqueWords", ge=0)
	top_words: Tuple[Tuple[str, int], ...] = Field(alias="topWords", default=())
	sentence_count: int = Field(alias="sentenceCount", ge=0)
	average_word_length: float = Field(alias="averageWordLength", ge=0)
	longest_sentence: str = Field(alias="longestSentence", default="")
	palindromic_words_count: int = Field(alias="palindromicWordsCount", ge=0)
	top_bigrams: Tuple[Tuple[str, int], ...] = Field(alias="topBigrams", default=())
	timestamp: str

	@field_serializer("average_word_length")
	def serialize_average_word_length(self, value: float) -> Union[int, float]:
		# 3.0 is written as 3, as a browser would
		return int(value) if value.is_integer() else value


class FileInfo(BaseModel):
	name: str
	size: int
	kind: str
	size_label: str
