from __future__ import annotations

from typing import List, Optional

from .analyze import round_half_up
from .model import AnalysisReport, FileInfo

SIZE_UNITS = ["Bytes", "KB", "MB"]


def format_file_size(num_bytes: int) -> str:
	if num_bytes <= 0:
		return "0 Bytes"
	exponent = 0
	while exponent < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (exponent + 1):
		exponent += 1
	value = round_half_up(num_bytes / 1024 ** exponent, 2)
	return f"{value:.2f}".rstrip("0").rstrip(".") + f" {SIZE_UNITS[exponent]}"


def summarize_file(info: FileInfo) -> str:
	return f"File {info.name} ({info.size_label}, {info.kind})"


def summarize_report(report: AnalysisReport, info: Optional[FileInfo] = None) -> str:
	parts: List[str] = []
	if info is not None:
		parts.append(summarize_file(info))
	parts.append(f"Characters (no spaces): {report.total_characters:,}")
	parts.append(f"Characters (with spaces): {report.total_characters_with_spaces:,}")
	parts.append(f"Words: {report.total_words:,}")
	parts.append(f"Unique words: {report.unique_words:,}")
	parts.append(f"Sentences: {report.sentence_count:,}")
	parts.append(f"Average word length: {report.average_word_length:g}")
	parts.append(f"Palindromic words: {report.palindromic_words_count}")
	if report.top_words:
		parts.append("Top words:")
		parts.extend(f"  {word}  {count}" for word, count in report.top_words)
	if report.top_bigrams:
		parts.append("Top bigrams:")
		parts.extend(f'  "{bigram}"  {count}' for bigram, count in report.top_bigrams)
	parts.append(f"Longest sentence: {report.longest_sentence}")
	return "\n".join(parts)
