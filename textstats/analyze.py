"""Text analysis engine.

Turns raw text into an :class:`AnalysisReport`. Everything here is a pure
function of the input string, apart from the report timestamp.

Character classes are pinned so that counts agree with what a browser
would report for the same text:

* whitespace is the ECMAScript ``\\s`` set (which differs from Python's
  ``str.isspace`` around U+001C..U+001F, U+0085 and U+FEFF);
* word characters are ASCII only, ``[A-Za-z0-9_]``, so accented letters
  and apostrophes separate tokens;
* lengths are UTF-16 code units, so an astral character counts as two.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Tuple

from .model import AnalysisReport

logger = logging.getLogger(__name__)

TOP_WORDS_LIMIT = 10
TOP_BIGRAMS_LIMIT = 5
PALINDROME_MIN_LENGTH = 3
SENTENCE_PREVIEW_LIMIT = 100
ELLIPSIS = "..."

WHITESPACE = (
	"\t\n\x0b\x0c\r \u00a0\u1680"
	+ "".join(chr(code) for code in range(0x2000, 0x200B))
	+ "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WHITESPACE_RE = re.compile(f"[{re.escape(WHITESPACE)}]")
_WHITESPACE_RUN_RE = re.compile(f"[{re.escape(WHITESPACE)}]+")
_NON_WORD_RE = re.compile(f"[^A-Za-z0-9_{re.escape(WHITESPACE)}]")
_TERMINATORS_RE = re.compile(r"[.!?]+")


def code_units(text: str) -> int:
	"""Length of ``text`` in UTF-16 code units."""
	return len(text.encode("utf-16-le", "surrogatepass")) // 2


def strip_whitespace(text: str) -> str:
	return text.strip(WHITESPACE)


def tokenize(text: str) -> List[str]:
	normalized = _NON_WORD_RE.sub(" ", text.lower())
	return [token for token in _WHITESPACE_RUN_RE.split(normalized) if token]


def split_sentences(text: str) -> List[str]:
	"""Sentence segments, untrimmed, skipping those that are blank."""
	return [s for s in _TERMINATORS_RE.split(text) if strip_whitespace(s)]


def top_counts(items: Iterable[str], limit: int) -> List[Tuple[str, int]]:
	# Counter keeps first-seen order and most_common sorts stably
	return Counter(items).most_common(limit)


def is_palindrome(token: str) -> bool:
	return len(token) >= PALINDROME_MIN_LENGTH and token == token[::-1]


def round_half_up(value: float, places: int = 2) -> float:
	"""Round the exact binary value of ``value``, ties away from zero."""
	quantum = Decimal(1).scaleb(-places)
	return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def longest_sentence(sentences: Iterable[str]) -> str:
	longest = ""
	for sentence in sentences:
		if code_units(sentence) > code_units(longest):
			longest = sentence
	return truncate(strip_whitespace(longest))


def truncate(text: str, limit: int = SENTENCE_PREVIEW_LIMIT) -> str:
	if code_units(text) <= limit:
		return text
	units = 0
	cut = 0
	for char in text:
		units += 2 if ord(char) > 0xFFFF else 1
		if units > limit:
			break
		cut += 1
	return text[:cut] + ELLIPSIS


def bigrams(tokens: List[str]) -> List[str]:
	return [f"{first} {second}" for first, second in zip(tokens, tokens[1:])]


def average_length(tokens: List[str]) -> float:
	if not tokens:
		return 0.0
	return round_half_up(sum(len(token) for token in tokens) / len(tokens))


def utc_timestamp() -> str:
	now = datetime.now(timezone.utc)
	return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def analyze(text: str) -> AnalysisReport:
	tokens = tokenize(text)
	sentences = split_sentences(text)
	palindromes = {token for token in tokens if is_palindrome(token)}

	report = AnalysisReport(
		total_characters=code_units(_WHITESPACE_RE.sub("", text)),
		total_characters_with_spaces=code_units(text),
		total_words=len(tokens),
		unique_words=len(set(tokens)),
		top_words=top_counts(tokens, TOP_WORDS_LIMIT),
		sentence_count=len(sentences),
		average_word_length=average_length(tokens),
		longest_sentence=longest_sentence(sentences),
		palindromic_words_count=len(palindromes),
		top_bigrams=top_counts(bigrams(tokens), TOP_BIGRAMS_LIMIT),
		timestamp=utc_timestamp(),
	)
	logger.debug(
		"Analyzed %d characters: %d words, %d sentences",
		report.total_characters_with_spaces,
		report.total_words,
		report.sentence_count,
	)
	return report
