from textstats.analyze import analyze
from textstats.model import FileInfo
from textstats.summarize import format_file_size, summarize_report


def test_format_file_size():
	assert format_file_size(0) == "0 Bytes"
	assert format_file_size(500) == "500 Bytes"
	assert format_file_size(1024) == "1 KB"
	assert format_file_size(1536) == "1.5 KB"
	assert format_file_size(1234) == "1.21 KB"
	assert format_file_size(1048576) == "1 MB"


def test_summarize_report():
	info = FileInfo(name="cats.txt", size=25, kind="text", size_label="25 Bytes")
	text = summarize_report(analyze("The cat sat. The cat ran!"), info)
	lines = text.splitlines()
	assert lines[0] == "File cats.txt (25 Bytes, text)"
	assert "Words: 6" in lines
	assert "Average word length: 3" in lines
	assert '  "the cat"  2' in lines
	assert lines[-1] == "Longest sentence: The cat ran"


def test_summarize_uses_thousands_separators():
	text = summarize_report(analyze("word " * 1500))
	assert "Words: 1,500" in text
	assert "Top bigrams:" in text
