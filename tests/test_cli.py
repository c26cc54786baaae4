import json

from cli import main


def test_analyze_prints_summary(tmp_path, capsys):
	p = tmp_path / "cats.txt"
	p.write_text("The cat sat. The cat ran!", encoding="utf-8")
	assert main(["--log-level", "WARNING", "analyze", str(p)]) == 0
	out = capsys.readouterr().out
	assert "File cats.txt (25 Bytes, text)" in out
	assert "Words: 6" in out


def test_analyze_json_and_export(tmp_path, capsys):
	p = tmp_path / "pal.txt"
	p.write_text("level noon cat", encoding="utf-8")
	assert main(["--log-level", "WARNING", "analyze", str(p), "--json", "--export", str(tmp_path)]) == 0
	out = capsys.readouterr().out
	assert json.loads(out)["palindromicWordsCount"] == 2
	saved = json.loads((tmp_path / "text_analysis_report.json").read_text(encoding="utf-8"))
	assert saved["palindromicWordsCount"] == 2


def test_analyze_unsupported_file(tmp_path, capsys):
	p = tmp_path / "image.png"
	p.write_bytes(b"\x89PNG")
	assert main(["--log-level", "WARNING", "analyze", str(p)]) == 1
	assert "Please upload a .txt or .docx file" in capsys.readouterr().err


def test_analyze_missing_file(tmp_path, capsys):
	assert main(["--log-level", "WARNING", "analyze", str(tmp_path / "nope.txt")]) == 1
	assert "Error processing file: Failed to read text file" in capsys.readouterr().err
