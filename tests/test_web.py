import asyncio
from collections import OrderedDict

import pytest
from fastapi.testclient import TestClient

import web.app as web_app
from textstats.analyze import analyze


@pytest.fixture(autouse=True)
def fresh_sessions(monkeypatch):
	monkeypatch.setattr(web_app, "sessions", OrderedDict())


@pytest.fixture
def client():
	return TestClient(web_app.app)


def _upload(client, name, content, media_type="text/plain"):
	return client.post("/upload", files={"file": (name, content, media_type)})


def test_index_page(client):
	resp = client.get("/")
	assert resp.status_code == 200
	assert "Text Analyzer" in resp.text
	assert "const errorDisplayMs = 5000;" in resp.text


def test_static_stylesheet(client):
	assert client.get("/static/style.css").status_code == 200


def test_export_before_upload(client):
	resp = client.get("/export")
	assert resp.status_code == 404
	assert resp.json()["detail"] == "No analysis data to export"


def test_upload_then_export(client):
	resp = _upload(client, "cats.txt", b"The cat sat. The cat ran!")
	assert resp.status_code == 200
	assert web_app.SESSION_COOKIE in resp.cookies
	payload = resp.json()
	assert payload["request_id"] == 1
	assert payload["file"] == {"name": "cats.txt", "size": 25, "kind": "text", "size_label": "25 Bytes"}
	assert payload["report"]["totalWords"] == 6

	exported = client.get("/export")
	assert exported.status_code == 200
	assert "text_analysis_report.json" in exported.headers["content-disposition"]
	assert exported.json() == payload["report"]


def test_upload_error_keeps_previous_report(client):
	_upload(client, "a.txt", b"first file")
	resp = _upload(client, "b.pdf", b"nope", "application/pdf")
	assert resp.status_code == 415
	assert client.get("/export").json()["totalWords"] == 2


def test_clients_have_separate_reports():
	alice = TestClient(web_app.app)
	bob = TestClient(web_app.app)
	assert _upload(alice, "a.txt", b"first file").status_code == 200
	assert bob.get("/export").status_code == 404

	resp = _upload(bob, "b.txt", b"a longer second file")
	assert resp.status_code == 200
	assert resp.json()["request_id"] == 1
	assert alice.get("/export").json()["totalWords"] == 2
	assert bob.get("/export").json()["totalWords"] == 4
	assert len(web_app.sessions) == 2


def test_superseded_upload_is_discarded(client, monkeypatch):
	def slow_extract(filename, data):
		# a newer upload from the same browser starts during extraction
		for session in web_app.sessions.values():
			session.begin()
		return data.decode("utf-8")

	monkeypatch.setattr(web_app, "extract_text", slow_extract)
	resp = _upload(client, "old.txt", b"old text")
	assert resp.status_code == 409
	assert all(session.current is None for session in web_app.sessions.values())


def test_analysis_runs_off_the_event_loop(client, monkeypatch):
	threads = []

	def recording_analyze(text):
		try:
			asyncio.get_running_loop()
			threads.append("event loop")
		except RuntimeError:
			threads.append("worker")
		return analyze(text)

	monkeypatch.setattr(web_app, "analyze", recording_analyze)
	assert _upload(client, "a.txt", b"some text").status_code == 200
	assert threads == ["worker"]
