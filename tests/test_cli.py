import json

import pytest

from conftest import FakeResponse, FakeSession, generation_response
from sales_agent.llm.gemini_client import GeminiText
from server import cli


DRAFTS = [
    {"tone": "Professional", "subject": "Cutting close costs", "body": "<p>Hello Jane</p>"},
    {"tone": "Engaging", "subject": "Quick idea", "body": "<p>Hi Jane</p>"},
    {"tone": "Relaxed", "subject": "Coffee?", "body": "<p>Hey Jane</p>"},
]


@pytest.fixture
def session(monkeypatch):
    fake = FakeSession()
    monkeypatch.setattr(cli, "GeminiText", lambda **kwargs: GeminiText(session_factory=lambda: fake, **kwargs))
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return fake


@pytest.fixture
def form_file(tmp_path):
    path = tmp_path / "form.json"
    path.write_text(json.dumps({"myName": "Sam", "myCompanyName": "SAP"}), encoding="utf-8")
    return path


def test_prints_parsed_drafts(session, form_file, capsys):
    session.responses.append(FakeResponse(200, generation_response(json.dumps(DRAFTS))))

    assert cli.main([str(form_file)]) == 0

    out = capsys.readouterr().out
    assert "=== Professional ===" in out
    assert "Subject: Coffee?" in out


def test_raw_flag_prints_upstream_json(session, form_file, capsys):
    upstream = generation_response(json.dumps(DRAFTS))
    session.responses.append(FakeResponse(200, upstream))

    assert cli.main([str(form_file), "--raw"]) == 0

    assert json.loads(capsys.readouterr().out) == upstream


def test_missing_key_exits_with_error(monkeypatch, form_file, capsys):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    assert cli.main([str(form_file)]) == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().err


def test_upstream_error_exits_with_error(session, form_file, capsys):
    session.responses.append(FakeResponse(403, {"error": {"message": "Key revoked"}}, reason="Forbidden"))

    assert cli.main([str(form_file)]) == 1
    assert "Gemini API Error: 403 Forbidden" in capsys.readouterr().err
