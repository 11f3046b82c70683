from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

import ragchat.cli as cli_module
from ragchat.cli import app
from ragchat.retrieval.types import EvidenceMatch
from ragchat.services.rag_chat_orchestrator import RagChatOrchestrator


def test_serve_passes_binding_to_server(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_run_server(*, host: str, port: int) -> None:
        captured["host"] = host
        captured["port"] = port

    monkeypatch.setattr(cli_module, "run_server", fake_run_server)

    result = CliRunner().invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9100"])

    assert result.exit_code == 0
    assert captured == {"host": "127.0.0.1", "port": 9100}


def test_serve_rejects_zero_port() -> None:
    result = CliRunner().invoke(app, ["serve", "--port", "0"])

    assert result.exit_code != 0


def test_context_prints_augmented_conversation(
    monkeypatch: pytest.MonkeyPatch,
    fake_search,
    orchestrator: RagChatOrchestrator,
) -> None:
    fake_search.matches = [
        EvidenceMatch(filename="bgp.md", file_id=None, score=0.77, text_segments=("neighbors",)),
    ]
    monkeypatch.setattr(cli_module, "build_orchestrator_from_env", lambda: orchestrator)

    result = CliRunner().invoke(app, ["context", "how do I list BGP neighbors?"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    roles = [message["role"] for message in payload["messages"]]
    assert roles == ["system", "system", "user"]
    assert "| bgp.md | 0.770 |" in payload["messages"][1]["content"]
    assert fake_search.calls[0][0] == "how do I list BGP neighbors?"


def test_context_uses_custom_system_instruction(
    monkeypatch: pytest.MonkeyPatch,
    orchestrator: RagChatOrchestrator,
) -> None:
    monkeypatch.setattr(cli_module, "build_orchestrator_from_env", lambda: orchestrator)

    result = CliRunner().invoke(app, ["context", "hi", "--system", "Be terse."])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["messages"][0] == {"role": "system", "content": "Be terse."}


def test_context_reports_missing_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)

    result = CliRunner().invoke(app, ["context", "hi"])

    assert result.exit_code != 0
    assert "Missing OpenAI API key" in result.output
