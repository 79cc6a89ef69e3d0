"""Unit tests for the llm-translate command line."""

import io
import json

import pytest

from llm_translator_cli import translate as cli
from llm_translator_lib.endpoint.response_extractor import TransportOutcome


class CannedTransport:
    """Transport double returning the same outcome for every request."""

    last = None

    def __init__(self, outcome):
        self.outcome = outcome
        self.requests = []

    def disable_certificate_checks_for(self, host):
        pass

    def send(self, request):
        self.requests.append(request)
        return self.outcome


@pytest.fixture
def use_transport(monkeypatch):
    """Route the CLI client through a ``CannedTransport``."""

    def _use(outcome):
        original = cli.LLMTranslatorClient

        def _client(**kwargs):
            CannedTransport.last = CannedTransport(outcome)
            return original(transport=CannedTransport.last, **kwargs)

        monkeypatch.setattr(cli, "LLMTranslatorClient", _client)

    return _use


def _completion(content):
    return json.dumps({"choices": [{"message": {"content": content}}]})


class TestMain:
    """Tests for the CLI entry point."""

    def test_translates_argument(self, use_transport, capsys):
        use_transport(TransportOutcome.succeeded(_completion("こんにちは")))
        code = cli.main(["Hello", "-s", "en", "-t", "ja"])
        assert code == 0
        assert capsys.readouterr().out == "こんにちは\n"

    def test_reads_stdin(self, use_transport, monkeypatch, capsys):
        use_transport(TransportOutcome.succeeded(_completion("Hallo")))
        monkeypatch.setattr("sys.stdin", io.StringIO("Hello"))
        assert cli.main(["-s", "en", "-t", "de"]) == 0
        assert capsys.readouterr().out == "Hallo\n"

    def test_overrides_reach_request(self, use_transport, capsys):
        use_transport(TransportOutcome.succeeded(_completion("Hallo")))
        cli.main(
            [
                "Hello",
                "-s",
                "en",
                "-t",
                "de",
                "--endpoint",
                "http://localhost:1234/v1/chat/completions",
                "--model",
                "qwen2.5-7b-instruct",
                "--api-key",
                "sk-test",
            ]
        )
        request = CannedTransport.last.requests[0]
        assert request.url == "http://localhost:1234/v1/chat/completions"
        assert request.payload["model"] == "qwen2.5-7b-instruct"
        assert request.headers["Authorization"] == "Bearer sk-test"

    def test_failure_exit_code(self, use_transport, capsys):
        use_transport(TransportOutcome.failed("HTTP 500: boom"))
        assert cli.main(["Hello", "-s", "en", "-t", "de"]) == 1
        assert "OpenAI API request failed: HTTP 500: boom" in capsys.readouterr().err

    def test_missing_settings_file(self, tmp_path, capsys):
        code = cli.main(
            ["Hello", "-s", "en", "-t", "de", "--settings", str(tmp_path / "nope.json")]
        )
        assert code == 1
        assert "Cannot load settings file" in capsys.readouterr().err

    def test_blank_text_is_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["   ", "-s", "en", "-t", "de"])
        assert exc_info.value.code == 2
