"""Unit tests for LLMTranslatorClient."""

import json

import pytest

from llm_translator_lib.client import LLMTranslatorClient
from llm_translator_lib.settings import SettingsContext
from llm_translator_lib.exceptions import TranslationFailedError
from llm_translator_lib.data_models.translation import TranslationJob
from llm_translator_lib.endpoint.response_extractor import TransportOutcome


class FakeTransport:
    """Transport double returning a canned outcome and recording requests."""

    def __init__(self, outcome: TransportOutcome):
        self.outcome = outcome
        self.requests = []
        self.insecure_hosts = []

    def disable_certificate_checks_for(self, host):
        self.insecure_hosts.append(host)

    def send(self, request):
        self.requests.append(request)
        return self.outcome


def _completion(content):
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


@pytest.fixture
def context():
    return SettingsContext(
        {"OpenAI": {"Endpoint": "http://localhost:1234/v1/chat/completions"}},
        use_env=False,
    )


class TestClientSetup:
    """Tests for the host-side wiring done by the client."""

    def test_certificate_bypass_forwarded(self, context):
        transport = FakeTransport(TransportOutcome.succeeded(_completion("x")))
        client = LLMTranslatorClient(context=context, transport=transport)
        assert transport.insecure_hosts == ["localhost"]
        assert client.friendly_name == "OpenAI (Local: localhost:1234)"
        assert context.spam_checks_disabled is True
        assert context.translation_delay == 0.2


class TestTranslate:
    """Tests for the translate round trip."""

    def test_returns_translation(self, context):
        transport = FakeTransport(TransportOutcome.succeeded(_completion("  Hallo  ")))
        client = LLMTranslatorClient(context=context, transport=transport)

        assert client.translate("Hello", "en", "de") == "Hallo"
        payload = transport.requests[0].payload
        assert payload["messages"][1]["content"] == (
            "Translate the following text from English to German:\n\nHello"
        )

    def test_transport_failure_raises(self, context):
        transport = FakeTransport(TransportOutcome.failed("connection refused"))
        client = LLMTranslatorClient(context=context, transport=transport)

        with pytest.raises(TranslationFailedError) as exc_info:
            client.translate("Hello", "en", "de")
        assert exc_info.value.reason == "OpenAI API request failed: connection refused"

    def test_translate_job_returns_failure_result(self, context):
        transport = FakeTransport(TransportOutcome.succeeded('{"choices": []}'))
        client = LLMTranslatorClient(context=context, transport=transport)

        result = client.translate_job(
            TranslationJob(source_language="en", destination_language="de", text="Hi")
        )
        assert not result.ok
        assert result.reason == "OpenAI API returned no choices"
