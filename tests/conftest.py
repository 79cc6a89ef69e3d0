"""Shared fixtures for llm_translator_lib tests."""

import logging
from typing import Any, Dict, List, Optional, Tuple

import pytest

from llm_translator_lib.endpoint.context_i import InitializationContextI
from llm_translator_lib.endpoint.endpoint_config import resolve_endpoint_config
from llm_translator_lib.endpoint.openai import OpenAITranslateEndpoint
from llm_translator_lib.data_models.constants import SETTINGS_KEYS


class RecordingContext(InitializationContextI):
    """Host context double that serves a flat settings dict and records calls."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self.settings = dict(settings or {})
        self.reads: List[Tuple[str, str, Any]] = []
        self.calls: List[Tuple[str, Any]] = []

    def get_or_create_setting(self, section: str, key: str, default: Any) -> Any:
        self.reads.append((section, key, default))
        return self.settings.get(key, default)

    def disable_certificate_checks_for(self, host: str) -> None:
        self.calls.append(("disable_certificate_checks_for", host))

    def disable_spam_checks(self) -> None:
        self.calls.append(("disable_spam_checks", None))

    def set_translation_delay(self, max_seconds: float) -> None:
        self.calls.append(("set_translation_delay", max_seconds))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove endpoint settings from the environment for every test."""
    for key in SETTINGS_KEYS:
        monkeypatch.delenv(f"LLM_TRANSLATOR_OPENAI_{key.upper()}", raising=False)


@pytest.fixture
def make_context():
    def _make(**settings) -> RecordingContext:
        return RecordingContext(settings)

    return _make


@pytest.fixture
def make_config(make_context):
    """Resolve an EndpointConfig from keyword settings."""

    def _make(**settings):
        return resolve_endpoint_config(make_context(**settings).get_or_create_setting)

    return _make


@pytest.fixture
def endpoint():
    """Endpoint with a quiet test logger."""
    logger = logging.getLogger("tests.llm_translator")
    logger.setLevel(logging.DEBUG)
    return OpenAITranslateEndpoint(logger=logger)
