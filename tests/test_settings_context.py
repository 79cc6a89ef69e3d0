"""Unit tests for SettingsContext."""

import json

import pytest

from llm_translator_lib.settings import SettingsContext
from llm_translator_lib.exceptions import ConfigurationError


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "OpenAI": {
                    "Endpoint": "http://localhost:1234/v1/chat/completions",
                    "MaxTokens": "256",
                    "DisableSpamChecks": "yes",
                }
            }
        ),
        encoding="utf-8",
    )
    return path


class TestGetOrCreateSetting:
    """Tests for setting lookup and creation."""

    def test_missing_key_is_created_with_default(self):
        context = SettingsContext(use_env=False)
        assert context.get_or_create_setting("OpenAI", "Model", "gpt-4o-mini") == "gpt-4o-mini"
        assert context.as_dict() == {"OpenAI": {"Model": "gpt-4o-mini"}}

    def test_stored_value_is_coerced(self):
        context = SettingsContext({"OpenAI": {"Temperature": "0.9"}}, use_env=False)
        assert context.get_or_create_setting("OpenAI", "Temperature", 0.3) == pytest.approx(0.9)

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("FALSE", False), ("1", True), ("0", False), ("on", True), ("no", False)],
    )
    def test_boolean_strings(self, raw, expected):
        context = SettingsContext({"OpenAI": {"DisableSpamChecks": raw}}, use_env=False)
        assert context.get_or_create_setting("OpenAI", "DisableSpamChecks", False) is expected

    def test_invalid_boolean_raises(self):
        context = SettingsContext({"OpenAI": {"DisableSpamChecks": "maybe"}}, use_env=False)
        with pytest.raises(ConfigurationError):
            context.get_or_create_setting("OpenAI", "DisableSpamChecks", False)

    def test_environment_overrides_table(self, monkeypatch):
        monkeypatch.setenv("LLM_TRANSLATOR_OPENAI_MODEL", "llama3")
        context = SettingsContext({"OpenAI": {"Model": "gpt-4o"}})
        assert context.env_name("OpenAI", "Model") == "LLM_TRANSLATOR_OPENAI_MODEL"
        assert context.get_or_create_setting("OpenAI", "Model", "gpt-4o-mini") == "llama3"

    def test_environment_ignored_when_disabled(self, monkeypatch):
        monkeypatch.setenv("LLM_TRANSLATOR_OPENAI_MODEL", "llama3")
        context = SettingsContext({"OpenAI": {"Model": "gpt-4o"}}, use_env=False)
        assert context.get_or_create_setting("OpenAI", "Model", "gpt-4o-mini") == "gpt-4o"

    def test_override_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("LLM_TRANSLATOR_OPENAI_MODEL", "llama3")
        context = SettingsContext()
        context.override_setting("OpenAI", "Model", "qwen2.5")
        assert context.get_or_create_setting("OpenAI", "Model", "gpt-4o-mini") == "qwen2.5"


class TestFromJsonFile:
    """Tests for loading settings from disk."""

    def test_loads_sections(self, settings_file):
        context = SettingsContext.from_json_file(str(settings_file), use_env=False)
        assert context.get_or_create_setting("OpenAI", "MaxTokens", 500) == 256
        assert context.get_or_create_setting("OpenAI", "DisableSpamChecks", False) is True

    def test_file_is_not_rewritten(self, settings_file):
        before = settings_file.read_text(encoding="utf-8")
        context = SettingsContext.from_json_file(str(settings_file), use_env=False)
        context.get_or_create_setting("OpenAI", "Model", "gpt-4o-mini")
        assert settings_file.read_text(encoding="utf-8") == before

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError):
            SettingsContext.from_json_file(str(tmp_path / "missing.json"))

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            SettingsContext.from_json_file(str(path))

    def test_wrong_shape_raises(self, tmp_path):
        path = tmp_path / "flat.json"
        path.write_text('{"Endpoint": "http://localhost"}', encoding="utf-8")
        with pytest.raises(ConfigurationError):
            SettingsContext.from_json_file(str(path))


class TestHostRequirements:
    """Tests for the requirements recorded from the endpoint."""

    def test_records_requirements(self):
        context = SettingsContext(use_env=False)
        context.disable_certificate_checks_for("localhost")
        context.disable_spam_checks()
        context.set_translation_delay(0.2)
        assert context.certificate_check_disabled_hosts == {"localhost"}
        assert context.spam_checks_disabled is True
        assert context.translation_delay == 0.2
