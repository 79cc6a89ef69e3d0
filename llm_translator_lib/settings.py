"""
Settings‑backed implementation of the host initialization context.

:class:`SettingsContext` is what a caller without a host translation
framework hands to ``initialize``.  Settings are looked up in this order:

1. explicit overrides set with :meth:`SettingsContext.override_setting`,
2. environment variable ``LLM_TRANSLATOR_<SECTION>_<KEY>`` (upper‑cased),
3. the in‑memory section table (optionally loaded from a JSON file),
4. the default – which is then stored in the table.

Nothing is ever written back to disk.  The requirements announced by the
endpoint (certificate bypass hosts, spam‑check state, translation delay)
are recorded on the context so the caller can apply them to its own
transport and scheduler.
"""

import os
import json
import logging
import threading

from typing import Any, Dict, Optional, Set

from llm_translator_lib.base.constants_base import _DontChangeMe
from llm_translator_lib.exceptions import ConfigurationError
from llm_translator_lib.utils.convert import coerce_setting
from llm_translator_lib.endpoint.context_i import InitializationContextI


class SettingsContext(InitializationContextI):
    """
    In‑memory settings store with environment overrides.

    Attributes
    ----------
    certificate_check_disabled_hosts : Set[str]
        Hosts for which the endpoint requested TLS validation to be skipped.
    spam_checks_disabled : bool
        ``True`` once the endpoint called :meth:`disable_spam_checks`.
    translation_delay : Optional[float]
        Delay requested through :meth:`set_translation_delay`.
    """

    def __init__(
        self,
        sections: Optional[Dict[str, Dict[str, Any]]] = None,
        use_env: bool = True,
        env_prefix: str = _DontChangeMe.MAIN_ENV_PREFIX,
        logger: Optional[logging.Logger] = None,
    ):
        self._overrides: Dict[str, Dict[str, Any]] = {}
        self._sections: Dict[str, Dict[str, Any]] = {
            str(s): dict(values or {}) for s, values in (sections or {}).items()
        }
        self._use_env = use_env
        self._env_prefix = env_prefix
        self.logger = logger or logging.getLogger(__name__)

        self._lock = threading.Lock()

        self.certificate_check_disabled_hosts: Set[str] = set()
        self.spam_checks_disabled: bool = False
        self.translation_delay: Optional[float] = None

    @classmethod
    def from_json_file(cls, path: str, **kwargs) -> "SettingsContext":
        """
        Build a context from a JSON file shaped ``{section: {key: value}}``.

        Raises
        ------
        ConfigurationError
            If the file cannot be read, is not valid JSON or is not a mapping
            of sections.
        """
        try:
            with open(path, "rt", encoding="utf-8") as f:
                sections = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(
                f"Cannot load settings file {path!r}: {exc}"
            ) from exc

        if not isinstance(sections, dict) or not all(
            isinstance(v, dict) for v in sections.values()
        ):
            raise ConfigurationError(
                f"Settings file {path!r} must map section names to objects"
            )
        return cls(sections=sections, **kwargs)

    def env_name(self, section: str, key: str) -> str:
        return f"{self._env_prefix}{section}_{key}".upper()

    def override_setting(self, section: str, key: str, value: Any) -> None:
        """Force ``value`` for ``section``/``key``, ahead of the environment."""
        with self._lock:
            self._overrides.setdefault(section, {})[key] = value

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        with self._lock:
            return {s: dict(values) for s, values in self._sections.items()}

    # ------------------------------------------------------------------
    def get_or_create_setting(self, section: str, key: str, default: Any) -> Any:
        with self._lock:
            overridden = self._overrides.get(section, {})
            if key in overridden:
                return coerce_setting(overridden[key], default, key)

        if self._use_env:
            env_value = os.environ.get(self.env_name(section, key))
            if env_value is not None:
                return coerce_setting(env_value, default, key)

        with self._lock:
            values = self._sections.setdefault(section, {})
            if key not in values:
                values[key] = default
                return default
            value = values[key]
        return coerce_setting(value, default, key)

    def disable_certificate_checks_for(self, host: str) -> None:
        self.logger.debug("Certificate checks disabled for host: %s", host)
        self.certificate_check_disabled_hosts.add(host)

    def disable_spam_checks(self) -> None:
        self.spam_checks_disabled = True

    def set_translation_delay(self, max_seconds: float) -> None:
        self.translation_delay = max_seconds
