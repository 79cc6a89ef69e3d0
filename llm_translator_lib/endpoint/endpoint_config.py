"""
Configuration resolver of the chat‑completion translation endpoint.

This module defines:
- EndpointConfig: an immutable snapshot of every option an endpoint needs,
  built once at start‑up and shared by all translation jobs.
- is_local_host / resolve_endpoint_config: pure functions that classify the
  endpoint host and derive the effective operational parameters (spam checks,
  delay window, display name) from the raw settings.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from llm_translator_lib.exceptions import ConfigurationError
from llm_translator_lib.utils.convert import coerce_setting
from llm_translator_lib.base.constants_base import (
    PROVIDER_NAME,
    SETTINGS_SECTION,
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_USER_PROMPT_TEMPLATE,
    DEFAULT_DISABLE_SPAM_CHECKS,
    DEFAULT_MIN_DELAY_SECONDS,
    DEFAULT_MAX_DELAY_SECONDS,
    LOCAL_MIN_DELAY_SECONDS,
    LOCAL_MAX_DELAY_SECONDS,
)
from llm_translator_lib.data_models.constants import (
    ENDPOINT_KEY,
    API_KEY_KEY,
    MODEL_KEY,
    TEMPERATURE_KEY,
    MAX_TOKENS_KEY,
    SYSTEM_PROMPT_KEY,
    DISABLE_SPAM_CHECKS_KEY,
    MIN_DELAY_KEY,
    MAX_DELAY_KEY,
)

# (section, key, default) -> value
SettingReader = Callable[[str, str, Any], Any]

# Only 172.16.0.0/16 is recognised, not the whole 172.16.0.0/12 block
LOCAL_HOST_EXACT = ("localhost", "127.0.0.1")
LOCAL_HOST_PREFIXES = ("192.168.", "10.", "172.16.")
LOCAL_HOST_SUFFIXES = (".local",)

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class EndpointConfig:
    """
    Immutable, fully resolved configuration of the endpoint.

    Attributes
    ----------
    url : str
        Chat‑completion URL receiving the requests.
    api_key : str
        Bearer token; an empty string means no ``Authorization`` header.
    model : str
        Model identifier sent in every request body.
    temperature : float
        Sampling temperature.
    max_tokens : int
        Maximum output token budget.
    system_prompt : str
        Content of the system message.
    user_prompt_template : str
        Positional template (``{0}`` source language, ``{1}`` destination
        language, ``{2}`` text) of the user message.
    host : str
        Host part of ``url``.
    port : int
        Port of ``url`` (scheme default when not given explicitly).
    is_local : bool
        ``True`` when ``host`` is a loopback, private or mDNS host.
    friendly_name : str
        Display name exposed to the host UI.
    disable_spam_checks : bool
        Whether the host should skip its anti‑automation checks.
    min_delay : float
        Lower bound of the delay between translations (seconds).
    max_delay : float
        Upper bound of the delay between translations (seconds).
    """

    url: str
    api_key: str
    model: str
    temperature: float
    max_tokens: int
    system_prompt: str
    user_prompt_template: str
    host: str
    port: int
    is_local: bool
    friendly_name: str
    disable_spam_checks: bool
    min_delay: float
    max_delay: float

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def is_local_host(host: Optional[str]) -> bool:
    """
    Return ``True`` when ``host`` points to a local inference server.

    The rules are: exact ``localhost`` or ``127.0.0.1``, a ``192.168.``,
    ``10.`` or ``172.16.`` prefix, or a ``.local`` suffix.  Hostname checks
    are case‑insensitive.
    """
    if not host:
        return False
    host = host.lower()
    if host in LOCAL_HOST_EXACT:
        return True
    if host.startswith(LOCAL_HOST_PREFIXES):
        return True
    return host.endswith(LOCAL_HOST_SUFFIXES)


def build_friendly_name(
    url: str, host: str, port: int, model: str, is_local: bool
) -> str:
    if is_local:
        return f"{PROVIDER_NAME} (Local: {host}:{port})"
    if url != DEFAULT_ENDPOINT:
        return f"{PROVIDER_NAME} (Custom: {host})"
    return f"{PROVIDER_NAME} ({model})"


def _split_endpoint(url: str):
    try:
        parts = urlsplit(url)
        host = parts.hostname
        port = parts.port
    except ValueError as exc:
        raise ConfigurationError(f"Invalid endpoint URL {url!r}: {exc}") from exc

    scheme = (parts.scheme or "").lower()
    if scheme not in _DEFAULT_PORTS or not host:
        raise ConfigurationError(
            f"Invalid endpoint URL {url!r}: an absolute http(s) URL is required"
        )
    return host, port if port is not None else _DEFAULT_PORTS[scheme]


def resolve_endpoint_config(
    get_setting: SettingReader, section: str = SETTINGS_SECTION
) -> EndpointConfig:
    """
    Read the endpoint settings and derive the effective configuration.

    The function is pure with respect to ``get_setting``: it performs no
    logging and no side effects, the caller announces the derived
    requirements to its host.  Local endpoints always get spam checks
    disabled and the fixed ``0.1s``‑``0.2s`` delay window, whatever the user
    configured.

    Parameters
    ----------
    get_setting : SettingReader
        Callable with the ``get_or_create_setting(section, key, default)``
        signature, invoked once per field.
    section : str
        Settings section holding the endpoint options.

    Returns
    -------
    EndpointConfig
        Resolved, immutable configuration.

    Raises
    ------
    ConfigurationError
        If the endpoint URL is not an absolute http(s) URL or a setting has
        a value of the wrong type.
    """

    def _read(key: str, default: Any) -> Any:
        return coerce_setting(get_setting(section, key, default), default, key)

    url = _read(ENDPOINT_KEY, DEFAULT_ENDPOINT).strip()
    api_key = _read(API_KEY_KEY, "").strip()
    model = _read(MODEL_KEY, DEFAULT_MODEL)
    temperature = _read(TEMPERATURE_KEY, DEFAULT_TEMPERATURE)
    max_tokens = _read(MAX_TOKENS_KEY, DEFAULT_MAX_TOKENS)
    system_prompt = _read(SYSTEM_PROMPT_KEY, DEFAULT_SYSTEM_PROMPT)
    disable_spam_checks = _read(DISABLE_SPAM_CHECKS_KEY, DEFAULT_DISABLE_SPAM_CHECKS)
    min_delay = _read(MIN_DELAY_KEY, DEFAULT_MIN_DELAY_SECONDS)
    max_delay = _read(MAX_DELAY_KEY, DEFAULT_MAX_DELAY_SECONDS)

    host, port = _split_endpoint(url)
    is_local = is_local_host(host)
    if is_local:
        disable_spam_checks = True
        min_delay = LOCAL_MIN_DELAY_SECONDS
        max_delay = LOCAL_MAX_DELAY_SECONDS

    return EndpointConfig(
        url=url,
        api_key=api_key,
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        system_prompt=system_prompt,
        user_prompt_template=DEFAULT_USER_PROMPT_TEMPLATE,
        host=host,
        port=port,
        is_local=is_local,
        friendly_name=build_friendly_name(
            url=url, host=host, port=port, model=model, is_local=is_local
        ),
        disable_spam_checks=disable_spam_checks,
        min_delay=min_delay,
        max_delay=max_delay,
    )
