"""
llm_translator_lib.endpoint.openai
==================================

Translation endpoint for **OpenAI‑compatible** chat completion services –
the official API as well as local inference servers (LM Studio, Ollama,
vLLM, llama.cpp) exposing ``/v1/chat/completions``.

The endpoint composes the three stages of the adapter:
:func:`resolve_endpoint_config` (once, in :meth:`initialize`),
:func:`build_request` (per job) and :func:`extract_translation` (per
response).
"""

import logging
from typing import Optional

from llm_translator_lib.base.constants import LOG_LEVEL, LOG_FILE_NAME
from llm_translator_lib.base.constants_base import (
    PROVIDER_NAME,
    SETTINGS_SECTION,
    MAX_TRANSLATIONS_PER_REQUEST,
)
from llm_translator_lib.exceptions import EndpointNotInitializedError
from llm_translator_lib.utils.logger import prepare_logger
from llm_translator_lib.data_models.translation import TranslationJob
from llm_translator_lib.endpoint.endpoint_i import TranslateEndpointI
from llm_translator_lib.endpoint.context_i import InitializationContextI
from llm_translator_lib.endpoint.endpoint_config import (
    EndpointConfig,
    resolve_endpoint_config,
)
from llm_translator_lib.endpoint.request_builder import OutboundRequest, build_request
from llm_translator_lib.endpoint.response_extractor import (
    ExtractionResult,
    TransportOutcome,
    extract_translation,
)


class OpenAITranslateEndpoint(TranslateEndpointI):
    """
    Chat‑completion translation endpoint.

    Until :meth:`initialize` is called the endpoint only exposes its ``id``
    and the generic friendly name ``"OpenAI"``; afterwards the friendly name
    describes the resolved endpoint, e.g. ``"OpenAI (Local: 127.0.0.1:1234)"``.
    """

    id = PROVIDER_NAME
    max_translations_per_request = MAX_TRANSLATIONS_PER_REQUEST

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        logger_file_name: Optional[str] = LOG_FILE_NAME,
        logger_level: Optional[str] = LOG_LEVEL,
        settings_section: str = SETTINGS_SECTION,
    ):
        """
        Parameters
        ----------
        logger : Optional[logging.Logger]
            Logger instance; if omitted, one is prepared with
            :func:`prepare_logger`.
        logger_file_name : Optional[str]
            Log file used when the logger is prepared here.
        logger_level : Optional[str]
            Log level used when the logger is prepared here.
        settings_section : str
            Settings section the options are read from.
        """
        self.logger = logger or prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
        )
        self._settings_section = settings_section
        self._config: Optional[EndpointConfig] = None
        self._friendly_name = PROVIDER_NAME

    @property
    def friendly_name(self) -> str:
        return self._friendly_name

    @property
    def config(self) -> EndpointConfig:
        if self._config is None:
            raise EndpointNotInitializedError(
                f"{PROVIDER_NAME} endpoint used before initialize()"
            )
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    # ------------------------------------------------------------------
    def initialize(self, context: InitializationContextI) -> None:
        """
        Resolve the configuration and announce requirements to the host.

        Side effects on ``context`` (each performed once):

        * certificate checks are disabled for the endpoint host,
        * spam checks are disabled when requested (always for local hosts),
        * the translation delay is set to the upper delay bound when positive.

        Raises
        ------
        ConfigurationError
            If the settings cannot be resolved.
        """
        cfg = resolve_endpoint_config(
            context.get_or_create_setting, section=self._settings_section
        )

        if cfg.is_local:
            self.logger.info(
                "[%s] Detected local endpoint. "
                "Auto-enabling optimizations for local usage.",
                PROVIDER_NAME,
            )
        elif not cfg.has_api_key:
            self.logger.warning(
                "[%s] No API key configured. "
                "This may cause authentication errors with the %s API.",
                PROVIDER_NAME,
                PROVIDER_NAME,
            )
        if cfg.min_delay > cfg.max_delay:
            self.logger.warning(
                "[%s] MinDelaySeconds (%s) is greater than MaxDelaySeconds (%s)",
                PROVIDER_NAME,
                cfg.min_delay,
                cfg.max_delay,
            )

        context.disable_certificate_checks_for(cfg.host)
        if cfg.disable_spam_checks:
            context.disable_spam_checks()
        if cfg.max_delay > 0:
            context.set_translation_delay(cfg.max_delay)

        self._config = cfg
        self._friendly_name = cfg.friendly_name

        self.logger.info("[%s] Initialized with endpoint: %s", PROVIDER_NAME, cfg.url)
        self.logger.info(
            "[%s] Model: %s, Temperature: %s, MaxTokens: %s",
            PROVIDER_NAME,
            cfg.model,
            cfg.temperature,
            cfg.max_tokens,
        )
        self.logger.info(
            "[%s] Spam checks: %s, Delay: %ss-%ss",
            PROVIDER_NAME,
            "Disabled" if cfg.disable_spam_checks else "Enabled",
            cfg.min_delay,
            cfg.max_delay,
        )

    def create_request(self, job: TranslationJob) -> OutboundRequest:
        request = build_request(job, self.config)
        self.logger.debug("[%s] Request to translate: '%s'", PROVIDER_NAME, job.text)
        self.logger.debug("[%s] Request body: %s", PROVIDER_NAME, request.body)
        return request

    def extract_translation(self, outcome: TransportOutcome) -> ExtractionResult:
        return extract_translation(outcome, provider=PROVIDER_NAME, logger=self.logger)
