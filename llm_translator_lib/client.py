import logging
from typing import Optional

from llm_translator_lib.settings import SettingsContext
from llm_translator_lib.utils.http import RequestsTransport
from llm_translator_lib.exceptions import TranslationFailedError
from llm_translator_lib.data_models.translation import TranslationJob
from llm_translator_lib.endpoint.endpoint_i import TranslateEndpointI
from llm_translator_lib.endpoint.openai import OpenAITranslateEndpoint
from llm_translator_lib.endpoint.response_extractor import (
    ExtractionResult,
    ExtractionSuccess,
)


class LLMTranslatorClient:
    """
    Stand‑alone driver of a translation endpoint.

    Plays the role of the host framework: initializes the endpoint once with
    a :class:`SettingsContext`, forwards the requested certificate bypass to
    the transport and runs every job through
    ``create_request`` → ``send`` → ``extract_translation``.
    """

    def __init__(
        self,
        context: Optional[SettingsContext] = None,
        transport: Optional[RequestsTransport] = None,
        endpoint: Optional[TranslateEndpointI] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.context = context or SettingsContext()
        self.transport = transport or RequestsTransport(logger=self.logger)
        self.endpoint = endpoint or OpenAITranslateEndpoint()

        self.endpoint.initialize(self.context)
        for host in sorted(self.context.certificate_check_disabled_hosts):
            self.transport.disable_certificate_checks_for(host)

    @property
    def friendly_name(self) -> str:
        return self.endpoint.friendly_name

    # ------------------------------------------------------------------ #
    def translate_job(self, job: TranslationJob) -> ExtractionResult:
        request = self.endpoint.create_request(job)
        outcome = self.transport.send(request)
        return self.endpoint.extract_translation(outcome)

    # ------------------------------------------------------------------ #
    def translate(
        self,
        text: str,
        source_language: str,
        destination_language: str,
    ) -> str:
        """
        Translate ``text`` and return the translation.

        Raises
        ------
        TranslationFailedError
            If the provider call fails or returns no usable translation.
        pydantic.ValidationError
            If ``text`` is empty.
        """
        job = TranslationJob(
            source_language=source_language,
            destination_language=destination_language,
            text=text,
        )
        result = self.translate_job(job)
        if isinstance(result, ExtractionSuccess):
            return result.text

        self.logger.error("Translation failed: %s", result.reason)
        raise TranslationFailedError(result.reason)
