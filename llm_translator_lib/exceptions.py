"""
Custom exception hierarchy for the LLM‑Translator library.

All public exceptions inherit from :class:`LLMTranslatorError`, allowing
callers to catch a single base class for any translator‑related failure while
still being able to differentiate specific error conditions when needed.

Note that the response extractor itself never raises – provider and protocol
failures are reported as :class:`~llm_translator_lib.endpoint.response_extractor.ExtractionFailure`
values.  Exceptions are reserved for misconfiguration and API misuse.
"""


class LLMTranslatorError(Exception):
    """Base exception for all LLM‑Translator‑specific errors."""

    pass


class ConfigurationError(LLMTranslatorError):
    """Raised when a setting cannot be used (malformed URL, wrong value type)."""

    pass


class EndpointNotInitializedError(LLMTranslatorError):
    """Raised when an endpoint is used before ``initialize`` was called."""

    pass


class TranslationFailedError(LLMTranslatorError):
    """Raised by the client when a translation job ends with a failure."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
