from llm_translator_lib.client import LLMTranslatorClient
from llm_translator_lib.settings import SettingsContext
from llm_translator_lib.languages import LANGUAGE_NAMES, fix_language
from llm_translator_lib.data_models.translation import TranslationJob
from llm_translator_lib.endpoint import (
    EndpointConfig,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    InitializationContextI,
    OpenAITranslateEndpoint,
    OutboundRequest,
    TransportOutcome,
)
from llm_translator_lib.exceptions import (
    LLMTranslatorError,
    ConfigurationError,
    EndpointNotInitializedError,
    TranslationFailedError,
)

__all__ = [
    "LLMTranslatorClient",
    "SettingsContext",
    "LANGUAGE_NAMES",
    "fix_language",
    "TranslationJob",
    "EndpointConfig",
    "ExtractionFailure",
    "ExtractionResult",
    "ExtractionSuccess",
    "InitializationContextI",
    "OpenAITranslateEndpoint",
    "OutboundRequest",
    "TransportOutcome",
    "LLMTranslatorError",
    "ConfigurationError",
    "EndpointNotInitializedError",
    "TranslationFailedError",
]
