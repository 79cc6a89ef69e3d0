from llm_translator_lib.endpoint.context_i import InitializationContextI
from llm_translator_lib.endpoint.endpoint_config import (
    EndpointConfig,
    is_local_host,
    resolve_endpoint_config,
)
from llm_translator_lib.endpoint.request_builder import OutboundRequest, build_request
from llm_translator_lib.endpoint.response_extractor import (
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    TransportOutcome,
    extract_translation,
)
from llm_translator_lib.endpoint.endpoint_i import TranslateEndpointI
from llm_translator_lib.endpoint.openai import OpenAITranslateEndpoint

__all__ = [
    "InitializationContextI",
    "EndpointConfig",
    "is_local_host",
    "resolve_endpoint_config",
    "OutboundRequest",
    "build_request",
    "ExtractionFailure",
    "ExtractionResult",
    "ExtractionSuccess",
    "TransportOutcome",
    "extract_translation",
    "TranslateEndpointI",
    "OpenAITranslateEndpoint",
]
