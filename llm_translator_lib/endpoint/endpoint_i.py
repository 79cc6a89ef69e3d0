"""
Endpoint abstraction consumed by a host translation framework.

A translation endpoint has a three‑step lifecycle:

* ``initialize`` – called once at start‑up with the host context,
* ``create_request`` – called once per translation job,
* ``extract_translation`` – called once per completed HTTP exchange.

Besides the lifecycle the host reads ``id``, ``friendly_name`` and
``max_translations_per_request`` to register and schedule the endpoint.
"""

import abc

from llm_translator_lib.endpoint.context_i import InitializationContextI
from llm_translator_lib.endpoint.request_builder import OutboundRequest
from llm_translator_lib.endpoint.response_extractor import (
    ExtractionResult,
    TransportOutcome,
)
from llm_translator_lib.data_models.translation import TranslationJob


class TranslateEndpointI(abc.ABC):
    """
    Abstract base class for HTTP translation endpoints.

    Sub‑classes must set the ``id`` attribute and implement the lifecycle
    methods.  Instances hold no per‑job state, a single instance may serve
    concurrent jobs once ``initialize`` has returned.
    """

    # Unique identifier under which the host registers the endpoint
    id: str = ""

    # Number of texts sent in one HTTP request
    max_translations_per_request: int = 1

    @property
    @abc.abstractmethod
    def friendly_name(self) -> str:
        """Human‑readable name shown by the host UI."""
        raise NotImplementedError

    @abc.abstractmethod
    def initialize(self, context: InitializationContextI) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def create_request(self, job: TranslationJob) -> OutboundRequest:
        raise NotImplementedError

    @abc.abstractmethod
    def extract_translation(self, outcome: TransportOutcome) -> ExtractionResult:
        raise NotImplementedError
