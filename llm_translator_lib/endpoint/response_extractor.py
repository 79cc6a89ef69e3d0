"""
Response extractor of the chat‑completion translation endpoint.

The extractor validates a completed HTTP exchange in a fixed order and
returns either :class:`ExtractionSuccess` or :class:`ExtractionFailure`; the
first failing stage short‑circuits the rest:

1. transport error,
2. body is not a JSON object,
3. top‑level ``error`` object,
4. missing or empty ``choices``,
5. first choice without ``message``,
6. empty ``message.content`` *and* empty ``message.reasoning``.

Only the first choice is ever consulted.  :func:`extract_translation` never
raises – any unexpected fault is reported as a parse failure.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from llm_translator_lib.base.constants_base import PROVIDER_NAME
from llm_translator_lib.data_models.constants import (
    ERROR_FIELD,
    ERROR_MESSAGE_FIELD,
    CHOICES_FIELD,
    MESSAGE_FIELD,
    CONTENT_FIELD,
    REASONING_FIELD,
)


@dataclass(frozen=True)
class TransportOutcome:
    """
    Result of one HTTP exchange as reported by the transport.

    Exactly one of ``data`` (response body) and ``error`` (failure message)
    is expected to be set.
    """

    data: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def succeeded(
        cls, data: str, status_code: Optional[int] = None
    ) -> "TransportOutcome":
        return cls(data=data, status_code=status_code)

    @classmethod
    def failed(
        cls, error: str, status_code: Optional[int] = None
    ) -> "TransportOutcome":
        return cls(error=error, status_code=status_code)


@dataclass(frozen=True)
class ExtractionSuccess:
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    reason: str

    @property
    def ok(self) -> bool:
        return False


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]


class ResponseFormatError(ValueError):
    """Raised internally when the body is valid JSON but not a JSON object."""


def _parse_body(data: Optional[str]) -> Dict[str, Any]:
    if data is None:
        raise ResponseFormatError("response body is empty")
    parsed = json.loads(data)
    if not isinstance(parsed, dict):
        raise ResponseFormatError(
            f"expected a JSON object, got {type(parsed).__name__}"
        )
    return parsed


def _api_error_message(payload: Dict[str, Any]) -> Optional[str]:
    """
    Return the provider error message, ``None`` when the body has no error.
    """
    error = payload.get(ERROR_FIELD)
    if error is None:
        return None
    if isinstance(error, dict):
        message = error.get(ERROR_MESSAGE_FIELD)
        return "Unknown error" if message is None else str(message)
    if isinstance(error, str) and error:
        return error
    return "Unknown error"


def _first_choice_message(payload: Dict[str, Any], provider: str):
    """
    Return ``(message, None)`` or ``(None, failure)`` for the first choice.
    """
    choices = payload.get(CHOICES_FIELD)
    if not isinstance(choices, list) or not choices:
        return None, ExtractionFailure(f"{provider} API returned no choices")

    first_choice = choices[0]
    message = (
        first_choice.get(MESSAGE_FIELD) if isinstance(first_choice, dict) else None
    )
    if not isinstance(message, dict):
        return None, ExtractionFailure(f"{provider} API response missing message")
    return message, None


def _text_value(value: Any) -> Optional[str]:
    """
    Normalise a message field to text; blank or non‑text values give ``None``.

    Besides plain strings, a list of ``{"type": "text", "text": ...}`` parts
    is accepted and joined.
    """
    if isinstance(value, list):
        value = "".join(
            part.get("text", "")
            for part in value
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def _extract_from_payload(payload: Dict[str, Any], provider: str) -> ExtractionResult:
    error_message = _api_error_message(payload)
    if error_message is not None:
        return ExtractionFailure(f"{provider} API error: {error_message}")

    message, failure = _first_choice_message(payload, provider)
    if failure is not None:
        return failure

    # reasoning-style models may leave content empty and answer in "reasoning"
    translated = _text_value(message.get(CONTENT_FIELD))
    if translated is None:
        translated = _text_value(message.get(REASONING_FIELD))

    if translated is None:
        return ExtractionFailure(
            f"{provider} API returned empty translation "
            "(both content and reasoning fields are empty)"
        )
    return ExtractionSuccess(translated.strip())


def extract_translation(
    outcome: TransportOutcome,
    provider: str = PROVIDER_NAME,
    logger: Optional[logging.Logger] = None,
) -> ExtractionResult:
    """
    Extract the translated text from a completed HTTP exchange.

    Parameters
    ----------
    outcome : TransportOutcome
        Body or error reported by the transport.
    provider : str
        Provider name used as the prefix of every failure message.
    logger : Optional[logging.Logger]
        Logger receiving the raw response body at ``DEBUG`` level.

    Returns
    -------
    ExtractionResult
        ``ExtractionSuccess`` with the trimmed translation, or
        ``ExtractionFailure`` with a provider‑prefixed reason.
    """
    if outcome.error is not None:
        return ExtractionFailure(f"{provider} API request failed: {outcome.error}")

    try:
        payload = _parse_body(outcome.data)
        if logger is not None:
            logger.debug("[%s] Response: %s", provider, outcome.data)
        return _extract_from_payload(payload, provider)
    except Exception as exc:  # noqa: BLE001
        return ExtractionFailure(f"Failed to parse {provider} response: {exc}")
