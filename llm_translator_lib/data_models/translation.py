"""
Input model of a single translation job.

A job lives for exactly one request/response cycle and is owned by the
caller; the endpoint never stores it.
"""

from pydantic import BaseModel, ConfigDict, Field


class TranslationJob(BaseModel):
    """
    One "translate text from language A to language B" request.

    Attributes
    ----------
    source_language : str
        Short code (``"en"``) or any free‑form language tag of the input text.
    destination_language : str
        Short code or language tag the text should be translated into.
    text : str
        Non‑empty text to translate.
    """

    model_config = ConfigDict(frozen=True)

    source_language: str
    destination_language: str
    text: str = Field(min_length=1)
