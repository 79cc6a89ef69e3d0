"""
Request model for the OpenAI‑compatible chat completion endpoint.

Field names and nesting follow the ``/v1/chat/completions`` wire contract
exactly; the declaration order is the serialisation order.
"""

from typing import List, Literal

from pydantic import BaseModel

from llm_translator_lib.data_models.constants import SYSTEM_ROLE, USER_ROLE


class ChatMessageModel(BaseModel):
    """
    Single role‑tagged message of a conversation.

    Attributes
    ----------
    role : Literal["system", "user"]
        Author of the message.
    content : str
        Message text.
    """

    role: Literal["system", "user"]
    content: str


class ChatCompletionRequestModel(BaseModel):
    """
    Payload sent to the chat completion endpoint.

    Attributes
    ----------
    model : str
        Identifier of the model to be used (e.g. ``"gpt-4o-mini"``).
    temperature : float
        Sampling temperature.
    max_tokens : int
        Maximum number of tokens the provider may generate.
    messages : List[ChatMessageModel]
        System message followed by the user message.
    """

    model: str
    temperature: float
    max_tokens: int
    messages: List[ChatMessageModel]

    @classmethod
    def for_translation(
        cls,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> "ChatCompletionRequestModel":
        return cls(
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            messages=[
                ChatMessageModel(role=SYSTEM_ROLE, content=system_prompt),
                ChatMessageModel(role=USER_ROLE, content=user_prompt),
            ],
        )


# Names of required fields for ``ChatCompletionRequestModel``.
CHAT_COMPLETION_REQ_ARGS = ["model", "temperature", "max_tokens", "messages"]
