"""
Request builder of the chat‑completion translation endpoint.

Turns a :class:`~llm_translator_lib.data_models.translation.TranslationJob`
and the resolved :class:`EndpointConfig` into an :class:`OutboundRequest` –
method, URL, headers and serialised JSON body – ready for the transport.
Building never fails: unknown language codes are used verbatim.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from llm_translator_lib.languages import fix_language
from llm_translator_lib.base.constants_base import DEFAULT_USER_AGENT
from llm_translator_lib.endpoint.endpoint_config import EndpointConfig
from llm_translator_lib.data_models.translation import TranslationJob
from llm_translator_lib.data_models.openai import ChatCompletionRequestModel


@dataclass(frozen=True)
class OutboundRequest:
    """
    Fully formed HTTP request, consumed once by the transport.

    Attributes
    ----------
    method : str
        HTTP verb, always ``"POST"``.
    url : str
        Absolute chat‑completion URL.
    headers : Dict[str, str]
        Request headers.
    body : str
        Serialised JSON payload.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def payload(self) -> Dict[str, Any]:
        return json.loads(self.body)


def format_user_prompt(job: TranslationJob, cfg: EndpointConfig) -> str:
    return cfg.user_prompt_template.format(
        fix_language(job.source_language),
        fix_language(job.destination_language),
        job.text,
    )


def build_headers(cfg: EndpointConfig) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if cfg.api_key:
        headers["Authorization"] = f"Bearer {cfg.api_key}"
    headers["User-Agent"] = DEFAULT_USER_AGENT
    return headers


def build_request(job: TranslationJob, cfg: EndpointConfig) -> OutboundRequest:
    """
    Build the outbound chat‑completion request for one translation job.

    Parameters
    ----------
    job : TranslationJob
        Languages and text of the translation.
    cfg : EndpointConfig
        Resolved endpoint configuration.

    Returns
    -------
    OutboundRequest
        ``POST`` request whose body contains the model options and two
        messages: the system prompt and the formatted user prompt.
    """
    body = ChatCompletionRequestModel.for_translation(
        model=cfg.model,
        temperature=cfg.temperature,
        max_tokens=cfg.max_tokens,
        system_prompt=cfg.system_prompt,
        user_prompt=format_user_prompt(job, cfg),
    )
    return OutboundRequest(
        method="POST",
        url=cfg.url,
        headers=build_headers(cfg),
        body=body.model_dump_json(),
    )
