"""
Transport collaborator built on ``requests``.

The :class:`RequestsTransport` class executes an
:class:`~llm_translator_lib.endpoint.request_builder.OutboundRequest` and
reports the outcome as a
:class:`~llm_translator_lib.endpoint.response_extractor.TransportOutcome`.
It centralises:

* a configurable retry policy via ``urllib3.Retry``,
* per‑host certificate‑validation bypass requested by endpoints,
* conversion of network errors and HTTP error codes into failed outcomes.

The transport never raises for network or HTTP failures; the endpoint's
extractor turns failed outcomes into provider‑prefixed job failures.
"""

import logging
import threading
from typing import Optional, Set
from urllib.parse import urlsplit

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.exceptions import InsecureRequestWarning
from urllib3.util.retry import Retry

from llm_translator_lib.base.constants import EXTERNAL_API_TIMEOUT, HTTP_RETRIES
from llm_translator_lib.endpoint.request_builder import OutboundRequest
from llm_translator_lib.endpoint.response_extractor import TransportOutcome


class RequestsTransport:
    """
    Helper for sending endpoint requests with retries and error translation.

    Parameters
    ----------
    timeout : int, default ``EXTERNAL_API_TIMEOUT``
        Per‑request timeout in seconds.
    retries : int, default ``HTTP_RETRIES``
        Number of retry attempts for transient failures (status codes in
        ``status_forcelist``).  The back‑off factor is ``0.5`` seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    session : Optional[requests.Session]
        Session to use; a new one is created when omitted.
    """

    def __init__(
        self,
        timeout: int = EXTERNAL_API_TIMEOUT,
        retries: int = HTTP_RETRIES,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.session = session or requests.Session()

        self._insecure_hosts: Set[str] = set()
        self._lock = threading.Lock()

        # retry‑policy
        if retries > 0:
            retry_strategy = Retry(
                total=retries,
                backoff_factor=0.5,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET", "POST"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("https://", adapter)
            self.session.mount("http://", adapter)

    def disable_certificate_checks_for(self, host: str) -> None:
        """
        Skip TLS certificate validation for every request sent to ``host``.
        """
        with self._lock:
            if not self._insecure_hosts:
                urllib3.disable_warnings(InsecureRequestWarning)
            self._insecure_hosts.add(host.lower())

    def verifies_certificate_for(self, url: str) -> bool:
        host = (urlsplit(url).hostname or "").lower()
        with self._lock:
            return host not in self._insecure_hosts

    @staticmethod
    def _handle_response(resp: requests.Response) -> TransportOutcome:
        """
        Translate HTTP error codes into failed outcomes.

        A 2xx response yields a successful outcome with the decoded body;
        any 4xx/5xx status yields ``"HTTP <status>: <body>"``.
        """
        resp.encoding = resp.encoding or "utf-8"
        if 400 <= resp.status_code < 600:
            return TransportOutcome.failed(
                f"HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )
        return TransportOutcome.succeeded(resp.text, status_code=resp.status_code)

    def send(self, request: OutboundRequest) -> TransportOutcome:
        """
        Perform the request and return its outcome.

        Parameters
        ----------
        request : OutboundRequest
            Request produced by an endpoint's ``create_request``.

        Returns
        -------
        TransportOutcome
            Response body on success, error message otherwise.
        """
        self.logger.debug("%s %s", request.method, request.url)
        try:
            resp = self.session.request(
                request.method,
                request.url,
                data=request.body.encode("utf-8"),
                headers=request.headers,
                timeout=self.timeout,
                verify=self.verifies_certificate_for(request.url),
            )
        except requests.RequestException as exc:
            self.logger.debug("Request to %s failed: %s", request.url, exc)
            return TransportOutcome.failed(str(exc))
        return self._handle_response(resp)
