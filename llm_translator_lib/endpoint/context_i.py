"""
Contract of the host framework consumed by an endpoint at start‑up.

The endpoint reads its settings and announces its operational requirements
(certificate bypass, spam‑check suppression, translation delay) through this
interface exactly once, inside ``initialize``.  Implementations own the
actual settings store, TLS plumbing and request scheduler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class InitializationContextI(ABC):
    """
    Abstract host context handed to :meth:`TranslateEndpointI.initialize`.

    Subclasses must implement:
    - get_or_create_setting()
    - disable_certificate_checks_for()
    - disable_spam_checks()
    - set_translation_delay()
    """

    @abstractmethod
    def get_or_create_setting(self, section: str, key: str, default: Any) -> Any:
        """
        Return the value stored under ``section``/``key``.

        When the key is missing it is created with ``default``.  The returned
        value has the same type as ``default``.
        """
        raise NotImplementedError

    @abstractmethod
    def disable_certificate_checks_for(self, host: str) -> None:
        """Skip TLS certificate validation for requests sent to ``host``."""
        raise NotImplementedError

    @abstractmethod
    def disable_spam_checks(self) -> None:
        """Turn off the host's anti‑automation checks for this endpoint."""
        raise NotImplementedError

    @abstractmethod
    def set_translation_delay(self, max_seconds: float) -> None:
        """Set the delay the host scheduler keeps between translations."""
        raise NotImplementedError
