"""
Runtime options for the llm‑translator library.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  Endpoint options
(URL, model, prompts, delays) are *not* defined here – they are resolved from
the settings store through
:func:`~llm_translator_lib.endpoint.endpoint_config.resolve_endpoint_config`.
"""

import os

from llm_translator_lib.base.constants_base import _DontChangeMe


def _bool_env(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Default name of a logging file (empty - log to the console only)
LOG_FILE_NAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_FILENAME", ""
).strip()

# Default logging level
LOG_LEVEL = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip()

# Run in debug mode
RUN_IN_DEBUG_MODE = _bool_env(f"{_DontChangeMe.MAIN_ENV_PREFIX}IN_DEBUG")
if RUN_IN_DEBUG_MODE:
    LOG_LEVEL = "DEBUG"

# Timeout to the external chat-completion api
EXTERNAL_API_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}EXTERNAL_TIMEOUT", 60)
)

# Number of transport-level retries for transient HTTP statuses
HTTP_RETRIES = int(os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}HTTP_RETRIES", 0))

# JSON file with endpoint settings ({section: {key: value}})
SETTINGS_FILE = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SETTINGS_FILE", ""
).strip()
