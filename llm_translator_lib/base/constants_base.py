import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LLM_TRANSLATOR_"


# Identifier of the endpoint and prefix of every failure/log message
PROVIDER_NAME = "OpenAI"

# Settings section holding all endpoint options
SETTINGS_SECTION = "OpenAI"

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 500

DEFAULT_SYSTEM_PROMPT = (
    "You are a professional translator. Translate the given text accurately "
    "while preserving the original meaning, tone, and style. "
    "Only respond with the translated text, nothing else."
)

# {0} = source language, {1} = destination language, {2} = text to translate
DEFAULT_USER_PROMPT_TEMPLATE = "Translate the following text from {0} to {1}:\n\n{2}"

DEFAULT_DISABLE_SPAM_CHECKS = False
DEFAULT_MIN_DELAY_SECONDS = 1.0
DEFAULT_MAX_DELAY_SECONDS = 2.0

# Fixed delay window forced for local inference servers
LOCAL_MIN_DELAY_SECONDS = 0.1
LOCAL_MAX_DELAY_SECONDS = 0.2

# Browser-like agent, some gateways drop requests from unknown clients
DEFAULT_USER_AGENT = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
).strip()

MAX_TRANSLATIONS_PER_REQUEST = 1
